"""Package matching: scores how well a package's ideal attributes fit a group's preferences.

Three dimensions, weighted 40 / 30 / 30 (config.WEIGHTS):

- gathering size and energy level are ordinal: an exact match earns the full
  weight, a one-step miss in the adjacency order earns ADJACENT_CREDIT of it;
- vibe is a tag overlap measured against the *user's* tags, so a group that
  states fewer, more specific vibes is easier to satisfy fully.

Every function here is total: missing or None inputs score 0, never raise.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from config import ADJACENCY_ORDERS, ADJACENT_CREDIT, MAX_SCORE, WEIGHTS
from scoring.normalize import normalize_token, normalize_tokens
from scoring.presentation import format_match_percentage, is_best_match_score

# Accepted keys per field; first present non-None value wins.
_PACKAGE_KEYS = {
    "gathering": ("ideal_gathering_size", "idealGatheringSizes"),
    "energy": ("ideal_energy_level", "idealEnergyLevels"),
    "vibe": ("ideal_vibe", "idealVibeTags"),
}
_PREFERENCE_KEYS = {
    "gathering": ("gathering_size", "gatheringSize"),
    "energy": ("energy_level", "energyLevel"),
    "vibe": ("vibe_preferences", "vibeTags"),
}


@dataclass(frozen=True)
class ScoreBreakdown:
    gathering_score: float
    energy_score: float
    vibe_score: float
    total_score: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _pick(record: Optional[Mapping[str, Any]], keys: Sequence[str]) -> Any:
    if not record:
        return None
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def score_ordinal(
    ideal_set: Optional[Iterable[str]],
    actual_value: Optional[str],
    weight: float,
    order: Sequence[str],
) -> float:
    """Exact match → weight, adjacent → ADJACENT_CREDIT * weight, else 0.

    The best qualifying ideal member wins, so set order never changes the result.
    Tokens outside `order` can still match exactly but are never adjacent.
    """
    actual = normalize_token(actual_value)
    ideals = normalize_tokens(ideal_set)
    if not actual or not ideals:
        return 0.0

    if actual in ideals:
        return float(weight)

    positions = {token: idx for idx, token in enumerate(order)}
    actual_idx = positions.get(actual)
    if actual_idx is None:
        return 0.0

    for ideal in ideals:
        ideal_idx = positions.get(ideal)
        if ideal_idx is not None and abs(ideal_idx - actual_idx) == 1:
            return ADJACENT_CREDIT * weight
    return 0.0


def score_vibe_overlap(
    ideal_tags: Optional[Iterable[str]],
    actual_tags: Optional[Iterable[str]],
    weight: float,
) -> float:
    """Fraction of the user's distinct tags the package satisfies, times weight.

    Denominator is the user's tag count, not the package's: a package with
    extra vibes is not penalized, and a group naming one vibe can score full.
    """
    ideals = set(normalize_tokens(ideal_tags))
    actuals = normalize_tokens(actual_tags)
    if not ideals or not actuals:
        return 0.0
    overlap = sum(1 for tag in actuals if tag in ideals)
    return weight * (overlap / len(actuals))


def calculate_package_score_breakdown(
    package: Optional[Mapping[str, Any]],
    preferences: Optional[Mapping[str, Any]],
) -> ScoreBreakdown:
    gathering = score_ordinal(
        _pick(package, _PACKAGE_KEYS["gathering"]),
        _pick(preferences, _PREFERENCE_KEYS["gathering"]),
        WEIGHTS["GATHERING_SIZE"],
        ADJACENCY_ORDERS["gathering_size"],
    )
    energy = score_ordinal(
        _pick(package, _PACKAGE_KEYS["energy"]),
        _pick(preferences, _PREFERENCE_KEYS["energy"]),
        WEIGHTS["ENERGY_LEVEL"],
        ADJACENCY_ORDERS["energy_level"],
    )
    vibe = score_vibe_overlap(
        _pick(package, _PACKAGE_KEYS["vibe"]),
        _pick(preferences, _PREFERENCE_KEYS["vibe"]),
        WEIGHTS["VIBE"],
    )
    total = min(float(MAX_SCORE), max(0.0, gathering + energy + vibe))
    return ScoreBreakdown(
        gathering_score=gathering,
        energy_score=energy,
        vibe_score=vibe,
        total_score=total,
    )


def calculate_package_score(
    package: Optional[Mapping[str, Any]],
    preferences: Optional[Mapping[str, Any]],
) -> float:
    return calculate_package_score_breakdown(package, preferences).total_score


def rank_packages(
    packages: List[Dict],
    preferences: Optional[Mapping[str, Any]],
    top_k: Optional[int] = None,
) -> List[Dict]:
    scored = []
    for package in packages:
        breakdown = calculate_package_score_breakdown(package, preferences)
        scored.append(
            {
                "package": package,
                "match_score": breakdown.total_score,
                "breakdown": breakdown,
                "is_best_match": is_best_match_score(breakdown.total_score),
                "label": format_match_percentage(breakdown.total_score),
                "explanation": build_explanation(package, preferences, breakdown),
            }
        )
    # sort() is stable, so ties keep catalog order
    scored.sort(key=lambda x: x["match_score"], reverse=True)
    if top_k is not None:
        return scored[: max(top_k, 0)]
    return scored


def build_explanation(
    package: Mapping[str, Any],
    preferences: Optional[Mapping[str, Any]],
    breakdown: ScoreBreakdown,
) -> str:
    size = normalize_token(_pick(preferences, _PREFERENCE_KEYS["gathering"])).replace("_", " ")
    energy = normalize_token(_pick(preferences, _PREFERENCE_KEYS["energy"])).replace("_", " ")

    if breakdown.gathering_score >= WEIGHTS["GATHERING_SIZE"]:
        size_phrase = "is built for"
    elif breakdown.gathering_score > 0:
        size_phrase = "can stretch to"
    else:
        size_phrase = "is not designed for"

    if breakdown.energy_score >= WEIGHTS["ENERGY_LEVEL"]:
        energy_phrase = "matches"
    elif breakdown.energy_score > 0:
        energy_phrase = "roughly suits"
    else:
        energy_phrase = "runs at a different pace than"

    if breakdown.vibe_score >= WEIGHTS["VIBE"]:
        vibe_phrase = "hits every vibe you picked"
    elif breakdown.vibe_score > 0:
        vibe_phrase = "covers some of your vibes"
    else:
        vibe_phrase = "brings a different vibe"

    return (
        f"{package.get('name', 'This package')} {size_phrase} "
        f"{f'your {size} gathering' if size else 'any group size'}, "
        f"{energy_phrase} your {energy or 'chosen'} mood, and {vibe_phrase}."
    )
