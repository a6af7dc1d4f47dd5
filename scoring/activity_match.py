"""Activity matching: ranks the activity matrix against the 12-question wizard.

Base score is the sum of each question's option-indexed score (h1-h6 for the
honoree, g1-g5 for the group) plus the best of the group's selected vibes
(g6). Adjustments then apply an ice-breaker bonus for mixed/stranger groups,
a competition-style vs group-dynamic correction, and a winter penalty for
seasonal activities. Activities scoring -1 on a dealbreaker answer are
dropped before scoring.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from config import (
    ACTIVITY_OPTIONS,
    ACTIVITY_VIBES,
    ICE_BREAKER_BONUS,
    SCORE_THRESHOLDS,
    SEASONAL_PENALTY,
    WINTER_MONTHS,
)
from data.activities import ACTIVITIES

_BASE_QUESTIONS = ("h1", "h2", "h3", "h4", "h5", "h6", "g1", "g2", "g3", "g4", "g5")

# (question, answer that triggers the filter)
_HARD_FILTERS = (
    ("g2", "strangers"),
    ("g3", "low"),
    ("g4", "low"),
    ("g5", "relaxed"),
)


@dataclass(frozen=True)
class ScoredActivity:
    name: str
    category: str
    total_score: int
    seasonal: bool
    ice_breaker: bool


def _lookup_score(scores: Sequence[int], options: Sequence[str], answer: Optional[str]) -> int:
    if answer not in options:
        return 0
    idx = options.index(answer)
    return scores[idx] if idx < len(scores) else 0


def _vibe_score(vibe_scores: Sequence[int], selected: Iterable[str]) -> int:
    """Multi-select: the best-scoring selected vibe counts, unknown vibes are ignored."""
    known = [
        vibe_scores[ACTIVITY_VIBES.index(v)]
        for v in selected or []
        if v in ACTIVITY_VIBES and ACTIVITY_VIBES.index(v) < len(vibe_scores)
    ]
    return max(known) if known else 0


def _is_hard_filtered(activity: Mapping, answers: Mapping) -> bool:
    for question, trigger in _HARD_FILTERS:
        if answers.get(question) != trigger:
            continue
        idx = ACTIVITY_OPTIONS[question].index(trigger)
        if activity[question][idx] == -1:
            return True
    return False


def _ice_breaker_bonus(activity: Mapping, cohesion: Optional[str]) -> int:
    if activity["ice_breaker"] and cohesion in ("mixed", "strangers"):
        return ICE_BREAKER_BONUS
    return 0


def _competition_adjustment(
    activity: Mapping, competition: Optional[str], dynamic: Optional[str]
) -> int:
    cooperative, competitive, spectator = activity["h3"]

    # Competitive honoree, relaxed group: tone down head-to-head activities.
    if competition == "competitive" and dynamic == "relaxed":
        return -2 if competitive >= 2 else 0
    # Cooperative honoree, competitive group: team-vs-team formats suit both.
    if competition == "cooperative" and dynamic == "competitive":
        return 2 if cooperative >= 1 and activity["g5"][1] >= 1 else 0
    if competition == "spectator" and dynamic == "team_players":
        return 1 if spectator >= 2 else 0
    return 0


def _seasonal_penalty(activity: Mapping, today: date) -> int:
    if activity["seasonal"] and today.month in WINTER_MONTHS:
        return SEASONAL_PENALTY
    return 0


def score_activity(activity: Mapping, answers: Mapping, today: Optional[date] = None) -> int:
    today = today or date.today()
    score = sum(
        _lookup_score(activity[q], ACTIVITY_OPTIONS[q], answers.get(q)) for q in _BASE_QUESTIONS
    )
    score += _vibe_score(activity["g6"], answers.get("g6") or [])
    score += _ice_breaker_bonus(activity, answers.get("g2"))
    score += _competition_adjustment(activity, answers.get("h3"), answers.get("g5"))
    score += _seasonal_penalty(activity, today)
    return score


def score_activities(
    answers: Mapping,
    today: Optional[date] = None,
    activities: Optional[List[Dict]] = None,
) -> List[ScoredActivity]:
    """Score every activity that survives the hard filters, best first."""
    today = today or date.today()
    results: List[ScoredActivity] = []
    for activity in activities if activities is not None else ACTIVITIES:
        if _is_hard_filtered(activity, answers):
            continue
        results.append(
            ScoredActivity(
                name=activity["name"],
                category=activity["category"],
                total_score=score_activity(activity, answers, today),
                seasonal=activity["seasonal"],
                ice_breaker=activity["ice_breaker"],
            )
        )
    results.sort(key=lambda a: a.total_score, reverse=True)
    return results


def match_activities(answers: Optional[Mapping], today: Optional[date] = None) -> Dict:
    if not answers:
        return {"activities": [], "top_activities": [], "has_strong_matches": False}

    scored = score_activities(answers, today=today)
    top = [a for a in scored if a.total_score >= SCORE_THRESHOLDS["STRONG"]]
    return {
        "activities": scored,
        "top_activities": top,
        "has_strong_matches": bool(top),
    }


def match_strength(score: int) -> str:
    if score >= SCORE_THRESHOLDS["STRONG"]:
        return "strong"
    if score >= SCORE_THRESHOLDS["GOOD"]:
        return "good"
    if score >= SCORE_THRESHOLDS["WEAK"]:
        return "weak"
    return "poor"
