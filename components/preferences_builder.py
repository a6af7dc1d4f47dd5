from __future__ import annotations

from typing import Dict, List

from config import MAX_PREFERENCE_VIBES
from scoring.normalize import normalize_token, normalize_tokens


# ── Questionnaire → package preference inference ──────────────────────
# When the group hasn't explicitly picked an energy level, infer it from
# the honoree's energy answer (wizard question h1).
HONOREE_ENERGY_MAP: Dict[str, str] = {
    "relaxed": "low_key",
    "active": "moderate",
    "action": "high_energy",
    "party": "high_energy",
}


def _infer_energy_level(questionnaire: Dict) -> str | None:
    return HONOREE_ENERGY_MAP.get(questionnaire.get("h1", ""))


def build_user_preferences(manual: Dict, questionnaire: Dict | None = None) -> Dict:
    questionnaire = questionnaire or {}

    energy = normalize_token(manual.get("energy_level")) or _infer_energy_level(questionnaire)

    # Merge explicit vibes with the questionnaire's group vibes (g6)
    vibes: List[str] = normalize_tokens(
        list(manual.get("vibe_preferences") or []) + list(questionnaire.get("g6") or [])
    )[:MAX_PREFERENCE_VIBES]

    return {
        "gathering_size": normalize_token(manual.get("gathering_size")) or None,
        "energy_level": energy or None,
        "vibe_preferences": vibes,
    }
