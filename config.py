"""Centralized configuration for Game Over Match.

Single source of truth for preference enums, adjacency orders, scoring weights,
thresholds, and the questionnaire option orders. Every module that needs a
gathering size / energy level / vibe list should import from here.
"""
from __future__ import annotations

import logging
import os

# ── Preference enums (canonical set) ───────────────────────────────────
# Used by: package catalog validation, preferences builder, Streamlit UI,
# scoring engine.

GATHERING_SIZES = ["intimate", "small_group", "party"]

ENERGY_LEVELS = ["low_key", "moderate", "high_energy"]

VIBES = [
    "action", "culture", "nightlife", "food", "wellness",
    "adventure", "relaxed", "luxury", "outdoor", "party",
]

PACKAGE_TIERS = ["essential", "classic", "grand"]

GATHERING_SIZES_SET = set(GATHERING_SIZES)
ENERGY_LEVELS_SET = set(ENERGY_LEVELS)
VIBES_SET = set(VIBES)
PACKAGE_TIERS_SET = set(PACKAGE_TIERS)

# ── Adjacency orders (for ordinal partial credit) ──────────────────────
# Two tokens are adjacent when their index distance in the list is exactly 1.

ADJACENCY_ORDERS = {
    "gathering_size": GATHERING_SIZES,
    "energy_level": ENERGY_LEVELS,
}

# ── Package scoring ────────────────────────────────────────────────────

WEIGHTS = {"GATHERING_SIZE": 40, "ENERGY_LEVEL": 30, "VIBE": 30}

# Fraction of a dimension's weight granted for a one-step (adjacent) miss.
ADJACENT_CREDIT = 0.5

MAX_SCORE = 100

BEST_MATCH_THRESHOLD = 85

# ── Activity questionnaire (option order = score tuple index) ──────────
# h* questions describe the honoree, g* questions describe the group.

ACTIVITY_OPTIONS = {
    "h1": ["relaxed", "active", "action", "party"],
    "h2": ["background", "group", "center_stage"],
    "h3": ["cooperative", "competitive", "spectator"],
    "h4": ["food", "drinks", "experience"],
    "h5": ["indoor", "outdoor", "mix"],
    "h6": ["dinner_only", "dinner_bar", "full_night"],
    "g1": ["21-25", "26-30", "31-35", "35+"],
    "g2": ["close_friends", "mixed", "strangers"],
    "g3": ["low", "medium", "high"],
    "g4": ["low", "social", "central"],
    "g5": ["team_players", "competitive", "relaxed"],
}

ACTIVITY_VIBES = ["action", "culture", "nightlife", "food", "wellness"]
MAX_ACTIVITY_VIBES = 2

ACTIVITY_CATEGORIES = [
    "team", "nightlife", "tasting", "outdoor", "entertainment", "wellness", "dining",
]

# Max possible is ~29: 12 questions at 2 points, +3 ice-breaker, +2 conflict boost.
SCORE_THRESHOLDS = {"STRONG": 15, "GOOD": 10, "WEAK": 5}

ICE_BREAKER_BONUS = 3

# Nov-Mar (1-indexed months) get the seasonal penalty.
WINTER_MONTHS = {11, 12, 1, 2, 3}
SEASONAL_PENALTY = -2

# ── Pricing ────────────────────────────────────────────────────────────

CURRENCY_SYMBOLS = {"EUR": "€", "USD": "$", "GBP": "£"}

# ── UI defaults ────────────────────────────────────────────────────────

DEFAULT_GATHERING_SIZE = "small_group"
DEFAULT_ENERGY_LEVEL = "moderate"
DEFAULT_VIBES = ["nightlife", "food"]
MAX_PREFERENCE_VIBES = 5

# ── Environment ────────────────────────────────────────────────────────
# Entry points call load_dotenv() before reading these.


def catalog_path_override() -> str | None:
    return os.getenv("GAMEOVER_CATALOG_PATH") or None


def default_currency() -> str:
    return (os.getenv("GAMEOVER_CURRENCY") or "EUR").upper()


def log_level() -> str:
    """Configured level name; unknown names fall back to INFO."""
    name = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return "INFO"
    return name
