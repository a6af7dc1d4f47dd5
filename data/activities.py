"""Activity scoring matrix for the questionnaire matcher.

Each score tuple is indexed by the option order in config.ACTIVITY_OPTIONS
(g6 by config.ACTIVITY_VIBES). Scores run from -1 (poor fit, and a hard
filter for g2/g3/g4/g5) to 2 (great fit).
"""
from __future__ import annotations

from typing import Dict, List

ACTIVITIES: List[Dict] = [
    # ── Team & competitive ──
    {"name": "Escape Room", "category": "team", "seasonal": False, "ice_breaker": True,
        "h1": (0, 2, 1, 0), "h2": (2, 2, 0), "h3": (2, 0, -1), "h4": (0, 0, 2), "h5": (2, -1, 1), "h6": (1, 1, 0),
        "g1": (1, 2, 2, 1), "g2": (1, 2, 2), "g3": (1, 2, 1), "g4": (2, 1, 0), "g5": (2, 0, 0),
        "g6": (2, 1, 0, 0, 0)},
    {"name": "Laser Tag Session", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 1, 2, 1), "h2": (1, 2, 1), "h3": (1, 2, -1), "h4": (0, 0, 2), "h5": (2, 0, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (2, 1, 0), "g3": (-1, 1, 2), "g4": (2, 1, -1), "g5": (1, 2, -1),
        "g6": (2, 0, 0, 0, 0)},
    {"name": "Bowling + Drinks", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (1, 2, 0, 1), "h2": (1, 2, 1), "h3": (1, 2, 0), "h4": (0, 1, 1), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (2, 2, 1, 1), "g2": (2, 2, 1), "g3": (1, 2, 1), "g4": (1, 2, 1), "g5": (1, 2, 1),
        "g6": (1, 0, 1, 0, 0)},
    {"name": "VR Arcade", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (0, 2, 2, 0), "h2": (1, 2, 0), "h3": (2, 1, 0), "h4": (0, 0, 2), "h5": (2, -1, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (1, 2, 1), "g3": (1, 2, 1), "g4": (2, 1, -1), "g5": (2, 1, 0),
        "g6": (2, 1, 0, 0, 0)},
    {"name": "Go-Karting", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 1, 2, 1), "h2": (1, 2, 1), "h3": (0, 2, 0), "h4": (0, 0, 2), "h5": (1, 1, 2), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (2, 1, 0), "g3": (0, 1, 2), "g4": (2, 1, -1), "g5": (0, 2, -1),
        "g6": (2, 0, 0, 0, 0)},
    {"name": "Axe Throwing", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (0, 2, 2, 1), "h2": (1, 2, 1), "h3": (0, 2, 0), "h4": (0, 1, 2), "h5": (2, 0, 1), "h6": (1, 2, 0),
        "g1": (2, 2, 1, 0), "g2": (2, 1, 1), "g3": (0, 2, 2), "g4": (1, 2, 1), "g5": (0, 2, 0),
        "g6": (2, 0, 0, 0, 0)},
    {"name": "Darts Tournament", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (1, 2, 0, 1), "h2": (1, 2, 1), "h3": (0, 2, 0), "h4": (0, 1, 1), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 1), "g2": (2, 1, 1), "g3": (2, 2, 1), "g4": (1, 2, 2), "g5": (0, 2, 1),
        "g6": (1, 0, 1, 0, 0)},
    {"name": "Billiards + Table Service", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 0), "h2": (2, 1, 0), "h3": (0, 2, 0), "h4": (0, 1, 1), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 2), "g2": (2, 1, 0), "g3": (2, 2, 0), "g4": (1, 2, 1), "g5": (0, 2, 1),
        "g6": (0, 0, 1, 0, 0)},
    {"name": "Table Football Tournament", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (1, 2, 0, 1), "h2": (1, 2, 1), "h3": (1, 2, 0), "h4": (0, 1, 1), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (2, 2, 1, 1), "g2": (2, 1, 1), "g3": (1, 2, 1), "g4": (1, 2, 2), "g5": (1, 2, 0),
        "g6": (1, 0, 1, 0, 0)},
    {"name": "Paintball / Airsoft", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 0, 2, 1), "h2": (1, 2, 1), "h3": (1, 2, -1), "h4": (0, 0, 2), "h5": (0, 2, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, -1), "g2": (2, 1, -1), "g3": (-1, 1, 2), "g4": (2, 1, -1), "g5": (1, 2, -1),
        "g6": (2, 0, 0, 0, 0)},
    {"name": "Trampoline Park", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 1, 2, 1), "h2": (1, 2, 1), "h3": (1, 1, 0), "h4": (0, 0, 2), "h5": (2, -1, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 0, -1), "g2": (2, 1, 1), "g3": (-1, 1, 2), "g4": (2, 0, -1), "g5": (1, 1, 1),
        "g6": (2, 0, 0, 0, 0)},
    {"name": "Bouldering / Indoor Climbing", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 1, 2, 0), "h2": (1, 2, 0), "h3": (1, 1, 0), "h4": (0, 0, 2), "h5": (2, 0, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (1, 2, 1), "g3": (-1, 1, 2), "g4": (2, 1, -1), "g5": (1, 1, 0),
        "g6": (2, 0, 0, 0, 0)},
    {"name": "Blacklight Mini Golf", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (1, 2, 0, 1), "h2": (1, 2, 1), "h3": (1, 2, 0), "h4": (0, 0, 2), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (2, 2, 1, 1), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (1, 2, 0), "g5": (1, 2, 1),
        "g6": (1, 0, 1, 0, 0)},
    {"name": "Bubble Football", "category": "team", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 1, 2, 2), "h2": (1, 2, 1), "h3": (1, 2, 0), "h4": (0, 0, 2), "h5": (1, 2, 2), "h6": (1, 1, 0),
        "g1": (2, 2, 1, -1), "g2": (2, 2, 1), "g3": (-1, 1, 2), "g4": (2, 1, -1), "g5": (2, 2, -1),
        "g6": (2, 0, 0, 0, 0)},

    # ── Nightlife & bar ──
    {"name": "Pub Quiz Night", "category": "nightlife", "seasonal": False, "ice_breaker": True,
        "h1": (1, 2, 0, 1), "h2": (1, 2, 1), "h3": (2, 1, 0), "h4": (0, 2, 1), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 2), "g3": (2, 2, 0), "g4": (0, 2, 2), "g5": (2, 1, 1),
        "g6": (0, 2, 1, 0, 0)},
    {"name": "Bar Crawl", "category": "nightlife", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 1, 1, 2), "h2": (-1, 1, 2), "h3": (1, 0, 0), "h4": (0, 2, 1), "h5": (1, 1, 2), "h6": (-1, 1, 2),
        "g1": (2, 2, 1, -1), "g2": (2, 1, 1), "g3": (0, 2, 1), "g4": (-1, 1, 2), "g5": (1, 0, 2),
        "g6": (0, 1, 2, 0, 0)},
    {"name": "Club Entry + Reserved Area", "category": "nightlife", "seasonal": False, "ice_breaker": False,
        "h1": (-1, 0, 1, 2), "h2": (-1, 1, 2), "h3": (0, 0, 1), "h4": (0, 2, 1), "h5": (2, -1, 0), "h6": (-1, 0, 2),
        "g1": (2, 2, 0, -1), "g2": (2, 1, 0), "g3": (1, 1, 1), "g4": (-1, 1, 2), "g5": (0, 0, 2),
        "g6": (0, 0, 2, 0, 0)},
    {"name": "Live Music Bar + Reserved Table", "category": "nightlife", "seasonal": False, "ice_breaker": False,
        "h1": (1, 1, 0, 2), "h2": (2, 1, 0), "h3": (0, 0, 2), "h4": (0, 2, 1), "h5": (2, 0, 1), "h6": (0, 2, 2),
        "g1": (1, 2, 2, 1), "g2": (2, 1, 1), "g3": (2, 2, 0), "g4": (0, 2, 2), "g5": (0, 0, 2),
        "g6": (0, 1, 2, 0, 0)},
    {"name": "Karaoke Night", "category": "nightlife", "seasonal": False, "ice_breaker": False,
        "h1": (0, 1, 0, 2), "h2": (-1, 1, 2), "h3": (1, 1, 1), "h4": (0, 2, 1), "h5": (2, -1, 0), "h6": (-1, 2, 2),
        "g1": (2, 2, 1, 0), "g2": (2, 1, 0), "g3": (2, 2, 0), "g4": (0, 2, 2), "g5": (1, 1, 1),
        "g6": (0, 0, 2, 0, 0)},

    # ── Tasting & culinary ──
    {"name": "Beer Tasting Flight", "category": "tasting", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 1), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (1, 2, 0), "h5": (2, 0, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (-1, 2, 2), "g5": (0, 0, 2),
        "g6": (0, 1, 0, 2, 0)},
    {"name": "Whisky / Rum Tasting", "category": "tasting", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 0), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (1, 2, 0), "h5": (2, -1, 1), "h6": (1, 2, 0),
        "g1": (0, 1, 2, 2), "g2": (2, 1, 1), "g3": (2, 2, 0), "g4": (-1, 1, 2), "g5": (0, 0, 2),
        "g6": (0, 2, 0, 2, 0)},
    {"name": "Gin Tasting + Botanicals", "category": "tasting", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 0), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (1, 2, 0), "h5": (2, 0, 1), "h6": (1, 2, 0),
        "g1": (0, 1, 2, 2), "g2": (2, 1, 1), "g3": (2, 2, 0), "g4": (-1, 2, 2), "g5": (0, 0, 2),
        "g6": (0, 2, 0, 2, 0)},
    {"name": "Wine Tasting", "category": "tasting", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, -1, 0), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (2, 2, 0), "h5": (2, 0, 1), "h6": (2, 1, 0),
        "g1": (-1, 1, 2, 2), "g2": (2, 1, 1), "g3": (2, 2, -1), "g4": (-1, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 2, 0, 2, 1)},
    {"name": "Cooking Class", "category": "tasting", "seasonal": False, "ice_breaker": True,
        "h1": (2, 1, 0, 0), "h2": (2, 1, 0), "h3": (2, 0, 0), "h4": (2, 1, 1), "h5": (2, -1, 1), "h6": (2, 1, 0),
        "g1": (0, 1, 2, 2), "g2": (1, 2, 2), "g3": (2, 2, 0), "g4": (2, 1, 0), "g5": (2, 0, 1),
        "g6": (0, 1, 0, 2, 0)},
    {"name": "Cocktail Making Course", "category": "tasting", "seasonal": False, "ice_breaker": True,
        "h1": (1, 2, 0, 1), "h2": (2, 2, 0), "h3": (2, 0, 0), "h4": (0, 2, 1), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 1), "g2": (1, 2, 2), "g3": (2, 2, 0), "g4": (-1, 2, 2), "g5": (2, 0, 1),
        "g6": (0, 1, 1, 0, 0)},
    {"name": "Food Tour", "category": "tasting", "seasonal": False, "ice_breaker": True,
        "h1": (1, 2, 0, 0), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (2, 1, 1), "h5": (0, 1, 2), "h6": (2, 1, 0),
        "g1": (0, 1, 2, 2), "g2": (1, 2, 2), "g3": (1, 2, 0), "g4": (1, 2, 0), "g5": (1, 0, 2),
        "g6": (0, 2, 0, 2, 0)},
    {"name": "BBQ Grill & Chill", "category": "tasting", "seasonal": True, "ice_breaker": False,
        "h1": (2, 1, 0, 1), "h2": (1, 2, 1), "h3": (1, 0, 1), "h4": (2, 1, 0), "h5": (0, 2, 1), "h6": (2, 1, 0),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (1, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 0, 0, 2, 1)},

    # ── Outdoor & adventure ──
    {"name": "Harbor / River Cruise", "category": "outdoor", "seasonal": True, "ice_breaker": False,
        "h1": (2, 1, -1, 1), "h2": (2, 1, 0), "h3": (0, 0, 2), "h4": (1, 1, 2), "h5": (0, 2, 1), "h6": (1, 2, 0),
        "g1": (0, 1, 2, 2), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (1, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 2, 0, 0, 1)},
    {"name": "Guided Bike Tour", "category": "outdoor", "seasonal": True, "ice_breaker": True,
        "h1": (0, 2, 1, 0), "h2": (2, 2, 0), "h3": (1, 0, 2), "h4": (0, 0, 2), "h5": (-1, 2, 1), "h6": (1, 1, 0),
        "g1": (1, 2, 2, 1), "g2": (1, 2, 2), "g3": (0, 2, 2), "g4": (2, 1, -1), "g5": (1, 0, 1),
        "g6": (1, 2, 0, 0, 0)},
    {"name": "Boat Rental / Pedal Boat", "category": "outdoor", "seasonal": True, "ice_breaker": False,
        "h1": (2, 1, 0, 1), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (0, 1, 2), "h5": (-1, 2, 1), "h6": (1, 1, 0),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (1, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 1, 0, 0, 2)},
    {"name": "Kayak / SUP", "category": "outdoor", "seasonal": True, "ice_breaker": False,
        "h1": (0, 2, 1, 0), "h2": (2, 1, 0), "h3": (2, 1, -1), "h4": (0, 0, 2), "h5": (-1, 2, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (1, 2, 1), "g3": (-1, 2, 2), "g4": (2, 0, -1), "g5": (2, 1, 0),
        "g6": (2, 0, 0, 0, 1)},
    {"name": "Outdoor Scavenger Hunt", "category": "outdoor", "seasonal": False, "ice_breaker": True,
        "h1": (0, 2, 1, 1), "h2": (0, 2, 2), "h3": (2, 1, -1), "h4": (0, 0, 2), "h5": (-1, 2, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (1, 2, 2), "g3": (0, 2, 1), "g4": (2, 1, 0), "g5": (2, 1, 0),
        "g6": (1, 2, 0, 0, 0)},
    {"name": "Photo Challenge Walk + Print", "category": "outdoor", "seasonal": False, "ice_breaker": True,
        "h1": (1, 2, 0, 1), "h2": (0, 2, 2), "h3": (2, 1, 0), "h4": (0, 0, 2), "h5": (0, 2, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (1, 2, 2), "g3": (1, 2, 0), "g4": (2, 1, 0), "g5": (2, 1, 0),
        "g6": (0, 2, 0, 0, 0)},
    {"name": "Walking Tour", "category": "outdoor", "seasonal": False, "ice_breaker": True,
        "h1": (1, 2, 0, 0), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (0, 1, 2), "h5": (-1, 2, 1), "h6": (1, 2, 0),
        "g1": (0, 1, 2, 2), "g2": (1, 2, 2), "g3": (1, 2, 0), "g4": (0, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 2, 0, 1, 0)},
    {"name": "Street Art / Underground Tour", "category": "outdoor", "seasonal": False, "ice_breaker": True,
        "h1": (1, 2, 0, 0), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (0, 0, 2), "h5": (0, 1, 2), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (1, 2, 2), "g3": (1, 2, 0), "g4": (2, 1, 0), "g5": (1, 0, 1),
        "g6": (0, 2, 0, 0, 0)},
    {"name": "Beach Day + Games", "category": "outdoor", "seasonal": True, "ice_breaker": False,
        "h1": (1, 2, 1, 2), "h2": (1, 2, 1), "h3": (1, 1, 1), "h4": (0, 1, 2), "h5": (-1, 2, 1), "h6": (0, 2, 1),
        "g1": (2, 2, 1, 0), "g2": (2, 2, 1), "g3": (0, 2, 2), "g4": (1, 2, 1), "g5": (1, 1, 1),
        "g6": (2, 0, 0, 0, 1)},

    # ── Entertainment & culture ──
    {"name": "Creative Workshop", "category": "entertainment", "seasonal": False, "ice_breaker": True,
        "h1": (2, 1, 0, 0), "h2": (2, 2, 0), "h3": (2, 0, 0), "h4": (0, 0, 2), "h5": (2, 0, 1), "h6": (1, 1, 0),
        "g1": (1, 2, 2, 1), "g2": (1, 2, 2), "g3": (2, 2, 0), "g4": (2, 1, -1), "g5": (2, 0, 1),
        "g6": (0, 2, 0, 0, 1)},
    {"name": "Dance Class", "category": "entertainment", "seasonal": False, "ice_breaker": False,
        "h1": (0, 2, 0, 2), "h2": (-1, 2, 2), "h3": (2, 0, -1), "h4": (0, 0, 2), "h5": (2, 0, 1), "h6": (1, 1, 0),
        "g1": (2, 2, 1, 0), "g2": (2, 2, 1), "g3": (0, 2, 1), "g4": (2, 1, 0), "g5": (2, 0, 0),
        "g6": (1, 2, 1, 0, 0)},
    {"name": "Musical / Theater Show", "category": "entertainment", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, -1, 0), "h2": (2, 1, 0), "h3": (0, 0, 2), "h4": (0, 1, 2), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (0, 1, 2, 2), "g2": (2, 1, 1), "g3": (2, 2, 0), "g4": (2, 1, 0), "g5": (0, 0, 2),
        "g6": (0, 2, 1, 0, 0)},
    {"name": "Comedy Show + Pre-Drinks", "category": "entertainment", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 1), "h2": (2, 1, 0), "h3": (0, 0, 2), "h4": (0, 1, 2), "h5": (2, -1, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 2), "g3": (2, 2, 0), "g4": (1, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 2, 1, 0, 0)},
    {"name": "Private Poker Night", "category": "entertainment", "seasonal": False, "ice_breaker": False,
        "h1": (1, 2, 0, 1), "h2": (1, 2, 1), "h3": (0, 2, 0), "h4": (0, 2, 1), "h5": (2, -1, 0), "h6": (0, 2, 2),
        "g1": (1, 2, 2, 2), "g2": (2, 1, 0), "g3": (2, 2, 0), "g4": (0, 2, 2), "g5": (0, 2, 0),
        "g6": (1, 0, 1, 0, 0)},
    {"name": "Sports Viewing", "category": "entertainment", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 1), "h2": (2, 1, 0), "h3": (1, 0, 2), "h4": (1, 2, 0), "h5": (2, 0, 1), "h6": (0, 2, 1),
        "g1": (1, 2, 2, 2), "g2": (2, 1, 0), "g3": (2, 2, 0), "g4": (0, 2, 2), "g5": (1, 0, 2),
        "g6": (1, 0, 1, 1, 0)},

    # ── Wellness & relaxation ──
    {"name": "Spa / Sauna Day Pass", "category": "wellness", "seasonal": False, "ice_breaker": False,
        "h1": (2, 0, -1, -1), "h2": (2, 1, -1), "h3": (0, -1, 2), "h4": (0, 0, 2), "h5": (2, 0, 1), "h6": (2, 0, -1),
        "g1": (0, 1, 2, 2), "g2": (2, 1, -1), "g3": (2, 1, -1), "g4": (2, 1, -1), "g5": (0, -1, 2),
        "g6": (-1, 0, -1, 0, 2)},
    {"name": "Massage Add-On", "category": "wellness", "seasonal": False, "ice_breaker": False,
        "h1": (2, 0, -1, 0), "h2": (2, 1, -1), "h3": (0, -1, 1), "h4": (0, 0, 2), "h5": (2, 0, 1), "h6": (1, 0, -1),
        "g1": (0, 1, 2, 2), "g2": (2, 1, 0), "g3": (2, 1, -1), "g4": (2, 0, -1), "g5": (0, -1, 2),
        "g6": (-1, 0, -1, 0, 2)},

    # ── Dining experiences ──
    {"name": "Brunch Buffet", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 0), "h2": (1, 2, 1), "h3": (1, 0, 1), "h4": (2, 1, 0), "h5": (2, 0, 1), "h6": (2, 0, 0),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (2, 1, 0), "g5": (0, 0, 2),
        "g6": (0, 0, 0, 2, 0)},
    {"name": "Steakhouse Dinner", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (2, 0, -1, 0), "h2": (1, 2, 1), "h3": (0, 0, 1), "h4": (2, 1, 0), "h5": (2, 0, 1), "h6": (2, 2, 1),
        "g1": (0, 1, 2, 2), "g2": (2, 1, 1), "g3": (2, 2, 0), "g4": (1, 2, 0), "g5": (0, 0, 2),
        "g6": (0, 0, 0, 2, 0)},
    {"name": "Burger + Beer Combo", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (1, 1, 0, 1), "h2": (1, 2, 0), "h3": (0, 0, 1), "h4": (2, 1, 0), "h5": (2, 0, 1), "h6": (1, 2, 1),
        "g1": (2, 2, 1, 0), "g2": (2, 2, 1), "g3": (2, 2, 1), "g4": (1, 2, 1), "g5": (0, 0, 2),
        "g6": (0, 0, 0, 2, 0)},
    {"name": "Tapas / Shared Plates", "category": "dining", "seasonal": False, "ice_breaker": True,
        "h1": (2, 1, 0, 0), "h2": (1, 2, 0), "h3": (1, 0, 1), "h4": (2, 1, 0), "h5": (2, 0, 1), "h6": (2, 1, 0),
        "g1": (1, 2, 2, 2), "g2": (2, 2, 2), "g3": (2, 2, 0), "g4": (1, 2, 0), "g5": (1, 0, 2),
        "g6": (0, 1, 0, 2, 0)},
    {"name": "Sushi Dinner", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (2, 0, -1, 0), "h2": (1, 2, 0), "h3": (0, 0, 1), "h4": (2, 1, 0), "h5": (2, -1, 1), "h6": (2, 1, 0),
        "g1": (1, 2, 2, 2), "g2": (2, 1, 1), "g3": (2, 2, 0), "g4": (1, 2, 0), "g5": (0, 0, 2),
        "g6": (0, 1, 0, 2, 0)},
    {"name": "BBQ Ribs + Beer Tower", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (1, 1, 0, 2), "h2": (1, 2, 1), "h3": (0, 0, 1), "h4": (2, 2, 0), "h5": (1, 1, 2), "h6": (1, 2, 1),
        "g1": (2, 2, 1, 1), "g2": (2, 2, 1), "g3": (2, 2, 1), "g4": (0, 2, 2), "g5": (0, 0, 2),
        "g6": (0, 0, 0, 2, 0)},
    {"name": "Pizza Party + Craft Beer", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (2, 1, 0, 1), "h2": (1, 2, 0), "h3": (1, 0, 1), "h4": (2, 1, 0), "h5": (2, 0, 1), "h6": (1, 2, 0),
        "g1": (2, 2, 1, 0), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (1, 2, 1), "g5": (1, 0, 2),
        "g6": (0, 0, 0, 2, 0)},
    {"name": "Private Dining Room + Chef's Menu", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (2, 0, -1, 0), "h2": (2, 2, 1), "h3": (0, 0, 2), "h4": (2, 1, 1), "h5": (2, -1, 1), "h6": (2, 1, 0),
        "g1": (-1, 1, 2, 2), "g2": (2, 1, 0), "g3": (2, 2, 0), "g4": (1, 2, 0), "g5": (0, 0, 2),
        "g6": (0, 1, 0, 2, 0)},
    {"name": "Beer Hall / Platter Night", "category": "dining", "seasonal": False, "ice_breaker": False,
        "h1": (1, 1, 0, 2), "h2": (1, 2, 1), "h3": (1, 0, 1), "h4": (1, 2, 0), "h5": (2, 0, 1), "h6": (0, 2, 2),
        "g1": (2, 2, 1, 1), "g2": (2, 2, 1), "g3": (2, 2, 0), "g4": (-1, 2, 2), "g5": (0, 0, 2),
        "g6": (0, 1, 1, 2, 0)},
]
