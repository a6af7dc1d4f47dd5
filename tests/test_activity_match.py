"""Unit tests for the questionnaire activity matcher."""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from config import ACTIVITY_CATEGORIES, SCORE_THRESHOLDS
from data.activities import ACTIVITIES
from scoring.activity_match import (
    _competition_adjustment,
    _vibe_score,
    match_activities,
    match_strength,
    score_activities,
    score_activity,
)

SUMMER = date(2026, 7, 1)
WINTER = date(2026, 1, 15)


def _activity(name):
    return next(a for a in ACTIVITIES if a["name"] == name)


def _find(results, name):
    return next((a for a in results if a.name == name), None)


# ══════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════

@pytest.fixture
def relaxed_foodie():
    """Relaxed foodie honoree, mixed group in their early thirties."""
    return {
        "h1": "relaxed", "h2": "background", "h3": "spectator", "h4": "food", "h5": "indoor",
        "h6": "dinner_bar", "g1": "31-35", "g2": "mixed", "g3": "low", "g4": "social",
        "g5": "relaxed", "g6": ["food", "culture"],
    }


@pytest.fixture
def action_groom():
    """Action-seeking honoree, young close friends."""
    return {
        "h1": "action", "h2": "center_stage", "h3": "competitive", "h4": "experience", "h5": "mix",
        "h6": "full_night", "g1": "21-25", "g2": "close_friends", "g3": "high", "g4": "central",
        "g5": "competitive", "g6": ["action", "nightlife"],
    }


@pytest.fixture
def easygoing_group():
    """Answers that trigger no hard filter."""
    return {
        "h1": "active", "h2": "group", "h3": "cooperative", "h4": "experience", "h5": "mix",
        "h6": "dinner_bar", "g1": "26-30", "g2": "close_friends", "g3": "medium", "g4": "social",
        "g5": "team_players", "g6": ["action"],
    }


# ══════════════════════════════════════════════════════════════════════
# Activity matrix
# ══════════════════════════════════════════════════════════════════════

class TestActivityMatrix:
    def test_fifty_three_activities(self):
        assert len(ACTIVITIES) == 53
        assert len({a["name"] for a in ACTIVITIES}) == 53

    def test_tuple_lengths_match_options(self):
        from config import ACTIVITY_OPTIONS, ACTIVITY_VIBES

        for activity in ACTIVITIES:
            for question, options in ACTIVITY_OPTIONS.items():
                assert len(activity[question]) == len(options), (activity["name"], question)
            assert len(activity["g6"]) == len(ACTIVITY_VIBES), activity["name"]


# ══════════════════════════════════════════════════════════════════════
# score_activities
# ══════════════════════════════════════════════════════════════════════

class TestScoreActivities:
    def test_sorted_descending(self, relaxed_foodie):
        results = score_activities(relaxed_foodie, today=SUMMER)
        assert results
        scores = [a.total_score for a in results]
        assert scores == sorted(scores, reverse=True)

    def test_cooking_class_ranks_high_for_relaxed_foodie(self, relaxed_foodie):
        cooking = _find(score_activities(relaxed_foodie, today=SUMMER), "Cooking Class")
        assert cooking is not None
        # 19 base points + 3 ice-breaker bonus for a mixed group
        assert cooking.total_score == 22
        assert cooking.total_score >= SCORE_THRESHOLDS["STRONG"]

    def test_go_karting_ranks_high_for_action_groom(self, action_groom):
        karting = _find(score_activities(action_groom, today=SUMMER), "Go-Karting")
        assert karting is not None
        assert karting.total_score == 18
        assert karting.total_score >= SCORE_THRESHOLDS["GOOD"]

    def test_no_filters_keeps_every_activity(self, easygoing_group):
        assert len(score_activities(easygoing_group, today=SUMMER)) == 53

    def test_categories_are_known(self, relaxed_foodie):
        for activity in score_activities(relaxed_foodie, today=SUMMER):
            assert activity.category in ACTIVITY_CATEGORIES


class TestHardFilters:
    def test_strangers_exclude_paintball(self, relaxed_foodie):
        answers = dict(relaxed_foodie, g2="strangers")
        assert _find(score_activities(answers, today=SUMMER), "Paintball / Airsoft") is None

    def test_low_fitness_excludes_laser_tag(self, relaxed_foodie):
        assert _find(score_activities(relaxed_foodie, today=SUMMER), "Laser Tag Session") is None

    def test_low_drinking_excludes_beer_tasting(self, relaxed_foodie):
        answers = dict(relaxed_foodie, g4="low")
        assert _find(score_activities(answers, today=SUMMER), "Beer Tasting Flight") is None

    def test_relaxed_dynamic_excludes_go_karting(self, action_groom):
        answers = dict(action_groom, g5="relaxed")
        assert _find(score_activities(answers, today=SUMMER), "Go-Karting") is None

    def test_filters_only_apply_to_trigger_answer(self, easygoing_group):
        assert _find(score_activities(easygoing_group, today=SUMMER), "Paintball / Airsoft") is not None


class TestAdjustments:
    def test_ice_breaker_bonus_for_mixed_group(self, relaxed_foodie):
        mixed = _find(score_activities(dict(relaxed_foodie, g2="mixed"), today=SUMMER), "Escape Room")
        close = _find(score_activities(dict(relaxed_foodie, g2="close_friends"), today=SUMMER), "Escape Room")
        assert mixed is not None and close is not None
        # g2 score 2 vs 1, plus the 3 point bonus
        assert mixed.total_score - close.total_score == 4

    def test_vibe_takes_max_of_selected(self):
        wine = _activity("Wine Tasting")["g6"]  # (0, 2, 0, 2, 1)
        assert _vibe_score(wine, ["food", "culture"]) == 2
        assert _vibe_score(wine, ["action", "wellness"]) == 1

    def test_vibe_unknown_or_empty_scores_zero(self):
        assert _vibe_score((2, 2, 2, 2, 2), []) == 0
        assert _vibe_score((2, 2, 2, 2, 2), ["karaoke"]) == 0

    def test_vibe_can_be_negative(self):
        spa = _activity("Spa / Sauna Day Pass")["g6"]  # (-1, 0, -1, 0, 2)
        assert _vibe_score(spa, ["action", "nightlife"]) == -1

    def test_competitive_honoree_relaxed_group_penalty(self):
        assert _competition_adjustment(_activity("Go-Karting"), "competitive", "relaxed") == -2
        assert _competition_adjustment(_activity("Escape Room"), "competitive", "relaxed") == 0

    def test_cooperative_honoree_competitive_group_boost(self):
        assert _competition_adjustment(_activity("Laser Tag Session"), "cooperative", "competitive") == 2
        assert _competition_adjustment(_activity("Escape Room"), "cooperative", "competitive") == 0

    def test_spectator_honoree_team_players_boost(self):
        assert _competition_adjustment(_activity("Wine Tasting"), "spectator", "team_players") == 1
        assert _competition_adjustment(_activity("Escape Room"), "spectator", "team_players") == 0

    def test_seasonal_penalty_in_winter(self, relaxed_foodie):
        cruise = _activity("Harbor / River Cruise")
        summer = score_activity(cruise, relaxed_foodie, today=SUMMER)
        winter = score_activity(cruise, relaxed_foodie, today=WINTER)
        assert summer - winter == 2

    def test_non_seasonal_ignores_month(self, relaxed_foodie):
        cooking = _activity("Cooking Class")
        assert score_activity(cooking, relaxed_foodie, today=WINTER) == score_activity(
            cooking, relaxed_foodie, today=SUMMER
        )

    def test_unknown_answers_contribute_zero(self):
        assert score_activity(_activity("Escape Room"), {"h1": "sleepy"}, today=SUMMER) == 0


class TestMatchActivities:
    def test_no_answers(self):
        assert match_activities(None) == {
            "activities": [],
            "top_activities": [],
            "has_strong_matches": False,
        }

    def test_top_activities_are_strong(self, relaxed_foodie):
        result = match_activities(relaxed_foodie, today=SUMMER)
        assert result["has_strong_matches"] is True
        assert all(a.total_score >= SCORE_THRESHOLDS["STRONG"] for a in result["top_activities"])
        assert _find(result["top_activities"], "Cooking Class") is not None

    def test_match_strength_bands(self):
        assert match_strength(15) == "strong"
        assert match_strength(14) == "good"
        assert match_strength(10) == "good"
        assert match_strength(5) == "weak"
        assert match_strength(4) == "poor"
