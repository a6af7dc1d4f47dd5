"""Display helpers for match scores and package prices."""
from __future__ import annotations

import math

from config import BEST_MATCH_THRESHOLD, CURRENCY_SYMBOLS


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_best_match_score(score: float) -> bool:
    return score >= BEST_MATCH_THRESHOLD


def format_match_percentage(score: float) -> str:
    """75.5 → '76% match', 75.4 → '75% match'."""
    return f"{_round_half_up(score)}% match"


def per_person_price(total_price_cents: int, participant_count: int) -> int:
    """Split a package price across participants, rounding each share up to the next cent."""
    if participant_count <= 0:
        return total_price_cents
    return -(-total_price_cents // participant_count)


def format_price(cents: int, currency: str = "EUR") -> str:
    """Whole-unit price label, e.g. 149950 → '€1,500'."""
    code = (currency or "EUR").upper()
    amount = f"{_round_half_up(cents / 100):,}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{symbol}{amount}"
    return f"{code} {amount}"
