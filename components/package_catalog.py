"""Package catalog: loads, validates, and normalizes packages for the scoring engine.

Supports two catalog sources:
- data/packages.json: static fallback catalog (hand-curated sample packages)
- data/packages_live.json: export of the live package table, when present

The normalizer maps camelCase exports onto the snake_case fields the scorer
reads and ensures every scoring field exists, so the engine never hits
missing keys.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from config import (
    ENERGY_LEVELS_SET,
    GATHERING_SIZES_SET,
    PACKAGE_TIERS,
    PACKAGE_TIERS_SET,
    VIBES_SET,
)
from scoring.normalize import normalize_tokens

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"id", "name", "city_id"}

_FIELD_ALIASES = {
    "idealGatheringSizes": "ideal_gathering_size",
    "idealEnergyLevels": "ideal_energy_level",
    "idealVibeTags": "ideal_vibe",
    "cityId": "city_id",
    "basePriceCents": "base_price_cents",
    "pricePerPersonCents": "price_per_person_cents",
    "isActive": "is_active",
    "reviewCount": "review_count",
    "heroImageUrl": "hero_image_url",
}

_MIN_SEARCH_LENGTH = 2


def _validate_package(package: Dict, index: int) -> List[str]:
    """Validate a package against the canonical enums. Returns list of warnings."""
    warnings = []
    name = package.get("name") or f"package[{index}]"

    for field in sorted(_REQUIRED_FIELDS):
        if not package.get(field):
            warnings.append(f"{name}: missing required field '{field}'")

    # Single strings are accepted by the scorer, so validate the normalized list.
    for size in normalize_tokens(package.get("ideal_gathering_size")):
        if size not in GATHERING_SIZES_SET:
            warnings.append(f"{name}: unknown gathering size '{size}'")

    for level in normalize_tokens(package.get("ideal_energy_level")):
        if level not in ENERGY_LEVELS_SET:
            warnings.append(f"{name}: unknown energy level '{level}'")

    for vibe in normalize_tokens(package.get("ideal_vibe")):
        if vibe not in VIBES_SET:
            warnings.append(f"{name}: unknown vibe '{vibe}'")

    tier = package.get("tier")
    if tier and str(tier).lower() not in PACKAGE_TIERS_SET:
        warnings.append(f"{name}: unknown tier '{tier}'")

    return warnings


def normalize_package_for_scoring(package: Dict) -> Dict:
    out = dict(package)

    for alias, field in _FIELD_ALIASES.items():
        if alias in out:
            value = out.pop(alias)
            if out.get(field) is None:
                out[field] = value

    # Null ideal lists come straight from nullable columns.
    for field in ("ideal_gathering_size", "ideal_energy_level", "ideal_vibe"):
        if out.get(field) is None:
            out[field] = []

    out.setdefault("description", "")
    out.setdefault("tier", "classic")
    out.setdefault("is_active", True)
    out.setdefault("base_price_cents", 0)
    out.setdefault("price_per_person_cents", 0)
    out.setdefault("rating", 0.0)
    out.setdefault("review_count", 0)

    return out


def _read_packages(path: Path) -> List[Dict]:
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    data = json.loads(path.read_text())
    if not isinstance(data, list):
        raise ValueError(f"Catalog must be a JSON list of packages: {path}")
    return data


def load_catalog(base_dir: Path, path: Optional[Path] = None) -> Tuple[List[Dict], Path]:
    live_packages_path = base_dir / "data" / "packages_live.json"
    default_packages_path = base_dir / "data" / "packages.json"

    packages: List[Dict] = []

    if path is not None:
        chosen_path = Path(path)
        packages = _read_packages(chosen_path)
    else:
        chosen_path = default_packages_path
        if live_packages_path.exists():
            live_packages = _read_packages(live_packages_path)
            if live_packages:
                packages = live_packages
                chosen_path = live_packages_path
        if not packages:
            packages = _read_packages(default_packages_path)
            chosen_path = default_packages_path

    normalized = [normalize_package_for_scoring(p) for p in packages]

    # Validate all packages and log warnings (non-blocking)
    all_warnings = []
    for i, package in enumerate(normalized):
        all_warnings.extend(_validate_package(package, i))
    if all_warnings:
        logger.warning("Package catalog validation found %d issues:", len(all_warnings))
        for w in all_warnings[:20]:  # cap log output
            logger.warning("  - %s", w)

    logger.info("Loaded %d packages from %s", len(normalized), chosen_path.name)
    return normalized, chosen_path


def _tier_rank(package: Dict) -> int:
    tier = str(package.get("tier", "")).lower()
    return PACKAGE_TIERS.index(tier) if tier in PACKAGE_TIERS_SET else len(PACKAGE_TIERS)


def packages_for_city(packages: List[Dict], city_id: Optional[str]) -> List[Dict]:
    """Active packages of a city, cheapest tier first, then by base price."""
    selected = [
        p for p in packages
        if p.get("is_active", True) and (not city_id or p.get("city_id") == city_id)
    ]
    return sorted(selected, key=lambda p: (_tier_rank(p), p.get("base_price_cents", 0)))


def search_packages(packages: List[Dict], query: str, city_id: Optional[str] = None) -> List[Dict]:
    needle = (query or "").strip().lower()
    if len(needle) < _MIN_SEARCH_LENGTH:
        return []
    return [
        p for p in packages
        if p.get("is_active", True)
        and (not city_id or p.get("city_id") == city_id)
        and (
            needle in str(p.get("name", "")).lower()
            or needle in str(p.get("description") or "").lower()
        )
    ]
