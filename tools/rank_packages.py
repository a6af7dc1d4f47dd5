from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

from components.package_catalog import load_catalog, packages_for_city
from components.preferences_builder import build_user_preferences
from config import catalog_path_override, default_currency, log_level
from scoring.package_match import rank_packages
from scoring.presentation import format_price

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank event packages against group preferences.")
    parser.add_argument("--catalog", default=catalog_path_override(),
                        help="Catalog JSON file (default: data/packages_live.json, then data/packages.json)")
    parser.add_argument("--city", default=None, help="Only rank active packages of this city id")
    parser.add_argument("--gathering-size", default=None, help="intimate, small_group or party")
    parser.add_argument("--energy-level", default=None, help="low_key, moderate or high_energy")
    parser.add_argument("--vibes", nargs="*", default=[], help="Vibe tags (e.g. --vibes nightlife food)")
    parser.add_argument("--top-k", type=int, default=None)
    parser.add_argument("--currency", default=default_currency())
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a text table")
    return parser


def _to_json(results: List[Dict[str, Any]]) -> str:
    rows = [
        {
            "id": r["package"].get("id"),
            "name": r["package"].get("name"),
            "match_score": r["match_score"],
            "is_best_match": r["is_best_match"],
            "label": r["label"],
            "breakdown": r["breakdown"].as_dict(),
        }
        for r in results
    ]
    return json.dumps(rows, indent=2)


def _to_table(results: List[Dict[str, Any]], currency: str) -> str:
    lines = []
    for idx, r in enumerate(results, start=1):
        p = r["package"]
        marker = " *" if r["is_best_match"] else ""
        price = format_price(p.get("base_price_cents", 0), currency)
        lines.append(f"{idx:>2}. {p.get('name', '?'):<32} {r['label']:>11}  {price:>10}{marker}")
    return "\n".join(lines)


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    try:
        packages, chosen_path = load_catalog(
            PROJECT_ROOT, Path(args.catalog) if args.catalog else None
        )
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.city:
        packages = packages_for_city(packages, args.city)

    preferences = build_user_preferences(
        {
            "gathering_size": args.gathering_size,
            "energy_level": args.energy_level,
            "vibe_preferences": args.vibes,
        }
    )
    logger.debug("Ranking %d packages from %s for %s", len(packages), chosen_path, preferences)

    results = rank_packages(packages, preferences, top_k=args.top_k)
    if args.json:
        print(_to_json(results))
    else:
        print(_to_table(results, args.currency))
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
