from __future__ import annotations

import io
import json
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from config import log_level
from tools.rank_packages import PROJECT_ROOT, run

CATALOG = str(PROJECT_ROOT / "data" / "packages.json")


def _run(*argv: str) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = run(list(argv))
    return code, out.getvalue(), err.getvalue()


class RankPackagesCliTests(unittest.TestCase):
    def test_json_output_ranks_city_packages(self) -> None:
        code, out, _ = _run(
            "--catalog", CATALOG,
            "--city", "berlin",
            "--gathering-size", "small_group",
            "--energy-level", "high_energy",
            "--vibes", "nightlife", "food",
            "--json",
        )
        self.assertEqual(code, 0)
        rows = json.loads(out)
        self.assertEqual([r["id"] for r in rows], ["pkg-ber-classic", "pkg-ber-essential", "pkg-ber-grand"])
        self.assertEqual(rows[0]["label"], "100% match")
        self.assertTrue(rows[1]["is_best_match"])
        self.assertFalse(rows[2]["is_best_match"])
        self.assertEqual(rows[2]["breakdown"]["energy_score"], 15)

    def test_top_k_and_table_output(self) -> None:
        code, out, _ = _run(
            "--catalog", CATALOG,
            "--city", "hamburg",
            "--gathering-size", "intimate",
            "--energy-level", "low-key",
            "--vibes", "food",
            "--top-k", "1",
        )
        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("Hamburg Tasting Tour", lines[0])
        self.assertIn("100% match", lines[0])
        self.assertIn("€2,199", lines[0])
        self.assertTrue(lines[0].endswith("*"))

    def test_missing_catalog_reports_error(self) -> None:
        code, out, err = _run("--catalog", str(Path("/nonexistent/packages.json")))
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Catalog file not found", err)

    @patch("tools.rank_packages.rank_packages")
    def test_preferences_are_normalized_before_ranking(self, mock_rank) -> None:
        mock_rank.return_value = []
        code, _, _ = _run(
            "--catalog", CATALOG,
            "--gathering-size", "Small Group",
            "--energy-level", "HIGH ENERGY",
            "--vibes", "Night-Life",
        )
        self.assertEqual(code, 0)
        _, preferences = mock_rank.call_args.args
        self.assertEqual(
            preferences,
            {"gathering_size": "small_group", "energy_level": "high_energy", "vibe_preferences": ["night_life"]},
        )


class LogLevelTests(unittest.TestCase):
    @patch.dict(os.environ, {"LOG_LEVEL": "debug"})
    def test_known_level_is_uppercased(self) -> None:
        self.assertEqual(log_level(), "DEBUG")

    @patch.dict(os.environ, {"LOG_LEVEL": "LOUD"})
    def test_unknown_level_falls_back_to_info(self) -> None:
        self.assertEqual(log_level(), "INFO")

    @patch.dict(os.environ, {"LOG_LEVEL": "LOUD"})
    def test_cli_runs_with_unknown_level(self) -> None:
        code, out, err = _run("--catalog", CATALOG, "--city", "berlin", "--json")
        self.assertEqual(code, 0)
        self.assertEqual(len(json.loads(out)), 3)
        self.assertNotIn("Traceback", err)


if __name__ == "__main__":
    unittest.main()
