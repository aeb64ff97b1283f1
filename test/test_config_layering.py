"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from WikiGrep.config import load_config, load_config_with_defaults, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "search": {
            "program": "ITEM paragraph\nTEXT hello\n",
            "source": "wiki",
            "max_workers": 8,
            "chain_steps": False,
        },
        "wiki": {"site": "http://fed.wiki.org", "timeout": 10},
        "local": {"pages_dir": "pages"},
        "output": {"base_dir": "output", "formats": ["console", "JSON"]},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.search.source, "wiki")
        self.assertEqual(cfg.search.max_workers, 8)
        self.assertFalse(cfg.search.chain_steps)
        self.assertEqual(cfg.sources.wiki_site, "http://fed.wiki.org")
        self.assertEqual(cfg.sources.wiki_timeout, 10.0)
        self.assertEqual(cfg.output.formats, ("console", "json"))

    def test_defaults_for_optional_sections(self) -> None:
        cfg = parse_config_dict({"search": {"source": "local"}, "local": {"pages_dir": "pages"}})

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.search.program, "")
        self.assertEqual(cfg.search.max_workers, 16)
        self.assertEqual(cfg.output.formats, ("console",))

    def test_missing_search_section(self) -> None:
        with self.assertRaisesRegex(ValueError, "Missing required config: search"):
            parse_config_dict({})

    def test_type_errors_name_the_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["chain_steps"] = "yes"
        with self.assertRaisesRegex(TypeError, "search.chain_steps"):
            parse_config_dict(raw)

        raw = _base_raw_config()
        raw["search"]["max_workers"] = True
        with self.assertRaisesRegex(TypeError, "search.max_workers"):
            parse_config_dict(raw)

        raw = _base_raw_config()
        raw["output"] = {"formats": ["console", 3]}
        with self.assertRaisesRegex(TypeError, r"output\.formats\[1\] must be a string"):
            parse_config_dict(raw)

    def test_unknown_source_and_format(self) -> None:
        raw = _base_raw_config()
        raw["search"]["source"] = "gopher"
        with self.assertRaisesRegex(ValueError, "gopher"):
            parse_config_dict(raw)

        raw = _base_raw_config()
        raw["output"]["formats"] = ["markdown"]
        with self.assertRaisesRegex(ValueError, "markdown"):
            parse_config_dict(raw)

    def test_selected_source_needs_its_settings(self) -> None:
        raw = _base_raw_config()
        del raw["wiki"]
        with self.assertRaisesRegex(ValueError, "wiki.site"):
            parse_config_dict(raw)

        raw = _base_raw_config()
        raw["search"]["source"] = "local"
        raw["local"] = {}
        with self.assertRaisesRegex(ValueError, "local.pages_dir"):
            parse_config_dict(raw)

    def test_override_merges_onto_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override = Path(tmp) / "override.yml"
            override.write_text("search:\n  chain_steps: true\nwiki:\n  timeout: 3\n", encoding="utf-8")

            cfg = load_config_with_defaults(override, default_path=REPO_ROOT / "config" / "default.yml")

        self.assertTrue(cfg.search.chain_steps)
        self.assertEqual(cfg.sources.wiki_timeout, 3.0)
        self.assertEqual(cfg.sources.wiki_site, "http://fed.wiki.org")
        self.assertIn("ITEM paragraph", cfg.search.program)

    def test_missing_defaults_file_loads_override_alone(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override = Path(tmp) / "override.yml"
            override.write_text(
                "search:\n  program: \"TEXT x\"\n  source: local\nlocal:\n  pages_dir: pages\n",
                encoding="utf-8",
            )

            cfg = load_config_with_defaults(override, default_path=Path(tmp) / "absent.yml")

        self.assertEqual(cfg.search.program, "TEXT x")
        self.assertIsNone(cfg.sources.wiki_site)


    def test_repository_default_config_loads(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")

        self.assertEqual(cfg.search.source, "wiki")
        self.assertEqual(cfg.output.formats, ("console",))


if __name__ == "__main__":
    unittest.main()
