"""Tests for evaluating grep programs against pages."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from WikiGrep.core.compiler import parse_program
from WikiGrep.core.matcher import field_text, json_text, match_page
from WikiGrep.core.models import Entry, Event, Page
from WikiGrep.core.program import Op
from WikiGrep.sources.wiki.parser import parse_page


def _program(text: str):
    program, _, errors = parse_program(text)
    assert errors == 0, text
    return program


def _page(story=(), journal=(), title="Sample Page"):
    return parse_page({"title": title, "story": list(story), "journal": list(journal)}, slug="sample-page")


QUOTE_PAGE = _page(
    story=[
        {"type": "paragraph", "id": "p1", "text": "nothing here"},
        {"type": "quote", "id": "q1", "text": "hello world"},
        {"type": "reference", "id": "r1", "site": "fed.wiki.org", "title": "Welcome Visitors", "text": "start"},
    ],
    journal=[
        {"type": "create", "item": {"title": "Sample Page", "story": []}},
        {"type": "edit", "id": "q1", "item": {"type": "quote", "id": "q1", "text": "foo bar"}},
        {"type": "fork", "site": "remote.example.com"},
    ],
)


class TestMatchPage(unittest.TestCase):
    def test_empty_program_matches_every_page(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, ()))
        self.assertTrue(match_page(_page(), ()))

    def test_selector_with_field_test(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, _program("ITEM quote\nTEXT hello")))
        self.assertFalse(match_page(QUOTE_PAGE, _program("ITEM quote\nTEXT goodbye")))

    def test_empty_type_selects_any_item(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, _program("ITEM\nSITE fed\\.wiki")))

    def test_selector_alone_needs_a_qualifying_member(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, _program("ITEM reference")))
        self.assertFalse(match_page(QUOTE_PAGE, _program("ITEM video")))
        self.assertFalse(match_page(_page(), _program("ITEM anytype")))

    def test_action_falls_back_to_referenced_item(self) -> None:
        page = _page(journal=[{"type": "add", "item": {"type": "paragraph", "text": "foo"}}])

        self.assertTrue(match_page(page, _program("ACTION\nTEXT foo")))
        self.assertTrue(match_page(page, _program("ACTION add\nTEXT ^foo$")))
        self.assertFalse(match_page(page, _program("ACTION edit\nTEXT foo")))

    def test_action_own_field_wins_over_item(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, _program("ACTION fork\nSITE remote")))
        self.assertTrue(match_page(QUOTE_PAGE, _program("ACTION edit\nTEXT foo bar")))

    def test_missing_field_reads_as_empty_string(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, _program("ITEM paragraph\nALIAS ^$")))
        self.assertFalse(match_page(QUOTE_PAGE, _program("ITEM paragraph\nALIAS .")))

    def test_field_step_without_selector_reads_page(self) -> None:
        self.assertTrue(match_page(QUOTE_PAGE, _program("TITLE sample")))
        self.assertFalse(match_page(QUOTE_PAGE, _program("TEXT hello")))

    def test_json_step_matches_serialized_selection(self) -> None:
        self.assertIn('"type": "quote"', json_text(QUOTE_PAGE.story[1]))
        self.assertTrue(match_page(QUOTE_PAGE, _program("ITEM\nJSON TYPE.*QUOTE")))
        self.assertTrue(match_page(QUOTE_PAGE, _program('JSON "journal"')))
        self.assertFalse(match_page(QUOTE_PAGE, _program("ITEM paragraph\nJSON quote")))

    def test_only_one_step_past_selector_is_evaluated(self) -> None:
        program = _program("ITEM quote\nTEXT hello\nTITLE never-present")
        self.assertTrue(match_page(QUOTE_PAGE, program))

        back_to_back = _program("ITEM quote\nITEM paragraph")
        self.assertFalse(match_page(QUOTE_PAGE, back_to_back))

    def test_chained_mode_evaluates_every_step(self) -> None:
        program = _program("ITEM quote\nTEXT hello\nTITLE never-present")
        self.assertFalse(match_page(QUOTE_PAGE, program, chained=True))

        both = _program("ITEM quote\nTEXT hello\nID q1")
        self.assertTrue(match_page(QUOTE_PAGE, both, chained=True))

    def test_chained_mode_reenters_page_for_later_selectors(self) -> None:
        program = _program("ITEM quote\nTEXT hello\nACTION fork\nSITE remote")
        self.assertTrue(match_page(QUOTE_PAGE, program, chained=True))

        missing = _program("ITEM quote\nTEXT hello\nACTION move")
        self.assertFalse(match_page(QUOTE_PAGE, missing, chained=True))

    def test_chained_mode_backtracks_across_members(self) -> None:
        page = _page(
            story=[
                {"type": "paragraph", "text": "alpha", "id": "a"},
                {"type": "paragraph", "text": "alpha", "id": "b"},
            ]
        )
        self.assertTrue(match_page(page, _program("ITEM paragraph\nTEXT alpha\nID ^b$"), chained=True))


class TestFieldText(unittest.TestCase):
    def test_reads_named_field(self) -> None:
        self.assertEqual(field_text(QUOTE_PAGE.story[2], Op.SITE), "fed.wiki.org")
        self.assertEqual(field_text(QUOTE_PAGE.story[2], Op.TITLE), "Welcome Visitors")

    def test_rejects_ops_without_a_field(self) -> None:
        with self.assertRaises(ValueError):
            field_text(QUOTE_PAGE, Op.JSON)


class TestJsonText(unittest.TestCase):
    def test_prefers_payload_as_received(self) -> None:
        text = json_text(QUOTE_PAGE.story[1])

        self.assertIn('"id": "q1"', text)
        self.assertIn('"text": "hello world"', text)

    def test_models_built_in_code_serialize_their_fields(self) -> None:
        entry = Entry(type="quote", text="hello world")
        page = Page(slug="p", title="P", story=(entry,))

        text = json_text(entry)
        self.assertIn('"type": "quote"', text)
        self.assertNotIn("title", text)
        self.assertNotIn("raw", text)
        self.assertTrue(match_page(page, _program("ITEM\nJSON type.*quote")))
        self.assertIn('"story": [', json_text(page))

    def test_event_nests_its_item(self) -> None:
        event = Event(type="edit", item=Entry(type="quote", text="foo bar"))

        self.assertIn('"text": "foo bar"', json_text(event))


if __name__ == "__main__":
    unittest.main()
