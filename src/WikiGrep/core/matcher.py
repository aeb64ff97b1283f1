"""Evaluate compiled grep programs against pages.

Two mutually driving procedures walk the program: the page-level step
expands selector ops over the page story or journal, the part-level step
tests one field op against the current selection.

By default a selector is followed by at most one field test; any later
steps are never reached. Passing ``chained=True`` keeps walking the program
after each successful test, so every step must hold.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any, Iterable, Mapping, Union

from WikiGrep.core.models import Entry, Event, Page
from WikiGrep.core.program import Op, Program, Step

Part = Union[Page, Entry, Event]


def match_page(page: Page, program: Program, *, chained: bool = False) -> bool:
    """Return True when ``page`` satisfies ``program``.

    Args:
        page: Page to test.
        program: Compiled steps; an empty program matches every page.
        chained: Evaluate every step instead of stopping one step past a
            selector.

    Returns:
        Whether the page matches.
    """
    return _Walk(page, program, chained).page_step(0)


def field_text(part: Part, op: Op) -> str:
    """Return the text a field op reads from ``part``.

    Falls back to the referenced story item for journal actions and to ""
    when neither carries the field.
    """
    key = op.field_name
    if key is None:
        raise ValueError(f"{op.value} does not read a field")
    value = getattr(part, key, None)
    if not value:
        item = getattr(part, "item", None)
        value = getattr(item, key, None) if item is not None else None
    return value or ""


def json_text(part: Part) -> str:
    """Serialize ``part`` the way JSON steps see it.

    The payload as received is used when there is one; parts built in code
    serialize their own fields, leaving out unset ones.
    """
    payload = part.raw if part.raw else _fields(part)
    return json.dumps(_plain(payload), indent=1, ensure_ascii=False)


class _Walk:
    __slots__ = ("page", "program", "chained")

    def __init__(self, page: Page, program: Program, chained: bool) -> None:
        self.page = page
        self.program = program
        self.chained = chained

    def page_step(self, index: int) -> bool:
        if index >= len(self.program):
            return True
        step = self.program[index]
        if step.op is Op.ITEM:
            return self._any(self.page.story, step, index + 1)
        if step.op is Op.ACTION:
            return self._any(self.page.journal, step, index + 1)
        return self.part_step(self.page, index)

    def part_step(self, part: Part, index: int) -> bool:
        if index >= len(self.program):
            return True
        step = self.program[index]
        if step.op.is_selector:
            return self.chained and self.page_step(index)
        if step.op is Op.JSON:
            text = json_text(part)
        else:
            text = field_text(part, step.op)
        if step.regex.search(text) is None:
            return False
        return not self.chained or self.part_step(part, index + 1)

    def _any(self, members: Iterable[Entry | Event], step: Step, index: int) -> bool:
        for member in members:
            if step.type and member.type != step.type:
                continue
            if self.part_step(member, index):
                return True
        return False


def _plain(value: Any) -> Any:
    """Undo read-only mapping views so json can serialize nested payloads."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _fields(part: Part) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for spec in fields(part):
        if spec.name == "raw":
            continue
        value = getattr(part, spec.name)
        if value is None:
            continue
        if is_dataclass(value):
            value = value.raw if value.raw else _fields(value)
        elif isinstance(value, tuple):
            value = [member.raw if member.raw else _fields(member) for member in value]
        payload[spec.name] = value
    return payload
