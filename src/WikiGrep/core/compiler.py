"""Grep program compiler.

Compiles line-oriented grep source into a `Program` plus an HTML listing
that echoes every source line, marking the ones that failed.

Syntax, one instruction per line:

    ITEM <type>       select any story item of <type> ("" = any type)
    ACTION <type>     select any journal action of <type>
    TEXT <regex>      match the selection's text (likewise TITLE, SITE,
                      ID, ALIAS)
    JSON <regex>      match the selection serialized as indented JSON

Lines whose leading word is empty (blank lines) compile to nothing.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from WikiGrep.core.program import PATTERN_FLAGS, Op, Program, Step

_RE_LINE = re.compile(r"^\s*(\w*)\s*(.*)$")
_RE_TYPE = re.compile(r"[a-z]*")

ERROR_STYLE = "background-color:#fdd;width:100%;"
LINE_BREAK = "<br>"


class CompileError(ValueError):
    """Raised for a grep source line that cannot be compiled."""


def escape_line(line: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for display; ampersand first."""
    return html.escape(line, quote=False)


def compile_line(line: str) -> Step | None:
    """Compile one source line.

    Args:
        line: Raw source line without its newline.

    Returns:
        The compiled step, or None when the line holds no instruction.

    Raises:
        CompileError: If the command, type or pattern is invalid.
    """
    matched = _RE_LINE.match(line)
    if matched is None:
        raise AssertionError(f"line pattern failed on {line!r}")
    token, arg = matched.group(1), matched.group(2)
    if not token:
        return None

    try:
        op = Op(token)
    except ValueError as exc:
        raise CompileError(f"don't know '{token}' command") from exc

    if op.is_selector:
        return Step(op, type=_expect_type(arg))
    try:
        return Step(op, regex=re.compile(arg, PATTERN_FLAGS))
    except re.error as exc:
        raise CompileError(f"bad pattern '{arg}': {exc}") from exc


@dataclass(frozen=True, slots=True)
class LineProblem:
    """A source line that failed to compile; ``lineno`` is 1-based."""

    lineno: int
    line: str
    message: str


@dataclass(frozen=True, slots=True)
class CompiledSource:
    """Everything one compile pass produces.

    Attributes:
        program: Successfully compiled steps in source order.
        listing: One escaped display line per source line joined with
            ``<br>``; failed lines are highlighted.
        problems: Failing lines in source order.
    """

    program: Program
    listing: str
    problems: tuple[LineProblem, ...]

    @property
    def errors(self) -> int:
        return len(self.problems)


def compile_source(text: str) -> CompiledSource:
    """Compile grep source text in a single pass over its lines.

    Errors are recovered per line: a bad line is recorded as a problem, is
    highlighted in the listing with the message as its tooltip, and
    contributes no step.
    """
    program: list[Step] = []
    listing: list[str] = []
    problems: list[LineProblem] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        display = escape_line(line)
        try:
            step = compile_line(line)
        except CompileError as err:
            problems.append(LineProblem(lineno=lineno, line=line, message=str(err)))
            display = f'<span style="{ERROR_STYLE}" title="{html.escape(str(err), quote=True)}">{display}</span>'
        else:
            if step is not None:
                program.append(step)
        listing.append(display)
    return CompiledSource(program=tuple(program), listing=LINE_BREAK.join(listing), problems=tuple(problems))


def parse_program(text: str) -> tuple[Program, str, int]:
    """Compile grep source text.

    Returns:
        ``(program, listing, errors)``; see `compile_source`.
    """
    compiled = compile_source(text)
    return compiled.program, compiled.listing, compiled.errors


def _expect_type(arg: str) -> str:
    if _RE_TYPE.fullmatch(arg) is None:
        raise CompileError(f"expecting type for '{arg}'")
    return arg
