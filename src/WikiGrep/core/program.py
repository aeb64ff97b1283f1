from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Op(str, Enum):
    """Closed set of grep instructions.

    Selector ops (ITEM/ACTION) narrow the match to one member of a page
    collection; every other op tests a regular expression against text
    derived from the current selection.
    """

    ITEM = "ITEM"
    ACTION = "ACTION"
    TEXT = "TEXT"
    TITLE = "TITLE"
    SITE = "SITE"
    ID = "ID"
    ALIAS = "ALIAS"
    JSON = "JSON"

    @property
    def is_selector(self) -> bool:
        return self in (Op.ITEM, Op.ACTION)

    @property
    def field_name(self) -> str | None:
        """Page field read by a field op, None for selectors and JSON."""
        if self.is_selector or self is Op.JSON:
            return None
        return self.value.lower()


PATTERN_FLAGS = re.IGNORECASE | re.MULTILINE


@dataclass(frozen=True, slots=True)
class Step:
    """One compiled instruction.

    Attributes:
        op: Instruction kind.
        type: Collection member type for selector ops; "" means any type.
        regex: Compiled pattern for field and JSON ops.
    """

    op: Op
    type: Optional[str] = None
    regex: Optional[re.Pattern[str]] = None

    def __post_init__(self) -> None:
        if self.op.is_selector:
            if self.type is None or self.regex is not None:
                raise ValueError(f"{self.op.value} step takes a type, not a pattern")
        elif self.regex is None or self.type is not None:
            raise ValueError(f"{self.op.value} step takes a pattern, not a type")


Program = Tuple[Step, ...]
