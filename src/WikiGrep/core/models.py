from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _freeze(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(raw))


@dataclass(frozen=True, slots=True)
class Entry:
    """One item of a page story.

    Attributes:
        type: Plugin type of the item (e.g. "paragraph").
        text: Item text if any.
        title: Title carried by the item (reference items).
        site: Remote site carried by the item (reference items).
        id: Item id.
        alias: Alias id of the item if any.
        raw: The item JSON exactly as received.
    """

    type: str
    text: Optional[str] = None
    title: Optional[str] = None
    site: Optional[str] = None
    id: Optional[str] = None
    alias: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", _freeze(self.raw))


@dataclass(frozen=True, slots=True)
class Event:
    """One action of a page journal.

    Same fields as `Entry`; ``item`` is the story item the action refers to,
    used as a fallback source for fields the action itself lacks.
    """

    type: str
    text: Optional[str] = None
    title: Optional[str] = None
    site: Optional[str] = None
    id: Optional[str] = None
    alias: Optional[str] = None
    item: Optional[Entry] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", _freeze(self.raw))


@dataclass(frozen=True, slots=True)
class Page:
    """A wiki page fetched for one search run."""

    slug: str
    title: str
    story: tuple[Entry, ...] = ()
    journal: tuple[Event, ...] = ()
    raw: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", _freeze(self.raw))


@dataclass(frozen=True, slots=True)
class PageRef:
    """Sitemap entry pointing at a page."""

    slug: str
    title: Optional[str] = None
    date: Optional[int] = None


@dataclass(frozen=True, slots=True)
class PageHit:
    """A page that matched a program."""

    slug: str
    title: str
    story_count: int

    def render(self) -> str:
        """Return the wiki-markup reference shown in result lists."""
        return f"[[{self.title}]] ({self.story_count})"
