"""Federated Wiki JSON payload parser.

Maps sitemap and page JSON into the internal models. Parsing is lenient:
malformed members are skipped and scalar fields are coerced to text, so
one odd item never hides the rest of a page from a search.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from WikiGrep.core.models import Entry, Event, Page, PageRef
from WikiGrep.utils.log import log

_TEXT_FIELDS = ("text", "title", "site", "id", "alias")


def parse_sitemap(payload: Any) -> list[PageRef]:
    """Parse ``/system/sitemap.json`` into page references.

    Args:
        payload: Decoded sitemap JSON (a list of objects with ``slug``).

    Returns:
        Page references in sitemap order; entries without a slug are dropped.

    Raises:
        ValueError: If the payload is not a list.
    """
    if not isinstance(payload, list):
        raise ValueError("sitemap payload must be a list")
    refs: list[PageRef] = []
    for idx, place in enumerate(payload):
        if not isinstance(place, Mapping):
            log.debug("Skip sitemap entry %d: not an object", idx)
            continue
        slug = _as_text(place.get("slug"))
        if not slug:
            log.debug("Skip sitemap entry %d: missing slug", idx)
            continue
        date = place.get("date")
        refs.append(
            PageRef(
                slug=slug,
                title=_as_text(place.get("title")),
                date=date if isinstance(date, int) and not isinstance(date, bool) else None,
            )
        )
    return refs


def parse_page(payload: Any, *, slug: str) -> Page:
    """Parse one page JSON document.

    Args:
        payload: Decoded page JSON.
        slug: Slug the page was fetched under.

    Returns:
        Parsed page.

    Raises:
        ValueError: If the payload is not an object.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"page payload for {slug} must be an object")
    story = tuple(
        entry for entry in (parse_entry(item) for item in _as_list(payload.get("story"))) if entry is not None
    )
    journal = tuple(
        event for event in (parse_event(action) for action in _as_list(payload.get("journal"))) if event is not None
    )
    return Page(
        slug=slug,
        title=_as_text(payload.get("title")) or slug,
        story=story,
        journal=journal,
        raw=payload,
    )


def parse_entry(item: Any) -> Optional[Entry]:
    """Parse one story item, or None when it is not an object."""
    if not isinstance(item, Mapping):
        return None
    return Entry(type=_as_text(item.get("type")) or "", raw=item, **_text_fields(item))


def parse_event(action: Any) -> Optional[Event]:
    """Parse one journal action, or None when it is not an object."""
    if not isinstance(action, Mapping):
        return None
    return Event(
        type=_as_text(action.get("type")) or "",
        item=parse_entry(action.get("item")),
        raw=action,
        **_text_fields(action),
    )


def _text_fields(obj: Mapping[str, Any]) -> dict[str, Optional[str]]:
    return {name: _as_text(obj.get(name)) for name in _TEXT_FIELDS}


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (Mapping, list)):
        return None
    return value if isinstance(value, str) else str(value)


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []
