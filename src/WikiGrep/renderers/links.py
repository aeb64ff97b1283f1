"""Wiki link resolution for rendered results."""

from __future__ import annotations

import html
import re

_RE_INTERNAL = re.compile(r"\[\[([^\]]+)\]\]")
_RE_SPACE = re.compile(r"\s")
_RE_NOT_SLUG = re.compile(r"[^A-Za-z0-9-]")


def as_slug(title: str) -> str:
    """Convert a page title to its slug: spaces to dashes, other punctuation dropped."""
    return _RE_NOT_SLUG.sub("", _RE_SPACE.sub("-", title)).lower()


def resolve_links(text: str) -> str:
    """Render ``[[Title]]`` references in ``text`` as internal page links.

    Text outside the brackets is escaped.
    """
    out: list[str] = []
    pos = 0
    for matched in _RE_INTERNAL.finditer(text):
        out.append(html.escape(text[pos:matched.start()], quote=False))
        out.append(internal_link(matched.group(1)))
        pos = matched.end()
    out.append(html.escape(text[pos:], quote=False))
    return "".join(out)


def internal_link(title: str) -> str:
    slug = as_slug(title)
    return (
        f'<a class="internal" href="/{slug}.html" data-page-name="{slug}" title="view">'
        f"{html.escape(title, quote=False)}</a>"
    )


def link_titles(rendered: str) -> list[str]:
    """Return the titles of the ``[[...]]`` references in ``rendered``, in order."""
    return [matched.group(1) for matched in _RE_INTERNAL.finditer(rendered)]
