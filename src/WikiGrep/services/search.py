"""Search service: run a grep program over every page of a store."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from WikiGrep.core.matcher import match_page
from WikiGrep.core.models import Page, PageHit, PageRef
from WikiGrep.core.program import Program
from WikiGrep.utils.log import log

StatusSink = Callable[[str], None]
HitSink = Callable[[PageHit], None]


class PageStore(Protocol):
    """Protocol for a store serving a page directory and page bodies."""

    name: str

    def list_pages(self) -> Sequence[PageRef]:
        """Return references to every searchable page."""
        raise NotImplementedError

    def fetch_page(self, slug: str) -> Page:
        """Return the page stored under ``slug``."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by the store."""
        raise NotImplementedError


def status_text(found: int, checked: int, total: int) -> str:
    """Format search progress; the remain clause is dropped once all pages are checked."""
    report = f"found {found} pages of {checked} checked"
    if checked < total:
        report += f", {total - checked} remain"
    return report


@dataclass(slots=True)
class GrepSearchService:
    """Fan a program out over all pages of a store.

    Page fetches run on a thread pool; evaluation, counters and callbacks run
    on the calling thread, one completion at a time, in completion order.
    The service keeps no state between runs.
    """

    store: PageStore
    max_workers: int = 16
    chained: bool = False

    def run(
        self,
        program: Program,
        *,
        on_status: StatusSink,
        on_hit: HitSink,
        cancel: threading.Event | None = None,
    ) -> None:
        """Search every page, reporting progress and hits as fetches complete.

        Args:
            program: Compiled grep program.
            on_status: Receives the progress text after every checked page.
            on_hit: Receives each matching page.
            cancel: Optional token; once set, pending fetches are dropped and
                no further pages are checked.
        """
        on_status("fetching sitemap")
        refs = self.store.list_pages()
        total = len(refs)
        log.info("Sitemap fetched: source=%s pages=%d", self.store.name, total)
        if not refs:
            on_status(status_text(0, 0, 0))
            return

        found = 0
        checked = 0
        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, total))
        try:
            future_to_ref = {executor.submit(self.store.fetch_page, ref.slug): ref for ref in refs}
            for future in as_completed(future_to_ref):
                if cancel is not None and cancel.is_set():
                    log.info("Search cancelled: checked=%d/%d", checked, total)
                    break
                ref = future_to_ref[future]
                try:
                    page = future.result()
                except Exception as error:  # noqa: BLE001 - page failure must be isolated
                    log.warning("Page fetch failed: slug=%s error=%s", ref.slug, error)
                    continue

                if match_page(page, program, chained=self.chained):
                    found += 1
                    log.debug("Page matched: slug=%s", page.slug)
                    on_hit(PageHit(slug=page.slug, title=page.title, story_count=len(page.story)))
                checked += 1
                on_status(status_text(found, checked, total))
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

        log.info("Search finished: found=%d checked=%d total=%d", found, checked, total)

    def search(self, program: Program, *, cancel: threading.Event | None = None) -> list[PageHit]:
        """Run the program and return hits in completion order."""
        hits: list[PageHit] = []
        self.run(program, on_status=lambda text: log.debug("%s", text), on_hit=hits.append, cancel=cancel)
        return hits

    def close(self) -> None:
        """Close the underlying store."""
        self.store.close()
