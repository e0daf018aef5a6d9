"""
Client-side pagination of a fully loaded result set.

The letter list fetches every letter matching the active filter in one
request and pages through it locally. ListPager owns that result set,
the page size and the current page, and derives the visible slice and
the labels for the page navigation control.

Invariant: 1 <= current_page <= total_pages, where
total_pages = max(1, ceil(len(items) / page_size)).

Nothing here raises: out-of-range pages and non-positive page sizes
are ignored, leaving the pager unchanged.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, List, TypeVar

T = TypeVar("T")

ELLIPSIS = "..."
DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (5, 10, 20, 50)
# Pages shown on each side of the current page
PAGE_WINDOW = 2

PageLabel = int | str


@dataclass
class ListPager(Generic[T]):
    """
    Pagination state for an in-memory list.

    Attributes:
        items: Full result set for the active filter.
        page_size: Number of items per page.
        current_page: Current page number (1-indexed).
    """

    items: List[T] = field(default_factory=list)
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1

    def __post_init__(self) -> None:
        self.items = list(self.items)
        if not _is_positive_int(self.page_size):
            self.page_size = DEFAULT_PAGE_SIZE
        self._clamp()

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self.items) / self.page_size))

    @property
    def visible_slice(self) -> List[T]:
        """Items on the current page."""
        start = (self.current_page - 1) * self.page_size
        return self.items[start : start + self.page_size]

    @property
    def first_index(self) -> int:
        """1-based index of the first visible item, 0 when empty."""
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        """1-based index of the last visible item, 0 when empty."""
        return min(self.current_page * self.page_size, len(self.items))

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def reset(self) -> None:
        """Return to the first page (used when the filter changes)."""
        self.current_page = 1

    def set_full_result(self, items: Iterable[T]) -> None:
        """Replace the result set and clamp the current page into range."""
        self.items = list(items)
        self._clamp()

    def go_to_page(self, page: int) -> None:
        """Move to page; requests outside 1..total_pages are ignored."""
        if not isinstance(page, int) or isinstance(page, bool):
            return
        if page < 1 or page > self.total_pages:
            return
        self.current_page = page

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and restart at page 1; non-positive sizes are ignored."""
        if not _is_positive_int(page_size):
            return
        self.page_size = page_size
        self.current_page = 1

    def remove_item(self, predicate: Callable[[T], bool]) -> int:
        """
        Remove every item matching predicate.

        If that empties the current page and it is not the first one,
        step back a page so the user is not left on an empty page.

        Returns:
            Number of items removed.
        """
        remaining = [item for item in self.items if not predicate(item)]
        removed = len(self.items) - len(remaining)
        if not removed:
            return 0
        self.items = remaining
        if not self.visible_slice and self.current_page > 1:
            self.current_page -= 1
        self._clamp()
        return removed

    def replace_item(self, predicate: Callable[[T], bool], update: Callable[[T], T]) -> int:
        """
        Apply update to every item matching predicate, in place.

        Returns:
            Number of items updated.
        """
        updated = 0
        for index, item in enumerate(self.items):
            if predicate(item):
                self.items[index] = update(item)
                updated += 1
        return updated

    def page_number_labels(self) -> List[PageLabel]:
        """
        Return the labels for the page navigation control.

        Always page 1, the last page, and the pages within PAGE_WINDOW
        of the current one; an ELLIPSIS stands in for each run of
        skipped pages. Example for page 5 of 10:
        [1, "...", 3, 4, 5, 6, 7, "...", 10].
        """
        total = self.total_pages
        if total <= 1:
            return [1]

        start = max(2, self.current_page - PAGE_WINDOW)
        end = min(total - 1, self.current_page + PAGE_WINDOW)
        pages = [1, *range(start, end + 1), total]

        labels: List[PageLabel] = []
        previous = 0
        for page in pages:
            if page <= previous:
                continue
            if previous and page - previous > 1:
                labels.append(ELLIPSIS)
            labels.append(page)
            previous = page
        return labels

    def _clamp(self) -> None:
        if not _is_positive_int(self.current_page) or self.current_page < 1:
            self.current_page = 1
        self.current_page = min(self.current_page, self.total_pages)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
