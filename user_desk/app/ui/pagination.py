from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    page: int
    page_size: int
    total: int
    total_pages: int
    start: int
    end: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(max(0, total) / max(1, page_size))


def build_page_window(total: int, page_size: int, page: int) -> PageWindow:
    size = max(1, page_size)
    start = (page - 1) * size
    end = page * size
    clipped_start = min(max(0, start), max(0, total))
    clipped_end = min(max(0, end), max(0, total))
    return PageWindow(
        page=page,
        page_size=size,
        total=total,
        total_pages=total_pages(total, size),
        start=clipped_start,
        end=clipped_end,
    )


def next_page(page: int, total: int, page_size: int) -> int:
    if page < total_pages(total, page_size):
        return page + 1
    return page


def prev_page(page: int) -> int:
    if page > 1:
        return page - 1
    return page
