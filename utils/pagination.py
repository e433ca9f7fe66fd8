"""
Pagination utilities for paged menus.

This module provides the windowing arithmetic used by page providers, and a non-owning view over a
contiguous run of a sequence so that no page request has to copy its items.
"""

from collections.abc import Sequence
from typing import Any, Tuple


class ArraySegment(Sequence):
    """
    A read-only window of *length* items of *array*, starting at *offset*.

    The segment does not copy the array; reads go through to it, so changes made to the array after the
    segment was created are visible through it.
    """

    __slots__ = ("array", "offset", "length")

    def __init__(self, array: Sequence, offset: int, length: int):
        if offset < 0 or length < 0:
            raise ValueError("offset and length must be non-negative.")
        if offset + length > len(array):
            raise ValueError(f"A segment of {length} items at {offset} does not fit in {len(array)} items.")
        self.array = array
        self.offset = offset
        self.length = length

    def __len__(self):
        return self.length

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self.array[self.offset + i] for i in range(*index.indices(self.length))]
        if index < 0:
            index += self.length
        if not 0 <= index < self.length:
            raise IndexError("segment index out of range")
        return self.array[self.offset + index]

    def __iter__(self):
        for i in range(self.offset, self.offset + self.length):
            yield self.array[i]

    def __repr__(self):
        return f"<ArraySegment offset={self.offset} length={self.length}>"


def get_total_pages(choices: Sequence, per_page: int = 10) -> int:
    """Calculate total pages needed for choices."""
    if per_page <= 0:
        raise ValueError("per_page must be positive.")
    return (len(choices) + per_page - 1) // per_page


def get_window(length: int, page: int, per_page: int = 10) -> Tuple[int, int]:
    """
    Returns the (offset, count) of the given page in a sequence of *length* items.
    Pages past the end of the sequence are empty windows positioned at the end.
    """
    offset = min(page * per_page, length)
    remainder = length - offset
    return offset, min(per_page, remainder)


def get_page_segment(choices: Sequence[Any], page: int, per_page: int = 10) -> ArraySegment:
    """Get a view of the choices on a specific page without creating all pages."""
    offset, count = get_window(len(choices), page, per_page)
    return ArraySegment(choices, offset, count)
