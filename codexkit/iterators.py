"""Helpers for working with iterators."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def filtered(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Lazily yield the items of ``iterable`` for which ``predicate`` is true."""
    for item in iterable:
        if predicate(item):
            yield item