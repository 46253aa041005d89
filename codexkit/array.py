"""A growable array with element-size metadata and an item release hook."""

from __future__ import annotations

from copy import copy
from typing import Any, Callable, Iterator, Optional


class Array:
    """Growable sequence of values.

    ``elem_size`` is the declared size of one element and takes part in
    equality and serialization. ``zero`` is stored wherever ``None`` is added
    or set. ``item_release`` is called for every item on :meth:`release`.
    """

    def __init__(
        self,
        elem_size: int = 0,
        zero: Any = None,
        item_release: Optional[Callable[[Any], None]] = None,
    ) -> None:
        if elem_size < 0:
            raise ValueError(f"element size must not be negative: {elem_size}")
        self.elem_size = elem_size
        self.zero = zero
        self.item_release = item_release
        self._items: list[Any] = []

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index out of bounds (i={index} array.len={len(self._items)})"
            )

    def _prepare(self, value: Any) -> Any:
        return copy(self.zero) if value is None else value

    def add(self, value: Any) -> None:
        """Append a value; ``None`` stores a copy of the zero value."""
        self._items.append(self._prepare(value))

    def get(self, index: int) -> Any:
        """Return the value at ``index``."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``; ``None`` stores a copy of the zero value."""
        self._check_index(index)
        self._items[index] = self._prepare(value)

    def fast_remove(self, index: int) -> None:
        """Remove the value at ``index`` by moving the last value into its place."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def equals(self, other: "Array") -> bool:
        """True when both arrays have the same element size and equal items."""
        return self.elem_size == other.elem_size and self._items == other._items

    def sort(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        """Sort the items in place."""
        self._items.sort(key=key)

    def release(self) -> None:
        """Pass every item to ``item_release`` (if set) and empty the array."""
        if self.item_release is not None:
            for item in self._items:
                self.item_release(item)
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __enter__(self) -> "Array":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"Array(elem_size={self.elem_size}, items={self._items!r})"