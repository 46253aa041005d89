"""A red-black tree keyed by a three-way comparison function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]


@dataclass(eq=False)
class RBTreeNode:
    """A node of an :class:`RBTree`."""

    key: Any
    value: Any = None
    is_red: bool = True
    left: Optional["RBTreeNode"] = field(default=None, repr=False)
    right: Optional["RBTreeNode"] = field(default=None, repr=False)
    parent: Optional["RBTreeNode"] = field(default=None, repr=False)


def _is_red(node: Optional[RBTreeNode]) -> bool:
    return node is not None and node.is_red


def _minimum(node: RBTreeNode) -> RBTreeNode:
    while node.left is not None:
        node = node.left
    return node


class RBTree:
    """Balanced binary search tree; iteration yields nodes in key order."""

    def __init__(self, compare: Compare) -> None:
        self.compare = compare
        self.root: Optional[RBTreeNode] = None
        self._size = 0

    def get(self, key: Any) -> Optional[RBTreeNode]:
        """Return the node holding ``key``, or ``None``."""
        node = self.root
        while node is not None:
            diff = self.compare(key, node.key)
            if diff == 0:
                return node
            node = node.left if diff < 0 else node.right
        return None

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing the value of an existing key."""
        parent: Optional[RBTreeNode] = None
        node = self.root
        diff = 0
        while node is not None:
            parent = node
            diff = self.compare(key, node.key)
            if diff == 0:
                node.value = value
                return
            node = node.left if diff < 0 else node.right

        new = RBTreeNode(key, value, is_red=True, parent=parent)
        if parent is None:
            self.root = new
        elif diff < 0:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_fixup(new)

    def remove(self, key: Any) -> bool:
        """Delete ``key``; return whether it was present."""
        z = self.get(key)
        if z is None:
            return False

        removed_red = z.is_red
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._transplant(z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._transplant(z, z.left)
        else:
            y = _minimum(z.right)
            removed_red = y.is_red
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.is_red = z.is_red

        if not removed_red:
            self._delete_fixup(x, x_parent)
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[RBTreeNode]:
        node = self.root
        if node is None:
            return
        node = _minimum(node)
        while node is not None:
            yield node
            if node.right is not None:
                node = _minimum(node.right)
                continue
            while node.parent is not None and node.parent.right is node:
                node = node.parent
            node = node.parent

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

    def _rotate_left(self, x: RBTreeNode) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBTreeNode) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    def _insert_fixup(self, node: RBTreeNode) -> None:
        while _is_red(node.parent):
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.is_red = uncle.is_red = False
                    grand.is_red = True
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.is_red = False
                grand.is_red = True
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.is_red = uncle.is_red = False
                    grand.is_red = True
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.is_red = False
                grand.is_red = True
                self._rotate_left(grand)
        self.root.is_red = False

    def _transplant(self, old: RBTreeNode, new: Optional[RBTreeNode]) -> None:
        if old.parent is None:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def _delete_fixup(self, x: Optional[RBTreeNode], parent: Optional[RBTreeNode]) -> None:
        while x is not self.root and not _is_red(x):
            if x is parent.left:
                sibling = parent.right
                if _is_red(sibling):
                    sibling.is_red = False
                    parent.is_red = True
                    self._rotate_left(parent)
                    sibling = parent.right
                if not _is_red(sibling.left) and not _is_red(sibling.right):
                    sibling.is_red = True
                    x, parent = parent, parent.parent
                else:
                    if not _is_red(sibling.right):
                        sibling.left.is_red = False
                        sibling.is_red = True
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.is_red = parent.is_red
                    parent.is_red = False
                    sibling.right.is_red = False
                    self._rotate_left(parent)
                    x, parent = self.root, None
            else:
                sibling = parent.left
                if _is_red(sibling):
                    sibling.is_red = False
                    parent.is_red = True
                    self._rotate_right(parent)
                    sibling = parent.left
                if not _is_red(sibling.left) and not _is_red(sibling.right):
                    sibling.is_red = True
                    x, parent = parent, parent.parent
                else:
                    if not _is_red(sibling.left):
                        sibling.right.is_red = False
                        sibling.is_red = True
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.is_red = parent.is_red
                    parent.is_red = False
                    sibling.left.is_red = False
                    self._rotate_right(parent)
                    x, parent = self.root, None
        if x is not None:
            x.is_red = False