"""An in-memory B-tree keyed by the ``name`` attribute of its items."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

BTREE_ORDER = 3
"""Default minimum degree of the tree."""


def _name_of(item: Any) -> str:
    return item.name


@dataclass
class BTreeNode:
    """A single node: sorted keys and, for internal nodes, one more child than keys."""

    leaf: bool = True
    keys: list = field(default_factory=list)
    children: list["BTreeNode"] = field(default_factory=list)


class BTree:
    """A B-tree of items ordered by their ``name`` attribute.

    Inserting does not check for duplicate names; callers that need unique
    names check with :meth:`search` first.
    """

    def __init__(self, min_degree: int = BTREE_ORDER) -> None:
        if min_degree < 2:
            raise ValueError("minimum degree must be at least 2")
        self.min_degree = min_degree
        self.root: Optional[BTreeNode] = None

    @property
    def _max_keys(self) -> int:
        return 2 * self.min_degree - 1

    # ----------------------------------------------------------------- search

    def search(self, name: str) -> Any:
        """Return the item called *name*, or None."""
        node = self.root
        while node is not None:
            idx = bisect_left(node.keys, name, key=_name_of)
            if idx < len(node.keys) and node.keys[idx].name == name:
                return node.keys[idx]
            if node.leaf:
                return None
            node = node.children[idx]
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None

    def __iter__(self) -> Iterator[Any]:
        if self.root is not None:
            yield from self._walk(self.root)

    def _walk(self, node: BTreeNode) -> Iterator[Any]:
        for idx, item in enumerate(node.keys):
            if not node.leaf:
                yield from self._walk(node.children[idx])
            yield item
        if not node.leaf:
            yield from self._walk(node.children[len(node.keys)])

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def is_empty(self) -> bool:
        """True when the tree holds no items."""
        return self.root is None or not self.root.keys

    # ----------------------------------------------------------------- insert

    def insert(self, item: Any) -> None:
        """Insert *item* in name order."""
        root = self.root
        if root is None:
            self.root = BTreeNode(leaf=True, keys=[item])
            return

        if len(root.keys) == self._max_keys:
            new_root = BTreeNode(leaf=False, children=[root])
            self.root = new_root
            self._split_child(new_root, 0)
            idx = 1 if item.name > new_root.keys[0].name else 0
            self._insert_non_full(new_root.children[idx], item)
        else:
            self._insert_non_full(root, item)

    def _split_child(self, parent: BTreeNode, idx: int) -> None:
        t = self.min_degree
        child = parent.children[idx]
        right = BTreeNode(leaf=child.leaf, keys=child.keys[t:])
        median = child.keys[t - 1]
        child.keys = child.keys[: t - 1]
        if not child.leaf:
            right.children = child.children[t:]
            child.children = child.children[:t]
        parent.children.insert(idx + 1, right)
        parent.keys.insert(idx, median)

    def _insert_non_full(self, node: BTreeNode, item: Any) -> None:
        while True:
            idx = bisect_right(node.keys, item.name, key=_name_of)
            if node.leaf:
                node.keys.insert(idx, item)
                return
            if len(node.children[idx].keys) == self._max_keys:
                self._split_child(node, idx)
                if item.name > node.keys[idx].name:
                    idx += 1
            node = node.children[idx]

    # ----------------------------------------------------------------- delete

    def delete(self, name: str) -> None:
        """Remove the item called *name*; a missing name is ignored."""
        root = self.root
        if root is None:
            return
        self._remove(root, name)
        if not root.keys:
            self.root = None if root.leaf else root.children[0]

    def _remove(self, node: BTreeNode, name: str) -> None:
        t = self.min_degree
        idx = bisect_left(node.keys, name, key=_name_of)

        if idx < len(node.keys) and node.keys[idx].name == name:
            if node.leaf:
                del node.keys[idx]
            elif len(node.children[idx].keys) >= t:
                pred = self._predecessor(node, idx)
                node.keys[idx] = pred
                self._remove(node.children[idx], pred.name)
            elif len(node.children[idx + 1].keys) >= t:
                succ = self._successor(node, idx)
                node.keys[idx] = succ
                self._remove(node.children[idx + 1], succ.name)
            else:
                self._merge(node, idx)
                self._remove(node.children[idx], name)
            return

        if node.leaf:
            return

        was_last = idx == len(node.keys)
        if len(node.children[idx].keys) < t:
            self._fill(node, idx)
        if was_last and idx > len(node.keys):
            self._remove(node.children[idx - 1], name)
        else:
            self._remove(node.children[idx], name)

    @staticmethod
    def _predecessor(node: BTreeNode, idx: int) -> Any:
        cur = node.children[idx]
        while not cur.leaf:
            cur = cur.children[-1]
        return cur.keys[-1]

    @staticmethod
    def _successor(node: BTreeNode, idx: int) -> Any:
        cur = node.children[idx + 1]
        while not cur.leaf:
            cur = cur.children[0]
        return cur.keys[0]

    def _fill(self, node: BTreeNode, idx: int) -> None:
        t = self.min_degree
        if idx != 0 and len(node.children[idx - 1].keys) >= t:
            self._borrow_from_prev(node, idx)
        elif idx != len(node.keys) and len(node.children[idx + 1].keys) >= t:
            self._borrow_from_next(node, idx)
        elif idx != len(node.keys):
            self._merge(node, idx)
        else:
            self._merge(node, idx - 1)

    @staticmethod
    def _borrow_from_prev(node: BTreeNode, idx: int) -> None:
        child = node.children[idx]
        sibling = node.children[idx - 1]
        child.keys.insert(0, node.keys[idx - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        node.keys[idx - 1] = sibling.keys.pop()

    @staticmethod
    def _borrow_from_next(node: BTreeNode, idx: int) -> None:
        child = node.children[idx]
        sibling = node.children[idx + 1]
        child.keys.append(node.keys[idx])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        node.keys[idx] = sibling.keys.pop(0)

    @staticmethod
    def _merge(node: BTreeNode, idx: int) -> None:
        child = node.children[idx]
        sibling = node.children.pop(idx + 1)
        child.keys.append(node.keys.pop(idx))
        child.keys.extend(sibling.keys)
        if not child.leaf:
            child.children.extend(sibling.children)