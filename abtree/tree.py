"""In-memory (a,b)-tree for integer keys.

Every non-root node holds between ``a - 1`` and ``b - 1`` keys and every leaf
sits at the same depth. Insertion splits full nodes on the way down and
deletion tops up thin nodes on the way down, so neither operation ever has to
climb back up the tree. Duplicate keys are accepted and stored side by side.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import List, Optional, Set, TextIO, Tuple

from abtree.errors import InvalidParameters, InvariantViolation
from abtree.node import Internal, Leaf, Node
from config import Config

logger = logging.getLogger(__name__)


class ABTree:
    """Multiway balanced search tree supporting lookup, insert and remove."""

    def __init__(self, a: int = Config.min_branching, b: int = Config.max_branching) -> None:
        if a < 2 or a > b // 2:
            raise InvalidParameters(a, b)
        self.a = a
        self.b = b
        self._root: Node = Leaf()
        self._size = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"ABTree(a={self.a}, b={self.b}, size={self._size}, height={self.height})"

    @property
    def height(self) -> int:
        """Number of levels, 1 for a tree whose root is a leaf."""
        height = 1
        node = self._root
        while isinstance(node, Internal):
            node = node.children[0]
            height += 1
        return height

    def contains(self, key: int) -> bool:
        node = self._root
        while True:
            found, index = self._search(node.keys, key)
            if found:
                return True
            if isinstance(node, Leaf):
                return False
            node = node.children[self._clamp(node, index)]

    def insert(self, key: int) -> None:
        """Insert ``key``; an equal key already in the tree is kept as well."""
        root = self._root
        if self._is_full(root):
            # Full root: grow a new one above it before descending.
            new_root = Internal(children=[root])
            self._split_child(new_root, 0)
            self._root = new_root
            logger.debug(f"Root split on insert of {key}, height is now {self.height}")
        self._insert_non_full(self._root, key)
        self._size += 1

    def remove(self, key: int) -> bool:
        """Remove one occurrence of ``key``. Returns False and leaves the tree untouched if absent."""
        if not self.contains(key):
            return False

        self._remove_from(self._root, key)
        self._size -= 1

        root = self._root
        if isinstance(root, Internal) and not root.keys and len(root.children) == 1:
            self._root = root.children[0]
            logger.debug(f"Root collapsed on remove of {key}, height is now {self.height}")
        return True

    def dump(self) -> str:
        """Render the tree one node per line, indented two spaces per level."""
        lines: List[str] = []
        self._dump_node(self._root, 0, lines)
        return "\n".join(lines)

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        print(self.dump(), file=file)

    def validate(self) -> None:
        """Raise InvariantViolation if the tree breaks any structural invariant."""
        leaf_depths: Set[int] = set()
        total = self._validate_node(self._root, 0, None, None, leaf_depths)
        if len(leaf_depths) > 1:
            raise InvariantViolation(f"Leaves found at different depths: {sorted(leaf_depths)}")
        if total != self._size:
            raise InvariantViolation(f"Tree holds {total} keys but size is {self._size}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _search(keys: List[int], key: int) -> Tuple[bool, int]:
        """Return whether ``key`` is in ``keys`` and its leftmost insertion point."""
        index = bisect_left(keys, key)
        return index < len(keys) and keys[index] == key, index

    @staticmethod
    def _clamp(node: Internal, index: int) -> int:
        last = len(node.children) - 1
        if index > last:
            logger.warning(f"Child index {index} out of range for {len(node.children)} children, clamping to {last}")
            return last
        return index

    def _is_full(self, node: Node) -> bool:
        return len(node.keys) >= self.b - 1

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------
    def _insert_non_full(self, node: Node, key: int) -> None:
        while isinstance(node, Internal):
            found, index = self._search(node.keys, key)
            if found:
                index += 1
            index = self._clamp(node, index)

            if self._is_full(node.children[index]):
                self._split_child(node, index)
                # The promoted separator now sits at keys[index]; larger keys belong to the new right half.
                if key > node.keys[index]:
                    index += 1
                index = self._clamp(node, index)

            node = node.children[index]

        _, index = self._search(node.keys, key)
        node.keys.insert(index, key)

    def _split_child(self, parent: Internal, index: int) -> None:
        full = parent.children[index]
        mid = len(full.keys) // 2

        sibling: Node
        if isinstance(full, Internal):
            sibling = Internal(full.keys[mid:], full.children[mid + 1 :])
            full.children = full.children[: mid + 1]
        else:
            sibling = Leaf(full.keys[mid:])
        full.keys = full.keys[:mid]

        separator = sibling.keys.pop(0)
        parent.keys.insert(index, separator)
        parent.children.insert(index + 1, sibling)
        logger.debug(f"Split child {index}: {full.keys} | {separator} | {sibling.keys}")

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------
    def _remove_from(self, node: Node, key: int) -> bool:
        found, index = self._search(node.keys, key)

        if isinstance(node, Leaf):
            if found:
                node.keys.pop(index)
            return found

        if found:
            self._remove_from_internal(node, index, key)
            return True

        index = self._clamp(node, index)
        if len(node.children[index].keys) < self.a:
            self._fill_child(node, index)
            # Borrowing and merging move separators, so search this node again.
            return self._remove_from(node, key)
        return self._remove_from(node.children[index], key)

    def _remove_from_internal(self, node: Internal, index: int, key: int) -> None:
        left = node.children[index]
        right = node.children[index + 1]

        if len(left.keys) >= self.a:
            predecessor = self._largest_key(left)
            node.keys[index] = predecessor
            self._remove_from(left, predecessor)
        elif len(right.keys) >= self.a:
            successor = self._smallest_key(right)
            node.keys[index] = successor
            self._remove_from(right, successor)
        else:
            self._merge(node, index)
            self._remove_from(node.children[index], key)

    @staticmethod
    def _largest_key(node: Node) -> int:
        while isinstance(node, Internal):
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _smallest_key(node: Node) -> int:
        while isinstance(node, Internal):
            node = node.children[0]
        return node.keys[0]

    def _fill_child(self, parent: Internal, index: int) -> None:
        """Give ``parent.children[index]`` at least ``a`` keys by borrowing or merging."""
        if index > 0 and len(parent.children[index - 1].keys) >= self.a:
            self._borrow_from_left(parent, index)
        elif index < len(parent.children) - 1 and len(parent.children[index + 1].keys) >= self.a:
            self._borrow_from_right(parent, index)
        elif index > 0:
            self._merge(parent, index - 1)
        else:
            self._merge(parent, index)

    def _borrow_from_left(self, parent: Internal, index: int) -> None:
        child = parent.children[index]
        left = parent.children[index - 1]

        child.keys.insert(0, parent.keys[index - 1])
        parent.keys[index - 1] = left.keys.pop()
        if isinstance(child, Internal) and isinstance(left, Internal):
            child.children.insert(0, left.children.pop())
        logger.debug(f"Child {index} borrowed from left sibling, separator is now {parent.keys[index - 1]}")

    def _borrow_from_right(self, parent: Internal, index: int) -> None:
        child = parent.children[index]
        right = parent.children[index + 1]

        child.keys.append(parent.keys[index])
        parent.keys[index] = right.keys.pop(0)
        if isinstance(child, Internal) and isinstance(right, Internal):
            child.children.append(right.children.pop(0))
        logger.debug(f"Child {index} borrowed from right sibling, separator is now {parent.keys[index]}")

    def _merge(self, parent: Internal, index: int) -> None:
        """Fold ``children[index + 1]`` and the separator between them into ``children[index]``."""
        left = parent.children[index]
        right = parent.children.pop(index + 1)

        left.keys.append(parent.keys.pop(index))
        left.keys.extend(right.keys)
        if isinstance(left, Internal) and isinstance(right, Internal):
            left.children.extend(right.children)
        logger.debug(f"Merged children {index} and {index + 1} into {left.keys}")

    # ------------------------------------------------------------------
    # Debug output
    # ------------------------------------------------------------------
    def _dump_node(self, node: Node, depth: int, lines: List[str]) -> None:
        indent = Config.dump_indent * depth
        keys = "[" + ", ".join(str(key) for key in node.keys) + "]"
        if isinstance(node, Internal):
            lines.append(f"{indent}{Config.internal_label}: {keys}")
            for child in node.children:
                self._dump_node(child, depth + 1, lines)
        else:
            lines.append(f"{indent}{Config.leaf_label}: {keys}")

    def _validate_node(
        self,
        node: Node,
        depth: int,
        low: Optional[int],
        high: Optional[int],
        leaf_depths: Set[int],
    ) -> int:
        keys = node.keys
        if any(keys[i] > keys[i + 1] for i in range(len(keys) - 1)):
            raise InvariantViolation(f"Keys out of order at depth {depth}: {keys}")
        if len(keys) > self.b - 1:
            raise InvariantViolation(f"Node at depth {depth} holds {len(keys)} keys, more than {self.b - 1}")
        if node is not self._root and len(keys) < self.a - 1:
            raise InvariantViolation(f"Node at depth {depth} holds {len(keys)} keys, fewer than {self.a - 1}")
        if keys and low is not None and keys[0] < low:
            raise InvariantViolation(f"Key {keys[0]} at depth {depth} is below separator {low}")
        if keys and high is not None and keys[-1] > high:
            raise InvariantViolation(f"Key {keys[-1]} at depth {depth} is above separator {high}")

        if isinstance(node, Leaf):
            leaf_depths.add(depth)
            return len(keys)

        if len(node.children) != len(keys) + 1:
            raise InvariantViolation(
                f"Internal node at depth {depth} has {len(keys)} keys but {len(node.children)} children"
            )

        total = len(keys)
        for i, child in enumerate(node.children):
            child_low = keys[i - 1] if i > 0 else low
            child_high = keys[i] if i < len(keys) else high
            total += self._validate_node(child, depth + 1, child_low, child_high, leaf_depths)
        return total
