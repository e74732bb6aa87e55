"""Node variants of the (a,b)-tree.

A node is either a ``Leaf`` (keys only) or an ``Internal`` node (keys plus one
more child than it has keys). The engine narrows on the concrete class, so a
child list only exists where the type says it does.
"""

from __future__ import annotations

from typing import List, Optional, Union


class _Node:
    """Base class shared by leaf and internal nodes."""

    __slots__ = ("keys",)

    def __init__(self, keys: Optional[List[int]] = None) -> None:
        self.keys: List[int] = keys if keys is not None else []

    def is_leaf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={self.keys})"


class Leaf(_Node):
    """Leaf node holding an ordered key list."""

    __slots__ = ()

    def is_leaf(self) -> bool:
        return True


class Internal(_Node):
    """Internal node holding separator keys and child references."""

    __slots__ = ("children",)

    def __init__(self, keys: Optional[List[int]] = None, children: Optional[List[Node]] = None) -> None:
        super().__init__(keys)
        self.children: List[Node] = children if children is not None else []


Node = Union[Leaf, Internal]
