"""A general tree whose nodes hold a value and an ordered list of branches."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

__all__ = ["Tree"]

T = TypeVar("T")


class Tree(Generic[T]):
    """A node of a tree: a value, ordered child branches and a parent link."""

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value
        self._branches: List[Tree[T]] = []
        self._parent: Optional[Tree[T]] = None

    @property
    def parent(self) -> Optional[Tree[T]]:
        return self._parent

    @property
    def branches(self) -> tuple[Tree[T], ...]:
        return tuple(self._branches)

    def _sibling(self, offset: int) -> Optional[Tree[T]]:
        if self._parent is None:
            return None
        siblings = self._parent._branches
        position = next(i for i, node in enumerate(siblings) if node is self)
        target = position + offset
        if 0 <= target < len(siblings):
            return siblings[target]
        return None

    @property
    def previous_branch(self) -> Optional[Tree[T]]:
        return self._sibling(-1)

    @property
    def next_branch(self) -> Optional[Tree[T]]:
        return self._sibling(1)

    def __iter__(self) -> Iterator[Tree[T]]:
        """Walk depth-first from this node.

        Once this node's subtree is exhausted the walk climbs to the ancestors
        and continues with any of their branches not yet visited, stopping at
        the root.
        """
        node = self
        visited = {self}
        yield node
        while True:
            following = next((b for b in node._branches if b not in visited), None)
            if following is None:
                parent = node._parent
                while parent is not None:
                    following = next((b for b in parent._branches if b not in visited), None)
                    if following is not None or parent.is_root():
                        break
                    parent = parent._parent
                if following is None:
                    return
            visited.add(following)
            node = following
            yield node

    def __getitem__(self, index: int) -> Tree[T]:
        return self._branches[index]

    def __len__(self) -> int:
        return len(self._branches)

    def __repr__(self) -> str:
        return f"Tree({self.value!r}, branches={len(self._branches)})"

    def is_leaf(self) -> bool:
        return not self._branches

    def is_root(self) -> bool:
        return self._parent is None

    def is_only_branch(self) -> bool:
        return self.previous_branch is None and self.next_branch is None

    def has_previous_branch(self) -> bool:
        return self.previous_branch is not None

    def has_next_branch(self) -> bool:
        return self.next_branch is not None

    def clear_branches(self) -> None:
        """Detach every branch, last first."""
        while not self.is_leaf():
            self.pop_branch()

    def add_branch(self, index: int, value: T) -> Tree[T]:
        """Insert a new branch holding ``value`` at ``index`` and return it."""
        if not 0 <= index <= len(self._branches):
            raise IndexError(f"branch index {index} out of range")
        child: Tree[T] = Tree(value)
        child._parent = self
        self._branches.insert(index, child)
        return child

    def remove_branch(self, index: int) -> None:
        """Detach the branch at ``index``."""
        if not 0 <= index < len(self._branches):
            raise IndexError(f"branch index {index} out of range")
        child = self._branches.pop(index)
        child._parent = None

    def push_branch(self, value: T) -> Tree[T]:
        """Append a new branch holding ``value`` and return it."""
        return self.add_branch(len(self._branches), value)

    def pop_branch(self) -> Tree[T]:
        """Detach and return the last branch."""
        if not self._branches:
            raise IndexError("pop from a leaf")
        child = self._branches.pop()
        child._parent = None
        return child