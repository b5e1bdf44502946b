"""The two stacks and the eight moves that act on them."""

from __future__ import annotations

from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, with every move that took effect logged in ``moves``.

    Index 0 of each list is the top of the stack.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _record(self, name: str) -> None:
        self.moves.append(name)

    @staticmethod
    def _swap(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[int]) -> bool:
        if not stack:
            return False
        stack.append(stack.pop(0))
        return True

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> bool:
        if not stack:
            return False
        stack.insert(0, stack.pop())
        return True

    @staticmethod
    def _push(source: list[int], target: list[int]) -> bool:
        if not source:
            return False
        target.insert(0, source.pop(0))
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``; nothing happens with fewer than two."""
        if self._swap(self.a):
            self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``; nothing happens with fewer than two."""
        if self._swap(self.b):
            self._record("sb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a):
            self._record("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b):
            self._record("rb")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._reverse_rotate(self.a):
            self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._reverse_rotate(self.b):
            self._record("rrb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if self._push(self.b, self.a):
            self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if self._push(self.a, self.b):
            self._record("pb")