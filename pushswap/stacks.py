"""The two stacks and the eleven operations that move numbers between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Deque, Optional, TextIO

Stack = Deque["Node"]


@dataclass(eq=False)
class Node:
    """One number on a stack, with the bookkeeping used by the sorter."""

    value: int
    current_index: int = 0
    push_price: int = 0
    is_above_median: bool = False
    is_cheapest: bool = False
    target_node: Optional["Node"] = None


def _swap(stack: Stack) -> None:
    if len(stack) < 2:
        return
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)


def _push(dest: Stack, src: Stack) -> None:
    if not src:
        return
    dest.appendleft(src.popleft())


def _rotate(stack: Stack) -> None:
    if len(stack) < 2:
        return
    stack.rotate(-1)


def _reverse_rotate(stack: Stack) -> None:
    if len(stack) < 2:
        return
    stack.rotate(1)


class Machine:
    """Stacks ``a`` and ``b``; every operation is written to ``out`` as it runs.

    The top of each stack is at index 0.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None):
        self.a: Stack = deque(Node(value) for value in values)
        self.b: Stack = deque()
        self.out = out
        self.operations: list[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = self.out if self.out is not None else sys.stdout
        stream.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of a and b at once."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.a, self.b)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.b, self.a)
        self._emit("pb")

    def ra(self) -> None:
        """Shift a up by one; the first element becomes the last."""
        _rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Shift b up by one; the first element becomes the last."""
        _rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate a and b at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Shift a down by one; the last element becomes the first."""
        _reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Shift b down by one; the last element becomes the first."""
        _reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate a and b at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")


def find_min(stack: Iterable[Node]) -> Optional[Node]:
    """Return the node holding the smallest value, or None for an empty stack."""
    return min(stack, key=lambda node: node.value, default=None)


def find_cheapest(stack: Iterable[Node]) -> Optional[Node]:
    """Return the first node flagged as cheapest, or None."""
    return next((node for node in stack if node.is_cheapest), None)


def is_sorted(stack: Iterable[Node]) -> bool:
    """Tell whether the values rise (or stay equal) from top to bottom."""
    values = [node.value for node in stack]
    return all(left <= right for left, right in zip(values, values[1:]))