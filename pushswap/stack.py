"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction, with its printed name as its value."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class PushSwap:
    """Stacks ``a`` and ``b``, top first, and the operations performed so far.

    Stack ``a`` starts with the given values and ``b`` starts empty. Every
    operation that is recorded is appended to ``operations``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, operation: Operation, record: bool) -> None:
        if record:
            self.operations.append(operation)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def sa(self, record: bool = True) -> None:
        """Swap the two top elements of ``a``; nothing happens with fewer than two."""
        if self._swap(self.a):
            self._record(Operation.SA, record)

    def sb(self, record: bool = True) -> None:
        """Swap the two top elements of ``b``; nothing happens with fewer than two."""
        if self._swap(self.b):
            self._record(Operation.SB, record)

    def ss(self) -> None:
        """Swap the tops of both stacks; always recorded."""
        self.sa(record=False)
        self.sb(record=False)
        self._record(Operation.SS, True)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record(Operation.PA, True)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record(Operation.PB, True)

    def ra(self, record: bool = True) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._record(Operation.RA, record)

    def rb(self, record: bool = True) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._record(Operation.RB, record)

    def rr(self) -> None:
        """Rotate both stacks upward. This combined rotation is never recorded."""
        self.ra(record=False)
        self.rb(record=False)

    def rra(self, record: bool = True) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._record(Operation.RRA, record)

    def rrb(self, record: bool = True) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._record(Operation.RRB, record)

    def rrr(self) -> None:
        """Rotate both stacks downward; always recorded."""
        self.rra(record=False)
        self.rrb(record=False)
        self._record(Operation.RRR, True)

    def apply(self, operation: Operation | str) -> None:
        """Perform an operation given as an ``Operation`` or its name."""
        op = Operation(operation)
        handlers = {
            Operation.SA: self.sa,
            Operation.SB: self.sb,
            Operation.SS: self.ss,
            Operation.PA: self.pa,
            Operation.PB: self.pb,
            Operation.RA: self.ra,
            Operation.RB: self.rb,
            Operation.RR: self.rr,
            Operation.RRA: self.rra,
            Operation.RRB: self.rrb,
            Operation.RRR: self.rrr,
        }
        handlers[op]()