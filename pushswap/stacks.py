"""The two stacks and the eleven operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum


class StackError(Exception):
    """Raised when an operation cannot be performed on the current stacks."""


class Operation(str, Enum):
    """The instructions understood by the stacks."""

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


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if the values are in strictly ascending order."""
    return all(left < right for left, right in zip(values, values[1:]))


def _require(stack: deque, count: int, name: str) -> None:
    if len(stack) < count:
        raise StackError(f"stack {name} has fewer than {count} element(s)")


def _swap(stack: deque) -> None:
    stack[0], stack[1] = stack[1], stack[0]


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    When ``record`` is true every operation performed is appended to
    ``operations``; a combined operation is recorded once.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        record: bool = False,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.record = record
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, operation: Operation) -> None:
        if self.record:
            self.operations.append(operation)

    def apply(self, operation: Operation | str) -> None:
        """Perform the operation given by value or by name."""
        try:
            op = Operation(operation)
        except ValueError:
            raise StackError(f"unknown operation: {operation!r}") from None
        getattr(self, op.value)()

    def sa(self) -> None:
        _require(self.a, 2, "a")
        _swap(self.a)
        self._log(Operation.SA)

    def sb(self) -> None:
        _require(self.b, 2, "b")
        _swap(self.b)
        self._log(Operation.SB)

    def ss(self) -> None:
        _require(self.a, 2, "a")
        _require(self.b, 2, "b")
        _swap(self.a)
        _swap(self.b)
        self._log(Operation.SS)

    def pa(self) -> None:
        _require(self.b, 1, "b")
        self.a.appendleft(self.b.popleft())
        self._log(Operation.PA)

    def pb(self) -> None:
        _require(self.a, 1, "a")
        self.b.appendleft(self.a.popleft())
        self._log(Operation.PB)

    def ra(self) -> None:
        _require(self.a, 2, "a")
        self.a.rotate(-1)
        self._log(Operation.RA)

    def rb(self) -> None:
        _require(self.b, 2, "b")
        self.b.rotate(-1)
        self._log(Operation.RB)

    def rr(self) -> None:
        _require(self.a, 2, "a")
        _require(self.b, 2, "b")
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._log(Operation.RR)

    def rra(self) -> None:
        _require(self.a, 2, "a")
        self.a.rotate(1)
        self._log(Operation.RRA)

    def rrb(self) -> None:
        _require(self.b, 2, "b")
        self.b.rotate(1)
        self._log(Operation.RRB)

    def rrr(self) -> None:
        _require(self.a, 2, "a")
        _require(self.b, 2, "b")
        self.a.rotate(1)
        self.b.rotate(1)
        self._log(Operation.RRR)