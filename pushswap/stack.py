"""Stacks of integers and the moves the push-swap puzzle allows on them."""

from __future__ import annotations

import enum
from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One element of a stack, carrying the bookkeeping the sorter needs."""

    value: int
    pos: int = 0
    index: int = 0
    cost_a: int = 0
    cost_b: int = 0
    cost_t: int = 0
    op_a: int = 0
    op_b: int = 0


class Stack:
    """A stack of nodes whose top is the first element.

    Every move renumbers the ``pos`` of the nodes so that the top is at 0.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)
        self._renumber()

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def _renumber(self) -> None:
        for pos, node in enumerate(self._nodes):
            node.pos = pos

    def _require(self, count: int, move: str) -> None:
        if len(self._nodes) < count:
            raise IndexError(f"{move} needs at least {count} element(s)")

    def swap(self) -> None:
        """Exchange the two top elements."""
        self._require(2, "swap")
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        self._renumber()

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._require(1, "rotate")
        self._nodes.rotate(-1)
        self._renumber()

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._require(1, "reverse rotate")
        self._nodes.rotate(1)
        self._renumber()

    def push_to(self, other: Stack) -> None:
        """Move the top element of this stack onto the top of ``other``."""
        self._require(1, "push")
        other._nodes.appendleft(self._nodes.popleft())
        self._renumber()
        other._renumber()

    def assign_index(self) -> None:
        """Give every node its rank among the values, starting at 0.

        Equal values share the rank of the first of them in sorted order.
        """
        ordered = sorted(node.value for node in self._nodes)
        for node in self._nodes:
            node.index = bisect_left(ordered, node.value)

    def is_sorted(self) -> bool:
        """Tell whether the values never decrease from top to bottom."""
        return all(
            upper.value <= lower.value
            for upper, lower in zip(self._nodes, list(self._nodes)[1:])
        )

    def min_node(self) -> Node:
        """Return the first node with the smallest index."""
        self._require(1, "min")
        best = self._nodes[0]
        for node in self._nodes:
            if node.index < best.index:
                best = node
        return best

    def max_node(self) -> Node:
        """Return the first node with the largest index."""
        self._require(1, "max")
        best = self._nodes[0]
        for node in self._nodes:
            if node.index > best.index:
                best = node
        return best


class Operation(str, enum.Enum):
    """The moves of the puzzle, named as they are written out."""

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


@dataclass
class Machine:
    """The two stacks of the puzzle and the moves made on them so far."""

    a: Stack
    b: Stack
    operations: list[Operation] = field(default_factory=list)

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations = []

    def apply(self, op: Operation | str) -> None:
        """Perform one move and record it."""
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            a.swap()
        elif op is Operation.SB:
            b.swap()
        elif op is Operation.SS:
            a.swap()
            b.swap()
        elif op is Operation.PA:
            b.push_to(a)
        elif op is Operation.PB:
            a.push_to(b)
        elif op is Operation.RA:
            a.rotate()
        elif op is Operation.RB:
            b.rotate()
        elif op is Operation.RR:
            a.rotate()
            b.rotate()
        elif op is Operation.RRA:
            a.reverse_rotate()
        elif op is Operation.RRB:
            b.reverse_rotate()
        else:
            a.reverse_rotate()
            b.reverse_rotate()
        self.operations.append(op)