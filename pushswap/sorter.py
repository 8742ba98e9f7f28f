"""The cost-driven strategy that sorts stack A using stack B as scratch space."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.parse import has_duplicates
from pushswap.stack import Machine, Node, Operation, Stack

_FORWARD = 0
_BACKWARD = 1


def _rotation_cost(pos: int, size: int) -> tuple[int, int]:
    """Return how many rotations bring ``pos`` to the top, and their direction."""
    if pos <= size // 2:
        return pos, _FORWARD
    return size - pos, _BACKWARD


def sort_three(machine: Machine) -> None:
    """Sort stack A of the machine when it holds at most three elements."""
    a = machine.a
    smallest = a.min_node()
    largest = a.max_node()
    if largest.pos == 0:
        machine.apply(Operation.RA)
    elif largest.pos == 1:
        machine.apply(Operation.RRA)
    if smallest.pos == 1:
        machine.apply(Operation.SA)


def find_target(a: Stack, node: Node) -> Node:
    """Return the node of ``a`` holding the smallest value above ``node``'s value.

    Raises :class:`LookupError` when no value in ``a`` is larger.
    """
    target: Node | None = None
    best_gap = 0
    for candidate in a:
        gap = candidate.value - node.value
        if gap > 0 and (target is None or gap < best_gap):
            target = candidate
            best_gap = gap
    if target is None:
        raise LookupError(f"no value above {node.value} in stack")
    return target


def _set_cost_a(a: Stack, node: Node) -> None:
    smallest = a.min_node()
    largest = a.max_node()
    if node.value < smallest.value or node.value > largest.value:
        target = smallest
    else:
        target = find_target(a, node)
    node.cost_a, node.op_a = _rotation_cost(target.pos, len(a))


def set_cost(a: Stack, b: Stack) -> None:
    """Work out, for every node of ``b``, what it costs to insert it into ``a``."""
    size_b = len(b)
    for node in b:
        _set_cost_a(a, node)
        node.cost_b, node.op_b = _rotation_cost(node.pos, size_b)
        if node.op_a == node.op_b:
            node.cost_t = max(node.cost_a, node.cost_b)
        else:
            node.cost_t = node.cost_a + node.cost_b


def cheapest_move(machine: Machine) -> None:
    """Insert the cheapest node of stack B into its place in stack A.

    The costs must have been computed by :func:`set_cost` beforehand.
    """
    node = min(machine.b, key=lambda candidate: candidate.cost_t)
    cost_a, cost_b = node.cost_a, node.cost_b
    if node.op_a == node.op_b:
        shared = min(cost_a, cost_b)
        both = Operation.RR if node.op_a == _FORWARD else Operation.RRR
        for _ in range(shared):
            machine.apply(both)
        cost_a -= shared
        cost_b -= shared
    move_a = Operation.RA if node.op_a == _FORWARD else Operation.RRA
    move_b = Operation.RB if node.op_b == _FORWARD else Operation.RRB
    for _ in range(cost_a):
        machine.apply(move_a)
    for _ in range(cost_b):
        machine.apply(move_b)
    machine.apply(Operation.PA)


def first_push(machine: Machine) -> None:
    """Move all but three elements of A to B, the lower half of ranks first.

    The nodes of A must carry their ranks (see :meth:`Stack.assign_index`).
    """
    a = machine.a
    size = len(a)
    half = size // 2
    while size > half and size > 3:
        top = next(iter(a))
        if top.index <= half:
            machine.apply(Operation.PB)
            size -= 1
        else:
            machine.apply(Operation.RA)
    while size > 3:
        machine.apply(Operation.PB)
        size -= 1


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the moves that sort ``values`` (top first) into ascending order.

    An already sorted input needs no moves. Repeated values raise
    :class:`ValueError`.
    """
    machine = Machine(values)
    if has_duplicates(machine.a.values()):
        raise ValueError("values must be distinct")
    if machine.a.is_sorted():
        return []
    machine.a.assign_index()
    first_push(machine)
    sort_three(machine)
    while len(machine.b):
        set_cost(machine.a, machine.b)
        cheapest_move(machine)
    a = machine.a
    while not a.is_sorted():
        if a.min_node().pos <= len(a) // 2:
            machine.apply(Operation.RA)
        else:
            machine.apply(Operation.RRA)
    return machine.operations