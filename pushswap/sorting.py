"""The sorting strategy: small cases by hand, larger ones by cheapest insertion."""

from __future__ import annotations

from collections.abc import Sequence

from .stacks import Machine, Node, Stack, find_cheapest, find_min, is_sorted


def set_current_position(stack: Sequence[Node]) -> None:
    """Record each node's index and whether it lies in the upper half."""
    center_line = len(stack) // 2
    for index, node in enumerate(stack):
        node.current_index = index
        node.is_above_median = index <= center_line


def _set_target_nodes(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give every node of b the smallest larger node of a, else a's minimum."""
    for b_node in b:
        larger = [node for node in a if node.value > b_node.value]
        target = min(larger, key=lambda node: node.value, default=None)
        b_node.target_node = target if target is not None else find_min(a)


def _set_prices(a: Sequence[Node], b: Sequence[Node]) -> None:
    len_a = len(a)
    len_b = len(b)
    for node in b:
        price = node.current_index if node.is_above_median else len_b - node.current_index
        target = node.target_node
        if target.is_above_median:
            price += target.current_index
        else:
            price += len_a - target.current_index
        node.push_price = price


def _set_cheapest(b: Sequence[Node]) -> None:
    if not b:
        return
    cheapest = min(b, key=lambda node: node.push_price)
    cheapest.is_cheapest = True


def init_nodes(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Compute positions, targets, prices and the cheapest node of b."""
    set_current_position(a)
    set_current_position(b)
    _set_target_nodes(a, b)
    _set_prices(a, b)
    _set_cheapest(b)


def _stack_of(machine: Machine, stack_name: str) -> Stack:
    if stack_name == "a":
        return machine.a
    if stack_name == "b":
        return machine.b
    raise ValueError(f"unknown stack: {stack_name!r}")


def finish_rotation(machine: Machine, top_node: Node, stack_name: str) -> None:
    """Rotate the named stack until ``top_node`` is on top."""
    stack = _stack_of(machine, stack_name)
    if stack_name == "a":
        forward, backward = machine.ra, machine.rra
    else:
        forward, backward = machine.rb, machine.rrb
    while stack[0] is not top_node:
        if top_node.is_above_median:
            forward()
        else:
            backward()


def _rotate_both(machine: Machine, cheapest: Node, step) -> None:
    while machine.a[0] is not cheapest.target_node and machine.b[0] is not cheapest:
        step()
    set_current_position(machine.a)
    set_current_position(machine.b)


def _move_nodes(machine: Machine) -> None:
    cheapest = find_cheapest(machine.b)
    target = cheapest.target_node
    if cheapest.is_above_median and target.is_above_median:
        _rotate_both(machine, cheapest, machine.rr)
    elif not cheapest.is_above_median and not target.is_above_median:
        _rotate_both(machine, cheapest, machine.rrr)
    finish_rotation(machine, cheapest, "b")
    finish_rotation(machine, target, "a")
    machine.pa()


def handle_three(machine: Machine) -> None:
    """Sort the top three of a (a holds exactly three) with at most two moves."""
    a = machine.a
    if len(a) < 3:
        return
    biggest = max(a, key=lambda node: node.value)
    if biggest is a[0]:
        machine.ra()
    elif biggest is a[1]:
        machine.rra()
    if a[0].value > a[1].value:
        machine.sa()


def handle_five(machine: Machine) -> None:
    """Push the smallest nodes of a to b until three remain."""
    while len(machine.a) > 3:
        init_nodes(machine.a, machine.b)
        finish_rotation(machine, find_min(machine.a), "a")
        machine.pb()


def push_swap(machine: Machine) -> None:
    """Sort a stack of more than three numbers into a."""
    len_a = len(machine.a)
    if len_a == 5:
        handle_five(machine)
    else:
        for _ in range(len_a - 3):
            machine.pb()
    handle_three(machine)
    while machine.b:
        init_nodes(machine.a, machine.b)
        _move_nodes(machine)
    set_current_position(machine.a)
    smallest = find_min(machine.a)
    step = machine.ra if smallest.is_above_median else machine.rra
    while machine.a[0] is not smallest:
        step()


def sort_stack(machine: Machine) -> None:
    """Sort stack a in ascending order, choosing the strategy by its length."""
    if is_sorted(machine.a):
        return
    length = len(machine.a)
    if length == 2:
        machine.sa()
    elif length == 3:
        handle_three(machine)
    else:
        push_swap(machine)