import io

import pytest

from pushswap.stacks import Machine, Node, find_cheapest, find_min, is_sorted


def values(stack):
    return [node.value for node in stack]


def make(numbers):
    out = io.StringIO()
    return Machine(numbers, out), out


def test_initial_state():
    machine, out = make([5, 3, 9])
    assert values(machine.a) == [5, 3, 9]
    assert list(machine.b) == []
    assert out.getvalue() == ""


def test_sa_swaps_top_two():
    machine, out = make([1, 2, 3])
    machine.sa()
    assert values(machine.a) == [2, 1, 3]
    assert out.getvalue() == "sa\n"


@pytest.mark.parametrize("op", ["sa", "ra", "rra"])
def test_single_element_operations_do_nothing_but_print(op):
    machine, out = make([7])
    getattr(machine, op)()
    assert values(machine.a) == [7]
    assert out.getvalue() == op + "\n"


def test_sa_twice_is_identity():
    numbers = [4, 8, 15, 16]
    machine, _ = make(numbers)
    machine.sa()
    machine.sa()
    assert values(machine.a) == numbers


def test_pb_then_pa_restores():
    numbers = [3, 1, 2]
    machine, out = make(numbers)
    machine.pb()
    assert values(machine.b) == numbers[:1]
    assert values(machine.a) == numbers[1:]
    machine.pa()
    assert values(machine.a) == numbers
    assert list(machine.b) == []
    assert out.getvalue() == "pb\npa\n"


def test_push_from_empty_still_prints():
    machine, out = make([1, 2])
    machine.pa()
    assert values(machine.a) == [1, 2]
    assert out.getvalue() == "pa\n"


def test_ra_moves_top_to_bottom():
    numbers = [1, 2, 3, 4]
    machine, _ = make(numbers)
    machine.ra()
    assert values(machine.a) == numbers[1:] + numbers[:1]


def test_rra_moves_bottom_to_top():
    numbers = [1, 2, 3, 4]
    machine, _ = make(numbers)
    machine.rra()
    assert values(machine.a) == numbers[-1:] + numbers[:-1]


def test_ra_then_rra_is_identity():
    numbers = [9, -2, 5, 0, 11]
    machine, out = make(numbers)
    machine.ra()
    machine.rra()
    assert values(machine.a) == numbers
    assert out.getvalue() == "ra\nrra\n"


def test_full_rotation_cycle_returns_to_start():
    numbers = [6, 2, 8, 1]
    machine, _ = make(numbers)
    for _ in numbers:
        machine.ra()
    assert values(machine.a) == numbers


def test_combined_operations_act_on_both_stacks():
    machine, out = make([1, 2, 3, 4, 5, 6])
    machine.pb()
    machine.pb()
    machine.pb()
    b_before = values(machine.b)
    a_before = values(machine.a)
    machine.ss()
    assert values(machine.a) == a_before[1::-1] + a_before[2:]
    assert values(machine.b) == b_before[1::-1] + b_before[2:]
    machine.rr()
    machine.rrr()
    machine.ss()
    assert values(machine.a) == a_before
    assert values(machine.b) == b_before
    assert out.getvalue() == "pb\npb\npb\nss\nrr\nrrr\nss\n"


def test_b_only_operations():
    machine, out = make([1, 2, 3])
    machine.pb()
    machine.pb()
    b_before = values(machine.b)
    machine.sb()
    machine.rb()
    machine.rrb()
    machine.sb()
    assert values(machine.b) == b_before
    assert machine.operations == ["pb", "pb", "sb", "rb", "rrb", "sb"]
    assert out.getvalue() == "pb\npb\nsb\nrb\nrrb\nsb\n"


def test_nodes_keep_identity_through_moves():
    machine, _ = make([10, 20, 30])
    first = machine.a[0]
    machine.ra()
    assert machine.a[-1] is first
    machine.pb()
    machine.rra()
    machine.pb()
    assert machine.b[0] is first


def test_default_output_goes_to_stdout(capsys):
    machine = Machine([2, 1])
    machine.sa()
    assert capsys.readouterr().out == "sa\n"


def test_find_min():
    machine, _ = make([5, -3, 8, 0])
    assert find_min(machine.a) is machine.a[1]
    assert find_min([]) is None


def test_find_min_picks_first_of_equal_values():
    nodes = [Node(4), Node(1), Node(1)]
    assert find_min(nodes) is nodes[1]


def test_find_cheapest():
    nodes = [Node(1), Node(2), Node(3)]
    assert find_cheapest(nodes) is None
    nodes[1].is_cheapest = True
    nodes[2].is_cheapest = True
    assert find_cheapest(nodes) is nodes[1]


@pytest.mark.parametrize(
    "numbers, expected",
    [([], True), ([1], True), ([1, 2, 3], True), ([1, 3, 2], False), ([3, 2, 1], False)],
)
def test_is_sorted(numbers, expected):
    assert is_sorted(Node(n) for n in numbers) is expected


def test_nodes_compare_by_identity():
    machine, _ = make([1, 1])
    first, second = machine.a
    assert machine.a.index(second) == 1
    machine.sa()
    assert machine.a.index(first) == 1
    assert machine.a[0] is second