# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations. Each operation it performs is printed on its own line.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse-rotate `a`, `b`, or both: the bottom element goes to the top |

When the program finishes, `a` holds every number in ascending order and `b`
is empty.

Stacks of two or three numbers are sorted with a fixed short sequence. For
five numbers, the two smallest go to `b` first. For other sizes, all but three
numbers go to `b`. Each one then comes back to `a` at the position that costs
the fewest rotations.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments. The first argument is the top of
stack `a`:

```
push_swap 3 2 1
```

You can also give them as one argument, separated by spaces:

```
push_swap "4 67 3 87 23"
```

The output is the list of operations. For `3 2 1` it is:

```
ra
sa
```

If the input is already sorted, nothing is printed. The command can also be
run as `python -m pushswap.cli`.

### Errors

In these cases the program prints `Error` to standard error and exits with
status 1:

- an argument contains anything other than digits after an optional leading
  `+` or `-`
- a number lies outside the 32-bit signed integer range
- a number appears more than once

With no arguments, or with a single empty argument, it prints nothing and
exits with status 1.

## Using it as a library

```python
import io

from pushswap.parsing import parse_arguments
from pushswap.sorting import sort_stack
from pushswap.stacks import Machine

values = parse_arguments(["3", "2", "1"])
out = io.StringIO()
machine = Machine(values, out)
sort_stack(machine)
print(machine.operations)                      # ['ra', 'sa']
print([node.value for node in machine.a])      # [1, 2, 3]
```

- `pushswap.parsing.parse_arguments` turns the arguments into a list of
  integers. It raises `pushswap.parsing.InputError`, a `ValueError`, when the
  input is invalid.
- `pushswap.stacks.Machine` holds the stacks `a` and `b` as deques of `Node`
  objects, with the top of each stack at index 0. It has one method for each
  operation. Each operation is written to `out`, or to standard output when
  `out` is `None`, and is also added to `machine.operations`.
- `pushswap.sorting.sort_stack` sorts `machine.a` and chooses the strategy
  from the length of the stack.

## What it does not do

The package only produces a sequence of operations. It has no command that
reads a sequence of operations and checks whether that sequence sorts a given
input.

## Running the tests

```
pip install ".[test]"
pytest
```