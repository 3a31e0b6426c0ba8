"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .parsing import InputError, parse_arguments
from .sorting import sort_stack
from .stacks import Machine


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    machine = Machine(numbers, sys.stdout)
    sort_stack(machine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())