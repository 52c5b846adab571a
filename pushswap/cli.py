"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, build_elements, parse_arguments
from pushswap.sorting import sort_from_left
from pushswap.stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        elements = build_elements(parse_arguments(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(elements, output=sys.stdout)
    if stacks.total:
        sort_from_left(stacks, 1, stacks.total)
    return 0


if __name__ == "__main__":
    sys.exit(main())