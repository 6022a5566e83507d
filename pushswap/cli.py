"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .output import print_error
from .parsing import InputError, assign_index, check_repeated, create_elements, handle_args
from .sorting import sort_stacks
from .stacks import Stacks

__all__ = ["main"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers in ``argv`` and print one move per line.

    Invalid input is reported on standard error and exits with status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        words = handle_args(args)
        check_repeated(words)
        elements = create_elements(words)
    except InputError as error:
        print_error(str(error))
    assign_index(elements)
    sort_stacks(Stacks(elements))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())