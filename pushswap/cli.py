"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parse import InputError, parse_arguments
from pushswap.sorter import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from the arguments and print one sorting move per line.

    Returns 0 on success and 1 when there is nothing to sort or the input is
    invalid; invalid input also prints ``Error`` on standard error.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not values:
        return 1
    for op in push_swap(values):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())