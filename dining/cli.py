"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from dining.args import ArgumentError, parse_args
from dining.simulation import Simulation


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except ArgumentError as error:
        print(error)
        return 1
    Simulation(args).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())