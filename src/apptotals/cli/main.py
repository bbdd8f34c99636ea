#!/usr/bin/env python3
"""
apptotals - Per-application resource totals CLI
"""

import argparse
import sys

from .summary import add_summary_subparser
from .totals import add_totals_subparser


def main(argv=None):
    """Main entry point for apptotals CLI."""
    parser = argparse.ArgumentParser(
        prog="apptotals",
        description="Total CPU time and I/O wait per application from JSON-lines logs",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_totals_subparser(subparsers)
    add_summary_subparser(subparsers)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
