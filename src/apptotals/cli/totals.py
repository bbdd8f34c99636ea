"""
apptotals totals - Print total time per application for each log file

Examples:
    apptotals totals app.log
    apptotals totals a.log b.log --combined -o totals.csv
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..engine import Statistics, ValidationError
from ..log_parser import ParseError, group_totals

logger = logging.getLogger(__name__)
console = Console()

# Failures that end a run; anything else is a bug and should traceback
LOAD_ERRORS = (OSError, ParseError, ValidationError)


def add_totals_subparser(subparsers):
    """Add totals subcommand to the parser."""
    parser = subparsers.add_parser(
        "totals",
        help="Print total time per application",
        description="Sum cpu_time and io_wait per application for each JSON-lines log file",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=str,
        help="JSON-lines log files",
    )
    parser.add_argument(
        "--combined",
        action="store_true",
        help="Merge all files and print a single set of totals",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Also write the totals to this CSV file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.set_defaults(func=cmd_totals)
    return parser


def configure_logging(verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING)


def report_error(path, error: Exception):
    """Print a load failure for ``path``."""
    console.print(f"[red]Error:[/red] {escape(str(path))}: {escape(str(error))}", soft_wrap=True)


def print_totals(stats: Statistics):
    """Print one ``<name>: <total_time>`` line per application."""
    for stat in stats.values():
        console.print(f"{stat.name}: {stat.total_time}", markup=False, highlight=False, soft_wrap=True)


def write_csv(stats: Statistics, output: str):
    output_path = Path(output)
    stats.to_dataframe().to_csv(output_path, index=False)
    logger.debug(f"Wrote {len(stats)} rows to {output_path}")
    console.print(f"[dim]Saved:[/dim] [cyan]{escape(str(output_path))}[/cyan]")


def cmd_totals(args):
    """Execute totals command."""
    configure_logging(args.verbose)

    combined = Statistics()
    stats = None

    for json_path in args.paths:
        console.print(f"Opening {json_path}", markup=False, highlight=False, soft_wrap=True)
        try:
            stats = group_totals(json_path)
        except LOAD_ERRORS as e:
            report_error(json_path, e)
            return 1

        if args.combined:
            combined.merge(stats)
        else:
            print_totals(stats)

    if args.combined:
        stats = combined
        print_totals(stats)

    if args.output:
        try:
            write_csv(stats, args.output)
        except OSError as e:
            report_error(args.output, e)
            return 1

    return 0
