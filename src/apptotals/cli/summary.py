"""
apptotals summary - Table of per-application totals across log files

Examples:
    apptotals summary app.log
    apptotals summary logs/*.log -v
"""

import logging

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..engine import Statistics
from ..log_parser import group_totals
from .totals import LOAD_ERRORS, configure_logging, report_error

logger = logging.getLogger(__name__)
console = Console()


def add_summary_subparser(subparsers):
    """Add summary subcommand to the parser."""
    parser = subparsers.add_parser(
        "summary",
        help="Show a table of per-application totals",
        description="Merge JSON-lines log files and show per-application totals and their distribution",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=str,
        help="JSON-lines log files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.set_defaults(func=cmd_summary)
    return parser


def build_totals_table(stats: Statistics, title: str) -> Table:
    """Applications sorted by total time, largest first."""
    table = Table(
        title=f"[bold]{escape(title)}[/bold]",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Application", style="bold")
    table.add_column("CPU Time", justify="right")
    table.add_column("I/O Wait", justify="right")
    table.add_column("Total", justify="right")

    for stat in sorted(stats.values(), key=lambda s: s.total_time, reverse=True):
        table.add_row(
            escape(stat.name),
            str(stat.cpu_time),
            str(stat.io_wait),
            str(stat.total_time),
        )

    table.add_section()
    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{sum(s.cpu_time for s in stats.values())}[/bold]",
        f"[bold]{sum(s.io_wait for s in stats.values())}[/bold]",
        f"[bold]{sum(s.total_time for s in stats.values())}[/bold]",
    )
    return table


def build_distribution_table(stats: Statistics) -> Table | None:
    summary = stats.summary()
    if summary is None:
        return None

    table = Table(title="Total Time per Application", box=box.ROUNDED)
    table.add_column("Apps", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("P95", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_row(
        str(summary.count),
        f"{summary.median:.1f}",
        f"{summary.mean:.1f}",
        f"{summary.p95:.1f}",
        str(summary.min),
        str(summary.max),
    )
    return table


def cmd_summary(args):
    """Execute summary command."""
    configure_logging(args.verbose)

    stats = Statistics()
    with console.status("[bold blue]Reading log files...", spinner="dots"):
        for json_path in args.paths:
            try:
                stats.merge(group_totals(json_path))
            except LOAD_ERRORS as e:
                report_error(json_path, e)
                return 1

    if not stats:
        console.print("[yellow]No records found[/yellow]")
        return 0

    logger.debug(f"Merged {len(args.paths)} files into {len(stats)} applications")

    title = args.paths[0] if len(args.paths) == 1 else f"{len(args.paths)} files"
    console.print()
    console.print(build_totals_table(stats, title))
    console.print()

    distribution = build_distribution_table(stats)
    if distribution is not None:
        console.print(distribution)
        console.print()

    return 0
