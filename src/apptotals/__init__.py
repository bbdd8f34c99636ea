"""
apptotals - Per-application CPU and I/O wait totals from JSON-lines logs
"""

from .engine import Statistics, TotalsSummary, ValidationError
from .log_parser import InvalidFieldError, ParseError, fold_lines, group_totals, parse_record
from .models import ApplicationStat, LogRecord

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ApplicationStat",
    "InvalidFieldError",
    "LogRecord",
    "ParseError",
    "Statistics",
    "TotalsSummary",
    "ValidationError",
    "fold_lines",
    "group_totals",
    "parse_record",
]
