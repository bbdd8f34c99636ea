"""
Parsing of JSON-lines resource usage logs into per-application totals
"""

import json
import logging
import os
from collections.abc import Iterable

from .engine import Statistics, ValidationError
from .models import LogRecord

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("cpu_time", "io_wait")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ParseError(ValueError):
    """A log line could not be turned into a LogRecord."""

    def __init__(self, message: str, lineno: int | None = None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class InvalidFieldError(ParseError):
    """A field is missing or has the wrong type."""

    def __init__(self, field: str, message: str | None = None, lineno: int | None = None):
        super().__init__(message or f"missing or invalid field {field!r}", lineno)
        self.field = field


def _is_int(value) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def parse_record(line: str) -> LogRecord:
    """Parse one JSON log line.

    Args:
        line: A single JSON object, e.g. ``{"app": "web", "cpu_time": 10}``

    Returns:
        LogRecord with ``None`` for any optional field that is absent or null

    Raises:
        ParseError: if the line is not a JSON object
        InvalidFieldError: if ``app`` is missing/empty or a time is not an integer
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")

    app = data.get("app")
    if not isinstance(app, str) or not app:
        raise InvalidFieldError("app")

    times = {}
    for field in OPTIONAL_FIELDS:
        value = data.get(field)
        if value is not None and not _is_int(value):
            raise InvalidFieldError(field, f"field {field!r} must be an integer, got {value!r}")
        if value is not None and not INT64_MIN <= value <= INT64_MAX:
            raise InvalidFieldError(field, f"field {field!r} is out of 64-bit range: {value}")
        times[field] = value

    return LogRecord(app=app, **times)


def fold_lines(lines: Iterable[str | bytes], stats: Statistics | None = None) -> Statistics:
    """Parse lines in order and fold each record into ``stats``.

    Blank lines are skipped. The first bad line aborts the whole run; records
    before it remain in ``stats`` but callers should treat the result as failed.

    Args:
        lines: Raw log lines, e.g. an open file. Bytes lines are decoded as UTF-8.
        stats: Accumulator to fold into; a new one is created if omitted

    Returns:
        The populated Statistics
    """
    if stats is None:
        stats = Statistics()

    folded = 0
    for lineno, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(f"invalid UTF-8: {e.reason} at byte {e.start}", lineno) from e

        if not line.strip():
            logger.debug(f"Skipping blank line {lineno}")
            continue

        try:
            record = parse_record(line)
        except ParseError as e:
            e.lineno = lineno
            raise

        try:
            stats.add(record.app, record.cpu_time or 0, record.io_wait or 0)
        except ValidationError as e:
            raise ValidationError(f"line {lineno}: {e}") from e
        folded += 1

    logger.debug(f"Folded {folded} records into {len(stats)} applications")
    return stats


def group_totals(json_path: str | os.PathLike) -> Statistics:
    """Read a JSON-lines log file and total the times per application.

    Raises:
        OSError: if the file cannot be opened or read
        ParseError: on the first malformed line, including invalid UTF-8
        ValidationError: on the first negative time
    """
    logger.debug(f"Opening {json_path}")
    # Decoded per line so an encoding error carries its line number
    with open(json_path, "rb") as f:
        return fold_lines(f)
