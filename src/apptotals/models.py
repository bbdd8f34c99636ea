"""
Domain models for resource usage logs
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LogRecord:
    """A single parsed log line."""

    app: str
    # None means the field was absent in the source, not a measured zero
    cpu_time: int | None = None
    io_wait: int | None = None


@dataclass
class ApplicationStat:
    """Running totals for one application."""

    name: str = ""
    cpu_time: int = 0
    io_wait: int = 0
    total_time: int = 0

    def update(self, cpu_time: int, io_wait: int) -> None:
        """Add CPU and IO times and recompute the total.

        >>> stat = ApplicationStat(name="foo", cpu_time=16, io_wait=78, total_time=94)
        >>> stat.update(22, 82)
        >>> stat.total_time
        198
        """
        self.cpu_time += cpu_time
        self.io_wait += io_wait
        self.total_time = self.cpu_time + self.io_wait

    def to_dict(self) -> dict:
        return asdict(self)
