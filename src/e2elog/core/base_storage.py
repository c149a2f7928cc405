from collections.abc import Iterable
from typing import Protocol

from e2elog.core.log_record import LogRecord


class Storage(Protocol):
    """Interface of a log source.

    Adapters submit observed requests to the storage backend.
    The coverage run replays whatever ``load`` yields, in a single pass.
    """

    def store(self, record: LogRecord) -> None:
        """Store a single log record."""
        ...

    def load(self) -> Iterable[LogRecord]:
        """Load the log records from the storage"""
        ...
