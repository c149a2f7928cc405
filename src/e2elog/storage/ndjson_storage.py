import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from e2elog.core.base_storage import Storage
from e2elog.core.errors import LogSourceError
from e2elog.core.log_record import LogRecord, parse_log_line

logger = logging.getLogger(__name__)


class NdjsonStorage(Storage):
    """Newline-delimited JSON log, one ``{method, url, status_code}`` per line."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.skipped_lines = 0

    def store(self, record: LogRecord) -> None:
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(record.to_dict()) + "\n")
        except OSError as err:
            raise LogSourceError(self.path, err.strerror or str(err)) from err

    def load(self) -> Iterator[LogRecord]:
        try:
            handle = self.path.open("rb")
        except OSError as err:
            raise LogSourceError(self.path, err.strerror or str(err)) from err
        return self._iter_records(handle)

    def _iter_records(self, handle: BinaryIO) -> Iterator[LogRecord]:
        self.skipped_lines = 0
        with handle:
            line_number = 0
            while True:
                try:
                    line = handle.readline()
                except OSError as err:
                    raise LogSourceError(
                        self.path, f"read failed after line {line_number}: {err}"
                    ) from err
                if not line:
                    return
                line_number += 1
                if not line.strip():
                    continue
                record = parse_log_line(line)
                if record is None:
                    self.skipped_lines += 1
                    logger.debug("Skipping malformed line %d of %s", line_number, self.path)
                    continue
                yield record
