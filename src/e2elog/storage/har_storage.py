import json
import logging
from pathlib import Path
from collections.abc import Generator
from typing import Any

from e2elog.core.base_storage import Storage
from e2elog.core.errors import LogSourceError
from e2elog.core.log_record import LogRecord

logger = logging.getLogger(__name__)


class HarStorage(Storage):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.skipped_entries = 0

    def store(self, record: LogRecord) -> None:
        raise NotImplementedError(
            "HarStorage is readonly. You can only use it to load HAR files."
        )

    def load(self) -> list[LogRecord]:
        self.skipped_entries = 0
        if self.path.is_file():
            return list(self._iter_records(self.path))
        elif self.path.is_dir():
            records = []
            for filepath in sorted(self.path.glob("*.har")):
                records.extend(self._iter_records(filepath))
            return records
        raise LogSourceError(self.path, "neither a valid file path nor a directory")

    def _iter_records(self, filepath: Path) -> Generator[LogRecord]:
        try:
            data = json.loads(filepath.read_text("utf8"))
            entries = data["log"]["entries"]
        except (OSError, ValueError, KeyError, TypeError) as err:
            raise LogSourceError(filepath, f"not a HAR archive ({err})") from err
        if not isinstance(entries, list):
            raise LogSourceError(filepath, "not a HAR archive (entries is not a list)")
        for number, entry in enumerate(entries, start=1):
            record = _entry_to_record(entry)
            if record is None:
                self.skipped_entries += 1
                logger.debug("Skipping malformed entry %d of %s", number, filepath)
                continue
            yield record


def _entry_to_record(entry: Any) -> LogRecord | None:
    try:
        request = entry["request"]
        method = request["method"]
        url = request["url"]
        status = entry["response"]["status"]
    except (KeyError, TypeError):
        return None
    if not isinstance(method, str) or not method or not isinstance(url, str):
        return None
    if not isinstance(status, int) or isinstance(status, bool):
        return None
    # browsers record aborted requests with status 0
    if not status:
        return None
    return LogRecord(method=method.upper(), url=url, status_code=status)
