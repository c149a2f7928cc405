from e2elog.core.log_record import LogRecord
from e2elog.core.base_storage import Storage


class InMemoryStorage(Storage):
    def __init__(self, records: list[LogRecord] | None = None) -> None:
        self.records: list[LogRecord] = list(records or [])

    def store(self, record: LogRecord) -> None:
        self.records.append(record)

    def load(self) -> list[LogRecord]:
        return self.records
