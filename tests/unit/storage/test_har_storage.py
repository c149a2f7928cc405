import json
from pathlib import Path

import pytest

from e2elog.core.errors import LogSourceError
from e2elog.core.log_record import LogRecord
from e2elog.storage.har_storage import HarStorage


def har_entry(method: str, url: str, status: int) -> dict:
    return {
        "request": {"method": method, "url": url, "queryString": []},
        "response": {"status": status},
        "time": 12.5,
    }


def write_har(path: Path, *entries: dict) -> Path:
    path.write_text(json.dumps({"log": {"entries": list(entries)}}))
    return path


def test_loads_entries_from_file(tmp_path: Path) -> None:
    har = write_har(
        tmp_path / "session.har",
        har_entry("get", "https://example.com/api/v1/users/1", 200),
        har_entry("GET", "https://example.com/aborted", 0),
    )

    assert HarStorage(har).load() == [
        LogRecord("GET", "https://example.com/api/v1/users/1", 200)
    ]


def test_loads_every_har_in_directory(tmp_path: Path) -> None:
    write_har(tmp_path / "a.har", har_entry("GET", "https://x/a", 200))
    write_har(tmp_path / "b.har", har_entry("POST", "https://x/b", 201))
    (tmp_path / "notes.txt").write_text("ignored")

    assert [x.url for x in HarStorage(tmp_path).load()] == ["https://x/a", "https://x/b"]


def test_store_is_not_supported(tmp_path: Path) -> None:
    with pytest.raises(NotImplementedError):
        HarStorage(tmp_path).store(LogRecord("GET", "/", 200))


def test_invalid_archive_raises(tmp_path: Path) -> None:
    bad = tmp_path / "bad.har"
    bad.write_text("{}")

    with pytest.raises(LogSourceError):
        HarStorage(bad).load()
    with pytest.raises(LogSourceError):
        HarStorage(tmp_path / "missing.har").load()


def test_malformed_entries_are_skipped(tmp_path: Path) -> None:
    har = write_har(
        tmp_path / "session.har",
        har_entry("GET", "https://x/a", 200),
        {"request": {"method": "GET", "url": "https://x/b"}},
        {"request": {"method": 7, "url": "https://x/c"}, "response": {"status": 200}},
        {"request": {"method": "GET", "url": "https://x/d"}, "response": {"status": "ok"}},
        "not an entry",
    )
    storage = HarStorage(har)

    assert storage.load() == [LogRecord("GET", "https://x/a", 200)]
    assert storage.skipped_entries == 4
