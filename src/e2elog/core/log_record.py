import json
from typing import Any, NamedTuple


class LogRecord(NamedTuple):
    method: str
    url: str
    status_code: int

    def to_dict(self) -> dict[str, Any]:
        return {"method": self.method, "url": self.url, "status_code": self.status_code}


def parse_log_line(line: str | bytes) -> LogRecord | None:
    """Parse one line of a newline-delimited JSON log.

    Returns ``None`` for anything that is not a JSON object carrying a string
    ``method``, a string ``url`` and an integer ``status_code``.
    """
    try:
        data = json.loads(line)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    method = data.get("method")
    url = data.get("url")
    status_code = data.get("status_code")
    if not isinstance(method, str) or not method:
        return None
    if not isinstance(url, str):
        return None
    # bool is a subclass of int
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        return None
    return LogRecord(method=method.upper(), url=url, status_code=status_code)
