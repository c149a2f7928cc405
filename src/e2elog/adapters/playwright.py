import re
from typing import cast
from urllib.parse import urlparse, ParseResult
from playwright.sync_api import Page as SyncPage, Request as SyncRequest

from e2elog.core.base_storage import Storage
from e2elog.core.log_record import LogRecord


class SyncRequestHandler:
    def __init__(self, storage: Storage, path_pattern: str | None = None) -> None:
        self.storage = storage
        self.path_pattern = re.compile(path_pattern) if path_pattern else None

    def register_on(self, page: SyncPage) -> None:
        page.on("requestfinished", self._capture_request)

    def _capture_request(self, request: SyncRequest) -> None:
        response = request.response()
        if not response:
            return
        parsed = cast(ParseResult, urlparse(request.url))
        if self.path_pattern and not self.path_pattern.match(parsed.path):
            return
        url = parsed.path or "/"
        if parsed.query:
            url = f"{url}?{parsed.query}"
        self.storage.store(
            LogRecord(method=request.method.upper(), url=url, status_code=response.status)
        )
