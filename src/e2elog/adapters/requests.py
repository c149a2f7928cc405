from typing import Mapping, cast
from urllib.parse import ParseResult, urlparse

from requests import PreparedRequest, Response
from requests.adapters import HTTPAdapter, Retry

from e2elog.core.base_storage import Storage
from e2elog.core.log_record import LogRecord

MISSING = "UNKNOWN"


class RecordingHTTPAdapter(HTTPAdapter):
    """Transport adapter logging every request/response pair to a storage.

    Mount it on a ``requests.Session`` used by an end-to-end suite and the
    resulting log can be replayed against the API contract.
    """

    def __init__(
        self,
        storage: Storage,
        pool_connections: int = 10,
        pool_maxsize: int = 10,
        max_retries: Retry | int | None = 0,
        pool_block: bool = False,
    ) -> None:
        super().__init__(pool_connections, pool_maxsize, max_retries, pool_block)
        self.storage = storage

    def send(
        self,
        request: PreparedRequest,
        stream: bool = False,
        timeout: None | float | tuple[float, float] | tuple[float, None] = None,
        verify: bool | str = True,
        cert: None | bytes | str | tuple[bytes | str, bytes | str] = None,
        proxies: Mapping[str, str] | None = None,
    ) -> Response:
        parsed = cast(ParseResult, urlparse(request.url))
        response = super().send(request, stream, timeout, verify, cert, proxies)
        url = parsed.path or "/"
        if parsed.query:
            url = f"{url}?{parsed.query}"
        self.storage.store(
            LogRecord(
                method=(request.method or MISSING).upper(),
                url=url,
                status_code=response.status_code,
            )
        )
        return response
