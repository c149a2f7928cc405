import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from e2elog.core.endpoint import Endpoint
from e2elog.core.log_record import LogRecord
from e2elog.core.matcher import RequestMatcher

logger = logging.getLogger(__name__)


@dataclass
class ReplayStats:
    records: int = 0
    unresolved: int = 0
    undeclared_status: int = 0
    touched: int = 0


def strip_url_prefix(url: str, prefix: str) -> str:
    """Remove a mount point such as ``/api/v1`` from the path of ``url``.

    Only whole path segments are stripped: ``/api/v10`` keeps its path when
    the prefix is ``/api/v1``.
    """
    prefix = prefix.rstrip("/")
    if not prefix:
        return url
    if url.startswith("/"):
        return _strip_path(url, prefix)
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.netloc:
        return url
    return urlunsplit(parts._replace(path=_strip_path(parts.path, prefix)))


def _strip_path(path: str, prefix: str) -> str:
    if not path.startswith(prefix):
        return path
    rest = path[len(prefix) :]
    if not rest:
        return "/"
    if rest[0] in "/?#":
        return rest if rest[0] == "/" else "/" + rest
    return path


def replay(
    records: Iterable[LogRecord],
    matcher: RequestMatcher,
    endpoints: list[Endpoint],
    strip_prefix: str = "",
) -> ReplayStats:
    """Mark every endpoint hit by ``records`` as touched.

    A record counts for an endpoint only when its request resolves to the
    endpoint's operation and its status code is one the operation declares.
    Records that do neither are skipped. Replaying is idempotent and the
    result does not depend on record order.
    """
    index: dict[tuple[str, str, str], Endpoint] = {}
    for endpoint in endpoints:
        index.setdefault(endpoint.response_key, endpoint)

    stats = ReplayStats()
    for record in records:
        stats.records += 1
        url = strip_url_prefix(record.url, strip_prefix)
        resolution = matcher.resolve(record.method, url)
        if not resolution.matched:
            stats.unresolved += 1
            logger.debug("No route for %s %s", record.method, record.url)
            continue
        endpoint = index.get(
            (resolution.operation_id, record.method, str(record.status_code))
        )
        if endpoint is None:
            stats.undeclared_status += 1
            logger.debug(
                "%s does not declare status %s",
                resolution.operation_id,
                record.status_code,
            )
            continue
        if not endpoint.touched:
            endpoint.mark_touched()
            stats.touched += 1

    logger.info(
        "Replayed %d records: %d newly touched, %d unresolved, %d undeclared status",
        stats.records,
        stats.touched,
        stats.unresolved,
        stats.undeclared_status,
    )
    return stats
