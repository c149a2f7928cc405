import logging
import posixpath
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple
from urllib.parse import unquote, urlsplit

from e2elog.core.endpoint import Endpoint

logger = logging.getLogger(__name__)

TEMPLATE_VARIABLE = re.compile(r"\{[^/{}]+\}")
SEGMENT_PATTERN = "[^/]+"


class Resolution(NamedTuple):
    operation_id: str
    matched: bool


NO_MATCH = Resolution(operation_id="", matched=False)


@dataclass(frozen=True)
class Route:
    path: str
    method: str
    operation_id: str
    pattern: re.Pattern[str]
    variables: int

    @classmethod
    def compile(cls, path: str, method: str, operation_id: str) -> "Route":
        literals = TEMPLATE_VARIABLE.split(path)
        pattern = SEGMENT_PATTERN.join(re.escape(literal) for literal in literals)
        return cls(
            path=path,
            method=method.upper(),
            operation_id=operation_id,
            pattern=re.compile(pattern),
            variables=len(literals) - 1,
        )

    def matches(self, method: str, path: str) -> bool:
        return self.method == method and self.pattern.fullmatch(path) is not None


def canonical_path(raw_url: str) -> str | None:
    """Reduce a logged URL to the path a router would dispatch on.

    Scheme, host, query string and fragment are dropped and percent-escapes
    decoded. Returns ``None`` when the URL cannot be parsed or the path is not
    clean (a router answers those with a redirect, not the route).
    """
    try:
        parts = urlsplit(raw_url)
    except ValueError:
        return None
    path = unquote(parts.path) or "/"
    if not path.startswith("/"):
        path = "/" + path
    if _clean_path(path) != path:
        return None
    return path


def _clean_path(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    if path.endswith("/") and cleaned != "/":
        cleaned += "/"
    return cleaned


class RequestMatcher:
    """Route table resolving observed requests to operation ids.

    Routes with fewer template variables win over routes with more; among
    equally specific routes the first registered wins.
    """

    def __init__(self, routes: list[Route]) -> None:
        self.routes = routes
        self._ranked = sorted(routes, key=lambda route: route.variables)

    @classmethod
    def build(cls, endpoints: Iterable[Endpoint]) -> "RequestMatcher":
        routes: list[Route] = []
        registered: dict[tuple[str, str], str] = {}
        for endpoint in endpoints:
            key = (endpoint.path, endpoint.method)
            if key in registered:
                if registered[key] != endpoint.operation_id:
                    logger.warning(
                        "Ignoring %s %s for %s: route already bound to %s",
                        endpoint.method,
                        endpoint.path,
                        endpoint.operation_id,
                        registered[key],
                    )
                continue
            registered[key] = endpoint.operation_id
            routes.append(
                Route.compile(endpoint.path, endpoint.method, endpoint.operation_id)
            )
            logger.debug(
                "Registered route %s %s -> %s",
                endpoint.method,
                endpoint.path,
                endpoint.operation_id,
            )
        return cls(routes)

    def resolve(self, method: str, raw_url: str) -> Resolution:
        path = canonical_path(raw_url)
        if path is None:
            return NO_MATCH
        for route in self._ranked:
            if route.matches(method, path):
                return Resolution(operation_id=route.operation_id, matched=True)
        return NO_MATCH
