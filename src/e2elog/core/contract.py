"""API contract model consumed by the endpoint extractor.

The OpenAPI loader fills a :class:`Contract` through ``add_operation``.
Library callers that already hold a decoded OpenAPI-shaped mapping, for
example one fetched from a running service, build it with
:meth:`Contract.from_dict` without going through a file.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

HTTP_METHODS = frozenset(
    {"GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "PATCH", "TRACE"}
)


@dataclass(frozen=True)
class ContractOperation:
    operation_id: str | None
    status_codes: tuple[str, ...] = ()


@dataclass
class Contract:
    """Format independent view of an API description.

    ``paths`` maps a path template to the operations declared on it, keyed by
    upper-case HTTP method.
    """

    paths: dict[str, dict[str, ContractOperation]] = field(default_factory=dict)

    def add_operation(
        self,
        path: str,
        method: str,
        operation_id: str | None,
        status_codes: list[str] | tuple[str, ...],
    ) -> None:
        operations = self.paths.setdefault(path, {})
        operations[method.upper()] = ContractOperation(
            operation_id=operation_id,
            status_codes=tuple(str(code) for code in status_codes),
        )

    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> "Contract":
        """Build a contract from a decoded ``paths`` -> method -> operation mapping."""
        contract = cls()
        for path, path_item in (document.get("paths") or {}).items():
            if not isinstance(path_item, Mapping):
                continue
            contract.paths.setdefault(path, {})
            for method, operation in path_item.items():
                if method.upper() not in HTTP_METHODS:
                    continue
                if not isinstance(operation, Mapping):
                    continue
                contract.add_operation(
                    path,
                    method,
                    operation.get("operationId"),
                    list(operation.get("responses") or {}),
                )
        return contract
