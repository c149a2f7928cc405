from dataclasses import dataclass, field
from typing import Any

from e2elog.core.endpoint import Endpoint


@dataclass(frozen=True)
class SummaryStats:
    total: int
    total_matched: int
    coverage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "total_matched": self.total_matched,
            "coverage": self.coverage,
        }


@dataclass(frozen=True)
class Summary:
    total: int
    total_matched: int
    coverage: float
    endpoints: list[Endpoint] = field(default_factory=list)

    def stats(self) -> SummaryStats:
        return SummaryStats(
            total=self.total,
            total_matched=self.total_matched,
            coverage=self.coverage,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "total_matched": self.total_matched,
            "endpoints": [endpoint.to_dict() for endpoint in self.endpoints],
            "coverage": self.coverage,
        }
