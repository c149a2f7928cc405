import logging
from pathlib import Path

from e2elog.core.aggregate import aggregate
from e2elog.core.base_storage import Storage
from e2elog.core.contract import Contract
from e2elog.core.endpoint import Endpoint
from e2elog.core.extractor import extract_endpoints
from e2elog.core.matcher import RequestMatcher
from e2elog.core.replay import ReplayStats, replay
from e2elog.core.summary import Summary
from e2elog.openapi.loader import load_contract
from e2elog.storage.ndjson_storage import NdjsonStorage

logger = logging.getLogger(__name__)


class Coverage:
    def __init__(self, contract: Contract) -> None:
        self.contract = contract
        self.endpoints: list[Endpoint] = extract_endpoints(contract)
        self.matcher = RequestMatcher.build(self.endpoints)
        self.last_replay: ReplayStats | None = None

    @property
    def covered(self) -> list[Endpoint]:
        return [endpoint for endpoint in self.endpoints if endpoint.touched]

    @property
    def uncovered(self) -> list[Endpoint]:
        return [endpoint for endpoint in self.endpoints if not endpoint.touched]

    def load(self, storage: Storage, strip_url_prefix: str = "") -> Summary:
        self.last_replay = replay(
            storage.load(), self.matcher, self.endpoints, strip_url_prefix
        )
        summary = aggregate(self.endpoints)
        logger.info(
            "Coverage %d/%d endpoints (%.1f%%)",
            summary.total_matched,
            summary.total,
            summary.coverage * 100,
        )
        return summary


def compute_coverage(
    openapi_path: str | Path, logs_path: str | Path, strip_url_prefix: str = ""
) -> Summary:
    """Coverage of the OpenAPI document at ``openapi_path`` by an NDJSON log."""
    coverage = Coverage(load_contract(openapi_path))
    return coverage.load(NdjsonStorage(logs_path), strip_url_prefix)
