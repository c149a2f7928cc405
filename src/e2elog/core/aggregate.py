from dataclasses import replace

from e2elog.core.endpoint import Endpoint
from e2elog.core.summary import Summary


def aggregate(endpoints: list[Endpoint]) -> Summary:
    """Reduce endpoints to counts and the ``matched / total`` coverage ratio.

    An empty contract has a coverage of 0.0. The summary holds copies of the
    endpoints, so later replays do not change it.
    """
    snapshot = [replace(endpoint) for endpoint in endpoints]
    total = len(snapshot)
    total_matched = sum(1 for endpoint in snapshot if endpoint.touched)
    coverage = total_matched / total if total else 0.0
    return Summary(
        total=total,
        total_matched=total_matched,
        coverage=coverage,
        endpoints=snapshot,
    )
