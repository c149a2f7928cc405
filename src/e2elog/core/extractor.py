import logging

from e2elog.core.contract import Contract
from e2elog.core.endpoint import Endpoint

logger = logging.getLogger(__name__)


def extract_endpoints(contract: Contract) -> list[Endpoint]:
    """Flatten a contract into one untouched endpoint per declared response.

    Paths, methods and status codes are visited in sorted order so the result
    does not depend on how the contract stored them. Operations without an
    operation id cannot be resolved by the matcher and are left out.
    """
    endpoints: list[Endpoint] = []
    for path in sorted(contract.paths):
        operations = contract.paths[path]
        for method in sorted(operations):
            operation = operations[method]
            if not operation.operation_id:
                logger.warning(
                    "Skipping %s %s: operation has no operationId", method, path
                )
                continue
            for status_code in sorted(set(operation.status_codes)):
                endpoints.append(
                    Endpoint(
                        path=path,
                        method=method,
                        status_code=status_code,
                        operation_id=operation.operation_id,
                    )
                )
    logger.debug("Extracted %d endpoints from %d paths", len(endpoints), len(contract.paths))
    return endpoints
