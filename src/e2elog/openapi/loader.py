import logging
from pathlib import Path

import openapi_parser

from e2elog.core.contract import Contract
from e2elog.core.errors import ContractLoadError

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE = "default"


def load_contract(path: str | Path) -> Contract:
    """Parse an OpenAPI 3 document into a :class:`Contract`."""
    path = Path(path)
    if not path.is_file():
        raise ContractLoadError(path, "no such file")
    try:
        spec = openapi_parser.parse(str(path), strict_enum=False)
    except Exception as err:
        raise ContractLoadError(path, str(err) or type(err).__name__) from err

    contract = Contract()
    for spec_path in spec.paths:
        contract.paths.setdefault(spec_path.url, {})
        for operation in spec_path.operations:
            status_codes = [
                DEFAULT_RESPONSE if response.is_default else str(response.code)
                for response in operation.responses
                if response.is_default or response.code is not None
            ]
            contract.add_operation(
                spec_path.url,
                operation.method.name,
                operation.operation_id,
                status_codes,
            )
    logger.debug("Loaded %d paths from %s", len(contract.paths), path)
    return contract
