from dataclasses import dataclass
from typing import Any


@dataclass
class Endpoint:
    """One declared response of an operation: path x method x status code.

    Only ``touched`` changes after extraction, and only from False to True.
    """

    path: str
    method: str
    status_code: str
    operation_id: str
    touched: bool = False

    @property
    def response_key(self) -> tuple[str, str, str]:
        return (self.operation_id, self.method, self.status_code)

    def mark_touched(self) -> None:
        self.touched = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "method": self.method,
            "status_code": self.status_code,
            "operation_id": self.operation_id,
            "touched": self.touched,
        }
