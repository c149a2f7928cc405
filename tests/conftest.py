import json
from pathlib import Path

import pytest


USERS_OPENAPI_SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Users", "version": "1.0.0"},
    "paths": {
        "/users/{id}": {
            "get": {
                "operationId": "getUser",
                "parameters": [
                    {
                        "name": "id",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "integer"},
                    }
                ],
                "responses": {"200": {"description": "ok"}},
            }
        }
    },
}


@pytest.fixture
def users_spec(tmp_path: Path) -> Path:
    spec_file = tmp_path / "openapi.json"
    spec_file.write_text(json.dumps(USERS_OPENAPI_SPEC))
    return spec_file


@pytest.fixture
def write_logs(tmp_path: Path):
    def _write(*lines: dict | str) -> Path:
        log_file = tmp_path / "logs.ndjson"
        log_file.write_text(
            "".join(
                (line if isinstance(line, str) else json.dumps(line)) + "\n"
                for line in lines
            )
        )
        return log_file

    return _write
