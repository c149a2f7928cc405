import os
import time
from pathlib import Path

import pytest
import requests

from e2elog.adapters.requests import RecordingHTTPAdapter
from e2elog.core.coverage import Coverage
from e2elog.openapi.loader import load_contract
from e2elog.storage.ndjson_storage import NdjsonStorage

pytestmark = pytest.mark.skipif(
    os.environ.get("E2ELOG_INTEGRATION") != "1",
    reason="set E2ELOG_INTEGRATION=1 to run against a petstore container",
)

PETSTORE_IMAGE = "swaggerapi/petstore3"
OPENAPI_PATH = "/api/v3/openapi.json"
API_PREFIX = "/api/v3"


def wait_for_petstore(base_url: str) -> None:
    deadline = time.time() + 30
    while time.time() < deadline:
        try:
            response = requests.get(f"{base_url}{OPENAPI_PATH}", timeout=2)
            if response.status_code == 200:
                return
        except requests.RequestException:
            time.sleep(0.5)
    raise RuntimeError("petstore container did not become ready")


def test_petstore_session_coverage(tmp_path: Path) -> None:
    from testcontainers.core.container import DockerContainer

    with DockerContainer(PETSTORE_IMAGE).with_exposed_ports(8080) as container:
        host = container.get_container_host_ip()
        port = container.get_exposed_port(8080)
        base_url = f"http://{host}:{port}"
        wait_for_petstore(base_url)

        spec_response = requests.get(f"{base_url}{OPENAPI_PATH}", timeout=5)
        spec_response.raise_for_status()
        spec_path = tmp_path / "spec.json"
        spec_path.write_text(spec_response.text)

        storage = NdjsonStorage(tmp_path / "logs.ndjson")
        session = requests.Session()
        session.mount(base_url, RecordingHTTPAdapter(storage=storage))

        pet_payload = {
            "id": 1001,
            "name": "Test Pet",
            "photoUrls": ["https://example.com/photo"],
            "status": "available",
        }

        session.post(f"{base_url}/api/v3/pet", json=pet_payload, timeout=5)
        session.get(f"{base_url}/api/v3/pet/1001", timeout=5)
        session.get(
            f"{base_url}/api/v3/pet/findByStatus",
            params={"status": "available"},
            timeout=5,
        )
        session.get(f"{base_url}/api/v3/store/inventory", timeout=5)

    coverage = Coverage(load_contract(spec_path))
    summary = coverage.load(storage, API_PREFIX)

    covered = {(x.operation_id, x.status_code) for x in coverage.covered}
    assert ("getPetById", "200") in covered
    assert ("findPetsByStatus", "200") in covered
    assert ("getInventory", "200") in covered
    assert 0 < summary.total_matched < summary.total
