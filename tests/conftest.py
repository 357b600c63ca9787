# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from telemetry_normalizer.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- A tmm-info response as returned by the device, before any reduction ---
@pytest.fixture
def tmm_payload():
    return {
        "kind": "tm:sys:tmm-info:tmm-infostats",
        "selfLink": "https://localhost/mgmt/tm/sys/tmm-info/stats",
        "entries": {
            "https://localhost/mgmt/tm/sys/tmm-info/0.0/stats": {
                "nestedStats": {
                    "entries": {
                        "tmm_0_cpuUtil": {"value": 5},
                        "tmm_1_cpuUtil": {"value": 7},
                        "memoryTotal": {"value": 100},
                        "status": {"description": "up"},
                    }
                }
            }
        },
    }
