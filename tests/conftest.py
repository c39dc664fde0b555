import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ["ENVIRONMENT"] = "test"
os.environ["DEFAULT_USER"] = "Reina"
os.environ["RATE_LIMIT_PER_MINUTE"] = "1000"

from line_talk_viewer.main import create_app

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixture_path():
    return FIXTURES / "line_chat.txt"


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
