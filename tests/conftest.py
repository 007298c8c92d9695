"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
app at throwaway data files for every test.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from app.config import Environment, Settings, get_settings
from main import app
from test_fixtures import MOCK_MEALS, MOCK_INDEX_HTML


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory seeded with the mock catalog and an empty orders file."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "available-meals.json").write_text(json.dumps(MOCK_MEALS, indent=2))
    (directory / "orders.json").write_text("[]")
    return directory


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "public"
    (directory / "images").mkdir(parents=True)
    (directory / "index.html").write_text(MOCK_INDEX_HTML)
    (directory / "images" / "sushi.jpg").write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return directory


@pytest.fixture
def test_settings(data_dir: Path, public_dir: Path) -> Settings:
    return Settings(
        environment=Environment.TESTING,
        data_dir=data_dir,
        public_dir=public_dir,
        order_processing_delay_sec=0,
    )


@pytest.fixture
def client(test_settings: Settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
