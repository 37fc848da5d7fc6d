"""
pytest configuration and fixtures for Quotebook tests
"""

import json
import random
import shutil
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from api.app import create_app
from quotebook import QuoteStore
from utils.config_manager import UnifiedConfigManager


def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def test_config():
    """Test configuration fixture"""
    return {
        "api_config": {
            "host": "127.0.0.1",
            "port": 3001,
            "cors_origins": ["http://localhost:3000"]
        },
        "service_config": {
            "name": "quotebook-test",
            "greeting": "Hello from the test suite!"
        },
        "logging_config": {
            "level": "WARNING",
            "console_config": {"enabled": False}
        }
    }


@pytest.fixture
def config_dir(temp_dir, test_config):
    """Config directory holding a single config.json"""
    with open(temp_dir / "config.json", 'w', encoding='utf-8') as f:
        json.dump(test_config, f)
    return temp_dir


@pytest.fixture
def test_config_manager(config_dir, monkeypatch):
    """Config manager isolated from the PORT environment variable"""
    monkeypatch.delenv("PORT", raising=False)
    return UnifiedConfigManager(str(config_dir))


@pytest.fixture
def quote_store():
    """Fresh store with a seeded random source"""
    return QuoteStore(rng=random.Random(1234))


@pytest.fixture
def app(quote_store, test_config_manager):
    """Application wired to the fresh store and the test config"""
    return create_app(store=quote_store, config=test_config_manager)


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)
