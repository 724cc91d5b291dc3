"""Root pytest configuration.

Test Structure:
    tests/
    ├── threadit_config/       # Settings loading
    ├── threadit_auth/         # Hashing, token and session stores
    │   └── unit/
    ├── threadit/              # Application, API and persistence
    │   ├── unit/              # Fast, isolated tests
    │   └── integration/       # FastAPI TestClient over SQLite
    └── fakes.py               # In-memory Redis double
"""

import pytest

from tests.fakes import InMemoryRedis
from threadit_auth import PasswordHashingService
from threadit_config import clear_settings_cache


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Cheap argon2 parameters so hashing does not slow the suite down."""
    return PasswordHashingService(time_cost=1, memory_cost=8, parallelism=1)
