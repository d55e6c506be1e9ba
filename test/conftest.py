"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings at import time
- API fixtures: the real app wired against a throwaway SQLite database and the
  console mail backend
- Repository fixtures for SQLite-backed integration tests

Architecture:
- Unit tests (@pytest.mark.unit): in-memory fakes or mocks of the ports
- Integration tests: real SQLAlchemy repositories on aiosqlite, one file per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# core_setting builds `settings` at import time and refuses to start without
# SECRET_KEY.
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['SECRET_KEY'] = 'test-secret-key-not-for-production'
    os.environ['ENVIRONMENT'] = 'development'
    os.environ['EMAIL_BACKEND'] = 'console'
    # bcrypt's minimum cost keeps the suite fast
    os.environ['BCRYPT_ROUNDS'] = '4'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault(
        'DATABASE_URL', f'sqlite+aiosqlite:///{test_log_dir / "clubverse_test.db"}'
    )


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.main import app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.database.orm_db_setting import Database  # noqa: E402
from src.platform.security.rate_limiter import limiter  # noqa: E402
from src.service.clubverse.driven_adapter.notification.console_notifier import (  # noqa: E402
    ConsoleNotifier,
)
from src.service.clubverse.driven_adapter.repo.reservation_command_repo_impl import (  # noqa: E402
    ReservationCommandRepoImpl,
)
from src.service.clubverse.driven_adapter.repo.reservation_query_repo_impl import (  # noqa: E402
    ReservationQueryRepoImpl,
)
from src.service.clubverse.driven_adapter.repo.user_command_repo_impl import (  # noqa: E402
    UserCommandRepoImpl,
)
from src.service.clubverse.driven_adapter.repo.user_query_repo_impl import (  # noqa: E402
    UserQueryRepoImpl,
)


# =============================================================================
# API fixtures
# =============================================================================
@pytest.fixture
def console_notifier() -> ConsoleNotifier:
    return ConsoleNotifier()


@pytest.fixture
def api_database(tmp_path: Path) -> Database:
    return Database(url=f'sqlite+aiosqlite:///{tmp_path / "clubverse_api.db"}')


@pytest.fixture
def app_overrides(
    api_database: Database, console_notifier: ConsoleNotifier
) -> Generator[dict[str, Any], None, None]:
    """Point the container at the per-test database and console mail backend.

    Singletons are reset on both sides so repositories never keep a session
    factory from another test.
    """
    container.reset_singletons()
    # Every TestClient request comes from the same address
    limiter.reset()
    with (
        container.database.override(providers.Object(api_database)),
        container.notifier.override(providers.Object(console_notifier)),
    ):
        yield {'database': api_database, 'notifier': console_notifier}
    container.reset_singletons()


@pytest.fixture
def client(app_overrides: dict[str, Any]) -> Generator[TestClient, None, None]:
    # Context manager runs the lifespan: wiring, create_all, and draining on exit
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# =============================================================================
# Repository fixtures (SQLite via aiosqlite)
# =============================================================================
@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    db = Database(url=f'sqlite+aiosqlite:///{tmp_path / "clubverse_repo.db"}')
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def user_command_repo(database: Database) -> UserCommandRepoImpl:
    return UserCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def user_query_repo(database: Database) -> UserQueryRepoImpl:
    return UserQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def reservation_command_repo(database: Database) -> ReservationCommandRepoImpl:
    return ReservationCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def reservation_query_repo(database: Database) -> ReservationQueryRepoImpl:
    return ReservationQueryRepoImpl(session_factory=database.session)
