"""Root conftest: real PostgreSQL fixtures using Testcontainers.

Provides a session-scoped PostgreSQL container so database seeding tests run
against genuine infrastructure rather than mocks.
"""
from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from testcontainers.postgres import PostgresContainer


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers to suppress PytestUnknownMarkWarning."""
    config.addinivalue_line("markers", "unit: Pure Python tests, no infrastructure")
    config.addinivalue_line("markers", "integration: Requires a real PostgreSQL container")


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Skip container-backed tests unless Testcontainers is enabled."""
    skip_no_containers = pytest.mark.skip(reason="Testcontainers disabled, set E2E_SEED_USE_TESTCONTAINERS=true")

    use_testcontainers = os.getenv("E2E_SEED_USE_TESTCONTAINERS", "false").lower() == "true"

    for item in items:
        if "integration" in item.keywords and not use_testcontainers:
            item.add_marker(skip_no_containers)


# ---------------------------------------------------------------------------
# Container fixtures (session-scoped, started once per run)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Start a real PostgreSQL container for the entire test session."""
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_url(postgres_container: PostgresContainer) -> str:
    """Async SQLAlchemy URL for the test container."""
    return postgres_container.get_connection_url().replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )


# ---------------------------------------------------------------------------
# Database engine fixture
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_engine(database_url: str) -> AsyncGenerator[object, None]:
    """Async engine on a clean e2e_users table.

    The table is dropped before each test so seeding counts start from zero.
    """
    from sqlalchemy import text
    from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

    engine: AsyncEngine = create_async_engine(database_url, echo=False, pool_pre_ping=True)

    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS e2e_users"))

    yield engine
    await engine.dispose()
