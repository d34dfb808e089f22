"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
Shared store helpers live in tests/fixtures/db_fixtures.py.
"""

import os
import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring PostgreSQL (deselect with '-m \"not db\"')"
    )


@pytest.fixture(scope="session")
def test_database():
    """
    Session-scoped fixture that provides a PostgreSQL URL.

    Uses TEST_DATABASE_URL when it is set, otherwise starts a throwaway
    container with testcontainers. Tests are skipped when neither works.
    """
    external_url = os.environ.get("TEST_DATABASE_URL")
    if external_url:
        from tests import is_database_available
        if is_database_available():
            yield external_url
            return
        pytest.skip("External database not available")

    try:
        from testcontainers.postgres import PostgresContainer
    except ImportError:
        pytest.skip("testcontainers is not installed")

    try:
        postgres = PostgresContainer(
            image="postgres:16-alpine",
            username="testuser",
            password="testpass",
            dbname="jobly_test",
            driver="psycopg2"
        )
        postgres.start()
    except Exception as e:
        pytest.skip(f"Could not start test database container: {e}")

    print("\n✓ Test database started")
    try:
        yield postgres.get_connection_url()
    finally:
        postgres.stop()
        print("\n✓ Test database stopped")


@pytest.fixture
def postgres_manager(test_database):
    """A DatabaseManager over a freshly created and seeded PostgreSQL schema."""
    from database.database import DatabaseManager
    from database.models import Base
    from tests.fixtures.db_fixtures import seed

    manager = DatabaseManager(test_database)
    Base.metadata.drop_all(manager.engine)
    manager.create_tables()
    seed(manager)
    try:
        yield manager
    finally:
        Base.metadata.drop_all(manager.engine)
        manager.dispose()
