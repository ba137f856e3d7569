"""
pytest Fixtures for BookStore API Tests

Shared fixtures used across all test files.

For database tests we use:
- session scope for the engine (SQLite in-memory, created once)
- function scope for sessions, wrapped in a transaction that is rolled
  back after each test so tests don't affect each other
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["JWT_KEY"] = "test-jwt-key-for-unit-tests-at-least-32-characters-long"
os.environ["JWT_ISSUER"] = "http://testserver"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import logging
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.database import Base, get_db
from bookstore.dependencies import get_logger
from bookstore.main import app
from bookstore.models import Author, Book, Role, User
from bookstore.services.security import hash_password

TEST_PASSWORD = "P@ssword1"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection whose outer transaction is rolled
    back afterwards, so commits made by the code under test never leak.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client wired to the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# LOGGING FIXTURES
# =============================================================================
class ListHandler(logging.Handler):
    """Keeps every formatted message it receives."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(f"{record.levelname}:{record.getMessage()}")


@pytest.fixture
def captured_logs(client: TestClient) -> Generator[list[str], None, None]:
    """
    Replace the injected request logger with one that records messages.

    Yields the list the messages are appended to.
    """
    handler = ListHandler()
    test_logger = logging.getLogger("bookstore.tests.captured")
    test_logger.setLevel(logging.DEBUG)
    test_logger.propagate = False
    test_logger.addHandler(handler)

    app.dependency_overrides[get_logger] = lambda: test_logger

    yield handler.messages

    test_logger.removeHandler(handler)
    app.dependency_overrides.pop(get_logger, None)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        first_name="Frank",
        last_name="Herbert",
        bio="American science-fiction author.",
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    book = Book(
        title="Dune",
        year=1965,
        isbn="9780441013593",
        summary="A duke's son is thrown into the politics of a desert planet.",
        image="covers/dune.jpg",
        price=9.99,
        author=sample_author,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create an administrator account for login tests."""
    user = User(
        username="admin@bookstore.com",
        email="admin@bookstore.com",
        hashed_password=hash_password(TEST_PASSWORD),
        is_active=True,
        roles=[Role(name="Administrator"), Role(name="Customer")],
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def inactive_user(db_session: Session) -> User:
    """Create a disabled account."""
    user = User(
        username="disabled@bookstore.com",
        email="disabled@bookstore.com",
        hashed_password=hash_password(TEST_PASSWORD),
        is_active=False,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
