"""
Tests for the Repository Layer

Exercises the repositories directly against the test database; the
persistence-failure cases use a mocked session so the rollback can be
observed without touching the shared transaction.
"""

import logging
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from bookstore.models import Author, Book
from bookstore.repositories import (
    AuthorRepository,
    BookRepository,
    FailureReason,
    RepositoryResult,
)

logger = logging.getLogger("bookstore.tests.repositories")


class TestRepositoryResult:
    def test_success(self):
        author = Author(first_name="Frank", last_name="Herbert")

        result = RepositoryResult.success(author)

        assert result.ok
        assert result.entity is author
        assert result.failure is None

    def test_fail(self):
        result = RepositoryResult.fail(FailureReason.NOT_FOUND, "missing")

        assert not result.ok
        assert result.entity is None
        assert result.failure == FailureReason.NOT_FOUND
        assert result.message == "missing"


class TestAuthorRepository:
    """Reads and writes through AuthorRepository."""

    def test_find_all_ordered_by_id(self, db_session):
        repository = AuthorRepository(db_session, logger)
        first = repository.create(Author(first_name="Ursula", last_name="Le Guin")).entity
        second = repository.create(Author(first_name="Frank", last_name="Herbert")).entity

        assert [author.id for author in repository.find_all()] == [first.id, second.id]

    def test_find_by_id_missing(self, db_session):
        repository = AuthorRepository(db_session, logger)

        assert repository.find_by_id(12345) is None

    def test_exists(self, db_session, sample_author):
        repository = AuthorRepository(db_session, logger)

        assert repository.exists(sample_author.id) is True
        assert repository.exists(sample_author.id + 100) is False

    def test_create_assigns_id(self, db_session):
        repository = AuthorRepository(db_session, logger)

        result = repository.create(Author(first_name="George", last_name="Orwell"))

        assert result.ok
        assert result.entity.id >= 1

    def test_update_replaces_row(self, db_session, sample_author):
        repository = AuthorRepository(db_session, logger)

        result = repository.update(
            Author(
                id=sample_author.id,
                first_name="Frank",
                last_name="Herbert Jr.",
                bio=None,
            )
        )

        assert result.ok
        stored = repository.find_by_id(sample_author.id)
        assert stored.last_name == "Herbert Jr."
        assert stored.bio is None

    def test_update_missing_row(self, db_session):
        repository = AuthorRepository(db_session, logger)

        result = repository.update(Author(id=999, first_name="A", last_name="B"))

        assert result.failure == FailureReason.NOT_FOUND

    def test_update_without_id(self, db_session):
        repository = AuthorRepository(db_session, logger)

        result = repository.update(Author(first_name="A", last_name="B"))

        assert result.failure == FailureReason.NOT_FOUND

    def test_delete(self, db_session, sample_author):
        repository = AuthorRepository(db_session, logger)
        author_id = sample_author.id

        result = repository.delete(sample_author)

        assert result.ok
        assert repository.exists(author_id) is False

    def test_ids_beyond_64_bits_are_absent(self, db_session):
        repository = AuthorRepository(db_session, logger)

        assert repository.find_by_id(2**63) is None
        assert repository.exists(2**63) is False
        assert repository.exists(0) is False

    def test_find_by_id_loads_books(self, db_session, sample_book):
        repository = AuthorRepository(db_session, logger)

        author = repository.find_by_id(sample_book.author_id)

        assert [book.title for book in author.books] == ["Dune"]


class TestBookRepository:
    def test_find_by_id_loads_author(self, db_session, sample_book):
        repository = BookRepository(db_session, logger)

        book = repository.find_by_id(sample_book.id)

        assert book.author.last_name == "Herbert"

    def test_create_without_author(self, db_session):
        repository = BookRepository(db_session, logger)

        result = repository.create(Book(title="Solaris", isbn="9780156027601"))

        assert result.ok
        assert result.entity.author_id is None


class TestPersistenceFailure:
    """A failing commit is rolled back and reported, never raised."""

    def _failing_session(self):
        db = MagicMock()
        db.commit.side_effect = OperationalError("COMMIT", {}, Exception("disk I/O error"))
        return db

    def test_create_failure(self):
        db = self._failing_session()
        repository = BookRepository(db, logger)

        result = repository.create(Book(title="Dune", isbn="123"))

        assert result.failure == FailureReason.PERSISTENCE_ERROR
        assert "disk I/O error" in result.message
        db.rollback.assert_called_once()

    def test_delete_failure(self):
        db = self._failing_session()
        repository = AuthorRepository(db, logger)

        result = repository.delete(Author(id=1, first_name="A", last_name="B"))

        assert result.failure == FailureReason.PERSISTENCE_ERROR
        db.rollback.assert_called_once()

    def test_update_failure(self):
        db = self._failing_session()
        db.execute.return_value.scalar.return_value = True
        repository = AuthorRepository(db, logger)

        result = repository.update(Author(id=1, first_name="A", last_name="B"))

        assert result.failure == FailureReason.PERSISTENCE_ERROR
        db.merge.assert_called_once()
        db.rollback.assert_called_once()

    def test_failure_is_logged(self, caplog):
        db = self._failing_session()
        repository = BookRepository(db, logger)

        with caplog.at_level(logging.ERROR, logger=logger.name):
            repository.create(Book(title="Dune", isbn="123"))

        assert "Book create failed" in caplog.text
