"""
Test Suite for BookStore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, log capture, sample data)
- test_authors.py: Tests for /api/authors endpoints
- test_books.py: Tests for /api/books endpoints
- test_users.py: Tests for the login endpoint
- test_repositories.py, test_validation.py, test_mapping.py,
  test_security.py: Unit tests for the layers under the routers
- test_main.py: App wiring, settings and rate limiter helpers

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
