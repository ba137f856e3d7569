#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with the default accounts and some sample catalog
data for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Creates the tables if needed
3. Seeds roles (Administrator, Customer) and one account for each
4. Clears and recreates sample authors and books (optional)
"""

import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.orm import Session

from bookstore.database import SessionLocal, create_tables
from bookstore.models import Author, Book
from bookstore.services.identity import IdentityStore

logger = logging.getLogger("bookstore.seed")

DEFAULT_PASSWORD = "P@ssword1"

DEFAULT_USERS = [
    {
        "username": "admin@bookstore.com",
        "email": "admin@bookstore.com",
        "roles": ["Administrator"],
    },
    {
        "username": "customer1@gmail.com",
        "email": "customer1@gmail.com",
        "roles": ["Customer"],
    },
    {
        "username": "customer2@gmail.com",
        "email": "customer2@gmail.com",
        "roles": ["Customer"],
    },
]


def seed_users(db: Session) -> None:
    """Create the default roles and accounts; existing accounts are kept."""
    identity = IdentityStore(db, logger)
    for data in DEFAULT_USERS:
        identity.ensure_user(
            username=data["username"],
            email=data["email"],
            password=DEFAULT_PASSWORD,
            roles=data["roles"],
        )
    print(f"Ensured {len(DEFAULT_USERS)} user accounts.")


def clear_catalog(db: Session) -> None:
    """Clear all existing books and authors."""
    print("Clearing existing catalog...")
    db.query(Book).delete()
    db.query(Author).delete()
    db.commit()


def create_authors(db: Session) -> dict[str, Author]:
    """Create sample authors, keyed by last name."""
    authors_data = [
        {
            "first_name": "Frank",
            "last_name": "Herbert",
            "bio": "American science-fiction author best known for Dune.",
        },
        {
            "first_name": "Ursula",
            "last_name": "Le Guin",
            "bio": "American author of speculative fiction, including the Earthsea books.",
        },
        {
            "first_name": "George",
            "last_name": "Orwell",
            "bio": "English novelist and essayist, journalist and critic.",
        },
    ]

    authors = {}
    for data in authors_data:
        author = Author(**data)
        db.add(author)
        authors[data["last_name"]] = author

    db.commit()
    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: dict[str, Author]) -> list[Book]:
    """Create sample books linked to the sample authors."""
    books_data = [
        {
            "title": "Dune",
            "year": 1965,
            "isbn": "9780441013593",
            "summary": "A duke's son is thrown into the politics of a desert planet.",
            "price": 9.99,
            "author": "Herbert",
        },
        {
            "title": "The Left Hand of Darkness",
            "year": 1969,
            "isbn": "9780441478125",
            "summary": "An envoy visits a planet whose people have no fixed sex.",
            "price": 8.99,
            "author": "Le Guin",
        },
        {
            "title": "1984",
            "year": 1949,
            "isbn": "9780451524935",
            "summary": "A dystopian novel set in a totalitarian society.",
            "price": 12.99,
            "author": "Orwell",
        },
    ]

    books = []
    for data in books_data:
        author_name = data.pop("author")
        book = Book(**data, author=authors[author_name])
        db.add(book)
        books.append(book)

    db.commit()
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears the catalog before seeding it.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        seed_users(db)
        if clear_existing:
            clear_catalog(db)
        authors = create_authors(db)
        books = create_books(db, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Users: {len(DEFAULT_USERS)} (password: {DEFAULT_PASSWORD})")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_database()
