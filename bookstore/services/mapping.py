"""
Entity <-> DTO Mapping

Pure conversion functions, one pair per entity:
- <entity>_to_response: persisted entity → response schema
- <entity>_from_create / <entity>_from_update: request schema → entity

The *_from_update functions build a detached instance that carries the
target id and every column, so passing it to a repository replaces the
stored row in full (PUT semantics).
"""

from bookstore.models import Author, Book
from bookstore.schemas import (
    AuthorCreate,
    AuthorResponse,
    AuthorSummary,
    AuthorUpdate,
    BookCreate,
    BookResponse,
    BookSummary,
    BookUpdate,
)


# =============================================================================
# Author
# =============================================================================
def author_to_response(author: Author) -> AuthorResponse:
    return AuthorResponse(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        bio=author.bio,
        books=[
            BookSummary(id=book.id, title=book.title, year=book.year, isbn=book.isbn)
            for book in author.books
        ],
    )


def author_from_create(data: AuthorCreate) -> Author:
    return Author(
        first_name=data.first_name,
        last_name=data.last_name,
        bio=data.bio,
    )


def author_from_update(data: AuthorUpdate) -> Author:
    return Author(
        id=data.id,
        first_name=data.first_name,
        last_name=data.last_name,
        bio=data.bio,
    )


# =============================================================================
# Book
# =============================================================================
def book_to_response(book: Book) -> BookResponse:
    author = None
    if book.author is not None:
        author = AuthorSummary(
            id=book.author.id,
            first_name=book.author.first_name,
            last_name=book.author.last_name,
        )

    return BookResponse(
        id=book.id,
        title=book.title,
        year=book.year,
        isbn=book.isbn,
        summary=book.summary,
        image=book.image,
        price=book.price,
        author_id=book.author_id,
        author=author,
    )


def book_from_create(data: BookCreate) -> Book:
    return Book(
        title=data.title,
        year=data.year,
        isbn=data.isbn,
        summary=data.summary,
        image=data.image,
        price=data.price,
        author_id=data.author_id,
    )


def book_from_update(data: BookUpdate) -> Book:
    return Book(
        id=data.id,
        title=data.title,
        year=data.year,
        isbn=data.isbn,
        summary=data.summary,
        image=data.image,
        price=data.price,
        author_id=data.author_id,
    )
