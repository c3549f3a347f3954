from __future__ import annotations
from typing import Optional

import strawberry
from backend.api.graphql.types.book_type import BookType
from backend.api.schemas.books_schema import BookCreate
from backend.api.services.book_service import BookService


@strawberry.type
class BookMutations:
    """Mutations for books."""

    @strawberry.mutation
    def add_book(self, name: str, author_id: int, info: strawberry.types.Info) -> Optional[BookType]:
        """Append a new book. The author id is stored as given."""
        service = BookService(info.context.store)
        book = service.create_book(BookCreate(name=name, author_id=author_id))
        return BookType.from_schema(book)
