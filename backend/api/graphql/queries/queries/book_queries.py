from __future__ import annotations
from typing import Optional

import strawberry

from backend.api.graphql.types.book_type import BookType
from backend.api.services.book_service import BookService


@strawberry.type
class BookQueries:
    """Queries for books."""

    @strawberry.field
    def book(self, info: strawberry.types.Info, id: Optional[int] = strawberry.UNSET) -> Optional[BookType]:
        service = BookService(info.context.store)
        book = service.read_book(id)
        if book is None:
            return None
        return BookType.from_schema(book)

    @strawberry.field(description="List of Books")
    def books(self, info: strawberry.types.Info) -> Optional[list[Optional[BookType]]]:
        service = BookService(info.context.store)
        return [BookType.from_schema(b) for b in service.read_books()]
