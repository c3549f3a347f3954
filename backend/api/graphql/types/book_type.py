from __future__ import annotations
from typing import TYPE_CHECKING, Annotated, Optional

import strawberry

from backend.api.schemas.books_schema import Book
from backend.api.services.author_service import AuthorService

if TYPE_CHECKING:
    from backend.api.graphql.types.author_type import AuthorType


@strawberry.type(name="Book")
class BookType:
    id: int
    name: str
    author_id: int

    @strawberry.field
    def author(
        self, info: strawberry.types.Info
    ) -> Optional[Annotated["AuthorType", strawberry.lazy("backend.api.graphql.types.author_type")]]:
        from backend.api.graphql.types.author_type import AuthorType

        service = AuthorService(info.context.store)
        author = service.get_author_of_book(self.author_id)
        if author is None:
            return None
        return AuthorType.from_schema(author)

    @classmethod
    def from_schema(cls, book: Book) -> BookType:
        return cls(id=book.id, name=book.name, author_id=book.author_id)
