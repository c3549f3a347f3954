from __future__ import annotations
from typing import Optional

import strawberry

from backend.api.graphql.types.author_type import AuthorType
from backend.api.services.author_service import AuthorService


@strawberry.type
class AuthorQueries:
    """Queries for authors."""

    @strawberry.field
    def author(self, info: strawberry.types.Info, id: Optional[int] = strawberry.UNSET) -> Optional[AuthorType]:
        service = AuthorService(info.context.store)
        author = service.read_author(id)
        if author is None:
            return None
        return AuthorType.from_schema(author)

    @strawberry.field(description="List of Authors")
    def authors(self, info: strawberry.types.Info) -> Optional[list[Optional[AuthorType]]]:
        service = AuthorService(info.context.store)
        return [AuthorType.from_schema(a) for a in service.read_authors()]
