from __future__ import annotations
from typing import Optional

import strawberry
from backend.api.graphql.types.author_type import AuthorType
from backend.api.schemas.authors_schema import AuthorCreate, AuthorUpdate
from backend.api.services.author_service import AuthorService


@strawberry.type
class AuthorMutations:
    """Mutations for authors."""

    @strawberry.mutation
    def add_author(self, name: str, info: strawberry.types.Info) -> Optional[AuthorType]:
        """Append a new author."""
        service = AuthorService(info.context.store)
        author = service.create_author(AuthorCreate(name=name))
        return AuthorType.from_schema(author)

    @strawberry.mutation
    def update_author(self, id: int, name: str, info: strawberry.types.Info) -> Optional[AuthorType]:
        """Rename an author by ID; fails when the author does not exist."""
        service = AuthorService(info.context.store)
        author = service.update_author(id, AuthorUpdate(name=name))
        return AuthorType.from_schema(author)
