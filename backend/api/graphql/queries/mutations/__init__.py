from __future__ import annotations
import strawberry
from .book_mutations import BookMutations
from .author_mutations import AuthorMutations


@strawberry.type(name="Mutation", description="RootMutation")
class Mutation(BookMutations, AuthorMutations):
    """Main mutation class combining all entity mutations."""
    pass


__all__ = ["Mutation", "BookMutations", "AuthorMutations"]
