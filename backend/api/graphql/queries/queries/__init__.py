from __future__ import annotations
import strawberry
from .book_queries import BookQueries
from .author_queries import AuthorQueries


@strawberry.type(name="RootQueryType")
class Query(BookQueries, AuthorQueries):
    """Main query class combining all entity queries."""
    pass


__all__ = ["Query", "BookQueries", "AuthorQueries"]
