from .author_type import AuthorType
from .book_type import BookType

__all__ = [
    "AuthorType",
    "BookType",
]
