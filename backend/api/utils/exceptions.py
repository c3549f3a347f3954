# -*- coding: utf-8 -*-


class AuthorNotFoundError(LookupError):
    """Raised when an update targets an author id that does not exist."""

    def __init__(self, author_id: int):
        self.author_id = author_id
        super().__init__(f"Couldn't find author with id {author_id}")
