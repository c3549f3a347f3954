from typing import List, Optional

from backend.api.schemas.books_schema import Book, BookCreate
from backend.api.utils.library_store import LibraryStore
from backend.helpers.logging import logger


class BookService:
    def __init__(self, store: LibraryStore):
        self.store = store

    def read_book(self, book_id: Optional[int]) -> Optional[Book]:
        return self.store.find_book(book_id)

    def read_books(self) -> List[Book]:
        return self.store.books

    def get_books_by_author(self, author_id: int) -> List[Book]:
        """Livres de l'auteur, dans l'ordre d'insertion (liste vide si aucun)."""
        return self.store.books_by_author(author_id)

    def create_book(self, book: BookCreate) -> Book:
        # author_id n'est pas vérifié: un livre peut référencer un auteur absent
        created = self.store.append_book(book)
        logger.info(f"Livre créé: id={created.id} name={created.name!r} author_id={created.author_id}")
        return created
