# -*- coding: utf-8 -*-
"""
Stockage en mémoire des auteurs et des livres.

Le store possède les deux collections et un compteur d'ID par collection.
Toutes les lectures et écritures passent par son API, sous un verrou, ce qui
permet de servir plusieurs requêtes en parallèle sans entrelacer une
allocation d'ID et l'ajout correspondant.

Les données ne sont jamais persistées: un redémarrage recharge le jeu initial.

Usage:
    store = LibraryStore()
    author = store.append_author(AuthorCreate(name="Ursula K. Le Guin"))
"""
import itertools
import threading
from typing import List, Optional

from backend.api.schemas.authors_schema import Author, AuthorCreate
from backend.api.schemas.books_schema import Book, BookCreate

SEED_AUTHORS = [
    "J. K. Rowling",
    "J. R. R. Tolkien",
    "Brent Weeks",
]

SEED_BOOKS = [
    ("Harry Potter and the Chamber of Secrets", 1),
    ("Harry Potter and the Prisoner of Azkaban", 1),
    ("Harry Potter and the Goblet of Fire", 1),
    ("The Fellowship of the Ring", 2),
    ("The Two Towers", 2),
    ("The Return of the King", 2),
    ("The Way of Shadows", 3),
    ("Beyond the Shadows", 3),
]


class LibraryStore:
    """
    Propriétaire unique des collections auteurs/livres.

    Les listes retournées sont des copies superficielles: les entités sont
    partagées avec le store et ne doivent pas être modifiées par l'appelant.
    """

    def __init__(self, seed: bool = True):
        self._lock = threading.RLock()
        self._authors: List[Author] = []
        self._books: List[Book] = []
        self._author_ids = itertools.count(1)
        self._book_ids = itertools.count(1)

        if seed:
            for name in SEED_AUTHORS:
                self.append_author(AuthorCreate(name=name))
            for name, author_id in SEED_BOOKS:
                self.append_book(BookCreate(name=name, author_id=author_id))

    @property
    def authors(self) -> List[Author]:
        with self._lock:
            return list(self._authors)

    @property
    def books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def find_author(self, author_id: Optional[int]) -> Optional[Author]:
        with self._lock:
            return next((a for a in self._authors if a.id == author_id), None)

    def find_book(self, book_id: Optional[int]) -> Optional[Book]:
        with self._lock:
            return next((b for b in self._books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> List[Book]:
        with self._lock:
            return [b for b in self._books if b.author_id == author_id]

    def append_author(self, data: AuthorCreate) -> Author:
        with self._lock:
            author = Author(id=next(self._author_ids), **data.model_dump())
            self._authors.append(author)
            return author

    def append_book(self, data: BookCreate) -> Book:
        with self._lock:
            book = Book(id=next(self._book_ids), **data.model_dump())
            self._books.append(book)
            return book

    def rename_author(self, author_id: int, name: str) -> Optional[Author]:
        """Écrase le nom en place; retourne None si l'auteur n'existe pas."""
        with self._lock:
            author = next((a for a in self._authors if a.id == author_id), None)
            if author is None:
                return None
            author.name = name
            return author


_store: Optional[LibraryStore] = None
_store_lock = threading.Lock()


def get_store() -> LibraryStore:
    """Store partagé par tout le processus, créé au premier appel."""
    global _store
    with _store_lock:
        if _store is None:
            _store = LibraryStore()
        return _store
