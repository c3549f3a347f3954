from typing import List, Optional

from backend.api.schemas.authors_schema import Author, AuthorCreate, AuthorUpdate
from backend.api.utils.exceptions import AuthorNotFoundError
from backend.api.utils.library_store import LibraryStore
from backend.helpers.logging import logger


class AuthorService:
    def __init__(self, store: LibraryStore):
        self.store = store

    def read_author(self, author_id: Optional[int]) -> Optional[Author]:
        """Retourne l'auteur ou None, sans lever d'erreur."""
        return self.store.find_author(author_id)

    def read_authors(self) -> List[Author]:
        return self.store.authors

    def get_author_of_book(self, author_id: int) -> Optional[Author]:
        """Auteur référencé par un livre, ou None si la clé ne pointe sur rien."""
        return self.store.find_author(author_id)

    def create_author(self, author: AuthorCreate) -> Author:
        created = self.store.append_author(author)
        logger.info(f"Auteur créé: id={created.id} name={created.name!r}")
        return created

    def update_author(self, author_id: int, author: AuthorUpdate) -> Author:
        """Renomme un auteur existant.

        Raises:
            AuthorNotFoundError: aucun auteur ne porte cet ID.
        """
        updated = self.store.rename_author(author_id, author.name)
        if updated is None:
            logger.warning(f"Mise à jour impossible: auteur {author_id} introuvable")
            raise AuthorNotFoundError(author_id)
        logger.info(f"Auteur {author_id} renommé en {updated.name!r}")
        return updated
