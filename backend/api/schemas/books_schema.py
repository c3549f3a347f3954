from pydantic import BaseModel, Field


class BookBase(BaseModel):
    name: str = Field(..., description="Titre du livre")
    author_id: int = Field(..., description="ID de l'auteur (non vérifié)")


class BookCreate(BookBase):
    pass


class Book(BookBase):
    id: int
