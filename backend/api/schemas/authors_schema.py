from pydantic import BaseModel, Field


class AuthorBase(BaseModel):
    name: str = Field(..., description="Nom de l'auteur")


class AuthorCreate(AuthorBase):
    pass


class AuthorUpdate(BaseModel):
    name: str


class Author(AuthorBase):
    id: int
