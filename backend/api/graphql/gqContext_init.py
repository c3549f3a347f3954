from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from strawberry.fastapi import BaseContext

from backend.api.utils.library_store import LibraryStore, get_store


@dataclass
class AppContext(BaseContext):
    store: LibraryStore


StoreDep = Annotated[LibraryStore, Depends(get_store)]


async def get_context(store: StoreDep) -> AppContext:
    """Context passed to all GraphQL functions. Give store access"""
    return AppContext(store=store)
