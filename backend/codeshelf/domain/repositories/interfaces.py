"""Repository contracts for persistence adapters in a hexagonal architecture."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from codeshelf.domain.models.records import Snippet, Tag, TagType, User


class UserRepository(ABC):
    """Persistence port for user accounts."""

    @abstractmethod
    async def add(self, user: User) -> User:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[User]:
        raise NotImplementedError

    @abstractmethod
    async def update(self, user: User) -> User:
        raise NotImplementedError


class SnippetRepository(ABC):
    """Persistence port for code snippets."""

    @abstractmethod
    async def add(self, snippet: Snippet) -> Snippet:
        raise NotImplementedError

    @abstractmethod
    async def get(self, snippet_id: str) -> Optional[Snippet]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[Snippet]:
        raise NotImplementedError

    @abstractmethod
    async def update(self, snippet: Snippet) -> Snippet:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, snippet_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def next_id(self) -> str:
        """Return the next free sequential snippet id."""
        raise NotImplementedError


class TagRepository(ABC):
    """Persistence port for language and topic tags."""

    @abstractmethod
    async def add(self, tag: Tag) -> Tag:
        raise NotImplementedError

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Tag]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_type(self, tag_type: TagType) -> List[Tag]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[Tag]:
        raise NotImplementedError
