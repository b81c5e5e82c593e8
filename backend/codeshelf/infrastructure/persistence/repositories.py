"""MongoDB-backed repository adapters implementing domain ports."""

from __future__ import annotations

from dataclasses import asdict
from datetime import timezone
from typing import Any, Dict, List, Optional

from codeshelf.domain.models.records import Snippet, Tag, TagType, User
from codeshelf.domain.repositories.interfaces import (
    SnippetRepository,
    TagRepository,
    UserRepository,
)
from codeshelf.infrastructure.persistence.mongodb_service import MongoDBService, mongodb_service


def _aware(value):
    # Mongo returns naive UTC datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_user(doc: Dict[str, Any]) -> User:
    return User(
        id=doc["id"],
        email=doc["email"],
        name=doc.get("name", ""),
        username=doc["username"],
        password_hash=doc.get("password_hash", ""),
        created_at=_aware(doc.get("created_at")),
        updated_at=_aware(doc.get("updated_at")),
    )


def _to_snippet(doc: Dict[str, Any]) -> Snippet:
    return Snippet(
        id=doc["id"],
        title=doc.get("title", ""),
        description=doc.get("description", ""),
        code=doc.get("code", ""),
        language=doc.get("language", ""),
        author_id=doc["author_id"],
        is_public=doc.get("is_public", True),
        time_complexity=doc.get("time_complexity"),
        tags=doc.get("tags", []),
        created_at=_aware(doc.get("created_at")),
        updated_at=_aware(doc.get("updated_at")),
    )


def _to_tag(doc: Dict[str, Any]) -> Tag:
    return Tag(
        id=doc["id"],
        name=doc["name"],
        slug=doc["slug"],
        type=TagType(doc.get("type", TagType.TOPIC.value)),
        created_at=_aware(doc.get("created_at")),
        updated_at=_aware(doc.get("updated_at")),
    )


def _tag_document(tag: Tag) -> Dict[str, Any]:
    doc = asdict(tag)
    doc["type"] = tag.type.value
    return doc


class MongoUserRepository(UserRepository):
    """User repository backed by MongoDBService."""

    collection = "users"

    def __init__(self, service: MongoDBService | None = None):
        self._service = service or mongodb_service

    async def add(self, user: User) -> User:
        await self._service.insert(self.collection, asdict(user))
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self._find({"id": user_id})

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._find({"email": email})

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._find({"username": username})

    async def list_all(self) -> List[User]:
        docs = await self._service.find_many(self.collection, sort_field="created_at")
        return [_to_user(doc) for doc in docs]

    async def update(self, user: User) -> User:
        await self._service.replace(self.collection, user.id, asdict(user))
        return user

    async def _find(self, query: Dict[str, Any]) -> Optional[User]:
        doc = await self._service.find_one(self.collection, query)
        return _to_user(doc) if doc else None


class MongoSnippetRepository(SnippetRepository):
    """Snippet repository backed by MongoDBService."""

    collection = "snippets"

    def __init__(self, service: MongoDBService | None = None):
        self._service = service or mongodb_service

    async def add(self, snippet: Snippet) -> Snippet:
        await self._service.insert(self.collection, asdict(snippet))
        return snippet

    async def get(self, snippet_id: str) -> Optional[Snippet]:
        doc = await self._service.find_one(self.collection, {"id": snippet_id})
        return _to_snippet(doc) if doc else None

    async def list_all(self) -> List[Snippet]:
        docs = await self._service.find_many(self.collection, sort_field="created_at")
        return [_to_snippet(doc) for doc in docs]

    async def update(self, snippet: Snippet) -> Snippet:
        await self._service.replace(self.collection, snippet.id, asdict(snippet))
        return snippet

    async def delete(self, snippet_id: str) -> bool:
        return await self._service.delete(self.collection, snippet_id)

    async def next_id(self) -> str:
        candidate = await self._service.count(self.collection) + 1
        while await self._service.find_one(self.collection, {"id": str(candidate)}):
            candidate += 1
        return str(candidate)


class MongoTagRepository(TagRepository):
    """Tag repository backed by MongoDBService."""

    collection = "tags"

    def __init__(self, service: MongoDBService | None = None):
        self._service = service or mongodb_service

    async def add(self, tag: Tag) -> Tag:
        await self._service.insert(self.collection, _tag_document(tag))
        return tag

    async def get_by_slug(self, slug: str) -> Optional[Tag]:
        doc = await self._service.find_one(self.collection, {"slug": slug})
        return _to_tag(doc) if doc else None

    async def list_by_type(self, tag_type: TagType) -> List[Tag]:
        docs = await self._service.find_many(
            self.collection, {"type": tag_type.value}, sort_field="name"
        )
        return [_to_tag(doc) for doc in docs]

    async def list_all(self) -> List[Tag]:
        docs = await self._service.find_many(self.collection, sort_field="name")
        return [_to_tag(doc) for doc in docs]
