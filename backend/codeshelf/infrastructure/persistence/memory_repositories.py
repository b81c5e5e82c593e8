"""
In-memory repository adapters.

Each store keeps records in a lock-protected dict and hands out copies so
callers cannot mutate stored state without going through ``update``. Used
by default for local development and in tests.
"""

import copy
import threading
from typing import Dict, List, Optional

from codeshelf.domain.models.records import Snippet, Tag, TagType, User
from codeshelf.domain.repositories.interfaces import (
    SnippetRepository,
    TagRepository,
    UserRepository,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    async def add(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = copy.deepcopy(user)
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._find(lambda user: user.email == email)

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._find(lambda user: user.username == username)

    async def list_all(self) -> List[User]:
        with self._lock:
            return [copy.deepcopy(user) for user in self._users.values()]

    async def update(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = copy.deepcopy(user)
        return user

    def _find(self, predicate) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if predicate(user):
                    return copy.deepcopy(user)
        return None


class InMemorySnippetRepository(SnippetRepository):
    def __init__(self):
        self._snippets: Dict[str, Snippet] = {}
        self._lock = threading.Lock()

    async def add(self, snippet: Snippet) -> Snippet:
        with self._lock:
            self._snippets[snippet.id] = copy.deepcopy(snippet)
        return snippet

    async def get(self, snippet_id: str) -> Optional[Snippet]:
        with self._lock:
            snippet = self._snippets.get(snippet_id)
            return copy.deepcopy(snippet) if snippet else None

    async def list_all(self) -> List[Snippet]:
        with self._lock:
            return [copy.deepcopy(snippet) for snippet in self._snippets.values()]

    async def update(self, snippet: Snippet) -> Snippet:
        with self._lock:
            self._snippets[snippet.id] = copy.deepcopy(snippet)
        return snippet

    async def delete(self, snippet_id: str) -> bool:
        with self._lock:
            return self._snippets.pop(snippet_id, None) is not None

    async def next_id(self) -> str:
        with self._lock:
            candidate = len(self._snippets) + 1
            while str(candidate) in self._snippets:
                candidate += 1
            return str(candidate)


class InMemoryTagRepository(TagRepository):
    def __init__(self):
        self._tags: Dict[str, Tag] = {}
        self._lock = threading.Lock()

    async def add(self, tag: Tag) -> Tag:
        with self._lock:
            self._tags[tag.id] = copy.deepcopy(tag)
        return tag

    async def get_by_slug(self, slug: str) -> Optional[Tag]:
        with self._lock:
            for tag in self._tags.values():
                if tag.slug == slug:
                    return copy.deepcopy(tag)
        return None

    async def list_by_type(self, tag_type: TagType) -> List[Tag]:
        with self._lock:
            return [copy.deepcopy(tag) for tag in self._tags.values() if tag.type == tag_type]

    async def list_all(self) -> List[Tag]:
        with self._lock:
            return [copy.deepcopy(tag) for tag in self._tags.values()]
