"""
Domain records for users, snippets and tags.

These are the entities of the snippet sharing domain:
    - User: Registered account including its password hash
    - Snippet: Piece of code owned by a user, public or private
    - Tag: Language or topic label attached to snippets
    - UserPublicProfile: Read model assembled for profile pages

Records are plain dataclasses; repositories convert them to and from
storage documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TagType(str, Enum):
    """Tags either name a programming language or a topic."""

    LANGUAGE = "language"
    TOPIC = "topic"


@dataclass
class User:
    """
    Registered account.

    Invariants:
        - id, email and username are unique across users
        - username matches ^[a-zA-Z0-9_]+$
        - password_hash never leaves the persistence and auth layers
    """

    id: str
    email: str
    name: str
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def public(self) -> "UserPublic":
        return UserPublic(
            id=self.id,
            name=self.name,
            username=self.username,
            created_at=self.created_at,
        )

    def account(self) -> "UserAccount":
        return UserAccount(
            id=self.id,
            email=self.email,
            name=self.name,
            username=self.username,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass
class UserPublic:
    """Projection of a user that is safe to show to anyone."""

    id: str
    name: str
    username: str
    created_at: datetime


@dataclass
class UserAccount:
    """Projection of a user returned to the user themselves."""

    id: str
    email: str
    name: str
    username: str
    created_at: datetime
    updated_at: datetime


@dataclass
class Snippet:
    """
    Code snippet aggregate.

    Invariants:
        - id, author_id and created_at never change after creation
        - private snippets are only visible to their author
        - created_at <= updated_at
    """

    id: str
    title: str
    description: str
    code: str
    language: str
    author_id: str
    is_public: bool = True
    time_complexity: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class SnippetWithAuthor:
    snippet: Snippet
    author: UserPublic


@dataclass
class Tag:
    id: str
    name: str
    slug: str
    type: TagType
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class LanguageCount:
    language: str
    count: int


@dataclass
class ProfileStats:
    total_snippets: int
    languages: List[str]
    language_count: int


@dataclass
class UserPublicProfile:
    """Public profile page data: the user, their public snippets and stats."""

    user: UserPublic
    snippets: List[Snippet]
    stats: ProfileStats


@dataclass
class TokenPayload:
    """Claims carried by an auth token."""

    user_id: str
    email: str
    username: str
    iat: Optional[int] = None
    exp: Optional[int] = None

    def to_claims(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "username": self.username,
        }
