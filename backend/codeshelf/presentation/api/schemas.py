"""Pydantic request/response models exposed by the API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from codeshelf.domain.models.analysis import ComplexityAnalysis
from codeshelf.domain.models.records import (
    LanguageCount,
    Snippet,
    SnippetWithAuthor,
    Tag,
    TagType,
    UserAccount,
    UserPublic,
    UserPublicProfile,
)
from codeshelf.shared.helpers import count_lines, format_relative_time, truncate_text

USERNAME_REGEX = r"^[a-zA-Z0-9_]+$"
EMAIL_REGEX = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
EXCERPT_LENGTH = 150


class ApiModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===== Requests =====


class RegisterRequest(ApiModel):
    name: str = Field(..., min_length=2, max_length=50)
    username: str = Field(..., min_length=3, max_length=20, pattern=USERNAME_REGEX)
    email: str = Field(..., pattern=EMAIL_REGEX, description="Account email")
    password: str = Field(..., min_length=6, max_length=100)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginRequest(ApiModel):
    email: str = Field(..., pattern=EMAIL_REGEX)
    password: str = Field(..., min_length=1)


class ProfileUpdateRequest(ApiModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    username: Optional[str] = Field(
        default=None, min_length=3, max_length=20, pattern=USERNAME_REGEX
    )


class ChangePasswordRequest(ApiModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=100)
    confirm_new_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "ChangePasswordRequest":
        if self.new_password != self.confirm_new_password:
            raise ValueError("Passwords don't match")
        return self


class SnippetCreateRequest(ApiModel):
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(default="", max_length=500)
    code: str = Field(..., min_length=1, max_length=50_000)
    language: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list, max_length=10)
    is_public: bool = True
    time_complexity: Optional[str] = None


class SnippetUpdateRequest(ApiModel):
    title: Optional[str] = Field(default=None, min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    code: Optional[str] = Field(default=None, min_length=1, max_length=50_000)
    language: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[List[str]] = Field(default=None, max_length=10)
    is_public: Optional[bool] = None
    time_complexity: Optional[str] = None

    @field_validator("title", "description", "code", "language", "tags", "is_public", mode="before")
    @classmethod
    def not_null(cls, value):
        # omit a field to leave it unchanged; only time_complexity can be cleared
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class TagCreateRequest(ApiModel):
    name: str = Field(..., min_length=2, max_length=30)
    type: TagType


class AnalyzeRequest(ApiModel):
    code: str = Field(..., max_length=50_000, description="Source code to analyze")
    language: str = Field(default="", max_length=50)


# ===== Responses =====


class UserPublicResponse(ApiModel):
    id: str
    name: str
    username: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: UserPublic) -> "UserPublicResponse":
        return cls(id=user.id, name=user.name, username=user.username, created_at=user.created_at)


class AccountResponse(ApiModel):
    id: str
    email: str
    name: str
    username: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, account: UserAccount) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email,
            name=account.name,
            username=account.username,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AuthResponse(ApiModel):
    success: bool = True
    user: AccountResponse
    token: Optional[str] = None


class SnippetResponse(ApiModel):
    id: str
    title: str
    description: str
    code: str
    language: str
    author_id: str
    is_public: bool
    time_complexity: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    excerpt: str = ""
    line_count: int = 0
    created_ago: str = ""
    author: Optional[UserPublicResponse] = None

    @classmethod
    def from_domain(
        cls, snippet: Snippet, author: Optional[UserPublic] = None
    ) -> "SnippetResponse":
        return cls(
            id=snippet.id,
            title=snippet.title,
            description=snippet.description,
            code=snippet.code,
            language=snippet.language,
            author_id=snippet.author_id,
            is_public=snippet.is_public,
            time_complexity=snippet.time_complexity,
            tags=list(snippet.tags),
            created_at=snippet.created_at,
            updated_at=snippet.updated_at,
            excerpt=truncate_text(snippet.description, EXCERPT_LENGTH),
            line_count=count_lines(snippet.code),
            created_ago=format_relative_time(snippet.created_at),
            author=UserPublicResponse.from_domain(author) if author else None,
        )

    @classmethod
    def from_joined(cls, item: SnippetWithAuthor) -> "SnippetResponse":
        return cls.from_domain(item.snippet, item.author)


class SnippetListResponse(ApiModel):
    snippets: List[SnippetResponse]
    count: int


class ShareResponse(ApiModel):
    url: str
    path: str


class LanguageCountResponse(ApiModel):
    language: str
    count: int
    url: str

    @classmethod
    def from_domain(cls, item: LanguageCount, url: str) -> "LanguageCountResponse":
        return cls(language=item.language, count=item.count, url=url)


class ProfileStatsResponse(ApiModel):
    total_snippets: int
    languages: List[str]
    language_count: int


class AccountStatsResponse(ApiModel):
    total_snippets: int
    languages: List[str]


class ProfileResponse(ApiModel):
    user: UserPublicResponse
    url: str
    snippets: List[SnippetResponse]
    stats: ProfileStatsResponse

    @classmethod
    def from_domain(cls, profile: UserPublicProfile, url: str) -> "ProfileResponse":
        return cls(
            user=UserPublicResponse.from_domain(profile.user),
            url=url,
            snippets=[SnippetResponse.from_domain(s) for s in profile.snippets],
            stats=ProfileStatsResponse(
                total_snippets=profile.stats.total_snippets,
                languages=profile.stats.languages,
                language_count=profile.stats.language_count,
            ),
        )


class TagResponse(ApiModel):
    id: str
    name: str
    slug: str
    type: TagType
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, tag: Tag) -> "TagResponse":
        return cls(
            id=tag.id,
            name=tag.name,
            slug=tag.slug,
            type=tag.type,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class ComplexityAnalysisResponse(ApiModel):
    estimated_complexity: str
    confidence: float = Field(..., ge=0, le=1)
    reasoning: List[str]
    patterns: List[str]
    color: str
    description: str

    @classmethod
    def from_domain(
        cls, analysis: ComplexityAnalysis, color: str, description: str
    ) -> "ComplexityAnalysisResponse":
        return cls(
            estimated_complexity=analysis.estimated_complexity,
            confidence=analysis.confidence,
            reasoning=analysis.reasoning,
            patterns=analysis.patterns,
            color=color,
            description=description,
        )


class NotationResponse(ApiModel):
    label: str
    power: float
    color: str
    description: str


class ErrorResponse(ApiModel):
    success: Literal[False] = False
    error: str
    details: Optional[Any] = None


__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "ChangePasswordRequest",
    "SnippetCreateRequest",
    "SnippetUpdateRequest",
    "TagCreateRequest",
    "AnalyzeRequest",
    "AccountResponse",
    "AuthResponse",
    "SnippetResponse",
    "SnippetListResponse",
    "ShareResponse",
    "LanguageCountResponse",
    "AccountStatsResponse",
    "ProfileResponse",
    "TagResponse",
    "ComplexityAnalysisResponse",
    "NotationResponse",
    "ErrorResponse",
]
