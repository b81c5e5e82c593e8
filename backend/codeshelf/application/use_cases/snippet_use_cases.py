"""Use cases for authoring, browsing and sharing snippets."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from codeshelf.domain.models.records import (
    LanguageCount,
    ProfileStats,
    Snippet,
    SnippetWithAuthor,
    User,
    UserPublicProfile,
    utcnow,
)
from codeshelf.domain.repositories.interfaces import SnippetRepository, UserRepository
from codeshelf.domain.services.complexity_service import ComplexityAnalysisService
from codeshelf.shared.exceptions import NotFoundError, PermissionDeniedError, ValidationError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {"title", "description", "code", "language", "tags", "is_public", "time_complexity"}
)
NULLABLE_FIELDS = frozenset({"time_complexity"})


@dataclass
class SnippetQuery:
    """
    Filters for snippet listings. All set filters must match.

    ``visibility`` narrows by the public flag and is meant for an author's
    own dashboard; ``public_only`` is the filter used for anonymous browsing.
    """

    author_id: Optional[str] = None
    public_only: bool = False
    language: Optional[str] = None
    search_query: Optional[str] = None
    visibility: Literal["all", "public", "private"] = "all"
    sort: Literal["newest", "oldest"] = "newest"

    def matches(self, snippet: Snippet) -> bool:
        if self.public_only and not snippet.is_public:
            return False
        if self.visibility == "public" and not snippet.is_public:
            return False
        if self.visibility == "private" and snippet.is_public:
            return False
        if self.author_id and snippet.author_id != self.author_id:
            return False
        if self.language and snippet.language != self.language:
            return False
        if self.search_query:
            needle = self.search_query.lower()
            haystacks = (snippet.title, snippet.description, snippet.code)
            if not any(needle in text.lower() for text in haystacks):
                return False
        return True


class SnippetUseCases:
    """Snippet CRUD with ownership checks plus the read models built on it."""

    def __init__(
        self,
        snippets: SnippetRepository,
        users: UserRepository,
        analyzer: Optional[ComplexityAnalysisService] = None,
        auto_analyze: bool = True,
        max_code_length: Optional[int] = None,
    ):
        self.snippets = snippets
        self.users = users
        self.analyzer = analyzer or ComplexityAnalysisService()
        self.auto_analyze = auto_analyze
        self.max_code_length = max_code_length

    async def create_snippet(
        self,
        author: User,
        title: str,
        description: str,
        code: str,
        language: str,
        tags: Optional[List[str]] = None,
        is_public: bool = True,
        time_complexity: Optional[str] = None,
    ) -> Snippet:
        self._check_code_length(code)
        if time_complexity is None and self.auto_analyze:
            time_complexity = self.analyzer.analyze(code, language).estimated_complexity

        now = utcnow()
        snippet = Snippet(
            id=await self.snippets.next_id(),
            title=title,
            description=description,
            code=code,
            language=language,
            author_id=author.id,
            is_public=is_public,
            time_complexity=time_complexity,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
        )
        await self.snippets.add(snippet)
        logger.info(f"Snippet {snippet.id} created by {author.username}")
        return snippet

    async def get_snippet(self, snippet_id: str, viewer_id: Optional[str] = None) -> Snippet:
        """Fetch a snippet; private snippets are hidden from everyone but the author."""
        snippet = await self.snippets.get(snippet_id)
        if snippet is None or (not snippet.is_public and snippet.author_id != viewer_id):
            raise NotFoundError("Snippet not found")
        return snippet

    async def list_snippets(self, query: Optional[SnippetQuery] = None) -> List[Snippet]:
        query = query or SnippetQuery()
        snippets = [s for s in await self.snippets.list_all() if query.matches(s)]
        snippets.sort(key=lambda s: s.created_at, reverse=query.sort == "newest")
        return snippets

    async def update_snippet(self, snippet_id: str, user_id: str, changes: Dict[str, Any]) -> Snippet:
        snippet = await self._owned_snippet(snippet_id, user_id, "edit")
        if changes.get("code") is not None:
            self._check_code_length(changes["code"])

        updates = {name: value for name, value in changes.items() if name in EDITABLE_FIELDS}
        for field_name, value in updates.items():
            if value is None and field_name not in NULLABLE_FIELDS:
                raise ValidationError(f"{field_name} cannot be empty")

        for field_name, value in updates.items():
            setattr(snippet, field_name, list(value) if field_name == "tags" else value)
        snippet.updated_at = utcnow()

        await self.snippets.update(snippet)
        logger.info(f"Snippet {snippet_id} updated")
        return snippet

    async def delete_snippet(self, snippet_id: str, user_id: str) -> None:
        await self._owned_snippet(snippet_id, user_id, "delete")
        await self.snippets.delete(snippet_id)
        logger.info(f"Snippet {snippet_id} deleted")

    async def list_snippets_with_authors(
        self, query: Optional[SnippetQuery] = None
    ) -> List[SnippetWithAuthor]:
        """Attach author data; snippets whose author is gone are dropped."""
        results = []
        authors: Dict[str, Optional[User]] = {}
        for snippet in await self.list_snippets(query):
            if snippet.author_id not in authors:
                authors[snippet.author_id] = await self.users.get_by_id(snippet.author_id)
            author = authors[snippet.author_id]
            if author is not None:
                results.append(SnippetWithAuthor(snippet=snippet, author=author.public()))
        return results

    async def count_user_snippets(self, user_id: str) -> int:
        return len(await self.list_snippets(SnippetQuery(author_id=user_id)))

    async def get_user_languages(self, user_id: str) -> List[str]:
        snippets = await self.list_snippets(SnippetQuery(author_id=user_id))
        return list(dict.fromkeys(s.language for s in snippets))

    async def get_all_languages(self) -> List[LanguageCount]:
        """Languages of public snippets with counts, most used first."""
        counts = Counter(s.language for s in await self.snippets.list_all() if s.is_public)
        return [LanguageCount(language=lang, count=n) for lang, n in counts.most_common()]

    async def get_user_public_profile(self, username: str) -> UserPublicProfile:
        user = await self.users.get_by_username(username)
        if user is None:
            raise NotFoundError("User not found")

        snippets = await self.list_snippets(SnippetQuery(author_id=user.id, public_only=True))
        languages = list(dict.fromkeys(s.language for s in snippets))
        return UserPublicProfile(
            user=user.public(),
            snippets=snippets,
            stats=ProfileStats(
                total_snippets=len(snippets),
                languages=languages,
                language_count=len(languages),
            ),
        )

    def _check_code_length(self, code: str) -> None:
        if self.max_code_length is not None and len(code) > self.max_code_length:
            raise ValidationError(f"Code must be at most {self.max_code_length} characters")

    async def _owned_snippet(self, snippet_id: str, user_id: str, action: str) -> Snippet:
        snippet = await self.snippets.get(snippet_id)
        if snippet is None:
            raise NotFoundError("Snippet not found")
        if snippet.author_id != user_id:
            raise PermissionDeniedError(f"You can only {action} your own snippets")
        return snippet
