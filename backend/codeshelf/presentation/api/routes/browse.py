"""Language index, public profiles and tags."""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends

from codeshelf.application.use_cases.snippet_use_cases import SnippetQuery, SnippetUseCases
from codeshelf.application.use_cases.tag_use_cases import TagUseCases
from codeshelf.domain.models.records import TagType, User
from codeshelf.presentation.api.dependencies import (
    get_current_user,
    get_snippet_use_cases,
    get_tag_use_cases,
)
from codeshelf.presentation.api.schemas import (
    LanguageCountResponse,
    ProfileResponse,
    SnippetListResponse,
    SnippetResponse,
    TagCreateRequest,
    TagResponse,
)
from codeshelf.shared.exceptions import NotFoundError
from codeshelf.shared.config import settings
from codeshelf.shared.helpers import create_slug, get_language_url, get_profile_url


def create_browse_router() -> APIRouter:
    router = APIRouter()

    @router.get("/languages", response_model=List[LanguageCountResponse], tags=["languages"])
    async def list_languages(snippets: SnippetUseCases = Depends(get_snippet_use_cases)):
        languages = await snippets.get_all_languages()
        return [
            LanguageCountResponse.from_domain(item, get_language_url(item.language))
            for item in languages
        ]

    @router.get(
        "/languages/{language}/snippets",
        response_model=SnippetListResponse,
        tags=["languages"],
    )
    async def list_language_snippets(
        language: str,
        sort: Literal["newest", "oldest"] = "newest",
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        """Public snippets of a language, addressed by name or slug."""
        slug = create_slug(language)
        known = await snippets.get_all_languages()
        match = next((item.language for item in known if create_slug(item.language) == slug), None)
        if match is None:
            raise NotFoundError(f"No public snippets for language '{language}'")

        items = await snippets.list_snippets_with_authors(
            SnippetQuery(public_only=True, language=match, sort=sort)
        )
        return SnippetListResponse(
            snippets=[SnippetResponse.from_joined(item) for item in items],
            count=len(items),
        )

    @router.get("/users/{username}", response_model=ProfileResponse, tags=["users"])
    async def get_profile(
        username: str,
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        profile = await snippets.get_user_public_profile(username)
        return ProfileResponse.from_domain(profile, get_profile_url(username, settings.app_url))

    @router.get("/tags", response_model=List[TagResponse], tags=["tags"])
    async def list_tags(
        type: Optional[TagType] = None,
        tags: TagUseCases = Depends(get_tag_use_cases),
    ):
        return [TagResponse.from_domain(tag) for tag in await tags.list_tags(type)]

    @router.get("/tags/{slug}", response_model=TagResponse, tags=["tags"])
    async def get_tag(slug: str, tags: TagUseCases = Depends(get_tag_use_cases)):
        return TagResponse.from_domain(await tags.get_tag_by_slug(slug))

    @router.post("/tags", response_model=TagResponse, status_code=201, tags=["tags"])
    async def create_tag(
        payload: TagCreateRequest,
        _user: User = Depends(get_current_user),
        tags: TagUseCases = Depends(get_tag_use_cases),
    ):
        tag = await tags.create_tag(payload.name, payload.type)
        return TagResponse.from_domain(tag)

    return router


__all__ = ["create_browse_router"]
