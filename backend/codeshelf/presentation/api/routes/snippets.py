"""Snippet CRUD, listing and sharing endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, Response

from codeshelf.application.use_cases.snippet_use_cases import SnippetQuery, SnippetUseCases
from codeshelf.domain.models.records import User
from codeshelf.presentation.api.dependencies import (
    get_current_user,
    get_optional_user,
    get_snippet_use_cases,
)
from codeshelf.presentation.api.schemas import (
    ShareResponse,
    SnippetCreateRequest,
    SnippetListResponse,
    SnippetResponse,
    SnippetUpdateRequest,
)
from codeshelf.shared.config import settings
from codeshelf.shared.helpers import get_snippet_share_url


def create_snippets_router() -> APIRouter:
    router = APIRouter(prefix="/snippets", tags=["snippets"])

    @router.get("", response_model=SnippetListResponse)
    async def list_snippets(
        author: Optional[str] = Query(default=None, description="Author username"),
        language: Optional[str] = None,
        q: Optional[str] = Query(default=None, max_length=100, description="Search query"),
        visibility: Literal["all", "public", "private"] = "all",
        sort: Literal["newest", "oldest"] = "newest",
        viewer: Optional[User] = Depends(get_optional_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        """
        Browse snippets.

        Without ``author`` only public snippets are listed. Authors see
        their own private snippets when they filter by their own username.
        """
        author_id = None
        if author:
            author_user = await snippets.users.get_by_username(author)
            if author_user is None:
                return SnippetListResponse(snippets=[], count=0)
            author_id = author_user.id

        own_listing = viewer is not None and author_id == viewer.id
        query = SnippetQuery(
            author_id=author_id,
            public_only=not own_listing,
            language=language,
            search_query=q,
            visibility=visibility if own_listing else "all",
            sort=sort,
        )
        items = await snippets.list_snippets_with_authors(query)
        return SnippetListResponse(
            snippets=[SnippetResponse.from_joined(item) for item in items],
            count=len(items),
        )

    @router.post("", response_model=SnippetResponse, status_code=201)
    async def create_snippet(
        payload: SnippetCreateRequest,
        user: User = Depends(get_current_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        snippet = await snippets.create_snippet(
            author=user,
            title=payload.title,
            description=payload.description,
            code=payload.code,
            language=payload.language,
            tags=payload.tags,
            is_public=payload.is_public,
            time_complexity=payload.time_complexity,
        )
        return SnippetResponse.from_domain(snippet, user.public())

    @router.get("/{snippet_id}", response_model=SnippetResponse)
    async def get_snippet(
        snippet_id: str,
        viewer: Optional[User] = Depends(get_optional_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        snippet = await snippets.get_snippet(snippet_id, viewer.id if viewer else None)
        author = await snippets.users.get_by_id(snippet.author_id)
        return SnippetResponse.from_domain(snippet, author.public() if author else None)

    @router.patch("/{snippet_id}", response_model=SnippetResponse)
    async def update_snippet(
        snippet_id: str,
        payload: SnippetUpdateRequest,
        user: User = Depends(get_current_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        changes = payload.model_dump(exclude_unset=True)
        snippet = await snippets.update_snippet(snippet_id, user.id, changes)
        return SnippetResponse.from_domain(snippet, user.public())

    @router.delete("/{snippet_id}", status_code=204)
    async def delete_snippet(
        snippet_id: str,
        user: User = Depends(get_current_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        await snippets.delete_snippet(snippet_id, user.id)
        return Response(status_code=204)

    @router.get("/{snippet_id}/share", response_model=ShareResponse)
    async def share_snippet(
        snippet_id: str,
        viewer: Optional[User] = Depends(get_optional_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        snippet = await snippets.get_snippet(snippet_id, viewer.id if viewer else None)
        path = get_snippet_share_url(snippet.id, snippet.title)
        return ShareResponse(url=f"{settings.app_url}{path}", path=path)

    return router


__all__ = ["create_snippets_router"]
