"""FastAPI dependency providers for the presentation layer."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from codeshelf.application.use_cases.auth_use_cases import AuthUseCases
from codeshelf.application.use_cases.snippet_use_cases import SnippetUseCases
from codeshelf.application.use_cases.tag_use_cases import TagUseCases
from codeshelf.domain.models.records import User
from codeshelf.domain.services.complexity_service import ComplexityAnalysisService
from codeshelf.shared.di import container
from codeshelf.shared.exceptions import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_use_cases() -> AuthUseCases:
    return container.get_auth_use_cases()


def get_snippet_use_cases() -> SnippetUseCases:
    return container.get_snippet_use_cases()


def get_tag_use_cases() -> TagUseCases:
    return container.get_tag_use_cases()


def get_complexity_service() -> ComplexityAnalysisService:
    return container.get_complexity_service()


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthUseCases = Depends(get_auth_use_cases),
) -> Optional[User]:
    """The caller's user when a valid bearer token is sent, else None."""
    if credentials is None:
        return None
    return await auth.current_user(credentials.credentials)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise AuthenticationError("User must be authenticated")
    return user


__all__ = [
    "get_auth_use_cases",
    "get_snippet_use_cases",
    "get_tag_use_cases",
    "get_complexity_service",
    "get_optional_user",
    "get_current_user",
]
