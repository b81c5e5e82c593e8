"""Registration, login and account endpoints."""

from fastapi import APIRouter, Depends

from codeshelf.application.use_cases.auth_use_cases import AuthUseCases
from codeshelf.application.use_cases.snippet_use_cases import SnippetUseCases
from codeshelf.domain.models.records import User
from codeshelf.presentation.api.dependencies import (
    get_auth_use_cases,
    get_current_user,
    get_snippet_use_cases,
)
from codeshelf.presentation.api.schemas import (
    AccountResponse,
    AccountStatsResponse,
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)


def create_auth_router() -> APIRouter:
    router = APIRouter(prefix="/auth", tags=["auth"])

    @router.post("/register", response_model=AuthResponse, status_code=201)
    async def register(payload: RegisterRequest, auth: AuthUseCases = Depends(get_auth_use_cases)):
        result = await auth.register(
            email=payload.email,
            password=payload.password,
            name=payload.name,
            username=payload.username,
        )
        return AuthResponse(user=AccountResponse.from_domain(result.account), token=result.token)

    @router.post("/login", response_model=AuthResponse)
    async def login(payload: LoginRequest, auth: AuthUseCases = Depends(get_auth_use_cases)):
        result = await auth.login(payload.email, payload.password)
        return AuthResponse(user=AccountResponse.from_domain(result.account), token=result.token)

    @router.post("/logout")
    async def logout():
        # Tokens are stateless; the client discards its copy.
        return {"success": True}

    @router.get("/me", response_model=AccountResponse)
    async def me(user: User = Depends(get_current_user)):
        return AccountResponse.from_domain(user.account())

    @router.patch("/me", response_model=AuthResponse)
    async def update_me(
        payload: ProfileUpdateRequest,
        user: User = Depends(get_current_user),
        auth: AuthUseCases = Depends(get_auth_use_cases),
    ):
        account = await auth.update_profile(user.id, name=payload.name, username=payload.username)
        return AuthResponse(user=AccountResponse.from_domain(account))

    @router.get("/me/stats", response_model=AccountStatsResponse)
    async def my_stats(
        user: User = Depends(get_current_user),
        snippets: SnippetUseCases = Depends(get_snippet_use_cases),
    ):
        """Counts over all of the caller's snippets, private ones included."""
        return AccountStatsResponse(
            total_snippets=await snippets.count_user_snippets(user.id),
            languages=await snippets.get_user_languages(user.id),
        )

    @router.post("/me/password")
    async def change_password(
        payload: ChangePasswordRequest,
        user: User = Depends(get_current_user),
        auth: AuthUseCases = Depends(get_auth_use_cases),
    ):
        await auth.change_password(user.id, payload.current_password, payload.new_password)
        return {"success": True}

    return router


__all__ = ["create_auth_router"]
