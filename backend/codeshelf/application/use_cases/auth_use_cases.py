"""Use cases for registration, login and account maintenance."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from codeshelf.domain.models.records import User, UserAccount, utcnow
from codeshelf.domain.repositories.interfaces import UserRepository
from codeshelf.infrastructure.security.passwords import hash_password, verify_password
from codeshelf.infrastructure.security.tokens import TokenService
from codeshelf.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from codeshelf.shared.helpers import generate_id

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
MIN_PASSWORD_LENGTH = 6


@dataclass
class AuthResult:
    account: UserAccount
    token: str


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def _check_username(username: str) -> None:
    if not USERNAME_PATTERN.fullmatch(username):
        raise ValidationError("Username can only contain letters, numbers, and underscores")


class AuthUseCases:
    """Coordinate account persistence and token issuing."""

    def __init__(self, repository: UserRepository, tokens: TokenService):
        self.repository = repository
        self.tokens = tokens

    async def register(self, email: str, password: str, name: str, username: str) -> AuthResult:
        if not email or not password or not name or not username:
            raise ValidationError("All fields are required")
        if await self.repository.get_by_email(email):
            raise ConflictError("Email already exists")
        if await self.repository.get_by_username(username):
            raise ConflictError("Username already exists")
        _check_password(password)
        _check_username(username)

        user = User(
            id=generate_id(),
            email=email,
            name=name,
            username=username,
            password_hash=hash_password(password),
        )
        await self.repository.add(user)
        logger.info(f"Registered user {user.username} ({user.id})")

        return AuthResult(account=user.account(), token=self.tokens.create_token(user))

    async def login(self, email: str, password: str) -> AuthResult:
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError("Invalid email or password")

        return AuthResult(account=user.account(), token=self.tokens.create_token(user))

    async def current_user(self, token: Optional[str]) -> Optional[User]:
        """Resolve the user behind a token; None when missing, invalid or orphaned."""
        if not token:
            return None
        payload = self.tokens.verify_token(token)
        if payload is None:
            return None
        return await self.repository.get_by_id(payload.user_id)

    async def update_profile(
        self,
        user_id: str,
        name: Optional[str] = None,
        username: Optional[str] = None,
    ) -> UserAccount:
        user = await self._require_user(user_id)

        if username:
            _check_username(username)
            existing = await self.repository.get_by_username(username)
            if existing and existing.id != user_id:
                raise ConflictError("Username already exists")
            user.username = username
        if name:
            user.name = name

        user.updated_at = utcnow()
        await self.repository.update(user)
        return user.account()

    async def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        user = await self._require_user(user_id)

        if not verify_password(current_password, user.password_hash):
            raise ValidationError("Current password is incorrect")
        _check_password(new_password)

        user.password_hash = hash_password(new_password)
        user.updated_at = utcnow()
        await self.repository.update(user)
        logger.info(f"Password changed for user {user_id}")

    async def _require_user(self, user_id: str) -> User:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
