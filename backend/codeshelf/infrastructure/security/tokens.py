"""
Signed auth tokens.

Tokens are HS256 JWTs carrying ``userId``, ``email`` and ``username`` plus
the standard ``iat`` and ``exp`` claims.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from codeshelf.domain.models.records import TokenPayload, User
from codeshelf.shared.config import settings

logger = logging.getLogger(__name__)


class TokenService:
    """Issue and verify auth tokens with a shared secret."""

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_in: Optional[timedelta] = None,
    ):
        self._secret = secret or settings.secret_key
        self._algorithm = algorithm or settings.jwt_algorithm
        self._expires_in = expires_in or timedelta(days=settings.jwt_expires_days)

    def create_token(self, user: User, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims: Dict[str, Any] = TokenPayload(
            user_id=user.id, email=user.email, username=user.username
        ).to_claims()
        claims["iat"] = int(issued_at.timestamp())
        claims["exp"] = int((issued_at + self._expires_in).timestamp())
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> Optional[TokenPayload]:
        """Return the payload of a valid, unexpired token, else None."""
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.InvalidTokenError as exc:
            logger.warning(f"Rejected invalid token: {exc}")
            return None
        return _to_payload(claims)

    def decode_token(self, token: str) -> Optional[TokenPayload]:
        """Read claims without checking signature or expiry."""
        try:
            claims = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
        except jwt.InvalidTokenError:
            return None
        return _to_payload(claims)

    def get_token_expiration(self, token: str) -> Optional[datetime]:
        payload = self.decode_token(token)
        if payload is None or payload.exp is None:
            return None
        return datetime.fromtimestamp(payload.exp, tz=timezone.utc)

    def is_token_expired(self, token: str) -> bool:
        expiration = self.get_token_expiration(token)
        if expiration is None:
            return True
        return expiration < datetime.now(timezone.utc)


def _to_payload(claims: Dict[str, Any]) -> Optional[TokenPayload]:
    if "userId" not in claims:
        return None
    return TokenPayload(
        user_id=claims["userId"],
        email=claims.get("email", ""),
        username=claims.get("username", ""),
        iat=claims.get("iat"),
        exp=claims.get("exp"),
    )
