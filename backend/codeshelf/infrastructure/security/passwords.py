"""Salted PBKDF2 password hashing."""

import hashlib
import hmac
import secrets
from typing import Optional

from codeshelf.shared.config import settings

ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, *, iterations: Optional[int] = None) -> str:
    """Return ``algorithm$iterations$salt$hexdigest``."""
    iterations = iterations or settings.password_hash_iterations
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), iterations)
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, rounds, salt, expected = encoded.split("$")
        iterations = int(rounds)
        salt_bytes = salt.encode("ascii")
    except ValueError:
        return False
    if algorithm != ALGORITHM or iterations < 1:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt_bytes, iterations)
    return hmac.compare_digest(digest.hex().encode("ascii"), expected.encode("utf-8"))
