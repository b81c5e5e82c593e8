from datetime import datetime, timedelta, timezone

import jwt

from codeshelf.domain.models.records import User
from codeshelf.infrastructure.security.passwords import hash_password, verify_password
from codeshelf.infrastructure.security.tokens import TokenService


def make_user():
    return User(
        id="42",
        email="ada@example.com",
        name="Ada",
        username="ada",
        password_hash="unused",
    )


def test_token_roundtrip(token_service):
    token = token_service.create_token(make_user())
    payload = token_service.verify_token(token)
    assert payload.user_id == "42"
    assert payload.email == "ada@example.com"
    assert payload.username == "ada"
    assert payload.exp - payload.iat == 7 * 24 * 3600


def test_token_claims_use_camel_case(token_service):
    token = token_service.create_token(make_user())
    claims = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert claims["userId"] == "42"


def test_token_signed_with_other_secret_is_rejected(token_service):
    token = TokenService(secret="other-secret").create_token(make_user())
    assert token_service.verify_token(token) is None
    # decoding without verification still reads the claims
    assert token_service.decode_token(token).user_id == "42"


def test_expired_token(token_service):
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = token_service.create_token(make_user(), now=issued)
    assert token_service.verify_token(token) is None
    assert token_service.is_token_expired(token)
    assert token_service.get_token_expiration(token) < datetime.now(timezone.utc)


def test_fresh_token_is_not_expired(token_service):
    token = token_service.create_token(make_user())
    assert not token_service.is_token_expired(token)


def test_garbage_tokens(token_service):
    assert token_service.verify_token("not-a-token") is None
    assert token_service.decode_token("not-a-token") is None
    assert token_service.get_token_expiration("not-a-token") is None
    assert token_service.is_token_expired("not-a-token")


def test_token_without_user_id_is_rejected(token_service):
    token = jwt.encode({"email": "ada@example.com"}, "test-secret", algorithm="HS256")
    assert token_service.verify_token(token) is None


def test_password_hash_format():
    encoded = hash_password("secret1", iterations=1000)
    assert encoded.startswith("pbkdf2_sha256$1000$")
    assert verify_password("secret1", encoded)
    assert not verify_password("secret2", encoded)


def test_password_hashes_are_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_malformed_hashes_never_verify():
    assert not verify_password("secret1", "plain-text")
    assert not verify_password("secret1", "md5$1$salt$digest")
    assert not verify_password("secret1", "pbkdf2_sha256$abc$salt$digest")
    assert not verify_password("secret1", "pbkdf2_sha256$0$salt$digest")
    assert not verify_password("secret1", "pbkdf2_sha256$1000$sält$digest")
    assert not verify_password("secret1", "pbkdf2_sha256$1000$salt$dïgest")
