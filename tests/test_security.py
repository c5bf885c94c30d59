from datetime import timedelta

from jose import jwt

from jobportal.core.config import settings
from jobportal.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = get_password_hash("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong-password", hashed)


def test_verify_password_rejects_empty_or_malformed_hash():
    assert not verify_password("secret123", "")
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_long_password_is_truncated_to_bcrypt_limit():
    password = "x" * 100
    hashed = get_password_hash(password)

    assert verify_password("x" * 72, hashed)


def test_access_token_claims():
    token = create_access_token("user-1", "alice", "RECRUITER")
    payload = decode_access_token(token)

    assert payload["sub"] == "user-1"
    assert payload["username"] == "alice"
    assert payload["role"] == "RECRUITER"
    assert payload["type"] == "access"
    assert payload["exp"] > payload["iat"]


def test_expired_token_is_rejected():
    token = create_access_token("user-1", "alice", "CANDIDATE", expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "user-1", "type": "access"}, "another-key", algorithm=settings.ALGORITHM)
    assert decode_access_token(token) is None


def test_token_of_other_type_is_rejected():
    token = jwt.encode({"sub": "user-1", "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert decode_access_token(token) is None


def test_garbage_token_is_rejected():
    assert decode_access_token("definitely.not.a-token") is None
