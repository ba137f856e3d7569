"""
Tests for Password Hashing and Login Tokens
"""

from datetime import timedelta

from jose import jwt

from bookstore.config import get_settings
from bookstore.services.security import (
    ALGORITHM,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_is_not_plain_text(self):
        hashed = hash_password("P@ssword1")

        assert hashed != "P@ssword1"
        assert hashed.startswith("$2b$")

    def test_verify(self):
        hashed = hash_password("P@ssword1")

        assert verify_password("P@ssword1", hashed) is True
        assert verify_password("p@ssword1", hashed) is False

    def test_hashes_are_salted(self):
        assert hash_password("P@ssword1") != hash_password("P@ssword1")


class TestAccessToken:
    def test_round_trip(self):
        token = create_access_token("admin@bookstore.com", 1, ["Administrator"])

        payload = decode_token(token)

        assert payload["sub"] == "admin@bookstore.com"
        assert payload["uid"] == 1
        assert payload["roles"] == ["Administrator"]

    def test_expired_token(self):
        token = create_access_token(
            "admin@bookstore.com",
            1,
            [],
            expires_delta=timedelta(seconds=-10),
        )

        assert decode_token(token) is None

    def test_wrong_audience(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": "admin@bookstore.com", "aud": "http://elsewhere", "iss": settings.jwt_issuer},
            settings.jwt_key,
            algorithm=ALGORITHM,
        )

        assert decode_token(token) is None

    def test_wrong_key(self):
        token = jwt.encode(
            {"sub": "admin@bookstore.com"},
            "another-key-that-is-long-enough-to-be-valid",
            algorithm=ALGORITHM,
        )

        assert decode_token(token) is None

    def test_garbage(self):
        assert decode_token("not.a.token") is None
