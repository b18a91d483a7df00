"""
ReliefHub Backend — Credential Service Unit Tests
===================================================

What:  Tests for password hashing and the AuthService register/login flows.
How:   Uses the in-memory users collection from conftest and, where a call
       must not happen at all, AsyncMock collections.

What we test:
    ✅ Hashes are salted bcrypt strings that never contain the plaintext
    ✅ Duplicate registration raises ConflictError and stores one user
    ✅ Correct credentials return a token carrying email and name
    ✅ Unknown email and wrong password both raise UnauthorizedError
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from reliefhub.exceptions import ConflictError, UnauthorizedError
from reliefhub.services.credential_service import (
    AuthService,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for the bcrypt helpers."""

    def test_hash_is_bcrypt_with_requested_rounds(self):
        hashed = hash_password("s3cret!", rounds=4)
        assert hashed.startswith("$2b$04$")
        assert "s3cret!" not in hashed

    def test_same_password_hashes_differently(self):
        """Each hash gets its own salt."""
        assert hash_password("s3cret!", rounds=4) != hash_password("s3cret!", rounds=4)

    def test_verify_accepts_correct_password(self):
        hashed = hash_password("s3cret!", rounds=4)
        assert verify_password("s3cret!", hashed) is True

    def test_verify_rejects_wrong_password(self):
        hashed = hash_password("s3cret!", rounds=4)
        assert verify_password("S3cret!", hashed) is False

    def test_verify_rejects_missing_hash(self):
        assert verify_password("anything", "") is False

    def test_long_passwords_are_truncated_consistently(self):
        """Passwords past bcrypt's 72-byte limit still hash and verify."""
        password = "x" * 100
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed) is True


class TestRegister:
    """Tests for AuthService.register."""

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password(self, users, token_issuer):
        service = AuthService(users, token_issuer, rounds=4)

        await service.register(name="Ada", email="ada@example.org", password="pw-123")

        assert len(users.documents) == 1
        stored = users.documents[0]
        assert stored["name"] == "Ada"
        assert stored["email"] == "ada@example.org"
        assert stored["password"] != "pw-123"
        assert verify_password("pw-123", stored["password"])

    @pytest.mark.asyncio
    async def test_register_duplicate_email_conflicts(self, users, token_issuer):
        service = AuthService(users, token_issuer, rounds=4)
        await service.register(name="Ada", email="ada@example.org", password="pw-123")

        with pytest.raises(ConflictError, match="User already exists"):
            await service.register(name="Other", email="ada@example.org", password="different")

        assert len(users.documents) == 1
        assert users.documents[0]["name"] == "Ada"

    @pytest.mark.asyncio
    async def test_register_email_is_case_sensitive(self, users, token_issuer):
        service = AuthService(users, token_issuer, rounds=4)
        await service.register(name="Ada", email="ada@example.org", password="pw")
        await service.register(name="Ada", email="Ada@example.org", password="pw")

        assert len(users.documents) == 2


class TestAuthenticate:
    """Tests for AuthService.authenticate."""

    @pytest.mark.asyncio
    async def test_authenticate_returns_token_with_claims(self, users, token_issuer):
        service = AuthService(users, token_issuer, rounds=4)
        await service.register(name="Ada", email="ada@example.org", password="pw-123")

        token = await service.authenticate(email="ada@example.org", password="pw-123")

        claims = token_issuer.decode(token)
        assert claims["email"] == "ada@example.org"
        assert claims["name"] == "Ada"

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password(self, users, token_issuer):
        service = AuthService(users, token_issuer, rounds=4)
        await service.register(name="Ada", email="ada@example.org", password="pw-123")

        with pytest.raises(UnauthorizedError, match="Invalid email or password"):
            await service.authenticate(email="ada@example.org", password="nope")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_email_skips_hashing(self, token_issuer):
        """No user means no bcrypt comparison and no token."""
        users = MagicMock()
        users.find_one = AsyncMock(return_value=None)
        issuer = MagicMock()

        service = AuthService(users, issuer, rounds=4)

        with pytest.raises(UnauthorizedError):
            await service.authenticate(email="ghost@example.org", password="pw")

        users.find_one.assert_awaited_once_with({"email": "ghost@example.org"})
        issuer.issue.assert_not_called()
