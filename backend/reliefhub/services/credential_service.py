"""
ReliefHub Backend — Credential Service
========================================

What:  Registration and login against the ``users`` collection.
How:   Passwords are hashed with bcrypt (salted, fixed work factor) in a
       worker thread so a slow hash never stalls the event loop. Login
       verifies the hash and delegates to TokenIssuer.
Who:   Called by the /register and /login route handlers.

Registration Flow:
    hash password → insert {name, email, password: hash}
    → DuplicateKeyError from the unique email index → ConflictError

    The store enforces uniqueness in the same operation that writes the
    user, so two concurrent registrations for one email cannot both succeed.

Login Flow:
    find user by email → bcrypt compare → TokenIssuer.issue(email, name)
    Unknown email and wrong password both raise the same UnauthorizedError.
"""

import asyncio
import logging
from typing import Any

import bcrypt
from pymongo.errors import DuplicateKeyError

from reliefhub.exceptions import ConflictError, UnauthorizedError
from reliefhub.services.token_service import TokenIssuer

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Return a salted bcrypt hash (``$2b$<rounds>$...``) as text."""
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Compare a plaintext password against a stored bcrypt hash."""
    if not hashed:
        return False
    return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))


class AuthService:
    """
    Registers users and exchanges valid credentials for a token.

    Args:
        users:         The ``users`` collection (async pymongo collection)
        token_issuer:  Signs tokens for authenticated users
        rounds:        bcrypt work factor used for new hashes
    """

    def __init__(self, users: Any, token_issuer: TokenIssuer, rounds: int = 10):
        self.users = users
        self.token_issuer = token_issuer
        self.rounds = rounds

    async def register(self, name: str, email: str, password: str) -> None:
        """
        Create a user with a hashed password.

        Raises:
            ConflictError: A user with this email already exists.
        """
        hashed = await asyncio.to_thread(hash_password, password, self.rounds)
        try:
            await self.users.insert_one({"name": name, "email": email, "password": hashed})
        except DuplicateKeyError:
            logger.warning("Registration rejected: email already registered")
            raise ConflictError(context={"email": email})
        logger.info("Registered user %s", email)

    async def authenticate(self, email: str, password: str) -> str:
        """
        Verify credentials and return a signed token.

        Raises:
            UnauthorizedError: Unknown email or wrong password.
        """
        user = await self.users.find_one({"email": email})
        if user is None:
            logger.info("Login failed: unknown email")
            raise UnauthorizedError(context={"reason": "unknown_email"})

        is_valid = await asyncio.to_thread(verify_password, password, user.get("password", ""))
        if not is_valid:
            logger.info("Login failed for %s: wrong password", email)
            raise UnauthorizedError(context={"reason": "wrong_password"})

        logger.info("Login succeeded for %s", email)
        return self.token_issuer.issue(email=user["email"], name=user.get("name"))
