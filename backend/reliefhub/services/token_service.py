"""
ReliefHub Backend — Token Issuer
==================================

What:  Issues and verifies the signed bearer tokens returned by /login.
How:   python-jose encodes an HS256 JWT with ``email``, ``name``, ``iat``
       and ``exp`` claims. The secret and lifetime come from settings.
Who:   AuthService calls issue(); clients and tests call decode().

Tokens are identity assertions only: no role claims, no refresh tokens,
no revocation list.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt

from reliefhub.config import Settings

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Signs identity claims with a shared secret."""

    def __init__(self, secret: str, ttl_seconds: int, algorithm: str = "HS256"):
        self.secret = secret
        self.ttl_seconds = ttl_seconds
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenIssuer":
        return cls(
            secret=config.jwt_secret,
            ttl_seconds=config.token_ttl_seconds,
            algorithm=config.jwt_algorithm,
        )

    def issue(self, email: str, name: str) -> str:
        """
        Create a signed token for a user.

        Args:
            email: Stored email of the authenticated user
            name:  Stored display name of the authenticated user

        Returns:
            Compact JWT string, valid for ``ttl_seconds``.
        """
        now = datetime.now(timezone.utc)
        claims = {
            "email": email,
            "name": name,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self.ttl_seconds)).timestamp()),
        }
        token = jwt.encode(claims, self.secret, algorithm=self.algorithm)
        logger.debug("Issued token for %s (ttl=%ds)", email, self.ttl_seconds)
        return token

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry, returning the claims.

        Raises:
            jose.JWTError: Bad signature, malformed token, or expired token.
        """
        return jwt.decode(token, self.secret, algorithms=[self.algorithm])
