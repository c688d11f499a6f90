# 📄 File: devconnect/shared/core/security.py
# 🧭 Purpose (Layman Explanation):
# Keeps passwords safe by scrambling them before they are stored, and hands out signed
# login tokens that prove who you are for the next hour.
# 🧪 Purpose (Technical Summary):
# Credential service (passlib bcrypt hashing) and token service (python-jose JWT issue/verify)
# built from explicit settings and injected where needed, plus the identity payload model.
# 🔗 Dependencies:
# passlib, python-jose, pydantic, devconnect.shared.config.settings, devconnect.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, user_management AuthService and IdentityResolver

"""
Security utilities for JWT issuing/validation and password hashing.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from ..config.settings import Settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class TokenData(BaseModel):
    """Token payload data structure"""
    user_id: str
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class CredentialService:
    """
    Password hashing and verification backed by passlib's bcrypt scheme.
    """

    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password
        """
        return self.pwd_context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Verify password against hash.

        Args:
            password: Plain text password
            password_hash: Stored hashed password

        Returns:
            bool: True if password matches
        """
        try:
            return self.pwd_context.verify(password, password_hash)
        except ValueError as e:
            # Unrecognized or corrupted hash
            logger.error(f"Password verification error: {e}")
            return False


class TokenService:
    """
    Issues and decodes time-bounded access tokens carrying a user id.
    """

    TOKEN_TYPE = "access"

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self.expire_minutes * 60

    def issue(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create JWT access token for a user.

        Args:
            user_id: Subject of the token
            expires_delta: Custom expiration time

        Returns:
            str: Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))

        to_encode: Dict[str, Any] = {
            "sub": user_id,
            "exp": expire,
            "iat": now,
            "type": self.TOKEN_TYPE,
        }

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for user: {user_id}")
        return encoded_jwt

    def decode(self, token: str) -> TokenData:
        """
        Verify and decode JWT token.

        Args:
            token: JWT token to verify

        Returns:
            TokenData: Decoded identity

        Raises:
            AuthenticationError: If token is invalid, expired or of the wrong type
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            logger.warning("Token has expired")
            raise AuthenticationError("Token expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Token is not valid")

        if payload.get("type") != self.TOKEN_TYPE:
            logger.warning(f"Token type mismatch. Expected: {self.TOKEN_TYPE}, Got: {payload.get('type')}")
            raise AuthenticationError("Token is not valid")

        user_id = payload.get("sub")
        if not user_id:
            logger.warning("Token missing subject (user_id)")
            raise AuthenticationError("Token is not valid")

        return TokenData(
            user_id=user_id,
            issued_at=_from_timestamp(payload.get("iat")),
            expires_at=_from_timestamp(payload.get("exp")),
        )


class SecurityManager:
    """
    Centralized security manager bundling the credential and token services.
    Built once per application from Settings and shared through dependencies.
    """

    def __init__(self, settings: Settings):
        self.credentials = CredentialService(rounds=settings.BCRYPT_ROUNDS)
        self.tokens = TokenService(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
        )


def _from_timestamp(value: Optional[int]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)
