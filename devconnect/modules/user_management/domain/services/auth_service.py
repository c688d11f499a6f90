# 📄 File: devconnect/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles signing up, logging in, and working out who is making a request from the
# login token they send along
# 🧪 Purpose (Technical Summary):
# Domain services for registration (gravatar avatar, bcrypt hashing), credential login,
# current-user lookup and token-to-identity resolution
# 🔗 Dependencies:
# Domain models (User), UserRepository, devconnect.shared.core.security, devconnect.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, auth and users API endpoints

import logging
from typing import Optional

from pydantic import BaseModel

from devconnect.shared.config.settings import Settings
from devconnect.shared.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from devconnect.shared.core.security import CredentialService, TokenService
from devconnect.shared.utils.logging import get_logger

from ..models.user import PublicUser, User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)
audit = get_logger(__name__)


class AuthToken(BaseModel):
    """Issued access token"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class IdentityResolver:
    """
    Maps an incoming token to an authenticated user id.

    Gate for every private operation: anything that fails here never
    reaches a manager.
    """

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    def resolve(self, token: Optional[str]) -> str:
        """
        Resolve a bearer token to the user id it was issued for.

        Args:
            token: Raw token string, possibly missing

        Returns:
            User ID carried by the token

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        if not token:
            raise AuthenticationError("No token, authorization denied")
        return self.token_service.decode(token).user_id


class AuthService:
    """
    Domain service for registration and login.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credentials: CredentialService,
        tokens: TokenService,
        settings: Settings
    ):
        self.user_repository = user_repository
        self.credentials = credentials
        self.tokens = tokens
        self.settings = settings

    async def register(self, name: str, email: str, password: str) -> AuthToken:
        """
        Register a new user and log them in.

        Args:
            name: Display name
            email: Email address, unique across users
            password: Plain text password

        Returns:
            AuthToken for the new user

        Raises:
            ConflictError: If a user with that email already exists
        """
        logger.info(f"Registering user with email: {email}")

        # 1. Reject duplicate email
        if await self.user_repository.get_by_email(email):
            audit.security.log_authentication(email, "register", False, extra={"reason": "duplicate_email"})
            raise ConflictError(
                "A user with that mail already exists",
                resource_type="user",
                conflict_field="email",
            )

        # 2. Build user with gravatar avatar and hashed password
        user = User(
            name=name,
            email=email,
            password_hash=self.credentials.hash(password),
            avatar=User.gravatar_url(
                email,
                base_url=self.settings.GRAVATAR_URL,
                size=self.settings.GRAVATAR_SIZE,
                rating=self.settings.GRAVATAR_RATING,
                default=self.settings.GRAVATAR_DEFAULT,
            ),
        )

        # 3. Persist; the unique email index still guards a concurrent duplicate
        created = await self.user_repository.create(user)

        audit.log_business_event(
            "user_registered",
            f"User registered: {created.id}",
            entity_id=created.id,
            entity_type="user",
        )
        return self._issue(created.id)

    async def login(self, email: str, password: str) -> AuthToken:
        """
        Authenticate with email and password.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = await self.user_repository.get_by_email(email)
        if user is None or not self.credentials.verify(password, user.password_hash):
            audit.security.log_authentication(
                user.id if user else email, "login", False
            )
            raise AuthenticationError("Invalid credentials")

        audit.security.log_authentication(user.id, "login", True)
        return self._issue(user.id)

    async def get_current_user(self, user_id: str) -> PublicUser:
        """
        Get the authenticated user without credential material.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user.to_public()

    def _issue(self, user_id: str) -> AuthToken:
        return AuthToken(
            access_token=self.tokens.issue(user_id),
            expires_in=self.tokens.expires_in,
        )
