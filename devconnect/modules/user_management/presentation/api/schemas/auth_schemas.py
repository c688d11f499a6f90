# 📄 File: devconnect/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what the sign-up and login forms must contain and what the app sends back,
# such as the login token and the public details of the signed-in developer.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for registration, login and current-user endpoints with
# field-level validation (email format, password length, required name).
#
# 🔗 Dependencies:
# - pydantic (with email-validator for EmailStr)
# - devconnect.modules.user_management.domain (AuthToken, PublicUser)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.modules.user_management.presentation.api.v1.auth
# - devconnect.modules.user_management.presentation.api.v1.users

"""
Authentication API Schemas

Request Schemas:
- RegisterRequest: New account with name, email and password
- LoginRequest: Email and password credentials

Response Schemas:
- TokenResponse: Issued access token
- UserResponse: Public user information (never the password hash)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from devconnect.modules.user_management.domain.models.user import PublicUser
from devconnect.modules.user_management.domain.services.auth_service import AuthToken


class RegisterRequest(BaseModel):
    """
    Registration request schema.

    The avatar is derived from the email, so it is not part of the request.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice Doe",
                "email": "alice@example.com",
                "password": "s3cret-pass",
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="Email address, unique per account")
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="Password, 6 or more characters",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(..., min_length=1, description="Password")


class TokenResponse(BaseModel):
    """Issued access token."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Seconds until the token expires")

    @classmethod
    def from_domain(cls, token: AuthToken) -> "TokenResponse":
        return cls(
            access_token=token.access_token,
            token_type=token.token_type,
            expires_in=token.expires_in,
        )


class UserResponse(BaseModel):
    """Public user information."""

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    avatar: Optional[str] = Field(default=None, description="Avatar URL")
    created_at: datetime = Field(..., description="Registration time")

    @classmethod
    def from_domain(cls, user: PublicUser) -> "UserResponse":
        return cls(**user.model_dump())
