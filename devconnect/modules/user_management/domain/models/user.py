# 📄 File: devconnect/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what we store about each developer account: their name, email, scrambled password
# and the little picture shown next to their posts
# 🧪 Purpose (Technical Summary):
# Domain model for the User entity with email normalization, gravatar avatar derivation
# and a public projection that never carries the password hash
# 🔗 Dependencies:
# pydantic, hashlib, urllib.parse, datetime
# 🔄 Connected Modules / Calls From:
# auth_service.py, user_repository.py, post_service.py (author snapshots), profile_service.py (owner join)

import hashlib
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PublicUser(BaseModel):
    """User as shown to clients: no credential material."""
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    created_at: datetime


class User(BaseModel):
    """
    User domain model representing a registered developer account.

    - id (ObjectId string): assigned by the store on insert
    - name (String): display name, snapshotted onto posts and comments
    - email (String): unique, stored lowercase
    - password_hash (String): opaque bcrypt hash
    - avatar (String): gravatar URL derived from the email
    - created_at (Timestamp): registration time
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    email: str
    password_hash: str
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @staticmethod
    def gravatar_url(
        email: str,
        base_url: str = "https://www.gravatar.com/avatar",
        size: int = 200,
        rating: str = "pg",
        default: str = "mm"
    ) -> str:
        """
        Build the gravatar URL for an email address.

        Args:
            email: Address to hash (trimmed and lowercased first)
            base_url: Gravatar avatar endpoint
            size: Image size in pixels
            rating: Maximum content rating
            default: Image served when no gravatar exists

        Returns:
            Avatar URL
        """
        digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
        query = urlencode({"s": size, "r": rating, "d": default})
        return f"{base_url}/{digest}?{query}"

    def to_public(self) -> PublicUser:
        return PublicUser(
            id=self.id,
            name=self.name,
            email=self.email,
            avatar=self.avatar,
            created_at=self.created_at,
        )

    def to_document(self) -> Dict[str, Any]:
        """Serialize for the document store (without the id)."""
        return self.model_dump(exclude={"id"})
