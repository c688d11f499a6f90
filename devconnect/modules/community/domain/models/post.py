# 📄 File: devconnect/modules/community/domain/models/post.py
# 🧭 Purpose (Layman Explanation):
# Defines a post on the community feed along with who liked it and what people said about it.
# The author's name and picture are copied onto the post when it is written and never change.
# 🧪 Purpose (Technical Summary):
# Domain models for the Post aggregate with embedded Like and Comment entries, frozen author
# snapshot fields, and pure list mutation helpers (head insert, membership, removal by id)
# 🔗 Dependencies:
# pydantic, datetime, typing, devconnect.shared.utils.identifiers (nested item ids)
# 🔄 Connected Modules / Calls From:
# post_service.py, post_repository.py, post_repository_impl.py, post_schemas.py

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from devconnect.shared.utils.identifiers import new_object_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Like(BaseModel):
    """One like; a post holds at most one per user."""
    id: str = Field(default_factory=new_object_id)
    user: str


class Comment(BaseModel):
    """
    A comment on a post.

    ``name`` and ``avatar`` are the commenter's details at the moment
    of commenting and cannot be reassigned afterwards.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_object_id)
    user: str
    text: str
    name: str = Field(..., frozen=True)
    avatar: Optional[str] = Field(default=None, frozen=True)
    created_at: datetime = Field(default_factory=_utcnow)


class Post(BaseModel):
    """
    Post aggregate root.

    - user: owning user id
    - name, avatar: author snapshot taken at creation, frozen
    - likes, comments: newest first
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    user: str = Field(..., frozen=True)
    text: str
    name: str = Field(..., frozen=True)
    avatar: Optional[str] = Field(default=None, frozen=True)
    likes: List[Like] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user == user_id

    # =========================================================================
    # LIKES
    # =========================================================================

    def like_by(self, user_id: str) -> Optional[Like]:
        """Membership test by the liking user's id, not the like's own id."""
        for like in self.likes:
            if like.user == user_id:
                return like
        return None

    def add_like(self, user_id: str) -> Like:
        like = Like(user=user_id)
        self.likes.insert(0, like)
        return like

    def remove_like(self, like_id: str) -> None:
        """Remove exactly the like entry with ``like_id``."""
        self.likes = [like for like in self.likes if like.id != like_id]

    # =========================================================================
    # COMMENTS
    # =========================================================================

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: str) -> None:
        self.comments = [c for c in self.comments if c.id != comment_id]

    def to_document(self) -> Dict[str, Any]:
        """Serialize for the document store (without the id)."""
        return self.model_dump(exclude={"id"})
