# 📄 File: devconnect/modules/user_management/domain/services/account_service.py
# 🧭 Purpose (Layman Explanation):
# Closes a developer's account for good: first their posts go, then their profile,
# and finally the account itself
# 🧪 Purpose (Technical Summary):
# Cascading account deletion orchestrated as an ordered saga of idempotent filter deletes
# (posts -> profile -> user) with no rollback; failures report the step reached
# 🔗 Dependencies:
# PostRepository, ProfileRepository, UserRepository, devconnect.shared.core.exceptions,
# devconnect.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, profile API endpoints (DELETE /profile)

import logging
from typing import Awaitable, Callable, Dict, List, Tuple

from pydantic import BaseModel

from devconnect.modules.community.domain.repositories.post_repository import PostRepository
from devconnect.shared.core.exceptions import AccountDeletionError, InvalidIdentifierError
from devconnect.shared.utils.identifiers import is_valid_object_id
from devconnect.shared.utils.logging import get_logger

from ..repositories.profile_repository import ProfileRepository
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)
audit = get_logger(__name__)


class AccountDeletionReport(BaseModel):
    """How many documents each deletion step removed"""
    user_id: str
    posts_deleted: int = 0
    profiles_deleted: int = 0
    users_deleted: int = 0


class AccountService:
    """
    Orchestrates cascading account deletion.

    Steps run in a fixed order: posts, then profile, then user. Each
    step is a filter delete that does nothing when its target is already
    gone, so re-running after a partial failure completes the job. This
    is not a transaction; completed steps are never undone.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        profile_repository: ProfileRepository,
        post_repository: PostRepository
    ):
        self.user_repository = user_repository
        self.profile_repository = profile_repository
        self.post_repository = post_repository

    async def delete_account(self, user_id: str) -> AccountDeletionReport:
        """
        Delete every post, the profile, and the user record of ``user_id``.

        Args:
            user_id: User to delete

        Returns:
            AccountDeletionReport with per-step counts

        Raises:
            NotFoundError: If user_id is malformed (nothing is deleted)
            AccountDeletionError: If a step fails; earlier steps stay applied
        """
        if not is_valid_object_id(user_id):
            raise InvalidIdentifierError(user_id, message="User not found", resource_type="user")

        logger.info(f"Deleting account for user: {user_id}")

        steps: List[Tuple[str, Callable[[str], Awaitable[int]]]] = [
            ("posts", self.post_repository.delete_by_user_id),
            ("profile", self.profile_repository.delete_by_user_id),
            ("user", self.user_repository.delete),
        ]

        counts: Dict[str, int] = {}
        completed: List[str] = []

        for step_name, step in steps:
            try:
                counts[step_name] = await step(user_id)
            except Exception as e:
                audit.error(
                    f"Account deletion for {user_id} failed at step '{step_name}': {e}",
                    extra={"failed_step": step_name, "completed_steps": list(completed)},
                    exc_info=True,
                )
                audit.log_user_action(
                    "delete_account",
                    user_id,
                    result="partial_failure",
                    extra={"failed_step": step_name, "completed_steps": list(completed)},
                )
                raise AccountDeletionError(user_id, step_name, completed) from e

            completed.append(step_name)
            audit.debug(f"Deletion step '{step_name}' removed {counts[step_name]} document(s)",
                        extra={"step": step_name, "deleted": counts[step_name]})

        report = AccountDeletionReport(
            user_id=user_id,
            posts_deleted=counts["posts"],
            profiles_deleted=counts["profile"],
            users_deleted=counts["user"],
        )

        audit.log_user_action("delete_account", user_id, extra=report.model_dump())
        return report
