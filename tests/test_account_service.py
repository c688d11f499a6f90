# 📄 File: tests/test_account_service.py
# 🧭 Purpose (Layman Explanation):
# Checks that closing an account removes the person's posts, profile and login, leaves
# everyone else alone, and can be finished by trying again if it stops half way.
# 🧪 Purpose (Technical Summary):
# AccountService tests: cascade order, per-step counts, partial failure reporting and
# idempotent re-run.
# 🔗 Dependencies:
# pytest, pytest-asyncio, tests.fakes
# 🔄 Connected Modules / Calls From:
# pytest

import logging

import pytest

from devconnect.modules.user_management.domain.models.profile import ProfileFields
from devconnect.modules.user_management.domain.services.account_service import AccountService
from devconnect.shared.core.exceptions import AccountDeletionError, InvalidIdentifierError, NotFoundError


async def _seed(make_user, profile_service, post_service):
    alice = await make_user("Alice")
    bob = await make_user("Bob")
    for user in (alice, bob):
        await profile_service.upsert_profile(user.id, ProfileFields(status="Dev", skills="py"))
    await post_service.create_post(alice.id, "a1")
    await post_service.create_post(alice.id, "a2")
    await post_service.create_post(bob.id, "b1")
    return alice, bob


async def test_delete_account_removes_only_own_data(
    account_service, profile_service, post_service, make_user, store
):
    alice, bob = await _seed(make_user, profile_service, post_service)

    report = await account_service.delete_account(alice.id)

    assert (report.posts_deleted, report.profiles_deleted, report.users_deleted) == (2, 1, 1)
    assert [p.user for p in await post_service.list_posts()] == [bob.id]
    assert [p.user for p in await profile_service.list_profiles()] == [bob.id]
    assert store.count("users") == 1


async def test_delete_account_is_idempotent(account_service, make_user):
    alice = await make_user("Alice")
    await account_service.delete_account(alice.id)

    report = await account_service.delete_account(alice.id)

    assert (report.posts_deleted, report.profiles_deleted, report.users_deleted) == (0, 0, 0)


async def test_delete_account_malformed_id_deletes_nothing(account_service, make_user, store):
    await make_user("Alice")

    with pytest.raises(InvalidIdentifierError):
        await account_service.delete_account("nope")

    assert store.count("users") == 1


async def test_partial_failure_reports_completed_steps_and_rerun_finishes(
    account_service, profile_service, post_service, make_user, store
):
    alice, _ = await _seed(make_user, profile_service, post_service)
    store.failing_collections.add("profiles")

    with pytest.raises(AccountDeletionError) as exc_info:
        await account_service.delete_account(alice.id)

    error = exc_info.value
    assert error.failed_step == "profile"
    assert error.completed_steps == ["posts"]
    assert error.status_code == 500
    assert store.count("posts") == 1
    assert store.count("users") == 2

    store.failing_collections.clear()
    report = await account_service.delete_account(alice.id)

    assert (report.posts_deleted, report.profiles_deleted, report.users_deleted) == (0, 1, 1)
    assert store.count("users") == 1


async def test_deleted_user_has_no_profile(account_service, profile_service, make_user, user_repository):
    alice = await make_user("Alice")
    await profile_service.upsert_profile(alice.id, ProfileFields(status="Dev", skills="py"))

    await account_service.delete_account(alice.id)

    with pytest.raises(NotFoundError, match="Profile not found"):
        await profile_service.get_profile_by_user(alice.id)
    assert await user_repository.get_by_id(alice.id) is None


async def test_partial_failure_is_logged_with_steps(
    account_service, profile_service, post_service, make_user, store, caplog
):
    alice, _ = await _seed(make_user, profile_service, post_service)
    store.failing_collections.add("users")

    with caplog.at_level(logging.ERROR, logger=AccountService.__module__):
        with pytest.raises(AccountDeletionError):
            await account_service.delete_account(alice.id)

    failures = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert failures[0].failed_step == "user"
    assert failures[0].completed_steps == ["posts", "profile"]
