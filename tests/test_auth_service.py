# 📄 File: tests/test_auth_service.py
# 🧭 Purpose (Layman Explanation):
# Checks signing up, logging in and looking up the signed-in developer.
# 🧪 Purpose (Technical Summary):
# AuthService tests: duplicate email conflict, stored hash and avatar, single login error
# message, current-user lookup without credential material.
# 🔗 Dependencies:
# pytest, pytest-asyncio, tests.fakes
# 🔄 Connected Modules / Calls From:
# pytest

import pytest

from devconnect.shared.core.exceptions import AuthenticationError, ConflictError, NotFoundError


async def test_register_stores_hash_and_gravatar(auth_service, user_repository, security):
    token = await auth_service.register("Alice", "Alice@Example.com", "secret1")

    user_id = security.tokens.decode(token.access_token).user_id
    user = await user_repository.get_by_id(user_id)

    assert user.email == "alice@example.com"
    assert user.password_hash != "secret1"
    assert security.credentials.verify("secret1", user.password_hash)
    assert user.avatar.startswith("https://www.gravatar.com/avatar/")
    assert token.token_type == "bearer"


async def test_register_duplicate_email(auth_service):
    await auth_service.register("Alice", "alice@example.com", "secret1")

    with pytest.raises(ConflictError, match="A user with that mail already exists"):
        await auth_service.register("Other", "ALICE@example.com", "secret2")


async def test_login(auth_service, security):
    registered = await auth_service.register("Alice", "alice@example.com", "secret1")

    token = await auth_service.login("alice@example.com", "secret1")

    assert security.tokens.decode(token.access_token).user_id == \
        security.tokens.decode(registered.access_token).user_id


@pytest.mark.parametrize("email, password", [
    ("alice@example.com", "wrong-password"),
    ("nobody@example.com", "secret1"),
])
async def test_login_failures_share_one_message(auth_service, email, password):
    await auth_service.register("Alice", "alice@example.com", "secret1")

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        await auth_service.login(email, password)


async def test_get_current_user(auth_service, security):
    token = await auth_service.register("Alice", "alice@example.com", "secret1")
    user_id = security.tokens.decode(token.access_token).user_id

    user = await auth_service.get_current_user(user_id)

    assert user.name == "Alice"
    assert not hasattr(user, "password_hash")


async def test_get_current_user_deleted(auth_service):
    with pytest.raises(NotFoundError):
        await auth_service.get_current_user("64b7f0c2a1b2c3d4e5f60799")
