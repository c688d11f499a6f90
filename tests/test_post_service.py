# 📄 File: tests/test_post_service.py
# 🧭 Purpose (Layman Explanation):
# Checks the community feed: posting, liking once, unliking, commenting, and only being
# able to delete your own things.
# 🧪 Purpose (Technical Summary):
# PostService tests against the in-memory document store: author snapshots, ordering,
# ownership checks, duplicate-like conflicts and comment removal.
# 🔗 Dependencies:
# pytest, pytest-asyncio, tests.fakes
# 🔄 Connected Modules / Calls From:
# pytest

import pytest

from devconnect.shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
)

MISSING_ID = "64b7f0c2a1b2c3d4e5f60799"


async def test_create_post_snapshots_author(post_service, make_user):
    alice = await make_user("Alice")

    post = await post_service.create_post(alice.id, "Hello world")

    assert post.id
    assert post.user == alice.id
    assert post.name == "Alice"
    assert post.avatar == alice.avatar
    assert post.likes == [] and post.comments == []


async def test_create_post_for_missing_user(post_service):
    with pytest.raises(NotFoundError, match="User not found"):
        await post_service.create_post(MISSING_ID, "Hello")


async def test_list_posts_newest_first(post_service, make_user):
    alice = await make_user("Alice")
    await post_service.create_post(alice.id, "first")
    await post_service.create_post(alice.id, "second")

    posts = await post_service.list_posts()

    assert [p.text for p in posts] == ["second", "first"]


async def test_get_post_kind_check_and_missing(post_service):
    with pytest.raises(InvalidIdentifierError, match="Post not found"):
        await post_service.get_post("123")

    with pytest.raises(NotFoundError, match="Post not found"):
        await post_service.get_post(MISSING_ID)


async def test_delete_post_requires_owner(post_service, make_user):
    alice = await make_user("Alice")
    bob = await make_user("Bob")
    post = await post_service.create_post(alice.id, "mine")

    with pytest.raises(AuthorizationError, match="This is not your post"):
        await post_service.delete_post(bob.id, post.id)
    assert (await post_service.get_post(post.id)).text == "mine"

    assert await post_service.delete_post(alice.id, post.id) == "Post deleted"
    with pytest.raises(NotFoundError):
        await post_service.get_post(post.id)


async def test_like_once_then_unlike(post_service, make_user):
    alice = await make_user("Alice")
    bob = await make_user("Bob")
    post = await post_service.create_post(alice.id, "like me")

    likes = await post_service.like_post(bob.id, post.id)
    assert [like.user for like in likes] == [bob.id]

    with pytest.raises(ConflictError, match="Post already liked"):
        await post_service.like_post(bob.id, post.id)
    assert len((await post_service.get_post(post.id)).likes) == 1

    likes = await post_service.unlike_post(bob.id, post.id)
    assert likes == []

    with pytest.raises(ConflictError, match="Post wasn't liked"):
        await post_service.unlike_post(bob.id, post.id)
    assert (await post_service.get_post(post.id)).likes == []


async def test_likes_newest_first_and_unlike_removes_only_own(post_service, make_user):
    alice = await make_user("Alice")
    bob = await make_user("Bob")
    carol = await make_user("Carol")
    post = await post_service.create_post(alice.id, "popular")

    await post_service.like_post(bob.id, post.id)
    likes = await post_service.like_post(carol.id, post.id)
    assert [like.user for like in likes] == [carol.id, bob.id]

    likes = await post_service.unlike_post(bob.id, post.id)
    assert [like.user for like in likes] == [carol.id]


async def test_comment_and_delete_comment(post_service, make_user):
    alice = await make_user("Alice")
    bob = await make_user("Bob")
    post = await post_service.create_post(alice.id, "discuss")

    await post_service.add_comment(alice.id, post.id, "first")
    comments = await post_service.add_comment(bob.id, post.id, "second")

    assert [c.text for c in comments] == ["second", "first"]
    assert comments[0].name == "Bob"

    bob_comment = comments[0]
    with pytest.raises(AuthorizationError, match="This is not your comment"):
        await post_service.delete_comment(alice.id, post.id, bob_comment.id)

    remaining = await post_service.delete_comment(bob.id, post.id, bob_comment.id)
    assert [c.text for c in remaining] == ["first"]


async def test_delete_missing_comment(post_service, make_user):
    alice = await make_user("Alice")
    post = await post_service.create_post(alice.id, "quiet")

    with pytest.raises(NotFoundError, match="Comment not found"):
        await post_service.delete_comment(alice.id, post.id, MISSING_ID)


async def test_like_missing_post(post_service, make_user):
    alice = await make_user("Alice")

    with pytest.raises(NotFoundError, match="Post not found"):
        await post_service.like_post(alice.id, MISSING_ID)
