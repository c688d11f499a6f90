# 📄 File: tests/test_models.py
# 🧭 Purpose (Layman Explanation):
# Checks the building blocks: avatars, skill lists, profile field updates and the rules
# on posts, likes and comments.
# 🧪 Purpose (Technical Summary):
# Unit tests for User, Profile, ProfileFields, Experience and Post domain models.
# 🔗 Dependencies:
# pytest, pydantic
# 🔄 Connected Modules / Calls From:
# pytest

import hashlib
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from devconnect.modules.community.domain.models.post import Comment, Post
from devconnect.modules.user_management.domain.models.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    parse_skills,
)
from devconnect.modules.user_management.domain.models.user import User


def test_gravatar_url_uses_md5_of_normalized_email():
    url = User.gravatar_url("  Alice@Example.COM ")
    digest = hashlib.md5(b"alice@example.com").hexdigest()

    assert url == f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def test_user_email_is_lowercased_and_public_view_hides_hash():
    user = User(id="64b7f0c2a1b2c3d4e5f60718", name="Alice", email="Alice@Example.com",
                password_hash="hash")

    public = user.to_public()
    assert public.email == "alice@example.com"
    assert "password_hash" not in public.model_dump()


@pytest.mark.parametrize("raw, expected", [
    ("python, fastapi ,mongodb", ["python", "fastapi", "mongodb"]),
    ("python,, ,go", ["python", "go"]),
    ("solo", ["solo"]),
])
def test_parse_skills(raw, expected):
    assert parse_skills(raw) == expected


def test_profile_fields_only_emit_present_values():
    update = ProfileFields(status="Developer", skills="a, b", company="", twitter="t").to_update()

    assert update == {"status": "Developer", "skills": ["a", "b"], "social.twitter": "t"}


def test_experience_dates():
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    end = datetime(2019, 1, 1, tzinfo=timezone.utc)

    assert Experience(title="Dev", company="Acme", from_date=start).has_valid_dates()
    assert not Experience(title="Dev", company="Acme", from_date=start, to_date=end).has_valid_dates()
    assert not Experience(title="Dev", company="Acme", from_date=start, to_date=end,
                          current=True).has_valid_dates()


def test_dates_are_stored_as_aware_utc():
    entry = Education(school="MIT", degree="BSc", field_of_study="CS", from_date=date(2015, 9, 1))
    assert entry.from_date == datetime(2015, 9, 1, tzinfo=timezone.utc)


def test_profile_nested_lookup_misses_are_reported():
    profile = Profile(user="64b7f0c2a1b2c3d4e5f60718")
    first = Experience(title="A", company="X", from_date=date(2020, 1, 1))
    second = Experience(title="B", company="Y", from_date=date(2021, 1, 1))
    profile.add_experience(first)
    profile.add_experience(second)

    assert [e.title for e in profile.experience] == ["B", "A"]
    assert profile.find_experience_index(first.id) == 1
    assert profile.find_experience_index("64b7f0c2a1b2c3d4e5f60799") is None


def test_replace_experience_keeps_id_and_position():
    profile = Profile(user="64b7f0c2a1b2c3d4e5f60718")
    original = Experience(title="A", company="X", from_date=date(2020, 1, 1))
    profile.add_experience(original)
    profile.add_experience(Experience(title="B", company="Y", from_date=date(2021, 1, 1)))

    profile.replace_experience(1, Experience(title="A2", company="X", from_date=date(2020, 1, 1)))

    assert profile.experience[1].id == original.id
    assert profile.experience[1].title == "A2"


def test_profile_owner_is_immutable():
    profile = Profile(user="64b7f0c2a1b2c3d4e5f60718")
    with pytest.raises(PydanticValidationError):
        profile.user = "64b7f0c2a1b2c3d4e5f60719"


class TestPost:
    def _post(self):
        return Post(id="64b7f0c2a1b2c3d4e5f60700", user="u1", text="hi", name="Alice")

    def test_like_membership_is_by_user(self):
        post = self._post()
        like = post.add_like("u2")

        assert post.like_by("u2") is like
        assert post.like_by("u3") is None

    def test_remove_like_removes_exactly_one_entry(self):
        post = self._post()
        first = post.add_like("u2")
        post.add_like("u3")

        post.remove_like(first.id)
        assert [like.user for like in post.likes] == ["u3"]

    def test_author_snapshot_is_frozen(self):
        post = self._post()
        with pytest.raises(PydanticValidationError):
            post.name = "Mallory"

        comment = Comment(user="u2", text="yo", name="Bob")
        with pytest.raises(PydanticValidationError):
            comment.avatar = "x"

    def test_comments_newest_first(self):
        post = self._post()
        post.add_comment(Comment(user="u2", text="first", name="Bob"))
        post.add_comment(Comment(user="u3", text="second", name="Carol"))

        assert [c.text for c in post.comments] == ["second", "first"]
