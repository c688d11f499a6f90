# 📄 File: tests/test_profile_service.py
# 🧭 Purpose (Layman Explanation):
# Checks creating and editing profiles, and keeping job and school history in order.
# 🧪 Purpose (Technical Summary):
# ProfileService tests against the in-memory document store: upsert merge semantics,
# owner join, kind checks, experience/education list mutation and date validation.
# 🔗 Dependencies:
# pytest, pytest-asyncio, tests.fakes
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import date

import pytest

from devconnect.modules.user_management.domain.models.profile import (
    Education,
    Experience,
    ProfileFields,
)
from devconnect.shared.core.exceptions import InvalidIdentifierError, NotFoundError, ValidationError

MISSING_ID = "64b7f0c2a1b2c3d4e5f60799"


def _experience(title="Developer", start=date(2020, 1, 1), end=None, current=False):
    return Experience(title=title, company="Acme", from_date=start, to_date=end, current=current)


def _education(school="MIT"):
    return Education(school=school, degree="BSc", field_of_study="CS", from_date=date(2012, 9, 1))


async def _profile_for(profile_service, user):
    return await profile_service.upsert_profile(
        user.id, ProfileFields(status="Developer", skills="python, go")
    )


# =========================================================================
# UPSERT AND READS
# =========================================================================

async def test_upsert_creates_profile_with_owner(profile_service, make_user):
    alice = await make_user("Alice")

    profile = await profile_service.upsert_profile(
        alice.id, ProfileFields(status="Developer", skills="python, fastapi ,mongodb")
    )

    assert profile.user == alice.id
    assert profile.skills == ["python", "fastapi", "mongodb"]
    assert profile.owner.name == "Alice"
    assert profile.owner.avatar == alice.avatar


async def test_upsert_merges_and_keeps_single_profile(profile_service, make_user, store):
    alice = await make_user("Alice")
    await profile_service.upsert_profile(
        alice.id,
        ProfileFields(status="Developer", skills="python", company="Acme", twitter="tw", youtube="yt"),
    )

    profile = await profile_service.upsert_profile(
        alice.id, ProfileFields(status="Senior Developer", skills="go", twitter="tw2")
    )

    assert store.count("profiles") == 1
    assert profile.status == "Senior Developer"
    assert profile.skills == ["go"]
    assert profile.company == "Acme"
    assert profile.social.twitter == "tw2"
    assert profile.social.youtube == "yt"


async def test_upsert_keeps_experience(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)
    await profile_service.add_experience(alice.id, _experience())

    profile = await _profile_for(profile_service, alice)
    assert len(profile.experience) == 1


async def test_get_own_profile_without_profile(profile_service, make_user):
    alice = await make_user("Alice")

    with pytest.raises(NotFoundError, match="There is no profile for this user"):
        await profile_service.get_own_profile(alice.id)


async def test_get_profile_by_user_kind_check(profile_service):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        await profile_service.get_profile_by_user("not-an-id")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Profile not found"


async def test_get_profile_by_user_missing(profile_service):
    with pytest.raises(NotFoundError, match="Profile not found"):
        await profile_service.get_profile_by_user(MISSING_ID)


async def test_list_profiles_joins_every_owner(profile_service, make_user):
    alice = await make_user("Alice")
    bob = await make_user("Bob")
    await _profile_for(profile_service, alice)
    await _profile_for(profile_service, bob)

    profiles = await profile_service.list_profiles()

    assert sorted(p.owner.name for p in profiles) == ["Alice", "Bob"]


async def test_list_profiles_empty(profile_service):
    assert await profile_service.list_profiles() == []


# =========================================================================
# EXPERIENCE
# =========================================================================

async def test_add_experience_requires_profile(profile_service, make_user):
    alice = await make_user("Alice")

    with pytest.raises(NotFoundError):
        await profile_service.add_experience(alice.id, _experience())


async def test_add_experience_newest_first(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)

    await profile_service.add_experience(alice.id, _experience("First"))
    profile = await profile_service.add_experience(alice.id, _experience("Second"))

    assert [e.title for e in profile.experience] == ["Second", "First"]
    assert profile.owner.name == "Alice"


async def test_add_experience_rejects_reversed_dates(profile_service, make_user, store):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)

    with pytest.raises(ValidationError, match="From or to Date is incorrect"):
        await profile_service.add_experience(
            alice.id, _experience(start=date(2021, 1, 1), end=date(2020, 1, 1))
        )

    profile = await profile_service.get_own_profile(alice.id)
    assert profile.experience == []


async def test_current_experience_still_checks_dates(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)

    with pytest.raises(ValidationError, match="From or to Date is incorrect"):
        await profile_service.add_experience(
            alice.id, _experience(start=date(2021, 1, 1), end=date(2020, 1, 1), current=True)
        )

    profile = await profile_service.get_own_profile(alice.id)
    assert profile.experience == []


async def test_update_experience_keeps_id_and_position(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)
    await profile_service.add_experience(alice.id, _experience("First"))
    profile = await profile_service.add_experience(alice.id, _experience("Second"))
    target = profile.experience[1]

    updated = await profile_service.update_experience(alice.id, target.id, _experience("First v2"))

    assert [e.title for e in updated.experience] == ["Second", "First v2"]
    assert updated.experience[1].id == target.id


async def test_update_experience_checks_dates(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)
    profile = await profile_service.add_experience(alice.id, _experience())

    with pytest.raises(ValidationError):
        await profile_service.update_experience(
            alice.id, profile.experience[0].id, _experience(start=date(2021, 1, 1), end=date(2020, 1, 1))
        )


async def test_update_missing_experience(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)
    await profile_service.add_experience(alice.id, _experience())

    with pytest.raises(NotFoundError, match="Experience not found"):
        await profile_service.update_experience(alice.id, MISSING_ID, _experience("Other"))


async def test_remove_experience_removes_exactly_one(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)
    await profile_service.add_experience(alice.id, _experience("First"))
    profile = await profile_service.add_experience(alice.id, _experience("Second"))

    remaining = await profile_service.remove_experience(alice.id, profile.experience[0].id)

    assert [e.title for e in remaining.experience] == ["First"]


async def test_remove_missing_experience_leaves_list_unchanged(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)
    await profile_service.add_experience(alice.id, _experience("Only"))

    with pytest.raises(NotFoundError, match="Experience not found"):
        await profile_service.remove_experience(alice.id, MISSING_ID)

    profile = await profile_service.get_own_profile(alice.id)
    assert [e.title for e in profile.experience] == ["Only"]


# =========================================================================
# EDUCATION
# =========================================================================

async def test_education_lifecycle(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)

    await profile_service.add_education(alice.id, _education("MIT"))
    profile = await profile_service.add_education(alice.id, _education("Stanford"))
    assert [e.school for e in profile.education] == ["Stanford", "MIT"]

    mit_id = profile.education[1].id
    profile = await profile_service.update_education(alice.id, mit_id, _education("MIT OCW"))
    assert profile.education[1].id == mit_id
    assert profile.education[1].school == "MIT OCW"

    profile = await profile_service.remove_education(alice.id, mit_id)
    assert [e.school for e in profile.education] == ["Stanford"]


async def test_remove_missing_education(profile_service, make_user):
    alice = await make_user("Alice")
    await _profile_for(profile_service, alice)

    with pytest.raises(NotFoundError, match="Education not found"):
        await profile_service.remove_education(alice.id, MISSING_ID)


async def test_new_developer_first_job(profile_service, make_user):
    alice = await make_user("Alice")
    await profile_service.upsert_profile(alice.id, ProfileFields(status="Developer", skills="go,rust"))

    profile = await profile_service.add_experience(
        alice.id, Experience(title="Eng", company="Acme", from_date="2021-01-01")
    )

    assert profile.experience[0].title == "Eng"
    assert profile.skills == ["go", "rust"]
