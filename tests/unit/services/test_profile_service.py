"""Unit tests for ProfileService."""

from datetime import date
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from core.exceptions import GitHubProfileNotFoundError, ProfileNotFoundError
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    ProfileOwner,
    ProfileWithOwner,
    SocialLinks,
)
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def repo_lookup() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(uow: FakeUnitOfWork, repo_lookup: AsyncMock) -> ProfileService:
    return ProfileService(lambda: uow, repo_lookup=repo_lookup)


@pytest.fixture
def profile(user_id: UUID) -> Profile:
    return Profile(user_id=user_id, status="Developer", skills=["Python"])


def _echo_saves(uow: FakeUnitOfWork) -> None:
    async def echo(profile: Profile) -> Profile:
        return profile

    uow.profiles.create.side_effect = echo
    uow.profiles.update.side_effect = echo


def _experience(title: str = "Engineer") -> Experience:
    return Experience(title=title, company="Acme", from_date=date(2020, 1, 1))


def _education(school: str = "MIT") -> Education:
    return Education(
        school=school, degree="BSc", fieldofstudy="CS", from_date=date(2015, 9, 1)
    )


# --- reads ---


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_get_own_returns_profile_with_owner(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        joined = ProfileWithOwner(profile, ProfileOwner(id=user_id, name="Ada", avatar=None))
        uow.profiles.get_with_owner.return_value = joined

        result = await service.get_own(user_id)

        assert result.owner.name == "Ada"
        assert result.profile is profile

    @pytest.mark.asyncio
    async def test_get_by_user_raises_when_missing(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_with_owner.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_by_user(user_id)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "There is no profile for this user"

    @pytest.mark.asyncio
    async def test_list_all(self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile):
        uow.profiles.list_with_owner.return_value = [ProfileWithOwner(profile, None)]

        result = await service.list_all()

        assert len(result) == 1


# --- upsert ---


class TestUpsert:
    @pytest.mark.asyncio
    async def test_creates_profile_when_absent(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None
        _echo_saves(uow)

        result = await service.upsert(
            user_id,
            ProfileFields(
                status="Developer",
                skills=" Python , SQL,, FastAPI ",
                social=SocialLinks(twitter="https://twitter.com/ada"),
            ),
        )

        uow.profiles.create.assert_called_once()
        uow.profiles.update.assert_not_called()
        assert result.user_id == user_id
        assert result.skills == ["Python", "SQL", "FastAPI"]
        assert result.social.twitter == "https://twitter.com/ada"
        assert uow.committed

    @pytest.mark.asyncio
    async def test_updates_only_provided_fields(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.company = "Acme"
        profile.social = SocialLinks(youtube="https://youtube.com/ada")
        uow.profiles.get_by_user.return_value = profile
        _echo_saves(uow)

        result = await service.upsert(user_id, ProfileFields(bio="Hello"))

        uow.profiles.create.assert_not_called()
        assert result.bio == "Hello"
        assert result.company == "Acme"
        assert result.status == "Developer"
        assert result.skills == ["Python"]
        assert result.social.youtube == "https://youtube.com/ada"

    @pytest.mark.asyncio
    async def test_social_links_replaced_as_a_whole(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.social = SocialLinks(youtube="https://youtube.com/ada")
        uow.profiles.get_by_user.return_value = profile
        _echo_saves(uow)

        result = await service.upsert(
            user_id, ProfileFields(social=SocialLinks(linkedin="https://linkedin.com/in/ada"))
        )

        assert result.social.linkedin == "https://linkedin.com/in/ada"
        assert result.social.youtube is None


# --- delete ---


class TestDeleteWithAccount:
    @pytest.mark.asyncio
    async def test_deletes_only_callers_profile_and_account(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        await service.delete_with_account(user_id)

        uow.profiles.delete_by_user.assert_called_once_with(user_id)
        uow.users.delete.assert_called_once_with(user_id)
        uow.posts.delete.assert_not_called()
        assert uow.committed


# --- experience / education ---


class TestExperience:
    @pytest.mark.asyncio
    async def test_add_prepends_entry(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.experience = [_experience("Old")]
        uow.profiles.get_by_user.return_value = profile
        _echo_saves(uow)

        result = await service.add_experience(user_id, _experience("New"))

        assert [e.title for e in result.experience] == ["New", "Old"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_add_without_profile_raises(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(user_id, _experience())

    @pytest.mark.asyncio
    async def test_remove_by_id(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        keep, drop = _experience("Keep"), _experience("Drop")
        profile.experience = [keep, drop]
        uow.profiles.get_by_user.return_value = profile
        _echo_saves(uow)

        result = await service.remove_experience(user_id, drop.id)

        assert [e.title for e in result.experience] == ["Keep"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_remove_unknown_id_is_noop(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.experience = [_experience("A"), _experience("B")]
        uow.profiles.get_by_user.return_value = profile

        result = await service.remove_experience(user_id, uuid4())

        assert [e.title for e in result.experience] == ["A", "B"]
        uow.profiles.update.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_remove_with_malformed_id_is_noop(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.experience = [_experience("A")]
        uow.profiles.get_by_user.return_value = profile

        result = await service.remove_experience(user_id, None)

        assert len(result.experience) == 1
        uow.profiles.update.assert_not_called()


class TestEducation:
    @pytest.mark.asyncio
    async def test_add_prepends_entry(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        profile.education = [_education("Old")]
        uow.profiles.get_by_user.return_value = profile
        _echo_saves(uow)

        result = await service.add_education(user_id, _education("New"))

        assert [e.school for e in result.education] == ["New", "Old"]

    @pytest.mark.asyncio
    async def test_remove_by_id(
        self, service: ProfileService, uow: FakeUnitOfWork, profile: Profile, user_id: UUID
    ):
        entry = _education()
        profile.education = [entry]
        uow.profiles.get_by_user.return_value = profile
        _echo_saves(uow)

        result = await service.remove_education(user_id, entry.id)

        assert result.education == []

    @pytest.mark.asyncio
    async def test_remove_without_profile_raises(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.remove_education(user_id, uuid4())


# --- github ---


class TestGitHubRepos:
    @pytest.mark.asyncio
    async def test_proxies_lookup(self, service: ProfileService, repo_lookup: AsyncMock):
        repo_lookup.get_user_repos.return_value = [{"name": "hello-world"}]

        result = await service.get_github_repos("octocat")

        assert result == [{"name": "hello-world"}]
        repo_lookup.get_user_repos.assert_called_once_with("octocat")

    @pytest.mark.asyncio
    async def test_propagates_not_found(self, service: ProfileService, repo_lookup: AsyncMock):
        repo_lookup.get_user_repos.side_effect = GitHubProfileNotFoundError("ghost")

        with pytest.raises(GitHubProfileNotFoundError):
            await service.get_github_repos("ghost")
