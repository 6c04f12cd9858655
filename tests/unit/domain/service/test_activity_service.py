"""Unit tests for ActivityService."""

import pytest
import pytest_asyncio

from playtrack.adapter.steam import MockSteamWebApiClient
from playtrack.domain.error import (
    NoAllowedDataError,
    NoDataError,
    NotFoundError,
    ProviderUnavailableError,
)
from playtrack.domain.service import ActivityService, UserService
from playtrack.domain.value import RecentlyPlayedGames, SteamId
from playtrack.persistence.repository.inmemory import (
    InMemoryActivityRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_game, make_steam_user

STEAM_ID = SteamId("76561197960287930")
ALLOWED = [730, 570, 440]


@pytest.fixture
def web_api():
    return MockSteamWebApiClient()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def activity_repo():
    return InMemoryActivityRepository()


@pytest.fixture
def service(web_api, activity_repo, user_repo):
    return ActivityService(web_api, activity_repo, UserService(user_repo), ALLOWED)


@pytest_asyncio.fixture
async def steam_user(user_repo):
    return await user_repo.create(make_steam_user(STEAM_ID.root))


class TestRefresh:
    """Tests for ActivityService.refresh()."""

    @pytest.mark.asyncio
    async def test_filters_to_allowed_titles(self, service, steam_user, activity_repo):
        """[730, 12345] with allow-list {730, 570, 440} should keep only 730."""
        records = await service.refresh(STEAM_ID)

        assert [r.app_id for r in records] == [730]
        assert records[0].user_id == steam_user.id
        assert records[0].name == "Counter-Strike 2"
        assert records[0].playtime_2weeks == 120
        assert records[0].playtime_forever == 4200

        stored = await activity_repo.find_all_by_user_id(steam_user.id)
        assert [r.app_id for r in stored] == [730]

    @pytest.mark.asyncio
    async def test_keeps_provider_order(self, service, web_api, steam_user):
        """Records should come back in the order Steam reported them."""
        web_api.recently_played = RecentlyPlayedGames(
            total_count=4,
            games=[make_game(440), make_game(999), make_game(730), make_game(570)],
        )

        records = await service.refresh(STEAM_ID)

        assert [r.app_id for r in records] == [440, 730, 570]

    @pytest.mark.asyncio
    async def test_missing_recent_playtime_is_kept_null(
        self, service, web_api, steam_user
    ):
        """A game without playtime_2weeks should store None."""
        web_api.recently_played = RecentlyPlayedGames(
            total_count=1, games=[make_game(570, playtime_2weeks=None)]
        )

        records = await service.refresh(STEAM_ID)

        assert records[0].playtime_2weeks is None

    @pytest.mark.asyncio
    async def test_refresh_twice_persists_once(
        self, service, web_api, steam_user, activity_repo
    ):
        """Identical data twice should store each (user, app) once and return it twice."""
        web_api.recently_played = RecentlyPlayedGames(
            total_count=2, games=[make_game(730), make_game(570)]
        )

        first = await service.refresh(STEAM_ID)
        second = await service.refresh(STEAM_ID)

        assert [r.app_id for r in first] == [730, 570]
        assert [r.app_id for r in second] == [730, 570]
        stored = await activity_repo.find_all_by_user_id(steam_user.id)
        assert len(stored) == 2

    @pytest.mark.asyncio
    async def test_existing_records_are_not_updated(
        self, service, web_api, steam_user, activity_repo
    ):
        """A repeat ingest is a no-op for stored rows, not an update."""
        web_api.recently_played = RecentlyPlayedGames(
            total_count=1, games=[make_game(730, playtime_forever=100)]
        )
        await service.refresh(STEAM_ID)

        web_api.recently_played = RecentlyPlayedGames(
            total_count=1, games=[make_game(730, playtime_forever=500)]
        )
        returned = await service.refresh(STEAM_ID)

        assert returned[0].playtime_forever == 500
        stored = await activity_repo.find_all_by_user_id(steam_user.id)
        assert stored[0].playtime_forever == 100

    @pytest.mark.asyncio
    async def test_no_allowed_titles(self, service, web_api, steam_user, activity_repo):
        """Only untracked games should fail with NoAllowedDataError and store nothing."""
        web_api.recently_played = RecentlyPlayedGames(
            total_count=2, games=[make_game(12345), make_game(999)]
        )

        with pytest.raises(NoAllowedDataError):
            await service.refresh(STEAM_ID)

        assert await activity_repo.find_all_by_user_id(steam_user.id) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reported",
        [
            RecentlyPlayedGames(),
            RecentlyPlayedGames(total_count=0, games=[]),
            RecentlyPlayedGames(total_count=0, games=None),
        ],
    )
    async def test_no_games_reported(self, service, web_api, steam_user, reported):
        """Zero or omitted games should fail with NoDataError."""
        web_api.recently_played = reported

        with pytest.raises(NoDataError):
            await service.refresh(STEAM_ID)

    @pytest.mark.asyncio
    async def test_no_data_is_checked_before_user_lookup(self, service, web_api):
        """An empty report for an unknown Steam ID is NoData, not NotFound."""
        web_api.recently_played = RecentlyPlayedGames()

        with pytest.raises(NoDataError):
            await service.refresh(STEAM_ID)

    @pytest.mark.asyncio
    async def test_unknown_steam_id(self, service, activity_repo):
        """Activity is never ingested for a Steam ID with no user."""
        with pytest.raises(NotFoundError):
            await service.refresh(STEAM_ID)

        assert activity_repo._records == {}

    @pytest.mark.asyncio
    async def test_steam_unavailable(self, service, web_api, steam_user):
        """Transport failures propagate as ProviderUnavailableError."""
        web_api.unavailable = True

        with pytest.raises(ProviderUnavailableError):
            await service.refresh(STEAM_ID)


class TestListForUser:
    """Tests for ActivityService.list_for_user()."""

    @pytest.mark.asyncio
    async def test_lists_only_own_records(self, service, user_repo, steam_user):
        """Should return the user's records and nobody else's."""
        other = await user_repo.create(make_steam_user("76561197960287931"))
        await service.refresh(STEAM_ID)
        await service.refresh(SteamId("76561197960287931"))

        mine = await service.list_for_user(steam_user.id)
        theirs = await service.list_for_user(other.id)

        assert [r.user_id for r in mine] == [steam_user.id]
        assert [r.user_id for r in theirs] == [other.id]
