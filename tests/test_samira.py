"""
Tests for the Samira facade.
"""

from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio

from samira import (
    Platform,
    Region,
    Samira,
    create_platform_samira,
    create_regional_samira,
    create_samira,
)
from samira.core.config import Settings
from tests.helpers import Router

from .services.payloads import PUUID

ACCOUNT = {"puuid": PUUID, "gameName": "TestPlayer", "tagLine": "EUW"}
SUMMONER = {
    "puuid": PUUID,
    "profileIconId": 1,
    "revisionDate": 1718445600000,
    "summonerLevel": 30,
}


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        riot_api_key="settings_key",
        riot_platform="EUW1",
        riot_region="europe",
        request_timeout_ms=5000,
        request_retries=2,
        request_retry_delay_ms=500,
    )


@pytest.fixture
def router():
    return Router(
        {
            f"/riot/account/v1/accounts/by-puuid/{PUUID}": httpx.Response(
                200, json=ACCOUNT
            ),
            f"/lol/summoner/v4/summoners/by-puuid/{PUUID}": httpx.Response(
                200, json=SUMMONER
            ),
            "/api/versions.json": httpx.Response(200, json=["14.12.1"]),
        }
    )


@pytest_asyncio.fixture
async def samira(settings, router):
    with patch("samira.samira.get_global_settings", return_value=settings):
        client = Samira(
            api_key="test_api_key",
            platform=Platform.NA1,
            region=Region.AMERICAS,
            transport=router.transport,
        )
    yield client
    await client.close()


class TestSamiraInit:
    @pytest.mark.asyncio
    async def test_falls_back_to_settings(self, settings):
        with patch("samira.samira.get_global_settings", return_value=settings):
            async with Samira() as client:
                assert client.get_config() == {
                    "api_key": "settings_key",
                    "platform": "euw1",
                    "region": "europe",
                }
                assert client.platform_client.timeout == 5000
                assert client.regional_client.retries == 2
                assert client.regional_client.retry_delay == 500

    @pytest.mark.asyncio
    async def test_explicit_arguments_win(self, settings):
        with patch("samira.samira.get_global_settings", return_value=settings):
            client = Samira(api_key="k", platform="KR", region="asia", retries=0)

        async with client:
            assert client.platform == "kr"
            assert client.region == "asia"
            assert client.platform_client.base_url == "https://kr.api.riotgames.com"
            assert client.regional_client.base_url == "https://asia.api.riotgames.com"
            assert client.platform_client.retries == 0

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_api_key_required(self, settings, api_key):
        with patch("samira.samira.get_global_settings", return_value=settings):
            with pytest.raises(ValueError, match="API key is required"):
                Samira(api_key=api_key)

    def test_api_key_required_when_unconfigured(self):
        empty = Settings(_env_file=None, riot_api_key="")
        with patch("samira.samira.get_global_settings", return_value=empty):
            with pytest.raises(ValueError):
                Samira()

    @pytest.mark.asyncio
    async def test_close_closes_every_session(self, samira):
        await samira.close()

        assert samira.platform_client.session.is_closed
        assert samira.regional_client.session.is_closed
        assert samira.data_dragon_client.session.is_closed


class TestSamiraRouting:
    @pytest.mark.asyncio
    async def test_regional_services_use_regional_host(self, samira, router):
        result = await samira.account.get_account_by_puuid(PUUID)

        assert result.is_right()
        assert router.requests[0].url.host == "americas.api.riotgames.com"
        assert router.requests[0].headers["X-Riot-Token"] == "test_api_key"

    @pytest.mark.asyncio
    async def test_platform_services_use_platform_host(self, samira, router):
        result = await samira.summoner.get_summoner_by_puuid(PUUID)

        assert result.is_right()
        assert router.requests[0].url.host == "na1.api.riotgames.com"

    @pytest.mark.asyncio
    async def test_services_share_clients(self, samira):
        assert samira.summoner._client is samira.platform_client
        assert samira.league._client is samira.platform_client
        assert samira.spectator._client is samira.platform_client
        assert samira.account._client is samira.regional_client
        assert samira.match._client is samira.regional_client
        assert samira.data_dragon._client is samira.data_dragon_client

    @pytest.mark.asyncio
    async def test_data_dragon_has_no_api_key(self, samira, router):
        result = await samira.data_dragon.get_latest_version()

        assert result.is_right()
        assert router.requests[0].url.host == "ddragon.leagueoflegends.com"
        assert "X-Riot-Token" not in router.requests[0].headers


class TestSamiraUpdates:
    @pytest.mark.asyncio
    async def test_update_api_key(self, samira, router):
        samira.update_api_key("rotated_key")
        await samira.account.get_account_by_puuid(PUUID)
        await samira.data_dragon.get_latest_version()

        assert samira.get_config()["api_key"] == "rotated_key"
        assert router.requests[0].headers["X-Riot-Token"] == "rotated_key"
        assert "X-Riot-Token" not in router.requests[1].headers

    @pytest.mark.asyncio
    async def test_update_platform(self, samira, router):
        samira.update_platform(Platform.EUW1)
        await samira.summoner.get_summoner_by_puuid(PUUID)

        assert samira.get_config()["platform"] == "euw1"
        assert router.requests[0].url.host == "euw1.api.riotgames.com"

    @pytest.mark.asyncio
    async def test_update_region(self, samira, router):
        samira.update_region("EUROPE")
        await samira.account.get_account_by_puuid(PUUID)

        assert samira.get_config()["region"] == "europe"
        assert router.requests[0].url.host == "europe.api.riotgames.com"


class TestSamiraHelpers:
    def test_available_platforms_and_regions(self):
        platforms = Samira.get_available_platforms()
        regions = Samira.get_available_regions()

        assert platforms["EUW1"] == "euw1"
        assert len(platforms) == 16
        assert regions == {
            "AMERICAS": "americas",
            "ASIA": "asia",
            "EUROPE": "europe",
            "SEA": "sea",
        }

    def test_validation(self):
        assert Samira.is_valid_platform("euw1") is True
        assert Samira.is_valid_platform("EUW1") is False
        assert Samira.is_valid_region("sea") is True
        assert Samira.is_valid_region("mars") is False

    @pytest.mark.parametrize(
        "platform,region",
        [("na1", "americas"), ("euw1", "europe"), ("kr", "asia"), ("vn2", "sea")],
    )
    def test_region_from_platform(self, platform, region):
        assert Samira.get_region_from_platform(platform) == region

    def test_region_from_unknown_platform(self):
        assert Samira.get_region_from_platform("xx9") == "americas"

    @pytest.mark.parametrize(
        "region,platform",
        [("americas", "na1"), ("europe", "euw1"), ("asia", "kr"), ("sea", "sg2")],
    )
    def test_platform_from_region(self, region, platform):
        assert Samira.get_platform_from_region(region) == platform

    def test_platform_from_unknown_region(self):
        assert Samira.get_platform_from_region("mars") == "na1"


class TestFactories:
    @pytest.mark.asyncio
    async def test_create_samira(self, settings):
        with patch("samira.samira.get_global_settings", return_value=settings):
            async with create_samira("k") as client:
                assert client.get_config() == {
                    "api_key": "k",
                    "platform": "euw1",
                    "region": "europe",
                }

    @pytest.mark.asyncio
    async def test_create_platform_samira(self, settings):
        with patch("samira.samira.get_global_settings", return_value=settings):
            async with create_platform_samira("k", "kr") as client:
                assert client.platform == "kr"
                assert client.region == "asia"

    @pytest.mark.asyncio
    async def test_create_regional_samira(self, settings):
        with patch("samira.samira.get_global_settings", return_value=settings):
            async with create_regional_samira("k", "sea") as client:
                assert client.platform == "sg2"
                assert client.region == "sea"
