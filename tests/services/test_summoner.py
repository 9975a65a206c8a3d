"""
Tests for SummonerService.
"""

import httpx
import pytest

from samira.services import SummonerService
from tests.helpers import Router

from .payloads import PUUID


class TestSummonerService:
    @pytest.mark.asyncio
    async def test_get_summoner_by_puuid(self, make_client, summoner_data):
        path = f"/lol/summoner/v4/summoners/by-puuid/{PUUID}"
        router = Router({path: httpx.Response(200, json=summoner_data)})
        service = SummonerService(make_client(router))

        result = await service.get_summoner_by_puuid(PUUID)

        assert result.is_right()
        summoner = result.value
        assert summoner.puuid == PUUID
        assert summoner.summoner_level == 312
        assert summoner.profile_icon_id == 4568
        assert summoner.revision_date == 1718445600000

    @pytest.mark.asyncio
    async def test_summoner_without_legacy_id(self, make_client, summoner_data):
        del summoner_data["id"]
        path = f"/lol/summoner/v4/summoners/by-puuid/{PUUID}"
        router = Router({path: httpx.Response(200, json=summoner_data)})
        service = SummonerService(make_client(router))

        result = await service.get_summoner_by_puuid(PUUID)

        assert result.is_right()
        assert result.value.id is None

    @pytest.mark.asyncio
    async def test_forbidden(self, make_client):
        body = {"status": {"status_code": 403, "message": "Forbidden"}}
        path = f"/lol/summoner/v4/summoners/by-puuid/{PUUID}"
        router = Router({path: httpx.Response(403, json=body)})
        service = SummonerService(make_client(router))

        result = await service.get_summoner_by_puuid(PUUID)

        assert result.is_left()
        assert result.value.status == 403
        assert result.value.message == "Forbidden"

    @pytest.mark.asyncio
    async def test_get_champion_masteries(self, make_client):
        path = f"/lol/champion-mastery/v4/champion-masteries/by-puuid/{PUUID}"
        masteries = [
            {
                "puuid": PUUID,
                "championId": 157,
                "championLevel": 7,
                "championPoints": 412345,
                "lastPlayTime": 1718445600000,
                "championPointsSinceLastLevel": 390745,
                "championPointsUntilNextLevel": 0,
                "tokensEarned": 0,
            }
        ]
        router = Router({path: httpx.Response(200, json=masteries)})
        service = SummonerService(make_client(router))

        result = await service.get_champion_masteries_by_puuid(PUUID)

        assert result.is_right()
        assert len(result.value) == 1
        assert result.value[0].champion_points == 412345
        assert result.value[0].chest_granted is None
