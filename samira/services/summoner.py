"""Summoner-v4 and champion-mastery-v4 lookups (platform routing)."""

from typing import List

from samira.riot_api.constants import Endpoints, build_path
from samira.riot_api.either import Either
from samira.riot_api.errors import ApiError
from samira.riot_api.models import ChampionMasteryDTO, SummonerDTO

from .base import BaseService


class SummonerService(BaseService):
    async def get_summoner_by_puuid(self, puuid: str) -> Either[ApiError, SummonerDTO]:
        """Get summoner by PUUID."""
        url = build_path(Endpoints.SUMMONER_BY_PUUID, puuid=puuid)
        return await self._fetch(url, SummonerDTO, "Summoner")

    async def get_champion_masteries_by_puuid(
        self, puuid: str
    ) -> Either[ApiError, List[ChampionMasteryDTO]]:
        """Get every champion mastery entry for a player."""
        url = build_path(Endpoints.CHAMPION_MASTERIES_BY_PUUID, puuid=puuid)
        return await self._fetch(url, List[ChampionMasteryDTO], "Champion mastery")
