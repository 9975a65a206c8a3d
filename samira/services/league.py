"""League-v4 lookups (platform routing)."""

from typing import List

from samira.riot_api.constants import Endpoints, build_path
from samira.riot_api.either import Either
from samira.riot_api.errors import ApiError
from samira.riot_api.models import LeagueEntryDTO

from .base import BaseService


class LeagueService(BaseService):
    async def get_entries_by_puuid(
        self, puuid: str
    ) -> Either[ApiError, List[LeagueEntryDTO]]:
        """Get ranked entries (one per queue) for a player."""
        url = build_path(Endpoints.LEAGUE_ENTRIES_BY_PUUID, puuid=puuid)
        return await self._fetch(url, List[LeagueEntryDTO], "League entries")
