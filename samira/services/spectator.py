"""Spectator-v5 lookups (platform routing)."""

from samira.riot_api.constants import Endpoints, build_path
from samira.riot_api.either import Either
from samira.riot_api.errors import ApiError
from samira.riot_api.models import CurrentGameInfoDTO, FeaturedGamesDTO

from .base import BaseService


class SpectatorService(BaseService):
    async def get_active_game_by_puuid(
        self, puuid: str
    ) -> Either[ApiError, CurrentGameInfoDTO]:
        """
        Get the live game a player is in.

        A player who is not in game comes back as Left with status 404.
        """
        url = build_path(Endpoints.CURRENT_GAME_BY_PUUID, puuid=puuid)
        return await self._fetch(url, CurrentGameInfoDTO, "Active game")

    async def get_featured_games(self) -> Either[ApiError, FeaturedGamesDTO]:
        """Get the list of featured games."""
        return await self._fetch(
            Endpoints.FEATURED_GAMES, FeaturedGamesDTO, "Featured games"
        )
