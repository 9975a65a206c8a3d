"""Account-v1 lookups (regional routing)."""

from samira.riot_api.constants import Endpoints, build_path
from samira.riot_api.either import Either
from samira.riot_api.errors import ApiError
from samira.riot_api.models import AccountDTO

from .base import BaseService


class AccountService(BaseService):
    """Riot account lookups. Needs a client pointed at a regional host."""

    async def get_account_by_puuid(self, puuid: str) -> Either[ApiError, AccountDTO]:
        """Get account by PUUID."""
        url = build_path(Endpoints.ACCOUNT_BY_PUUID, puuid=puuid)
        return await self._fetch(url, AccountDTO, "Account")

    async def get_account_by_riot_id(
        self, game_name: str, tag_line: str
    ) -> Either[ApiError, AccountDTO]:
        """Get account by Riot ID (gameName#tagLine)."""
        url = build_path(
            Endpoints.ACCOUNT_BY_RIOT_ID, game_name=game_name, tag_line=tag_line
        )
        return await self._fetch(url, AccountDTO, "Account")
