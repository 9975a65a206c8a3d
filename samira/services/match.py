"""Match-v5 lookups (regional routing)."""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Union

import structlog

from samira.riot_api.constants import Endpoints, QueueType, build_path
from samira.riot_api.either import Either, left, right
from samira.riot_api.errors import ApiError
from samira.riot_api.models import MatchDTO

from .base import BaseService

logger = structlog.get_logger(__name__)


@dataclass
class MatchHistoryOptions:
    """Query filters for the match id listing."""

    start: Optional[int] = None
    count: Optional[int] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    queue: Optional[Union[int, QueueType]] = None
    type: Optional[str] = None

    def to_params(self) -> Dict[str, Union[int, str]]:
        """Query parameters with Riot's camelCase names; unset filters are omitted."""
        params = {
            "start": self.start,
            "count": self.count,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "queue": int(self.queue) if self.queue is not None else None,
            "type": self.type,
        }
        return {key: value for key, value in params.items() if value is not None}


class MatchService(BaseService):
    """Match lookups. Needs a client pointed at a regional host."""

    async def get_match_by_id(self, match_id: str) -> Either[ApiError, MatchDTO]:
        """Get match details by match ID."""
        url = build_path(Endpoints.MATCH_BY_ID, match_id=match_id)
        return await self._fetch(url, MatchDTO, "Match")

    async def get_match_history_by_puuid(
        self, puuid: str, options: Optional[MatchHistoryOptions] = None
    ) -> Either[ApiError, List[str]]:
        """Get match ids for a player, newest first."""
        url = build_path(Endpoints.MATCHES_BY_PUUID, puuid=puuid)
        params = (options or MatchHistoryOptions()).to_params()
        return await self._fetch(url, List[str], "Match history", params=params or None)

    async def get_matches_by_ids(
        self, match_ids: List[str]
    ) -> Either[ApiError, List[MatchDTO]]:
        """
        Fetch several matches concurrently.

        Rate limiting is handled by the shared HTTP client. Matches that fail
        to load are logged and skipped, so the result is always Right.
        """
        results = await asyncio.gather(
            *(self.get_match_by_id(match_id) for match_id in match_ids)
        )

        matches: List[MatchDTO] = []
        failures: List[Dict[str, object]] = []
        for match_id, result in zip(match_ids, results):
            if result.is_right():
                matches.append(result.value)
            else:
                failures.append(
                    {"match_id": match_id, "status": result.value.status}
                )

        if failures:
            logger.warning(
                "Failed to fetch matches",
                failed=len(failures),
                requested=len(match_ids),
                failures=failures,
            )

        return right(matches)

    async def get_recent_matches(
        self, puuid: str, count: int = 20
    ) -> Either[ApiError, List[MatchDTO]]:
        """Get the most recent matches for a player."""
        return await self._matches_for(puuid, MatchHistoryOptions(count=count))

    async def get_matches_in_time_range(
        self, puuid: str, start_time: int, end_time: int
    ) -> Either[ApiError, List[MatchDTO]]:
        """Get matches played between two epoch-second timestamps."""
        return await self._matches_for(
            puuid, MatchHistoryOptions(start_time=start_time, end_time=end_time)
        )

    async def get_matches_by_queue(
        self, puuid: str, queue_id: Union[int, QueueType]
    ) -> Either[ApiError, List[MatchDTO]]:
        """Get matches played in one queue."""
        return await self._matches_for(puuid, MatchHistoryOptions(queue=queue_id))

    async def get_match_duration(self, match_id: str) -> Either[ApiError, int]:
        """Get match duration in whole minutes."""
        match = await self.get_match_by_id(match_id)
        if match.is_left():
            return match
        return right(match.value.info.game_duration // 60)

    async def get_match_creation_date(self, match_id: str) -> Either[ApiError, datetime]:
        """Get the local datetime the match lobby was created."""
        match = await self.get_match_by_id(match_id)
        if match.is_left():
            return match
        return right(datetime.fromtimestamp(match.value.info.game_creation / 1000))

    async def _matches_for(
        self, puuid: str, options: MatchHistoryOptions
    ) -> Either[ApiError, List[MatchDTO]]:
        match_ids = await self.get_match_history_by_puuid(puuid, options)
        if match_ids.is_left():
            return left(match_ids.value)
        return await self.get_matches_by_ids(match_ids.value)
