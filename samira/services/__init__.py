"""Resource services: build the URL, call the HTTP client, validate the body."""

from .account import AccountService
from .summoner import SummonerService
from .league import LeagueService
from .spectator import SpectatorService
from .match import MatchService, MatchHistoryOptions
from .data_dragon import DataDragonService, DataDragonConfig

__all__ = [
    "AccountService",
    "SummonerService",
    "LeagueService",
    "SpectatorService",
    "MatchService",
    "MatchHistoryOptions",
    "DataDragonService",
    "DataDragonConfig",
]
