"""
samira - typed async client for the Riot Games API.

Every call returns an ``Either``: ``Left(ApiError)`` for HTTP, transport and
validation failures, ``Right(value)`` on success.
"""

from .samira import (
    Samira,
    create_samira,
    create_platform_samira,
    create_regional_samira,
)
from .riot_api import (
    Either,
    Left,
    Right,
    left,
    right,
    ApiError,
    ApiResponse,
    HttpClient,
    create_platform_client,
    create_regional_client,
    RateLimiter,
    RateLimitConfig,
    RateLimitStatus,
    DEFAULT_RATE_LIMITS,
    create_rate_limiter,
    Region,
    Platform,
    QueueType,
    MapId,
    Endpoints,
)
from .services import (
    AccountService,
    SummonerService,
    LeagueService,
    SpectatorService,
    MatchService,
    MatchHistoryOptions,
    DataDragonService,
    DataDragonConfig,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "Samira",
    "create_samira",
    "create_platform_samira",
    "create_regional_samira",
    # Result type
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    # HTTP
    "ApiError",
    "ApiResponse",
    "HttpClient",
    "create_platform_client",
    "create_regional_client",
    # Rate limiting
    "RateLimiter",
    "RateLimitConfig",
    "RateLimitStatus",
    "DEFAULT_RATE_LIMITS",
    "create_rate_limiter",
    # Constants
    "Region",
    "Platform",
    "QueueType",
    "MapId",
    "Endpoints",
    # Services
    "AccountService",
    "SummonerService",
    "LeagueService",
    "SpectatorService",
    "MatchService",
    "MatchHistoryOptions",
    "DataDragonService",
    "DataDragonConfig",
]
