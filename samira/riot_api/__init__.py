"""
Riot API client package for League of Legends API integration.

This package provides the rate-limited HTTP client, the Either result type,
error normalization and the response models shared by the resource services.
"""

from .either import Either, Left, Right, left, right
from .errors import ApiError, ApiResponse, RiotErrorBody, get_error_message
from .rate_limiter import (
    RateLimiter,
    RateLimitConfig,
    RateLimitState,
    RateLimitStatus,
    DEFAULT_RATE_LIMITS,
    create_rate_limiter,
)
from .http_client import HttpClient, create_platform_client, create_regional_client
from .constants import Region, Platform, QueueType, MapId, Endpoints

__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "ApiError",
    "ApiResponse",
    "RiotErrorBody",
    "get_error_message",
    "RateLimiter",
    "RateLimitConfig",
    "RateLimitState",
    "RateLimitStatus",
    "DEFAULT_RATE_LIMITS",
    "create_rate_limiter",
    "HttpClient",
    "create_platform_client",
    "create_regional_client",
    "Region",
    "Platform",
    "QueueType",
    "MapId",
    "Endpoints",
]
