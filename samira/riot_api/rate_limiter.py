"""Client-side rate limiting for Riot API requests using fixed time windows."""

import asyncio
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional

import structlog
from pydantic import BaseModel, ConfigDict, PositiveInt

logger = structlog.get_logger(__name__)

SECOND_WINDOW_MS = 1_000
TWO_MINUTE_WINDOW_MS = 120_000

Clock = Callable[[], float]


def wall_clock_ms() -> float:
    """Current wall-clock time in epoch milliseconds."""
    return time.time() * 1000


def local_day_start(timestamp_ms: float) -> float:
    """Epoch milliseconds of local midnight for the day containing ``timestamp_ms``."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000)
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.timestamp() * 1000


class RateLimitConfig(BaseModel):
    """Request quota for one credential/host pair."""

    requests_per_second: PositiveInt
    requests_per_two_minutes: PositiveInt
    requests_per_day: Optional[PositiveInt] = None

    model_config = ConfigDict(frozen=True)


@dataclass
class RateLimitState:
    """Mutable window counters, owned by a single RateLimiter."""

    second_window_start: float
    requests_in_last_second: int
    window_start_time: float
    request_count: int
    daily_window_start: float
    daily_request_count: int
    last_request_time: float = 0

    @classmethod
    def starting_at(cls, now: float) -> "RateLimitState":
        """Fresh state with every window anchored at ``now``."""
        return cls(
            second_window_start=now,
            requests_in_last_second=0,
            window_start_time=now,
            request_count=0,
            daily_window_start=local_day_start(now),
            daily_request_count=0,
        )


@dataclass(frozen=True)
class RateLimitStatus:
    """Read-only snapshot of a limiter."""

    can_make_request: bool
    delay_until_next: float
    requests_in_window: int
    daily_requests: int


class RateLimiter:
    """
    Fixed-window rate limiter tracking per-second, per-two-minute and
    optional per-day quotas.

    Windows roll over when their length has elapsed (``>=``), so a request
    exactly on the boundary belongs to the new window. The day window is
    anchored at local midnight rather than 24 hours after the first request.
    """

    def __init__(self, config: RateLimitConfig, clock: Optional[Clock] = None):
        """
        Initialize rate limiter.

        Args:
            config: Quota to enforce
            clock: Time source returning epoch milliseconds (wall clock if None)
        """
        self.config = config
        self._clock = clock or wall_clock_ms
        self.state = RateLimitState.starting_at(self._clock())

    def _roll_windows(self, now: float) -> None:
        """Reset any window whose length has elapsed."""
        state = self.state

        if now - state.second_window_start >= SECOND_WINDOW_MS:
            state.second_window_start = now
            state.requests_in_last_second = 0

        if now - state.window_start_time >= TWO_MINUTE_WINDOW_MS:
            state.window_start_time = now
            state.request_count = 0

        if self.config.requests_per_day:
            day_start = local_day_start(now)
            if state.daily_window_start != day_start:
                state.daily_window_start = day_start
                state.daily_request_count = 0

    def can_make_request(self) -> bool:
        """Check whether a request is admitted right now."""
        self._roll_windows(self._clock())
        state = self.state
        config = self.config

        if config.requests_per_day and (
            state.daily_request_count >= config.requests_per_day
        ):
            return False
        if state.requests_in_last_second >= config.requests_per_second:
            return False
        if state.request_count >= config.requests_per_two_minutes:
            return False
        return True

    def record_request(self) -> None:
        """Count a request against every configured window."""
        now = self._clock()
        self._roll_windows(now)

        state = self.state
        state.last_request_time = now
        state.requests_in_last_second += 1
        state.request_count += 1
        if self.config.requests_per_day:
            state.daily_request_count += 1

    def get_delay_until_next_request(self) -> float:
        """
        Milliseconds until both the second and two-minute windows admit a
        request. Does not mutate state. Daily exhaustion is not a delay.
        """
        now = self._clock()
        state = self.state

        second_elapsed = now - state.second_window_start
        delay_for_second = 0.0
        if (
            second_elapsed < SECOND_WINDOW_MS
            and state.requests_in_last_second >= self.config.requests_per_second
        ):
            delay_for_second = SECOND_WINDOW_MS - second_elapsed

        window_elapsed = now - state.window_start_time
        delay_for_two_minutes = 0.0
        if (
            window_elapsed < TWO_MINUTE_WINDOW_MS
            and state.request_count >= self.config.requests_per_two_minutes
        ):
            delay_for_two_minutes = TWO_MINUTE_WINDOW_MS - window_elapsed

        return max(delay_for_second, delay_for_two_minutes)

    async def wait_for_next_request(self) -> None:
        """Suspend until a request is admitted; returns at once when it already is."""
        delay = self.get_delay_until_next_request()
        while delay > 0:
            logger.info(
                "Rate limit reached, waiting",
                wait_ms=delay,
                requests_in_last_second=self.state.requests_in_last_second,
                requests_in_window=self.state.request_count,
            )
            await asyncio.sleep(delay / 1000)
            # Other waiters may have been admitted while this one slept
            delay = self.get_delay_until_next_request()

    def get_status(self) -> RateLimitStatus:
        """Snapshot of the limiter after rolling over expired windows."""
        self._roll_windows(self._clock())
        return RateLimitStatus(
            can_make_request=self.can_make_request(),
            delay_until_next=self.get_delay_until_next_request(),
            requests_in_window=self.state.request_count,
            daily_requests=self.state.daily_request_count,
        )

    def reset(self) -> None:
        """Zero every counter and anchor every window at now."""
        self.state = RateLimitState.starting_at(self._clock())


# Default quotas per endpoint family
DEFAULT_RATE_LIMITS: Dict[str, RateLimitConfig] = {
    "default": RateLimitConfig(requests_per_second=20, requests_per_two_minutes=100),
    "match": RateLimitConfig(requests_per_second=100, requests_per_two_minutes=2000),
    "spectator": RateLimitConfig(requests_per_second=20, requests_per_two_minutes=100),
    "status": RateLimitConfig(requests_per_second=20, requests_per_two_minutes=100),
}


def create_rate_limiter(
    endpoint_type: str = "default", clock: Optional[Clock] = None
) -> RateLimiter:
    """Create a rate limiter from a named preset in ``DEFAULT_RATE_LIMITS``."""
    return RateLimiter(DEFAULT_RATE_LIMITS[endpoint_type], clock=clock)
