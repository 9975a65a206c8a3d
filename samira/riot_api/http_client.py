"""Riot API HTTP client with client-side rate limiting and error normalization."""

import asyncio
import math
from typing import Any, Mapping, Optional, Union

import httpx
import structlog

from .constants import Platform, Region, riot_host
from .either import Either, left, right
from .errors import (
    ApiError,
    ApiResponse,
    http_error,
    request_error,
    transport_error,
)
from .rate_limiter import (
    DEFAULT_RATE_LIMITS,
    Clock,
    RateLimitConfig,
    RateLimiter,
    RateLimitStatus,
)

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_RETRIES = 3
DEFAULT_RETRY_DELAY_MS = 1_000
DEFAULT_RETRY_AFTER_MS = 1_000

API_KEY_HEADER = "X-Riot-Token"

QueryParams = Mapping[str, Any]
ApiResult = Either[ApiError, ApiResponse[Any]]


class HttpClient:
    """
    Sole egress point for Riot API calls.

    Every call is gated by a RateLimiter owned by this client (one quota per
    credential/host pair) and every outcome, success or failure, comes back
    as an ``Either`` instead of an exception.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT_MS,
        retries: int = DEFAULT_RETRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY_MS,
        rate_limit: Union[RateLimitConfig, str, None] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Host that relative URLs are resolved against
            api_key: Riot API key, sent as the X-Riot-Token header (omitted when empty)
            timeout: Transport timeout in milliseconds
            retries: Extra attempts made by request_with_retry
            retry_delay: Base backoff delay in milliseconds for request_with_retry
            rate_limit: Quota or preset name from DEFAULT_RATE_LIMITS ("default" if None)
            transport: Optional httpx transport (used for testing)
            clock: Optional time source in epoch milliseconds for the rate limiter
        """
        if retries < 0:
            raise ValueError("retries must be >= 0")

        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay

        if rate_limit is None or isinstance(rate_limit, str):
            rate_limit = DEFAULT_RATE_LIMITS[rate_limit or "default"]
        self.rate_limiter = RateLimiter(rate_limit, clock=clock)

        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if api_key:
            headers[API_KEY_HEADER] = api_key

        self.session = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout / 1000),
            transport=transport,
        )

        logger.debug(
            "Riot API HTTP client created",
            base_url=base_url,
            api_key_prefix="[REDACTED]" if api_key else "None",
            requests_per_second=rate_limit.requests_per_second,
            requests_per_two_minutes=rate_limit.requests_per_two_minutes,
        )

    async def __aenter__(self) -> "HttpClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the httpx session."""
        if not self.session.is_closed:
            await self.session.aclose()
            logger.debug("Riot API HTTP client closed", base_url=self.base_url)

    async def get(
        self,
        url: str,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResult:
        """
        Make a rate-limited GET request.

        The request is counted against the quota before it is sent, so a call
        that errors still consumes a slot. A 429 response is retried once after
        ``retry-after`` seconds (1s when absent) by resending the same request;
        that resend does not pass through the rate limiter again.

        Args:
            url: Path relative to base_url, or an absolute URL
            params: Query parameters
            headers: Extra headers for this request only

        Returns:
            Right(ApiResponse) on 2xx/3xx, Left(ApiError) otherwise
        """
        await self.rate_limiter.wait_for_next_request()
        self.rate_limiter.record_request()

        try:
            request = self.session.build_request(
                "GET", url, params=params, headers=headers
            )
            response = await self.session.send(request)

            if response.status_code == 429:
                delay_ms = self._retry_after_ms(response.headers)
                logger.warning(
                    "Rate limited by Riot API, retrying once",
                    url=str(request.url),
                    retry_after_ms=delay_ms,
                    app_rate_limit=response.headers.get("X-App-Rate-Limit"),
                    method_rate_limit=response.headers.get("X-Method-Rate-Limit"),
                )
                await asyncio.sleep(delay_ms / 1000)
                response = await self.session.send(request)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            logger.warning("Invalid Riot API request", url=url, error=str(e))
            return left(request_error(e))
        except httpx.TransportError as e:
            logger.warning(
                "No response from Riot API",
                url=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return left(transport_error(e))
        except httpx.RequestError as e:
            logger.warning("Riot API request failed", url=url, error=str(e))
            return left(request_error(e))

        body = self._decode_body(response)

        if response.is_error:
            error = http_error(response.status_code, response.reason_phrase, body)
            logger.debug(
                "Riot API error response",
                url=url,
                status=error.status,
                message=error.message,
            )
            return left(error)

        logger.debug("Riot API request completed", url=url, status=response.status_code)
        return right(
            ApiResponse(
                data=body,
                status=response.status_code,
                status_text=response.reason_phrase,
                headers=dict(response.headers),
            )
        )

    async def request_with_retry(
        self,
        url: str,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResult:
        """
        GET with bounded retries and exponential backoff.

        Makes up to ``retries + 1`` attempts, waiting ``retry_delay * 2**n`` ms
        after failed attempt ``n``. Client errors (4xx other than 429) are
        returned immediately.

        Returns:
            First successful result, or the last error once attempts run out
        """
        last_error: Optional[ApiError] = None

        for attempt in range(self.retries + 1):
            result = await self.get(url, params=params, headers=headers)
            if result.is_right():
                return result

            last_error = result.value
            if last_error.is_client_error:
                return result

            if attempt == self.retries:
                break

            delay_ms = self.retry_delay * 2**attempt
            logger.info(
                "Retrying Riot API request",
                url=url,
                attempt=attempt + 1,
                max_attempts=self.retries + 1,
                status=last_error.status,
                delay_ms=delay_ms,
            )
            await asyncio.sleep(delay_ms / 1000)

        return left(last_error)

    def update_api_key(self, api_key: str) -> None:
        """Swap the credential for all subsequent requests; an empty key drops it."""
        self.api_key = api_key
        if api_key:
            self.session.headers[API_KEY_HEADER] = api_key
        else:
            self.session.headers.pop(API_KEY_HEADER, None)

    def update_base_url(self, base_url: str) -> None:
        """Point subsequent relative requests at a different host."""
        self.base_url = base_url
        self.session.base_url = base_url

    def get_rate_limit_status(self) -> RateLimitStatus:
        """Get rate limiter status."""
        return self.rate_limiter.get_status()

    def reset_rate_limiter(self) -> None:
        """Reset rate limiter."""
        self.rate_limiter.reset()

    @staticmethod
    def _retry_after_ms(headers: httpx.Headers) -> float:
        """Parse the retry-after header (seconds) into milliseconds."""
        retry_after = headers.get("retry-after")
        if retry_after is None:
            return DEFAULT_RETRY_AFTER_MS
        try:
            seconds = float(retry_after)
        except ValueError:
            return DEFAULT_RETRY_AFTER_MS
        if not math.isfinite(seconds):
            return DEFAULT_RETRY_AFTER_MS
        return max(seconds, 0) * 1000

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """JSON body when decodable, raw text otherwise."""
        try:
            return response.json()
        except ValueError:
            return response.text


def create_platform_client(
    platform: Union[Platform, str], api_key: str, **kwargs: Any
) -> HttpClient:
    """Create an HTTP client for a platform host (e.g. ``euw1``)."""
    return HttpClient(base_url=riot_host(platform), api_key=api_key, **kwargs)


def create_regional_client(
    region: Union[Region, str], api_key: str, **kwargs: Any
) -> HttpClient:
    """Create an HTTP client for a regional host (e.g. ``europe``)."""
    return HttpClient(base_url=riot_host(region), api_key=api_key, **kwargs)
