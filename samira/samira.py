"""Samira facade: one object wiring routed HTTP clients to every resource service."""

from enum import Enum
from typing import Any, Dict, Optional, Union

import httpx
import structlog

from samira.core.config import get_global_settings
from samira.riot_api.constants import (
    PLATFORM_TO_REGION,
    REGION_TO_PLATFORM,
    Platform,
    Region,
    riot_host,
)
from samira.riot_api.http_client import (
    HttpClient,
    create_platform_client,
    create_regional_client,
)
from samira.services import (
    AccountService,
    DataDragonConfig,
    DataDragonService,
    LeagueService,
    MatchService,
    SpectatorService,
    SummonerService,
)

logger = structlog.get_logger(__name__)


def _routing_value(value: Union[Platform, Region, str]) -> str:
    """Extract string value from enum or return as-is, lower-cased."""
    return (value.value if isinstance(value, Enum) else value).lower()


class Samira:
    """
    Riot API entry point.

    Platform-routed services (summoner, league, spectator) share one client
    and regionally routed services (account, match) share another, so each
    host gets a single rate-limit quota. Data Dragon has its own client
    without the API key.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        platform: Optional[Union[Platform, str]] = None,
        region: Optional[Union[Region, str]] = None,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        data_dragon: Optional[DataDragonConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the facade.

        Args:
            api_key: Riot API key (uses RIOT_API_KEY setting if None)
            platform: Platform routing value (uses RIOT_PLATFORM, default na1)
            region: Regional routing value (uses RIOT_REGION, default americas)
            timeout: Request timeout in milliseconds
            retries: Retry attempts for request_with_retry
            retry_delay: Base backoff delay in milliseconds
            data_dragon: Data Dragon version/language settings
            transport: Optional httpx transport shared by every client (testing)

        Raises:
            ValueError: If no API key is given or configured
        """
        settings = get_global_settings()
        api_key = settings.riot_api_key if api_key is None else api_key
        if not api_key or not api_key.strip():
            raise ValueError("API key is required")

        self.api_key = api_key
        self.platform = _routing_value(platform or settings.riot_platform)
        self.region = _routing_value(region or settings.riot_region)

        client_options: Dict[str, Any] = {
            "timeout": timeout if timeout is not None else settings.request_timeout_ms,
            "retries": retries if retries is not None else settings.request_retries,
            "retry_delay": (
                retry_delay
                if retry_delay is not None
                else settings.request_retry_delay_ms
            ),
            "transport": transport,
        }

        self.platform_client = create_platform_client(
            self.platform, api_key, **client_options
        )
        self.regional_client = create_regional_client(
            self.region, api_key, **client_options
        )
        self.data_dragon_client = HttpClient(
            base_url=(data_dragon or DataDragonConfig()).base_url,
            api_key="",
            **client_options,
        )

        self.account = AccountService(self.regional_client)
        self.match = MatchService(self.regional_client)
        self.summoner = SummonerService(self.platform_client)
        self.league = LeagueService(self.platform_client)
        self.spectator = SpectatorService(self.platform_client)
        self.data_dragon = DataDragonService(self.data_dragon_client, data_dragon)

        logger.info(
            "Samira client initialized",
            platform=self.platform,
            region=self.region,
            api_key_prefix="[REDACTED]",
        )

    async def __aenter__(self) -> "Samira":
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
        """Close every underlying HTTP session."""
        await self.platform_client.close()
        await self.regional_client.close()
        await self.data_dragon_client.close()

    def get_config(self) -> Dict[str, str]:
        """Get current configuration."""
        return {
            "api_key": self.api_key,
            "platform": self.platform,
            "region": self.region,
        }

    def update_api_key(self, api_key: str) -> None:
        """Rotate the API key on the platform and regional clients."""
        self.api_key = api_key
        self.platform_client.update_api_key(api_key)
        self.regional_client.update_api_key(api_key)

    def update_platform(self, platform: Union[Platform, str]) -> None:
        """Point platform-routed services at another platform host."""
        self.platform = _routing_value(platform)
        self.platform_client.update_base_url(riot_host(self.platform))

    def update_region(self, region: Union[Region, str]) -> None:
        """Point regionally routed services at another regional host."""
        self.region = _routing_value(region)
        self.regional_client.update_base_url(riot_host(self.region))

    @staticmethod
    def get_available_platforms() -> Dict[str, str]:
        """Get available platforms."""
        return {platform.name: platform.value for platform in Platform}

    @staticmethod
    def get_available_regions() -> Dict[str, str]:
        """Get available regions."""
        return {region.name: region.value for region in Region}

    @staticmethod
    def is_valid_platform(platform: str) -> bool:
        return platform in {p.value for p in Platform}

    @staticmethod
    def is_valid_region(region: str) -> bool:
        return region in {r.value for r in Region}

    @staticmethod
    def get_platform_from_region(region: Union[Region, str]) -> str:
        """Default platform for a region; na1 for unknown regions."""
        if not Samira.is_valid_region(_routing_value(region)):
            return Platform.NA1.value
        return REGION_TO_PLATFORM[Region(_routing_value(region))].value

    @staticmethod
    def get_region_from_platform(platform: Union[Platform, str]) -> str:
        """Regional host serving a platform; americas for unknown platforms."""
        if not Samira.is_valid_platform(_routing_value(platform)):
            return Region.AMERICAS.value
        return PLATFORM_TO_REGION[Platform(_routing_value(platform))].value


def create_samira(
    api_key: str, platform: Optional[str] = None, region: Optional[str] = None
) -> Samira:
    """Create a Samira instance with default configuration."""
    return Samira(api_key=api_key, platform=platform, region=region)


def create_platform_samira(api_key: str, platform: str) -> Samira:
    """Create a Samira instance for a platform, deriving its region."""
    return Samira(
        api_key=api_key,
        platform=platform,
        region=Samira.get_region_from_platform(platform),
    )


def create_regional_samira(api_key: str, region: str) -> Samira:
    """Create a Samira instance for a region, deriving its default platform."""
    return Samira(
        api_key=api_key,
        platform=Samira.get_platform_from_region(region),
        region=region,
    )
