"""Data Dragon static asset lookups and asset URL helpers."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Type, TypeVar

import structlog

from samira.riot_api.constants import DATA_DRAGON_BASE_URL
from samira.riot_api.either import Either, left, right
from samira.riot_api.errors import ApiError
from samira.riot_api.http_client import HttpClient
from samira.riot_api.models import (
    ChampionAssetDTO,
    ItemAssetDTO,
    RuneAssetDTO,
    SummonerSpellAssetDTO,
)

from .base import BaseService, parse_payload

logger = structlog.get_logger(__name__)

M = TypeVar("M")

LATEST_VERSION = "latest"


@dataclass(frozen=True)
class DataDragonConfig:
    """
    Data Dragon settings.

    ``version="latest"`` is resolved to the newest entry of ``versions.json``
    before the first data request. ``include_full_url`` makes the image helpers
    return absolute CDN URLs instead of paths relative to
    ``{base_url}/cdn/{version}/``.
    """

    version: str = LATEST_VERSION
    language: str = "en_US"
    base_url: str = DATA_DRAGON_BASE_URL
    include_full_url: bool = False


def _not_found(message: str) -> ApiError:
    return ApiError(status=404, status_text="Not Found", message=message)


def _skin_suffix(skin_id: Optional[str]) -> str:
    # Skin 0 is the base skin and has no suffix
    if not skin_id or skin_id == "0":
        return ""
    return f"_{skin_id}"


class DataDragonService(BaseService):
    """Static game data (champions, items, runes, spells) from Data Dragon."""

    def __init__(
        self, http_client: HttpClient, config: Optional[DataDragonConfig] = None
    ):
        super().__init__(http_client)
        self.config = config or DataDragonConfig()
        self._resolved_version: Optional[str] = None

    @property
    def version(self) -> str:
        """Version used in URLs: the resolved one once "latest" has been looked up."""
        return self._resolved_version or self.config.version

    async def resolve_version(self) -> Either[ApiError, str]:
        """
        Get the concrete version for data and asset URLs.

        A configured ``"latest"`` is looked up in ``versions.json`` once and
        kept until the config changes; any other value is returned as is.
        """
        if self.config.version != LATEST_VERSION:
            return right(self.config.version)
        if self._resolved_version is not None:
            return right(self._resolved_version)

        versions = await self.get_latest_version()
        if versions.is_left():
            logger.warning(
                "Failed to resolve latest Data Dragon version",
                status=versions.value.status,
                message=versions.value.message,
            )
            return versions
        if not versions.value:
            return left(_not_found("No versions available from Data Dragon"))

        self._resolved_version = versions.value[0]
        logger.info("Resolved Data Dragon version", version=self._resolved_version)
        return right(self._resolved_version)

    async def _data_url(
        self, file_name: str, version: Optional[str] = None
    ) -> Either[ApiError, str]:
        if version is None:
            resolved = await self.resolve_version()
            if resolved.is_left():
                return resolved
            version = resolved.value
        base, language = self.config.base_url, self.config.language
        return right(f"{base}/cdn/{version}/data/{language}/{file_name}")

    async def _fetch_data_section(
        self,
        file_name: str,
        version: Optional[str],
        model_type: Type[M],
        resource: str,
    ) -> Either[ApiError, M]:
        """Fetch a ``{"data": {...}}`` document and validate its data section."""
        url = await self._data_url(file_name, version)
        if url.is_left():
            return url
        response = await self._client.get(url.value)
        if response.is_left():
            return response
        body = response.value.data
        section = body.get("data") if isinstance(body, dict) else None
        return parse_payload(section, model_type, resource)

    async def get_latest_version(self) -> Either[ApiError, List[str]]:
        """Get every published Data Dragon version, newest first."""
        url = f"{self.config.base_url}/api/versions.json"
        return await self._fetch(url, List[str], "Versions")

    async def get_champions(
        self, version: Optional[str] = None
    ) -> Either[ApiError, Dict[str, ChampionAssetDTO]]:
        """Get all champions keyed by champion id."""
        return await self._fetch_data_section(
            "champion.json", version, Dict[str, ChampionAssetDTO], "Champions"
        )

    async def get_champion(
        self, champion_id: str, version: Optional[str] = None
    ) -> Either[ApiError, ChampionAssetDTO]:
        """Get full data (spells, skins, lore) for one champion."""
        champions = await self._fetch_data_section(
            f"champion/{champion_id}.json",
            version,
            Dict[str, ChampionAssetDTO],
            "Champion",
        )
        if champions.is_left():
            return champions

        champion = next(iter(champions.value.values()), None)
        if champion is None:
            return left(_not_found(f"Champion {champion_id} not found"))
        return right(champion)

    async def get_items(
        self, version: Optional[str] = None
    ) -> Either[ApiError, Dict[str, ItemAssetDTO]]:
        """Get all items keyed by item id."""
        return await self._fetch_data_section(
            "item.json", version, Dict[str, ItemAssetDTO], "Items"
        )

    async def get_item(
        self, item_id: str, version: Optional[str] = None
    ) -> Either[ApiError, ItemAssetDTO]:
        """Get one item; only that item is validated."""
        items = await self._fetch_data_section(
            "item.json", version, Dict[str, Any], "Items"
        )
        if items.is_left():
            return items

        item = items.value.get(item_id)
        if not item:
            return left(_not_found(f"Item with ID {item_id} not found"))
        return parse_payload(item, ItemAssetDTO, "Item")

    async def get_runes(
        self, version: Optional[str] = None
    ) -> Either[ApiError, List[RuneAssetDTO]]:
        """Get rune trees."""
        url = await self._data_url("runesReforged.json", version)
        if url.is_left():
            return url
        return await self._fetch(url.value, List[RuneAssetDTO], "Runes")

    async def get_summoner_spells(
        self, version: Optional[str] = None
    ) -> Either[ApiError, Dict[str, SummonerSpellAssetDTO]]:
        """Get summoner spells keyed by spell id."""
        return await self._fetch_data_section(
            "summoner.json",
            version,
            Dict[str, SummonerSpellAssetDTO],
            "Summoner spells",
        )

    # Asset URLs

    def get_asset_url(self, asset_path: str) -> str:
        """
        Absolute CDN URL when include_full_url is set, the bare path otherwise.

        Full URLs use :attr:`version`; with ``version="latest"`` await
        :meth:`resolve_version` (or any data fetch) first.
        """
        if self.config.include_full_url:
            return f"{self.config.base_url}/cdn/{self.version}/{asset_path}"
        return asset_path

    def get_champion_image_url(
        self, champion_id: str, skin_id: Optional[str] = None
    ) -> str:
        return self.get_asset_url(
            f"img/champion/{champion_id}{_skin_suffix(skin_id)}.jpg"
        )

    def get_item_image_url(self, item_id: str) -> str:
        return self.get_asset_url(f"img/item/{item_id}.png")

    def get_rune_image_url(self, rune_id: int) -> str:
        return self.get_asset_url(f"img/{rune_id}.png")

    def get_summoner_spell_image_url(self, spell_id: str) -> str:
        return self.get_asset_url(f"img/spell/{spell_id}.png")

    def get_profile_icon_url(self, icon_id: int) -> str:
        return self.get_asset_url(f"img/profileicon/{icon_id}.png")

    def get_champion_splash_url(
        self, champion_id: str, skin_id: Optional[str] = None
    ) -> str:
        return self.get_asset_url(
            f"img/champion/splash/{champion_id}{_skin_suffix(skin_id)}.jpg"
        )

    def get_champion_loading_url(
        self, champion_id: str, skin_id: Optional[str] = None
    ) -> str:
        return self.get_asset_url(
            f"img/champion/loading/{champion_id}{_skin_suffix(skin_id)}.jpg"
        )

    def update_config(self, **changes: Any) -> None:
        """Replace config fields (version, language, base_url, include_full_url)."""
        self.config = replace(self.config, **changes)
        if "version" in changes or "base_url" in changes:
            self._resolved_version = None

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration as a plain dict."""
        return asdict(self.config)
