"""Riot API constants, routing values and endpoint templates."""

from enum import Enum
from typing import Dict, Union
from urllib.parse import quote

RIOT_API_HOST = "https://{host}.api.riotgames.com"
DATA_DRAGON_BASE_URL = "https://ddragon.leagueoflegends.com"


class Region(str, Enum):
    """Riot API regions for regional routing."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API platforms for platform routing."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    PH2 = "ph2"
    RU = "ru"
    SG2 = "sg2"
    TH2 = "th2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"


class QueueType(int, Enum):
    """Riot API queue ids for match filtering."""

    NORMAL_DRAFT_PICK = 400
    RANKED_SOLO_5X5 = 420
    NORMAL_BLIND_PICK = 430
    RANKED_FLEX_SR = 440
    ARAM = 450
    CLASH = 700
    URF = 900


class MapId(int, Enum):
    """Map ids found in match and spectator payloads."""

    THE_PROVING_GROUNDS = 3
    THE_CRYSTAL_SCAR = 8
    TWISTED_TREELINE = 10
    SUMMONERS_RIFT = 11
    HOWLING_ABYSS = 12
    SUMMONERS_RIFT_SUMMER = 13
    BUTCHERS_BRIDGE = 14
    COSMIC_RUINS = 16
    VALORAN_CITY_PARK = 18
    SUBSTRUCTURE_43 = 19
    CRASH_SITE = 20
    NEXUS_BLITZ = 21


class Endpoints:
    """Path templates relative to a platform or regional host."""

    # Platform routed
    SUMMONER_BY_PUUID = "/lol/summoner/v4/summoners/by-puuid/{puuid}"
    LEAGUE_ENTRIES_BY_PUUID = "/lol/league/v4/entries/by-puuid/{puuid}"
    CHAMPION_MASTERIES_BY_PUUID = (
        "/lol/champion-mastery/v4/champion-masteries/by-puuid/{puuid}"
    )
    CURRENT_GAME_BY_PUUID = "/lol/spectator/v5/active-games/by-summoner/{puuid}"
    FEATURED_GAMES = "/lol/spectator/v5/featured-games"

    # Regionally routed
    ACCOUNT_BY_PUUID = "/riot/account/v1/accounts/by-puuid/{puuid}"
    ACCOUNT_BY_RIOT_ID = "/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}"
    MATCH_BY_ID = "/lol/match/v5/matches/{match_id}"
    MATCHES_BY_PUUID = "/lol/match/v5/matches/by-puuid/{puuid}/ids"


PLATFORM_TO_REGION: Dict[Platform, Region] = {
    Platform.NA1: Region.AMERICAS,
    Platform.LA1: Region.AMERICAS,
    Platform.LA2: Region.AMERICAS,
    Platform.BR1: Region.AMERICAS,
    Platform.EUW1: Region.EUROPE,
    Platform.EUN1: Region.EUROPE,
    Platform.TR1: Region.EUROPE,
    Platform.RU: Region.EUROPE,
    Platform.KR: Region.ASIA,
    Platform.JP1: Region.ASIA,
    Platform.OC1: Region.SEA,
    Platform.PH2: Region.SEA,
    Platform.SG2: Region.SEA,
    Platform.TH2: Region.SEA,
    Platform.TW2: Region.SEA,
    Platform.VN2: Region.SEA,
}

REGION_TO_PLATFORM: Dict[Region, Platform] = {
    Region.AMERICAS: Platform.NA1,
    Region.EUROPE: Platform.EUW1,
    Region.ASIA: Platform.KR,
    Region.SEA: Platform.SG2,
}


def build_path(template: str, **params: object) -> str:
    """Fill an endpoint template, percent-encoding each path parameter."""
    return template.format(
        **{name: quote(str(value), safe="") for name, value in params.items()}
    )


def riot_host(routing_value: Union[Platform, Region, str]) -> str:
    """Base URL for a platform or region routing value."""
    value = routing_value.value if isinstance(routing_value, Enum) else routing_value
    return RIOT_API_HOST.format(host=value)
