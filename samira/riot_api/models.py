"""Pydantic models for Riot API and Data Dragon response data."""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict


class AccountDTO(BaseModel):
    """Riot Account information."""

    puuid: str
    game_name: str = Field(..., alias="gameName")
    tag_line: str = Field(..., alias="tagLine")

    model_config = ConfigDict(populate_by_name=True)


class SummonerDTO(BaseModel):
    """League of Legends Summoner information."""

    puuid: str
    profile_icon_id: int = Field(..., alias="profileIconId")
    revision_date: int = Field(..., alias="revisionDate")
    summoner_level: int = Field(..., alias="summonerLevel")
    id: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ChampionMasteryDTO(BaseModel):
    """Mastery of one champion for one player."""

    puuid: str
    champion_id: int = Field(..., alias="championId")
    champion_level: int = Field(..., alias="championLevel")
    champion_points: int = Field(..., alias="championPoints")
    last_play_time: int = Field(..., alias="lastPlayTime")
    champion_points_since_last_level: int = Field(
        ..., alias="championPointsSinceLastLevel"
    )
    champion_points_until_next_level: int = Field(
        ..., alias="championPointsUntilNextLevel"
    )
    chest_granted: Optional[bool] = Field(None, alias="chestGranted")
    tokens_earned: int = Field(0, alias="tokensEarned")

    model_config = ConfigDict(populate_by_name=True)


# League


class Tier(str, Enum):
    """Ranked tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"


class Rank(str, Enum):
    """Division inside a tier; empty for apex tiers."""

    NONE = ""
    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


class MiniSeriesDTO(BaseModel):
    """Promotion series progress."""

    losses: int
    progress: str
    target: int
    wins: int


class LeagueEntryDTO(BaseModel):
    """League entry information."""

    league_id: str = Field(..., alias="leagueId")
    puuid: str
    queue_type: str = Field(..., alias="queueType")
    tier: Tier
    rank: Rank
    league_points: int = Field(..., alias="leaguePoints")
    wins: int
    losses: int
    hot_streak: bool = Field(..., alias="hotStreak")
    veteran: bool
    fresh_blood: bool = Field(..., alias="freshBlood")
    inactive: bool
    mini_series: Optional[MiniSeriesDTO] = Field(None, alias="miniSeries")

    @property
    def win_rate(self) -> float:
        """Calculate win rate."""
        total_games = self.wins + self.losses
        if total_games == 0:
            return 0
        return (self.wins / total_games) * 100

    model_config = ConfigDict(populate_by_name=True)


# Match


class MatchMetadataDTO(BaseModel):
    """Match metadata."""

    data_version: str = Field(..., alias="dataVersion")
    match_id: str = Field(..., alias="matchId")
    participants: List[str]

    model_config = ConfigDict(populate_by_name=True)


class MatchParticipantDTO(BaseModel):
    """Match participant information."""

    puuid: str
    team_id: int = Field(..., alias="teamId")
    win: bool
    champion_id: int = Field(..., alias="championId")
    champion_name: str = Field(..., alias="championName")
    kills: int
    deaths: int
    assists: int

    # Riot ID fields (newer API format)
    riot_id_game_name: Optional[str] = Field(None, alias="riotIdGameName")
    riot_id_tagline: Optional[str] = Field(None, alias="riotIdTagline")
    summoner_name: Optional[str] = Field(None, alias="summonerName")
    summoner_level: Optional[int] = Field(None, alias="summonerLevel")

    champ_level: Optional[int] = Field(None, alias="champLevel")
    vision_score: Optional[float] = Field(None, alias="visionScore")
    gold_earned: Optional[int] = Field(None, alias="goldEarned")
    total_minions_killed: Optional[int] = Field(None, alias="totalMinionsKilled")
    neutral_minions_killed: Optional[int] = Field(None, alias="neutralMinionsKilled")
    individual_position: Optional[str] = Field(None, alias="individualPosition")
    team_position: Optional[str] = Field(None, alias="teamPosition")

    @property
    def kda(self) -> float:
        """Calculate KDA (kills + assists) / deaths."""
        if self.deaths == 0:
            return self.kills + self.assists
        return (self.kills + self.assists) / self.deaths

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class BanDTO(BaseModel):
    """Champion ban during draft."""

    champion_id: int = Field(..., alias="championId")
    pick_turn: int = Field(..., alias="pickTurn")

    model_config = ConfigDict(populate_by_name=True)


class ObjectiveDTO(BaseModel):
    """Objective counter for one team."""

    first: bool
    kills: int


class ObjectivesDTO(BaseModel):
    """Objectives taken by one team."""

    baron: ObjectiveDTO
    champion: ObjectiveDTO
    dragon: ObjectiveDTO
    horde: Optional[ObjectiveDTO] = None
    inhibitor: ObjectiveDTO
    rift_herald: ObjectiveDTO = Field(..., alias="riftHerald")
    tower: ObjectiveDTO

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TeamDTO(BaseModel):
    """Team result in a match."""

    bans: List[BanDTO]
    objectives: ObjectivesDTO
    team_id: int = Field(..., alias="teamId")
    win: bool

    model_config = ConfigDict(populate_by_name=True)


class MatchInfoDTO(BaseModel):
    """Match information."""

    game_creation: int = Field(..., alias="gameCreation")
    game_duration: int = Field(..., alias="gameDuration")
    game_end_timestamp: Optional[int] = Field(None, alias="gameEndTimestamp")
    game_id: int = Field(..., alias="gameId")
    game_mode: str = Field(..., alias="gameMode")
    game_name: str = Field(..., alias="gameName")
    game_start_timestamp: int = Field(..., alias="gameStartTimestamp")
    game_type: str = Field(..., alias="gameType")
    game_version: str = Field(..., alias="gameVersion")
    map_id: int = Field(..., alias="mapId")
    platform_id: str = Field(..., alias="platformId")
    queue_id: int = Field(..., alias="queueId")
    tournament_code: Optional[str] = Field(None, alias="tournamentCode")
    teams: List[TeamDTO]
    participants: List[MatchParticipantDTO]

    model_config = ConfigDict(populate_by_name=True)


class MatchDTO(BaseModel):
    """Complete match data."""

    metadata: MatchMetadataDTO
    info: MatchInfoDTO

    @property
    def match_id(self) -> str:
        """Get match ID from metadata."""
        return self.metadata.match_id

    model_config = ConfigDict(populate_by_name=True)


# Spectator


class BannedChampionDTO(BaseModel):
    """Ban in a live game."""

    champion_id: int = Field(..., alias="championId")
    team_id: int = Field(..., alias="teamId")
    pick_turn: int = Field(..., alias="pickTurn")

    model_config = ConfigDict(populate_by_name=True)


class GameCustomizationObjectDTO(BaseModel):
    category: str
    content: str


class PerksDTO(BaseModel):
    """Runes selected by a live game participant."""

    perk_ids: List[int] = Field(..., alias="perkIds")
    perk_style: int = Field(..., alias="perkStyle")
    perk_sub_style: int = Field(..., alias="perkSubStyle")

    model_config = ConfigDict(populate_by_name=True)


class SpectatorParticipantDTO(BaseModel):
    """Participant of a live game."""

    champion_id: int = Field(..., alias="championId")
    profile_icon_id: int = Field(..., alias="profileIconId")
    bot: bool
    team_id: int = Field(..., alias="teamId")
    puuid: Optional[str] = None
    spell1_id: int = Field(..., alias="spell1Id")
    spell2_id: int = Field(..., alias="spell2Id")
    perks: Optional[PerksDTO] = None
    game_customization_objects: List[GameCustomizationObjectDTO] = Field(
        default_factory=list, alias="gameCustomizationObjects"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ObserverDTO(BaseModel):
    encryption_key: str = Field(..., alias="encryptionKey")

    model_config = ConfigDict(populate_by_name=True)


class CurrentGameInfoDTO(BaseModel):
    """Live game a player is currently in."""

    game_id: int = Field(..., alias="gameId")
    game_type: str = Field(..., alias="gameType")
    game_start_time: int = Field(..., alias="gameStartTime")
    map_id: int = Field(..., alias="mapId")
    game_length: int = Field(..., alias="gameLength")
    platform_id: str = Field(..., alias="platformId")
    game_mode: str = Field(..., alias="gameMode")
    banned_champions: List[BannedChampionDTO] = Field(..., alias="bannedChampions")
    game_queue_config_id: Optional[int] = Field(None, alias="gameQueueConfigId")
    observers: ObserverDTO
    participants: List[SpectatorParticipantDTO]

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FeaturedGameInfoDTO(BaseModel):
    """Featured live game."""

    game_id: int = Field(..., alias="gameId")
    game_mode: str = Field(..., alias="gameMode")
    game_length: int = Field(..., alias="gameLength")
    map_id: int = Field(..., alias="mapId")
    game_type: str = Field(..., alias="gameType")
    banned_champions: List[BannedChampionDTO] = Field(..., alias="bannedChampions")
    game_queue_config_id: Optional[int] = Field(None, alias="gameQueueConfigId")
    observers: ObserverDTO
    participants: List[SpectatorParticipantDTO]
    platform_id: str = Field(..., alias="platformId")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FeaturedGamesDTO(BaseModel):
    """Featured games list."""

    game_list: List[FeaturedGameInfoDTO] = Field(..., alias="gameList")
    client_refresh_interval: Optional[int] = Field(None, alias="clientRefreshInterval")

    model_config = ConfigDict(populate_by_name=True)


# Data Dragon


class AssetImageDTO(BaseModel):
    """Sprite reference for a static asset."""

    full: str
    sprite: str
    group: str
    x: int
    y: int
    w: int
    h: int


class ChampionInfoDTO(BaseModel):
    attack: int
    defense: int
    magic: int
    difficulty: int


class ChampionAssetDTO(BaseModel):
    """Champion entry from champion.json or champion/{id}.json."""

    version: Optional[str] = None
    id: str
    key: str
    name: str
    title: str
    blurb: Optional[str] = None
    info: ChampionInfoDTO
    image: AssetImageDTO
    tags: List[str]
    partype: str
    stats: Dict[str, float]

    # lore, skins, spells, passive... are kept as extra fields
    model_config = ConfigDict(extra="allow")


class ItemGoldDTO(BaseModel):
    base: int
    purchasable: bool
    total: int
    sell: int


class ItemAssetDTO(BaseModel):
    """Item entry from item.json."""

    name: str
    description: str
    plaintext: str = ""
    into: List[str] = Field(default_factory=list)
    image: AssetImageDTO
    gold: ItemGoldDTO
    tags: List[str] = Field(default_factory=list)
    maps: Dict[str, bool] = Field(default_factory=dict)
    stats: Dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class RuneDTO(BaseModel):
    id: int
    key: str
    name: str
    icon: str
    short_desc: str = Field(..., alias="shortDesc")
    long_desc: str = Field(..., alias="longDesc")

    model_config = ConfigDict(populate_by_name=True)


class RuneSlotDTO(BaseModel):
    runes: List[RuneDTO]


class RuneAssetDTO(BaseModel):
    """Rune tree from runesReforged.json."""

    id: int
    key: str
    name: str
    icon: str
    slots: List[RuneSlotDTO]

    model_config = ConfigDict(extra="allow")


class SummonerSpellAssetDTO(BaseModel):
    """Summoner spell entry from summoner.json."""

    id: str
    name: str
    description: str
    tooltip: str
    maxrank: int
    cooldown: List[float]
    cooldown_burn: str = Field(..., alias="cooldownBurn")
    cost: List[float]
    cost_burn: str = Field(..., alias="costBurn")
    key: str
    summoner_level: int = Field(..., alias="summonerLevel")
    modes: List[str]
    cost_type: str = Field(..., alias="costType")
    maxammo: str
    range: List[float]
    range_burn: str = Field(..., alias="rangeBurn")
    image: AssetImageDTO
    resource: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")
