"""Sample Riot API payload fixtures for service tests."""

import pytest

from .payloads import PUUID, match_payload


@pytest.fixture
def account_data():
    return {"puuid": PUUID, "gameName": "TestPlayer", "tagLine": "EUW"}


@pytest.fixture
def summoner_data():
    return {
        "id": "encrypted-summoner-id",
        "puuid": PUUID,
        "profileIconId": 4568,
        "revisionDate": 1718445600000,
        "summonerLevel": 312,
    }


@pytest.fixture
def league_entries_data():
    return [
        {
            "leagueId": "league-uuid",
            "puuid": PUUID,
            "queueType": "RANKED_SOLO_5x5",
            "tier": "EMERALD",
            "rank": "II",
            "leaguePoints": 47,
            "wins": 60,
            "losses": 40,
            "hotStreak": False,
            "veteran": False,
            "freshBlood": True,
            "inactive": False,
        }
    ]


@pytest.fixture
def active_game_data():
    return {
        "gameId": 6543210,
        "gameType": "MATCHED",
        "gameStartTime": 1718445600000,
        "mapId": 11,
        "gameLength": 620,
        "platformId": "EUW1",
        "gameMode": "CLASSIC",
        "bannedChampions": [{"championId": 555, "teamId": 100, "pickTurn": 1}],
        "gameQueueConfigId": 420,
        "observers": {"encryptionKey": "k3y"},
        "participants": [
            {
                "championId": 157,
                "profileIconId": 4568,
                "bot": False,
                "teamId": 100,
                "puuid": PUUID,
                "spell1Id": 4,
                "spell2Id": 14,
                "perks": {
                    "perkIds": [8010, 9111],
                    "perkStyle": 8000,
                    "perkSubStyle": 8400,
                },
                "gameCustomizationObjects": [],
            }
        ],
    }


@pytest.fixture
def match_data():
    return match_payload()
