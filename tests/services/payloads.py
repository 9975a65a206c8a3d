"""Sample Riot API payloads shared by the service tests."""

PUUID = "test-puuid-123"


def participant(puuid: str, team_id: int, win: bool, **overrides) -> dict:
    data = {
        "puuid": puuid,
        "teamId": team_id,
        "win": win,
        "championId": 157,
        "championName": "Yasuo",
        "kills": 7,
        "deaths": 2,
        "assists": 5,
        "riotIdGameName": "TestPlayer",
        "riotIdTagline": "EUW",
        "goldEarned": 12000,
        "totalDamageDealtToChampions": 23000,
    }
    data.update(overrides)
    return data


def team(team_id: int, win: bool) -> dict:
    objective = {"first": False, "kills": 0}
    return {
        "bans": [{"championId": 555, "pickTurn": 1}],
        "objectives": {
            "baron": objective,
            "champion": {"first": win, "kills": 20},
            "dragon": objective,
            "inhibitor": objective,
            "riftHerald": objective,
            "tower": {"first": win, "kills": 8},
        },
        "teamId": team_id,
        "win": win,
    }


def match_payload(match_id: str = "EUW1_1234567890", game_duration: int = 1865) -> dict:
    return {
        "metadata": {
            "dataVersion": "2",
            "matchId": match_id,
            "participants": [PUUID, "other-puuid"],
        },
        "info": {
            "gameCreation": 1718445600000,
            "gameDuration": game_duration,
            "gameEndTimestamp": 1718447500000,
            "gameId": 1234567890,
            "gameMode": "CLASSIC",
            "gameName": "teambuilder-match-1234567890",
            "gameStartTimestamp": 1718445635000,
            "gameType": "MATCHED_GAME",
            "gameVersion": "14.12.593.5894",
            "mapId": 11,
            "platformId": "EUW1",
            "queueId": 420,
            "teams": [team(100, True), team(200, False)],
            "participants": [
                participant(PUUID, 100, True),
                participant("other-puuid", 200, False, championName="Ahri"),
            ],
        },
    }
