import pytest
import responses

from nitradoapi.playerlist import Player, PlayerListService
from nitradoapi.services import Service
from nitradoapi.transport import Transport

BASE = "https://api.nitrado.net/"

PLAYERS_BODY = (
    '{"status":"success","data":{"players":[{"name":null,"id":"abcdefg12345678",'
    '"id_type":"internal","online":"true","actions":["kick"]},{"name":"Player25",'
    '"id":"hijklmnop0987654321","id_type":"internal","online":"true","actions":'
    '["kick","promotion_level_0","promotion_level_2","promotion_level_3"]},'
    '{"name":"Player26","id":"ijklmnop0987654322","id_type":"internal","online":"true",'
    '"actions":["kick","promotion_level_0","promotion_level_2","promotion_level_3"]},'
    '{"name":null,"id":"bcdefg123456790","id_type":"internal","online":"true",'
    '"actions":["kick"]}]}}'
)

PROMOTIONS = ["kick", "promotion_level_0", "promotion_level_2", "promotion_level_3"]


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def players():
    return PlayerListService(Transport("token", base_uri=BASE, retry_count=1, retry_delay=0))


def test_player_list(mock, players):
    mock.add(
        responses.GET,
        BASE + "services/7654321/gameservers/games/players",
        body=PLAYERS_BODY,
    )
    got = players.list(Service(id=7654321, username="ni1_1"))
    assert got == [
        Player(name="", id="abcdefg12345678", id_type="internal", online="true", actions=["kick"]),
        Player(name="", id="bcdefg123456790", id_type="internal", online="true", actions=["kick"]),
        Player(
            name="Player25",
            id="hijklmnop0987654321",
            id_type="internal",
            online="true",
            actions=PROMOTIONS,
        ),
        Player(
            name="Player26",
            id="ijklmnop0987654322",
            id_type="internal",
            online="true",
            actions=PROMOTIONS,
        ),
    ]
    assert mock.calls[0].request.method == "GET"


def test_empty_player_list(mock, players):
    mock.add(
        responses.GET,
        BASE + "services/1/gameservers/games/players",
        json={"status": "success", "data": {}},
    )
    assert players.list(Service(id=1)) == []


def test_player_from_dict_defaults():
    assert Player.from_dict({"name": "Player25", "actions": None}) == Player(name="Player25")