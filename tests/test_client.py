import httpx
import pytest

from ugc_scraper.client import UgcClient
from ugc_scraper.enums import GameMode
from ugc_scraper.errors import NotFoundError, RequestError
from ugc_scraper.steamid import SteamID

LOOKUP = (
    '<html><body><select name="clan_select">'
    '<option value="team_page.cfm?clan_id=7861">TAG - Team Name</option>'
    "</select></body></html>"
)

RESULT_TABLE = (
    '<table class="table table-condensed table-bordered">'
    "<tr><td>Team</td><td>Score</td></tr><tr><td>{name}</td><td>{score}</td></tr></table>"
)

MATCH = (
    '<html><body><h3 class="page-header"><strong class="styleColor">TF2 6vs6</strong></h3>'
    '<a href="team_page.cfm?clan_id=1">A</a><a href="team_page.cfm?clan_id=2">B</a>'
    '<h4 class="text-success text-center"><b>cp_process</b></h4>'
    '<p class="muted text-center nomargin"><small><b>3</b><b>Mon, Jan 8</b></small></p>'
    + RESULT_TABLE.format(name="Alpha", score=5)
    + RESULT_TABLE.format(name="Beta", score=3)
    + "</body></html>"
)


def make_client(handler):
    seen = []

    def record(request):
        seen.append(request.url)
        return handler(request)

    http = httpx.Client(transport=httpx.MockTransport(record))
    return UgcClient(http), seen


def test_teams_requests_lookup_page():
    client, seen = make_client(lambda request: httpx.Response(200, text=LOOKUP))
    teams = client.teams(GameMode.parse("9v9"))
    assert seen[0].path == "/team_lookup_tf2h.cfm"
    assert [(team.id, team.name) for team in teams] == [(7861, "Team Name")]


def test_found_redirect_is_not_found_without_retry():
    client, seen = make_client(
        lambda request: httpx.Response(302, headers={"location": "/index.cfm"})
    )
    with pytest.raises(NotFoundError):
        client.team(5)
    assert len(seen) == 1
    assert seen[0].params["clan_id"] == "5"


def test_player_url_uses_64_bit_id():
    client, seen = make_client(
        lambda request: httpx.Response(302, headers={"location": "/index.cfm"})
    )
    with pytest.raises(NotFoundError):
        client.player(SteamID(76561198024494988))
    assert seen[0].path == "/players_page.cfm"
    assert seen[0].params["player_id"] == "76561198024494988"


def test_server_error_is_retried_once():
    responses = [httpx.Response(500), httpx.Response(200, text=LOOKUP)]
    client, seen = make_client(lambda request: responses.pop(0))
    teams = client.teams(GameMode.parse("6v6"))
    assert len(seen) == 2
    assert teams[0].id == 7861


def test_persistent_server_error_raises_request_error():
    client, seen = make_client(lambda request: httpx.Response(500))
    with pytest.raises(RequestError):
        client.transactions(GameMode.parse("4v4"))
    assert len(seen) == 2


def test_match_page_redirects_are_followed():
    def handler(request):
        if request.url.path == "/matchpage_tf2h.cfm":
            return httpx.Response(302, headers={"location": "matchpage_tf26.cfm?mid=1"})
        return httpx.Response(200, text=MATCH)

    client, seen = make_client(handler)
    info = client.match_info(1)
    assert [url.path for url in seen] == ["/matchpage_tf2h.cfm", "/matchpage_tf26.cfm"]
    assert info.map == "cp_process"
    assert (info.score_home, info.score_away) == (5, 3)
    assert (info.team_home.name, info.team_away.name) == ("Alpha", "Beta")


def test_context_manager_returns_client():
    http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, text=LOOKUP)))
    with UgcClient(http) as client:
        teams = client.teams(GameMode.parse("2v2"))
    assert teams[0].name == "Team Name"
    assert not http.is_closed