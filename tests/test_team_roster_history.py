import datetime

import pytest

from ugc_scraper.enums import MembershipRole
from ugc_scraper.errors import ElementNotFound, InvalidDate, InvalidText
from ugc_scraper.parsers.team_roster_history import parse_team_roster_history
from ugc_scraper.steamid import SteamID

STEAM3 = "[U:1:64229260]"
STEAM_ID = 76561198024494988


def _item(name="Player One", steam=STEAM3, role="Former Leader", joined="May 13, 2009", left="Jun 1, 2010"):
    parts = [f'<div class="clearfix"><h5><b>{name}</b> <small>{steam}</small></h5>']
    if role is not None:
        parts.append(f"<div><small>{role}</small></div>")
    if joined is not None:
        parts.append(f'<span class="text-success"><small>{joined}</small></span>')
    if left is not None:
        parts.append(f'<span class="text-danger"><small>{left}</small></span>')
    parts.append("</div>")
    return "".join(parts)


def _page(*items, group=True):
    link = (
        '<p class="muted"><a href="http://http://steamcommunity.com/groups/test">group</a></p>'
        if group
        else ""
    )
    return (
        '<html><body><div class="container"><div class="white-row-small">'
        f'{link}<div class="row-fluid"><div class="col-md-12">{"".join(items)}</div></div>'
        "</div></div></body></html>"
    )


def test_roster_entry():
    data = parse_team_roster_history(_page(_item()))
    assert len(data.history) == 1
    entry = data.history[0]
    assert entry.name == "Player One"
    assert entry.steam_id == SteamID(STEAM_ID)
    assert entry.role == MembershipRole.LEADER
    assert entry.joined == datetime.date(2009, 5, 13)
    assert entry.left == datetime.date(2010, 6, 1)


def test_steam_id_round_trips_to_steam3():
    data = parse_team_roster_history(_page(_item()))
    assert data.history[0].steam_id.steam3() == STEAM3


def test_steam_group_is_cleaned():
    data = parse_team_roster_history(_page(_item()))
    assert data.steam_group == "http://steamcommunity.com/groups/test"


def test_no_steam_group():
    data = parse_team_roster_history(_page(_item(), group=False))
    assert data.steam_group is None


def test_current_member_without_left_date():
    data = parse_team_roster_history(_page(_item(role="-", left=None)))
    assert data.history[0].left is None
    assert data.history[0].role == MembershipRole.MEMBER


def test_unknown_or_missing_role_defaults_to_member():
    data = parse_team_roster_history(_page(_item(role="Coach"), _item(role=None)))
    assert [entry.role for entry in data.history] == [MembershipRole.MEMBER, MembershipRole.MEMBER]


def test_invalid_steam_id_raises():
    with pytest.raises(InvalidText) as info:
        parse_team_roster_history(_page(_item(steam="not-an-id")))
    assert info.value.text == "not-an-id"


def test_invalid_date_reports_steam_id():
    with pytest.raises(InvalidDate) as info:
        parse_team_roster_history(_page(_item(joined="13/5/2009")))
    assert info.value.date == STEAM3


def test_invalid_left_date_raises():
    with pytest.raises(InvalidDate):
        parse_team_roster_history(_page(_item(left="someday")))


def test_missing_join_date_raises():
    with pytest.raises(ElementNotFound) as info:
        parse_team_roster_history(_page(_item(joined=None)))
    assert info.value.role == "member joined date"


def test_empty_page_has_no_history():
    data = parse_team_roster_history("<html><body></body></html>")
    assert data.history == []
    assert data.steam_group is None