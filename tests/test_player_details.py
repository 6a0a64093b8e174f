import datetime

import pytest

from ugc_scraper.errors import ElementNotFound, InvalidDate, InvalidLink
from ugc_scraper.parsers.player_details import parse_player_details

ROW = (
    '<tr><td>1</td><td>2</td>'
    '<td><a href="team_page.cfm?clan_id={team}">{name}</a><br><small>{division}</small></td>'
    "<td>4</td><td><span>{joined}</span></td><td><span>{left}</span></td></tr>"
)


def _row(team="7861", name="Team A", division="Europe Platinum", joined="5/13/2009", left=""):
    return ROW.format(team=team, name=name, division=division, joined=joined, left=left)


def _table(title, rows):
    return (
        '<div class="white-row-small"><table>'
        f"<thead><tr><th><h4>{title}</h4></th></tr></thead>"
        f"<tbody><tr><td>header row</td></tr>{''.join(rows)}</tbody>"
        "</table></div>"
    )


def _page(*tables):
    return f'<html><body><div class="container">{"".join(tables)}</div></body></html>'


def test_rows_are_parsed():
    page = _page(_table("Highlander", [_row(left="6/1/2010"), _row(team="4105", name="Team B")]))
    history = parse_player_details(page)
    assert len(history) == 2
    first, second = history
    assert first.format == "Highlander"
    assert first.team.id == 7861
    assert first.team.name == "Team A"
    assert first.division == "Europe Platinum"
    assert first.joined == datetime.date(2009, 5, 13)
    assert first.left == datetime.date(2010, 6, 1)
    assert second.team.id == 4105
    assert second.left is None


def test_header_row_is_skipped():
    history = parse_player_details(_page(_table("Highlander", [])))
    assert history == []


def test_tables_keep_their_format():
    page = _page(_table("Highlander", [_row()]), _table("6vs6", [_row(team="1"), _row(team="2")]))
    history = parse_player_details(page)
    assert [entry.format for entry in history] == ["Highlander", "6vs6", "6vs6"]
    assert [entry.team.id for entry in history] == [7861, 1, 2]


def test_unparsable_left_date_is_none():
    history = parse_player_details(_page(_table("Highlander", [_row(left="present")])))
    assert history[0].left is None


def test_invalid_join_date_raises():
    with pytest.raises(InvalidDate) as info:
        parse_player_details(_page(_table("Highlander", [_row(joined="yesterday")])))
    assert info.value.date == "yesterday"


def test_missing_join_date_raises():
    row = _row().replace("<span>5/13/2009</span>", "")
    with pytest.raises(ElementNotFound) as info:
        parse_player_details(_page(_table("Highlander", [row])))
    assert info.value.role == "team join date"


def test_invalid_team_link_raises():
    with pytest.raises(InvalidLink):
        parse_player_details(_page(_table("Highlander", [_row(team="x")])))