import datetime

import pytest

from ugc_scraper.errors import InvalidLink
from ugc_scraper.parsers.common import (
    collapse_whitespace,
    first_text,
    make_document,
    match_id_from_link,
    parse_month_day_year,
    parse_slash_date,
    select_last_text,
    select_text,
    select_text_empty,
    steam_id_from_link,
    team_id_from_link,
)
from ugc_scraper.steamid import SteamID

PAGE = """
<html><body>
<div class="box">
  <p class="intro"> <!-- hidden --> <b>   </b>  Hello <i>World</i></p>
  <span class="blank">   </span>
  <td class="cell">Name <b>tag</b> Team </td>
  <ul><li>one</li><li>two</li></ul>
</div>
</body></html>
"""


@pytest.fixture
def document():
    return make_document(PAGE)


def test_first_text_skips_blank_and_comments(document):
    assert first_text(document.select_one("p.intro")) == "Hello"


def test_select_text(document):
    assert select_text(document, "p.intro") == "Hello"
    assert select_text(document, "li") == "one"
    assert select_text(document, "span.blank") is None
    assert select_text(document, ".missing") is None


def test_select_text_empty(document):
    assert select_text_empty(document, "span.blank") == ""
    assert select_text_empty(document, "p.intro i") == "World"
    assert select_text_empty(document, ".missing") is None


def test_select_last_text(document):
    assert select_last_text(document, ".cell") == "Team"
    assert select_last_text(document, ".missing") is None


def test_select_last_text_without_text_nodes():
    document = make_document("<div><span class='x'></span></div>")
    assert select_last_text(document, "span.x") is None


def test_select_within_element(document):
    box = document.select_one("div.box")
    assert select_text(box, "li:nth-child(2)") == "two"


def test_team_id_from_link():
    assert team_id_from_link("team_page.cfm?clan_id=7861") == 7861


def test_match_id_from_link():
    assert match_id_from_link("matchpage_tf2h.cfm?mid=116246") == 116246


def test_steam_id_from_link():
    link = "players_page.cfm?player_id=76561198024494988"
    assert steam_id_from_link(link) == SteamID(76561198024494988)


@pytest.mark.parametrize(
    "link", ["team_page.cfm", "team_page.cfm?clan_id=", "x=abc", "x=4294967296", "x= 12"]
)
def test_team_id_invalid(link):
    with pytest.raises(InvalidLink) as info:
        team_id_from_link(link)
    assert info.value.link == link
    assert info.value.role == "team id"


def test_other_id_roles():
    with pytest.raises(InvalidLink) as info:
        match_id_from_link("nothing")
    assert info.value.role == "match id"
    with pytest.raises(InvalidLink) as info:
        steam_id_from_link("player_id=x")
    assert info.value.role == "user id"


def test_parse_slash_date():
    assert parse_slash_date("5/13/2009") == datetime.date(2009, 5, 13)
    assert parse_slash_date("12/1/2020") == datetime.date(2020, 12, 1)


@pytest.mark.parametrize("text", ["2/30/2009", "05-13-2009", "5/13/09", "", "13/1/2009"])
def test_parse_slash_date_invalid(text):
    with pytest.raises(ValueError):
        parse_slash_date(text)


def test_parse_month_day_year():
    assert parse_month_day_year("May 13, 2009") == datetime.date(2009, 5, 13)
    assert parse_month_day_year("Oct 6, 2019") == datetime.date(2019, 10, 6)


@pytest.mark.parametrize("text", ["may 13, 2009", "May 13 2009", "Foo 1, 2009", "May 32, 2009"])
def test_parse_month_day_year_invalid(text):
    with pytest.raises(ValueError):
        parse_month_day_year(text)


def test_collapse_whitespace():
    assert collapse_whitespace("Jan 5,\n\t 2020  /  3:00") == "Jan 5, 2020 / 3:00"
    assert collapse_whitespace("plain") == "plain"