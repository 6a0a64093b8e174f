import pytest

from ugc_scraper.errors import ElementNotFound, EmptyText, InvalidLink
from ugc_scraper.models import TeamRef
from ugc_scraper.parsers.team_lookup import parse_team_lookup


def _page(options):
    return f'<html><body><form><select name="clan_select">{options}</select></form></body></html>'


def test_parse_teams():
    page = _page(
        '<option value="">Pick a team</option>'
        '<option value="team_page.cfm?clan_id=7861">TAG - Team Name</option>'
        '<option value="team_page.cfm?clan_id=4105">X - Other - Team</option>'
    )
    assert parse_team_lookup(page) == [
        TeamRef(id=7861, name="Team Name"),
        TeamRef(id=4105, name="Other - Team"),
    ]


def test_name_without_dash_is_empty():
    page = _page('<option value="team_page.cfm?clan_id=12">Lonely</option>')
    assert parse_team_lookup(page) == [TeamRef(id=12, name="")]


def test_missing_select():
    with pytest.raises(ElementNotFound) as info:
        parse_team_lookup("<html><body></body></html>")
    assert info.value.role == "team list"


def test_invalid_link():
    page = _page('<option value="team_page.cfm?clan_id=abc">A - B</option>')
    with pytest.raises(InvalidLink) as info:
        parse_team_lookup(page)
    assert info.value.link == "team_page.cfm?clan_id=abc"


def test_empty_option_text():
    page = _page('<option value="team_page.cfm?clan_id=3"></option>')
    with pytest.raises(EmptyText):
        parse_team_lookup(page)