import datetime

import pytest

from ugc_scraper.enums import GameMode, MembershipRole, Region
from ugc_scraper.errors import (
    ElementNotFound,
    InvalidDate,
    InvalidLink,
    InvalidText,
    NotFoundError,
)
from ugc_scraper.models import NameChange, Record, to_json_data
from ugc_scraper.parsers.team import (
    SELECTOR_TEAM_DIVISION,
    SELECTOR_TEAM_MEMBER_LINK,
    parse_team,
)

DEFAULT_IMAGE = '<a href="#"><img src="/images/teams/foo.png"></a>'
EASTERN = datetime.timezone(datetime.timedelta(hours=-5))


def _member(
    link='<b><a href="players_page.cfm?player_id=76561198000000001">Alice</a></b>',
    role="Leader",
    since="Jan 5, 2020 / 10:30 AM (ET)",
):
    return (
        f'<div class="white-row-light-small">{link}'
        f'<div class="tinytext">{role}\n<em>{since}</em></div></div>'
    )


def _record(season="30", division="Platinum", result="5-3"):
    return (
        f"<tr><td><small><span><b>{season}</b></span></small></td>"
        f"<td><small>{division}</small></td><td>{result}</td></tr>"
    )


def _name_change(from_tag="OLD", from_name="Old Name", to_tag="NEW", to_name="New Name",
                 date="6/1/2021"):
    return (
        f"<tr><td><small>{from_tag}</small></td><td><small>{from_name}</small></td>"
        f"<td><small>{to_tag}</small></td><td><small>{to_name}</small></td>"
        f"<td><small>{date}</small></td></tr>"
    )


def _page(
    tag="FOO",
    name="Foo Team",
    image=DEFAULT_IMAGE,
    format_text="TF2 Highlander",
    division="Europe Platinum",
    timezone="CET",
    description="Line one\nline two",
    members=None,
    records=None,
    name_changes=None,
):
    members = [_member()] if members is None else members
    records = [_record()] if records is None else records
    name_changes = [_name_change()] if name_changes is None else name_changes
    header = f'<div class="col-md-12"><h1><span>{tag}</span> <b>{name}</b></h1>{image}</div>'
    format_h5 = (
        f'<h5><span class="text-danger"><b>{format_text}</b></span></h5>'
        if format_text is not None
        else "<h5></h5>"
    )
    division_h5 = f"<h5><b>{division}</b></h5>" if division is not None else "<h5></h5>"
    timezone_p = (
        f"<p><small>Timezone: <b>{timezone}</b></small></p>"
        if timezone is not None
        else "<p><small>Timezone:</small></p>"
    )
    info = (
        '<div class="col-md-3"><div class="white-row-small">'
        f"{format_h5}{division_h5}{timezone_p}"
        f"<p><small>{description}</small></p>"
        '<p><span class="text-warning">Season 30 Champions<br>Season 29 Runner-up</span></p>'
        '<a class="btn btn-xs btn-default" '
        'href="http://http://steamcommunity.com/groups/example">Steam</a>'
        '<div class="table-responsive"><table><tbody>'
        f"{''.join(records)}"
        "</tbody></table></div></div></div>"
    )
    roster = (
        '<div class="col-md-9">'
        '<div class="white-row-small"><div class="row-fluid"><div class="col-md-12">'
        f"{''.join(members)}"
        "</div></div></div>"
        '<div class="spacer"></div>'
        '<div class="white-row-small"><div class="table-responsive"><table><tbody>'
        f"{''.join(name_changes)}"
        "</tbody></table></div></div></div>"
    )
    return f'<html><body><div class="container">{header}{info}{roster}</div></body></html>'


def test_full_page():
    team = parse_team(_page())
    assert team.name == "Foo Team"
    assert team.tag == "FOO"
    assert team.image == "/images/teams/foo.png"
    assert team.format == GameMode.HIGHLANDER
    assert team.division == "Europe Platinum"
    assert team.region == Region.EUROPE
    assert team.timezone == "CET"
    assert team.steam_group == "http://steamcommunity.com/groups/example"
    assert team.description == "Line one line two"
    assert team.titles == ["Season 30 Champions", "Season 29 Runner-up"]
    assert team.results == [Record(season=30, division="Platinum", wins=5, losses=3)]
    assert team.name_changes == [
        NameChange(
            from_tag="OLD",
            from_name="Old Name",
            to_tag="NEW",
            to_name="New Name",
            date=datetime.date(2021, 6, 1),
        )
    ]


def test_member_with_default_date_format():
    team = parse_team(_page())
    assert len(team.members) == 1
    member = team.members[0]
    assert member.name == "Alice"
    assert int(member.steam_id) == 76561198000000001
    assert member.role == MembershipRole.LEADER
    assert member.since == datetime.datetime(2020, 1, 5, 10, 30, tzinfo=EASTERN)


def test_member_date_with_newlines_is_collapsed():
    team = parse_team(_page(members=[_member(since="Jan 5, 2020 /\n   10:30 AM\t(ET)")]))
    assert team.members[0].since == datetime.datetime(2020, 1, 5, 10, 30, tzinfo=EASTERN)


def test_member_alternate_date_format():
    team = parse_team(_page(members=[_member(role="Member", since="(Mar 2, 2019 - Mar 9, 2019)")]))
    member = team.members[0]
    assert member.role == MembershipRole.MEMBER
    assert member.since == datetime.datetime(2019, 3, 2, tzinfo=datetime.timezone.utc)


def test_empty_page_is_not_found():
    with pytest.raises(NotFoundError):
        parse_team("<html><body><p>nothing</p></body></html>")


def test_missing_name_uses_tag():
    team = parse_team(_page(name=""))
    assert team.name == "FOO"
    assert team.tag == "FOO"


def test_placeholder_image_is_dropped():
    image = '<a href="#"><img src="/images/team_avatar_placeholder.png"></a>'
    team = parse_team(_page(image=image))
    assert team.image is None


def test_cloudflare_image_source_preferred():
    image = '<a href="#"><img data-cfsrc="/images/teams/cf.png" src="/images/teams/foo.png"></a>'
    team = parse_team(_page(image=image))
    assert team.image == "/images/teams/cf.png"


def test_unknown_format_is_invalid_text():
    with pytest.raises(InvalidText) as info:
        parse_team(_page(format_text="Chess"))
    assert info.value.role == "team game mode"
    assert info.value.text == "Chess"


def test_missing_division():
    with pytest.raises(ElementNotFound) as info:
        parse_team(_page(division=None))
    assert info.value.selector == SELECTOR_TEAM_DIVISION


def test_region_from_timezone():
    team = parse_team(_page(division="Steel", timezone="(NA)"))
    assert team.region == Region.NORTH_AMERICA


def test_region_from_new_teams_division():
    team = parse_team(_page(division="North America New Teams", timezone="EST"))
    assert team.region == Region.NORTH_AMERICA


def test_region_from_format_text():
    team = parse_team(_page(format_text="ASIA TF2-H", division="Steel", timezone="GMT+8"))
    assert team.format == GameMode.HIGHLANDER
    assert team.region == Region.ASIA


def test_no_region():
    team = parse_team(_page(division="Steel", timezone="CET"))
    assert team.region is None


def test_missing_timezone():
    team = parse_team(_page(timezone=None))
    assert team.timezone is None
    assert team.region == Region.EUROPE


def test_invalid_record_result():
    with pytest.raises(InvalidText) as info:
        parse_team(_page(records=[_record(result="5:3")]))
    assert info.value.role == "team record result"
    assert info.value.text == "5:3"


def test_invalid_record_season():
    with pytest.raises(InvalidText) as info:
        parse_team(_page(records=[_record(season="x")]))
    assert info.value.role == "team record season"


def test_invalid_member_role():
    with pytest.raises(InvalidText) as info:
        parse_team(_page(members=[_member(role="Captain")]))
    assert info.value.role == "member role"


def test_invalid_member_date():
    with pytest.raises(InvalidDate) as info:
        parse_team(_page(members=[_member(since="sometime")]))
    assert info.value.role == "member join date"


def test_member_without_link():
    with pytest.raises(ElementNotFound) as info:
        parse_team(_page(members=[_member(link="<b>Nobody</b>")]))
    assert info.value.selector == SELECTOR_TEAM_MEMBER_LINK


def test_steam_profile_link_without_id_is_invalid():
    link = '<div><a href="https://steamcommunity.com/profiles/76561198000000002">Bob</a></div>'
    with pytest.raises(InvalidLink) as info:
        parse_team(_page(members=[_member(link=link)]))
    assert info.value.role == "user id"


def test_empty_name_change_names():
    team = parse_team(_page(name_changes=[_name_change(from_tag="", from_name="")]))
    change = team.name_changes[0]
    assert change.from_tag == ""
    assert change.from_name == ""
    assert change.to_name == "New Name"


def test_invalid_name_change_date():
    with pytest.raises(InvalidDate) as info:
        parse_team(_page(name_changes=[_name_change(date="June 2021")]))
    assert info.value.role == "team name change date"


def test_json_data_uses_source_field_names():
    data = to_json_data(parse_team(_page()))
    assert data["name_changes"][0]["from"] == "Old Name"
    assert data["name_changes"][0]["to"] == "New Name"
    assert data["format"] == "9v9"
    assert data["region"] == "europe"
    assert data["members"][0]["steam_id"] == "76561198000000001"