"""Parser for a team's main page."""

from __future__ import annotations

import datetime
import re
from typing import Iterable, Optional

from ..enums import GameMode, MembershipRole, Region
from ..errors import (
    ElementNotFound,
    InvalidDate,
    InvalidGameMode,
    InvalidMembershipRole,
    InvalidText,
    NotFoundError,
)
from ..models import Membership, NameChange, Record, Team
from .common import (
    collapse_whitespace,
    first_text,
    make_document,
    parse_month_day_year,
    parse_slash_date,
    select_text,
    select_text_empty,
    steam_id_from_link,
)

SELECTOR_TEAM_NAME = ".container .col-md-12 h1 > b"
SELECTOR_TEAM_TAG = ".container .col-md-12 h1 > span"
SELECTOR_TEAM_IMAGE = ".container .col-md-12 a > img"

SELECTOR_TEAM_FORMAT = ".container .col-md-3 .white-row-small h5 .text-danger b"
SELECTOR_TEAM_DIVISION = ".container .col-md-3 .white-row-small h5 > b"
SELECTOR_TEAM_TIMEZONE = ".container .col-md-3 .white-row-small p > small > b"
SELECTOR_TEAM_DESCRIPTION = ".container .col-md-3 .white-row-small p:nth-child(4) > small"
SELECTOR_TEAM_TITLES = ".container .col-md-3 .white-row-small p > .text-warning"

SELECTOR_TEAM_MEMBER_ROW = (
    ".container .white-row-small > .row-fluid > .col-md-12 > .white-row-light-small"
)
SELECTOR_TEAM_MEMBER_LINK = 'b > a[href^="players_page"]'
SELECTOR_TEAM_MEMBER_STEAM_LINK = 'div > a[href*="profiles/"]'
SELECTOR_TEAM_MEMBER_ROLE = ".tinytext"
SELECTOR_TEAM_MEMBER_SINCE = ".tinytext > em"

SELECTOR_TEAM_RECORDS = ".container .col-md-3 .white-row-small .table-responsive > table tbody tr"
SELECTOR_TEAM_RECORD_SEASON = "td:nth-child(1) small span b"
SELECTOR_TEAM_RECORD_DIVISION = "td:nth-child(2) small"
SELECTOR_TEAM_RECORD_RESULT = "td:nth-child(3)"

SELECTOR_TEAM_NAME_CHANGE = ".white-row-small:nth-child(3) .table-responsive table tbody tr"
SELECTOR_TEAM_NAME_FROM_TAG = "td:nth-child(1) small"
SELECTOR_TEAM_NAME_FROM_NAME = "td:nth-child(2) small"
SELECTOR_TEAM_NAME_TO_TAG = "td:nth-child(3) small"
SELECTOR_TEAM_NAME_TO_NAME = "td:nth-child(4) small"
SELECTOR_TEAM_NAME_DATE = "td:nth-child(5) small"

SELECTOR_STEAM = 'a.btn.btn-xs.btn-default[href*="//steamcommunity.com/groups"]'

_PLACEHOLDER_IMAGE = "team_avatar_placeholder.png"
_EASTERN = datetime.timezone(datetime.timedelta(hours=-5))
_UNSIGNED = re.compile(r"\+?[0-9]+")
_MEMBER_DATE = re.compile(
    r"([A-Za-z]{3} [0-9]{1,2}, [0-9]{4}) / ([0-9]{1,2}):([0-9]{2}) (?:AM|PM) \(ET\)"
)


def _parse_unsigned(text: str, bits: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _trim_end(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _attr(element, *names: str) -> Optional[str]:
    for name in names:
        value = element.get(name)
        if value is not None:
            return str(value)
    return None


def _region(text: str) -> Optional[Region]:
    try:
        return Region.parse(text)
    except ValueError:
        return None


def _first_region(parts: Iterable[str]) -> Optional[Region]:
    for part in parts:
        region = _region(part)
        if region is not None:
            return region
    return None


def _find_region(division: str, timezone: Optional[str], format_text: str) -> Optional[Region]:
    region = _first_region(division.split(" "))
    if region is None:
        region = _region(_trim_end(division, "New Teams").strip())
    if region is None:
        region = _region(division)
    if region is None and timezone is not None:
        region = _region(timezone)
    if region is None:
        region = _first_region(format_text.split(" "))
    return region


def _parse_record(row) -> Record:
    season = select_text(row, SELECTOR_TEAM_RECORD_SEASON)
    if season is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_RECORD_SEASON, role="team record season")
    division = select_text(row, SELECTOR_TEAM_RECORD_DIVISION)
    if division is None:
        raise ElementNotFound(
            selector=SELECTOR_TEAM_RECORD_DIVISION, role="team record division"
        )
    result = select_text(row, SELECTOR_TEAM_RECORD_RESULT)
    if result is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_RECORD_RESULT, role="team record result")

    wins, separator, losses = result.partition("-")
    if not separator:
        raise InvalidText(text=result, role="team record result")

    try:
        season_number = _parse_unsigned(season, 32)
    except ValueError:
        raise InvalidText(text=season, role="team record season") from None
    try:
        win_count = _parse_unsigned(wins, 8)
    except ValueError:
        raise InvalidText(text=wins, role="team record wins") from None
    try:
        loss_count = _parse_unsigned(losses, 8)
    except ValueError:
        raise InvalidText(text=losses, role="team record losses") from None

    return Record(season=season_number, division=division, wins=win_count, losses=loss_count)


def _parse_member_since(text: str) -> datetime.datetime:
    since = collapse_whitespace(text.strip())
    if since.startswith("("):
        head, separator, _ = since.partition("-")
        part = (head if separator else "").strip().lstrip("(")
        try:
            date = parse_month_day_year(part)
        except ValueError:
            raise InvalidDate(date=since, role="member join date (alternate format)") from None
        return datetime.datetime.combine(date, datetime.time(), tzinfo=datetime.timezone.utc)

    error = InvalidDate(date=since, role="member join date")
    match = _MEMBER_DATE.fullmatch(since)
    if not match:
        raise error
    try:
        date = parse_month_day_year(match.group(1))
    except ValueError:
        raise error from None
    # the hour is taken as written, the AM/PM marker does not shift it
    hour, minute = int(match.group(2)), int(match.group(3))
    if hour > 23 or minute > 59:
        raise error
    return datetime.datetime.combine(date, datetime.time(hour, minute), tzinfo=_EASTERN)


def _parse_member(row) -> Membership:
    link = row.select_one(SELECTOR_TEAM_MEMBER_LINK)
    if link is None:
        link = row.select_one(SELECTOR_TEAM_MEMBER_STEAM_LINK)
    if link is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_MEMBER_LINK, role="team member link")
    name = first_text(link) or ""
    href = _attr(link, "href") or ""

    role_text = select_text(row, SELECTOR_TEAM_MEMBER_ROLE)
    if role_text is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_MEMBER_ROLE, role="team member role")
    try:
        role = MembershipRole.parse(role_text.split("\n")[0])
    except InvalidMembershipRole as error:
        raise InvalidText(text=error.text, role="member role") from None

    since_text = select_text(row, SELECTOR_TEAM_MEMBER_SINCE)
    if since_text is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_MEMBER_SINCE, role="team member since")
    since = _parse_member_since(since_text)

    return Membership(name=name, steam_id=steam_id_from_link(href), role=role, since=since)


def _parse_name_change(row) -> NameChange:
    from_tag = select_text(row, SELECTOR_TEAM_NAME_FROM_TAG) or ""
    from_name = select_text_empty(row, SELECTOR_TEAM_NAME_FROM_NAME)
    if from_name is None:
        raise ElementNotFound(
            selector=SELECTOR_TEAM_NAME_FROM_NAME, role="team name change from name"
        )
    to_tag = select_text(row, SELECTOR_TEAM_NAME_TO_TAG) or ""
    to_name = select_text_empty(row, SELECTOR_TEAM_NAME_TO_NAME)
    if to_name is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_NAME_TO_NAME, role="team name change to name")
    date_text = select_text(row, SELECTOR_TEAM_NAME_DATE)
    if date_text is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_NAME_DATE, role="team name change date")
    try:
        date = parse_slash_date(date_text)
    except ValueError:
        raise InvalidDate(date=date_text, role="team name change date") from None
    return NameChange(
        from_tag=from_tag, from_name=from_name, to_tag=to_tag, to_name=to_name, date=date
    )


def parse_team(document: str) -> Team:
    """Read a team's main page; raises NotFoundError for an empty team page."""
    root = make_document(document)

    name = select_text(root, SELECTOR_TEAM_NAME) or ""
    tag = select_text(root, SELECTOR_TEAM_TAG) or ""
    image_element = root.select_one(SELECTOR_TEAM_IMAGE)

    if not tag and not name and image_element is None:
        raise NotFoundError()
    if not name and image_element is not None:
        name = tag

    image = None
    if image_element is not None:
        source = _attr(image_element, "data-cfsrc", "src")
        if source is not None and not source.endswith(_PLACEHOLDER_IMAGE):
            image = source

    format_text = select_text(root, SELECTOR_TEAM_FORMAT)
    if format_text is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_FORMAT, role="team format")
    try:
        game_mode = GameMode.parse(format_text)
    except InvalidGameMode as error:
        raise InvalidText(text=error.text, role="team game mode") from None

    steam_group = None
    steam_link = root.select_one(SELECTOR_STEAM)
    if steam_link is not None:
        href = _attr(steam_link, "href")
        if href is not None:
            steam_group = href.replace("http://http", "http")

    division = select_text(root, SELECTOR_TEAM_DIVISION)
    if division is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_DIVISION, role="team division")

    timezone = select_text(root, SELECTOR_TEAM_TIMEZONE)
    region = _find_region(division, timezone, format_text)

    description = (select_text(root, SELECTOR_TEAM_DESCRIPTION) or "").replace("\n", " ")

    titles_element = root.select_one(SELECTOR_TEAM_TITLES)
    titles = list(titles_element.stripped_strings) if titles_element is not None else []

    results = [_parse_record(row) for row in root.select(SELECTOR_TEAM_RECORDS)]
    members = [_parse_member(row) for row in root.select(SELECTOR_TEAM_MEMBER_ROW)]
    name_changes = [_parse_name_change(row) for row in root.select(SELECTOR_TEAM_NAME_CHANGE)]

    return Team(
        name=name,
        tag=tag,
        image=image,
        format=game_mode,
        region=region,
        timezone=timezone,
        steam_group=steam_group,
        division=division,
        description=description,
        titles=titles,
        members=members,
        results=results,
        name_changes=name_changes,
    )