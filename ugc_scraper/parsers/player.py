"""Parser for a player's profile page."""

from __future__ import annotations

import re

from ..enums import GameMode, PlayerClass
from ..errors import ElementNotFound, EmptyText, InvalidDate, InvalidGameMode, InvalidLink, InvalidText
from ..models import Honors, Player, TeamMembership, TeamRef
from ..steamid import SteamID
from .common import (
    first_text,
    make_document,
    parse_slash_date,
    select_last_text,
    select_text,
    team_id_from_link,
)

SELECTOR_PLAYER_NAME = ".container .col-md-4 > h3 > b"
SELECTOR_PLAYER_ID = 'a[href*="steam://friends/add"]'
SELECTOR_PLAYER_FLAG = 'img[data-cfsrc*="/images/flags/"]'

SELECTOR_PLAYER_HONORS_GROUP = ".container .col-md-6:nth-child(2) .white-row-small .row-fluid"
SELECTOR_PLAYER_HONORS_HEADER = "h5"
SELECTOR_PLAYER_HONORS_LEAGUE = "li div"
SELECTOR_PLAYER_HONORS_TEAM = "li small a"

SELECTOR_PLAYER_TEAM_GROUP = ".container .col-md-6:nth-child(1) .white-row-small .row-fluid"
SELECTOR_PLAYER_TEAM_LINK = "p a"
SELECTOR_PLAYER_TEAM_NAME = "span.text-primary b"
SELECTOR_PLAYER_TEAM_LEAGUE = "small"
SELECTOR_PLAYER_TEAM_SINCE = "small"

SELECTOR_AVATAR = (
    'a[href*="https://www.ugcleague.com/players_page.cfm?player_id="] img.img-responsive'
)
SELECTOR_CLASS = (
    'img.img-rounded[src*="images/tf2/icon/"], img.img-rounded[data-cfsrc*="images/tf2/icon/"]'
)

_STEAM_ADD_PREFIX = "steam://friends/add/"
_CLASS_ICON_PREFIX = "images/tf2/icon/"
_CLASS_ICON_SUFFIX = ".jpg"
_UNSIGNED = re.compile(r"\+?[0-9]+")


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


def _attr(element, *names: str) -> str | None:
    for name in names:
        value = element.get(name)
        if value is not None:
            return str(value)
    return None


def _parse_honors(root) -> list[Honors]:
    honors = []
    for group in root.select(SELECTOR_PLAYER_HONORS_GROUP):
        header = select_text(group, SELECTOR_PLAYER_HONORS_HEADER)
        leagues = group.select(SELECTOR_PLAYER_HONORS_LEAGUE)
        teams = group.select(SELECTOR_PLAYER_HONORS_TEAM)
        for league, team in zip(leagues, teams):
            if header is None:
                raise ElementNotFound(
                    selector=SELECTOR_PLAYER_HONORS_HEADER, role="player honors format"
                )
            format_text = _trim_end(header, " Medals")
            try:
                game_mode = GameMode.parse(format_text)
            except InvalidGameMode:
                raise InvalidText(text=format_text, role="player honors format") from None
            division = first_text(league)
            if division is None:
                raise EmptyText(
                    selector=SELECTOR_PLAYER_HONORS_LEAGUE, role="player honors division"
                )
            parts = division.split(" ")
            try:
                season = _parse_unsigned(parts[1] if len(parts) > 1 else "", 8)
            except ValueError:
                raise InvalidText(text=division, role="player honors season") from None
            team_name = first_text(team) or ""
            team_link = _attr(team, "href") or ""
            try:
                team_id = _parse_unsigned(team_link.rpartition("=")[2], 32)
            except ValueError:
                raise InvalidLink(link=team_link, role="player honors team") from None
            honors.append(
                Honors(
                    format=game_mode,
                    division=division.split(" ", 2)[-1],
                    season=season,
                    team=TeamRef(id=team_id, name=team_name),
                )
            )
    return honors


def _parse_classes(root) -> list[PlayerClass]:
    classes = []
    for icon in root.select(SELECTOR_CLASS):
        source = _attr(icon, "src", "data-cfsrc")
        if source is None:
            continue
        if not (source.startswith(_CLASS_ICON_PREFIX) and source.endswith(_CLASS_ICON_SUFFIX)):
            continue
        name = source[len(_CLASS_ICON_PREFIX): -len(_CLASS_ICON_SUFFIX)]
        if len(source) < len(_CLASS_ICON_PREFIX) + len(_CLASS_ICON_SUFFIX):
            continue
        try:
            classes.append(PlayerClass.parse(name))
        except ValueError:
            continue
    return classes


def _parse_since(since: str):
    cut = max(since.rfind(separator) for separator in "\n \t")
    if cut < 0:
        raise InvalidDate(date=since, role="team join date")
    tail = since[cut + 1:].strip()
    try:
        return parse_slash_date(tail)
    except ValueError:
        raise InvalidDate(date=tail, role="team join date") from None


def _parse_teams(root) -> list[TeamMembership]:
    teams = []
    for item in root.select(SELECTOR_PLAYER_TEAM_GROUP):
        link_element = item.select_one(SELECTOR_PLAYER_TEAM_LINK)
        if link_element is None:
            continue
        link = _attr(link_element, "href") or ""
        name = select_text(item, SELECTOR_PLAYER_TEAM_NAME) or ""
        league = select_text(item, SELECTOR_PLAYER_TEAM_LEAGUE)
        if league is None:
            raise ElementNotFound(selector=SELECTOR_PLAYER_TEAM_LEAGUE, role="players team league")
        since = select_last_text(item, SELECTOR_PLAYER_TEAM_SINCE)
        if since is None:
            raise ElementNotFound(selector=SELECTOR_PLAYER_TEAM_SINCE, role="players team joined")
        team_id = team_id_from_link(link)
        teams.append(
            TeamMembership(
                team=TeamRef(name=name, id=team_id),
                league=league,
                since=_parse_since(since),
            )
        )
    return teams


def parse_player(document: str) -> Player:
    """Read a player's profile page."""
    root = make_document(document)

    name_element = root.select_one(SELECTOR_PLAYER_NAME)
    if name_element is None:
        raise ElementNotFound(selector=SELECTOR_PLAYER_NAME, role="player name")
    name = first_text(name_element) or ""

    id_element = root.select_one(SELECTOR_PLAYER_ID)
    if id_element is None:
        raise ElementNotFound(selector=SELECTOR_PLAYER_ID, role="player steam id")
    href = _attr(id_element, "href") or ""
    id_text = href[len(_STEAM_ADD_PREFIX):] if href.startswith(_STEAM_ADD_PREFIX) else ""

    flag = root.select_one(SELECTOR_PLAYER_FLAG)
    country = _attr(flag, "title") if flag is not None else None

    avatar_element = root.select_one(SELECTOR_AVATAR)
    if avatar_element is None:
        raise ElementNotFound(selector=SELECTOR_AVATAR, role="player avatar")
    avatar = _attr(avatar_element, "src", "data-cfsrc") or ""

    honors = _parse_honors(root)
    favorite_classes = _parse_classes(root)
    teams = _parse_teams(root)

    try:
        steam_id = SteamID.parse(id_text)
    except ValueError:
        steam_id = SteamID()

    return Player(
        name=name,
        avatar=avatar,
        steam_id=steam_id,
        honors=honors,
        teams=teams,
        favorite_classes=favorite_classes,
        country=country,
    )