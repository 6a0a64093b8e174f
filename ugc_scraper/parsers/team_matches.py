"""Parser for a team's match history page."""

from __future__ import annotations

import re
from typing import Optional

from ..enums import GameMode, Side
from ..errors import ElementNotFound, EmptyText, InvalidSide, InvalidText
from ..models import (
    ByeWeek,
    MatchResult,
    PendingMatch,
    PlayedMatch,
    TeamMatches,
    TeamRef,
    TeamSeason,
    TeamSeasonMatch,
    UnknownMatch,
)
from .common import (
    first_text,
    make_document,
    match_id_from_link,
    select_text,
    team_id_from_link,
)

SELECTOR_SEASON_TITLE = ".container table.table.table-condensed.table-striped thead h4"
SELECTOR_SEASON_SEASON = ".container table.table.table-condensed.table-striped thead h4 b"
SELECTOR_SEASON_MATCHES = (
    ".container table.table.table-condensed.table-striped tbody:nth-child(3n)"
)
SELECTOR_SEASON_MATCH = "tr:not(:last-child)"
SELECTOR_SEASON_DIVISION = "td:nth-child(1) small"
SELECTOR_SEASON_WEEK = "td:nth-child(2) small"
SELECTOR_SEASON_DATE = "td:nth-child(3) small"
SELECTOR_SEASON_SIDE = "td:nth-child(4) small"
SELECTOR_SEASON_OPPONENT = "td:nth-child(6) a"
SELECTOR_SEASON_MAP = "td:nth-child(7)"
SELECTOR_SEASON_SCORES = "td:nth-child(8)"
SELECTOR_SEASON_POINTS = "td:nth-child(9) small"
SELECTOR_SEASON_POINTS_OPPONENTS = "td:nth-child(10) small"
SELECTOR_SEASON_MATCH_PAGE = 'td a[href^="matchpage"]'

SELECTOR_TEAM_NAME = "div.col-md-9 > h2 > b"
SELECTOR_TEAM_LINK = 'h2 > span.pull-right > a[href^="team_page.cfm"]'

_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _parse_unsigned(text: str, bits: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    if not _FLOAT.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def _trim_start(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _trim_end(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _required(row, selector: str, role: str) -> str:
    text = select_text(row, selector)
    if text is None:
        raise ElementNotFound(selector=selector, role=role)
    return text


def _points(text: Optional[str], role: str) -> Optional[float]:
    if text is None:
        return None
    try:
        return _parse_float(text)
    except ValueError:
        raise InvalidText(text=text, role=role) from None


def _parse_match(row) -> TeamSeasonMatch:
    division = _required(row, SELECTOR_SEASON_DIVISION, "match division")
    week_text = _required(row, SELECTOR_SEASON_WEEK, "match week")
    try:
        week = _parse_unsigned(week_text, 8)
    except ValueError:
        raise InvalidText(text=week_text, role="match week") from None
    date = _required(row, SELECTOR_SEASON_DATE, "match date")
    side_text = _required(row, SELECTOR_SEASON_SIDE, "match side")
    opponent_link = row.select_one(SELECTOR_SEASON_OPPONENT)
    map_name = _required(row, SELECTOR_SEASON_MAP, "match map")
    scores = _trim_end(
        _trim_start(_required(row, SELECTOR_SEASON_SCORES, "match scores"), "("), ")"
    )
    points_text = select_text(row, SELECTOR_SEASON_POINTS)
    points_opponent_text = select_text(row, SELECTOR_SEASON_POINTS_OPPONENTS)

    match_id = None
    page_link = row.select_one(SELECTOR_SEASON_MATCH_PAGE)
    if page_link is not None:
        try:
            match_id = match_id_from_link(str(page_link.get("href") or ""))
        except InvalidText:
            match_id = None
        except Exception:
            match_id = None

    points = _points(points_text, "match points")
    points_opponent = _points(points_opponent_text, "match points opponent")

    score_text, separator, score_opponent_text = scores.partition("-")
    if not separator:
        raise InvalidText(text=scores, role="match scores")
    try:
        score = _parse_unsigned(score_text.strip(), 8)
    except ValueError:
        score = 0
    try:
        score_opponent = _parse_unsigned(score_opponent_text.strip(), 8)
    except ValueError:
        score_opponent = 0

    opponent = None
    if opponent_link is not None:
        opponent = TeamRef(
            name=first_text(opponent_link) or "",
            id=team_id_from_link(str(opponent_link.get("href") or "")),
        )

    result: MatchResult
    if opponent is not None and match_id is not None and points is not None and (
        points_opponent is not None
    ):
        result = PlayedMatch(
            id=match_id,
            opponent=opponent,
            score=score,
            score_opponent=score_opponent,
            match_points=points,
            match_points_opponent=points_opponent,
        )
    elif opponent is not None and match_id is not None and points is None and (
        points_opponent is None
    ):
        result = PendingMatch(
            id=match_id, opponent=opponent, score=score, score_opponent=score_opponent
        )
    elif opponent is not None and match_id is None:
        result = UnknownMatch(opponent=opponent, score=score, score_opponent=score_opponent)
    else:
        result = ByeWeek()

    try:
        side = Side.parse(side_text)
    except InvalidSide as error:
        raise InvalidText(text=error.text, role="match side") from None

    return TeamSeasonMatch(
        week=week,
        date=date,
        side=side,
        map=map_name,
        division=division,
        result=result,
    )


def _parse_format(title) -> GameMode:
    text = first_text(title)
    if text is None:
        raise EmptyText(selector=SELECTOR_SEASON_TITLE, role="season title")
    for part in text.split(" "):
        try:
            return GameMode.parse(part)
        except ValueError:
            continue
    raise InvalidText(text=text, role="season format")


def _parse_season_number(element) -> int:
    text = first_text(element)
    if text is None:
        raise EmptyText(selector=SELECTOR_SEASON_SEASON, role="season title")
    try:
        return _parse_unsigned(_trim_start(text, "Season "), 32)
    except ValueError:
        raise InvalidText(text=text, role="season title") from None


def parse_team_matches(document: str) -> TeamMatches:
    """Read a team's matches, grouped by season."""
    root = make_document(document)

    seasons = []
    for title, season_element, matches in zip(
        root.select(SELECTOR_SEASON_TITLE),
        root.select(SELECTOR_SEASON_SEASON),
        root.select(SELECTOR_SEASON_MATCHES),
    ):
        game_mode = _parse_format(title)
        season = _parse_season_number(season_element)
        games = [_parse_match(row) for row in matches.select(SELECTOR_SEASON_MATCH)]
        seasons.append(TeamSeason(season=season, matches=games, format=game_mode))

    team_id = None
    team_link = root.select_one(SELECTOR_TEAM_LINK)
    if team_link is not None:
        try:
            team_id = team_id_from_link(str(team_link.get("href") or ""))
        except Exception:
            team_id = None
    if team_id is None:
        raise ElementNotFound(selector=SELECTOR_TEAM_LINK, role="match team link")

    team_name = select_text(root, SELECTOR_TEAM_NAME) or ""
    return TeamMatches(team=TeamRef(id=team_id, name=team_name), seasons=seasons)