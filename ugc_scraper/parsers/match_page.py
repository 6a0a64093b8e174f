"""Parser for a single match page."""

from __future__ import annotations

import re

from ..enums import GameMode
from ..errors import ElementNotFound, EmptyText, InvalidText
from ..models import MatchInfo, TeamRef
from .common import first_text, make_document, select_last_text, select_text, team_id_from_link

SELECTOR_MATCH_FORMAT = "h3.page-header > strong.styleColor"
SELECTOR_MATCH_COMMENT_AUTHOR = ".row-fluid .col-md-12 span.text-success"
SELECTOR_MATCH_COMMENT = ".row-fluid .col-md-12 > .text-center > p"
SELECTOR_MATCH_TEAM_LINK = 'a[href^="team_page"]:not(.btn-large)'
SELECTOR_MATCH_RESULT_TEAM = (
    ".table.table-condensed.table-bordered tr:nth-child(2) td:nth-child(1)"
)
SELECTOR_MATCH_RESULT_SCORE = (
    ".table.table-condensed.table-bordered tr:nth-child(2) td:nth-child(2)"
)
SELECTOR_MATCH_MAP = "h4.text-success.text-center > b"
SELECTOR_MATCH_WEEK = "p.muted.text-center.nomargin > small > b:nth-child(1)"
SELECTOR_MATCH_DATE = "p.muted.text-center.nomargin > small > b:nth-child(2)"

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u8(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > 255:
        raise ValueError(f"not a small unsigned integer: {text!r}")
    return int(text)


def _parse_format(text: str) -> GameMode:
    try:
        return GameMode.parse(text)
    except ValueError:
        pass
    for part in text.split(" "):
        try:
            return GameMode.parse(part)
        except ValueError:
            continue
    raise InvalidText(text=text, role="match format")


def _required(root, selector: str, role: str) -> str:
    text = select_text(root, selector)
    if text is None:
        raise ElementNotFound(selector=selector, role=role)
    return text


def _nth(elements: list, index: int, selector: str, role: str):
    if index >= len(elements):
        raise ElementNotFound(selector=selector, role=role)
    return elements[index]


def _score(element, empty_role: str, invalid_role: str) -> int:
    text = first_text(element)
    if text is None:
        raise EmptyText(selector=SELECTOR_MATCH_RESULT_SCORE, role=empty_role)
    try:
        return _parse_u8(text)
    except ValueError:
        raise InvalidText(text="dont have this", role=invalid_role) from None


def parse_match_page(document: str) -> MatchInfo:
    """Read the teams, score, map and schedule of a match."""
    root = make_document(document)

    author = select_text(root, SELECTOR_MATCH_COMMENT_AUTHOR)
    comment = select_last_text(root, SELECTOR_MATCH_COMMENT)

    team_links = root.select(SELECTOR_MATCH_TEAM_LINK, limit=2)
    home_link = _nth(team_links, 0, SELECTOR_MATCH_TEAM_LINK, "home team link")
    away_link = _nth(team_links, 1, SELECTOR_MATCH_TEAM_LINK, "away team link")
    home_id = team_id_from_link(str(home_link.get("href") or ""))
    away_id = team_id_from_link(str(away_link.get("href") or ""))

    game_mode = _parse_format(_required(root, SELECTOR_MATCH_FORMAT, "away team map"))
    map_name = _required(root, SELECTOR_MATCH_MAP, "away team map")

    week_text = _required(root, SELECTOR_MATCH_WEEK, "away team week")
    try:
        week = _parse_u8(week_text)
    except ValueError:
        raise InvalidText(text=week_text, role="match week") from None

    date = _required(root, SELECTOR_MATCH_DATE, "away team week")

    names = root.select(SELECTOR_MATCH_RESULT_TEAM, limit=2)
    home_name = first_text(_nth(names, 0, SELECTOR_MATCH_RESULT_TEAM, "home team link")) or ""
    away_name = first_text(_nth(names, 1, SELECTOR_MATCH_RESULT_TEAM, "away team link")) or ""

    scores = root.select(SELECTOR_MATCH_RESULT_SCORE, limit=2)
    score_home = _score(
        _nth(scores, 0, SELECTOR_MATCH_RESULT_SCORE, "home team score"),
        "home team score",
        "away team score",
    )
    score_away = _score(
        _nth(scores, 1, SELECTOR_MATCH_RESULT_SCORE, "away team link"),
        "away team name",
        "home team score",
    )

    return MatchInfo(
        comment_author=author,
        comment=comment,
        score_home=score_home,
        score_away=score_away,
        team_home=TeamRef(name=home_name, id=home_id),
        team_away=TeamRef(name=away_name, id=away_id),
        week=week,
        map=map_name,
        default_date=date,
        format=game_mode,
    )