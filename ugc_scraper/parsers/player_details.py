"""Parser for a player's team membership history page."""

from __future__ import annotations

from ..errors import ElementNotFound, EmptyText, InvalidDate
from ..models import MembershipHistory, TeamRef
from .common import first_text, make_document, parse_slash_date, select_text, team_id_from_link

SELECTOR_TEAM_FORMAT = ".container .white-row-small thead h4"
SELECTOR_TEAM_GROUP = ".container .white-row-small tbody"
TEAM_ROW = "tr:not(:first-child)"
SELECTOR_TEAM_LINK = "td:nth-child(3) a"
SELECTOR_TEAM_DIVISION = "td:nth-child(3) small"
SELECTOR_TEAM_JOINED = "td:nth-child(5) span"
SELECTOR_TEAM_LEFT = "td:nth-child(6) span"


def parse_player_details(document: str) -> list[MembershipHistory]:
    """Every team a player has been on, grouped by format in page order."""
    root = make_document(document)
    history = []
    formats = root.select(SELECTOR_TEAM_FORMAT)
    groups = root.select(SELECTOR_TEAM_GROUP)
    for format_element, group in zip(formats, groups):
        for row in group.select(TEAM_ROW):
            format_text = first_text(format_element)
            if format_text is None:
                raise EmptyText(selector=SELECTOR_TEAM_FORMAT, role="team format")
            link_element = row.select_one(SELECTOR_TEAM_LINK)
            if link_element is None:
                raise ElementNotFound(selector=SELECTOR_TEAM_LINK, role="team link")
            link = str(link_element.get("href") or "")
            name = select_text(row, SELECTOR_TEAM_LINK)
            if name is None:
                raise ElementNotFound(selector=SELECTOR_TEAM_LINK, role="team link")
            division = select_text(row, SELECTOR_TEAM_DIVISION)
            if division is None:
                raise ElementNotFound(selector=SELECTOR_TEAM_DIVISION, role="team division")
            joined = select_text(row, SELECTOR_TEAM_JOINED)
            if joined is None:
                raise ElementNotFound(selector=SELECTOR_TEAM_JOINED, role="team join date")
            left = select_text(row, SELECTOR_TEAM_LEFT) or ""

            team_id = team_id_from_link(link)
            try:
                joined_date = parse_slash_date(joined)
            except ValueError:
                raise InvalidDate(date=joined, role="team join date") from None
            try:
                left_date = parse_slash_date(left)
            except ValueError:
                left_date = None

            history.append(
                MembershipHistory(
                    format=format_text,
                    joined=joined_date,
                    left=left_date,
                    team=TeamRef(name=name, id=team_id),
                    division=division,
                )
            )
    return history