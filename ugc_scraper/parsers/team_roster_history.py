"""Parser for a team's roster history page."""

from __future__ import annotations

from ..enums import MembershipRole
from ..errors import ElementNotFound, InvalidDate, InvalidText
from ..models import RosterHistory, TeamRosterData
from ..steamid import SteamID
from .common import make_document, parse_month_day_year, select_text

SELECTOR_ROSTER_ITEM = ".container .white-row-small .row-fluid > .col-md-12 > .clearfix"
SELECTOR_ROSTER_NAME = "h5 b"
SELECTOR_ROSTER_ID = "h5 small"
SELECTOR_ROSTER_ROLE = "div > small"
SELECTOR_ROSTER_JOINED = "span.text-success small"
SELECTOR_ROSTER_LEFT = "span.text-danger small"

SELECTOR_STEAM = 'p.muted a[href*="//steamcommunity.com/groups"]'


def _trim_start(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _parse_role(text: str) -> MembershipRole:
    try:
        return MembershipRole.parse(_trim_start(text, "Former "))
    except ValueError:
        return MembershipRole.MEMBER


def parse_team_roster_history(document: str) -> TeamRosterData:
    """Every player that has been on a team's roster, with the team's steam group."""
    root = make_document(document)

    group_link = root.select_one(SELECTOR_STEAM)
    steam_group = None
    if group_link is not None and group_link.get("href") is not None:
        steam_group = str(group_link.get("href")).replace("http://http", "http")

    history = []
    for item in root.select(SELECTOR_ROSTER_ITEM):
        name = select_text(item, SELECTOR_ROSTER_NAME) or ""
        steam_id_text = select_text(item, SELECTOR_ROSTER_ID)
        if steam_id_text is None:
            raise ElementNotFound(selector=SELECTOR_ROSTER_ID, role="member steam id")
        joined = select_text(item, SELECTOR_ROSTER_JOINED)
        if joined is None:
            raise ElementNotFound(selector=SELECTOR_ROSTER_JOINED, role="member joined date")
        left = select_text(item, SELECTOR_ROSTER_LEFT)
        role = _parse_role(select_text(item, SELECTOR_ROSTER_ROLE) or "")

        try:
            steam_id = SteamID.from_steam3(steam_id_text)
        except ValueError:
            raise InvalidText(text=steam_id_text, role="member steam id") from None
        try:
            joined_date = parse_month_day_year(joined)
            left_date = parse_month_day_year(left) if left is not None else None
        except ValueError:
            raise InvalidDate(date=steam_id_text, role="member join date") from None

        history.append(
            RosterHistory(
                name=name,
                steam_id=steam_id,
                joined=joined_date,
                left=left_date,
                role=role,
            )
        )
    return TeamRosterData(history=history, steam_group=steam_group)