"""Parser for the per-format team lookup page."""

from __future__ import annotations

from ..errors import ElementNotFound, EmptyText
from ..models import TeamRef
from .common import first_text, make_document, team_id_from_link

SELECTOR_SELECT = 'select[name="clan_select"]'
SELECTOR_OPTION = 'option[value^="team_page"]'


def parse_team_lookup(document: str) -> list[TeamRef]:
    """All teams offered in the lookup drop-down."""
    root = make_document(document)
    select = root.select_one(SELECTOR_SELECT)
    if select is None:
        raise ElementNotFound(selector=SELECTOR_SELECT, role="team list")
    teams = []
    for option in select.select(SELECTOR_OPTION):
        link = option.get("value")
        if link is None:
            raise EmptyText(selector=SELECTOR_OPTION, role="team link")
        text = first_text(option)
        if text is None:
            raise EmptyText(selector=SELECTOR_OPTION, role="team name")
        _, separator, name = text.partition("-")
        if not separator:
            name = ""
        teams.append(TeamRef(id=team_id_from_link(str(link)), name=name.strip()))
    return teams