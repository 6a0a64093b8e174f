"""Parser for the past seasons listed in the site's menu."""

from __future__ import annotations

from ..errors import EmptyText
from ..models import Season, Seasons
from .common import first_text, make_document, select_text

SELECTOR_MENU = ".sub-menu"
SELECTOR_NAME = ".mega-menu-sub-title"
SELECTOR_SEASON_LINK = 'ul[id$="seasons"] a[href^="rankings_"]'


def _trim_end(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _trim_start(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def parse_seasons(document: str) -> list[Seasons]:
    """All past seasons per game mode from the front page."""
    root = make_document(document)
    result = []
    for menu in root.select(SELECTOR_MENU):
        if menu.select_one(SELECTOR_SEASON_LINK) is None or menu.select_one(SELECTOR_NAME) is None:
            continue
        name = select_text(menu, SELECTOR_NAME)
        if name is None:
            raise EmptyText(selector=SELECTOR_NAME, role="game mode name")
        seasons = []
        for link in menu.select(SELECTOR_SEASON_LINK):
            text = first_text(link)
            if text is None:
                raise EmptyText(selector=SELECTOR_SEASON_LINK, role="season name")
            for suffix in (" Final Standings", " Final Rank", " Final Ranks"):
                text = _trim_end(text, suffix)
            href = link.get("href")
            if href is None:
                raise EmptyText(selector=SELECTOR_SEASON_LINK, role="season link")
            season_id = _trim_end(_trim_start(str(href), "rankings_"), ".cfm")
            seasons.append(Season(id=season_id, name=text))
        result.append(Seasons(mode=_trim_end(name, " Menu"), seasons=seasons))
    return result