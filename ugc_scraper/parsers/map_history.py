"""Parser for the map list page of a game mode."""

from __future__ import annotations

import datetime
import re
from typing import Optional

from ..errors import ElementNotFound, InvalidDate, InvalidText
from ..models import (
    CurrentSeasonMap,
    CurrentSeasonMapList,
    MapHistory,
    PreviousSeasonMap,
    PreviousSeasonMapList,
)
from .common import first_text, make_document, select_text

SELECTOR_CURRENT_ROW = "table.table.table-condensed.table-responsive tbody tr"
SELECTOR_CURRENT_SEASON = (
    "div.row > div > div.white-row-small > h5:nth-child(2), "
    "div.row-fluid > div > div.white-row-small > h4:first-child+h5"
)
SELECTOR_CURRENT_WEEK = "td:nth-child(1)"
SELECTOR_CURRENT_MAP = "td:nth-child(2)"
SELECTOR_CURRENT_DATE = "td:nth-child(4) small"
SELECTOR_CURRENT_DATE_ALT = "td:nth-child(5) small"

SELECTOR_PREVIOUS = "table.table.table-condensed.table-bordered tbody tr:not(:first-child)"
SELECTOR_PREVIOUS_WEEK = "td:nth-child(1)"
SELECTOR_PREVIOUS_DATE = "td:nth-child(2)"
SELECTOR_PREVIOUS_MAP = "td:nth-child(3)"

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


def _parse_u8(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > 255:
        raise ValueError(f"not a small unsigned integer: {text!r}")
    return int(text)


def _trim_start(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _parse_date(text: str) -> datetime.date:
    """Parse a ``month/day/yy`` date of a finished season."""
    error = InvalidDate(date=text, role="previous season date")
    parts = text.split("/")
    if len(parts) < 3:
        raise error
    month_text, day_text, year_text = parts[:3]
    try:
        month = _parse_u8(month_text)
        day = _parse_u8(day_text)
    except ValueError:
        raise error from None
    if not _SIGNED.fullmatch(year_text) or not -(2**31) <= int(year_text) < 2**31:
        raise error
    try:
        return datetime.date(2000 + int(year_text), month, day)
    except ValueError:
        raise error from None


def _is_top_bar(row) -> bool:
    classes = row.get("class")
    if classes is None:
        return False
    if isinstance(classes, str):
        return classes == "top-bar"
    return list(classes) == ["top-bar"]


def _element_children(row) -> int:
    return sum(1 for child in row.children if getattr(child, "name", None) is not None)


def _current_season(root) -> int:
    text = select_text(root, SELECTOR_CURRENT_SEASON)
    if text is None:
        raise ElementNotFound(selector=SELECTOR_CURRENT_SEASON, role="current season number")
    text = _trim_start(text, "Season").strip()
    try:
        return _parse_u8(text)
    except ValueError:
        raise InvalidText(text=text, role="current season number") from None


def _current_map(row, season: int) -> CurrentSeasonMap:
    week_text = select_text(row, SELECTOR_CURRENT_WEEK)
    if week_text is None:
        raise ElementNotFound(selector=SELECTOR_CURRENT_WEEK, role="current season week number")
    try:
        week = _parse_u8(week_text)
    except ValueError:
        raise InvalidText(text=str(season), role="current season week number") from None
    map_name = select_text(row, SELECTOR_CURRENT_MAP)
    if map_name is None:
        raise ElementNotFound(selector=SELECTOR_CURRENT_MAP, role="current season map")
    date = select_text(row, SELECTOR_CURRENT_DATE)
    if date is None:
        raise ElementNotFound(selector=SELECTOR_CURRENT_MAP, role="current season map")
    na_date: Optional[str] = None
    global_date = select_text(row, SELECTOR_CURRENT_DATE_ALT)
    if global_date is not None:
        na_date, date = date, global_date
    return CurrentSeasonMap(week=week, map=map_name, date=date, na_date=na_date)


def _previous_map(row) -> Optional[PreviousSeasonMap]:
    week_text = select_text(row, SELECTOR_PREVIOUS_WEEK)
    if week_text is None:
        raise ElementNotFound(
            selector=SELECTOR_PREVIOUS_WEEK, role="previous season week number"
        )
    if week_text == "Week":
        return None
    try:
        week = _parse_u8(week_text)
    except ValueError:
        raise InvalidText(text=week_text, role="previous season week number") from None
    date_text = select_text(row, SELECTOR_PREVIOUS_DATE)
    if date_text is None:
        raise ElementNotFound(
            selector=SELECTOR_PREVIOUS_DATE, role="previous season week number"
        )
    date = _parse_date(date_text)
    map_name = select_text(row, SELECTOR_PREVIOUS_MAP) or ""
    return PreviousSeasonMap(week=week, date=date, map=map_name)


def parse_map_history(document: str) -> MapHistory:
    """Read the maps of the running season and of every finished season."""
    root = make_document(document)

    season = _current_season(root)
    current = [_current_map(row, season) for row in root.select(SELECTOR_CURRENT_ROW)]

    previous: list[PreviousSeasonMapList] = []
    open_season: Optional[PreviousSeasonMapList] = None
    for row in root.select(SELECTOR_PREVIOUS):
        if _is_top_bar(row):
            if open_season is not None:
                previous.append(open_season)
            text = _trim_start(first_text(row) or "", "Season ")
            try:
                number = _parse_u8(text)
            except ValueError:
                raise InvalidText(text=text, role="previous season number") from None
            open_season = PreviousSeasonMapList(season=number, maps=[])
        elif _element_children(row) == 3 and open_season is not None:
            week = _previous_map(row)
            if week is not None:
                open_season.maps.append(week)
    if open_season is not None:
        previous.append(open_season)

    return MapHistory(
        current=CurrentSeasonMapList(season=season, maps=current),
        previous=previous,
    )