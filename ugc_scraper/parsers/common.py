"""Helpers shared by the page parsers."""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterator
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from ..errors import InvalidLink
from ..steamid import SteamID

Element = Union[BeautifulSoup, Tag]

_NON_TEXT = (Comment, Declaration, Doctype, ProcessingInstruction)
_UNSIGNED = re.compile(r"\+?[0-9]+")
_SLASH_DATE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})")
_MONTH_DAY_YEAR = re.compile(r"([A-Za-z]{3}) ([0-9]{1,2}), ([0-9]{4})")
_WHITESPACE = re.compile(r"[\n\t ]+")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def make_document(html: str) -> BeautifulSoup:
    """Parse an HTML page into a queryable document."""
    return BeautifulSoup(html, "html.parser")


def _text_nodes(element: Element) -> Iterator[str]:
    for node in element.descendants:
        if isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT):
            yield str(node)


def _first_non_empty(element: Element) -> str | None:
    return next((text.strip() for text in _text_nodes(element) if text.strip()), None)


def first_text(element: Element) -> str | None:
    """The first non-blank text inside an element, stripped."""
    return _first_non_empty(element)


def select_text(element: Element, selector: str) -> str | None:
    """First non-blank text of the first match of ``selector``."""
    match = element.select_one(selector)
    if match is None:
        return None
    return _first_non_empty(match)


def select_text_empty(element: Element, selector: str) -> str | None:
    """Like :func:`select_text`, but an existing element without text gives ``""``."""
    match = element.select_one(selector)
    if match is None:
        return None
    return _first_non_empty(match) or ""


def select_last_text(element: Element, selector: str) -> str | None:
    """Last text node of the first match of ``selector``, stripped."""
    match = element.select_one(selector)
    if match is None:
        return None
    last = None
    for last in _text_nodes(match):
        pass
    return None if last is None else last.strip()


def _parse_unsigned(text: str, bits: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _id_from_link(link: str, bits: int, role: str) -> int:
    _, separator, tail = link.rpartition("=")
    if not separator:
        raise InvalidLink(link=link, role=role)
    try:
        return _parse_unsigned(tail, bits)
    except ValueError:
        raise InvalidLink(link=link, role=role) from None


def team_id_from_link(link: str) -> int:
    """The team id after the last ``=`` of a link."""
    return _id_from_link(link, 32, "team id")


def match_id_from_link(link: str) -> int:
    """The match id after the last ``=`` of a link."""
    return _id_from_link(link, 32, "match id")


def steam_id_from_link(link: str) -> SteamID:
    """The 64-bit steam id after the last ``=`` of a link."""
    return SteamID(_id_from_link(link, 64, "user id"))


def parse_slash_date(text: str) -> datetime.date:
    """Parse ``month/day/year`` such as ``5/13/2009``; raises ValueError."""
    match = _SLASH_DATE.fullmatch(text)
    if not match:
        raise ValueError(f"invalid date: {text!r}")
    month, day, year = (int(part) for part in match.groups())
    return datetime.date(year, month, day)


def parse_month_day_year(text: str) -> datetime.date:
    """Parse ``Mon day, year`` such as ``May 13, 2009``; raises ValueError."""
    match = _MONTH_DAY_YEAR.fullmatch(text)
    if not match or match.group(1) not in _MONTHS:
        raise ValueError(f"invalid date: {text!r}")
    month = _MONTHS.index(match.group(1)) + 1
    return datetime.date(int(match.group(3)), month, int(match.group(2)))


def collapse_whitespace(text: str) -> str:
    """Replace each run of spaces, tabs and newlines with one space."""
    return _WHITESPACE.sub(" ", text)