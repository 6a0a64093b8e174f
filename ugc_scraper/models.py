"""Data records produced by the page parsers."""

from __future__ import annotations

import dataclasses
import datetime
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from .enums import GameMode, MembershipRole, PlayerClass, Region, Side, TransactionAction
from .steamid import SteamID

_WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_CURRENT_DATE = re.compile(r"([A-Za-z]{3}), ([A-Za-z]{3}) ([0-9]{1,2}) ([0-9]{4})")


@dataclass
class TeamRef:
    """A team by name and id."""

    name: str
    id: int


@dataclass
class Honors:
    """A medal a player won with a team."""

    format: GameMode
    division: str
    season: int
    team: TeamRef


@dataclass
class TeamMembership:
    """A team a player currently plays for."""

    team: TeamRef
    league: str
    since: datetime.date


@dataclass
class Player:
    """A player's profile page."""

    name: str
    avatar: str
    steam_id: SteamID
    honors: list[Honors]
    teams: list[TeamMembership]
    favorite_classes: list[PlayerClass]
    country: Optional[str]


@dataclass
class MembershipHistory:
    """A past or present team membership of a player."""

    format: str
    team: TeamRef
    division: str
    joined: datetime.date
    left: Optional[datetime.date]


@dataclass
class NameChange:
    """A change of a team's tag and name."""

    from_tag: str
    from_name: str = field(metadata={"json": "from"})
    to_tag: str = ""
    to_name: str = field(default="", metadata={"json": "to"})
    date: Optional[datetime.date] = None


@dataclass
class Membership:
    """A current roster member of a team."""

    name: str
    steam_id: SteamID
    role: MembershipRole
    since: datetime.datetime


@dataclass
class Record:
    """A team's result in one season."""

    season: int
    division: str
    wins: int
    losses: int


@dataclass
class Team:
    """A team's page."""

    name: str
    tag: str
    image: Optional[str]
    format: GameMode
    region: Optional[Region]
    timezone: Optional[str]
    steam_group: Optional[str]
    division: str
    description: str
    titles: list[str]
    members: list[Membership]
    results: list[Record]
    name_changes: list[NameChange]


@dataclass
class RosterHistory:
    """A player's stay on a team's roster."""

    name: str
    steam_id: SteamID
    joined: datetime.date
    left: Optional[datetime.date]
    role: MembershipRole


@dataclass
class TeamRosterData:
    """A team's roster history page."""

    steam_group: Optional[str]
    history: list[RosterHistory]


class MatchResult:
    """The outcome of a scheduled match."""

    state: ClassVar[str] = ""

    def match_id(self) -> Optional[int]:
        """The id of the match page, if there is one."""
        return None

    def opponents(self) -> Optional[TeamRef]:
        """The opposing team, if there is one."""
        return None


@dataclass
class PlayedMatch(MatchResult):
    """A match that has been played and scored."""

    state: ClassVar[str] = "played"

    id: int
    opponent: TeamRef
    score: int
    score_opponent: int
    match_points: float
    match_points_opponent: float

    def match_id(self) -> Optional[int]:
        return self.id

    def opponents(self) -> Optional[TeamRef]:
        return self.opponent


@dataclass
class PendingMatch(MatchResult):
    """A match with a page but without match points yet."""

    state: ClassVar[str] = "pending"

    id: int
    opponent: TeamRef
    score: int
    score_opponent: int

    def match_id(self) -> Optional[int]:
        return self.id

    def opponents(self) -> Optional[TeamRef]:
        return self.opponent


@dataclass
class ByeWeek(MatchResult):
    """A week without an opponent."""

    state: ClassVar[str] = "bye_week"


@dataclass
class UnknownMatch(MatchResult):
    """A match against a known opponent without a match page."""

    state: ClassVar[str] = "unknown"

    opponent: TeamRef
    score: int
    score_opponent: int

    def opponents(self) -> Optional[TeamRef]:
        return self.opponent


@dataclass
class MatchInfo:
    """A match page."""

    comment: Optional[str]
    comment_author: Optional[str]
    team_home: TeamRef
    team_away: TeamRef
    score_home: int
    score_away: int
    map: str
    week: int
    format: GameMode
    default_date: str


@dataclass
class TeamSeasonMatch:
    """One row of a team's match list."""

    division: str
    week: int
    date: str
    side: Side
    result: MatchResult
    map: str

    def match_info(self, team: TeamRef, format: GameMode) -> Optional[MatchInfo]:
        """Reconstruct the match from this team's point of view."""
        result = self.result
        opponent = result.opponents()
        if opponent is None:
            return None
        score = result.score  # type: ignore[attr-defined]
        score_opponent = result.score_opponent  # type: ignore[attr-defined]
        if self.side == Side.HOME:
            home, away, score_home, score_away = team, opponent, score, score_opponent
        else:
            home, away, score_home, score_away = opponent, team, score_opponent, score
        return MatchInfo(
            comment=None,
            comment_author=None,
            team_home=dataclasses.replace(home),
            team_away=dataclasses.replace(away),
            score_home=score_home,
            score_away=score_away,
            map=self.map,
            week=self.week,
            format=format,
            default_date=self.date,
        )


@dataclass
class TeamSeason:
    """A team's matches in one season."""

    season: int
    format: GameMode
    matches: list[TeamSeasonMatch]


@dataclass
class TeamMatches:
    """A team's match history page."""

    team: TeamRef
    seasons: list[TeamSeason]


@dataclass
class Season:
    """A past season with the id used in its rankings page."""

    id: str
    name: str


@dataclass
class Seasons:
    """All past seasons of one game mode."""

    mode: str
    seasons: list[Season]


@dataclass
class Transaction:
    """A player joining or leaving a team."""

    name: str
    steam_id: SteamID
    action: TransactionAction
    team: TeamRef


@dataclass
class Week:
    """The map played in one week of a season."""

    season: int
    week: int
    map: str
    date: datetime.date


@dataclass
class CurrentSeasonMap:
    """A week of the running season."""

    week: int
    map: str
    date: str
    na_date: Optional[str]


@dataclass
class PreviousSeasonMap:
    """A week of a finished season."""

    week: int
    map: str
    date: datetime.date


@dataclass
class CurrentSeasonMapList:
    """The map list of the running season."""

    season: int
    maps: list[CurrentSeasonMap]


@dataclass
class PreviousSeasonMapList:
    """The map list of a finished season."""

    season: int
    maps: list[PreviousSeasonMap]


def _parse_current_date(text: str) -> datetime.date:
    match = _CURRENT_DATE.fullmatch(text)
    if not match:
        raise ValueError(f"invalid date: {text!r}")
    weekday, month, day, year = match.groups()
    if weekday.lower() not in _WEEKDAYS or month not in _MONTHS:
        raise ValueError(f"invalid date: {text!r}")
    result = datetime.date(int(year), _MONTHS.index(month) + 1, int(day))
    if result.weekday() != _WEEKDAYS.index(weekday.lower()):
        raise ValueError(f"weekday does not match date: {text!r}")
    return result


@dataclass
class MapHistory:
    """The map lists of the running and the finished seasons."""

    current: CurrentSeasonMapList
    previous: list[PreviousSeasonMapList]

    def weeks(self, current_season_year: int) -> Iterator[Week]:
        """Every week with its date; the running season's dates get the given year.

        Raises ValueError when a running season date cannot be parsed.
        """
        for current in self.current.maps:
            yield Week(
                season=self.current.season,
                week=current.week,
                map=current.map,
                date=_parse_current_date(f"{current.date} {current_season_year}"),
            )
        for season in self.previous:
            for previous in season.maps:
                yield Week(
                    season=season.season,
                    week=previous.week,
                    map=previous.map,
                    date=previous.date,
                )


def _iso8601(moment: datetime.datetime) -> str:
    offset = moment.utcoffset() or datetime.timedelta(0)
    sign = "-" if moment.year < 0 else "+"
    text = (
        f"{sign}{moment.year:06d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond * 1000:09d}"
    )
    if offset == datetime.timedelta(0):
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    offset_sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{offset_sign}{hours:02d}:{mins:02d}"


def to_json_data(value: Any) -> Any:
    """Convert a record into plain JSON-compatible data."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, SteamID):
        return str(value)
    if isinstance(value, datetime.datetime):
        return _iso8601(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        data: dict[str, Any] = {}
        if isinstance(value, MatchResult):
            data["state"] = value.state
        for item in dataclasses.fields(value):
            key = item.metadata.get("json", item.name)
            data[key] = to_json_data(getattr(value, item.name))
        return data
    if isinstance(value, (list, tuple)):
        return [to_json_data(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_json_data(item) for key, item in value.items()}
    return value