"""Enumerations used by league data."""

from __future__ import annotations

from enum import Enum

from .errors import (
    InvalidGameMode,
    InvalidMembershipRole,
    InvalidRegion,
    InvalidSide,
    InvalidValueError,
    MalformedTransaction,
)


class GameMode(Enum):
    """A league format; the value is its canonical short name."""

    HIGHLANDER = "9v9"
    EIGHTS = "8v8"
    SIXES = "6v6"
    FOURS = "4v4"
    ULTIDUO = "2v2"
    ONES = "1v1"
    FF_FOURS = "ff4v4"
    CLASSIC = "classic"
    LEFT_4_DEAD = "l4d"
    OVERWATCH = "overwatch"

    @classmethod
    def parse(cls, text: str) -> GameMode:
        """Recognise any of the names the site uses for a format."""
        try:
            return _GAME_MODE_ALIASES[text]
        except KeyError:
            raise InvalidGameMode(text) from None

    def letter(self) -> str:
        """The suffix the site uses in format specific page names."""
        return _GAME_MODE_LETTERS[self]

    def is_tf2(self) -> bool:
        """Whether this is one of the main TF2 formats."""
        return self in _TF2_MODES

    def __str__(self) -> str:
        return self.value


_GAME_MODE_ALIASES = {
    "9v9": GameMode.HIGHLANDER,
    "8v8": GameMode.EIGHTS,
    "6v6": GameMode.SIXES,
    "4v4": GameMode.FOURS,
    "2v2": GameMode.ULTIDUO,
    "1v1": GameMode.ONES,
    "Highlander": GameMode.HIGHLANDER,
    "TF2 Highlander": GameMode.HIGHLANDER,
    "TF2-H": GameMode.HIGHLANDER,
    "ASIA TF2-H": GameMode.HIGHLANDER,
    "ASIA TF2-6": GameMode.SIXES,
    "ASIA TF2-4": GameMode.FOURS,
    "TF2 8vs8": GameMode.EIGHTS,
    "8vs8": GameMode.EIGHTS,
    "TF2 6vs6": GameMode.SIXES,
    "TF2-6": GameMode.SIXES,
    "6vs6": GameMode.SIXES,
    "TF2 4vs4": GameMode.FOURS,
    "TF2-4": GameMode.FOURS,
    "4vs4": GameMode.FOURS,
    "TF2 2vs2": GameMode.ULTIDUO,
    "2vs2": GameMode.ULTIDUO,
    "TF2 Sol 1vs1": GameMode.ONES,
    "ff4v4": GameMode.FF_FOURS,
    "FF 4vs4 OvsD": GameMode.FF_FOURS,
    "Fortress Forever 4vs4 OvsD": GameMode.FF_FOURS,
    "Team Fortress Classic ADL": GameMode.CLASSIC,
    "TeamFortressClassic": GameMode.CLASSIC,
    "classic": GameMode.CLASSIC,
    "Left For Dead": GameMode.LEFT_4_DEAD,
    "Left 4 Dead 2 Versus League": GameMode.LEFT_4_DEAD,
    "l4d": GameMode.LEFT_4_DEAD,
    "Team Fortress 2 Soldier 1 vs 1 Tournament": GameMode.ONES,
    "Overwatch": GameMode.OVERWATCH,
    "overwatch": GameMode.OVERWATCH,
}

_GAME_MODE_LETTERS = {
    GameMode.HIGHLANDER: "h",
    GameMode.EIGHTS: "8",
    GameMode.SIXES: "6",
    GameMode.FOURS: "4",
    GameMode.ULTIDUO: "2",
    GameMode.ONES: "1",
    GameMode.FF_FOURS: "ff4",
    GameMode.CLASSIC: "classic",
    GameMode.LEFT_4_DEAD: "l4d",
    GameMode.OVERWATCH: "overwatch",
}

_TF2_MODES = frozenset(
    {GameMode.HIGHLANDER, GameMode.EIGHTS, GameMode.SIXES, GameMode.FOURS, GameMode.ULTIDUO}
)


class Region(Enum):
    """The region a team plays in."""

    EUROPE = "europe"
    NORTH_AMERICA = "north-america"
    SOUTH_AMERICA = "south-america"
    ASIA = "asia"
    AUSTRALIA = "australia"

    @classmethod
    def parse(cls, text: str) -> Region:
        """Recognise a region name, ignoring surrounding ``*``, ``(`` and ``)``."""
        stripped = text.strip("*()")
        try:
            return _REGION_ALIASES[stripped]
        except KeyError:
            raise InvalidRegion(stripped) from None


_REGION_ALIASES = {
    "Euro": Region.EUROPE,
    "Europe": Region.EUROPE,
    "European": Region.EUROPE,
    "EU": Region.EUROPE,
    "E.U.": Region.EUROPE,
    "Asia": Region.ASIA,
    "ASIA": Region.ASIA,
    "NA": Region.NORTH_AMERICA,
    "N.A.": Region.NORTH_AMERICA,
    "North America": Region.NORTH_AMERICA,
    "N.America": Region.NORTH_AMERICA,
    "N. America": Region.NORTH_AMERICA,
    "N.Amer": Region.NORTH_AMERICA,
    "S.Amer": Region.SOUTH_AMERICA,
    "South American": Region.SOUTH_AMERICA,
    "South America": Region.SOUTH_AMERICA,
    "S.America": Region.SOUTH_AMERICA,
    "S. America": Region.SOUTH_AMERICA,
    "SA": Region.SOUTH_AMERICA,
    "S.A.": Region.SOUTH_AMERICA,
    "AUS": Region.AUSTRALIA,
    "AUS/NZ": Region.AUSTRALIA,
    "AUS-NZ": Region.AUSTRALIA,
}


class PlayerClass(Enum):
    """A TF2 class."""

    SCOUT = "scout"
    SOLDIER = "soldier"
    PYRO = "pyro"
    DEMOMAN = "demoman"
    ENGINEER = "engineer"
    HEAVY = "heavy"
    MEDIC = "medic"
    SNIPER = "sniper"
    SPY = "spy"

    @classmethod
    def parse(cls, text: str) -> PlayerClass:
        """Recognise a lower case class name."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidValueError(text) from None


class MembershipRole(Enum):
    """A player's role in a team roster."""

    LEADER = "leader"
    MEMBER = "member"

    @classmethod
    def parse(cls, text: str) -> MembershipRole:
        """Recognise a role as shown on roster pages."""
        try:
            return _ROLE_ALIASES[text.strip()]
        except KeyError:
            raise InvalidMembershipRole(text) from None


_ROLE_ALIASES = {
    "leader": MembershipRole.LEADER,
    "member": MembershipRole.MEMBER,
    "-": MembershipRole.MEMBER,
    "Leader": MembershipRole.LEADER,
    "Member": MembershipRole.MEMBER,
}


class Side(Enum):
    """Which side a team played a match on."""

    HOME = "home"
    VISITING = "visiting"

    @classmethod
    def parse(cls, text: str) -> Side:
        """Recognise ``home`` or ``visiting``."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidSide(text) from None


class TransactionAction(Enum):
    """What a roster transaction did."""

    JOINED = "Joined"
    LEFT = "Left"

    @classmethod
    def parse(cls, text: str) -> TransactionAction:
        """Recognise ``Joined`` or ``Left``."""
        try:
            return cls(text)
        except ValueError:
            raise MalformedTransaction(text) from None