"""Steam account identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidValueError

_MAX_VALUE = 2**64 - 1
_ACCOUNT_MASK = 0xFFFFFFFF
_INSTANCE_MASK = 0xFFFFF
_DESKTOP_INSTANCE = 1
_CLAN_CHAT_FLAG = (_INSTANCE_MASK + 1) >> 1
_LOBBY_FLAG = (_INSTANCE_MASK + 1) >> 2

_TYPE_INDIVIDUAL = 1
_TYPE_ANON_GAME_SERVER = 4
_TYPE_CHAT = 8

_TYPE_LETTERS = {
    0: "I",
    1: "U",
    2: "M",
    3: "G",
    4: "A",
    5: "P",
    6: "C",
    7: "g",
    8: "T",
    10: "a",
}
_LETTER_TYPES = {letter: kind for kind, letter in _TYPE_LETTERS.items()}
_LETTER_TYPES["c"] = _TYPE_CHAT
_LETTER_TYPES["L"] = _TYPE_CHAT

_DECIMAL = re.compile(r"\+?[0-9]+")
_STEAM2 = re.compile(r"STEAM_([0-4]):([01]):([0-9]+)")
_STEAM3 = re.compile(r"\[([A-Za-z]):([0-4]):([0-9]+)(?::([0-9]+))?\]")


def _compose(account_id: int, instance: int, account_type: int, universe: int) -> int:
    if account_id > _ACCOUNT_MASK or instance > _INSTANCE_MASK:
        raise ValueError("steam id component out of range")
    return (universe << 56) | (account_type << 52) | (instance << 32) | account_id


@dataclass(frozen=True, order=True)
class SteamID:
    """A 64-bit Steam account identifier."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("steam id must be an integer")
        if not 0 <= self.value <= _MAX_VALUE:
            raise ValueError(f"steam id out of range: {self.value}")

    @classmethod
    def parse(cls, text: str) -> SteamID:
        """Parse a 64-bit decimal id, a steam2 id or a steam3 id."""
        if _DECIMAL.fullmatch(text):
            number = int(text)
            if number <= _MAX_VALUE:
                return cls(number)
            raise InvalidValueError(text)
        match = _STEAM2.fullmatch(text)
        if match:
            universe = int(match.group(1)) or 1
            account_id = int(match.group(3)) * 2 + int(match.group(2))
            try:
                return cls(_compose(account_id, _DESKTOP_INSTANCE, _TYPE_INDIVIDUAL, universe))
            except ValueError:
                raise InvalidValueError(text) from None
        return cls.from_steam3(text)

    @classmethod
    def from_steam3(cls, text: str) -> SteamID:
        """Parse an id written as ``[U:1:12345]``."""
        match = _STEAM3.fullmatch(text)
        if not match or match.group(1) not in _LETTER_TYPES:
            raise InvalidValueError(text)
        letter = match.group(1)
        account_type = _LETTER_TYPES[letter]
        universe = int(match.group(2))
        account_id = int(match.group(3))
        if match.group(4) is not None:
            instance = int(match.group(4))
        elif letter == "U":
            instance = _DESKTOP_INSTANCE
        else:
            instance = 0
        if letter == "c":
            instance |= _CLAN_CHAT_FLAG
        elif letter == "L":
            instance |= _LOBBY_FLAG
        try:
            return cls(_compose(account_id, instance, account_type, universe))
        except ValueError:
            raise InvalidValueError(text) from None

    def steam3(self) -> str:
        """Render the id as ``[U:1:12345]``."""
        account_id = self.value & _ACCOUNT_MASK
        instance = (self.value >> 32) & _INSTANCE_MASK
        account_type = (self.value >> 52) & 0xF
        universe = self.value >> 56
        letter = _TYPE_LETTERS.get(account_type, "i")
        if account_type == _TYPE_CHAT:
            if instance & _CLAN_CHAT_FLAG:
                letter = "c"
            elif instance & _LOBBY_FLAG:
                letter = "L"
        if account_type == _TYPE_ANON_GAME_SERVER:
            return f"[{letter}:{universe}:{account_id}:{instance}]"
        return f"[{letter}:{universe}:{account_id}]"

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)