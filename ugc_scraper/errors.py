"""Exceptions raised while fetching and parsing league pages."""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for everything that can go wrong while scraping."""


class RequestError(ScrapeError):
    """The HTTP request for a page failed."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Failed to request data: {cause}")


class NotFoundError(ScrapeError):
    """The requested player or team does not exist."""

    def __init__(self) -> None:
        super().__init__("Player or team doesn't exist")


class ParseError(ScrapeError):
    """A page did not have the expected structure or content."""


class ElementNotFound(ParseError):
    """An element matched by a selector was missing."""

    def __init__(self, selector: str, role: str) -> None:
        self.selector = selector
        self.role = role
        super().__init__(f"Couldn't find expected element '{selector}' for {role}")


class EmptyText(ParseError):
    """An element was present but held no text."""

    def __init__(self, selector: str, role: str) -> None:
        self.selector = selector
        self.role = role
        super().__init__(f"Element '{selector}' does contain text for {role}")


class InvalidText(ParseError):
    """An element held text that could not be interpreted."""

    def __init__(self, text: str, role: str) -> None:
        self.text = text
        self.role = role
        super().__init__(f"Invalid text for {role}: {text}")


class InvalidLink(ParseError):
    """A link did not carry the expected identifier."""

    def __init__(self, link: str, role: str) -> None:
        self.link = link
        self.role = role
        super().__init__(f"Invalid link for {role}: {link}")


class InvalidDate(ParseError):
    """A date string could not be parsed."""

    def __init__(self, date: str, role: str) -> None:
        self.date = date
        self.role = role
        super().__init__(f"Invalid date for {role}: {date}")


class InvalidValueError(ValueError):
    """A string could not be turned into the requested value."""

    _template = "Invalid value {text}"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(self._template.format(text=text))


class InvalidGameMode(InvalidValueError):
    """Unknown game mode name."""

    _template = "Invalid game mode {text}"


class InvalidRegion(InvalidValueError):
    """Unknown team region name."""

    _template = "Invalid team region: {text}"


class InvalidMembershipRole(InvalidValueError):
    """Unknown roster role name."""

    _template = "Invalid membership role {text}"


class InvalidSide(InvalidValueError):
    """Unknown match side name."""

    _template = "Invalid side {text}"


class MalformedTransaction(InvalidValueError):
    """Unknown roster transaction action."""

    _template = "Malformed transaction action {text}"

    def to_parse_error(self) -> InvalidText:
        """Express this failure as a parse error of a transaction."""
        return InvalidText(text=self.text, role="transaction")