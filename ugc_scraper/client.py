"""Client that fetches and parses league pages."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, TypeVar

import httpx

from .enums import GameMode
from .errors import NotFoundError, RequestError
from .models import (
    MapHistory,
    MatchInfo,
    MembershipHistory,
    Player,
    Seasons,
    Team,
    TeamMatches,
    TeamRef,
    TeamRosterData,
    Transaction,
)
from .parsers.map_history import parse_map_history
from .parsers.match_page import parse_match_page
from .parsers.player import parse_player
from .parsers.player_details import parse_player_details
from .parsers.seasons import parse_seasons
from .parsers.team import parse_team
from .parsers.team_lookup import parse_team_lookup
from .parsers.team_matches import parse_team_matches
from .parsers.team_roster_history import parse_team_roster_history
from .parsers.transactions import parse_transactions
from .steamid import SteamID

logger = logging.getLogger(__name__)

BASE_URL = "https://www.ugcleague.com"
RETRY_DELAY = 0.5
MAX_REDIRECTS = 10

T = TypeVar("T")


class UgcClient:
    """Access league data by scraping the website."""

    def __init__(self, http_client: Optional[httpx.Client] = None) -> None:
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

    def _fetch(self, url: str) -> str:
        try:
            response = self._http.get(url, follow_redirects=False)
            redirects = 0
            # match pages of different modes redirect to each other
            while (
                response.is_redirect
                and response.next_request is not None
                and "matchpage_" in response.next_request.url.path
            ):
                redirects += 1
                if redirects > MAX_REDIRECTS:
                    raise RequestError("too many redirects")
                response = self._http.send(response.next_request, follow_redirects=False)
            if response.status_code == 302:
                raise NotFoundError()
            response.raise_for_status()
            return response.text
        except httpx.HTTPError as error:
            raise RequestError(error) from error

    def _request(self, url: str) -> str:
        try:
            return self._fetch(url)
        except RequestError as error:
            logger.warning("failed to send request to %s, retrying: %s", url, error)
            time.sleep(RETRY_DELAY)
            return self._fetch(url)

    def _get(self, path: str, parse: Callable[[str], T]) -> T:
        return parse(self._request(f"{BASE_URL}{path}"))

    def player(self, steam_id: SteamID) -> Player:
        """Retrieve player information."""
        return self._get(f"/players_page.cfm?player_id={int(steam_id)}", parse_player)

    def player_team_history(self, steam_id: SteamID) -> list[MembershipHistory]:
        """Retrieve the team membership history of a player."""
        return self._get(
            f"/players_page_details.cfm?player_id={int(steam_id)}", parse_player_details
        )

    def team(self, team_id: int) -> Team:
        """Retrieve team information."""
        return self._get(f"/team_page.cfm?clan_id={team_id}", parse_team)

    def team_roster_history(self, team_id: int) -> TeamRosterData:
        """Retrieve a team's roster history."""
        return self._get(
            f"/team_page_rosterhistory.cfm?clan_id={team_id}", parse_team_roster_history
        )

    def team_matches(self, team_id: int) -> TeamMatches:
        """Retrieve a team's match history."""
        return self._get(f"/team_page_matches.cfm?clan_id={team_id}", parse_team_matches)

    def previous_seasons(self) -> list[Seasons]:
        """All historical seasons by game mode."""
        return parse_seasons(self._request(BASE_URL))

    def teams(self, format: GameMode) -> list[TeamRef]:
        """All teams of a game mode."""
        return self._get(f"/team_lookup_tf2{format.letter()}.cfm", parse_team_lookup)

    def match_info(self, match_id: int) -> MatchInfo:
        """Retrieve a match page."""
        return self._get(f"/matchpage_tf2h.cfm?mid={match_id}", parse_match_page)

    def transactions(self, format: GameMode) -> list[Transaction]:
        """All roster transactions of a game mode."""
        return self._get(f"/rostertransactions_tf2{format.letter()}_all.cfm", parse_transactions)

    def map_history(self, format: GameMode) -> MapHistory:
        """The map lists of a game mode."""
        return self._get(f"/maplist_tf2{format.letter()}.cfm", parse_map_history)

    def close(self) -> None:
        """Release the HTTP connection pool if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> UgcClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()