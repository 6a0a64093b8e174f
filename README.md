# ugc-scraper

Read player, team, match and season data from the UGC league website.
The site has no API, so its pages are fetched and parsed into plain
Python dataclasses. A small HTTP server is included that serves the same
data as JSON.

## Installation

```
pip install ugc-scraper
```

## Using the client

```python
from ugc_scraper.client import UgcClient
from ugc_scraper.steamid import SteamID

with UgcClient() as client:
    player = client.player(SteamID(76561198024494988))
    print(player.name)
    for membership in player.teams:
        print(f"  {membership.team.name} playing {membership.league} since {membership.since}")
```

`UgcClient` creates its own `httpx.Client` and closes it on `close()` or
at the end of a `with` block. An existing `httpx.Client` can be passed
instead (`UgcClient(http_client)`); it is then left open.

The client offers:

| Method | Returns |
| --- | --- |
| `player(steam_id)` | `Player`: profile, honors, current teams and favourite classes |
| `player_team_history(steam_id)` | list of `MembershipHistory`, with join and leave dates |
| `team(team_id)` | `Team`: details, members, season records and name changes |
| `team_roster_history(team_id)` | `TeamRosterData`: everyone who was ever on the roster |
| `team_matches(team_id)` | `TeamMatches`: the team's matches, grouped by season |
| `previous_seasons()` | list of `Seasons`: past seasons for each game mode |
| `teams(format)` | list of `TeamRef` registered in a game mode |
| `match_info(match_id)` | `MatchInfo`: details and result of a single match |
| `transactions(format)` | list of `Transaction`: roster joins and leaves for a game mode |
| `map_history(format)` | `MapHistory`: maps of the current and previous seasons |

Game modes are members of `ugc_scraper.enums.GameMode`. `GameMode.parse`
accepts the names the site uses, such as `"9v9"`, `"6v6"`, `"4v4"`,
`"2v2"`, `"Highlander"` or `"TF2 6vs6"`:

```python
from ugc_scraper.client import UgcClient
from ugc_scraper.enums import GameMode

with UgcClient() as client:
    for team in client.teams(GameMode.parse("6v6")):
        print(team.id, team.name)
```

Steam ids are `ugc_scraper.steamid.SteamID` values. `SteamID.parse`
accepts a 64-bit number, a `STEAM_X:Y:Z` id or a steam3 id such as
`"[U:1:64228260]"`; `steam3()` renders the steam3 form.

A few helpers work on parsed data:

* `MapHistory.weeks(current_season_year)` yields a `Week` with a date for
  every week of every season, giving the running season's dates the year
  passed in.
* `TeamSeasonMatch.match_info(team, format)` rebuilds a `MatchInfo` for a
  row of a team's match list.
* `ugc_scraper.models.to_json_data` turns any parsed object into plain
  JSON-ready data.

The page parsers can also be used on HTML you already have, for example
`ugc_scraper.parsers.team.parse_team(html)` or
`ugc_scraper.parsers.player.parse_player(html)`.

### Errors

The client methods raise subclasses of `ScrapeError` from
`ugc_scraper.errors`:

* `NotFoundError` when the player or team does not exist (the site
  answers with a redirect; only redirects between match pages are
  followed),
* `RequestError` when the site could not be reached or answered with an
  error status; a failed request is retried once after half a second,
* `ParseError` and its subclasses `ElementNotFound`, `EmptyText`,
  `InvalidText`, `InvalidLink` and `InvalidDate` when a page did not have
  the expected shape.

The `parse` class methods of the enums and of `SteamID` raise
`InvalidValueError` (a `ValueError`) or one of its subclasses for
unknown text.

## The API server

```
PORT=8080 ugc-api-server
```

The server listens on `127.0.0.1` at the port given by `--port` or by the
`PORT` environment variable. The log level is taken from `LOG_LEVEL`
(default `DEBUG`). It answers with JSON:

| Route | Data |
| --- | --- |
| `/player/{steam_id}` | player profile |
| `/player/{steam_id}/history` | player team history |
| `/team/{id}` | team details |
| `/team/{id}/roster` | team roster history |
| `/team/{id}/matches` | team matches |
| `/match/{id}` | match details |
| `/teams/{format}` | teams in a game mode |
| `/transactions/{format}` | roster transactions in a game mode |
| `/maps/{format}` | map history of a game mode |

`/` lists these routes as plain text. `{format}` is a game mode such as
`9v9` or `6v6`. An invalid steam id or game mode is answered with status
422, a non-numeric team or match id with 400, a player or team that does
not exist with 404, and any other scraping failure with 500.

The application can also be built in code with
`ugc_scraper.server.create_app(client)` and run under any ASGI server.

## What it does not do

The package only fetches and parses pages on request. It does not store
anything: there is no database, archive or cache of scraped data, and no
command other than `ugc-api-server`.