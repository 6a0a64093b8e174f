"""HTTP API that serves scraped league data as JSON."""

from __future__ import annotations

import argparse
import logging
import os
import re
from typing import Awaitable, Callable, Optional

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from .client import UgcClient
from .enums import GameMode
from .errors import InvalidValueError, NotFoundError, ScrapeError
from .models import to_json_data
from .steamid import SteamID

logger = logging.getLogger(__name__)

_U32 = re.compile(r"\+?[0-9]+")

_ROUTES_HELP = """\
GET /player/{steam_id}
GET /player/{steam_id}/history
GET /teams/{format}
GET /transactions/{format}
GET /team/{id}
GET /team/{id}/roster
GET /team/{id}/matches
GET /match/{id}
GET /maps/{format}
"""


class _Malformed(Exception):
    """The request path could not be interpreted."""


class _BadPath(Exception):
    """A path parameter had the wrong type."""


def _steam_id(request: Request) -> SteamID:
    text = request.path_params["id"]
    try:
        return SteamID.parse(text)
    except (InvalidValueError, ValueError) as error:
        raise _Malformed(str(error)) from None


def _number(request: Request) -> int:
    text = request.path_params["id"]
    if not _U32.fullmatch(text) or int(text) >= 2**32:
        raise _BadPath(f"Invalid URL: Cannot parse `{text}` to a `u32`")
    return int(text)


def _game_mode(request: Request) -> GameMode:
    text = request.path_params["format"]
    try:
        return GameMode.parse(text)
    except ValueError:
        raise _Malformed(f"invalid game mode {text}") from None


Handler = Callable[[Request], Awaitable[Response]]


def _guarded(handler: Handler) -> Handler:
    async def endpoint(request: Request) -> Response:
        try:
            return await handler(request)
        except _BadPath as error:
            return PlainTextResponse(str(error), status_code=400)
        except _Malformed as error:
            logger.error("error while handling request: %s", error)
            return PlainTextResponse(str(error), status_code=422)
        except NotFoundError:
            logger.error("error while handling request: not found")
            return Response(b"", status_code=404)
        except ScrapeError as error:
            logger.error("error while handling request: %s", error)
            return PlainTextResponse(str(error), status_code=500)

    return endpoint


def create_app(client: UgcClient) -> Starlette:
    """Build the web application around a scraping client."""

    async def respond(method: Callable, *args: object) -> Response:
        result = await run_in_threadpool(method, *args)
        return JSONResponse(to_json_data(result))

    async def index(request: Request) -> Response:
        return PlainTextResponse(_ROUTES_HELP)

    async def player(request: Request) -> Response:
        steam_id = _steam_id(request)
        logger.debug("requesting player %s", steam_id.steam3())
        return await respond(client.player, steam_id)

    async def player_history(request: Request) -> Response:
        steam_id = _steam_id(request)
        logger.debug("requesting player history %s", steam_id.steam3())
        return await respond(client.player_team_history, steam_id)

    async def teams(request: Request) -> Response:
        return await respond(client.teams, _game_mode(request))

    async def transactions(request: Request) -> Response:
        return await respond(client.transactions, _game_mode(request))

    async def team(request: Request) -> Response:
        team_id = _number(request)
        logger.debug("requesting team %d", team_id)
        return await respond(client.team, team_id)

    async def team_roster(request: Request) -> Response:
        team_id = _number(request)
        logger.debug("requesting team roster %d", team_id)
        return await respond(client.team_roster_history, team_id)

    async def team_matches(request: Request) -> Response:
        team_id = _number(request)
        logger.debug("requesting team matches %d", team_id)
        return await respond(client.team_matches, team_id)

    async def match_page(request: Request) -> Response:
        match_id = _number(request)
        logger.debug("requesting match %d", match_id)
        return await respond(client.match_info, match_id)

    async def map_history(request: Request) -> Response:
        return await respond(client.map_history, _game_mode(request))

    routes = [
        Route("/", index),
        Route("/player/{id}", _guarded(player)),
        Route("/player/{id}/history", _guarded(player_history)),
        Route("/teams/{format}", _guarded(teams)),
        Route("/transactions/{format}", _guarded(transactions)),
        Route("/team/{id}", _guarded(team)),
        Route("/team/{id}/roster", _guarded(team_roster)),
        Route("/team/{id}/matches", _guarded(team_matches)),
        Route("/match/{id}", _guarded(match_page)),
        Route("/maps/{format}", _guarded(map_history)),
    ]
    return Starlette(routes=routes)


def main(argv: Optional[list[str]] = None) -> None:
    """Serve the API on localhost, on the port given by --port or $PORT."""
    import uvicorn

    parser = argparse.ArgumentParser(description="Serve league data as JSON.")
    parser.add_argument("--port", type=int, default=None, help="port to listen on")
    args = parser.parse_args(argv)

    port = args.port
    if port is None:
        env_port = os.environ.get("PORT")
        if env_port is None:
            parser.error("no port given: pass --port or set PORT")
        try:
            port = int(env_port)
        except ValueError:
            parser.error(f"invalid PORT: {env_port}")

    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "DEBUG").upper())
    with UgcClient() as client:
        app = create_app(client)
        logger.info("listening on http://127.0.0.1:%d", port)
        uvicorn.run(app, host="127.0.0.1", port=port)