"""Parser for the roster transaction list."""

from __future__ import annotations

from ..enums import TransactionAction
from ..errors import ElementNotFound, EmptyText, MalformedTransaction
from ..models import TeamRef, Transaction
from .common import (
    first_text,
    make_document,
    select_last_text,
    select_text,
    steam_id_from_link,
    team_id_from_link,
)

SELECTOR_TRANSACTION_ROW = "table.table.table-condensed.table-striped tr"
SELECTOR_TRANSACTION_PLAYER_LINK = 'a[href^="players_page"][title^="Roster"]'
SELECTOR_TRANSACTION_ACTION = "td:nth-child(4) span b"
SELECTOR_TRANSACTION_TEAM_LINK = 'a[href^="team_page"]'
SELECTOR_TRANSACTION_TEAM_NAME = "td:nth-child(5)"


def parse_transactions(document: str) -> list[Transaction]:
    """Every row of the transaction table that names a player."""
    root = make_document(document)
    transactions = []
    for row in root.select(SELECTOR_TRANSACTION_ROW):
        player_link = row.select_one(SELECTOR_TRANSACTION_PLAYER_LINK)
        if player_link is None:
            continue
        name = first_text(player_link)
        if name is None:
            raise EmptyText(selector=SELECTOR_TRANSACTION_PLAYER_LINK, role="player name")
        steam_id = steam_id_from_link(str(player_link.get("href") or ""))

        action_text = select_text(row, SELECTOR_TRANSACTION_ACTION)
        if action_text is None:
            raise ElementNotFound(selector=SELECTOR_TRANSACTION_ACTION, role="transaction action")
        try:
            action = TransactionAction.parse(action_text)
        except MalformedTransaction as error:
            raise error.to_parse_error() from error

        team_link = row.select_one(SELECTOR_TRANSACTION_TEAM_LINK)
        if team_link is None:
            raise ElementNotFound(selector=SELECTOR_TRANSACTION_TEAM_LINK, role="team link")
        team_id = team_id_from_link(str(team_link.get("href") or ""))
        team_name = select_last_text(row, SELECTOR_TRANSACTION_TEAM_NAME)
        if team_name is None:
            raise EmptyText(selector=SELECTOR_TRANSACTION_TEAM_LINK, role="team link")

        transactions.append(
            Transaction(
                name=name,
                steam_id=steam_id,
                action=action,
                team=TeamRef(id=team_id, name=team_name),
            )
        )
    return transactions