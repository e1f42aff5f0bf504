"""
Game resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database import get_database
from ...logging import get_logger
from .convert import convert_record_to_game, convert_record_to_review

if TYPE_CHECKING:
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
async def resolve_games(info: strawberry.Info) -> list[Game]:
    """Resolve every game in collection order."""
    return [convert_record_to_game(g) for g in get_database().list_games()]


async def resolve_game_by_id(info: strawberry.Info, id: str) -> Game | None:
    """Resolve a game by its ID, or None when no game has that ID."""
    record = get_database().find_game(id)
    if record is None:
        logger.info("Game not found", game_id=id)
        return None

    return convert_record_to_game(record)


# Field resolvers
async def resolve_game_reviews(game: Game, info: strawberry.Info) -> list[Review]:
    """Resolve the reviews whose game_id matches this game."""
    records = get_database().reviews_for_game(str(game.id))
    logger.debug("Resolved game reviews", game_id=game.id, count=len(records))
    return [convert_record_to_review(r) for r in records]


# Mutation resolvers
async def delete_game(info: strawberry.Info, id: str) -> list[Game]:
    """
    Delete a game and return the games that remain.

    Reviews of the deleted game are not removed; they keep pointing at the
    missing game.
    """
    db = get_database()
    before = len(db.games)
    remaining = db.delete_game(id)

    if len(remaining) == before:
        logger.info("Delete requested for unknown game", game_id=id)
    else:
        logger.info(
            "Game deleted",
            game_id=id,
            orphaned_reviews=len(db.reviews_for_game(id)),
        )

    return [convert_record_to_game(g) for g in remaining]
