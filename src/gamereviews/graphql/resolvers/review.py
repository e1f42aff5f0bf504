"""
Review resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database import get_database
from ...logging import get_logger
from .convert import convert_record_to_author, convert_record_to_game, convert_record_to_review

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
async def resolve_reviews(info: strawberry.Info) -> list[Review]:
    return [convert_record_to_review(r) for r in get_database().list_reviews()]


async def resolve_review_by_id(info: strawberry.Info, id: str) -> Review | None:
    record = get_database().find_review(id)
    if record is None:
        logger.info("Review not found", review_id=id)
        return None

    return convert_record_to_review(record)


# Field resolvers
async def resolve_review_game(review: Review, info: strawberry.Info) -> Game | None:
    """
    Resolve the game a review refers to.

    Returns None for an orphaned review (its game was deleted); the schema
    declares the field non-null, so the engine reports that as an error.
    """
    record = get_database().find_game(review.game_id)
    if record is None:
        logger.info("Review refers to a missing game", review_id=review.id, game_id=review.game_id)
        return None

    return convert_record_to_game(record)


async def resolve_review_author(review: Review, info: strawberry.Info) -> Author | None:
    record = get_database().find_author(review.author_id)
    if record is None:
        logger.info(
            "Review refers to a missing author", review_id=review.id, author_id=review.author_id
        )
        return None

    return convert_record_to_author(record)
