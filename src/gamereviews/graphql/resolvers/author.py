"""
Author resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database import get_database
from ...logging import get_logger
from .convert import convert_record_to_author, convert_record_to_review

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.review import Review

logger = get_logger(__name__)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    return [convert_record_to_author(a) for a in get_database().list_authors()]


async def resolve_author_by_id(info: strawberry.Info, id: str) -> Author | None:
    record = get_database().find_author(id)
    if record is None:
        logger.info("Author not found", author_id=id)
        return None

    return convert_record_to_author(record)


async def resolve_author_reviews(author: Author, info: strawberry.Info) -> list[Review]:
    """Resolve the reviews whose author_id matches this author."""
    records = get_database().reviews_by_author(str(author.id))
    logger.debug("Resolved author reviews", author_id=author.id, count=len(records))
    return [convert_record_to_review(r) for r in records]
