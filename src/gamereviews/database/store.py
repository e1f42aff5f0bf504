"""
In-memory record store and shared instance management
"""

from __future__ import annotations

import threading
from pathlib import Path

from ..config import settings
from ..logging import get_logger
from .records import AuthorRecord, GameRecord, ReviewRecord
from .seed_data import SeedData, load_seed_data

logger = get_logger(__name__)


class InMemoryDatabase:
    """Games, reviews and authors held in ordered lists.

    Every lookup is a linear scan comparing ids by string equality. Nothing
    is indexed and no uniqueness is enforced, so finders return the first
    match.
    """

    def __init__(self, seed: SeedData | None = None):
        seed = seed or SeedData()
        self.games: list[GameRecord] = list(seed.games)
        self.reviews: list[ReviewRecord] = list(seed.reviews)
        self.authors: list[AuthorRecord] = list(seed.authors)

    def list_games(self) -> list[GameRecord]:
        return self.games

    def list_reviews(self) -> list[ReviewRecord]:
        return self.reviews

    def list_authors(self) -> list[AuthorRecord]:
        return self.authors

    def find_game(self, id: str) -> GameRecord | None:
        return next((game for game in self.games if game.id == id), None)

    def find_review(self, id: str) -> ReviewRecord | None:
        return next((review for review in self.reviews if review.id == id), None)

    def find_author(self, id: str) -> AuthorRecord | None:
        return next((author for author in self.authors if author.id == id), None)

    def reviews_for_game(self, game_id: str) -> list[ReviewRecord]:
        return [r for r in self.reviews if r.game_id == game_id]

    def reviews_by_author(self, author_id: str) -> list[ReviewRecord]:
        return [r for r in self.reviews if r.author_id == author_id]

    def delete_game(self, id: str) -> list[GameRecord]:
        """Remove the game and return the games that remain.

        Reviews of the deleted game are left in place.
        """
        self.games = [g for g in self.games if g.id != id]
        return self.games


# Shared instance for the process
_database: InMemoryDatabase | None = None
_init_lock = threading.Lock()


def init_database(
    seed_path: str | Path | None = None, force_reinit: bool = False
) -> InMemoryDatabase:
    """Initialize the shared in-memory database from seed data.

    Falls back to settings.seed_data_path, then to the built-in seed.
    """
    global _database

    if _database is not None and not force_reinit and seed_path is None:
        return _database

    with _init_lock:
        if _database is not None and not force_reinit and seed_path is None:
            return _database

        path = seed_path or settings.seed_data_path
        _database = InMemoryDatabase(load_seed_data(path))
        logger.info(
            "Database initialized",
            seed_path=str(path) if path else None,
            games=len(_database.games),
            reviews=len(_database.reviews),
            authors=len(_database.authors),
        )
        return _database


def get_database() -> InMemoryDatabase:
    """Get the shared in-memory database, initializing it on first use."""
    if _database is None:
        return init_database()
    return _database


def reset_database() -> None:
    """Drop the shared database (for tests)."""
    global _database
    _database = None
