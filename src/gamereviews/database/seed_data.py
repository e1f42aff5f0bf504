"""
Seed data for the in-memory store.

The built-in data set is used unless a YAML seed file is configured via
settings.seed_data_path. A seed file has three top-level lists:

    games:
      - {id: "1", title: "Elden Ring", platform: [PS5, PC]}
    authors:
      - {id: "1", name: mario, verified: true}
    reviews:
      - {id: "1", rating: 9, content: "...", game_id: "1", author_id: "1"}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..logging import get_logger
from .records import AuthorRecord, GameRecord, ReviewRecord

logger = get_logger(__name__)


class SeedDataError(Exception):
    """Raised when seed data cannot be read or does not match the record models."""


@dataclass
class SeedData:
    games: list[GameRecord] = field(default_factory=list)
    reviews: list[ReviewRecord] = field(default_factory=list)
    authors: list[AuthorRecord] = field(default_factory=list)


DEFAULT_GAMES: list[dict[str, Any]] = [
    {"id": "1", "title": "Zelda, Tears of the Kingdom", "platform": ["Switch"]},
    {"id": "2", "title": "Final Fantasy 7 Remake", "platform": ["PS5", "Xbox"]},
    {"id": "3", "title": "Elden Ring", "platform": ["PS5", "Xbox", "PC"]},
    {"id": "4", "title": "Mario Kart", "platform": ["Switch"]},
    {"id": "5", "title": "Pokemon Scarlet", "platform": ["PS5", "Xbox", "PC"]},
]

DEFAULT_AUTHORS: list[dict[str, Any]] = [
    {"id": "1", "name": "mario", "verified": True},
    {"id": "2", "name": "yoshi", "verified": False},
    {"id": "3", "name": "peach", "verified": True},
]

DEFAULT_REVIEWS: list[dict[str, Any]] = [
    {"id": "1", "rating": 9, "content": "lorem ipsum", "author_id": "1", "game_id": "2"},
    {"id": "2", "rating": 10, "content": "lorem ipsum", "author_id": "2", "game_id": "1"},
    {"id": "3", "rating": 7, "content": "lorem ipsum", "author_id": "3", "game_id": "3"},
    {"id": "4", "rating": 5, "content": "lorem ipsum", "author_id": "2", "game_id": "4"},
    {"id": "5", "rating": 8, "content": "lorem ipsum", "author_id": "2", "game_id": "5"},
    {"id": "6", "rating": 7, "content": "lorem ipsum", "author_id": "1", "game_id": "2"},
    {"id": "7", "rating": 10, "content": "lorem ipsum", "author_id": "3", "game_id": "1"},
]


def _record_list(data: dict[str, Any], key: str) -> list[Any]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise SeedDataError(f"Seed data '{key}' must be a list, got {type(items).__name__}")
    return items


def build_seed_data(data: dict[str, Any]) -> SeedData:
    """Validate raw record dicts into a SeedData bundle."""
    games = _record_list(data, "games")
    reviews = _record_list(data, "reviews")
    authors = _record_list(data, "authors")

    try:
        return SeedData(
            games=[GameRecord.model_validate(g) for g in games],
            reviews=[ReviewRecord.model_validate(r) for r in reviews],
            authors=[AuthorRecord.model_validate(a) for a in authors],
        )
    except ValidationError as e:
        raise SeedDataError(f"Invalid seed data: {e}") from e


def default_seed_data() -> SeedData:
    return build_seed_data(
        {"games": DEFAULT_GAMES, "reviews": DEFAULT_REVIEWS, "authors": DEFAULT_AUTHORS}
    )


def load_seed_file(path: str | Path) -> SeedData:
    """Load seed records from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed data file not found: {path}") from e
    except OSError as e:
        raise SeedDataError(f"Seed data file cannot be read: {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SeedDataError(f"Seed data file is not UTF-8 text: {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SeedDataError(f"Seed data file is not valid YAML: {path}: {e}") from e

    if not isinstance(data, dict):
        raise SeedDataError(f"Seed data file must contain a mapping: {path}")

    seed = build_seed_data(data)
    logger.info(
        "Loaded seed data file",
        path=str(path),
        games=len(seed.games),
        reviews=len(seed.reviews),
        authors=len(seed.authors),
    )
    return seed


def load_seed_data(path: str | Path | None = None) -> SeedData:
    """Load the seed file when a path is given, otherwise the built-in data set."""
    if path:
        return load_seed_file(path)
    return default_seed_data()
