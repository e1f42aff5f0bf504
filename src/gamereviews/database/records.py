"""Pydantic models for the records held by the in-memory store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    # Seed files may write ids as bare numbers; ids are always compared as strings
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str


class GameRecord(Record):
    title: str
    platform: list[str]


class ReviewRecord(Record):
    rating: int
    content: str
    game_id: str
    author_id: str


class AuthorRecord(Record):
    name: str
    verified: bool
