"""Pydantic contracts shared by the matcher, the AI client and the API."""

from models.schemas.match_report import MatchReport

__all__ = [
    "MatchReport",
]
