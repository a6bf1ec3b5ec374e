"""JD match report: output of the keyword matcher and of the remote AI analysis."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import ConfigDict, Field, computed_field, field_serializer, field_validator

from models.base import CamelModel

STRONG_SCORE = 70
FAIR_SCORE = 50


class MatchReport(CamelModel):
    """Immutable result of matching a job description against a resume.

    ``missing_hard_skills`` / ``missing_soft_skills`` are cut from the full
    missing list before it is truncated, so a skill can appear there even when
    it fell outside the top ``missing_keywords``. ``keyword_frequency`` is a
    read-only view over a private copy of the counts.
    """

    model_config = ConfigDict(frozen=True)

    matched_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()  # by JD frequency, top 20
    missing_hard_skills: tuple[str, ...] = ()  # top 15
    missing_soft_skills: tuple[str, ...] = ()  # top 15
    match_score: int = Field(default=0, ge=0, le=100)
    keyword_frequency: Mapping[str, int] = Field(default_factory=dict, validate_default=True)

    @field_validator("match_score", mode="before")
    @classmethod
    def _clamp_score(cls, v):
        # Remote reports may send fractional scores
        if isinstance(v, float):
            v = int(v + 0.5)
        if isinstance(v, int):
            return min(100, max(0, v))
        return v

    @field_validator("keyword_frequency", mode="before")
    @classmethod
    def _none_frequency(cls, v):
        return {} if v is None else v

    @field_validator("keyword_frequency")
    @classmethod
    def _freeze_frequency(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(v))

    @field_serializer("keyword_frequency")
    def _dump_frequency(self, v: Mapping[str, int]) -> dict[str, int]:
        return dict(v)

    def __deepcopy__(self, memo=None):
        # Immutable, and mapping proxies cannot be deep-copied
        return self

    @computed_field
    @property
    def other_missing_keywords(self) -> tuple[str, ...]:
        """Missing keywords in neither skill bucket."""
        bucketed = set(self.missing_hard_skills) | set(self.missing_soft_skills)
        return tuple(kw for kw in self.missing_keywords if kw not in bucketed)

    @computed_field
    @property
    def score_band(self) -> str:
        if self.match_score >= STRONG_SCORE:
            return "strong"
        if self.match_score >= FAIR_SCORE:
            return "fair"
        return "weak"
