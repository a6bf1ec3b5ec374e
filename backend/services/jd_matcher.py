"""Job-description keyword matcher.

Pipeline:
1. Extract the JD keyword set (vocabulary + capitalized phrases)
2. Count each keyword's frequency in the JD
3. Split keywords into matched / missing against the resume text
4. Bucket missing keywords into hard / soft skills
5. Rank by JD frequency and truncate
"""

import logging

from models.schemas.match_report import MatchReport
from services.keyword_extractor import contains_keyword, count_frequencies, extract_keywords
from services.vocabulary import Vocabulary, get_vocabulary

logger = logging.getLogger(__name__)

MAX_MISSING_KEYWORDS = 20
MAX_MISSING_SKILLS = 15


def _percent(part: int, total: int) -> int:
    """part/total as a 0-100 integer, halves rounded up."""
    if total == 0:
        return 0
    return (200 * part + total) // (2 * total)


class JDMatcher:
    """Matches JD keywords against resume text using a fixed vocabulary."""

    def __init__(
        self,
        vocabulary: Vocabulary,
        max_missing_keywords: int = MAX_MISSING_KEYWORDS,
        max_missing_skills: int = MAX_MISSING_SKILLS,
    ):
        self.vocabulary = vocabulary
        self.max_missing_keywords = max_missing_keywords
        self.max_missing_skills = max_missing_skills

    def extract(self, text: str) -> tuple[str, ...]:
        return extract_keywords(text, self.vocabulary)

    def match(self, source_text: str, target_text: str) -> MatchReport:
        """Compare the keywords of source_text (the JD) against target_text (the resume)."""
        if not source_text or not source_text.strip():
            return MatchReport()

        source_keywords = self.extract(source_text)
        frequency = count_frequencies(source_text, source_keywords)

        matched: list[str] = []
        missing: list[str] = []
        missing_hard: list[str] = []
        missing_soft: list[str] = []

        for kw in source_keywords:
            if contains_keyword(target_text, kw):
                matched.append(kw)
            elif frequency[kw] > 0:
                missing.append(kw)
                if self.vocabulary.is_hard_skill(kw):
                    missing_hard.append(kw)
                elif self.vocabulary.is_soft_skill(kw):
                    missing_soft.append(kw)
            # zero-frequency keywords are neither matched nor missing

        def by_frequency(keywords: list[str]) -> list[str]:
            # sorted() is stable: ties keep first-seen order
            return sorted(keywords, key=lambda kw: -frequency[kw])

        report = MatchReport(
            matched_keywords=tuple(matched),
            missing_keywords=tuple(by_frequency(missing)[: self.max_missing_keywords]),
            missing_hard_skills=tuple(by_frequency(missing_hard)[: self.max_missing_skills]),
            missing_soft_skills=tuple(by_frequency(missing_soft)[: self.max_missing_skills]),
            match_score=_percent(len(matched), len(source_keywords)),
            keyword_frequency=frequency,
        )
        logger.debug(
            "JD match: %d keywords, %d matched, %d missing, score %d",
            len(source_keywords), len(matched), len(missing), report.match_score,
        )
        return report


_matcher: JDMatcher | None = None


def get_matcher() -> JDMatcher:
    """Process-wide matcher over the configured vocabulary."""
    global _matcher
    if _matcher is None:
        _matcher = JDMatcher(get_vocabulary())
    return _matcher


def analyze_jd_match(jd_text: str, resume_text: str) -> MatchReport:
    """Match a job description against flattened resume text."""
    return get_matcher().match(jd_text, resume_text)
