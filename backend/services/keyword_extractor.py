"""Keyword extraction and frequency counting for resume-JD matching.

Combines the curated hard/soft skill vocabularies with a capitalized-phrase
heuristic. Presence tests, extraction and counting all go through
``keyword_pattern`` so they agree on what counts as an occurrence.
"""

import logging
import re
from functools import lru_cache

from services.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

# A keyword occurrence must not touch an ASCII letter or digit on either side.
# e.g. "go" should NOT match inside "going", "java" NOT inside "javascript"
_BOUNDARY_BEFORE = r"(?<![A-Za-z0-9])"
_BOUNDARY_AFTER = r"(?![A-Za-z0-9])"

# 1-3 consecutive capitalized words: "Python", "Project Management", "Site Reliability Engineering"
_CAPITALIZED_PHRASE = re.compile(
    rf"{_BOUNDARY_BEFORE}[A-Z][a-z]+(?:\s+[A-Z][a-z]+){{0,2}}{_BOUNDARY_AFTER}"
)

MIN_PHRASE_LENGTH = 3

_NEVER_MATCHES = re.compile(r"(?!)")


def normalize_keyword(keyword: str) -> str:
    """Lower-case a keyword and collapse internal whitespace."""
    return " ".join(keyword.split()).lower()


def keyword_body(keyword: str) -> str:
    """Regex source for a keyword: literal text, any whitespace run between words."""
    return r"\s+".join(re.escape(part) for part in keyword.split())


@lru_cache(maxsize=4096)
def keyword_pattern(keyword: str) -> re.Pattern:
    """Compiled whole-word, case-insensitive pattern for one keyword."""
    if not keyword.split():
        return _NEVER_MATCHES
    return re.compile(
        f"{_BOUNDARY_BEFORE}{keyword_body(keyword)}{_BOUNDARY_AFTER}", re.IGNORECASE
    )


def contains_keyword(text: str, keyword: str) -> bool:
    return keyword_pattern(keyword).search(text) is not None


def _vocabulary_hits(text: str, entries: tuple[str, ...]) -> list[str]:
    return [normalize_keyword(e) for e in entries if contains_keyword(text, e)]


def _capitalized_phrases(text: str, stopwords: frozenset[str]) -> list[str]:
    phrases = []
    for match in _CAPITALIZED_PHRASE.finditer(text):
        phrase = normalize_keyword(match.group())
        if phrase in stopwords or len(phrase) < MIN_PHRASE_LENGTH:
            continue
        phrases.append(phrase)
    return phrases


def extract_keywords(text: str, vocabulary: Vocabulary) -> tuple[str, ...]:
    """Extract the keyword set of a text.

    Returns a duplicate-free tuple in first-seen order: hard skills in
    vocabulary order, then soft skills, then capitalized phrases in text order.
    """
    if not text:
        return ()

    found = _vocabulary_hits(text, vocabulary.hard_skills)
    found += _vocabulary_hits(text, vocabulary.soft_skills)
    found += _capitalized_phrases(text, vocabulary.stopwords)
    return tuple(dict.fromkeys(found))


def count_frequencies(text: str, keywords: tuple[str, ...]) -> dict[str, int]:
    """Count whole-word, case-insensitive occurrences of each keyword in text."""
    return {kw: len(keyword_pattern(kw).findall(text)) for kw in keywords}
