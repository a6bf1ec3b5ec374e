"""Curated keyword vocabularies used by the JD matcher.

A ``Vocabulary`` is an immutable configuration value: the matcher receives
one at construction, so tests can swap in small fixture vocabularies.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Hard skills: technology / tool names, in display casing
# ---------------------------------------------------------------------------
HARD_SKILLS: tuple[str, ...] = (
    # Frontend
    "React", "Vue", "Angular", "JavaScript", "TypeScript", "HTML", "CSS", "Next.js", "Redux",
    # Backend
    "Java", "Python", "Node.js", "Spring", "Django", "Flask", "Express", "Go", "C++", "C#",
    # Cloud & DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD", "Jenkins", "Terraform", "Ansible",
    # Databases
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "SQL", "NoSQL",
    # Tools & frameworks
    "Git", "REST", "GraphQL", "Microservices", "Agile", "Scrum", "Jira", "Confluence",
    # AI/ML
    "Machine Learning", "AI", "TensorFlow", "PyTorch", "Deep Learning", "NLP",
    # Other
    "API", "RESTful", "gRPC", "WebSocket", "OAuth", "JWT",
)

# ---------------------------------------------------------------------------
# Soft skills: interpersonal / process phrases
# ---------------------------------------------------------------------------
SOFT_SKILLS: tuple[str, ...] = (
    "Leadership", "Communication", "Teamwork", "Problem Solving", "Collaboration",
    "Project Management", "Mentoring", "Cross-functional", "Stakeholder", "Presentation",
)

# Capitalized phrases that are never keywords on their own
STOPWORDS: frozenset[str] = frozenset({
    "the", "and", "or", "but", "for", "with", "from", "this", "that",
    "will", "have", "been", "are", "was", "were",
})


def _normalize_entry(entry: str) -> str:
    return " ".join(entry.split())


class Vocabulary(BaseModel):
    """Hard-skill, soft-skill and stopword tables."""

    model_config = ConfigDict(frozen=True)

    hard_skills: tuple[str, ...] = HARD_SKILLS
    soft_skills: tuple[str, ...] = SOFT_SKILLS
    stopwords: frozenset[str] = STOPWORDS

    @field_validator("hard_skills", "soft_skills")
    @classmethod
    def _clean_entries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = (_normalize_entry(e) for e in v)
        return tuple(e for e in cleaned if e)

    @field_validator("stopwords")
    @classmethod
    def _lower_stopwords(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(w.strip().lower() for w in v if w.strip())

    def is_hard_skill(self, keyword: str) -> bool:
        """Exact case-insensitive membership, never substring."""
        kw = _normalize_entry(keyword).lower()
        return any(skill.lower() == kw for skill in self.hard_skills)

    def is_soft_skill(self, keyword: str) -> bool:
        kw = _normalize_entry(keyword).lower()
        return any(skill.lower() == kw for skill in self.soft_skills)


DEFAULT_VOCABULARY = Vocabulary()


def load_vocabulary(path: str | Path) -> Vocabulary:
    """Load a vocabulary from a JSON file.

    Keys are ``hard_skills``, ``soft_skills`` and ``stopwords``; any key left
    out keeps the built-in table.
    """
    vocabulary = Vocabulary.model_validate_json(Path(path).read_text(encoding="utf-8"))
    logger.info(
        "Loaded vocabulary from %s (%d hard skills, %d soft skills)",
        path, len(vocabulary.hard_skills), len(vocabulary.soft_skills),
    )
    return vocabulary


_vocabulary: Vocabulary | None = None


def get_vocabulary() -> Vocabulary:
    """Process-wide vocabulary, loaded on first use from settings."""
    global _vocabulary
    if _vocabulary is None:
        if settings.vocabulary_path:
            _vocabulary = load_vocabulary(settings.vocabulary_path)
        else:
            _vocabulary = DEFAULT_VOCABULARY
    return _vocabulary
