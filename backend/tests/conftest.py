"""Shared test configuration and pytest markers."""

import os

import pytest

# Must be set before the app modules read settings
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from services.vocabulary import Vocabulary  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the HTTP app end to end"
    )


@pytest.fixture
def small_vocabulary() -> Vocabulary:
    return Vocabulary(
        hard_skills=("Python", "Go", "C++", "Node.js", "Machine Learning"),
        soft_skills=("Communication", "Problem Solving"),
    )


@pytest.fixture
def sample_resume():
    from models.resume import ResumeData

    return ResumeData.model_validate({
        "profile": {
            "fullName": "John Smith",
            "phone": "+1 (555) 123-4567",
            "email": "john.smith@example.com",
            "location": "San Francisco, CA",
        },
        "sections": [
            {
                "id": "summary",
                "type": "SUMMARY",
                "title": "PROFESSIONAL SUMMARY",
                "items": [{"id": "sum-1", "description": "Engineer building React apps & APIs."}],
            },
            {
                "id": "skills",
                "type": "SKILLS",
                "title": "SKILLS",
                "items": [{"id": "sk-1", "title": "Back-end", "description": "Python, Go, Node.js"}],
            },
            {
                "id": "exp",
                "type": "EXPERIENCE",
                "title": "PROFESSIONAL EXPERIENCE",
                "items": [{
                    "id": "exp-1",
                    "title": "Senior Python Engineer",
                    "subtitle": "Google",
                    "date": "Jan 2023 - Present",
                    "location": "Mountain View, CA",
                    "description": "Led Communication with stakeholders.\nShipped Docker services.",
                }],
            },
        ],
    })
