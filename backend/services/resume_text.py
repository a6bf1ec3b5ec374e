"""Flatten a resume document into plain text for keyword matching."""

from models.resume import ResumeData


def resume_to_text(resume: ResumeData) -> str:
    """Profile name, email and location, then every section title and item
    title / subtitle / description / location, space-separated in document order."""
    profile = resume.profile
    parts = [profile.full_name, profile.email, profile.location]
    for section in resume.sections:
        parts.append(section.title)
        for item in section.items:
            parts.extend([item.title, item.subtitle, item.description, item.location])
    return " ".join(p for p in parts if p)
