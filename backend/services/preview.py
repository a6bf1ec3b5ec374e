"""HTML-safe resume preview fragments with matched keywords highlighted."""

from collections.abc import Sequence

from models.resume import ResumeData, SectionItem, SectionType
from models.responses import PreviewItem, PreviewSection, ResumePreview
from services.highlighter import escape_html, highlight_keywords

# Sections whose only highlighted field is the item description
_DESCRIPTION_ONLY = {SectionType.SUMMARY, SectionType.SKILLS}


def _escaped(value: str | None) -> str:
    return escape_html(value or "")


def _preview_item(item: SectionItem, section_type: SectionType, keywords: Sequence[str]) -> PreviewItem:
    def mark(value: str | None) -> str:
        return highlight_keywords(value or "", keywords)

    if section_type in _DESCRIPTION_ONLY:
        title, subtitle = _escaped(item.title), _escaped(item.subtitle)
    else:
        title, subtitle = mark(item.title), mark(item.subtitle)

    return PreviewItem(
        id=item.id,
        title=title,
        subtitle=subtitle,
        date=_escaped(item.date),
        location=_escaped(item.location),
        description=mark(item.description),
    )


def highlight_resume(resume: ResumeData, keywords: Sequence[str]) -> ResumePreview:
    """Build the preview fragments for a resume, highlighting keywords."""
    profile = resume.profile
    contact = [profile.phone, profile.email, profile.location, profile.website]
    sections = [
        PreviewSection(
            id=section.id,
            type=section.type.value,
            title=_escaped(section.title),
            items=[_preview_item(item, section.type, keywords) for item in section.items],
        )
        for section in resume.sections
    ]
    return ResumePreview(
        full_name=_escaped(profile.full_name),
        contact=[_escaped(c) for c in contact if c],
        sections=sections,
    )
