"""Resume document model sent by the editor."""

from enum import Enum

from pydantic import Field

from models.base import CamelModel


class SectionType(str, Enum):
    SUMMARY = "SUMMARY"
    EXPERIENCE = "EXPERIENCE"
    EDUCATION = "EDUCATION"
    SKILLS = "SKILLS"
    PROJECTS = "PROJECTS"
    CUSTOM = "CUSTOM"


class Profile(CamelModel):
    full_name: str = ""
    phone: str = ""
    email: str = ""
    location: str = ""
    linkedin: str | None = None
    website: str | None = None


class SectionItem(CamelModel):
    id: str
    title: str | None = None  # job title, degree
    subtitle: str | None = None  # company, university
    date: str | None = None
    location: str | None = None
    description: str | None = None  # bullet points or free text


class Section(CamelModel):
    """A resume section.

    For SUMMARY the first item's description is the summary text; for SKILLS
    each item's title is a category and its description the skill list.
    """
    id: str
    type: SectionType = SectionType.CUSTOM
    title: str = ""
    items: list[SectionItem] = Field(default_factory=list)


class ResumeData(CamelModel):
    profile: Profile = Field(default_factory=Profile)
    sections: list[Section] = Field(default_factory=list)
