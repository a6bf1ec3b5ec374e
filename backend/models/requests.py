from pydantic import Field

from config import settings
from models.base import CamelModel
from models.resume import ResumeData

# Every keyword becomes its own compiled pattern when highlighting
MAX_KEYWORDS = 200


class MatchRequest(CamelModel):
    jd_text: str = Field(..., max_length=settings.max_jd_length, description="Job description text")
    resume_data: ResumeData


class QuickMatchRequest(CamelModel):
    jd_text: str = Field(..., max_length=settings.max_jd_length, description="Job description text")
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class AnalyzeRequest(CamelModel):
    jd_text: str = Field(..., max_length=settings.max_jd_length)
    resume_data: ResumeData
    use_ai: bool = Field(False, alias="useAI")


class HighlightRequest(CamelModel):
    text: str = Field(..., max_length=50000)
    keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)


class PreviewRequest(CamelModel):
    resume_data: ResumeData
    keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)
