from pydantic import Field

from models.base import CamelModel
from models.schemas.match_report import MatchReport


class UserMembership(CamelModel):
    is_member: bool = False
    membership_type: str | None = "free"  # free | premium | enterprise
    expires_at: str | None = None
    # False when the service rejected the token; never sent to clients
    authenticated: bool = Field(True, exclude=True)


class AnalysisResponse(CamelModel):
    match: MatchReport = Field(default_factory=MatchReport)
    scoring_method: str = "local"  # local | ai_enhanced
    degraded: bool = False
    notice: str = ""  # user-facing message when AI analysis fell back
    use_ai: bool = Field(False, alias="useAI")


class HighlightResponse(CamelModel):
    html: str = ""


class PreviewItem(CamelModel):
    """HTML-safe fragments for one resume item."""
    id: str
    title: str = ""
    subtitle: str = ""
    date: str = ""
    location: str = ""
    description: str = ""


class PreviewSection(CamelModel):
    id: str
    type: str
    title: str = ""
    items: list[PreviewItem] = []


class ResumePreview(CamelModel):
    full_name: str = ""
    contact: list[str] = []
    sections: list[PreviewSection] = []
