import httpx
from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_ai_client, get_bearer_token
from config import settings
from models.requests import (
    AnalyzeRequest,
    HighlightRequest,
    MatchRequest,
    PreviewRequest,
    QuickMatchRequest,
)
from models.responses import AnalysisResponse, HighlightResponse, ResumePreview, UserMembership
from models.schemas.match_report import MatchReport
from services import ai_client, jd_matcher, match_service
from services.highlighter import highlight_keywords
from services.preview import highlight_resume
from services.resume_text import resume_to_text
from services.vocabulary import get_vocabulary

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health():
    vocabulary = get_vocabulary()
    return {
        "status": "ok",
        "vocabulary": {
            "hardSkills": len(vocabulary.hard_skills),
            "softSkills": len(vocabulary.soft_skills),
        },
    }


@router.post("/jd/match", response_model=MatchReport)
@limiter.limit(settings.rate_limit)
async def match(request: Request, body: MatchRequest):
    return jd_matcher.analyze_jd_match(body.jd_text, resume_to_text(body.resume_data))


@router.post("/jd/match/quick", response_model=MatchReport)
@limiter.limit(settings.rate_limit)
async def match_quick(request: Request, body: QuickMatchRequest):
    return jd_matcher.analyze_jd_match(body.jd_text, body.resume_text)


@router.post("/jd/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    body: AnalyzeRequest,
    client: httpx.AsyncClient = Depends(get_ai_client),
    token: str | None = Depends(get_bearer_token),
):
    return await match_service.analyze(
        body.jd_text, body.resume_data, client, use_ai=body.use_ai, token=token
    )


@router.post("/jd/highlight", response_model=HighlightResponse)
@limiter.limit(settings.rate_limit)
async def highlight(request: Request, body: HighlightRequest):
    return HighlightResponse(html=highlight_keywords(body.text, body.keywords))


@router.post("/jd/preview", response_model=ResumePreview)
@limiter.limit(settings.rate_limit)
async def preview(request: Request, body: PreviewRequest):
    return highlight_resume(body.resume_data, body.keywords)


@router.get("/user/membership", response_model=UserMembership)
async def membership(
    client: httpx.AsyncClient = Depends(get_ai_client),
    token: str | None = Depends(get_bearer_token),
):
    return await ai_client.fetch_membership(client, token)
