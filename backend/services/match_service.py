"""JD match orchestration: local keyword report plus optional AI analysis.

Flow:
1. Flatten the resume and run the local keyword matcher (always)
2. If AI is requested: require a login, check membership, then call the
   remote analysis once
3. On any remote failure, keep the local report and explain why
"""

import logging

import httpx

from models.resume import ResumeData
from models.responses import AnalysisResponse
from services import ai_client, jd_matcher
from services.ai_client import AIAnalysisError, AIForbiddenError, AIUnauthorizedError
from services.resume_text import resume_to_text

logger = logging.getLogger(__name__)


async def analyze(
    jd_text: str,
    resume: ResumeData,
    client: httpx.AsyncClient,
    use_ai: bool = False,
    token: str | None = None,
) -> AnalysisResponse:
    """Score a resume against a job description, AI-enhanced when allowed."""
    local_report = jd_matcher.analyze_jd_match(jd_text, resume_to_text(resume))

    if not use_ai or not jd_text.strip():
        return AnalysisResponse(match=local_report, use_ai=use_ai)

    membership = await ai_client.fetch_membership(client, token) if token else None
    if membership is None or not membership.authenticated:
        logger.info("AI analysis requested without a valid login, using local matching")
        return AnalysisResponse(
            match=local_report,
            notice=AIUnauthorizedError.user_message,
            use_ai=use_ai,
        )
    if not membership.is_member:
        logger.info("AI analysis requested by non-member, using local matching")
        return AnalysisResponse(
            match=local_report,
            notice=AIForbiddenError.user_message,
            use_ai=False,
        )

    try:
        ai_report = await ai_client.analyze_with_ai(client, jd_text, resume, token)
    except AIAnalysisError as e:
        logger.warning("AI analysis unavailable, using local matching: %s", e)
        return AnalysisResponse(
            match=local_report,
            degraded=True,
            notice=e.user_message,
            use_ai=not e.upgrade_required,
        )

    return AnalysisResponse(match=ai_report, scoring_method="ai_enhanced", use_ai=True)
