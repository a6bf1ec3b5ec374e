"""HTTP client for the remote AI-enhanced analysis and membership service.

Endpoints (relative to ``settings.ai_service_url``):
    GET  /user/membership   -> UserMembership
    POST /jd/analyze-ai     -> MatchReport (camelCase, keywordFrequency as object)
"""

import logging

import httpx
from pydantic import ValidationError

from config import settings
from models.resume import ResumeData
from models.responses import UserMembership
from models.schemas.match_report import MatchReport

logger = logging.getLogger(__name__)


class AIAnalysisError(Exception):
    """Remote AI analysis failed; callers fall back to the local report."""

    user_message = "AI analysis failed. Using basic matching instead."
    upgrade_required = False


class AIUnauthorizedError(AIAnalysisError):
    user_message = "Please log in to use AI Enhanced analysis. Using basic matching instead."


class AIForbiddenError(AIAnalysisError):
    user_message = "AI Enhanced feature requires premium membership. Please upgrade to continue."
    upgrade_required = True


class AIPaymentRequiredError(AIAnalysisError):
    user_message = "Your plan does not include AI Enhanced analysis. Please upgrade to premium to continue."
    upgrade_required = True


class AIServiceError(AIAnalysisError):
    """Any other remote failure: bad status, transport error, malformed body."""


_STATUS_ERRORS: dict[int, tuple[type[AIAnalysisError], str]] = {
    401: (AIUnauthorizedError, "Unauthorized: Please login"),
    402: (AIPaymentRequiredError, "Payment Required: Please upgrade to premium membership"),
    403: (AIForbiddenError, "Forbidden: AI Enhanced feature requires membership"),
}


def create_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.ai_service_url,
        timeout=settings.ai_service_timeout,
    )


def _auth_headers(token: str | None) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token else {}


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"API error: {response.status_code}"


async def fetch_membership(client: httpx.AsyncClient, token: str | None = None) -> UserMembership:
    """Current user's membership; anonymous or unreachable means a free user.

    A rejected token (401) is reported with ``authenticated=False``.
    """
    try:
        response = await client.get("/user/membership", headers=_auth_headers(token))
    except httpx.HTTPError as e:
        logger.warning("Membership lookup failed: %s", e)
        return UserMembership()

    if response.status_code == 401:
        return UserMembership(authenticated=False)
    if response.is_error:
        logger.warning("Membership lookup failed: %s", _error_detail(response))
        return UserMembership()

    try:
        return UserMembership.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.warning("Malformed membership response: %s", e)
        return UserMembership()


async def analyze_with_ai(
    client: httpx.AsyncClient,
    jd_text: str,
    resume: ResumeData,
    token: str | None = None,
) -> MatchReport:
    """Request the AI-enhanced match report. Raises an AIAnalysisError subclass on failure."""
    payload = {"jdText": jd_text, "resumeData": resume.model_dump(mode="json", by_alias=True)}
    try:
        response = await client.post("/jd/analyze-ai", json=payload, headers=_auth_headers(token))
    except httpx.HTTPError as e:
        raise AIServiceError(f"AI service unreachable: {e}") from e

    if response.is_error:
        error_cls, detail = _STATUS_ERRORS.get(
            response.status_code, (AIServiceError, _error_detail(response))
        )
        raise error_cls(detail)

    try:
        return MatchReport.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise AIServiceError(f"Malformed AI analysis response: {e}") from e
