"""Tests for local + AI-enhanced match orchestration."""

import httpx
import pytest

from services import match_service
from services.ai_client import AIForbiddenError, AIServiceError, AIUnauthorizedError
from services.jd_matcher import analyze_jd_match
from services.resume_text import resume_to_text

JD = "Python, Kubernetes and Docker. Strong Communication required."

AI_REPORT = {
    "matchedKeywords": ["python", "docker", "communication", "kubernetes"],
    "missingKeywords": [],
    "missingHardSkills": [],
    "missingSoftSkills": [],
    "matchScore": 100,
    "keywordFrequency": {"python": 1},
}


def make_client(
    member: bool = True, analyze_status: int = 200, membership_status: int = 200
) -> tuple[httpx.AsyncClient, list[str]]:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        if request.url.path.endswith("/user/membership"):
            if membership_status != 200:
                return httpx.Response(membership_status)
            return httpx.Response(200, json={"isMember": member})
        if analyze_status != 200:
            return httpx.Response(analyze_status)
        return httpx.Response(200, json=AI_REPORT)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://ai.test/api")
    return client, calls


@pytest.mark.asyncio
async def test_local_only_when_ai_not_requested(sample_resume):
    client, calls = make_client()
    async with client:
        result = await match_service.analyze(JD, sample_resume, client, use_ai=False)
        assert calls == []

    assert result.scoring_method == "local"
    assert result.match == analyze_jd_match(JD, resume_to_text(sample_resume))
    assert "python" in result.match.matched_keywords
    assert "kubernetes" in result.match.missing_hard_skills


@pytest.mark.asyncio
async def test_ai_report_used_for_members(sample_resume):
    client, calls = make_client()
    async with client:
        result = await match_service.analyze(JD, sample_resume, client, use_ai=True, token="t")

    assert result.scoring_method == "ai_enhanced"
    assert result.match.match_score == 100
    assert result.use_ai is True
    assert not result.degraded


@pytest.mark.asyncio
async def test_anonymous_user_asked_to_log_in(sample_resume):
    client, calls = make_client(member=False)
    async with client:
        result = await match_service.analyze(JD, sample_resume, client, use_ai=True)
        assert calls == []

    assert result.scoring_method == "local"
    assert result.use_ai is True
    assert result.notice == AIUnauthorizedError.user_message
    assert "python" in result.match.matched_keywords


@pytest.mark.asyncio
async def test_rejected_token_asked_to_log_in(sample_resume):
    client, calls = make_client(membership_status=401)
    async with client:
        result = await match_service.analyze(JD, sample_resume, client, use_ai=True, token="expired")
        assert not any(path.endswith("/jd/analyze-ai") for path in calls)

    assert result.use_ai is True
    assert result.notice == AIUnauthorizedError.user_message


@pytest.mark.asyncio
async def test_logged_in_non_member_falls_back_and_toggle_reverts(sample_resume):
    client, calls = make_client(member=False)
    async with client:
        result = await match_service.analyze(JD, sample_resume, client, use_ai=True, token="t")
        assert calls == ["/api/user/membership"]

    assert result.scoring_method == "local"
    assert result.use_ai is False
    assert result.notice == AIForbiddenError.user_message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, message, keeps_toggle",
    [
        (401, AIUnauthorizedError.user_message, True),
        (402, "upgrade to premium", False),
        (403, AIForbiddenError.user_message, False),
        (500, AIServiceError.user_message, True),
    ],
)
async def test_remote_errors_fall_back_to_local(sample_resume, status, message, keeps_toggle):
    client, calls = make_client(analyze_status=status)
    async with client:
        result = await match_service.analyze(JD, sample_resume, client, use_ai=True, token="t")
        assert sum(path.endswith("/jd/analyze-ai") for path in calls) == 1  # no retry

    local = analyze_jd_match(JD, resume_to_text(sample_resume))
    assert result.match == local
    assert result.degraded is True
    assert message in result.notice
    assert result.use_ai is keeps_toggle


@pytest.mark.asyncio
async def test_blank_jd_never_calls_remote(sample_resume):
    client, calls = make_client()
    async with client:
        result = await match_service.analyze("   ", sample_resume, client, use_ai=True)
        assert calls == []

    assert result.match.match_score == 0
