"""Shared dependencies for API routes."""

from collections.abc import AsyncIterator

import httpx
from fastapi import Header

from services import ai_client


async def get_ai_client() -> AsyncIterator[httpx.AsyncClient]:
    async with ai_client.create_client() as client:
        yield client


def get_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Token from an ``Authorization: Bearer ...`` header, forwarded to the AI service."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
