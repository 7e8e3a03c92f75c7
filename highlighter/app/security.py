from __future__ import annotations

"""API key guard for the highlight endpoint."""

from fastapi import HTTPException, Request, status

from highlighter.app.settings import settings


async def require_api_key(request: Request) -> str | None:
    """Validate the API key or allow anonymous access if configured."""
    allowed = settings.api_keys
    api_key = _extract_api_key(request)
    if not allowed:
        if settings.allow_anonymous:
            return None
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if api_key is None or api_key not in allowed:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return api_key


def _extract_api_key(request: Request) -> str | None:
    header_key = request.headers.get("x-api-key")
    if header_key:
        return header_key.strip()
    auth_header = request.headers.get("authorization", "")
    if auth_header.lower().startswith("bearer "):
        return auth_header[7:].strip() or None
    return None
