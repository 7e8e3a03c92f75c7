from __future__ import annotations

"""FastAPI application entrypoint for the range highlighting service."""

import logging
import uuid

from fastapi import Depends, FastAPI, HTTPException, Request

from highlighter.app.metrics import metrics_middleware, metrics_response, record_highlight
from highlighter.app.schemas import HighlightRequest, HighlightResponse
from highlighter.app.security import require_api_key
from highlighter.app.settings import settings
from highlighter.text.highlights import InvalidInputError, render_highlights

logger = logging.getLogger(__name__)

app = FastAPI(title="Range Highlighter", version="0.1.0")


def _configure_logging() -> None:
    """Configure root logging using environment settings."""
    level_name = settings.log_level.strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
    logger.setLevel(level)


_configure_logging()


def _enforce_limits(request: HighlightRequest) -> None:
    """Reject payloads above the configured size limits."""
    max_chars = settings.max_text_chars
    if max_chars and len(request.text) > max_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds maximum length of {max_chars} characters",
        )
    max_ranges = settings.max_ranges
    if max_ranges and len(request.ranges) > max_ranges:
        raise HTTPException(
            status_code=413,
            detail=f"Too many ranges, maximum is {max_ranges}",
        )


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Attach or create a request ID for traceability."""
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.middleware("http")
async def record_metrics(request: Request, call_next):
    """Capture request metrics before returning the response."""
    return await metrics_middleware(request, call_next)


@app.get("/metrics")
async def metrics():
    """Expose Prometheus-style metrics."""
    return metrics_response()


@app.get("/health")
async def health() -> dict[str, str]:
    """Simple health probe for uptime checks."""
    return {"status": "ok"}


@app.post(
    "/highlight",
    response_model=HighlightResponse,
    dependencies=[Depends(require_api_key)],
)
async def highlight(request: HighlightRequest, http_request: Request) -> HighlightResponse:
    """Render the text with the requested ranges highlighted."""
    _enforce_limits(request)
    request_id = getattr(http_request.state, "request_id", None)
    try:
        result = render_highlights(request.text, request.ranges, excerpt=request.excerpt)
    except InvalidInputError as exc:
        logger.warning(
            "highlight_rejected",
            extra={"request_id": request_id, "detail": type(exc).__name__},
        )
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    record_highlight(request.excerpt)
    return HighlightResponse(
        html=result.html,
        excerpt=result.excerpt,
        range_count=len(result.ranges),
    )
