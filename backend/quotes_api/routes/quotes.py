"""
Quotes API - Quote Route Handlers
==================================

What:  CRUD endpoints for quotes plus the SVG card endpoints.
How:   Each handler delegates to quote_service and wraps the result in the
       {success, ...} envelope. Write endpoints require the api-password
       header (see quotes_api.auth).

Caching Strategy:
    - GET /quotes/random/svg:  no-cache (a different quote every time)
    - GET /quotes/{id}/svg:    public, long max-age; the same id and options
                               always render the same document
    - JSON endpoints:          no explicit caching

Routes with a literal segment (/random) are declared before /{quote_id}.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from quotes_api.auth import require_api_password
from quotes_api.config import settings
from quotes_api.database import DEFAULT_AUTHOR, get_db_session
from quotes_api.models.quote import Quote
from quotes_api.schemas.quote import (
    ErrorResponse,
    QuoteCreate,
    QuoteListResponse,
    QuoteOut,
    QuoteResponse,
    QuoteUpdate,
)
from quotes_api.services.quote_service import quote_service
from quotes_api.services.svg_renderer import THEMES, RenderConfig, render_quote_card

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["Quotes"])

SVG_MEDIA_TYPE = "image/svg+xml"
# Explicit charset: the author line contains a non-ASCII em dash
SVG_CONTENT_TYPE = f"{SVG_MEDIA_TYPE}; charset=utf-8"

_THEME_HELP = "Card theme: " + ", ".join(THEMES) + ". Unknown names fall back to light."

_WRITE_RESPONSES = {
    400: {"description": "Text is required", "model": ErrorResponse},
    401: {"description": "Missing api-password header", "model": ErrorResponse},
    403: {"description": "Invalid password", "model": ErrorResponse},
}


def _svg_response(
    quote: Quote,
    width: str | None,
    height: str | None,
    theme: str | None,
    cache_control: str,
) -> Response:
    """Render a stored quote and wrap it with SVG headers."""
    config = RenderConfig.from_query(width=width, height=height, theme=theme)
    svg = render_quote_card(quote.text, quote.author or DEFAULT_AUTHOR, config)
    return Response(
        content=svg,
        media_type=SVG_CONTENT_TYPE,
        headers={"Cache-Control": cache_control},
    )


# ══════════════════════════════════════════════════════════════════════════
# Public Routes
# ══════════════════════════════════════════════════════════════════════════

@router.get(
    "",
    response_model=QuoteListResponse,
    summary="List all quotes",
)
async def list_quotes(db: AsyncSession = Depends(get_db_session)) -> QuoteListResponse:
    quotes = await quote_service.list_quotes(db)
    return QuoteListResponse(
        count=len(quotes),
        data=[QuoteOut.model_validate(q) for q in quotes],
    )


@router.get(
    "/random",
    response_model=QuoteResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "No quotes stored", "model": ErrorResponse}},
    summary="Get a random quote",
)
async def get_random_quote(db: AsyncSession = Depends(get_db_session)) -> QuoteResponse:
    quote = await quote_service.get_random_quote(db)
    return QuoteResponse(data=QuoteOut.model_validate(quote))


@router.get(
    "/random/svg",
    response_class=Response,
    responses={200: {"content": {SVG_MEDIA_TYPE: {}}, "description": "SVG quote card"}},
    summary="Get a random quote as an SVG card",
)
async def get_random_quote_svg(
    width: str | None = Query(default=None, description="Card width in pixels (default 800)"),
    height: str | None = Query(default=None, description="Card height in pixels (default 400)"),
    theme: str | None = Query(default=None, description=_THEME_HELP),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    quote = await quote_service.get_random_quote(db)
    return _svg_response(quote, width, height, theme, cache_control="no-cache")


@router.get(
    "/{quote_id}",
    response_model=QuoteResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Quote not found", "model": ErrorResponse}},
    summary="Get a quote by id",
)
async def get_quote(
    quote_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> QuoteResponse:
    quote = await quote_service.get_quote(db, quote_id)
    return QuoteResponse(data=QuoteOut.model_validate(quote))


@router.get(
    "/{quote_id}/svg",
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}, "description": "SVG quote card"},
        404: {"description": "Quote not found", "model": ErrorResponse},
    },
    summary="Get a quote as an SVG card",
)
async def get_quote_svg(
    quote_id: int,
    width: str | None = Query(default=None, description="Card width in pixels (default 800)"),
    height: str | None = Query(default=None, description="Card height in pixels (default 400)"),
    theme: str | None = Query(default=None, description=_THEME_HELP),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    quote = await quote_service.get_quote(db, quote_id)
    return _svg_response(
        quote,
        width,
        height,
        theme,
        cache_control=f"public, max-age={settings.svg_cache_max_age}",
    )


# ══════════════════════════════════════════════════════════════════════════
# Protected Routes
# ══════════════════════════════════════════════════════════════════════════

@router.post(
    "",
    status_code=201,
    response_model=QuoteResponse,
    responses=_WRITE_RESPONSES,
    dependencies=[Depends(require_api_password)],
    summary="Add a new quote",
)
async def create_quote(
    body: QuoteCreate | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> QuoteResponse:
    body = body or QuoteCreate()
    quote = await quote_service.create_quote(db, text=body.text, author=body.author)
    return QuoteResponse(
        message="Quote added successfully",
        data=QuoteOut.model_validate(quote),
    )


@router.put(
    "/{quote_id}",
    response_model=QuoteResponse,
    responses={**_WRITE_RESPONSES, 404: {"description": "Quote not found", "model": ErrorResponse}},
    dependencies=[Depends(require_api_password)],
    summary="Update a quote",
)
async def update_quote(
    quote_id: int,
    body: QuoteUpdate | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> QuoteResponse:
    body = body or QuoteUpdate()
    quote = await quote_service.update_quote(
        db, quote_id, text=body.text, author=body.author
    )
    return QuoteResponse(
        message="Quote updated successfully",
        data=QuoteOut.model_validate(quote),
    )


@router.delete(
    "/{quote_id}",
    response_model=QuoteResponse,
    responses={
        401: _WRITE_RESPONSES[401],
        403: _WRITE_RESPONSES[403],
        404: {"description": "Quote not found", "model": ErrorResponse},
    },
    dependencies=[Depends(require_api_password)],
    summary="Delete a quote",
)
async def delete_quote(
    quote_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> QuoteResponse:
    quote = await quote_service.delete_quote(db, quote_id)
    return QuoteResponse(
        message="Quote deleted successfully",
        data=QuoteOut.model_validate(quote),
    )
