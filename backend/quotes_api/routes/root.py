"""
Quotes API - Welcome Route
===========================

GET / describes the API: endpoints, SVG options and how to authenticate,
plus the number of stored quotes.
"""

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quotes_api.auth import PASSWORD_HEADER
from quotes_api.database import get_db_session
from quotes_api.services.quote_service import quote_service
from quotes_api.services.svg_renderer import THEMES

router = APIRouter(tags=["Root"])

ENDPOINTS = {
    "GET /quotes": "Get all quotes",
    "GET /quotes/:id": "Get a specific quote by ID",
    "GET /quotes/random": "Get a random quote",
    "GET /quotes/random/svg": "Get a random quote as SVG image",
    "GET /quotes/:id/svg": "Get a specific quote as SVG image",
    "POST /quotes": "Add a new quote (Protected - requires password)",
    "PUT /quotes/:id": "Update a quote by ID (Protected - requires password)",
    "DELETE /quotes/:id": "Delete a quote by ID (Protected - requires password)",
}


@router.get("/", summary="API overview")
async def index(db: AsyncSession = Depends(get_db_session)) -> dict[str, Any]:
    return {
        "message": "Welcome to the Quotes API!",
        "endpoints": ENDPOINTS,
        "svgOptions": {
            "themes": list(THEMES),
            "queryParams": "?theme=dark&width=800&height=400",
            "examples": [
                "/quotes/random/svg?theme=ocean",
                "/quotes/1/svg?theme=gradient&width=1200&height=600",
            ],
        },
        "authentication": {
            "note": "POST, PUT, and DELETE operations require authentication",
            "method": f"Header: {PASSWORD_HEADER}: your_password",
        },
        "totalQuotes": await quote_service.count_quotes(db),
    }
