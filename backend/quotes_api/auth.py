"""
Quotes API - Password Header Authentication
============================================

What:  FastAPI dependency guarding POST, PUT and DELETE.
How:   Compares the `api-password` request header with settings.api_password.

    header missing            → AuthenticationError   (401)
    header does not match     → PermissionDeniedError (403)

When API_PASSWORD is not configured every request is rejected with 403;
startup logs a warning about it.
"""

import hmac
import logging
from fastapi import Header

from quotes_api.config import settings
from quotes_api.exceptions import AuthenticationError, PermissionDeniedError
from quotes_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

PASSWORD_HEADER = "api-password"


async def require_api_password(
    api_password: str | None = Header(
        default=None,
        alias=PASSWORD_HEADER,
        description="Shared password for write operations",
    ),
) -> None:
    if not api_password:
        raise AuthenticationError()

    expected = settings.api_password
    if not expected or not hmac.compare_digest(
        api_password.encode("utf-8"), expected.encode("utf-8")
    ):
        logger.warning("[%s] Rejected write request: invalid api-password", request_id_var.get(""))
        raise PermissionDeniedError()
