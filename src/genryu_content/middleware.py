# -*- coding: utf-8 -*-
"""
Request context middleware: request ID and content locale.
"""
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .config import settings
from .i18n import get_locale_from_url

# Per-request context (accessible across async calls and in log records)
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
locale_ctx: ContextVar[str | None] = ContextVar("locale", default=None)


def get_request_id() -> str | None:
    """Get current request ID from context."""
    return request_id_ctx.get()


def get_request_locale() -> str | None:
    """Get the content locale of the current request."""
    return locale_ctx.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Bind a request ID and the locale from the ``/{locale}/...`` path prefix.

    Unknown or missing prefixes resolve to the default locale. Both values are
    echoed back as the request-ID and ``Content-Language`` response headers.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(settings.REQUEST_ID_HEADER) or str(uuid.uuid4())
        locale = get_locale_from_url(str(request.url))

        id_token = request_id_ctx.set(request_id)
        locale_token = locale_ctx.set(locale)

        try:
            response = await call_next(request)
            response.headers[settings.REQUEST_ID_HEADER] = request_id
            response.headers["Content-Language"] = locale
            return response
        finally:
            locale_ctx.reset(locale_token)
            request_id_ctx.reset(id_token)
