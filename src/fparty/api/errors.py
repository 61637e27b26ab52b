"""Error handling middleware.

Maps PageNotFoundError raised by page handlers to 404 responses.
"""

import logging

from aiohttp import web
from aiohttp.typedefs import Handler

from fparty.app_keys import renderer_key
from fparty.core.negotiation import ResponseMode, select_response_mode
from fparty.core.pages import PageNotFoundError

logger = logging.getLogger(__name__)

# The 404 body differs between HTML and script clients.
NOT_FOUND_HEADERS = {"Vary": "Accept"}


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except PageNotFoundError as e:
        logger.warning(f"{request.method} {request.path}: {e}")
        return _not_found_response(request, e)


def _not_found_response(request: web.Request, error: PageNotFoundError) -> web.Response:
    mode = select_response_mode(request.headers.get("Accept"))
    if mode is ResponseMode.SCRIPT:
        return web.Response(
            status=404,
            text=str(error),
            content_type="text/plain",
            headers=NOT_FOUND_HEADERS,
        )

    renderer = request.app[renderer_key]
    return web.Response(
        status=404,
        text=renderer.render_not_found(error.requested),
        content_type="text/html",
        headers=NOT_FOUND_HEADERS,
    )
