"""Static page endpoints.

Every route resolves to a page identifier. The identifier is validated
before the response mode is chosen; unknown identifiers raise
PageNotFoundError for the error middleware to handle.
"""

from aiohttp import web
from aiohttp.typedefs import Handler

from fparty.app_keys import renderer_key
from fparty.core.negotiation import select_response_mode
from fparty.core.pages import PageId, resolve_page

# Named routes with a fixed identifier.
NAMED_ROUTES: dict[str, PageId] = {
    "/": PageId.HOME,
    "/about": PageId.ABOUT,
    "/princess": PageId.PRINCESS,
    "/book": PageId.BOOK,
}

PAGE_RESOURCE_PATH = "/pages/{id}"


def create_pages_routes() -> list[web.RouteDef]:
    routes = [
        web.get(path, _named_page_handler(page), name=page.value)
        for path, page in NAMED_ROUTES.items()
    ]
    routes.append(web.get(PAGE_RESOURCE_PATH, get_page, name="page"))
    return routes


async def get_page(request: web.Request) -> web.Response:
    return render_page(request, request.match_info.get("id"))


def render_page(request: web.Request, requested: str | None) -> web.Response:
    """Resolve and render a page for a request.

    Args:
        request: Incoming request (Accept header selects the response mode)
        requested: Raw page identifier

    Returns:
        Rendered page response

    Raises:
        PageNotFoundError: If requested is not a known page
    """
    page = resolve_page(requested)
    mode = select_response_mode(request.headers.get("Accept"))

    renderer = request.app[renderer_key]
    result = renderer.render(page, mode)

    return web.Response(
        text=result.body,
        content_type=result.content_type,
        headers={"Vary": "Accept"},
    )


def _named_page_handler(page: PageId) -> Handler:
    async def handler(request: web.Request) -> web.Response:
        return render_page(request, page.value)

    handler.__name__ = f"get_{page.value}_page"
    return handler
