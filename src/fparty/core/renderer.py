"""Page rendering with Jinja2 templates.

Each page has a body template under ``pages/``. A full render wraps the body
in ``layout.html``; a script render wraps it in ``page.js``, which swaps the
body into the current document.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from fparty.assets import get_templates_dir
from fparty.core.negotiation import ResponseMode
from fparty.core.pages import PageId

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html"
SCRIPT_CONTENT_TYPE = "text/javascript"


@dataclass(frozen=True)
class RenderedPage:
    """Result of rendering a page."""

    page: PageId
    mode: ResponseMode
    body: str
    content_type: str


class PageRenderer:
    """Renders static pages in either response mode.

    Templates come from the bundled ``fparty/templates`` directory unless
    templates_dir is given.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize renderer.

        Args:
            templates_dir: Directory to load templates from instead of the
                           bundled package templates
        """
        if templates_dir is None:
            templates_dir = get_templates_dir()
        self._templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def templates_dir(self) -> Path:
        return self._templates_dir

    def render(self, page: PageId, mode: ResponseMode) -> RenderedPage:
        """Render a page.

        Args:
            page: Page to render
            mode: FULL for an HTML document, SCRIPT for a swap fragment

        Returns:
            RenderedPage with body and content type

        Raises:
            jinja2.TemplateNotFound: If the page has no body template
        """
        body = self._render_body(page)
        if mode is ResponseMode.SCRIPT:
            template = self._env.get_template("page.js")
            content_type = SCRIPT_CONTENT_TYPE
        else:
            template = self._env.get_template("layout.html")
            content_type = HTML_CONTENT_TYPE

        logger.debug(f"Rendering {page.value} as {mode.value}")
        output = template.render(page=page, title=page.page_title, body=body)
        return RenderedPage(page=page, mode=mode, body=output, content_type=content_type)

    def render_not_found(self, requested: str | None) -> str:
        """Render the HTML body for an unknown page."""
        template = self._env.get_template("404.html")
        return template.render(requested=requested, title="Page not found")

    def _render_body(self, page: PageId) -> str:
        template = self._env.get_template(f"pages/{page.value}.html")
        return template.render(page=page)
