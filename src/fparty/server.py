"""aiohttp server for fparty.

Application factory and route registration.
"""

import logging

from aiohttp import web

from fparty.api.errors import error_middleware
from fparty.api.pages import create_pages_routes
from fparty.app_keys import config_key, renderer_key, static_dir_key
from fparty.assets import get_static_dir
from fparty.config import Config
from fparty.core.renderer import PageRenderer

logger = logging.getLogger(__name__)

STATIC_PREFIXES = ("javascripts", "stylesheets", "images")


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application(middlewares=[error_middleware])

    app[config_key] = config
    app[renderer_key] = PageRenderer(config.site.templates_dir)

    app.router.add_routes(create_pages_routes())

    static_dir = get_static_dir()
    app[static_dir_key] = static_dir
    for prefix in STATIC_PREFIXES:
        directory = static_dir / prefix
        if directory.exists():
            app.router.add_static(f"/{prefix}", directory)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving pages from {app[renderer_key].templates_dir}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
