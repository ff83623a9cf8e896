"""aiohttp server for Welcome Page.

Application factory and route registration.
"""

from aiohttp import web

from welcomepage.api.about import create_about_routes
from welcomepage.api.pages import create_pages_routes
from welcomepage.app_keys import (
    renderer_key,
    resolver_key,
    root_directory_key,
    store_key,
    views_key,
)
from welcomepage.config import Config
from welcomepage.core.renderer import MarkdownRenderer
from welcomepage.core.resolver import DefaultDocumentResolver
from welcomepage.core.store import DocumentStore
from welcomepage.errors import error_middleware
from welcomepage.views import ViewRenderer


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        ConfigurationError: If no root directory is configured
    """
    root_directory = config.require_root_directory()

    app = web.Application(middlewares=[error_middleware])

    app[root_directory_key] = root_directory
    app[store_key] = DocumentStore(root_directory)
    app[resolver_key] = DefaultDocumentResolver(app[store_key])
    app[renderer_key] = MarkdownRenderer()
    app[views_key] = ViewRenderer()

    # /_About must be registered before the catch-all page route
    app.router.add_routes(create_about_routes())
    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config) -> None:
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
