"""aiohttp server for navtree.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from navtree.api.navigation import create_navigation_routes
from navtree.app_keys import site_key
from navtree.config import Config
from navtree.core.site import Site


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        FileNotFoundError: If the configured tree file doesn't exist
        ValueError: If the tree file is malformed
    """
    app = web.Application()
    app[site_key] = Site.load(config)
    app.router.add_routes(create_navigation_routes())
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
