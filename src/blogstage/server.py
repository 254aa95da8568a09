"""aiohttp server for Blogstage.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from blogstage.api.config import create_config_routes
from blogstage.api.resolve import create_resolve_routes
from blogstage.app_keys import config_key, resolver_key, verbose_key
from blogstage.config import Config
from blogstage.core.resolver import UriResolver


def create_app(config: Config, *, verbose: bool = False) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        verbose: Enable verbose output (echo resolved URIs)

    Returns:
        Configured aiohttp application

    Raises:
        ValueError: If a blog's URL template is invalid
    """
    app = web.Application()

    app[config_key] = config
    app[resolver_key] = UriResolver(config)
    app[verbose_key] = verbose

    app.router.add_routes(create_resolve_routes())
    app.router.add_routes(create_config_routes())

    return app


def run_server(config: Config, *, verbose: bool = False) -> None:
    """Run the server.

    Args:
        config: Application configuration
        verbose: Enable verbose output (echo resolved URIs)
    """
    app = create_app(config, verbose=verbose)
    web.run_app(app, host=config.server.host, port=config.server.port)
