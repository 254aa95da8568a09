"""Application keys for type-safe app configuration access."""

from aiohttp import web

from blogstage.config import Config
from blogstage.core.resolver import UriResolver

config_key = web.AppKey("config", Config)
resolver_key = web.AppKey("resolver", UriResolver)
verbose_key = web.AppKey("verbose", bool)
