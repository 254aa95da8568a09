"""Blogstage - URI resolution for blog-aware static sites."""

from blogstage.core.errors import PathTraversalError, TagOrderError, UriResolveError
from blogstage.core.resolver import UriInfo, UriResolver
from blogstage.core.types import PageKind

__all__ = [
    "PageKind",
    "PathTraversalError",
    "TagOrderError",
    "UriInfo",
    "UriResolveError",
    "UriResolver",
]
