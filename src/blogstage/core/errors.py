"""Errors raised while resolving a request URI.

Only these abort a resolution. A strategy that simply fails to match
is not an error; the resolver moves on to the next one.
"""


class UriResolveError(Exception):
    """Base for URI resolution errors."""

    def __init__(self, uri: str, message: str) -> None:
        super().__init__(message)
        self.uri = uri


class PathTraversalError(UriResolveError):
    """URI tries to reach outside the content directories.

    Callers should report this as a plain "not found" so the site
    layout is not leaked.
    """

    def __init__(self, uri: str) -> None:
        super().__init__(uri, f"Parent directory reference in URI: {uri!r}")


class TagOrderError(UriResolveError):
    """Multi-tag URI lists its tags out of alphabetical order.

    ``canonical_uri`` is the listing URI with the tags sorted.
    """

    def __init__(self, uri: str, tags: list[str], canonical_uri: str) -> None:
        super().__init__(uri, "Multi-tags must be specified in alphabetical order")
        self.tags = tags
        self.canonical_uri = canonical_uri
