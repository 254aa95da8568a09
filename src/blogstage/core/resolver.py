"""Request URI resolution.

Turns a relative request URI into a description of the content it
designates: a regular page, a blog post, or a tag or category listing,
plus the page number of paginated content.

Strategies are tried in a fixed order and the first match wins:

1. Regular page file in the pages directory
2. Post URL of each blog, in configured order
3. Tag then category listing URL of each blog, in configured order

Posts come before listings so a date-shaped post URL can't be taken for
a category.
"""

import datetime
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict

from blogstage.config import Config
from blogstage.core.errors import PathTraversalError, TagOrderError
from blogstage.core.matchers import (
    CategoryMatcher,
    Matcher,
    PageMatcher,
    PostMatcher,
    TagMatcher,
)
from blogstage.core.types import PageKind, URLPath

logger = logging.getLogger(__name__)

_PAGE_NUMBER_RE = re.compile(r"/(\d+)/?$")


class UriInfoDict(TypedDict):
    """Dictionary representation of a resolved URI."""

    uri: str
    page_number: int
    kind: str
    blog_key: str | None
    key: str | list[str] | None
    date: str | None
    path: str
    was_path_checked: bool


@dataclass(frozen=True)
class UriInfo:
    """What a request URI resolves to.

    Attributes:
        uri: Normalized URI, without pagination suffix
        page_number: Requested page of paginated content, 1-based
        kind: Kind of content
        blog_key: Blog the content belongs to, None for regular pages
        key: Tag (or sorted tuple of tags) or category of listing pages
        date: Publication date of posts
        path: Source file of the content
        was_path_checked: Whether path is known to exist
    """

    uri: URLPath
    page_number: int
    kind: PageKind
    path: Path
    blog_key: str | None = None
    key: str | tuple[str, ...] | None = None
    date: datetime.date | None = None
    was_path_checked: bool = False

    def to_dict(self) -> UriInfoDict:
        """Convert to dictionary for JSON serialization."""
        key: str | list[str] | None
        if isinstance(self.key, tuple):
            key = list(self.key)
        else:
            key = self.key
        return {
            "uri": self.uri,
            "page_number": self.page_number,
            "kind": self.kind.value,
            "blog_key": self.blog_key,
            "key": key,
            "date": self.date.isoformat() if self.date else None,
            "path": str(self.path),
            "was_path_checked": self.was_path_checked,
        }


def split_page_number(uri: str) -> tuple[str, int]:
    """Split a trailing page number segment off a URI.

    Args:
        uri: URI without leading slash (e.g. "blog/3")

    Returns:
        URI without the page segment and the page number (1 if absent)
    """
    m = _PAGE_NUMBER_RE.search(uri)
    if m is None:
        return uri, 1
    page_number = int(m.group(1))
    if page_number < 1:
        return uri, 1
    return uri[: m.start()], page_number


class UriResolver:
    """Resolves request URIs against a site configuration.

    The strategy list is built once from the configuration and never
    modified, so one resolver can serve concurrent requests.
    """

    __slots__ = ("_config", "_index_page", "_strategies")

    def __init__(self, config: Config) -> None:
        """Initialize resolver.

        Args:
            config: Site configuration

        Raises:
            ValueError: If a blog's URL template or the posts layout is invalid
        """
        self._config = config
        site = config.site
        self._index_page = site.index_page

        strategies: list[Matcher] = [PageMatcher(site)]
        strategies.extend(PostMatcher(site, blog) for blog in config.blogs)
        for blog in config.blogs:
            strategies.append(TagMatcher(site, blog))
            strategies.append(CategoryMatcher(site, blog))
        self._strategies = tuple(strategies)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def strategies(self) -> tuple[Matcher, ...]:
        return self._strategies

    def resolve(self, uri: str) -> UriInfo | None:
        """Resolve a request URI.

        Args:
            uri: Relative request path, without query string

        Returns:
            UriInfo of the designated content, None if nothing matches

        Raises:
            PathTraversalError: If the URI references a parent directory
            TagOrderError: If a multi-tag URI lists tags out of order
        """
        if ".." in uri:
            logger.warning(f"Rejected URI with parent directory reference: {uri!r}")
            raise PathTraversalError(uri)

        normalized = uri.strip("/")
        if not normalized:
            normalized = self._index_page

        normalized, page_number = split_page_number(normalized)

        for strategy in self._strategies:
            try:
                match = strategy.match(normalized)
            except TagOrderError:
                logger.warning(f"Rejected multi-tag URI out of order: {uri!r}")
                raise
            if match is None:
                continue

            logger.debug(
                f"Resolved {uri!r} as {match.kind.value} "
                f"(blog={match.blog_key}, page={page_number}): {match.path}"
            )
            return UriInfo(
                uri=URLPath(normalized),
                page_number=page_number,
                kind=match.kind,
                path=match.path,
                blog_key=match.blog_key,
                key=match.key,
                date=match.date,
                was_path_checked=match.was_path_checked,
            )

        logger.debug(f"No content found for {uri!r}")
        return None


def resolve_uri(config: Config, uri: str) -> UriInfo | None:
    """Resolve a single URI without keeping a resolver around."""
    return UriResolver(config).resolve(uri)
