"""URI matching strategies.

Each strategy checks whether a normalized URI designates one kind of
content and, if so, returns what it learned about it. A strategy that
doesn't match returns None; only malformed requests raise.
"""

import datetime
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from blogstage.config import BlogConfig, SiteConfig
from blogstage.core.errors import TagOrderError
from blogstage.core.filesystem import PostFileSystem
from blogstage.core.types import DEFAULT_BLOG_KEY, PageKind
from blogstage.core.uri_builder import (
    build_category_uri_pattern,
    build_post_uri_pattern,
    build_tag_uri,
    build_tag_uri_pattern,
)

_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+$")


@dataclass(frozen=True)
class UriMatch:
    """Partial resolution produced by a matching strategy."""

    kind: PageKind
    path: Path
    blog_key: str | None = None
    key: str | tuple[str, ...] | None = None
    date: datetime.date | None = None
    was_path_checked: bool = False


class Matcher(Protocol):
    """Strategy attempting to resolve a URI."""

    def match(self, uri: str) -> UriMatch | None: ...


def _listing_path(site: SiteConfig, blog_key: str, page_name: str) -> Path:
    """Source path of a blog's tag or category listing page."""
    prefix = "" if blog_key == DEFAULT_BLOG_KEY else f"{blog_key}/"
    return site.pages_dir / f"{prefix}{page_name}.{site.default_extension}"


class PageMatcher:
    """Matches URIs of regular pages present in the pages directory.

    A trailing extension (e.g. ``feed.xml``) is ignored: it only says the
    page is baked with another content type, its source still has the
    default extension.
    """

    __slots__ = ("_site",)

    def __init__(self, site: SiteConfig) -> None:
        self._site = site

    def match(self, uri: str) -> UriMatch | None:
        pages_dir = self._site.pages_dir
        if not pages_dir.is_dir():
            return None

        stem = _EXTENSION_RE.sub("", uri)
        path = pages_dir / f"{stem}.{self._site.default_extension}"
        if not path.is_file():
            return None

        return UriMatch(kind=PageKind.REGULAR, path=path, was_path_checked=True)


class PostMatcher:
    """Matches URIs against a blog's post URL template."""

    __slots__ = ("_blog", "_fs", "_pattern", "_site")

    def __init__(self, site: SiteConfig, blog: BlogConfig) -> None:
        self._site = site
        self._blog = blog
        self._pattern = build_post_uri_pattern(blog.post_url)
        self._fs = PostFileSystem.create(
            site.posts_dir, blog.key, site.posts_fs, site.default_extension
        )

    def match(self, uri: str) -> UriMatch | None:
        if not self._site.posts_dir.is_dir():
            return None

        captures = self._pattern.match(uri)
        if captures is None:
            return None

        location = self._fs.locate(captures)
        try:
            post_date = datetime.date(
                int(location.year), int(location.month), int(location.day)
            )
        except ValueError:
            return None

        return UriMatch(
            kind=PageKind.POST,
            path=location.path,
            blog_key=self._blog.key,
            date=post_date,
        )


class TagMatcher:
    """Matches URIs against a blog's tag listing URL template.

    Several tags may be combined (``tag/apple/banana``); they must then be
    given in alphabetical order so each combination has a single URI.
    """

    __slots__ = ("_blog", "_pattern", "_site")

    def __init__(self, site: SiteConfig, blog: BlogConfig) -> None:
        self._site = site
        self._blog = blog
        self._pattern = build_tag_uri_pattern(blog.tag_url)

    def match(self, uri: str) -> UriMatch | None:
        if not self._site.pages_dir.is_dir():
            return None

        captures = self._pattern.match(uri)
        if captures is None:
            return None

        raw = captures["tag"].strip("/")
        tags = raw.split("/")
        key: str | tuple[str, ...]
        if len(tags) > 1:
            ordered = sorted(tags)
            if "/".join(ordered) != raw:
                raise TagOrderError(
                    uri, tags, build_tag_uri(self._blog.tag_url, ordered)
                )
            key = tuple(ordered)
        else:
            key = raw

        return UriMatch(
            kind=PageKind.TAG,
            path=_listing_path(self._site, self._blog.key, self._site.tag_page),
            blog_key=self._blog.key,
            key=key,
        )


class CategoryMatcher:
    """Matches URIs against a blog's category listing URL template."""

    __slots__ = ("_blog", "_pattern", "_site")

    def __init__(self, site: SiteConfig, blog: BlogConfig) -> None:
        self._site = site
        self._blog = blog
        self._pattern = build_category_uri_pattern(blog.category_url)

    def match(self, uri: str) -> UriMatch | None:
        if not self._site.pages_dir.is_dir():
            return None

        captures = self._pattern.match(uri)
        if captures is None:
            return None

        return UriMatch(
            kind=PageKind.CATEGORY,
            path=_listing_path(self._site, self._blog.key, self._site.category_page),
            blog_key=self._blog.key,
            key=captures["category"],
        )
