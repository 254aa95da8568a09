"""Post storage layouts.

Maps the captures of a matched post URL to the post's source file.
Three layouts are supported:

    flat:       posts/2020-01-15_hello-world.html
    shallow:    posts/2020/01-15_hello-world.html
    hierarchy:  posts/2020/01/15_hello-world.html

Posts of a blog other than the default one live in a sub-directory
named after the blog key.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from blogstage.core.types import DEFAULT_BLOG_KEY

LAYOUTS = ("flat", "shallow", "hierarchy")


@dataclass(frozen=True)
class PostLocation:
    """Where a post lives and the date parts it was located by."""

    year: str
    month: str
    day: str
    slug: str
    path: Path


class PostFileSystem:
    """Resolves post captures to source files for one blog."""

    __slots__ = ("_extension", "_layout", "_posts_dir")

    def __init__(self, posts_dir: Path, layout: str, extension: str = "html") -> None:
        if layout not in LAYOUTS:
            raise ValueError(
                f"Unknown posts layout {layout!r}, expected one of: {', '.join(LAYOUTS)}"
            )
        self._posts_dir = posts_dir
        self._layout = layout
        self._extension = extension

    @classmethod
    def create(
        cls,
        posts_dir: Path,
        blog_key: str,
        layout: str = "flat",
        extension: str = "html",
    ) -> PostFileSystem:
        """Create the file system for a blog.

        Args:
            posts_dir: Root directory of all posts
            blog_key: Blog the posts belong to
            layout: One of "flat", "shallow" or "hierarchy"
            extension: Source file extension without the dot

        Raises:
            ValueError: If layout is unknown
        """
        if blog_key != DEFAULT_BLOG_KEY:
            posts_dir = posts_dir / blog_key
        return cls(posts_dir, layout, extension)

    @property
    def posts_dir(self) -> Path:
        return self._posts_dir

    @property
    def layout(self) -> str:
        return self._layout

    def locate(self, captures: dict[str, str]) -> PostLocation:
        """Build the source path of a post from its URL captures.

        Args:
            captures: Named captures with year, month, day and slug

        Returns:
            PostLocation of the post (the file may not exist)
        """
        year = captures["year"]
        month = captures["month"]
        day = captures["day"]
        slug = captures["slug"]

        if self._layout == "flat":
            relative = f"{year}-{month}-{day}_{slug}.{self._extension}"
        elif self._layout == "shallow":
            relative = f"{year}/{month}-{day}_{slug}.{self._extension}"
        else:
            relative = f"{year}/{month}/{day}_{slug}.{self._extension}"

        return PostLocation(
            year=year,
            month=month,
            day=day,
            slug=slug,
            path=self._posts_dir / relative,
        )
