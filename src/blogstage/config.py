"""Configuration management for Blogstage.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from blogstage.core.filesystem import LAYOUTS
from blogstage.core.types import (
    CATEGORY_PAGE_NAME,
    DEFAULT_BLOG_KEY,
    INDEX_PAGE_NAME,
    TAG_PAGE_NAME,
)

CONFIG_FILENAME = "blogstage.toml"

DEFAULT_POST_URL = "%year%/%month%/%day%/%slug%"
DEFAULT_TAG_URL = "tag/%tag%"
DEFAULT_CATEGORY_URL = "%category%"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class SiteConfig:
    """Site content configuration."""

    pages_dir: Path = field(default_factory=lambda: Path("_content/pages"))
    posts_dir: Path = field(default_factory=lambda: Path("_content/posts"))
    posts_fs: str = "flat"
    default_extension: str = "html"
    index_page: str = INDEX_PAGE_NAME
    tag_page: str = TAG_PAGE_NAME
    category_page: str = CATEGORY_PAGE_NAME


@dataclass(frozen=True)
class BlogConfig:
    """URL templates of one blog."""

    key: str
    post_url: str
    tag_url: str
    category_url: str

    @classmethod
    def default(cls, key: str) -> BlogConfig:
        """Default templates, prefixed with the key for non-default blogs."""
        prefix = "" if key == DEFAULT_BLOG_KEY else f"{key}/"
        return cls(
            key=key,
            post_url=prefix + DEFAULT_POST_URL,
            tag_url=prefix + DEFAULT_TAG_URL,
            category_url=prefix + DEFAULT_CATEGORY_URL,
        )


@dataclass(frozen=True)
class Config:
    """Application configuration.

    Immutable; use with_overrides() to derive a modified copy.
    """

    server: ServerConfig
    site: SiteConfig
    blogs: list[BlogConfig]
    config_path: Path | None = None

    @property
    def blog_keys(self) -> list[str]:
        return [blog.key for blog in self.blogs]

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for blogstage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(
            server=ServerConfig(),
            site=SiteConfig(),
            blogs=[BlogConfig.default(DEFAULT_BLOG_KEY)],
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        config_dir = path.parent

        server = cls._parse_server(data.get("server"))
        site_data = data.get("site")
        site = cls._parse_site(site_data, config_dir)
        blog_keys = cls._parse_blog_keys(site_data)
        blogs = cls._parse_blogs(data.get("blogs"), blog_keys)

        return cls(server=server, site=site, blogs=blogs, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object, config_dir: Path) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SiteConfig instance
        """
        defaults = SiteConfig()
        if data is None:
            return replace(
                defaults,
                pages_dir=config_dir / defaults.pages_dir,
                posts_dir=config_dir / defaults.posts_dir,
            )

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        values: dict[str, str] = {}
        for name in (
            "pages_dir",
            "posts_dir",
            "posts_fs",
            "default_extension",
            "index_page",
            "tag_page",
            "category_page",
        ):
            value = data.get(name, str(getattr(defaults, name)))
            if not isinstance(value, str):
                raise ValueError(f"site.{name} must be a string")
            values[name] = value

        if values["posts_fs"] not in LAYOUTS:
            raise ValueError(f"site.posts_fs must be one of: {', '.join(LAYOUTS)}")

        return SiteConfig(
            pages_dir=config_dir / values["pages_dir"],
            posts_dir=config_dir / values["posts_dir"],
            posts_fs=values["posts_fs"],
            default_extension=values["default_extension"].lstrip("."),
            index_page=values["index_page"],
            tag_page=values["tag_page"],
            category_page=values["category_page"],
        )

    @classmethod
    def _parse_blog_keys(cls, data: object) -> list[str]:
        if not isinstance(data, dict) or "blogs" not in data:
            return [DEFAULT_BLOG_KEY]

        keys = data["blogs"]
        if not isinstance(keys, list) or not keys:
            raise ValueError("site.blogs must be a non-empty list")
        for key in keys:
            if not isinstance(key, str) or not key:
                raise ValueError("site.blogs items must be non-empty strings")
        return keys

    @classmethod
    def _parse_blogs(cls, data: object, blog_keys: list[str]) -> list[BlogConfig]:
        """Parse per-blog URL templates.

        Args:
            data: Raw blogs section data, keyed by blog key
            blog_keys: Configured blog keys, in resolution order

        Returns:
            BlogConfig for every configured blog key
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("blogs section must be a dictionary")

        unknown = sorted(set(data) - set(blog_keys))
        if unknown:
            raise ValueError(f"blogs.{unknown[0]} is not listed in site.blogs")

        blogs: list[BlogConfig] = []
        for key in blog_keys:
            blog = BlogConfig.default(key)
            section = data.get(key)
            if section is None:
                blogs.append(blog)
                continue
            if not isinstance(section, dict):
                raise ValueError(f"blogs.{key} section must be a dictionary")

            templates: dict[str, str] = {}
            for name in ("post_url", "tag_url", "category_url"):
                value = section.get(name, getattr(blog, name))
                if not isinstance(value, str):
                    raise ValueError(f"blogs.{key}.{name} must be a string")
                templates[name] = value.strip("/")
            blogs.append(replace(blog, **templates))

        return blogs

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        pages_dir: Path | None = None,
        posts_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            pages_dir: Override site.pages_dir
            posts_dir: Override site.posts_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if pages_dir is not None or posts_dir is not None:
            site = replace(
                self.site,
                pages_dir=pages_dir if pages_dir is not None else self.site.pages_dir,
                posts_dir=posts_dir if posts_dir is not None else self.site.posts_dir,
            )

        return replace(self, server=server, site=site)
