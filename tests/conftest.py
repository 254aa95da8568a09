"""Shared test fixtures."""

from pathlib import Path

import pytest
from blogstage.config import Config


def write_config(site_dir: Path, content: str = "") -> Config:
    """Write blogstage.toml into site_dir and load it."""
    config_file = site_dir / "blogstage.toml"
    config_file.write_text(content)
    return Config.load(config_file)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site with empty pages and posts directories."""
    (tmp_path / "_content" / "pages").mkdir(parents=True)
    (tmp_path / "_content" / "posts").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def pages_dir(site_dir: Path) -> Path:
    return site_dir / "_content" / "pages"


@pytest.fixture
def posts_dir(site_dir: Path) -> Path:
    return site_dir / "_content" / "posts"


@pytest.fixture
def test_config(site_dir: Path) -> Config:
    """Create a default single-blog configuration for site_dir."""
    return write_config(site_dir)
