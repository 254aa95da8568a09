"""Tests for post storage layouts."""

from pathlib import Path

import pytest
from blogstage.core.filesystem import PostFileSystem, PostLocation

CAPTURES = {"year": "2020", "month": "01", "day": "15", "slug": "hello-world"}


class TestPostFileSystem:
    """Tests for PostFileSystem."""

    def test__flat__joins_date_and_slug(self, tmp_path: Path) -> None:
        fs = PostFileSystem.create(tmp_path, "blog", "flat")

        location = fs.locate(CAPTURES)

        assert location == PostLocation(
            year="2020",
            month="01",
            day="15",
            slug="hello-world",
            path=tmp_path / "2020-01-15_hello-world.html",
        )

    def test__shallow__uses_year_directory(self, tmp_path: Path) -> None:
        fs = PostFileSystem.create(tmp_path, "blog", "shallow")

        location = fs.locate(CAPTURES)

        assert location.path == tmp_path / "2020" / "01-15_hello-world.html"

    def test__hierarchy__uses_year_and_month_directories(self, tmp_path: Path) -> None:
        fs = PostFileSystem.create(tmp_path, "blog", "hierarchy")

        location = fs.locate(CAPTURES)

        assert location.path == tmp_path / "2020" / "01" / "15_hello-world.html"

    def test__custom_extension__used_for_file_name(self, tmp_path: Path) -> None:
        fs = PostFileSystem.create(tmp_path, "blog", "flat", extension="md")

        location = fs.locate(CAPTURES)

        assert location.path.name == "2020-01-15_hello-world.md"

    def test__non_default_blog__uses_blog_subdirectory(self, tmp_path: Path) -> None:
        """Posts of other blogs live under a directory named after the blog."""
        fs = PostFileSystem.create(tmp_path, "journal", "flat")

        assert fs.posts_dir == tmp_path / "journal"
        assert fs.locate(CAPTURES).path.parent == tmp_path / "journal"

    def test__default_blog__uses_posts_root(self, tmp_path: Path) -> None:
        fs = PostFileSystem.create(tmp_path, "blog")

        assert fs.posts_dir == tmp_path
        assert fs.layout == "flat"

    def test__unknown_layout__raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Unknown posts layout"):
            PostFileSystem.create(tmp_path, "blog", "nested")
