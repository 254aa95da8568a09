"""Tests for resolve API endpoint."""

from pathlib import Path

import pytest
from aiohttp.test_utils import TestClient
from blogstage.config import Config
from blogstage.server import create_app


@pytest.fixture
def client(test_config: Config, aiohttp_client) -> TestClient:
    """Create test client with configured app."""
    app = create_app(test_config)
    return aiohttp_client(app)


class TestResolveUri:
    """Tests for GET /api/resolve/{path}."""

    @pytest.mark.asyncio
    async def test__existing_page__returns_regular(self, pages_dir: Path, client) -> None:
        (pages_dir / "about.html").write_text("about")

        test_client = await client
        response = await test_client.get("/api/resolve/about")

        assert response.status == 200
        data = await response.json()
        assert data["kind"] == "regular"
        assert data["uri"] == "about"
        assert data["path"] == str(pages_dir / "about.html")
        assert data["was_path_checked"] is True

    @pytest.mark.asyncio
    async def test__root__returns_index(self, pages_dir: Path, client) -> None:
        (pages_dir / "_index.html").write_text("home")

        test_client = await client
        response = await test_client.get("/api/resolve")

        assert response.status == 200
        data = await response.json()
        assert data["uri"] == "_index"
        assert data["page_number"] == 1

    @pytest.mark.asyncio
    async def test__post__returns_date(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/resolve/2020/01/15/hello-world")

        assert response.status == 200
        data = await response.json()
        assert data["kind"] == "post"
        assert data["blog_key"] == "blog"
        assert data["date"] == "2020-01-15"

    @pytest.mark.asyncio
    async def test__paginated_tags__return_keys(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/resolve/tag/apple/banana/2")

        assert response.status == 200
        data = await response.json()
        assert data["kind"] == "tag"
        assert data["key"] == ["apple", "banana"]
        assert data["page_number"] == 2

    @pytest.mark.asyncio
    async def test__unsorted_tags__returns_400(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/resolve/tag/banana/apple")

        assert response.status == 400
        data = await response.json()
        assert "alphabetical order" in data["error"]
        assert data["path"] == "tag/banana/apple"
        assert data["canonical"] == "tag/apple/banana"

    @pytest.mark.asyncio
    async def test__unknown_uri__returns_404(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/resolve/does/not/exist")

        assert response.status == 404
        data = await response.json()
        assert data == {"error": "Page not found", "path": "does/not/exist"}

    @pytest.mark.asyncio
    async def test__parent_reference__returns_404(self, client) -> None:
        """Traversal attempts look like missing pages."""
        test_client = await client
        response = await test_client.get("/api/resolve/foo..bar")

        assert response.status == 404
        data = await response.json()
        assert data == {"error": "Page not found", "path": "foo..bar"}


class TestVerbose:
    """Tests for verbose mode."""

    @pytest.mark.asyncio
    async def test__verbose__echoes_resolution(
        self,
        test_config: Config,
        aiohttp_client,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        app = create_app(test_config, verbose=True)
        test_client = await aiohttp_client(app)

        response = await test_client.get("/api/resolve/news")

        assert response.status == 200
        assert "[RESOLVE] news -> category" in capsys.readouterr().err
