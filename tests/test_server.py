"""Tests for the aiohttp application and its routes."""

import os
from pathlib import Path
from typing import Any

import pytest
from aiohttp import web
from welcomepage.api.about import get_version
from welcomepage.app_keys import (
    renderer_key,
    resolver_key,
    root_directory_key,
    store_key,
    views_key,
)
from welcomepage.config import Config, DocsConfig
from welcomepage.core.errors import ConfigurationError
from welcomepage.server import create_app

JSON = {"Accept": "application/json"}


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        app = create_app(test_config)

        assert app[root_directory_key] == test_config.docs.root_directory
        assert app[store_key].root_directory == test_config.docs.root_directory
        assert app[resolver_key].candidates == ("Index", "Home", "README")
        assert renderer_key in app
        assert (app[views_key].templates_dir / "index.html").is_file()

    def test__missing_root_directory__fails_fast(self) -> None:
        with pytest.raises(ConfigurationError, match="RootDirectory is not configured."):
            create_app(Config(docs=DocsConfig(root_directory=None)))


@pytest.fixture
def app(test_config: Config) -> web.Application:
    return create_app(test_config)


class TestDefaultPage:
    """Tests for GET /."""

    @pytest.mark.asyncio
    async def test__index_present__serves_index(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "Index.md").write_text("Index page")
        (docs_dir / "Home.md").write_text("Home page")

        client = await aiohttp_client(app)
        response = await client.get("/", headers=JSON)

        assert response.status == 200
        data = await response.json()
        assert data == {"Title": "Index", "Content": "<p>Index page</p>"}

    @pytest.mark.asyncio
    async def test__only_readme__serves_readme(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "README.md").write_text("# Project")

        client = await aiohttp_client(app)
        response = await client.get("/")

        assert response.status == 200
        assert "text/html" in response.headers["Content-Type"]
        body = await response.text()
        assert "<title>README</title>" in body
        assert "<h1>Project</h1>" in body

    @pytest.mark.asyncio
    async def test__symlinked_index__serves_index(
        self, aiohttp_client: Any, app: web.Application, tmp_path: Path, docs_dir: Path
    ) -> None:
        """The default document is served even when it is a symlink."""
        shared = tmp_path / "shared"
        shared.mkdir()
        (shared / "Index.md").write_text("Shared index")
        (docs_dir / "Index.md").symlink_to(shared / "Index.md")
        (docs_dir / "Home.md").write_text("Home page")

        client = await aiohttp_client(app)
        response = await client.get("/", headers=JSON)

        assert response.status == 200
        assert await response.json() == {"Title": "Index", "Content": "<p>Shared index</p>"}

    @pytest.mark.asyncio
    async def test__no_default_document__returns_500(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        """Missing default document is not mapped to 404."""
        client = await aiohttp_client(app)
        response = await client.get("/")

        assert response.status == 500


class TestPage:
    """Tests for GET /{id}."""

    @pytest.mark.asyncio
    async def test__existing_page__renders_html_with_wiki_links(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "Guide.md").write_text("See [[Foo]] and [[Bar Baz]].")

        client = await aiohttp_client(app)
        response = await client.get("/Guide")

        assert response.status == 200
        body = await response.text()
        assert '<a href="/Foo">Foo</a>' in body
        assert '<a href="/Bar Baz">Bar Baz</a>' in body

    @pytest.mark.asyncio
    async def test__json_accept__returns_model(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "Guide.md").write_text("Text")

        client = await aiohttp_client(app)
        response = await client.get("/Guide", headers=JSON)

        assert response.status == 200
        assert await response.json() == {"Title": "Guide", "Content": "<p>Text</p>"}

    @pytest.mark.asyncio
    async def test__nested_id__serves_nested_file(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "guides").mkdir()
        (docs_dir / "guides" / "Setup.md").write_text("Steps")

        client = await aiohttp_client(app)
        response = await client.get("/guides/Setup", headers=JSON)

        assert response.status == 200
        assert (await response.json())["Title"] == "Setup"

    @pytest.mark.asyncio
    async def test__id_with_space__is_decoded(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "Bar Baz.md").write_text("Spaced")

        client = await aiohttp_client(app)
        response = await client.get("/Bar%20Baz", headers=JSON)

        assert response.status == 200
        assert (await response.json())["Title"] == "Bar Baz"

    @pytest.mark.asyncio
    async def test__missing_page__returns_404_naming_file(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        client = await aiohttp_client(app)
        response = await client.get("/Nonexistent")

        assert response.status == 404
        body = await response.text()
        assert "Nonexistent" in body
        assert "Not Found" in body

    @pytest.mark.asyncio
    async def test__missing_page_json__returns_file_name(
        self, aiohttp_client: Any, app: web.Application
    ) -> None:
        client = await aiohttp_client(app)
        response = await client.get("/Nonexistent", headers=JSON)

        assert response.status == 404
        assert await response.json() == {"FileName": "Nonexistent"}

    @pytest.mark.asyncio
    async def test__same_page_twice__identical_body(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        (docs_dir / "Guide.md").write_text("# Guide\n\n[[Link]] text")

        client = await aiohttp_client(app)
        first = await (await client.get("/Guide")).read()
        second = await (await client.get("/Guide")).read()

        assert first == second

    @pytest.mark.asyncio
    async def test__unreadable_page__returns_500(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        """Errors other than a missing document are not contained."""
        (docs_dir / "Broken.md").write_bytes(b"\xff\xfe\xfa invalid utf-8")

        client = await aiohttp_client(app)
        response = await client.get("/Broken")

        assert response.status == 500


class TestAbout:
    """Tests for GET /_About."""

    @pytest.mark.asyncio
    async def test__json__returns_diagnostics(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        client = await aiohttp_client(app)
        response = await client.get("/_About", headers=JSON)

        assert response.status == 200
        data = await response.json()
        assert data["ProcessId"] == os.getpid()
        assert data["RootDirectory"] == str(docs_dir)
        assert data["Version"] == get_version()
        assert Path(data["Location"]).name == "welcomepage"

    @pytest.mark.asyncio
    async def test__html__renders_about_view(
        self, aiohttp_client: Any, app: web.Application, docs_dir: Path
    ) -> None:
        """About works without any documents and takes precedence over pages."""
        (docs_dir / "_About.md").write_text("shadowed")

        client = await aiohttp_client(app)
        response = await client.get("/_About")

        assert response.status == 200
        body = await response.text()
        assert "<title>About</title>" in body
        assert str(docs_dir) in body
        assert "shadowed" not in body


def test__get_version__not_installed__falls_back_to_package_version(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from importlib.metadata import PackageNotFoundError

    import welcomepage

    def _missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr("welcomepage.api.about.version", _missing)

    assert get_version() == welcomepage.__version__


class TestErrorMiddleware:
    """Tests for error_middleware."""

    @pytest.mark.asyncio
    async def test__raised_document_not_found__renders_404(
        self, aiohttp_client: Any
    ) -> None:
        """A DocumentNotFoundError escaping a handler gets the 404 view."""
        from welcomepage.core.errors import DocumentNotFoundError
        from welcomepage.core.types import DocumentNotFound
        from welcomepage.errors import error_middleware
        from welcomepage.views import ViewRenderer

        async def failing(request: web.Request) -> web.Response:
            raise DocumentNotFoundError(DocumentNotFound(file_name="Gone", path=Path("Gone.md")))

        app = web.Application(middlewares=[error_middleware])
        app[views_key] = ViewRenderer()
        app.router.add_get("/_raise", failing)
        client = await aiohttp_client(app)
        response = await client.get("/_raise", headers=JSON)

        assert response.status == 404
        assert await response.json() == {"FileName": "Gone"}
