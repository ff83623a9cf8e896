"""View rendering for HTML pages.

Templates are bundled in the package and rendered with Jinja2. Clients that
ask for JSON get the view model instead of the rendered template.
"""

from importlib.resources import files
from pathlib import Path
from typing import Any

from aiohttp import web
from jinja2 import Environment, FileSystemLoader, select_autoescape


def get_templates_dir() -> Path:
    """Return path to bundled templates.

    Raises:
        FileNotFoundError: If templates are not bundled.
    """
    templates = files("welcomepage").joinpath("templates")
    if not templates.is_dir():
        raise FileNotFoundError("Bundled templates not found.")
    return Path(str(templates))


class ViewRenderer:
    """Renders named views (e.g., "index", "errors/404") to HTML."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._templates_dir = templates_dir or get_templates_dir()
        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_dir)),
            autoescape=select_autoescape(),
        )

    @property
    def templates_dir(self) -> Path:
        return self._templates_dir

    def render(self, view: str, model: dict[str, Any]) -> str:
        template = self._env.get_template(f"{view}.html")
        return template.render(model=model)


views_key = web.AppKey("views", ViewRenderer)


def wants_json(request: web.Request) -> bool:
    accept = request.headers.get("Accept", "")
    return "application/json" in accept and "text/html" not in accept


def respond(
    request: web.Request,
    view: str,
    model: dict[str, Any],
    *,
    status: int = 200,
) -> web.Response:
    """Render a view model as HTML, or as JSON when the client asks for it."""
    if wants_json(request):
        return web.json_response(model, status=status)

    html = request.app[views_key].render(view, model)
    return web.Response(text=html, status=status, content_type="text/html")
