"""Wiki page endpoints.

`/` serves the default document, `/{id}` serves any markdown file by id.
"""

from aiohttp import web

from welcomepage.app_keys import renderer_key, resolver_key, store_key
from welcomepage.core.types import DocumentId, DocumentNotFound
from welcomepage.errors import render_not_found
from welcomepage.views import respond

PAGE_VIEW = "index"


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/", get_default_page),
        web.get("/{id:.*}", get_page),
    ]


async def get_default_page(request: web.Request) -> web.Response:
    document_id = request.app[resolver_key].find_default_id()
    return _render_page(request, document_id)


async def get_page(request: web.Request) -> web.Response:
    return _render_page(request, DocumentId(request.match_info["id"]))


def _render_page(request: web.Request, document_id: DocumentId) -> web.Response:
    result = request.app[store_key].fetch(document_id)
    if isinstance(result, DocumentNotFound):
        return render_not_found(request, result)

    page = request.app[renderer_key].render_document(result)
    return respond(request, PAGE_VIEW, page.to_dict())
