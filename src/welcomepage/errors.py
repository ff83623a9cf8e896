"""Error presentation.

Missing documents are shown as a 404 page naming the requested file. Any
other failure is logged and re-raised so aiohttp answers 500.
"""

import logging

from aiohttp import web
from aiohttp.typedefs import Handler

from welcomepage.core.errors import DocumentNotFoundError
from welcomepage.core.types import DocumentNotFound
from welcomepage.views import respond

logger = logging.getLogger(__name__)

NOT_FOUND_VIEW = "errors/404"


def render_not_found(request: web.Request, missing: DocumentNotFound) -> web.Response:
    logger.info(f"404 {request.path}: {missing.file_name}")
    return respond(request, NOT_FOUND_VIEW, missing.to_dict(), status=404)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except DocumentNotFoundError as e:
        return render_not_found(request, e.missing)
    except Exception:
        logger.exception(f"Unhandled error for {request.method} {request.path}")
        raise
