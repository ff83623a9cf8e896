"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from welcomepage.core.renderer import MarkdownRenderer
from welcomepage.core.resolver import DefaultDocumentResolver
from welcomepage.core.store import DocumentStore
from welcomepage.views import views_key

root_directory_key = web.AppKey("root_directory", Path)
store_key = web.AppKey("store", DocumentStore)
renderer_key = web.AppKey("renderer", MarkdownRenderer)
resolver_key = web.AppKey("resolver", DefaultDocumentResolver)

__all__ = ["renderer_key", "resolver_key", "root_directory_key", "store_key", "views_key"]
