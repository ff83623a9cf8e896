"""Diagnostics endpoint."""

import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from aiohttp import web

import welcomepage
from welcomepage.app_keys import root_directory_key
from welcomepage.views import respond

ABOUT_VIEW = "about"
DISTRIBUTION_NAME = "welcomepage"


def create_about_routes() -> list[web.RouteDef]:
    return [web.get("/_About", get_about)]


async def get_about(request: web.Request) -> web.Response:
    model = {
        "ProcessId": os.getpid(),
        "Location": str(Path(welcomepage.__file__).resolve().parent),
        "RootDirectory": str(request.app[root_directory_key]),
        "Version": get_version(),
    }
    return respond(request, ABOUT_VIEW, model)


def get_version() -> str:
    """Return the installed distribution version, else the package version."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return welcomepage.__version__
