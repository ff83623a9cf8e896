"""Shared test fixtures."""

from pathlib import Path

import pytest
from welcomepage.config import Config, DocsConfig, ServerConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create an empty markdown root directory."""
    docs = tmp_path / "wiki"
    docs.mkdir(exist_ok=True)
    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(root_directory=docs_dir),
    )
