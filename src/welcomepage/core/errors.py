"""Error types raised by the document layer and configuration."""

from collections.abc import Iterable
from pathlib import Path

from welcomepage.core.types import DocumentNotFound


class ConfigurationError(ValueError):
    """Required configuration is missing or blank."""


class DocumentNotFoundError(FileNotFoundError):
    """Requested document has no markdown file under the root directory."""

    def __init__(self, missing: DocumentNotFound) -> None:
        super().__init__(f"Document not found: {missing.file_name} ({missing.path})")
        self.missing = missing

    @property
    def file_name(self) -> str:
        return self.missing.file_name


class DefaultDocumentNotFoundError(FileNotFoundError):
    """None of the default document candidates exist in the root directory."""

    def __init__(self, root_directory: Path, candidates: Iterable[str]) -> None:
        self.root_directory = root_directory
        self.candidates = tuple(candidates)
        considered = ", ".join(f"'{c}'" for c in self.candidates)
        super().__init__(
            f"Cannot find default document in root directory '{root_directory}'. "
            f"Considered {considered}."
        )
