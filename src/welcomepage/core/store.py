"""Markdown document store.

Reads `{root_directory}/{id}.md` files. No caching: every fetch hits the disk.
"""

import logging
import os
from pathlib import Path

from welcomepage.core.errors import DocumentNotFoundError
from welcomepage.core.types import Document, DocumentId, DocumentNotFound, FetchResult

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class DocumentStore:
    """Resolves document identifiers to markdown sources under a root directory."""

    def __init__(self, root_directory: Path) -> None:
        """Initialize store.

        Args:
            root_directory: Directory containing `<Id>.md` files
        """
        self._root_directory = root_directory

    @property
    def root_directory(self) -> Path:
        """Directory containing markdown sources."""
        return self._root_directory

    def source_path(self, document_id: DocumentId) -> Path:
        """Return the markdown file path for a document id.

        The id may contain `/` separators for nested documents.
        """
        return self._root_directory / f"{document_id}{MARKDOWN_SUFFIX}"

    def exists(self, document_id: DocumentId) -> bool:
        """Return True when the id names a markdown file inside the root directory."""
        source_path = self.source_path(document_id)
        return self._is_inside_root(source_path) and source_path.is_file()

    def fetch(self, document_id: DocumentId) -> FetchResult:
        """Load a document.

        Args:
            document_id: Document id without the .md extension (e.g., "Home", "guides/Setup")

        Returns:
            Document with title and raw markdown content, or DocumentNotFound
            carrying the requested id when there is no such file inside the
            root directory.

        Raises:
            OSError: If the file exists but cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        source_path = self.source_path(document_id)
        if not self._is_inside_root(source_path):
            logger.warning(f"Rejected document id outside root directory: {document_id!r}")
            return DocumentNotFound(file_name=document_id, path=source_path)

        if not source_path.is_file():
            logger.debug(f"Document not found: {source_path}")
            return DocumentNotFound(file_name=document_id, path=source_path)

        logger.debug(f"Reading document {document_id!r} from {source_path}")
        content = source_path.read_text(encoding="utf-8-sig")
        return Document(title=_title_from_id(document_id), content=content)

    def get_document(self, document_id: DocumentId) -> Document:
        """Load a document, raising when it does not exist.

        Raises:
            DocumentNotFoundError: If there is no markdown file for the id
        """
        result = self.fetch(document_id)
        if isinstance(result, DocumentNotFound):
            raise DocumentNotFoundError(result)
        return result

    def _is_inside_root(self, source_path: Path) -> bool:
        # Lexical check: rejects ".." escapes but follows symlinks placed inside the root
        root = Path(os.path.abspath(self._root_directory))
        return Path(os.path.abspath(source_path)).is_relative_to(root)


def _title_from_id(document_id: DocumentId) -> str:
    # Documents are named after their file: "guides/Setup" -> "Setup"
    return document_id.rstrip("/").rsplit("/", 1)[-1]
