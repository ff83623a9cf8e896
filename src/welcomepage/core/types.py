"""Core type definitions."""

from dataclasses import dataclass
from pathlib import Path
from typing import NewType

# Logical document identifier as it appears in the URL (e.g., "Home", "guides/Setup")
# Distinct from filesystem Path to catch type mismatches
DocumentId = NewType("DocumentId", str)


@dataclass(frozen=True)
class Document:
    """Markdown source loaded from the root directory."""

    title: str
    content: str


@dataclass(frozen=True)
class RenderedPage:
    """Page view model with HTML content."""

    title: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"Title": self.title, "Content": self.content}


@dataclass(frozen=True)
class DocumentNotFound:
    """Fetch outcome for a document with no backing markdown file."""

    file_name: str
    path: Path

    def to_dict(self) -> dict[str, str]:
        return {"FileName": self.file_name}


FetchResult = Document | DocumentNotFound
