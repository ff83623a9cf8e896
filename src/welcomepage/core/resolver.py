"""Default document resolution for the site root."""

import logging
from collections.abc import Sequence

from welcomepage.core.errors import DefaultDocumentNotFoundError
from welcomepage.core.store import DocumentStore
from welcomepage.core.types import DocumentId

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_CANDIDATES: tuple[str, ...] = (
    "Index",  # plain convention
    "Home",  # GitHub wiki
    "README",  # GitHub project
)


class DefaultDocumentResolver:
    """Picks the document served for `/`.

    Candidates are probed in order through the store, so the chosen id is
    always one the store will serve.
    """

    def __init__(
        self,
        store: DocumentStore,
        candidates: Sequence[str] = DEFAULT_DOCUMENT_CANDIDATES,
    ) -> None:
        self._store = store
        self._candidates = tuple(candidates)

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._candidates

    def find_default_id(self) -> DocumentId:
        """Return the id of the first candidate with a markdown file.

        Raises:
            DefaultDocumentNotFoundError: If none of the candidates exist
        """
        for candidate in self._candidates:
            document_id = DocumentId(candidate)
            if self._store.exists(document_id):
                logger.debug(f"Default document: {candidate}")
                return document_id

        raise DefaultDocumentNotFoundError(self._store.root_directory, self._candidates)
