"""In-memory document store: keyed insert-or-update, point lookup, filtered search"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock

from docstore.core.filters import build_predicate
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.ids import new_id
from docstore.crud.repo import DocumentRepo
from docstore.crud.seed import load_seed

logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    _docs: dict[str, Document] = field(default_factory=dict)
    _lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Seed mapping is copied so later saves never write into the caller's dict.
        self._docs = dict(self._docs)

    @classmethod
    def from_seed(cls, path: str | Path) -> MemoryRepo:
        """Build a store pre-populated from a YAML seed file. Raises ValueError on a bad file."""
        return cls(load_seed(path))

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def save(self, doc: Document) -> Document:
        with self._lock:
            if not doc.id:
                doc = doc.with_id(self._unused_id())
                logger.debug("Assigned id %s to new document %r", doc.id, doc.title)
            replaced = doc.id in self._docs
            self._docs[doc.id] = doc
        logger.debug("%s document %s", "Replaced" if replaced else "Inserted", doc.id)
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        with self._lock:
            snapshot = list(self._docs.values())
        predicate = build_predicate(request)
        results = [doc for doc in snapshot if predicate(doc)]
        logger.debug("Search matched %d of %d document(s)", len(results), len(snapshot))
        return results

    def _unused_id(self) -> str:
        """Generate an id not already present. Caller holds the lock."""
        doc_id = new_id()
        while doc_id in self._docs:
            doc_id = new_id()
        return doc_id
