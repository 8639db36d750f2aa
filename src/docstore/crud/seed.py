"""YAML seed files: pre-populate a store from, or snapshot it to, a list of documents"""

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.core.utils.ids import new_id
from docstore.core.utils.timestamps import format_iso

logger = logging.getLogger(__name__)


def _read(path: Path) -> list[Any]:
    """Return the raw `documents` list from a seed file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, dict) or not isinstance(data.get("documents", []), list):
        raise ValueError(f"Invalid seed file {path}: expected a mapping with a 'documents' list")
    return data.get("documents") or []


def load_seed(path: str | Path) -> dict[str, Document]:
    """Load an id -> Document mapping from a YAML seed file.

    Entries without an id are keyed under a generated one; a repeated id keeps the last entry.
    Raises ValueError if the file is unreadable, malformed, or holds an invalid document.
    """
    path = Path(path)
    docs: dict[str, Document] = {}
    for i, raw in enumerate(_read(path)):
        try:
            doc = Document.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid seed file {path}: document #{i}: {e}") from e
        if not doc.id:
            doc = doc.with_id(new_id())
        docs[doc.id] = doc
    logger.info("Loaded %d document(s) from %s", len(docs), path)
    return docs


def dump_seed(docs: Mapping[str, Document], path: str | Path) -> Path:
    """Write docs to path in seed file format and return the path. Raises ValueError if unwritable."""
    path = Path(path)
    entries = []
    for doc in docs.values():
        entry = doc.model_dump()
        entry["created"] = format_iso(doc.created)
        entries.append(entry)
    try:
        path.write_text(yaml.safe_dump({"documents": entries}, sort_keys=False, allow_unicode=True), encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot write seed file {path}: {e}") from e
    return path
