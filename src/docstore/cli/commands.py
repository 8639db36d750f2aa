"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.models import SearchRequest
from docstore.core.utils.timestamps import parse_iso
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.seed import dump_seed
from docstore.log import setup_logging


SeedOption = Annotated[Optional[str], typer.Option("--seed", "-s", help="YAML seed file (default: seed_file setting)")]
LogLevelOption = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _store(settings: Settings) -> MemoryRepo:
    """Build the store from the configured seed file."""
    if not settings.seed_file:
        _fail("No seed file given. Pass --seed or set DOCSTORE_SEED_FILE.")
    try:
        return MemoryRepo.from_seed(settings.seed_file)
    except ValueError as e:
        _fail(str(e))


def _timestamp(value: Optional[str], option: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return parse_iso(value)
    except ValueError as e:
        _fail(f"{option} is not an ISO-8601 timestamp: {value!r}", e)


def search_cmd(
    seed: SeedOption = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id equals (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Created strictly after (ISO-8601)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Created strictly before (ISO-8601)")] = None,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Also write matches to this seed file")] = None,
    log_level: LogLevelOption = None,
    ):
    """Print documents matching every given filter as JSON lines; no filters prints all."""
    settings = _settings(overrides={"seed_file": seed, "log_level": log_level})
    store = _store(settings)
    if out and Path(out).resolve() == Path(settings.seed_file).resolve():
        _fail(f"--out must not overwrite the seed file {settings.seed_file}")
    request = SearchRequest(
        title_prefixes=title_prefixes,
        contains_contents=contains,
        author_ids=author_ids,
        created_from=_timestamp(created_from, "--created-from"),
        created_to=_timestamp(created_to, "--created-to"),
    )

    results = store.search(request)
    for doc in results:
        typer.echo(doc.model_dump_json())
    if out:
        try:
            dump_seed({doc.id: doc for doc in results}, out)
        except ValueError as e:
            _fail(str(e))
        typer.echo(f"Wrote {len(results)} document(s) to {out}", err=True)
    typer.echo(f"{len(results)} of {len(store)} document(s) matched", err=True)


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: SeedOption = None,
    log_level: LogLevelOption = None,
    ):
    """Print a single document as JSON."""
    settings = _settings(overrides={"seed_file": seed, "log_level": log_level})
    doc = _store(settings).find_by_id(doc_id)
    if doc is None:
        _fail(f"Document not found: {doc_id}")
    typer.echo(doc.model_dump_json(indent=2))
