"""Composite document predicate derived from a SearchRequest"""

from typing import Callable, Optional

from docstore.core.models import Document, SearchRequest


Predicate = Callable[[Document], bool]


def _title_prefix(prefixes: tuple[str, ...]) -> Predicate:
    return lambda doc: any(doc.title.startswith(p) for p in prefixes)


def _contains_content(needles: tuple[str, ...]) -> Predicate:
    return lambda doc: any(n in doc.content for n in needles)


def _author_id(author_ids: tuple[str, ...]) -> Predicate:
    wanted = set(author_ids)
    return lambda doc: doc.author.id in wanted


def build_predicate(request: Optional[SearchRequest]) -> Predicate:
    """Return a predicate accepting documents that satisfy every present criterion.

    A None request, or one with no criteria set, accepts every document.
    """
    if request is None:
        return lambda doc: True

    checks: list[Predicate] = []
    if request.title_prefixes:
        checks.append(_title_prefix(request.title_prefixes))
    if request.contains_contents:
        checks.append(_contains_content(request.contains_contents))
    if request.author_ids:
        checks.append(_author_id(request.author_ids))
    if request.created_from is not None:
        lower = request.created_from
        checks.append(lambda doc: doc.created > lower)
    if request.created_to is not None:
        upper = request.created_to
        checks.append(lambda doc: doc.created < upper)

    return lambda doc: all(check(doc) for check in checks)
