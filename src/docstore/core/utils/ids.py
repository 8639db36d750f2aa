"""Identifier generation for documents saved without an id"""

from uuid import uuid4


def new_id() -> str:
    """Return a random 128-bit identifier as a canonical UUID string."""
    return str(uuid4())
