"""Shared fixtures for crud unit tests"""

import pytest

from docstore.crud.memory_repo import MemoryRepo


@pytest.fixture(name="store")
def store_fixture(seed_docs):
    """A store pre-populated with the four reference documents."""
    return MemoryRepo(seed_docs)


@pytest.fixture(name="empty_store")
def empty_store_fixture():
    return MemoryRepo()
