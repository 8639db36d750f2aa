"""Root test configuration: isolated working directory and the shared seed document set"""

import pytest

from docstore.core.models import Author, Document
from docstore.core.utils.timestamps import parse_iso


SEED_YAML = """\
documents:
  - id: doc1
    title: Introduction to Java
    content: Java is a high-level programming language.
    author: {id: "1", name: Author One}
    created: "2023-01-01T10:00:00Z"
  - id: doc2
    title: Spring Framework
    content: Spring is a popular Java framework.
    author: {id: "2", name: Author Two}
    created: "2023-06-01T12:00:00Z"
  - id: doc3
    title: Microservices Architecture
    content: Microservices are a type of architectural style.
    author: {id: "3", name: Author Three}
    created: "2023-03-15T08:30:00Z"
  - id: doc4
    title: Docker Basics
    content: Docker is a tool designed to make it easier to create, deploy, and run applications.
    author: {id: "4", name: Author Four}
    created: "2023-07-20T14:45:00Z"
"""


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test in an empty directory with no DOCSTORE_* settings leaking in."""
    monkeypatch.chdir(tmp_path)
    for name in ("DOCSTORE_APP_NAME", "DOCSTORE_LOG_LEVEL", "DOCSTORE_SEED_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(name="seed_docs")
def seed_docs_fixture() -> dict[str, Document]:
    """The four reference documents keyed by id."""
    docs = [
        Document(id="doc1", title="Introduction to Java",
                 content="Java is a high-level programming language.",
                 author=Author(id="1", name="Author One"), created=parse_iso("2023-01-01T10:00:00Z")),
        Document(id="doc2", title="Spring Framework",
                 content="Spring is a popular Java framework.",
                 author=Author(id="2", name="Author Two"), created=parse_iso("2023-06-01T12:00:00Z")),
        Document(id="doc3", title="Microservices Architecture",
                 content="Microservices are a type of architectural style.",
                 author=Author(id="3", name="Author Three"), created=parse_iso("2023-03-15T08:30:00Z")),
        Document(id="doc4", title="Docker Basics",
                 content="Docker is a tool designed to make it easier to create, deploy, and run applications.",
                 author=Author(id="4", name="Author Four"), created=parse_iso("2023-07-20T14:45:00Z")),
    ]
    return {d.id: d for d in docs}


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path):
    """The reference documents written as a YAML seed file."""
    p = tmp_path / "seed.yaml"
    p.write_text(SEED_YAML, encoding="utf-8")
    return p
