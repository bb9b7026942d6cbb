"""Shared test fixtures for the graphsite test suite."""

import pytest
from rdflib import URIRef

from graphsite.sink import MemorySink
from graphsite.sparql.local import LocalDataset
from graphsite.sparql.store import DataFile, GraphTarget

EX = "http://example.org/#"
GRAPH = "http://example.org/graph/test"

EXAMPLE_TURTLE = """
@prefix ex: <http://example.org/#> .

ex:a ex:b "c" .
ex:d ex:e ex:f .
ex:d ex:g ex:a .
"""


def ex(name: str) -> URIRef:
    return URIRef(EX + name)


def uri(value: str) -> dict:
    return {"type": "uri", "value": value}


def literal(value: str, **extra) -> dict:
    return {"type": "literal", "value": value, **extra}


@pytest.fixture
def example_store():
    """Local dataset holding the three example triples in one named graph."""
    store = LocalDataset()
    result = store.import_file(GraphTarget.named(GRAPH), DataFile.from_turtle(EXAMPLE_TURTLE))
    assert result.ok, result
    return store


@pytest.fixture
def sink():
    return MemorySink()
