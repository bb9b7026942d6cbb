"""Tests for data files, graph targets and the local dataset."""

import warnings

from rdflib import URIRef

from graphsite.result import ErrorKind, Fail, Ok
from graphsite.sparql import queries
from graphsite.sparql.local import LocalDataset
from graphsite.sparql.store import DEFAULT_GRAPH, DataFile, DataFormat, GraphStore, GraphTarget
from graphsite.table import ResultTable

from conftest import GRAPH, ex


class TestDataFile:

    def test_format_from_suffix(self, tmp_path):
        ttl = tmp_path / "data.ttl"
        ttl.write_text("<http://a> <http://b> <http://c> .")
        rdf = tmp_path / "data.rdf"
        rdf.write_text("<rdf:RDF xmlns:rdf='http://www.w3.org/1999/02/22-rdf-syntax-ns#'/>")

        assert DataFile.from_path(ttl).data.format is DataFormat.TURTLE
        assert DataFile.from_path(rdf).data.format is DataFormat.RDF_XML

    def test_unknown_suffix(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b")
        result = DataFile.from_path(path)
        assert not result.ok
        assert result.kind is ErrorKind.CONFIG

    def test_missing_file_is_io_error(self, tmp_path):
        result = DataFile.from_path(tmp_path / "missing.ttl")
        assert not result.ok
        assert result.kind is ErrorKind.IO


def test_graph_target():
    assert DEFAULT_GRAPH.is_default
    named = GraphTarget.named("http://example.org/g")
    assert not named.is_default
    assert named.name == URIRef("http://example.org/g")
    assert str(named) == "<http://example.org/g>"


class TestLocalDataset:

    def test_graphs(self, example_store):
        result = example_store.select(queries.graphs())
        assert result.ok
        assert URIRef(GRAPH) in result.data.column("graph")

    def test_triples_sample(self, example_store):
        result = example_store.select(queries.triples())
        assert result.ok
        assert [v.name for v in result.data.variables] == ["s", "p", "o"]

    def test_resources_from_named_graphs(self, example_store):
        result = example_store.select(queries.resources_from_named_graphs())
        assert result.ok
        assert sorted(result.data.column("s")) == [ex("a"), ex("d")]

    def test_resources_with_labels_filters_literals(self, example_store):
        result = example_store.select(queries.resources_with_labels())
        assert result.ok
        assert set(result.data.column("resource")) == {ex(n) for n in "abdefg"}
        assert result.data.column("label") == []

    def test_relations_from_keeps_unlabelled_facts(self, example_store):
        result = example_store.select(queries.relations_from(ex("d")))
        assert result.ok
        pairs = {
            (ResultTable.value(r, "predicate"), ResultTable.value(r, "object"))
            for r in result.data
        }
        assert pairs == {(ex("e"), ex("f")), (ex("g"), ex("a"))}

    def test_bad_turtle(self):
        result = LocalDataset().import_file(DEFAULT_GRAPH, DataFile.from_turtle("not turtle at all"))
        assert not result.ok
        assert result.kind is ErrorKind.PROTOCOL

    def test_describe_everything(self, example_store):
        result = example_store.describe_everything()
        assert result.ok
        assert len(result.data) == 3

    def test_describe_everything_skips_default_graph(self, example_store):
        example_store.import_file(DEFAULT_GRAPH, DataFile.from_turtle("<http://x> <http://y> <http://z> ."))
        assert len(example_store.describe_everything().data) == 3

    def test_default_graph_import_is_warning_free(self):
        store = LocalDataset()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert store.import_file(DEFAULT_GRAPH, DataFile.from_turtle("<http://x> <http://y> <http://z> .")).ok
            assert store.describe_everything().ok
        assert not [w for w in caught if "default_context" in str(w.message)]


class _LiteralGraphs(GraphStore):
    def import_file(self, target, file):
        return Ok(data=None)

    def select(self, selection):
        payload = {
            "head": {"vars": ["graph"]},
            "results": {"bindings": [{"graph": {"type": "literal", "value": "g"}}]},
        }
        return ResultTable.from_response(payload)

    def describe(self, query):
        return Fail(error="should not be reached")


def test_describe_everything_rejects_literal_graph_names():
    result = _LiteralGraphs().describe_everything()
    assert not result.ok
    assert result.kind is ErrorKind.PROTOCOL
