"""Tests for link resolution and page rendering."""

from rdflib import Literal

from graphsite.catalog import CatalogEntry, ResourceCatalog, filename_for
from graphsite.render import (
    INDEX_FILENAME,
    STYLESHEET,
    LinkKind,
    edges_from,
    edges_to,
    render_index_page,
    render_resource_page,
    resolve_link,
)
from graphsite.result import ErrorKind
from graphsite.table import ResultTable

from conftest import ex, literal, uri


def _catalog(**labels):
    return ResourceCatalog({
        ex(name): CatalogEntry(label=label, filename=filename_for(ex(name)))
        for name, label in labels.items()
    })


def _table(variables, bindings):
    result = ResultTable.from_response({"head": {"vars": variables}, "results": {"bindings": bindings}})
    assert result.ok
    return result.data


class TestResolveLink:

    def test_known_resource_links_to_its_page(self):
        link = resolve_link(ex("a"), None, _catalog(a="Alpha"))
        assert link.kind is LinkKind.RESOURCE
        assert link.href == filename_for(ex("a"))
        assert link.text == "Alpha"

    def test_catalog_label_beats_row_label(self):
        link = resolve_link(ex("a"), Literal("other"), _catalog(a="Alpha"))
        assert link.text == "Alpha"

    def test_unknown_uri_is_placeholder(self):
        link = resolve_link(ex("nowhere"), None, _catalog(a="Alpha"))
        assert link.kind is LinkKind.UNRESOLVED
        assert link.href is None
        assert link.text == "http://example.org/#nowhere"

    def test_unknown_uri_uses_row_label(self):
        link = resolve_link(ex("nowhere"), Literal("Somewhere"), _catalog())
        assert link.text == "Somewhere"
        assert link.iri == "http://example.org/#nowhere"

    def test_literal_is_plain_text(self):
        link = resolve_link(Literal("c"), None, _catalog(a="Alpha"))
        assert link.kind is LinkKind.LITERAL
        assert link.text == "c"
        assert link.href is None


class TestEdges:

    def test_outgoing_edges_sorted_and_deduplicated(self):
        table = _table(
            ["predicate", "predicate_label", "object", "object_label"],
            [
                {"predicate": uri(ex("g")), "object": uri(ex("a"))},
                {"predicate": uri(ex("e")), "object": uri(ex("f"))},
                {"predicate": uri(ex("e")), "object": uri(ex("f"))},
            ],
        )
        result = edges_from(table, _catalog(a="a", e="e", f="f", g="g"))
        assert result.ok
        assert [(e.first.text, e.second.text) for e in result.data] == [("e", "f"), ("g", "a")]

    def test_missing_object_label_is_fine(self):
        table = _table(
            ["predicate", "predicate_label", "object", "object_label"],
            [{"predicate": uri(ex("b")), "predicate_label": literal("bee"), "object": literal("c")}],
        )
        result = edges_from(table, _catalog())
        assert result.ok
        edge = result.data[0]
        assert edge.first.kind is LinkKind.UNRESOLVED
        assert edge.first.text == "bee"
        assert edge.second.kind is LinkKind.LITERAL

    def test_literal_subject_is_protocol_violation(self):
        table = _table(
            ["subject", "subject_label", "predicate", "predicate_label"],
            [{"subject": literal("not an iri"), "predicate": uri(ex("g"))}],
        )
        result = edges_to(table, _catalog())
        assert not result.ok
        assert result.kind is ErrorKind.PROTOCOL
        assert "not an iri" in result.error

    def test_unbound_predicate_is_protocol_violation(self):
        table = _table(
            ["predicate", "predicate_label", "object", "object_label"],
            [{"object": literal("c")}],
        )
        result = edges_from(table, _catalog())
        assert not result.ok
        assert "predicate" in result.error


class TestPages:

    def test_resource_page_structure(self):
        catalog = _catalog(a="Alpha & Co", f="Eff")
        table = _table(
            ["predicate", "predicate_label", "object", "object_label"],
            [
                {"predicate": uri(ex("e")), "object": uri(ex("f"))},
                {"predicate": uri(ex("b")), "object": literal("<c>")},
            ],
        )
        outgoing = edges_from(table, catalog).data
        page = render_resource_page(ex("a"), catalog[ex("a")], outgoing, [])

        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Alpha &amp; Co</title>" in page
        assert "<h1>Alpha &amp; Co</h1>" in page
        assert f'<link rel="stylesheet" href="{STYLESHEET}">' in page
        assert f'<a href="{INDEX_FILENAME}">Index</a>' in page
        assert f'<a href="{filename_for(ex("f"))}">Eff</a>' in page
        assert '<a class="unresolved" title="http://example.org/#e">http://example.org/#e</a>' in page
        assert '<span class="literal">&lt;c&gt;</span>' in page
        assert page.count('<li class="from">') == 2

    def test_incoming_edges_use_left_arrow(self):
        catalog = _catalog(a="a", d="d", g="g")
        table = _table(
            ["subject", "subject_label", "predicate", "predicate_label"],
            [{"subject": uri(ex("d")), "predicate": uri(ex("g"))}],
        )
        incoming = edges_to(table, catalog).data
        page = render_resource_page(ex("a"), catalog[ex("a")], [], incoming)
        d, g = filename_for(ex("d")), filename_for(ex("g"))
        assert f'<li class="to"><a href="{d}">d</a> ← <a href="{g}">g</a></li>' in page

    def test_index_lists_every_entry_once(self):
        catalog = _catalog(a="A", b="B", c="C")
        page = render_index_page(catalog)
        for resource, entry in catalog.items():
            assert page.count(f'<a href="{entry.filename}">{entry.label}</a>') == 1
        assert page.count("<li>") == 3
