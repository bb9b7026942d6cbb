"""Tests for SPARQL query templates."""

from rdflib import URIRef

from graphsite.sparql import queries


def test_triples_is_bounded():
    assert queries.triples().sparql == "SELECT ?s ?p ?o WHERE { ?s ?p ?o } LIMIT 25"


def test_graphs():
    assert queries.graphs().sparql == "SELECT DISTINCT ?graph WHERE { GRAPH ?graph { ?s ?p ?o } }"


def test_resources_are_distinct_subjects():
    assert queries.resources_from_named_graphs().sparql == "SELECT DISTINCT ?s WHERE { GRAPH ?g { ?s ?p ?o } }"


def test_relations_from_text():
    text = queries.relations_from(URIRef("http://example.org/#d")).sparql
    assert text == (
        "PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>\n"
        "\n"
        "SELECT ?predicate ?predicate_label ?object ?object_label\n"
        "WHERE {\n"
        "  GRAPH ?g1 { <http://example.org/#d> ?predicate ?object }\n"
        "  OPTIONAL { GRAPH ?g2 { ?predicate rdfs:label ?predicate_label } }\n"
        "  OPTIONAL { GRAPH ?g3 { ?object rdfs:label ?object_label } }\n"
        "}"
    )


def test_relations_to_puts_resource_in_object_position():
    text = queries.relations_to(URIRef("http://example.org/#a")).sparql
    assert "GRAPH ?g1 { ?subject ?predicate <http://example.org/#a> }" in text
    assert "SELECT ?subject ?subject_label ?predicate ?predicate_label" in text
    assert "OPTIONAL { GRAPH ?g3 { ?subject rdfs:label ?subject_label } }" in text


def test_resources_with_labels_covers_every_position():
    text = queries.resources_with_labels().sparql
    assert "SELECT DISTINCT ?resource ?label" in text
    assert "{ ?resource ?predicate ?object }" in text
    assert "{ ?subject ?resource ?object }" in text
    assert "{ ?subject ?predicate ?resource }" in text
    assert "FILTER ( isURI(?resource) )" in text
    assert "GRAPH ?graph3 { ?resource rdfs:label ?label }" in text


def test_describe_everything_query():
    query = queries.describe_everything_query([URIRef("http://g/1"), URIRef("http://g/2")])
    assert query.sparql == "DESCRIBE ?x FROM <http://g/1> FROM <http://g/2> WHERE { ?x ?y ?z }"


def test_registries_build_selections():
    for build in queries.SELECTIONS.values():
        assert build().sparql.lstrip().startswith(("SELECT", "PREFIX"))
    for build in queries.RESOURCE_SELECTIONS.values():
        assert "<http://example.org/#x>" in build(URIRef("http://example.org/#x")).sparql
