# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""SPARQL query templates.

Every builder is pure string interpolation: no I/O, no SPARQL parsing.
The remote service parses the text, so the templates are kept verbatim.
Relation queries left-join the label lookups so a missing rdfs:label only
leaves a variable unbound and never drops the underlying triple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from rdflib import URIRef

_RDFS_PREFIX = "PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>"


@dataclass(frozen=True, slots=True)
class Selection:
    """Text of a SELECT query."""

    sparql: str

    @classmethod
    def from_text(cls, text: str) -> Selection:
        return cls(sparql=text)


@dataclass(frozen=True, slots=True)
class DescribeQuery:
    """Text of a DESCRIBE query."""

    sparql: str

    @classmethod
    def from_text(cls, text: str) -> DescribeQuery:
        return cls(sparql=text)


# ── Selections ────────────────────────────────────────────────

def triples() -> Selection:
    """A small sample of triples."""
    return Selection.from_text("SELECT ?s ?p ?o WHERE { ?s ?p ?o } LIMIT 25")


def graphs() -> Selection:
    return Selection.from_text("SELECT DISTINCT ?graph WHERE { GRAPH ?graph { ?s ?p ?o } }")


def resources_from_named_graphs() -> Selection:
    return Selection.from_text("SELECT DISTINCT ?s WHERE { GRAPH ?g { ?s ?p ?o } }")


def relations_from(resource: URIRef) -> Selection:
    """Predicate/object pairs with ``resource`` as subject, labels optional."""
    return Selection.from_text(
        f"""{_RDFS_PREFIX}

SELECT ?predicate ?predicate_label ?object ?object_label
WHERE {{
  GRAPH ?g1 {{ <{resource}> ?predicate ?object }}
  OPTIONAL {{ GRAPH ?g2 {{ ?predicate rdfs:label ?predicate_label }} }}
  OPTIONAL {{ GRAPH ?g3 {{ ?object rdfs:label ?object_label }} }}
}}"""
    )


def relations_to(resource: URIRef) -> Selection:
    """Subject/predicate pairs with ``resource`` as object, labels optional."""
    return Selection.from_text(
        f"""{_RDFS_PREFIX}

SELECT ?subject ?subject_label ?predicate ?predicate_label
WHERE {{
  GRAPH ?g1 {{ ?subject ?predicate <{resource}> }}
  OPTIONAL {{ GRAPH ?g2 {{ ?predicate rdfs:label ?predicate_label }} }}
  OPTIONAL {{ GRAPH ?g3 {{ ?subject rdfs:label ?subject_label }} }}
}}"""
    )


def resources_with_labels() -> Selection:
    """Every IRI in subject, predicate or object position, with its label if any."""
    return Selection.from_text(
        f"""{_RDFS_PREFIX}

SELECT DISTINCT ?resource ?label
WHERE {{
  GRAPH ?graph1 {{
    {{ ?resource ?predicate ?object }}
    UNION
    {{ ?subject ?resource ?object }}
    UNION
    {{ ?subject ?predicate ?resource }}
  }} .
  OPTIONAL {{
    GRAPH ?graph3 {{ ?resource rdfs:label ?label }}
  }} .
  FILTER ( isURI(?resource) )
}}"""
    )


# ── Describe ──────────────────────────────────────────────────

def describe_everything_query(graph_names: Iterable[URIRef]) -> DescribeQuery:
    """DESCRIBE every subject across the given named graphs."""
    sources = " ".join(f"FROM <{g}>" for g in graph_names)
    return DescribeQuery.from_text(f"DESCRIBE ?x {sources} WHERE {{ ?x ?y ?z }}")


# ── Registry ──────────────────────────────────────────────────

# Parameterless selections addressable by name from the command line.
SELECTIONS: dict[str, Callable[[], Selection]] = {
    "triples": triples,
    "graphs": graphs,
    "resources": resources_from_named_graphs,
    "resources-with-labels": resources_with_labels,
}

# Selections that take a resource IRI.
RESOURCE_SELECTIONS: dict[str, Callable[[URIRef], Selection]] = {
    "relations-from": relations_from,
    "relations-to": relations_to,
}
