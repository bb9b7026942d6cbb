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

"""HTML rendering of resource and index pages.

Relation rows become edges; every node of an edge is resolved through
the catalog into one of three link kinds:

  resource    URI known to the catalog → hyperlink to its page
  unresolved  URI missing from the catalog → placeholder anchor, no href
  literal     literal value → plain text

Templates live in graphsite/templates and are rendered with Jinja2
autoescaping, so IRIs and literal text are always HTML-escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from rdflib import Literal, URIRef

from graphsite.catalog import CatalogEntry, ResourceCatalog
from graphsite.result import ErrorKind, Fail, Ok, Result
from graphsite.table import ResultTable

INDEX_FILENAME = "index.html"
STYLESHEET = "main.css"
INDEX_TITLE = "Index"

_env = Environment(
    loader=PackageLoader("graphsite", "templates"),
    autoescape=select_autoescape(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


class LinkKind(str, Enum):
    RESOURCE = "resource"
    UNRESOLVED = "unresolved"
    LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class Link:
    kind: LinkKind
    text: str
    href: str | None = None
    iri: str | None = None


@dataclass(frozen=True, slots=True)
class Edge:
    """One relation on a page, in reading order (left → right or left ← right)."""

    first: Link
    second: Link

    def sort_key(self) -> tuple[str, str, str, str]:
        return (self.first.text, self.first.iri or "", self.second.text, self.second.iri or "")


def classify(node: URIRef | Literal, catalog: ResourceCatalog) -> LinkKind:
    if isinstance(node, Literal):
        return LinkKind.LITERAL
    if node in catalog:
        return LinkKind.RESOURCE
    return LinkKind.UNRESOLVED


def resolve_link(node: URIRef | Literal, label: Any | None, catalog: ResourceCatalog) -> Link:
    """Turn a bound node into a Link.

    ``label`` is the row's own label column; only unresolved URIs use it,
    known resources always show their catalog label.
    """
    match classify(node, catalog):
        case LinkKind.RESOURCE:
            entry = catalog[node]
            return Link(LinkKind.RESOURCE, entry.label, href=entry.filename, iri=str(node))
        case LinkKind.UNRESOLVED:
            text = str(label) if isinstance(label, Literal) and str(label) else str(node)
            return Link(LinkKind.UNRESOLVED, text, iri=str(node))
        case LinkKind.LITERAL:
            return Link(LinkKind.LITERAL, str(node))


# ── Edges ─────────────────────────────────────────────────────

def _required(row: dict, column: str, uri_only: bool) -> Result[URIRef | Literal]:
    node = ResultTable.value(row, column)
    if node is None:
        return Fail(error=f"Column '{column}' is unbound", context=row, kind=ErrorKind.PROTOCOL)
    if uri_only and not isinstance(node, URIRef):
        return Fail(
            error=f"Expected an IRI in column '{column}', got {node!r}",
            context=row,
            kind=ErrorKind.PROTOCOL,
        )
    return Ok(data=node)


def _edges(
    table: ResultTable,
    catalog: ResourceCatalog,
    first: str,
    second: str,
    second_uri_only: bool,
) -> Result[list[Edge]]:
    """Resolve (first, second) column pairs; duplicate node pairs collapse to one edge."""
    edges: dict[tuple[Any, Any], Edge] = {}

    for row in table:
        a = _required(row, first, uri_only=True)
        if not a.ok:
            return a
        b = _required(row, second, uri_only=second_uri_only)
        if not b.ok:
            return b

        edge = Edge(
            first=resolve_link(a.data, ResultTable.value(row, f"{first}_label"), catalog),
            second=resolve_link(b.data, ResultTable.value(row, f"{second}_label"), catalog),
        )
        key = (a.data, b.data)
        seen = edges.get(key)
        if seen is None or edge.sort_key() < seen.sort_key():
            edges[key] = edge

    return Ok(data=sorted(edges.values(), key=Edge.sort_key))


def edges_from(table: ResultTable, catalog: ResourceCatalog) -> Result[list[Edge]]:
    """Outgoing edges: predicate → object."""
    return _edges(table, catalog, "predicate", "object", second_uri_only=False)


def edges_to(table: ResultTable, catalog: ResourceCatalog) -> Result[list[Edge]]:
    """Incoming edges: subject ← predicate."""
    return _edges(table, catalog, "subject", "predicate", second_uri_only=True)


# ── Pages ─────────────────────────────────────────────────────

def render_resource_page(
    resource: URIRef,
    entry: CatalogEntry,
    outgoing: list[Edge],
    incoming: list[Edge],
) -> str:
    return _env.get_template("resource.html").render(
        title=entry.label,
        iri=str(resource),
        outgoing=outgoing,
        incoming=incoming,
        index=INDEX_FILENAME,
        stylesheet=STYLESHEET,
    )


def render_index_page(catalog: ResourceCatalog) -> str:
    return _env.get_template("index.html").render(
        title=INDEX_TITLE,
        entries=[entry for _, entry in catalog.sorted_items()],
        stylesheet=STYLESHEET,
    )
