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

"""Graph store contract shared by the HTTP and in-process datasets.

A store imports data files into graphs, answers SELECT queries with a
ResultTable and DESCRIBE queries with an rdflib Graph.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rdflib import Graph, URIRef

from graphsite.logger import get_logger
from graphsite.result import ErrorKind, Fail, Ok, Result
from graphsite.sparql.queries import DescribeQuery, Selection, describe_everything_query, graphs
from graphsite.table import ResultTable

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GraphTarget:
    """The default graph (name=None) or a named graph."""

    name: URIRef | None = None

    @classmethod
    def named(cls, iri: str) -> GraphTarget:
        return cls(name=URIRef(iri))

    @property
    def is_default(self) -> bool:
        return self.name is None

    def __str__(self) -> str:
        return "default graph" if self.name is None else f"<{self.name}>"


DEFAULT_GRAPH = GraphTarget()


class DataFormat(Enum):
    TURTLE = ("text/turtle", "turtle")
    RDF_XML = ("application/rdf+xml", "xml")

    def __init__(self, media_type: str, rdflib_format: str) -> None:
        self.media_type = media_type
        self.rdflib_format = rdflib_format


_SUFFIXES = {
    ".ttl": DataFormat.TURTLE,
    ".rdf": DataFormat.RDF_XML,
    ".owl": DataFormat.RDF_XML,
    ".xml": DataFormat.RDF_XML,
}


@dataclass(frozen=True, slots=True)
class DataFile:
    """Raw content of an RDF file plus its serialization format."""

    content: bytes
    format: DataFormat

    @classmethod
    def from_turtle(cls, text: str) -> DataFile:
        return cls(content=text.encode("utf-8"), format=DataFormat.TURTLE)

    @classmethod
    def from_path(cls, path: Path) -> Result[DataFile]:
        """Read a data file, picking the format from its suffix."""
        fmt = _SUFFIXES.get(path.suffix.lower())
        if fmt is None:
            known = ", ".join(sorted(_SUFFIXES))
            return Fail(
                error=f"Unknown RDF file type '{path.suffix}' (known: {known})",
                context=str(path),
                kind=ErrorKind.CONFIG,
            )
        try:
            content = path.read_bytes()
        except OSError as exc:
            return Fail(error=f"Cannot read data file: {exc}", context=str(path), kind=ErrorKind.IO)
        return Ok(data=cls(content=content, format=fmt))


class GraphStore(ABC):
    """A collection of RDF graphs."""

    @abstractmethod
    def import_file(self, target: GraphTarget, file: DataFile) -> Result[None]:
        """Load a data file into the target graph."""

    @abstractmethod
    def select(self, selection: Selection) -> Result[ResultTable]:
        """Run a SELECT query."""

    @abstractmethod
    def describe(self, query: DescribeQuery) -> Result[Graph]:
        """Run a DESCRIBE query."""

    def describe_everything(self) -> Result[Graph]:
        """Describe every subject of every named graph in the store."""
        table_result = self.select(graphs())
        if not table_result.ok:
            return table_result.within("Listing graphs")

        names: list[URIRef] = []
        for row in table_result.data:
            node = ResultTable.value(row, "graph")
            if not isinstance(node, URIRef):
                return Fail(
                    error=f"Expected a graph IRI, got {node!r}",
                    kind=ErrorKind.PROTOCOL,
                )
            names.append(node)

        log.info("Describing %d named graphs", len(names))
        return self.describe(describe_everything_query(names))
