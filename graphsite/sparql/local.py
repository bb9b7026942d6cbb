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

"""In-process graph store backed by an rdflib Dataset.

Answers the same operations as a Fuseki dataset without a server, so a
site can be built straight from local files. SELECT results go through
the SPARQL JSON results format, the same decoding path the HTTP client
uses.
"""

from __future__ import annotations

import json
import threading

from rdflib import Dataset, Graph

from graphsite.logger import get_logger
from graphsite.result import ErrorKind, Fail, Ok, Result
from graphsite.sparql.queries import DescribeQuery, Selection
from graphsite.sparql.store import DataFile, GraphStore, GraphTarget
from graphsite.table import ResultTable

log = get_logger(__name__)


class LocalDataset(GraphStore):
    def __init__(self) -> None:
        self._dataset = Dataset()
        # rdflib's query parser keeps shared state; one query at a time.
        self._lock = threading.Lock()

    def import_file(self, target: GraphTarget, file: DataFile) -> Result[None]:
        if target.is_default:
            graph = self._dataset.default_graph
        else:
            graph = self._dataset.graph(target.name)

        with self._lock:
            before = len(graph)
            try:
                graph.parse(data=file.content, format=file.format.rdflib_format)
            except Exception as exc:
                return Fail(
                    error=f"Could not parse {file.format.media_type} data: {type(exc).__name__}: {exc}",
                    kind=ErrorKind.PROTOCOL,
                )
            added = len(graph) - before

        log.info("Imported %d triples into %s", added, target)
        return Ok(data=None)

    def select(self, selection: Selection) -> Result[ResultTable]:
        with self._lock:
            try:
                raw = self._dataset.query(selection.sparql).serialize(format="json")
            except Exception as exc:
                return Fail(
                    error=f"Local query failed: {type(exc).__name__}: {exc}",
                    context=selection.sparql,
                    kind=ErrorKind.PROTOCOL,
                )

        table = ResultTable.from_response(json.loads(raw))
        if table.ok:
            log.info("Local query returned %d bindings", len(table.data))
        return table

    def describe(self, query: DescribeQuery) -> Result[Graph]:
        with self._lock:
            try:
                result = self._dataset.query(query.sparql)
            except Exception as exc:
                return Fail(
                    error=f"Local describe failed: {type(exc).__name__}: {exc}",
                    context=query.sparql,
                    kind=ErrorKind.PROTOCOL,
                )

        graph = Graph()
        if result.graph is not None:
            for triple in result.graph:
                graph.add(triple)
        return Ok(data=graph)

    def describe_everything(self) -> Result[Graph]:
        """Every triple of every named graph.

        DESCRIBE over all subjects of all named graphs covers every triple,
        so the graphs are copied directly instead of resolving FROM clauses.
        """
        graph = Graph()
        with self._lock:
            for context in self._dataset.graphs():
                if context.identifier == self._dataset.default_graph.identifier:
                    continue
                for triple in context:
                    graph.add(triple)
        log.info("Described %d triples", len(graph))
        return Ok(data=graph)
