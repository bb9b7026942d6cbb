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

"""Tabular model of SELECT results.

A ResultTable keeps the declared columns in query order and one mapping
per solution. Rows are partial: a variable left unbound by an OPTIONAL
clause is simply missing from that row.

Nodes are rdflib terms: URIRef for URI nodes, Literal for literal nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Sequence, TypeVar

from rdflib import Literal, URIRef

from graphsite.result import ErrorKind, Fail, Ok, Result

T = TypeVar("T")

Node = URIRef | Literal


@dataclass(frozen=True, slots=True)
class Variable:
    """A named output slot of a query."""

    name: str

    def __str__(self) -> str:
        return self.name


Row = dict[Variable, Any]


@dataclass(frozen=True)
class ResultTable:
    variables: list[Variable]
    rows: list[Row] = field(default_factory=list)

    @classmethod
    def from_bindings(
        cls,
        variables: Sequence[str],
        bindings: Sequence[Mapping[str, Any]],
        transform: Callable[[Any], Result[T]],
    ) -> Result[ResultTable]:
        """Build a table from raw string-keyed rows.

        ``transform`` converts each bound value. A row naming a variable
        outside ``variables`` is a malformed response.
        """
        columns = [Variable(name) for name in variables]
        declared = set(variables)
        rows: list[Row] = []

        for index, binding in enumerate(bindings):
            row: Row = {}
            for name, raw in binding.items():
                if name not in declared:
                    return Fail(
                        error=f"Row {index} binds undeclared variable '{name}'",
                        context=dict(binding),
                        kind=ErrorKind.PROTOCOL,
                    )
                value = transform(raw)
                if not value.ok:
                    return value.within(f"Row {index}, variable '{name}'")
                row[Variable(name)] = value.data
            rows.append(row)

        return Ok(data=cls(variables=columns, rows=rows))

    @classmethod
    def from_response(cls, payload: Any) -> Result[ResultTable]:
        """Parse a SPARQL 1.1 JSON results document."""
        try:
            variables = payload["head"]["vars"]
            bindings = payload["results"]["bindings"]
        except (KeyError, TypeError) as exc:
            return Fail(
                error=f"Malformed SPARQL JSON results: missing {exc}",
                context=payload,
                kind=ErrorKind.PROTOCOL,
            )
        if not isinstance(variables, list) or not isinstance(bindings, list):
            return Fail(
                error="Malformed SPARQL JSON results: vars and bindings must be lists",
                context=payload,
                kind=ErrorKind.PROTOCOL,
            )
        return cls.from_bindings(variables, bindings, to_node)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    @staticmethod
    def value(row: Row, name: str) -> Any | None:
        """Bound value of a column in a row, None when unbound."""
        return row.get(Variable(name))

    def column(self, name: str) -> list[Any]:
        """All bound values of one column, skipping rows where it is unbound."""
        var = Variable(name)
        return [row[var] for row in self.rows if var in row]


def to_node(value: Any) -> Result[Node]:
    """Convert one JSON-encoded RDF term into an rdflib node."""
    if not isinstance(value, Mapping) or "value" not in value:
        return Fail(error=f"Malformed RDF term: {value!r}", kind=ErrorKind.PROTOCOL)

    term_type = value.get("type")
    if term_type == "uri":
        return Ok(data=URIRef(value["value"]))
    if term_type in ("literal", "typed-literal"):
        datatype = value.get("datatype")
        return Ok(
            data=Literal(
                value["value"],
                datatype=URIRef(datatype) if datatype else None,
                lang=value.get("xml:lang"),
            )
        )
    return Fail(
        error=f"Unsupported RDF term type '{term_type}' for value {value['value']!r}",
        context=dict(value),
        kind=ErrorKind.PROTOCOL,
    )


def format_table(table: ResultTable) -> str:
    """Render a table as pipe-delimited text, one line per row."""
    header = "|" + "|".join(v.name for v in table.variables) + "|"
    rule = "|" + "|".join("---" for _ in table.variables) + "|"
    lines = [header, rule]
    for row in table.rows:
        cells = [_cell(row.get(v)) for v in table.variables]
        lines.append("|" + "|".join(cells) + "|")
    return "\n".join(lines)


def _cell(node: Any | None) -> str:
    if node is None:
        return ""
    if isinstance(node, URIRef):
        return f"<{node}>"
    return str(node).replace("|", "\\|")
