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

"""Fuseki dataset client using urllib.

Talks to the Fuseki admin API (create/delete datasets), the SPARQL Graph
Store Protocol (data import) and the SPARQL query endpoint. No domain
logic — pure transport layer. Status codes are checked here, nothing is
retried.
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any

import certifi
from rdflib import Graph

from graphsite.logger import get_logger
from graphsite.result import ErrorKind, Fail, Ok, Result
from graphsite.sparql.queries import DescribeQuery, Selection
from graphsite.sparql.store import DataFile, GraphStore, GraphTarget
from graphsite.table import ResultTable

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())

_RESULTS_JSON = "application/sparql-results+json"


@dataclass(frozen=True, slots=True)
class _Response:
    status: int
    body: bytes


def _send(
    method: str,
    url: str,
    *,
    data: bytes | None = None,
    headers: dict[str, str] | None = None,
    timeout: int = 30,
    accept_status: tuple[int, ...] = (200,),
) -> Result[_Response]:
    """Single HTTP round-trip. Any status outside ``accept_status`` fails."""
    req = urllib.request.Request(url, data=data, headers=headers or {}, method=method)

    try:
        with urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx) as resp:
            response = _Response(status=resp.status, body=resp.read())
    except urllib.error.HTTPError as exc:
        if exc.code in accept_status:
            return Ok(data=_Response(status=exc.code, body=exc.read()))
        body = exc.read().decode("utf-8", errors="replace")[:500]
        return Fail(
            error=f"{method} {url}: HTTP {exc.code} {exc.reason}",
            context=body,
            kind=ErrorKind.TRANSPORT,
        )
    except urllib.error.URLError as exc:
        return Fail(error=f"{method} {url}: connection error: {exc.reason}", kind=ErrorKind.TRANSPORT)
    except TimeoutError:
        return Fail(error=f"{method} {url}: timeout after {timeout}s", kind=ErrorKind.TRANSPORT)

    if response.status not in accept_status:
        return Fail(
            error=f"{method} {url}: unexpected status {response.status}",
            context=response.body.decode("utf-8", errors="replace")[:500],
            kind=ErrorKind.TRANSPORT,
        )
    return Ok(data=response)


class FusekiDataset(GraphStore):
    """A named dataset on a Fuseki server."""

    def __init__(self, endpoint: str, name: str, timeout: int = 30) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.name = name
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"FusekiDataset({self.endpoint!r}, {self.name!r})"

    @property
    def query_url(self) -> str:
        return f"{self.endpoint}/{urllib.parse.quote(self.name)}"

    # ── Admin ─────────────────────────────────────────────────

    @classmethod
    def get_or_create(
        cls,
        endpoint: str,
        name: str,
        db_type: str = "mem",
        timeout: int = 30,
    ) -> Result[FusekiDataset]:
        """Create the dataset, or reuse it when the server reports a conflict."""
        dataset = cls(endpoint, name, timeout)
        body = urllib.parse.urlencode({"dbName": name, "dbType": db_type}).encode("utf-8")
        result = _send(
            "POST",
            f"{dataset.endpoint}/$/datasets",
            data=body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=timeout,
            accept_status=(200, 409),
        )
        if not result.ok:
            return result.within(f"Creating dataset '{name}'")
        if result.data.status == 409:
            log.info("Dataset '%s' already exists", name)
        else:
            log.info("Created dataset '%s' (%s)", name, db_type)
        return Ok(data=dataset)

    def delete(self) -> Result[None]:
        url = f"{self.endpoint}/$/datasets/{urllib.parse.quote(self.name)}"
        result = _send("DELETE", url, timeout=self.timeout)
        if not result.ok:
            return result.within(f"Deleting dataset '{self.name}'")
        log.info("Deleted dataset '%s'", self.name)
        return Ok(data=None)

    # ── Graph store ───────────────────────────────────────────

    def import_file(self, target: GraphTarget, file: DataFile) -> Result[None]:
        """PUT a data file into the default graph or a named graph."""
        if target.is_default:
            params = "default"
        else:
            params = urllib.parse.urlencode({"graph": str(target.name)})
        url = f"{self.query_url}/data?{params}"

        log.info("Import → %s (%d bytes, %s)", target, len(file.content), file.format.media_type)
        result = _send(
            "PUT",
            url,
            data=file.content,
            headers={"Content-Type": file.format.media_type},
            timeout=self.timeout,
            accept_status=(200, 201, 204),
        )
        if not result.ok:
            return result.within(f"Importing into {target}")
        return Ok(data=None)

    def _query(self, sparql: str, accept: str) -> Result[bytes]:
        body = urllib.parse.urlencode({"query": sparql}).encode("utf-8")
        log.info("SPARQL query → %s (%d bytes)", self.query_url, len(body))
        result = _send(
            "POST",
            self.query_url,
            data=body,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Accept": accept,
            },
            timeout=self.timeout,
        )
        if not result.ok:
            return result
        return Ok(data=result.data.body)

    def select(self, selection: Selection) -> Result[ResultTable]:
        raw = self._query(selection.sparql, _RESULTS_JSON)
        if not raw.ok:
            return raw

        try:
            payload: dict[str, Any] = json.loads(raw.data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            return Fail(
                error=f"SPARQL response is not JSON: {exc}",
                context=raw.data[:500],
                kind=ErrorKind.PROTOCOL,
            )

        table = ResultTable.from_response(payload)
        if table.ok:
            log.info("SPARQL returned %d bindings", len(table.data))
        return table

    def describe(self, query: DescribeQuery) -> Result[Graph]:
        raw = self._query(query.sparql, "text/turtle")
        if not raw.ok:
            return raw

        graph = Graph()
        try:
            graph.parse(data=raw.data.decode("utf-8"), format="turtle")
        except Exception as exc:
            return Fail(
                error=f"Could not parse DESCRIBE response: {type(exc).__name__}: {exc}",
                context=raw.data[:500],
                kind=ErrorKind.PROTOCOL,
            )
        log.info("DESCRIBE returned %d triples", len(graph))
        return Ok(data=graph)
