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

"""Resource catalog — label and output filename for every resource.

Built once per run from the resources-with-labels query and never
mutated afterwards, so page renderers share it across threads freely.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from rdflib import Literal, URIRef

from graphsite.logger import get_logger
from graphsite.result import ErrorKind, Fail, Ok, Result
from graphsite.table import ResultTable

log = get_logger(__name__)

PAGE_SUFFIX = ".html"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    label: str
    filename: str
    labelled: bool = False


def filename_for(resource: URIRef) -> str:
    """SHA-256 of the IRI, hex encoded, as a page filename."""
    return hashlib.sha256(str(resource).encode("utf-8")).hexdigest() + PAGE_SUFFIX


class ResourceCatalog(Mapping[URIRef, CatalogEntry]):
    """Read-only mapping of resource IRI to its catalog entry."""

    def __init__(self, entries: Mapping[URIRef, CatalogEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, resource: URIRef) -> CatalogEntry:
        return self._entries[resource]

    def __iter__(self) -> Iterator[URIRef]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResourceCatalog({len(self)} resources)"

    def sorted_items(self) -> list[tuple[URIRef, CatalogEntry]]:
        """Entries ordered by label, then IRI."""
        return sorted(self._entries.items(), key=lambda item: (item[1].label, str(item[0])))


def _prefer(current: CatalogEntry | None, candidate: CatalogEntry) -> CatalogEntry:
    """Pick between two entries for the same resource.

    A real rdfs:label beats the IRI fallback; among real labels the
    lexicographically smallest wins, whatever the row order.
    """
    if current is None:
        return candidate
    if current.labelled != candidate.labelled:
        return current if current.labelled else candidate
    return current if current.label <= candidate.label else candidate


def build_catalog(table: ResultTable) -> Result[ResourceCatalog]:
    """Build the catalog from a resources-with-labels table."""
    entries: dict[URIRef, CatalogEntry] = {}

    for row in table:
        resource = ResultTable.value(row, "resource")
        if not isinstance(resource, URIRef):
            return Fail(
                error=f"Expected a resource IRI, got {resource!r}",
                context=row,
                kind=ErrorKind.PROTOCOL,
            )

        label = ResultTable.value(row, "label")
        if isinstance(label, Literal) and str(label):
            candidate = CatalogEntry(label=str(label), filename=filename_for(resource), labelled=True)
        else:
            candidate = CatalogEntry(label=str(resource), filename=filename_for(resource))

        entries[resource] = _prefer(entries.get(resource), candidate)

    log.info("Catalog built: %d resources", len(entries))
    return Ok(data=ResourceCatalog(entries))
