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

"""Static site generator.

  1. Query resources-with-labels and build the catalog
  2. For every catalog entry (worker pool): relations from/to → page
  3. Index page listing every catalog entry

The catalog is complete before any page is rendered. Pages are
independent units of work; the first failure cancels the rest and is
returned, so a failed run never counts as a usable partial site.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from rdflib import URIRef

from graphsite.catalog import ResourceCatalog, build_catalog
from graphsite.logger import PipelineSummary, get_logger
from graphsite.render import (
    INDEX_FILENAME,
    edges_from,
    edges_to,
    render_index_page,
    render_resource_page,
)
from graphsite.result import Ok, Result
from graphsite.sink import OutputSink
from graphsite.sparql.queries import relations_from, relations_to, resources_with_labels
from graphsite.sparql.store import GraphStore

log = get_logger(__name__)


def _render_resource(
    store: GraphStore,
    catalog: ResourceCatalog,
    resource: URIRef,
    sink: OutputSink,
    summary: PipelineSummary,
) -> Result[str]:
    """Query both directions for one resource and write its page."""
    entry = catalog[resource]

    links_from = store.select(relations_from(resource))
    summary.record("queries", links_from.ok)
    if not links_from.ok:
        return links_from.within(f"Relations from <{resource}>")

    links_to = store.select(relations_to(resource))
    summary.record("queries", links_to.ok)
    if not links_to.ok:
        return links_to.within(f"Relations to <{resource}>")

    outgoing = edges_from(links_from.data, catalog)
    if not outgoing.ok:
        return outgoing.within(f"Relations from <{resource}>")
    incoming = edges_to(links_to.data, catalog)
    if not incoming.ok:
        return incoming.within(f"Relations to <{resource}>")

    page = render_resource_page(resource, entry, outgoing.data, incoming.data)
    written = sink.write(entry.filename, page)
    summary.record("pages", written.ok)
    if not written.ok:
        return written.within(f"Page for <{resource}>")

    log.debug("Wrote %s (%d out, %d in) for <%s>", entry.filename, len(outgoing.data), len(incoming.data), resource)
    return Ok(data=entry.filename)


def generate_site(
    store: GraphStore,
    sink: OutputSink,
    workers: int = 4,
    summary: PipelineSummary | None = None,
) -> Result[list[str]]:
    """Generate one page per resource plus the index page.

    Returns the sorted list of written filenames.
    """
    summary = summary or PipelineSummary()

    table = store.select(resources_with_labels())
    summary.record("queries", table.ok)
    if not table.ok:
        return table.within("Resources with labels")

    catalog_result = build_catalog(table.data)
    if not catalog_result.ok:
        return catalog_result.within("Building catalog")
    catalog = catalog_result.data

    log.info("Rendering %d pages with %d workers", len(catalog), workers)
    written: list[str] = []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures: dict[Future[Result[str]], URIRef] = {
            executor.submit(_render_resource, store, catalog, resource, sink, summary): resource
            for resource in catalog
        }
        for future in as_completed(futures):
            result = future.result()
            if not result.ok:
                for pending in futures:
                    pending.cancel()
                log.error("Page for <%s> failed: %s", futures[future], result.error)
                return result
            written.append(result.data)

    index = sink.write(INDEX_FILENAME, render_index_page(catalog))
    summary.record("index", index.ok)
    if not index.ok:
        return index.within("Index page")
    written.append(INDEX_FILENAME)

    log.info("Site generated: %d pages + index", len(written) - 1)
    return Ok(data=sorted(written))
