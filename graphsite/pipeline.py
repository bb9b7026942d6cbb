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

"""Build orchestrator.

Executes the build defined in a SiteDefinition:
  1. Store: create-or-get the Fuseki dataset (or an in-process one)
  2. Imports: load every configured data file into its graph
  3. Site: generate pages + index into the output directory

No domain logic. All decisions come from site.yaml.
"""

from __future__ import annotations

from pathlib import Path

from graphsite.config import ImportSource, SiteDefinition
from graphsite.generator import generate_site
from graphsite.logger import PipelineSummary, get_logger
from graphsite.result import Ok, Result
from graphsite.sink import DirectorySink
from graphsite.sparql.client import FusekiDataset
from graphsite.sparql.local import LocalDataset
from graphsite.sparql.store import DEFAULT_GRAPH, DataFile, GraphStore, GraphTarget

log = get_logger(__name__)


def _import_all(
    store: GraphStore,
    imports: list[ImportSource],
    summary: PipelineSummary,
) -> Result[None]:
    """Load each configured file; the first failure stops the build."""
    for source in imports:
        target = DEFAULT_GRAPH if source.graph is None else GraphTarget.named(source.graph)
        log.info("── Import: %s → %s ──", source.path.name, target)

        file = DataFile.from_path(source.path)
        if not file.ok:
            summary.record("imports", False)
            return file

        result = store.import_file(target, file.data)
        summary.record("imports", result.ok)
        if not result.ok:
            return result.within(f"Import of {source.path}")

    return Ok(data=None)


def open_store(config: SiteDefinition, local: bool = False) -> Result[GraphStore]:
    """Store for read-only commands.

    The remote dataset is used as is. A local dataset starts empty, so the
    configured imports are loaded into it first.
    """
    if not local:
        return Ok(data=FusekiDataset(config.store.endpoint, config.store.dataset, config.store.timeout))

    store = LocalDataset()
    imported = _import_all(store, config.imports, PipelineSummary())
    if not imported.ok:
        return imported
    return Ok(data=store)


def run_pipeline(
    config: SiteDefinition,
    output_dir: Path | None = None,
    local: bool = False,
) -> Result[list[str]]:
    """Run the full build: store → imports → site.

    Args:
        config: Loaded site definition from site.yaml.
        output_dir: Overrides site.output_dir when given.
        local: Build against an in-process rdflib dataset instead of Fuseki.
    """
    summary = PipelineSummary()
    output_dir = output_dir or config.site.output_dir

    # 1. Store
    if local:
        store: GraphStore = LocalDataset()
        log.info("Store: local rdflib dataset")
    else:
        created = FusekiDataset.get_or_create(
            config.store.endpoint,
            config.store.dataset,
            db_type=config.store.db_type,
            timeout=config.store.timeout,
        )
        if not created.ok:
            log.error("Store setup failed: %s", created.error)
            return created
        store = created.data
        log.info("Store: %r", store)

    # 2. Imports
    imported = _import_all(store, config.imports, summary)
    if not imported.ok:
        log.error("Import phase failed: %s", imported.error)
        log.info(summary.report())
        return imported

    # 3. Site
    log.info("Output: %s", output_dir)
    result = generate_site(
        store,
        DirectorySink(output_dir),
        workers=config.site.workers,
        summary=summary,
    )
    if not result.ok:
        log.error("Site generation failed [%s]: %s", result.kind.value, result.error)

    log.info(summary.report())
    return result
