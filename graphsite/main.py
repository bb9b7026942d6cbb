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

"""graphsite — static documentation for the resources of an RDF graph store.

Reads a YAML site definition, imports the configured data files into a
Fuseki dataset (or an in-process rdflib dataset with --local), queries
every resource and its relations, and writes one cross-linked HTML page
per resource plus an index page.

Usage:
    graphsite --config site.yaml build
    graphsite --config site.yaml build --local --output dist/site
    graphsite --config site.yaml query graphs
    graphsite --config site.yaml query relations-from --resource http://example.org/#d
    graphsite --config site.yaml describe --out everything.ttl
    graphsite --config site.yaml drop
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rdflib import URIRef

from graphsite.config import SiteDefinition, load_config
from graphsite.logger import get_logger
from graphsite.pipeline import open_store, run_pipeline
from graphsite.result import Fail
from graphsite.sparql.client import FusekiDataset
from graphsite.sparql.queries import RESOURCE_SELECTIONS, SELECTIONS
from graphsite.table import format_table

log = get_logger("main")


def _build(config: SiteDefinition, args: argparse.Namespace) -> int:
    output = args.output.resolve() if args.output else None
    result = run_pipeline(config, output_dir=output, local=args.local)
    if not result.ok:
        return _failed(result)
    log.info("Wrote %d files", len(result.data))
    return 0


def _query(config: SiteDefinition, args: argparse.Namespace) -> int:
    if args.name in RESOURCE_SELECTIONS:
        if not args.resource:
            log.error("Query '%s' needs --resource", args.name)
            return 1
        selection = RESOURCE_SELECTIONS[args.name](URIRef(args.resource))
    else:
        selection = SELECTIONS[args.name]()

    store = open_store(config, local=args.local)
    if not store.ok:
        return _failed(store)

    table = store.data.select(selection)
    if not table.ok:
        return _failed(table)
    print(format_table(table.data))
    return 0


def _describe(config: SiteDefinition, args: argparse.Namespace) -> int:
    store = open_store(config, local=args.local)
    if not store.ok:
        return _failed(store)

    graph = store.data.describe_everything()
    if not graph.ok:
        return _failed(graph)

    turtle = graph.data.serialize(format="turtle")
    if args.out is None:
        print(turtle)
        return 0
    try:
        args.out.write_text(turtle, encoding="utf-8")
    except OSError as exc:
        log.error("Cannot write %s: %s", args.out, exc)
        return 1
    log.info("Wrote %d triples to %s", len(graph.data), args.out)
    return 0


def _drop(config: SiteDefinition, args: argparse.Namespace) -> int:
    dataset = FusekiDataset(config.store.endpoint, config.store.dataset, config.store.timeout)
    result = dataset.delete()
    if not result.ok:
        return _failed(result)
    return 0


def _failed(result: Fail) -> int:
    log.error("[%s] %s", result.kind.value, result.error)
    if result.context:
        log.error("Context: %s", result.context)
    return 1


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphsite",
        description="Render the resources of an RDF graph store as a static HTML site",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("site.yaml"),
        help="Path to site definition YAML (default: site.yaml)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="Import data and generate the site")
    build.add_argument("--output", type=Path, help="Output directory (default: site.output_dir)")
    build.add_argument("--local", action="store_true", help="Use an in-process rdflib dataset")
    build.set_defaults(handler=_build)

    query = commands.add_parser("query", help="Run a named query and print the table")
    query.add_argument("name", choices=sorted([*SELECTIONS, *RESOURCE_SELECTIONS]))
    query.add_argument("--resource", help="Resource IRI for relations-from / relations-to")
    query.add_argument("--local", action="store_true", help="Use an in-process rdflib dataset")
    query.set_defaults(handler=_query)

    describe = commands.add_parser("describe", help="Describe every named graph as Turtle")
    describe.add_argument("--out", type=Path, help="Write Turtle here instead of stdout")
    describe.add_argument("--local", action="store_true", help="Use an in-process rdflib dataset")
    describe.set_defaults(handler=_describe)

    drop = commands.add_parser("drop", help="Delete the remote dataset")
    drop.set_defaults(handler=_drop)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    config_path = args.config.resolve()
    cfg_result = load_config(config_path)
    if not cfg_result.ok:
        return _failed(cfg_result)

    log.info("Site definition: %s", config_path.name)
    return args.handler(cfg_result.data, args)


if __name__ == "__main__":
    sys.exit(main())
