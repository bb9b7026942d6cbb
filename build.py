#!/usr/bin/env python3
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
"""Build the documentation site from site.yaml.

Usage:
    python build.py
    python build.py --local --output dist/site
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from graphsite.config import load_config
from graphsite.logger import get_logger
from graphsite.pipeline import run_pipeline

log = get_logger("build")


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="build",
        description="Build static HTML documentation from the site definition",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory for site files (default: site.output_dir)",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Build from an in-process rdflib dataset instead of Fuseki",
    )
    args = parser.parse_args()

    definition = Path(__file__).resolve().parent / "site.yaml"

    cfg_result = load_config(definition)
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    output_dir = args.output.resolve() if args.output else None

    result = run_pipeline(cfg_result.data, output_dir=output_dir, local=args.local)
    if not result.ok:
        log.error("Build failed: %s", result.error)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
