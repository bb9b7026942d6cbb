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

"""Loads site.yaml into typed dataclasses.

Pure loader — no domain logic. YAML structure IS the build contract.
Relative paths (imports, output_dir) are resolved against the directory
holding the config file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from graphsite.result import ErrorKind, Fail, Ok, Result


# ── Store ──────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class StoreConfig:
    """Where the Fuseki server lives and which dataset to use."""
    endpoint: str
    dataset: str
    db_type: str = "mem"
    timeout: int = 30


# ── Imports ────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ImportSource:
    """One data file to load; graph=None targets the default graph."""
    path: Path
    graph: str | None = None


# ── Site ───────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class SiteConfig:
    output_dir: Path
    workers: int = 4


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class SiteDefinition:
    store: StoreConfig
    imports: list[ImportSource]
    site: SiteConfig


# ── Loader ─────────────────────────────────────────────────────

def _build_imports(raw_imports: list[dict[str, Any]], base: Path) -> list[ImportSource]:
    return [
        ImportSource(path=base / i["path"], graph=i.get("graph"))
        for i in raw_imports
    ]


def _build_site(raw: dict[str, Any], base: Path) -> SiteConfig:
    workers = int(raw.get("workers", 4))
    if workers < 1:
        raise ValueError(f"site.workers must be at least 1, got {workers}")
    return SiteConfig(
        output_dir=base / raw.get("output_dir", "dist/site"),
        workers=workers,
    )


def load_config(path: Path) -> Result[SiteDefinition]:
    """Load site.yaml into SiteDefinition. No validation beyond structure."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}", kind=ErrorKind.CONFIG)

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path), kind=ErrorKind.CONFIG)

    base = path.resolve().parent

    try:
        store = raw["store"]
        config = SiteDefinition(
            store=StoreConfig(
                endpoint=store["endpoint"].rstrip("/"),
                dataset=store["dataset"],
                db_type=store.get("db_type", "mem"),
                timeout=int(store.get("timeout", 30)),
            ),
            imports=_build_imports(raw.get("imports") or [], base),
            site=_build_site(raw.get("site") or {}, base),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path), kind=ErrorKind.CONFIG)

    return Ok(data=config)
