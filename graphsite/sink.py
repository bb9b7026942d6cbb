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

"""Output sinks for generated pages.

The generator never touches the filesystem itself; it is handed a sink.
DirectorySink writes UTF-8 files under a root directory, MemorySink keeps
pages in a dict.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Protocol

from graphsite.result import ErrorKind, Fail, Ok, Result


class OutputSink(Protocol):
    def write(self, filename: str, content: str) -> Result[None]:
        ...


class DirectorySink:
    def __init__(self, root: Path) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f"DirectorySink({str(self.root)!r})"

    def write(self, filename: str, content: str) -> Result[None]:
        target = self.root / filename
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            return Fail(error=f"Cannot write {target}: {exc}", context=str(target), kind=ErrorKind.IO)
        return Ok(data=None)


class MemorySink:
    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self._lock = threading.Lock()

    def write(self, filename: str, content: str) -> Result[None]:
        with self._lock:
            self.files[filename] = content
        return Ok(data=None)
