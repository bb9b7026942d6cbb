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

"""Result pattern for error handling without exceptions.

Provides Ok[T] and Fail types as an alternative to raising exceptions.
Every function that can fail returns Result[T] = Ok[T] | Fail.

Fail carries an ErrorKind so callers can tell a misbehaving graph store
(PROTOCOL) apart from a broken output directory (IO) or an unreachable
server (TRANSPORT).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    CONFIG = "config"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    IO = "io"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message, kind and optional context."""

    error: str
    context: Any = None
    kind: ErrorKind = ErrorKind.CONFIG
    ok: bool = field(default=False, init=False)

    def within(self, what: str) -> Fail:
        """Prefix the message with the operation in flight, keeping kind and context."""
        return Fail(error=f"{what}: {self.error}", context=self.context, kind=self.kind)


Result = Ok[T] | Fail
