#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# mx_internal_error.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ICELocation:
    token_index: Optional[int]
    source_name: Optional[str] = None


class InternalParserError(RuntimeError):
    """
    ICE = parser bug / violated cursor or grammar-dispatch invariant.
    Not for malformed input (that is a ParseError).
    """

    def __init__(self, message: str, loc: ICELocation | None = None):
        super().__init__(message)
        self.message = message
        self.loc = loc

    def format(self) -> str:
        message = self.message
        if not "[ICE-" in message:
            message = f"[ICE-9999] {message}"
        if self.loc is None:
            return f"internal parser error: {message}"
        prefix = self.loc.source_name or ""
        if self.loc.token_index is not None:
            prefix += f"@{self.loc.token_index}"
        if prefix:
            return f"{prefix}: internal parser error: {message}"
        return f"internal parser error: {message}"
