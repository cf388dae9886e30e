#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from typing import Optional

from mx_ast import Node
from mx_parser import ParseError


DIAGNOSTIC_CODE_FAMILIES = {
    "PAR": [
        "PAR-0010",  # unexpected token at the start of a primary expression
        "PAR-0020",  # missing ')' after a parenthesized expression
        "PAR-0021",  # missing ')' after a call argument
        "PAR-0030",  # trailing input after a complete expression
    ],
    # ICE codes are internal parser errors raised as exceptions,
    # not user-facing diagnostics; they are excluded from this registry.
}


@dataclass
class Diagnostic:
    kind: str  # "error" or "warning"
    message: str
    source_name: Optional[str] = None  # file path or other label for the input

    # Primary location
    token_index: Optional[int] = None
    offset: Optional[int] = None  # source offset, when the lexer provided one

    # Optional end of the token range (exclusive)
    end_token_index: Optional[int] = None

    # Return the one-line header; snippets are up to the caller
    def format(self) -> str:
        loc = ""
        if self.source_name is not None:
            loc += self.source_name
        if self.offset is not None:
            loc += f":{self.offset}"
        elif self.token_index is not None:
            loc += f"@{self.token_index}"
        if loc:
            loc += ": "
        return f"{loc}{self.kind}: {self.message}"


def diag_from_node(
        kind: str,
        message: str,
        *,
        source_name: Optional[str],
        node: Optional[Node],
) -> Diagnostic:
    token_index = end_token_index = None
    if node is not None and node.span is not None:
        token_index = node.span.start
        end_token_index = node.span.end
    return Diagnostic(
        kind=kind,
        message=message,
        source_name=source_name,
        token_index=token_index,
        end_token_index=end_token_index,
    )


def diag_from_parse_error(err: ParseError, *, source_name: Optional[str] = None) -> Diagnostic:
    offset = err.token.loc if err.token is not None else None
    return Diagnostic(
        kind="error",
        message=err.message,
        source_name=source_name,
        token_index=err.index,
        offset=offset,
    )
