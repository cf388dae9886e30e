#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from mx_context import LogLevel, ParseContext
from mx_driver import MXDriver
from mx_tokens import Token, TokenKind


_SCAN_RE = re.compile(r"\s*(?:(?P<num>\d+(?:\.\d+)?)|(?P<ident>[A-Za-z_]\w*)|(?P<sym>\S))")

_SYMBOLS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.MODULO,
}


def scan(src: str, eof: bool = True) -> List[Token]:
    """Build a token list from compact test source like "f(1) + -2".

    Stands in for the external lexer in tests; every token gets its source
    offset as `loc`. With eof=False the end marker is left implied.
    """
    tokens: List[Token] = []
    src = src.rstrip()
    pos = 0
    while pos < len(src):
        m = _SCAN_RE.match(src, pos)
        if m.group("num") is not None:
            tokens.append(Token.number(float(m.group("num")), loc=m.start("num")))
        elif m.group("ident") is not None:
            tokens.append(Token.ident(m.group("ident"), loc=m.start("ident")))
        else:
            sym = m.group("sym")
            if sym not in _SYMBOLS:
                raise ValueError(f"scan: unsupported character {sym!r} in test source")
            tokens.append(Token.symbol(_SYMBOLS[sym], loc=m.start("sym")))
        pos = m.end()
    if eof:
        tokens.append(Token.eof(loc=len(src)))
    return tokens


@pytest.fixture
def driver() -> MXDriver:
    return MXDriver()


@pytest.fixture
def debug_driver() -> MXDriver:
    return MXDriver(ParseContext(log_level=LogLevel.DEBUG))


def has_error_code(diagnostics, code: str) -> bool:
    """Check if any diagnostic contains the given error code.

    Args:
        diagnostics: List of Diagnostic objects
        code: Error code string like "PAR-0010" or "[PAR-0010]"

    Returns:
        True if any diagnostic message contains the error code
    """
    if not code.startswith("["):
        code = f"[{code}]"
    return any(code in d.message for d in diagnostics)
