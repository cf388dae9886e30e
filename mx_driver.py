#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from mx_ast import Expr
from mx_context import ParseContext
from mx_diagnostics import Diagnostic, diag_from_parse_error
from mx_logger import log_debug, log_stage
from mx_parser import Parser, ParseError
from mx_tokens import Token


@dataclass
class ParseOutcome:
    """
    Result of running the front end on one token sequence.

    Contains:
      - the parsed expression (None when parsing failed; no partial trees)
      - the parse context used
      - diagnostics produced
    """
    expr: Optional[Expr] = None
    context: ParseContext = field(default_factory=ParseContext.default)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def has_errors(self) -> bool:
        return any(d.kind == "error" for d in self.diagnostics)


class MXDriver:
    """
    Front-end driver:
      - take tokens from an external lexer
      - parse one expression
      - turn parse failures into diagnostics

    Internal parser errors are not converted: they propagate to the caller.
    """

    def __init__(self, context: ParseContext | None = None):
        self.context = context or ParseContext.default()

    def parse(self, tokens: Sequence[Token], source_name: Optional[str] = None) -> ParseOutcome:
        result = ParseOutcome(context=self.context)

        log_stage(self.context, "Parsing", source_name)
        log_debug(self.context, f"Input has {len(tokens)} token(s)")
        try:
            result.expr = Parser(tokens).parse()
        except ParseError as e:
            log_debug(self.context, f"Parse failed ({e.kind.name}) at token {e.index}")
            result.diagnostics.append(diag_from_parse_error(e, source_name=source_name))
            return result

        log_debug(self.context, f"Parsed {type(result.expr).__name__} covering {result.expr.span.end} token(s)")
        return result
