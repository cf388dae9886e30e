#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from conftest import has_error_code, scan
from mx_ast import Identifier, Span
from mx_diagnostics import DIAGNOSTIC_CODE_FAMILIES, Diagnostic, diag_from_node, diag_from_parse_error
from mx_parser import ParseError, parse_tokens
from mx_tokens import Token, TokenKind


PAR_TRIGGERS = {
    "PAR-0010": "1 + * 2",
    "PAR-0020": "(1 + 2",
    "PAR-0021": "f(x",
    "PAR-0030": "1 2",
}


def test_every_registered_code_has_a_trigger():
    assert sorted(PAR_TRIGGERS) == sorted(DIAGNOSTIC_CODE_FAMILIES["PAR"])


@pytest.mark.parametrize(("code", "src"), sorted(PAR_TRIGGERS.items()))
def test_trigger_reports_code(driver, code, src):
    result = driver.parse(scan(src))

    assert result.has_errors()
    assert len(result.diagnostics) == 1
    assert has_error_code(result.diagnostics, code)


def test_diagnostic_format_uses_source_offset():
    with pytest.raises(ParseError) as excinfo:
        parse_tokens(scan("(1 + 2"))

    diag = diag_from_parse_error(excinfo.value, source_name="calc.mx")

    assert diag.offset == 6
    assert diag.token_index == 4
    assert diag.format() == "calc.mx:6: error: [PAR-0020] expected ')' after expression, got end-of-input instead"


def test_diagnostic_format_falls_back_to_token_index():
    tokens = [Token.number(1), Token.number(2), Token.eof()]
    with pytest.raises(ParseError) as excinfo:
        parse_tokens(tokens)

    diag = diag_from_parse_error(excinfo.value)

    assert diag.offset is None
    assert diag.format() == "@1: error: [PAR-0030] expected end of input after expression, got '2' instead"


def test_diagnostic_format_without_location():
    assert Diagnostic(kind="warning", message="odd").format() == "warning: odd"


def test_diag_from_node_uses_span():
    node = Identifier("x", span=Span(2, 3))
    diag = diag_from_node("error", "unknown name 'x'", source_name="calc.mx", node=node)

    assert diag.token_index == 2
    assert diag.end_token_index == 3
    assert diag.format() == "calc.mx@2: error: unknown name 'x'"


def test_parse_error_carries_expected_kinds():
    with pytest.raises(ParseError) as excinfo:
        parse_tokens([Token.symbol(TokenKind.STAR)])

    assert TokenKind.IDENT in excinfo.value.expected
    assert TokenKind.NUMBER in excinfo.value.expected
    assert TokenKind.LPAREN in excinfo.value.expected
