import pytest

from glyphpy.ast import PlainString
from glyphpy.diagnostics import GlyphParseError
from glyphpy.parser import ParseMode, ParserOptions, parse_document_text, parse_glyph, parse_result
from tests._shared_cases import case_source


def test_parse_result_exposes_document_and_error_state() -> None:
    result = parse_result(case_source("readme_form"))

    assert result.document is result.parsed.node
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.unwrap() is result.document


def test_parse_result_caches_root_view_and_line_index() -> None:
    result = parse_result(case_source("readme_form"))

    view = result.root_view()
    assert result.root_view() is view
    assert view.get_value("title") == PlainString("Hello")

    index = result.line_index()
    assert result.line_index() is index


def test_parse_result_root_view_raises_without_document() -> None:
    result = parse_result("@language ratatui @Form f {")

    assert result.document is None
    assert result.has_errors is True
    with pytest.raises(GlyphParseError):
        result.root_view()


def test_parse_result_strict_and_permissive_match_parse_glyph_contract() -> None:
    source = case_source("trailing_root_element")

    strict_result = parse_result(source)
    permissive_result = parse_result(source, mode=ParseMode.PERMISSIVE)

    assert strict_result.diagnostics == parse_glyph(source).diagnostics
    assert permissive_result.diagnostics == parse_glyph(source, mode=ParseMode.PERMISSIVE).diagnostics
    assert strict_result.has_errors is True
    assert permissive_result.has_errors is False
    assert permissive_result.options.require_end_of_input is False


def test_parse_result_keeps_explicit_options() -> None:
    options = ParserOptions(max_nesting_depth=8)
    result = parse_result(case_source("readme_form"), options)
    assert result.options is options


def test_diagnostic_positions_are_one_based_line_and_column() -> None:
    source = "@language ratatui\n@Form f {\n    title =\n}\n"
    result = parse_result(source)

    assert [d.code for d in result.diagnostics] == ["PARSER_EXPECTED_VALUE"]
    assert result.diagnostic_positions() == [(4, 1)]


def test_parse_document_text_returns_document_or_raises() -> None:
    document = parse_document_text(case_source("empty_brace_body"))
    assert document.root.name == "f"

    with pytest.raises(GlyphParseError) as excinfo:
        parse_document_text("@language ratatui @Form f { a = 1 )")

    error = excinfo.value
    assert isinstance(error, ValueError)
    assert [d.code for d in error.diagnostics] == ["PARSER_MISMATCHED_DELIMITER"]
    assert error.offset == len("@language ratatui @Form f { a = 1 ")
    assert "PARSER_MISMATCHED_DELIMITER" in str(error)
