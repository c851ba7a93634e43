import pytest

from glyphpy.ast import Element, Identifier, InterpolatedString, Number, Percentage, PlainString, Property
from glyphpy.format import format_document, format_element, format_number, format_value, run_format
from glyphpy.parser import parse_glyph, parse_result
from tests._shared_cases import VALID_CASES, GlyphCase, case_id, case_source


def test_format_readme_form() -> None:
    result = run_format(case_source("readme_form"))

    assert result.diagnostics == []
    assert result.changed is True
    assert result.formatted_text == (
        "@language ratatui\n"
        "\n"
        "@Form main_form {\n"
        '    title = "Hello"\n'
        "    @Panel left_panel {\n"
        "        layout = top-to-bottom\n"
        "        width = 50%\n"
        "    }\n"
        "}\n"
    )


def test_format_keeps_url_and_delimiters() -> None:
    result = run_format(case_source("custom_language_with_url"))
    assert result.formatted_text == '@language custom("https://example.com/schema")\n\n@Panel p ()\n'


def test_format_is_idempotent() -> None:
    first = run_format(case_source("multiline_login_form")).formatted_text
    second = run_format(first)

    assert second.formatted_text == first
    assert second.changed is False


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_formatted_output_reparses_to_equal_document(case: GlyphCase) -> None:
    document = parse_glyph(case.source).unwrap()
    reparsed = parse_glyph(format_document(document)).unwrap()

    assert reparsed == document
    assert reparsed.root.delimiter is document.root.delimiter


def test_run_format_leaves_invalid_source_untouched() -> None:
    source = "@language ratatui @Form f { a = }"
    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False
    assert [d.code for d in result.diagnostics] == ["PARSER_EXPECTED_VALUE"]


def test_run_format_reuses_provided_parse_result() -> None:
    source = case_source("empty_brace_body")
    parsed = parse_result(source)

    result = run_format("ignored", parse=parsed)

    assert result.parse is parsed
    assert result.formatted_text == "@language ratatui\n\n@Form f {}\n"


def test_run_format_rejects_parse_with_mode_or_options() -> None:
    parsed = parse_result(case_source("empty_brace_body"))
    with pytest.raises(ValueError, match="Pass either parse or options/mode, not both"):
        run_format("ignored", parse=parsed, options=parsed.options)


def test_format_element_places_properties_before_children() -> None:
    element = Element(
        "Grid",
        "g",
        properties=(Property("a", Number(1)), Property("b", Identifier("left-to-right"))),
        children=(Element("Column", "c"),),
    )

    assert format_element(element, indent="  ") == (
        "@Grid g {\n"
        "  a = 1\n"
        "  b = left-to-right\n"
        "  @Column c {}\n"
        "}"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (PlainString("Hello"), '"Hello"'),
        (InterpolatedString("Hi {name}"), 'd"Hi {name}"'),
        (Number(42), "42"),
        (Number(3.14), "3.14"),
        (Percentage(50), "50%"),
        (Percentage(12.5), "12.5%"),
        (Identifier("top-to-bottom"), "top-to-bottom"),
    ],
)
def test_format_value(value, expected: str) -> None:
    assert format_value(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "0"),
        (10.0, "10"),
        (0.1, "0.1"),
        (1e-7, "0.0000001"),
        (1e22, "10000000000000000000000"),
    ],
)
def test_format_number_is_positional(value: float, expected: str) -> None:
    assert format_number(value) == expected
    assert parse_glyph(f"@language x @E e {{ v = {format_number(value)} }}").unwrap().root.get("v") == Number(value)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_format_number_rejects_non_finite(value: float) -> None:
    with pytest.raises(ValueError, match="no literal"):
        format_number(value)


def test_run_format_leaves_overflowing_number_untouched() -> None:
    source = f"@language ratatui @Panel p {{ v = {'9' * 400} }}"
    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False
    assert [d.code for d in result.diagnostics] == ["PARSER_INVALID_NUMBER"]
