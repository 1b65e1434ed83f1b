import ast

import pytest

from bridgegen.codegen.escaping import (
    NO_DOCUMENTATION,
    escape_doc,
    escape_quotes,
)


@pytest.mark.parametrize(
    "text",
    [
        'plain',
        'a "quoted" word',
        "back\\slash",
        "trailing backslash\\",
        '"',
        '"""triple"""',
        'ends with quote"',
        'mixed \\" both \\\\"',
        "multi\nline \"doc\"\n",
    ],
)
def test_escaped_text_round_trips_through_triple_quoted_literal(text):
    literal = '"""' + escape_quotes(text) + '"""'
    assert ast.literal_eval(literal) == text


def test_escaped_single_line_text_round_trips_through_plain_literal():
    text = 'C:\\path "x"'
    assert ast.literal_eval('"' + escape_quotes(text) + '"') == text


def test_escape_quotes_handles_none_and_non_strings():
    assert escape_quotes(None) == ""
    assert escape_quotes(3.5) == "3.5"


def test_escape_doc_uses_placeholder_for_missing_doc():
    assert escape_doc(None) == NO_DOCUMENTATION
    assert escape_doc(None, placeholder='Say "x"') == 'Say \\"x\\"'
    assert escape_doc("") == ""


def test_newlines_are_not_escaped():
    assert escape_quotes("a\nb") == "a\nb"


@pytest.mark.parametrize(
    "text",
    [
        " \t\n\r\x0b\x0c",
        "a\r\nb",
        "carriage\rreturn",
        "nul\x00byte",
        "bell\x07 and del\x7f",
        "lone \ud800 surrogate",
        'quote then cr "\r',
    ],
)
def test_control_characters_round_trip_through_triple_quoted_literal(text):
    literal = '"""' + escape_quotes(text) + '"""'
    assert ast.literal_eval(literal) == text


def test_control_characters_are_written_as_escapes():
    assert escape_quotes("a\r\nb") == "a\\r\nb"
    assert escape_quotes("\x00") == "\\x00"
    assert escape_quotes("\x0b\x0c") == "\\x0b\\x0c"
    assert escape_quotes("\ud800") == "\\ud800"
    assert escape_quotes("tab\there") == "tab\there"


def test_escaped_text_is_encodable_as_utf8():
    escape_quotes("\udcff\r\x1b").encode("utf-8")
