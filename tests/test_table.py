"""Tests for the CSV table renderer."""

from __future__ import annotations

import pytest

from textops.config import BorderStyle
from textops.errors import CsvParseError
from textops.table import parse_records, render

SAMPLE_CSV = "name,age\nAlice,30\nBob,25\n"


def test_parse_records_splits_header_and_rows() -> None:
    header, rows = parse_records(SAMPLE_CSV)
    assert header == ["name", "age"]
    assert rows == [["Alice", "30"], ["Bob", "25"]]


def test_parse_records_keeps_fields_verbatim() -> None:
    header, rows = parse_records('id,note\n1,  padded  \n2,"a, b"\n3,"say ""hi"""\n')
    assert header == ["id", "note"]
    assert rows == [["1", "  padded  "], ["2", "a, b"], ["3", 'say "hi"']]


def test_parse_records_allows_newlines_in_quoted_fields() -> None:
    _, rows = parse_records('id,text\n1,"line one\nline two"\n')
    assert rows == [["1", "line one\nline two"]]


def test_parse_records_skips_blank_lines() -> None:
    _, rows = parse_records("a,b\n\n1,2\n\n3,4\n")
    assert rows == [["1", "2"], ["3", "4"]]


def test_short_rows_are_padded_with_empty_cells() -> None:
    _, rows = parse_records("a,b,c\n1\n1,2\n")
    assert rows == [["1", "", ""], ["1", "2", ""]]


def test_long_rows_are_rejected() -> None:
    with pytest.raises(CsvParseError) as exc_info:
        parse_records("a,b\n1,2\n1,2,3\n")
    assert exc_info.value.code == "E3003"
    assert exc_info.value.details == {"record": 3, "fields": 3, "expected": 2}
    assert "3 fields" in exc_info.value.message


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_empty_input_fails(text: str) -> None:
    with pytest.raises(CsvParseError) as exc_info:
        parse_records(text)
    assert exc_info.value.code == "E3001"
    assert exc_info.value.message == "CSV input is empty"


def test_unterminated_quote_in_row_fails() -> None:
    with pytest.raises(CsvParseError) as exc_info:
        render('name,age\nAlice,30\n"Bob,25')
    error = exc_info.value
    assert error.code == "E3002"
    assert "record 3" in error.message
    assert error.suggestion is not None


def test_malformed_header_fails() -> None:
    with pytest.raises(CsvParseError) as exc_info:
        render('"name,age')
    assert exc_info.value.code == "E3002"
    assert "header" in exc_info.value.message


def test_stray_character_after_closing_quote_fails() -> None:
    with pytest.raises(CsvParseError):
        render('a,b\n"x"y,2\n')


def test_render_ascii_table() -> None:
    expected = "\n".join(
        [
            "+-------+-----+",
            "| name  | age |",
            "+=======+=====+",
            "| Alice | 30  |",
            "+-------+-----+",
            "| Bob   | 25  |",
            "+-------+-----+",
        ]
    )
    assert render(SAMPLE_CSV, border=BorderStyle.ASCII) == expected


@pytest.mark.parametrize("border", list(BorderStyle))
def test_render_aligns_every_line(border: BorderStyle) -> None:
    lines = render("city,population\nSpringfield,30720\nX,1\n", border=border).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert any("Springfield" in line for line in lines)
    assert not any(line.endswith(" ") for line in lines)


def test_render_square_uses_box_drawing_glyphs() -> None:
    table = render(SAMPLE_CSV)
    assert table.startswith("┌")
    assert "╞" in table
    assert table.endswith("┘")


def test_render_header_only_table() -> None:
    lines = render("a,b", border=BorderStyle.ASCII).splitlines()
    assert lines[0] == "+---+---+"
    assert lines[1] == "| a | b |"
    assert lines[-1] == "+---+---+"
    assert len({len(line) for line in lines}) == 1


def test_render_does_not_interpret_markup() -> None:
    table = render("tag\n[bold]x[/bold]\n", border=BorderStyle.ASCII)
    assert "[bold]x[/bold]" in table


def test_render_wide_cells_are_not_wrapped() -> None:
    value = "x" * 300
    table = render(f"col\n{value}\n", border=BorderStyle.ASCII)
    assert f"| {value} |" in table.splitlines()


def test_parse_records_accepts_fields_beyond_default_csv_limit() -> None:
    value = "x" * 200_000
    header, rows = parse_records(f"a\n{value}\n")
    assert header == ["a"]
    assert rows == [[value]]


def test_render_multiline_crlf_field_as_multiline_cell() -> None:
    expected = "\n".join(
        [
            "+----+------+",
            "| id | text |",
            "+====+======+",
            "| 1  | a    |",
            "|    | b    |",
            "+----+------+",
        ]
    )
    assert render('id,text\n1,"a\r\nb"\n', border=BorderStyle.ASCII) == expected


def test_render_expands_tabs() -> None:
    expected = "\n".join(
        [
            "+-----------+",
            "| a         |",
            "+===========+",
            "| x       y |",
            "+-----------+",
        ]
    )
    assert render('a\n"x\ty"\n', border=BorderStyle.ASCII) == expected


def test_render_aligns_wide_characters() -> None:
    expected = "\n".join(
        [
            "+--------+---+",
            "| 名前   | b |",
            "+========+===+",
            "| 日本語 | x |",
            "+--------+---+",
        ]
    )
    assert render("名前,b\n日本語,x\n", border=BorderStyle.ASCII) == expected


def test_render_escapes_control_characters() -> None:
    expected = "\n".join(
        [
            "+----------+",
            "| a        |",
            "+==========+",
            "| x\\x1by   |",
            "+----------+",
            "| ab\\x07cd |",
            "+----------+",
        ]
    )
    assert render("a\nx\x1by\nab\x07cd\n", border=BorderStyle.ASCII) == expected
