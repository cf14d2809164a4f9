"""Tests for the scanner and coordinate readers."""

import pytest
from wktshapes.io.errors import MalformedInput
from wktshapes.io.scanner import (
    ParseSession,
    consume_if_present,
    expect,
    read_balanced_span,
    read_number,
    read_word,
    skip_whitespace,
)
from wktshapes.io.coordinates import read_coordinate, read_coordinate_sequence


class TestParseSession:
    """Tests for ParseSession."""

    def test_start_lower_cases(self):
        session = ParseSession.start("POINT (1 2)")
        assert session.text == "point (1 2)"
        assert session.offset == 0

    def test_peek_and_at_end(self):
        session = ParseSession("ab", 1)
        assert session.peek() == "b"
        assert not session.at_end()
        session.offset = 2
        assert session.peek() == ""
        assert session.at_end()


class TestSkipWhitespace:
    """Tests for skip_whitespace."""

    def test_skips_mixed_whitespace(self):
        session = ParseSession(" \t\n x")
        skip_whitespace(session)
        assert session.offset == 4

    def test_idempotent(self):
        session = ParseSession("  x")
        skip_whitespace(session)
        skip_whitespace(session)
        assert session.offset == 2

    def test_at_end(self):
        session = ParseSession("   ")
        skip_whitespace(session)
        assert session.at_end()


class TestReadWord:
    """Tests for read_word."""

    def test_reads_letters_and_trailing_whitespace(self):
        session = ParseSession("envelope  (1")
        assert read_word(session) == "envelope"
        assert session.peek() == "("

    def test_stops_at_non_letter(self):
        session = ParseSession("point(")
        assert read_word(session) == "point"
        assert session.offset == 5

    def test_no_letters(self):
        session = ParseSession("abc 12", 4)
        with pytest.raises(MalformedInput) as excinfo:
            read_word(session)
        assert excinfo.value.message == "word expected"
        assert excinfo.value.offset == 4
        assert session.offset == 4


class TestReadNumber:
    """Tests for read_number."""

    @pytest.mark.parametrize("text,expected", [
        ("1", 1.0),
        ("-1.5", -1.5),
        ("+2", 2.0),
        ("1e3", 1000.0),
        ("1.5e-3", 0.0015),
        ("-2.5e+2", -250.0),
        (".5", 0.5),
        ("5.", 5.0),
    ])
    def test_valid_literals(self, text, expected):
        session = ParseSession(text)
        assert read_number(session) == expected
        assert session.at_end()

    def test_skips_trailing_whitespace(self):
        session = ParseSession("12   34")
        assert read_number(session) == 12.0
        assert session.offset == 5

    def test_number_expected(self):
        session = ParseSession("(1")
        with pytest.raises(MalformedInput) as excinfo:
            read_number(session)
        assert excinfo.value.message == "number expected"
        assert excinfo.value.offset == 0

    @pytest.mark.parametrize("text", ["-", "e", "1-2", "1e", "1.2.3", "+-1"])
    def test_invalid_literal(self, text):
        session = ParseSession(text + " )")
        with pytest.raises(MalformedInput) as excinfo:
            read_number(session)
        assert excinfo.value.message.startswith("invalid number literal")
        # Reported after the greedy run, not at the offending character
        assert excinfo.value.offset == len(text)

    def test_greedy_run_is_not_split(self):
        # "1-2" must not be read as the two numbers 1 and -2
        session = ParseSession("1-2)")
        with pytest.raises(MalformedInput):
            read_number(session)

    def test_words_are_not_numbers(self):
        session = ParseSession("inf")
        with pytest.raises(MalformedInput) as excinfo:
            read_number(session)
        assert excinfo.value.message == "number expected"

    @pytest.mark.parametrize("text", ["١", "१२", "１"])
    def test_non_ascii_digits_are_not_numbers(self, text):
        session = ParseSession(text)
        with pytest.raises(MalformedInput) as excinfo:
            read_number(session)
        assert excinfo.value.message == "number expected"
        assert excinfo.value.offset == 0

    def test_run_stops_at_non_ascii_digit(self):
        session = ParseSession("1٢")
        assert read_number(session) == 1.0
        assert session.offset == 1


class TestExpect:
    """Tests for expect and consume_if_present."""

    def test_expect_consumes(self):
        session = ParseSession("(  1")
        expect(session, "(")
        assert session.offset == 3

    def test_expect_mismatch(self):
        session = ParseSession("x")
        with pytest.raises(MalformedInput) as excinfo:
            expect(session, "(")
        assert excinfo.value.message == "expected [(] found [x]"
        assert excinfo.value.offset == 0
        assert session.offset == 0

    def test_expect_end_of_input(self):
        session = ParseSession("1", 1)
        with pytest.raises(MalformedInput) as excinfo:
            expect(session, ")")
        assert excinfo.value.message == "expected [)] found end-of-input"
        assert excinfo.value.offset == 1

    def test_consume_if_present(self):
        session = ParseSession(", 2")
        assert consume_if_present(session, ",")
        assert session.offset == 2
        assert not consume_if_present(session, ",")
        assert session.offset == 2

    def test_consume_if_present_at_end(self):
        session = ParseSession("")
        assert not consume_if_present(session, ",")


class TestReadBalancedSpan:
    """Tests for read_balanced_span."""

    def test_nested_sub_shape(self):
        session = ParseSession.start("OUTER(INNER(3, 5)), rest")
        session.offset = 6
        assert read_balanced_span(session) == "inner(3, 5)"
        assert session.peek() == ")"
        assert session.offset == 17

    def test_whole_string(self):
        session = ParseSession.start("OUTER(INNER(3, 5))")
        assert read_balanced_span(session) == "outer(inner(3, 5))"
        assert session.at_end()

    def test_stops_at_comma(self):
        session = ParseSession("3, 5")
        assert read_balanced_span(session) == "3"
        assert session.peek() == ","

    def test_empty_span(self):
        session = ParseSession(")")
        assert read_balanced_span(session) == ""
        assert session.offset == 0

    def test_unbalanced(self):
        session = ParseSession("inner(3, 5")
        with pytest.raises(MalformedInput) as excinfo:
            read_balanced_span(session)
        assert excinfo.value.message == "unbalanced parenthesis"
        assert excinfo.value.offset == len("inner(3, 5")


class TestCoordinates:
    """Tests for read_coordinate and read_coordinate_sequence."""

    def test_read_coordinate(self):
        session = ParseSession("1.5 -2 )")
        assert read_coordinate(session) == (1.5, -2.0)
        assert session.peek() == ")"

    def test_read_coordinate_missing_y(self):
        session = ParseSession("1 )")
        with pytest.raises(MalformedInput) as excinfo:
            read_coordinate(session)
        assert excinfo.value.message == "number expected"
        assert excinfo.value.offset == 2

    def test_sequence_keeps_order(self):
        session = ParseSession("(1 2, 3 4 ,5 6)")
        assert read_coordinate_sequence(session) == [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)]
        assert session.at_end()

    def test_single_element_sequence(self):
        session = ParseSession("(1 2)")
        assert read_coordinate_sequence(session) == [(1.0, 2.0)]

    def test_empty_sequence_rejected(self):
        session = ParseSession("()")
        with pytest.raises(MalformedInput) as excinfo:
            read_coordinate_sequence(session)
        assert excinfo.value.message == "number expected"

    def test_unclosed_sequence(self):
        session = ParseSession("(1 2, 3 4")
        with pytest.raises(MalformedInput) as excinfo:
            read_coordinate_sequence(session)
        assert excinfo.value.message == "expected [)] found end-of-input"
