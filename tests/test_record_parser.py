"""Tests for the instruction record parser."""

from ledgerbatch.domain.entities import RawRecord
from ledgerbatch.domain.record_parser import RecordAccumulator, parse_file, parse_records


def _lines(text: str) -> list[str]:
    return text.split("\n")


def test_parse_single_record():
    """Test parsing one complete group."""
    records = parse_records(_lines("from: 11111-11111\nto: 22222-22222\namount: 100"))

    assert records == [RawRecord(from_account="11111-11111", to_account="22222-22222", amount="100")]


def test_parse_groups_separated_by_blank_line():
    """Test one record per blank-line separated group."""
    text = (
        "from: 11111-11111\nto: 22222-22222\namount: 100\n"
        "\n"
        "from: 33333-33333\nto: 44444-44444\namount: 5.5\n"
    )
    records = parse_records(_lines(text))

    assert len(records) == 2
    assert records[0].from_account == "11111-11111"
    assert records[1].from_account == "33333-33333"
    assert records[1].amount == "5.5"


def test_whitespace_only_line_is_a_boundary():
    """Test that a line of spaces separates records like an empty line."""
    records = parse_records(["from: 11111-11111", "   \t", "to: 22222-22222"])

    assert records == [
        RawRecord(from_account="11111-11111"),
        RawRecord(to_account="22222-22222"),
    ]


def test_group_without_directives_is_discarded():
    """Test that a group of unrecognized lines yields no record."""
    text = "hello\nworld\n\nfrom: 11111-11111\nto: 22222-22222\namount: 1\n\n\n"
    records = parse_records(_lines(text))

    assert len(records) == 1
    assert records[0].to_account == "22222-22222"


def test_empty_input():
    """Test that no lines yield no records."""
    assert parse_records([]) == []
    assert parse_records(["", "", ""]) == []


def test_partial_group_is_emitted():
    """Test that a group with a single directive is still a record."""
    records = parse_records(["amount: 10"])

    assert records == [RawRecord(amount="10")]


def test_directives_in_any_order():
    """Test that directive order within a group does not matter."""
    records = parse_records(["amount: 7", "to: 22222-22222", "from: 11111-11111"])

    assert records == [RawRecord(from_account="11111-11111", to_account="22222-22222", amount="7")]


def test_repeated_directive_last_wins():
    """Test that a repeated directive overwrites the earlier value."""
    records = parse_records(["from: 11111-11111", "from: 33333-33333", "to: 22222-22222"])

    assert records[0].from_account == "33333-33333"


def test_account_token_stops_at_whitespace():
    """Test that an account value is the first non-whitespace token."""
    records = parse_records(["from: abc def", "to:22222-22222 trailing"])

    assert records[0].from_account == "abc"
    assert records[0].to_account == "22222-22222"


def test_amount_takes_rest_of_line():
    """Test that amount keeps the remainder of the line, trimmed."""
    records = parse_records(["amount:   12 dollars  "])

    assert records[0].amount == "12 dollars"


def test_prefixes_are_case_sensitive():
    """Test that upper-case directives are ignored."""
    assert parse_records(["FROM: 11111-11111", "To: 22222-22222", "AMOUNT: 1"]) == []


def test_directive_without_value_is_ignored():
    """Test that a bare prefix does not set a field."""
    assert parse_records(["from:", "amount:"]) == []


def test_from_checked_before_to():
    """Test that a line holding both prefixes only sets from."""
    records = parse_records(["from: 11111-11111 to: 22222-22222"])

    assert records == [RawRecord(from_account="11111-11111")]


def test_accumulator_flush_resets():
    """Test that flushing starts a fresh record."""
    accumulator = RecordAccumulator()
    accumulator.feed("from: 11111-11111")

    assert accumulator.flush() == RawRecord(from_account="11111-11111")
    assert accumulator.flush() is None


def test_parse_file(tmp_path):
    """Test parsing records straight from a file with CRLF line endings."""
    path = tmp_path / "transfers.txt"
    path.write_bytes(b"from: 11111-11111\r\nto: 22222-22222\r\namount: 3\r\n\r\namount: 4\r\n")

    records = parse_file(path)

    assert len(records) == 2
    assert records[0].amount == "3"
    assert records[1] == RawRecord(amount="4")
