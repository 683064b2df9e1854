"""Utility functions for ledgerbatch."""

from ledgerbatch.utils.amount_parser import parse_amount, format_amount
from ledgerbatch.utils.date_parser import (
    parse_query_date,
    parse_timestamp,
    format_timestamp,
    get_date_range,
)

__all__ = [
    "parse_amount",
    "format_amount",
    "parse_query_date",
    "parse_timestamp",
    "format_timestamp",
    "get_date_range",
]
