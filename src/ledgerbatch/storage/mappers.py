"""Mapper functions between domain entities and persisted text lines.

This layer owns the exact layouts of ``accounts.txt`` and ``report.txt``
so the domain services never build or split those lines themselves.
"""

from datetime import datetime

from ledgerbatch.domain import entities as domain
from ledgerbatch.utils.amount_parser import format_amount
from ledgerbatch.utils.date_parser import (
    TIMESTAMP_LENGTH,
    format_timestamp,
    parse_timestamp,
)

FIELD_SEPARATOR = " | "


def account_to_line(account: domain.Account) -> str:
    """Convert an Account to an ``accountId | balance`` line."""
    return f"{account.account_id}{FIELD_SEPARATOR}{format_amount(account.balance)}"


def line_to_account(line: str) -> domain.Account:
    """Convert an ``accountId | balance`` line to an Account.

    Raises:
        ValueError: If the line does not hold exactly an id and a numeric balance
    """
    parts = line.split("|")
    if len(parts) != 2:
        raise ValueError(f"Expected 'accountId | balance', got '{line}'")

    account_id = parts[0].strip()
    if not account_id:
        raise ValueError(f"Missing account id in '{line}'")

    try:
        balance = float(parts[1].strip())
    except ValueError:
        raise ValueError(f"Invalid balance in '{line}'")

    return domain.Account(account_id=account_id, balance=balance)


def result_to_line(result: domain.OperationResult) -> str:
    """Convert an OperationResult to a report line.

    The amount is glued to the destination account id with no separator.
    Existing report files use this layout, so it is kept as is.
    """
    txn = result.transaction
    description = f"transfer from {txn.from_account} to {txn.to_account}{format_amount(txn.amount)}"
    return FIELD_SEPARATOR.join(
        [
            format_timestamp(txn.timestamp),
            result.filename,
            description,
            result.status.value,
            result.message,
        ]
    )


def line_timestamp(line: str) -> datetime:
    """Extract the timestamp stored in the first 19 characters of a report line.

    Raises:
        ValueError: If the line is too short or the prefix is not a timestamp
    """
    if len(line) < TIMESTAMP_LENGTH:
        raise ValueError(f"Report line too short for a timestamp: '{line}'")
    return parse_timestamp(line[:TIMESTAMP_LENGTH])
