"""Validation of raw records and construction of transactions."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ledgerbatch.domain import errors
from ledgerbatch.domain.entities import (
    NOT_SPECIFIED,
    OperationResult,
    OperationStatus,
    RawRecord,
    Transaction,
)
from ledgerbatch.utils.amount_parser import parse_amount

ACCOUNT_PATTERN = re.compile(r"\d{5}-\d{5}")


def is_valid_account(account_id: str) -> bool:
    """Check an account id against the NNNNN-NNNNN format."""
    return ACCOUNT_PATTERN.fullmatch(account_id) is not None


def _try_parse_amount(amount_str: Optional[str]) -> Optional[float]:
    if amount_str is None:
        return None
    try:
        return parse_amount(amount_str)
    except ValueError:
        return None


def _check_sender_present(record: RawRecord) -> Optional[str]:
    if record.from_account is None:
        return errors.sender_not_specified()
    return None


def _check_recipient_present(record: RawRecord) -> Optional[str]:
    if record.to_account is None:
        return errors.recipient_not_specified()
    return None


def _check_amount_present(record: RawRecord) -> Optional[str]:
    if record.amount is None:
        return errors.amount_not_specified()
    if not record.amount.strip():
        return errors.empty_amount()
    return None


def _check_sender_format(record: RawRecord) -> Optional[str]:
    if not is_valid_account(record.from_account):
        return errors.malformed_sender(record.from_account)
    return None


def _check_recipient_format(record: RawRecord) -> Optional[str]:
    if not is_valid_account(record.to_account):
        return errors.malformed_recipient(record.to_account)
    return None


def _check_distinct_accounts(record: RawRecord) -> Optional[str]:
    if record.from_account == record.to_account:
        return errors.self_transfer(record.from_account)
    return None


def _check_amount_format(record: RawRecord) -> Optional[str]:
    if _try_parse_amount(record.amount) is None:
        return errors.invalid_amount_format(record.amount.strip())
    return None


def _check_amount_positive(record: RawRecord) -> Optional[str]:
    amount = parse_amount(record.amount)
    if amount <= 0:
        return errors.invalid_transfer_amount(amount)
    return None


# Evaluated in order; the first check returning a message rejects the record.
# Checks after the first three may assume all fields are present.
VALIDATION_CHECKS: tuple[Callable[[RawRecord], Optional[str]], ...] = (
    _check_sender_present,
    _check_recipient_present,
    _check_amount_present,
    _check_sender_format,
    _check_recipient_format,
    _check_distinct_accounts,
    _check_amount_format,
    _check_amount_positive,
)


def validate_record(record: RawRecord) -> Optional[str]:
    """Return the rejection message for a record, or None if it is valid."""
    for check in VALIDATION_CHECKS:
        message = check(record)
        if message is not None:
            return message
    return None


@dataclass(frozen=True)
class BuildResult:
    """A transaction built from a raw record, with its rejection reason if any."""

    transaction: Transaction
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def to_error_result(self) -> OperationResult:
        """Convert a rejected build into an ERROR OperationResult."""
        if self.is_valid:
            raise ValueError("Cannot convert a valid transaction into an error result")
        return OperationResult(
            filename=self.transaction.filename,
            transaction=self.transaction,
            status=OperationStatus.ERROR,
            message=self.error,
        )


def build_transaction(record: RawRecord, filename: str, timestamp: datetime) -> BuildResult:
    """Validate a raw record and build its transaction.

    A rejected record still produces a transaction so the rejection can be
    reported with its origin: missing accounts become NOT_SPECIFIED and the
    amount is 0.0 unless both accounts are present and the amount parses.

    Args:
        record: Raw record from the parser
        filename: Name of the file the record came from
        timestamp: Moment the file was read

    Returns:
        BuildResult with the transaction and the first failed check, if any
    """
    error = validate_record(record)
    amount = None
    if record.from_account is not None and record.to_account is not None:
        amount = _try_parse_amount(record.amount)

    transaction = Transaction(
        from_account=record.from_account if record.from_account is not None else NOT_SPECIFIED,
        to_account=record.to_account if record.to_account is not None else NOT_SPECIFIED,
        amount=amount if amount is not None else 0.0,
        filename=filename,
        timestamp=timestamp,
    )
    return BuildResult(transaction=transaction, error=error)
