"""Shared domain error messages and error types."""

from ledgerbatch.utils.amount_parser import format_amount


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


INVALID_DATE_FORMAT = "Invalid date format. Use yyyy-MM-dd"
PROCESSED_SUCCESSFULLY = "processed successfully"


def sender_not_specified() -> str:
    return "sender account not specified"


def recipient_not_specified() -> str:
    return "recipient account not specified"


def amount_not_specified() -> str:
    return "amount not specified"


def empty_amount() -> str:
    return "empty amount"


def malformed_sender(account: str) -> str:
    """Return message for a sender id outside the NNNNN-NNNNN format."""
    return f"malformed sender account: {account}"


def malformed_recipient(account: str) -> str:
    """Return message for a recipient id outside the NNNNN-NNNNN format."""
    return f"malformed recipient account: {account}"


def self_transfer(account: str) -> str:
    """Return message for a transfer whose sender and recipient match."""
    return f"cannot transfer to the same account: {account}"


def invalid_amount_format(amount: str) -> str:
    return f"invalid amount format: {amount}"


def invalid_transfer_amount(amount: float) -> str:
    return f"invalid transfer amount: {format_amount(amount)}"


def insufficient_funds(account: str) -> str:
    """Return message when the sender balance does not cover the amount."""
    return f"insufficient funds on account {account}"


def processing_failed(error: Exception) -> str:
    """Return message for an unexpected failure while settling."""
    return f"error during processing: {error}"

