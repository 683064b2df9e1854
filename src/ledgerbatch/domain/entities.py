"""Domain model entities for ledgerbatch.

These are plain data classes representing the business concepts of a
transfer batch, independent of how accounts and reports are stored on disk.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

# Stands in for an account field that an instruction did not provide
NOT_SPECIFIED = "NOT_SPECIFIED"


class OperationStatus(str, Enum):
    """Outcome of a single transfer instruction."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class RawRecord:
    """Directive values collected from one blank-line delimited group."""

    from_account: Optional[str] = None
    to_account: Optional[str] = None
    amount: Optional[str] = None

    def is_empty(self) -> bool:
        return self.from_account is None and self.to_account is None and self.amount is None


@dataclass(frozen=True)
class Transaction:
    """Transfer instruction domain entity."""

    from_account: str
    to_account: str
    amount: float
    filename: str
    timestamp: datetime


@dataclass(frozen=True)
class OperationResult:
    """Result of processing one transfer instruction."""

    filename: str
    transaction: Transaction
    status: OperationStatus
    message: str

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS


@dataclass
class Account:
    """Ledger account. Mutated only by Ledger.transfer."""

    account_id: str
    balance: float = 0.0
