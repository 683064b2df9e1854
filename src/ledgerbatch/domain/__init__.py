"""Domain layer for ledgerbatch.

Only entities are re-exported here; services import the storage mappers,
which in turn import the entities, so services are imported from their
own modules.
"""

from ledgerbatch.domain.entities import (
    NOT_SPECIFIED,
    Account,
    OperationResult,
    OperationStatus,
    RawRecord,
    Transaction,
)

__all__ = [
    "NOT_SPECIFIED",
    "Account",
    "OperationResult",
    "OperationStatus",
    "RawRecord",
    "Transaction",
]
