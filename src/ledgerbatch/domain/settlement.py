"""Settlement of validated transactions against the ledger."""

import logging

from ledgerbatch.domain import errors
from ledgerbatch.domain.entities import OperationResult, OperationStatus, Transaction
from ledgerbatch.domain.ledger import Ledger
from ledgerbatch.domain.transaction_builder import BuildResult

logger = logging.getLogger(__name__)


class SettlementService:
    """Applies transactions to a ledger and reports each outcome."""

    def __init__(self, ledger: Ledger):
        """Initialize settlement service.

        Args:
            ledger: Ledger the transfers are applied to
        """
        self.ledger = ledger

    def settle(self, transaction: Transaction) -> OperationResult:
        """Apply one transaction.

        Never raises: an unexpected failure becomes an ERROR result so the
        rest of the batch keeps going.

        Args:
            transaction: A transaction that passed validation

        Returns:
            SUCCESS result, or ERROR result with the reason
        """
        try:
            if transaction.amount <= 0:
                return self._result(
                    transaction, OperationStatus.ERROR, errors.invalid_transfer_amount(transaction.amount)
                )

            if self.ledger.transfer(transaction.from_account, transaction.to_account, transaction.amount):
                return self._result(transaction, OperationStatus.SUCCESS, errors.PROCESSED_SUCCESSFULLY)

            return self._result(
                transaction, OperationStatus.ERROR, errors.insufficient_funds(transaction.from_account)
            )
        except Exception as e:
            logger.exception(
                "Settlement failed for transfer from %s in %s", transaction.from_account, transaction.filename
            )
            return self._result(transaction, OperationStatus.ERROR, errors.processing_failed(e))

    def process(self, build_result: BuildResult) -> OperationResult:
        """Settle a built transaction, or report why it was rejected."""
        if not build_result.is_valid:
            return build_result.to_error_result()
        return self.settle(build_result.transaction)

    @staticmethod
    def _result(transaction: Transaction, status: OperationStatus, message: str) -> OperationResult:
        return OperationResult(
            filename=transaction.filename,
            transaction=transaction,
            status=status,
            message=message,
        )
