"""Ledger: the in-memory account store persisted to ``accounts.txt``."""

import logging
from pathlib import Path
from typing import Optional, Union

from ledgerbatch.domain.entities import Account
from ledgerbatch.storage.mappers import account_to_line, line_to_account

logger = logging.getLogger(__name__)


class Ledger:
    """Account balances keyed by account id.

    Lifecycle: load at start of a batch, mutate through ``transfer``,
    persist at the end.
    """

    def __init__(self, accounts: Optional[list[Account]] = None):
        """Initialize ledger.

        Args:
            accounts: Initial accounts; a later duplicate id replaces an earlier one
        """
        self._accounts: dict[str, Account] = {}
        # Set when the accounts file existed but could not be read
        self.read_error: Optional[str] = None
        for account in accounts or []:
            self._accounts[account.account_id] = account

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Ledger":
        """Create a ledger from an accounts file.

        A missing file gives an empty ledger. Malformed lines are skipped with
        a warning and an unreadable file is logged; neither is raised.
        """
        ledger = cls()
        ledger.load_from(path)
        return ledger

    def load_from(self, path: Union[str, Path]) -> int:
        """Merge accounts from an accounts file into this ledger.

        Each line is decoded on its own, so a line that is not UTF-8 is
        skipped like any other malformed line. When the file cannot be read
        at all, ``read_error`` is set and the ledger must not be persisted
        over it.

        Returns:
            Number of accounts read
        """
        path = Path(path)
        if not path.exists():
            logger.info("Accounts file %s not found, starting with an empty ledger", path)
            return 0

        loaded = 0
        try:
            with open(path, "rb") as f:
                for line_num, raw_line in enumerate(f, start=1):
                    try:
                        line = raw_line.decode("utf-8").rstrip("\r\n")
                        if not line.strip():
                            continue
                        account = line_to_account(line)
                    except ValueError as e:
                        # UnicodeDecodeError is a ValueError
                        logger.warning("Skipping accounts line %d in %s: %s", line_num, path, e)
                        continue
                    self._accounts[account.account_id] = account
                    loaded += 1
        except OSError as e:
            logger.error("Could not read accounts file %s: %s", path, e)
            self.read_error = f"could not read {path}: {e}"

        return loaded

    def get_or_create(self, account_id: str) -> Account:
        """Get an account, creating it with a zero balance if unknown."""
        account = self._accounts.get(account_id)
        if account is None:
            account = Account(account_id=account_id, balance=0.0)
            self._accounts[account_id] = account
        return account

    def get_balance(self, account_id: str) -> float:
        """Get an account balance without creating the account."""
        account = self._accounts.get(account_id)
        return account.balance if account is not None else 0.0

    def transfer(self, from_id: str, to_id: str, amount: float) -> bool:
        """Move an amount between two accounts.

        Both accounts are created if unknown. Nothing else changes when the
        source balance does not cover the amount.

        Returns:
            True if the transfer was applied, False on insufficient funds
        """
        source = self.get_or_create(from_id)
        destination = self.get_or_create(to_id)

        if source.balance < amount:
            return False

        source.balance -= amount
        destination.balance += amount
        return True

    def persist(self, path: Union[str, Path]) -> None:
        """Overwrite an accounts file with the current snapshot.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            for account in self._accounts.values():
                f.write(account_to_line(account) + "\n")

    def list_accounts(self) -> list[Account]:
        """List all accounts in the order they were first seen."""
        return list(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts
