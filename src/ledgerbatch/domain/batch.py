"""Batch orchestration: input files in, settled ledger and report out."""

import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ledgerbatch.domain.entities import OperationResult
from ledgerbatch.domain.ledger import Ledger
from ledgerbatch.domain.record_parser import parse_file
from ledgerbatch.domain.report import ReportService
from ledgerbatch.domain.settlement import SettlementService
from ledgerbatch.domain.transaction_builder import build_transaction
from ledgerbatch.storage.factories import Workspace

logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".txt"


@dataclass
class BatchSummary:
    """Outcome of one batch run."""

    results: list[OperationResult] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    archived: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    no_input: bool = False

    @property
    def operation_count(self) -> int:
        return len(self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for result in self.results if result.is_success)

    @property
    def error_count(self) -> int:
        return self.operation_count - self.success_count


class BatchService:
    """Processes every instruction file in the input directory."""

    def __init__(
        self,
        workspace: Workspace,
        ledger: Ledger,
        report_service: Optional[ReportService] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize batch service.

        Args:
            workspace: Directories and files of the run
            ledger: Ledger to settle against and persist
            report_service: Report to append to (defaults to the workspace report)
            clock: Source of the per-file read timestamp
        """
        self.workspace = workspace
        self.ledger = ledger
        self.report_service = report_service or ReportService(workspace.report_path)
        self.settlement_service = SettlementService(ledger)
        self.clock = clock

    def find_input_files(self) -> list[Path]:
        """List ``.txt`` files (any case) directly in the input directory, by name."""
        input_dir = self.workspace.input_dir
        if not input_dir.is_dir():
            return []
        return sorted(
            (path for path in input_dir.iterdir() if path.is_file() and path.name.lower().endswith(INPUT_SUFFIX)),
            key=lambda path: path.name,
        )

    def run(self) -> BatchSummary:
        """Run the batch.

        Settlement already applied is kept even when a later file fails. The
        report is appended and the ledger persisted once, after all files.

        Returns:
            BatchSummary of the run; ``no_input`` is set when there was nothing to do
        """
        summary = BatchSummary()
        files = self.find_input_files()
        if not files:
            logger.info("No %s files in %s", INPUT_SUFFIX, self.workspace.input_dir)
            summary.no_input = True
            return summary

        for path in files:
            summary.files.append(path.name)
            try:
                summary.results.extend(self.process_file(path))
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Could not process file %s: %s", path.name, e)
                summary.errors.append(f"{path.name}: {e}")

            try:
                self.archive_file(path)
                summary.archived.append(path.name)
            except OSError as e:
                logger.error("Could not archive file %s: %s", path.name, e)
                summary.errors.append(f"{path.name}: archive failed: {e}")

        self.report_service.append(summary.results)

        if self.ledger.read_error is not None:
            # Writing now would replace balances that were never loaded
            logger.error("Not saving accounts, the file was not loaded: %s", self.ledger.read_error)
            summary.errors.append(f"accounts: not saved, {self.ledger.read_error}")
        else:
            try:
                self.ledger.persist(self.workspace.accounts_path)
            except OSError as e:
                logger.error("Could not save accounts to %s: %s", self.workspace.accounts_path, e)
                summary.errors.append(f"accounts: {e}")

        return summary

    def process_file(self, path: Path) -> list[OperationResult]:
        """Parse, validate and settle every record of one file.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not UTF-8 text
        """
        timestamp = self.clock()
        records = parse_file(path)
        logger.info("Read %d records from %s", len(records), path.name)

        results = []
        for record in records:
            build_result = build_transaction(record, filename=path.name, timestamp=timestamp)
            results.append(self.settlement_service.process(build_result))
        return results

    def archive_file(self, path: Path) -> Path:
        """Move a file into the archive directory, replacing a same-named file.

        Raises:
            OSError: If the move fails
        """
        self.workspace.archive_dir.mkdir(parents=True, exist_ok=True)
        target = self.workspace.archive_dir / path.name
        if target.exists():
            target.unlink()
        return Path(shutil.move(str(path), str(target)))
