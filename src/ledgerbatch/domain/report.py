"""Report service: the append-only audit log of processed operations."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Union

from ledgerbatch.domain.entities import OperationResult
from ledgerbatch.domain.errors import INVALID_DATE_FORMAT, ValidationError
from ledgerbatch.storage.mappers import line_timestamp, result_to_line
from ledgerbatch.utils.date_parser import day_bounds, parse_query_date

logger = logging.getLogger(__name__)


class ReportService:
    """Service for writing and querying the report file."""

    def __init__(self, report_path: Union[str, Path]):
        """Initialize report service.

        Args:
            report_path: Path to the report file
        """
        self.report_path = Path(report_path)

    def exists(self) -> bool:
        return self.report_path.exists()

    def append(self, results: Iterable[OperationResult]) -> int:
        """Append one line per result, creating the file if needed.

        An I/O failure is logged and stops the append; lines already written
        stay in the file.

        Returns:
            Number of lines written
        """
        written = 0
        try:
            self.report_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.report_path, "a", encoding="utf-8") as f:
                for result in results:
                    f.write(result_to_line(result) + "\n")
                    written += 1
        except OSError as e:
            logger.error("Could not write to report %s after %d lines: %s", self.report_path, written, e)
        return written

    def list_all(self) -> list[str]:
        """Return every report line in file order.

        Bytes that are not UTF-8 show up as U+FFFD. A report that exists but
        cannot be read is logged and listed as empty.
        """
        if not self.exists():
            return []
        try:
            with open(self.report_path, "rb") as f:
                return [line.decode("utf-8", errors="replace").rstrip("\r\n") for line in f]
        except OSError as e:
            logger.error("Could not read report %s: %s", self.report_path, e)
            return []

    def list_by_date(self, start_date: str, end_date: str) -> list[str]:
        """Return report lines timestamped within two dates, both inclusive.

        Args:
            start_date: First day, ``yyyy-MM-dd``
            end_date: Last day, ``yyyy-MM-dd``

        Raises:
            ValidationError: If either date is not a valid ``yyyy-MM-dd`` date
        """
        try:
            start = parse_query_date(start_date)
            end = parse_query_date(end_date)
        except ValueError:
            raise ValidationError(INVALID_DATE_FORMAT)

        return self.list_between(*day_bounds(start, end))

    def list_between(self, start: datetime, end: datetime) -> list[str]:
        """Return report lines whose timestamp lies in ``[start, end]``.

        Lines without a readable timestamp are skipped with a warning.
        """
        matching = []
        for line in self.list_all():
            try:
                timestamp = line_timestamp(line)
            except ValueError:
                logger.warning("Skipping report line with unreadable date: %s", line)
                continue
            if start <= timestamp <= end:
                matching.append(line)
        return matching
