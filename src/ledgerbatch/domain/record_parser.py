"""Record parser for transfer instruction files.

An instruction file is a sequence of groups separated by blank lines. Each
group holds ``from:``, ``to:`` and ``amount:`` directives in any order::

    from: 11111-11111
    to: 22222-22222
    amount: 100

Lines that match no directive are ignored. A repeated directive within a
group overwrites the earlier value.
"""

import re
from pathlib import Path
from typing import Iterable, Optional

from ledgerbatch.domain.entities import RawRecord

FROM_PATTERN = re.compile(r"from:\s*(\d{5}-\d{5}|\S+)")
TO_PATTERN = re.compile(r"to:\s*(\d{5}-\d{5}|\S+)")
AMOUNT_PATTERN = re.compile(r"amount:\s*(.+)")


class RecordAccumulator:
    """Collects directive values until a record boundary is reached."""

    def __init__(self):
        self._fields: dict[str, str] = {}

    def feed(self, line: str) -> None:
        """Apply one trimmed line. The first matching directive wins."""
        match = FROM_PATTERN.search(line)
        if match:
            self._fields["from_account"] = match.group(1)
            return

        match = TO_PATTERN.search(line)
        if match:
            self._fields["to_account"] = match.group(1)
            return

        match = AMOUNT_PATTERN.search(line)
        if match:
            self._fields["amount"] = match.group(1).strip()

    def flush(self) -> Optional[RawRecord]:
        """Close the current record and start a new one.

        Returns:
            The completed record, or None if no directive was seen
        """
        record = RawRecord(**self._fields)
        self._fields = {}
        if record.is_empty():
            return None
        return record


def parse_records(lines: Iterable[str]) -> list[RawRecord]:
    """Split instruction lines into raw records.

    Args:
        lines: Lines of one instruction file, in file order

    Returns:
        One RawRecord per group that contains at least one directive
    """
    records = []
    accumulator = RecordAccumulator()

    for line in lines:
        line = line.strip()
        if not line:
            record = accumulator.flush()
            if record is not None:
                records.append(record)
            continue
        accumulator.feed(line)

    record = accumulator.flush()
    if record is not None:
        records.append(record)

    return records


def parse_file(path: Path, encoding: str = "utf-8") -> list[RawRecord]:
    """Read an instruction file and parse its records.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid text in ``encoding``
    """
    with open(path, "r", encoding=encoding) as f:
        return parse_records(f)
