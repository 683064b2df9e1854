"""Tests for batch orchestration."""

import errno
import logging
import os

from ledgerbatch.domain.batch import BatchService
from ledgerbatch.domain.entities import OperationStatus
from ledgerbatch.domain.ledger import Ledger

EXAMPLE = """from: 11111-11111
to: 22222-22222
amount: 100

from: 11111-11111
to: 22222-22222
amount: 99999
"""


def test_end_to_end_example(batch_service, workspace, write_input, ledger):
    """Test a covered and an uncovered transfer in one file."""
    write_input("transfers.txt", EXAMPLE)

    summary = batch_service.run()

    assert [r.status for r in summary.results] == [OperationStatus.SUCCESS, OperationStatus.ERROR]
    assert summary.results[1].message == "insufficient funds on account 11111-11111"
    assert ledger.get_balance("11111-11111") == 400.0
    assert ledger.get_balance("22222-22222") == 100.0

    assert workspace.accounts_path.read_text(encoding="utf-8").splitlines() == [
        "11111-11111 | 400.0",
        "22222-22222 | 100.0",
    ]
    assert workspace.report_path.read_text(encoding="utf-8").splitlines() == [
        "2024-03-15 10:30:00 | transfers.txt | transfer from 11111-11111 to 22222-22222100.0"
        " | SUCCESS | processed successfully",
        "2024-03-15 10:30:00 | transfers.txt | transfer from 11111-11111 to 22222-2222299999.0"
        " | ERROR | insufficient funds on account 11111-11111",
    ]


def test_files_are_archived(batch_service, workspace, write_input):
    """Test that processed files move to the archive directory."""
    write_input("a.txt", EXAMPLE)

    summary = batch_service.run()

    assert summary.archived == ["a.txt"]
    assert not (workspace.input_dir / "a.txt").exists()
    assert (workspace.archive_dir / "a.txt").read_text(encoding="utf-8") == EXAMPLE


def test_archive_overwrites_existing(batch_service, workspace, write_input):
    """Test that a same-named archived file is replaced."""
    (workspace.archive_dir / "a.txt").write_text("old", encoding="utf-8")
    write_input("a.txt", "amount: 1\n")

    batch_service.run()

    assert (workspace.archive_dir / "a.txt").read_text(encoding="utf-8") == "amount: 1\n"


def test_only_txt_files_case_insensitive(batch_service, workspace, write_input):
    """Test that only .txt files directly in input/ are processed."""
    write_input("upper.TXT", "amount: 1\n")
    write_input("notes.md", "amount: 1\n")
    nested = workspace.input_dir / "nested"
    nested.mkdir()
    (nested / "deep.txt").write_text("amount: 1\n", encoding="utf-8")

    summary = batch_service.run()

    assert summary.files == ["upper.TXT"]
    assert (workspace.input_dir / "notes.md").exists()
    assert (nested / "deep.txt").exists()


def test_files_processed_in_name_order(batch_service, write_input, ledger):
    """Test that later files see balances settled by earlier ones."""
    write_input("b.txt", "from: 22222-22222\nto: 33333-33333\namount: 50\n")
    write_input("a.txt", "from: 11111-11111\nto: 22222-22222\namount: 50\n")

    summary = batch_service.run()

    assert summary.files == ["a.txt", "b.txt"]
    assert all(r.is_success for r in summary.results)
    assert ledger.get_balance("33333-33333") == 50.0


def test_no_input_files(batch_service, workspace, write_input):
    """Test that an empty input directory does nothing."""
    write_input("readme.md", "nothing here")

    summary = batch_service.run()

    assert summary.no_input
    assert summary.operation_count == 0
    assert not workspace.report_path.exists()
    assert not workspace.accounts_path.exists()


def test_summary_counts(batch_service, write_input):
    """Test result counters."""
    write_input("mixed.txt", EXAMPLE + "\nfrom: abc\nto: 22222-22222\namount: 10\n\njunk\n")

    summary = batch_service.run()

    assert summary.operation_count == 3
    assert summary.success_count == 1
    assert summary.error_count == 2
    assert summary.results[2].message == "malformed sender account: abc"
    assert summary.results[2].transaction.from_account == "abc"


def test_unreadable_file_is_archived_and_skipped(batch_service, workspace, write_input, caplog):
    """Test that a file that cannot be decoded does not stop the batch."""
    (workspace.input_dir / "a.txt").write_bytes(b"\xff\xfe\x00garbage")
    write_input("b.txt", "from: 11111-11111\nto: 22222-22222\namount: 5\n")

    with caplog.at_level(logging.ERROR):
        summary = batch_service.run()

    assert summary.files == ["a.txt", "b.txt"]
    assert summary.operation_count == 1
    assert summary.errors and summary.errors[0].startswith("a.txt")
    assert (workspace.archive_dir / "a.txt").exists()
    assert any("Could not process file a.txt" in r.message for r in caplog.records)


def test_archive_failure_does_not_stop_batch(batch_service, workspace, write_input, monkeypatch):
    """Test that a failed move is recorded and the batch continues."""
    write_input("a.txt", "from: 11111-11111\nto: 22222-22222\namount: 5\n")
    write_input("b.txt", "from: 11111-11111\nto: 22222-22222\namount: 5\n")

    original_archive = batch_service.archive_file

    def flaky_archive(path):
        if path.name == "a.txt":
            raise PermissionError("locked")
        return original_archive(path)

    monkeypatch.setattr(batch_service, "archive_file", flaky_archive)
    summary = batch_service.run()

    assert summary.operation_count == 2
    assert summary.archived == ["b.txt"]
    assert summary.errors == ["a.txt: archive failed: locked"]


def test_persist_failure_is_recorded(workspace, write_input, monkeypatch, fixed_time):
    """Test that a failed ledger save is recorded, not raised."""
    ledger = Ledger()
    write_input("a.txt", "amount: 1\n")

    def broken_persist(path):
        raise OSError("read-only")

    monkeypatch.setattr(ledger, "persist", broken_persist)
    summary = BatchService(workspace, ledger, clock=lambda: fixed_time).run()

    assert summary.errors == ["accounts: read-only"]
    assert workspace.report_path.exists()


def test_settled_transfers_survive_later_failures(batch_service, workspace, write_input, ledger):
    """Test that settlement is never rolled back."""
    write_input("a.txt", "from: 11111-11111\nto: 22222-22222\namount: 100\n")
    (workspace.input_dir / "b.txt").write_bytes(b"\xff\xfe")

    batch_service.run()

    assert ledger.get_balance("11111-11111") == 400.0
    assert "11111-11111 | 400.0" in workspace.accounts_path.read_text(encoding="utf-8")


def test_results_accumulate_across_runs(batch_service, workspace, write_input):
    """Test that a second run appends to the same report."""
    write_input("a.txt", "amount: 1\n")
    batch_service.run()
    write_input("a.txt", "amount: 2\n")
    batch_service.run()

    assert len(workspace.report_path.read_text(encoding="utf-8").splitlines()) == 2


def test_undecodable_accounts_line_keeps_other_balances(workspace, write_input, fixed_time):
    """Test that one bad accounts line does not wipe the other balances."""
    workspace.accounts_path.write_bytes(
        b"11111-11111 | 500.0\n"
        b"\xff\xfe bad | 1\n"
        b"22222-22222 | 7.0\n"
        b"33333-33333 | 9.0\n"
    )
    write_input("a.txt", "from: 11111-11111\nto: 44444-44444\namount: 100\n")
    ledger = Ledger.load(workspace.accounts_path)

    summary = BatchService(workspace, ledger, clock=lambda: fixed_time).run()

    assert summary.results[0].is_success
    assert workspace.accounts_path.read_text(encoding="utf-8").splitlines() == [
        "11111-11111 | 400.0",
        "22222-22222 | 7.0",
        "33333-33333 | 9.0",
        "44444-44444 | 100.0",
    ]


def test_unreadable_accounts_file_is_not_overwritten(workspace, write_input, fixed_time):
    """Test that a ledger that failed to load is not persisted."""
    ledger = Ledger()
    ledger.read_error = "could not read accounts.txt: denied"
    workspace.accounts_path.write_text("11111-11111 | 500.0\n", encoding="utf-8")
    write_input("a.txt", "from: 11111-11111\nto: 22222-22222\namount: 1\n")

    summary = BatchService(workspace, ledger, clock=lambda: fixed_time).run()

    assert summary.errors == ["accounts: not saved, could not read accounts.txt: denied"]
    assert workspace.accounts_path.read_text(encoding="utf-8") == "11111-11111 | 500.0\n"
    assert workspace.report_path.exists()


def test_archive_across_filesystems(batch_service, workspace, write_input, monkeypatch):
    """Test archiving when a rename between directories is not possible."""
    (workspace.archive_dir / "a.txt").write_text("old", encoding="utf-8")
    write_input("a.txt", "amount: 1\n")

    def cross_device_rename(src, dst):
        raise OSError(errno.EXDEV, "Invalid cross-device link")

    monkeypatch.setattr(os, "rename", cross_device_rename)
    summary = batch_service.run()

    assert summary.archived == ["a.txt"]
    assert summary.errors == []
    assert not (workspace.input_dir / "a.txt").exists()
    assert (workspace.archive_dir / "a.txt").read_text(encoding="utf-8") == "amount: 1\n"
