"""Shared pytest fixtures for ledgerbatch tests."""

from datetime import datetime

import pytest

from ledgerbatch.domain.batch import BatchService
from ledgerbatch.domain.ledger import Ledger
from ledgerbatch.domain.report import ReportService
from ledgerbatch.storage.factories import create_workspace

FIXED_TIME = datetime(2024, 3, 15, 10, 30, 0)


@pytest.fixture
def workspace(tmp_path):
    """Create a workspace layout in a temporary directory."""
    return create_workspace(base_dir=str(tmp_path))


@pytest.fixture
def ledger():
    """Create a ledger with two funded accounts."""
    ledger = Ledger()
    ledger.get_or_create("11111-11111").balance = 500.0
    ledger.get_or_create("22222-22222").balance = 0.0
    return ledger


@pytest.fixture
def report_service(workspace):
    """Create a ReportService on the workspace report file."""
    return ReportService(workspace.report_path)


@pytest.fixture
def fixed_time():
    """Return the moment every test batch reads its files."""
    return FIXED_TIME


@pytest.fixture
def batch_service(workspace, ledger, report_service):
    """Create a BatchService with a fixed clock."""
    return BatchService(workspace, ledger, report_service, clock=lambda: FIXED_TIME)


@pytest.fixture
def write_input(workspace):
    """Return a helper that writes an instruction file into input/."""

    def _write(name: str, content: str):
        path = workspace.input_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
