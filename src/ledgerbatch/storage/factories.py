"""Workspace factory: resolves and bootstraps the batch directories."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_HOME = "LEDGERBATCH_HOME"


@dataclass(frozen=True)
class Workspace:
    """Locations used by a batch run."""

    base_dir: Path
    input_dir: Path
    archive_dir: Path
    files_dir: Path
    accounts_path: Path
    report_path: Path


def create_workspace(base_dir: Optional[str] = None) -> Workspace:
    """Create the workspace layout under a base directory.

    Args:
        base_dir: Base directory. If None, checks LEDGERBATCH_HOME
            environment variable, then defaults to the current directory

    Returns:
        Workspace with ``input/``, ``archive/`` and ``files/`` created
    """
    if base_dir is None:
        base_dir = os.environ.get(ENV_HOME)

    base = Path(base_dir) if base_dir is not None else Path.cwd()
    files_dir = base / "files"
    workspace = Workspace(
        base_dir=base,
        input_dir=base / "input",
        archive_dir=base / "archive",
        files_dir=files_dir,
        accounts_path=files_dir / "accounts.txt",
        report_path=files_dir / "report.txt",
    )

    for directory in (workspace.input_dir, workspace.archive_dir, workspace.files_dir):
        directory.mkdir(parents=True, exist_ok=True)

    return workspace
