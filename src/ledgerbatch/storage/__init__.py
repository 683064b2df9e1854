"""Flat-file storage helpers for ledgerbatch."""

from ledgerbatch.storage.factories import Workspace, create_workspace

__all__ = ["Workspace", "create_workspace"]
