"""Port: model archive installer."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ArchiveInstaller(Protocol):
    """Abstract installer — unpacks a packaged model into its store directory."""

    def install_zip(self, archive_path: Path, root_prefix: str, target_dir: Path) -> int:
        """Replace *target_dir* with the archive's *root_prefix* folder. Returns files written.

        Raises ArchiveCorruptError; *target_dir* is absent afterwards in that case.
        """
        ...
