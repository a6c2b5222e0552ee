"""Port: remote resource downloader."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol


class Downloader(Protocol):
    """Abstract downloader — streams one URL to one local file, single attempt."""

    def fetch(
        self,
        url: str,
        destination: Path,
        connect_timeout: float,
        read_timeout: float,
        on_progress: Callable[[int], None] | None = None,
    ) -> Path:
        """Download *url* to *destination*. Raises NetworkFailureError, leaving no partial file."""
        ...
