"""Port: on-disk model store."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.model_descriptor import ModelDescriptor


class ModelStore(Protocol):
    """Abstract model store — path derivation and presence checks."""

    def ensure_layout(self) -> bool:
        """Create every engine namespace. Logs failures; returns False instead of raising."""
        ...

    def ensure_namespace(self, kind: EngineKind) -> Path:
        """Create one engine namespace. Raises StorageUnavailableError on failure."""
        ...

    def path_for(self, descriptor: ModelDescriptor) -> Path:
        """Deterministic installed path for *descriptor*. No I/O."""
        ...

    def exists(self, descriptor: ModelDescriptor) -> bool:
        """True only for a complete install (file present, or directory plus marker)."""
        ...

    def remove(self, descriptor: ModelDescriptor) -> None:
        """Delete whatever is installed at the descriptor's path."""
        ...

    def discard(self, path: Path) -> None:
        """Delete a scratch file (e.g. a downloaded archive) if it exists."""
        ...
