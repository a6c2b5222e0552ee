"""Port: external speech-recognition engine."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Engine(Protocol):
    """An opaque recognizer invoked once per transcription."""

    name: str

    def run(self, model_path: Path, audio_path: Path) -> str:
        """Return the engine's raw transcript output. Raises EngineExecutionFailedError."""
        ...
