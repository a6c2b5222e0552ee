"""Domain error types."""

from __future__ import annotations


class PocketTranscribeError(Exception):
    """Base class for every failure surfaced by the core."""


class UnsupportedModelError(PocketTranscribeError):
    """Raised when a model identifier is not registered in the catalog."""


class StorageUnavailableError(PocketTranscribeError):
    """Raised when the model store directories cannot be created or written."""


class NetworkFailureError(PocketTranscribeError):
    """Raised when a download times out or fails mid-stream."""


class ArchiveCorruptError(PocketTranscribeError):
    """Raised when a model archive cannot be read or extracted."""


class IncompleteInstallError(ArchiveCorruptError):
    """Raised when extraction finished but the completion marker is missing."""


class ModelNotFoundError(PocketTranscribeError):
    """Raised when transcription is requested for a model that is not installed."""


class AudioNotFoundError(PocketTranscribeError):
    """Raised when the audio file to transcribe does not exist."""


class UnsupportedAudioError(PocketTranscribeError):
    """Raised when the given file is not an audio file."""


class EngineExecutionFailedError(PocketTranscribeError):
    """Raised when an engine process exits non-zero. Carries the captured stderr."""

    def __init__(self, engine: str, returncode: int, stderr: str) -> None:
        self.engine = engine
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f'{engine} transcription failed (exit {returncode}): {stderr}')
