"""Transcription value objects and transcript normalization."""

from __future__ import annotations

import mimetypes
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from pocket_transcribe.l1_entities.engine_kind import EngineKind

_WHITESPACE = re.compile(r'\s+')


def normalize_transcript(raw: str) -> str:
    """Collapse newlines and runs of whitespace into single spaces, trim the edges."""
    return _WHITESPACE.sub(' ', raw).strip()


class AudioAsset(BaseModel):
    """An audio file handed over by the file-selection layer. Not owned by the core."""

    model_config = ConfigDict(frozen=True)

    path: Path
    mime_type: str | None = None

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> AudioAsset:
        p = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(p.name)
        return cls(path=p, mime_type=mime_type)

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip('.').lower()

    def looks_like_audio(self) -> bool:
        """False only when the mime type is known and is not ``audio/*``."""
        return self.mime_type is None or self.mime_type.startswith('audio/')


class TranscriptionRequest(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    engine_kind: EngineKind
    model_id: str
    audio: AudioAsset
