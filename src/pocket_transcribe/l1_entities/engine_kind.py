"""L1 entity: recognition engine kind."""

from __future__ import annotations

import enum


class EngineKind(enum.Enum):
    WHISPER = 'whisper'
    VOSK = 'vosk'
