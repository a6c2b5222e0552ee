"""ModelController — the whole surface the presentation layer talks to."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.errors import UnsupportedModelError
from pocket_transcribe.l1_entities.transcription import AudioAsset, TranscriptionRequest
from pocket_transcribe.l2_use_cases.download_model_use_case import DownloadModelUseCase
from pocket_transcribe.l2_use_cases.transcribe_use_case import TranscribeUseCase

log = logging.getLogger('pt.controller')


def _engine_kind(kind: EngineKind | str) -> EngineKind:
    try:
        return EngineKind(kind)
    except ValueError as e:
        supported = ', '.join(k.value for k in EngineKind)
        raise UnsupportedModelError(f'Unknown engine kind: {kind!r} (supported: {supported})') from e


class ModelController:
    """Three blocking calls: presence check, download, transcribe.

    Every call may take a long time; run it on a worker thread and marshal the
    result back. Failures are raised as PocketTranscribeError subclasses.
    """

    def __init__(self, download_uc: DownloadModelUseCase, transcribe_uc: TranscribeUseCase) -> None:
        self._download_uc = download_uc
        self._transcribe_uc = transcribe_uc

    def is_model_present(self, kind: EngineKind | str, model_id: str) -> bool:
        return self._download_uc.is_present(_engine_kind(kind), model_id)

    def download_model(
        self,
        kind: EngineKind | str,
        model_id: str,
        on_progress: Callable[[int], None] | None = None,
    ) -> Path:
        return self._download_uc.execute(_engine_kind(kind), model_id, on_progress=on_progress)

    def transcribe(
        self,
        kind: EngineKind | str,
        model_id: str,
        audio_path: str | Path,
        mime_type: str | None = None,
    ) -> str:
        request = TranscriptionRequest(
            engine_kind=_engine_kind(kind),
            model_id=model_id,
            audio=AudioAsset.from_path(audio_path, mime_type),
        )
        log.debug('Transcribe request: %s', request)
        return self._transcribe_uc.execute(request)
