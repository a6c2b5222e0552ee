"""Use case: run one transcription request through the matching engine."""

from __future__ import annotations

import logging

from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.errors import (
    AudioNotFoundError,
    ModelNotFoundError,
    UnsupportedAudioError,
)
from pocket_transcribe.l1_entities.model_catalog import ModelCatalog
from pocket_transcribe.l1_entities.transcription import TranscriptionRequest, normalize_transcript
from pocket_transcribe.l2_use_cases.ports.engine import Engine
from pocket_transcribe.l2_use_cases.ports.model_store import ModelStore

log = logging.getLogger('pt.transcribe')


class TranscribeUseCase:
    """Validates preconditions, dispatches to an engine, normalizes the transcript.

    Engine-agnostic: each EngineKind maps to one Engine. Preconditions are checked
    before anything is spawned. No retries, no state kept between requests.
    """

    def __init__(
        self,
        catalog: ModelCatalog,
        store: ModelStore,
        engines: dict[EngineKind, Engine],
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._engines = dict(engines)

    def execute(self, request: TranscriptionRequest) -> str:
        descriptor = self._catalog.descriptor(request.engine_kind, request.model_id)
        model_path = self._store.path_for(descriptor)
        if not self._store.exists(descriptor):
            raise ModelNotFoundError(f'{request.engine_kind.value} model {request.model_id} is not installed at {model_path}')

        audio_path = request.audio.path
        if not audio_path.is_file():
            raise AudioNotFoundError(f'Audio file does not exist: {audio_path}')
        if not request.audio.looks_like_audio():
            raise UnsupportedAudioError(f'Not an audio file: {audio_path} ({request.audio.mime_type})')
        log.debug('Preconditions ok: model=%s audio=%s', model_path, audio_path)

        engine = self._engines[request.engine_kind]
        raw = engine.run(model_path, audio_path)
        text = normalize_transcript(raw)
        log.info('%s transcription finished (%d chars)', engine.name, len(text))
        return text
