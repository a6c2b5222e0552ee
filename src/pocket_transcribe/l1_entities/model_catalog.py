"""Model catalog — pure lookup from (engine kind, id) to a ModelDescriptor."""

from __future__ import annotations

from pocket_transcribe.l1_entities.config import CatalogConfig
from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.errors import UnsupportedModelError
from pocket_transcribe.l1_entities.model_descriptor import ModelDescriptor


def _check_safe_id(model_id: str) -> None:
    # ids become path components in the store
    if not model_id or model_id in {'.', '..'} or '/' in model_id or '\\' in model_id:
        raise UnsupportedModelError(f'Invalid model identifier: {model_id!r}')


class ModelCatalog:
    """Registry of installable models, built from an explicit configuration table.

    Whisper sizes are open-ended: any identifier is turned into a URL and file
    name by template substitution. Vosk models are keyed by language code and
    must be registered.
    """

    def __init__(self, config: CatalogConfig) -> None:
        self._config = config

    def descriptor(self, kind: EngineKind, model_id: str) -> ModelDescriptor:
        _check_safe_id(model_id)
        if kind == EngineKind.WHISPER:
            wc = self._config.whisper
            return ModelDescriptor(
                engine_kind=kind,
                id=model_id,
                source_url=wc.url_template.format(model=model_id),
                local_name=wc.file_template.format(model=model_id),
            )

        vc = self._config.vosk
        lang = vc.languages.get(model_id)
        if lang is None:
            supported = ', '.join(sorted(vc.languages)) or 'none'
            raise UnsupportedModelError(f'Unsupported Vosk language: {model_id} (supported: {supported})')
        return ModelDescriptor(
            engine_kind=kind,
            id=model_id,
            source_url=lang.url,
            local_name=model_id,
            archive_root_prefix=lang.root_folder,
            marker_name=vc.marker,
        )

    def available(self, kind: EngineKind) -> list[ModelDescriptor]:
        """Descriptors worth offering to a user: suggested Whisper sizes, registered Vosk languages."""
        if kind == EngineKind.WHISPER:
            ids = self._config.whisper.known_models
        else:
            ids = sorted(self._config.vosk.languages)
        return [self.descriptor(kind, model_id) for model_id in ids]
