"""Gateway: filesystem model store — implements ModelStore port."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.errors import StorageUnavailableError
from pocket_transcribe.l1_entities.model_descriptor import ModelDescriptor

log = logging.getLogger('pt.store')


class FileSystemModelStore:
    """Stores models under ``<root>/<engine>/models/<name>``.

    Whisper models are single files; Vosk models are directories that count as
    installed only once their completion marker file is present.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def namespace_dir(self, kind: EngineKind) -> Path:
        return self._root / kind.value / 'models'

    def ensure_namespace(self, kind: EngineKind) -> Path:
        path = self.namespace_dir(kind)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(f'Cannot create model directory {path}: {e}') from e
        return path

    def ensure_layout(self) -> bool:
        ok = True
        for kind in EngineKind:
            try:
                self.ensure_namespace(kind)
            except StorageUnavailableError as e:
                log.warning('%s', e)
                ok = False
        log.debug('Model store layout under %s ready=%s', self._root, ok)
        return ok

    def path_for(self, descriptor: ModelDescriptor) -> Path:
        return self.namespace_dir(descriptor.engine_kind) / descriptor.local_name

    def exists(self, descriptor: ModelDescriptor) -> bool:
        path = self.path_for(descriptor)
        if descriptor.marker_name is None:
            return path.is_file()
        return path.is_dir() and (path / descriptor.marker_name).is_file()

    def remove(self, descriptor: ModelDescriptor) -> None:
        path = self.path_for(descriptor)
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
        log.info('Removed %s', path)

    def discard(self, path: Path) -> None:
        path.unlink(missing_ok=True)
