"""Use case: make a catalog model present in the store — fetch, unpack, verify."""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable
from pathlib import Path

from pocket_transcribe.l1_entities.config import DownloadConfig
from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.errors import IncompleteInstallError
from pocket_transcribe.l1_entities.model_catalog import ModelCatalog
from pocket_transcribe.l1_entities.model_descriptor import ModelDescriptor
from pocket_transcribe.l2_use_cases.ports.archive_installer import ArchiveInstaller
from pocket_transcribe.l2_use_cases.ports.downloader import Downloader
from pocket_transcribe.l2_use_cases.ports.model_store import ModelStore

log = logging.getLogger('pt.download')


class DownloadModelUseCase:
    """Idempotent fetch+install pipeline.

    A model that is already present is never re-downloaded. Otherwise the raw
    artifact is streamed into the store; archive models are then unpacked into
    their canonical directory and the completion marker is checked. The
    temporary archive is deleted whatever the outcome.

    Blocking. Calls for the same descriptor are serialized; calls for different
    descriptors do not wait on each other.
    """

    def __init__(
        self,
        catalog: ModelCatalog,
        store: ModelStore,
        downloader: Downloader,
        installer: ArchiveInstaller,
        download_config: DownloadConfig,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._downloader = downloader
        self._installer = installer
        self._config = download_config
        # entries vanish once no call holds or waits on the lock
        self._locks: weakref.WeakValueDictionary[Path, threading.Lock] = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    def is_present(self, kind: EngineKind, model_id: str) -> bool:
        return self._store.exists(self._catalog.descriptor(kind, model_id))

    def execute(
        self,
        kind: EngineKind,
        model_id: str,
        on_progress: Callable[[int], None] | None = None,
    ) -> Path:
        """Ensure the model is installed and return its local path."""
        descriptor = self._catalog.descriptor(kind, model_id)
        target = self._store.path_for(descriptor)

        with self._lock_for(target):
            if self._store.exists(descriptor):
                log.debug('%s model %s already present at %s', kind.value, model_id, target)
                return target

            namespace = self._store.ensure_namespace(kind)
            if descriptor.is_archive:
                self._fetch_and_install(descriptor, namespace, target, on_progress)
            else:
                self._downloader.fetch(
                    descriptor.source_url,
                    target,
                    connect_timeout=self._config.connect_timeout,
                    read_timeout=self._read_timeout(kind),
                    on_progress=on_progress,
                )

        log.info('%s model %s installed at %s', kind.value, model_id, target)
        return target

    def _fetch_and_install(
        self,
        descriptor: ModelDescriptor,
        namespace: Path,
        target: Path,
        on_progress: Callable[[int], None] | None,
    ) -> None:
        archive = namespace / f'temp_{descriptor.id}.zip'
        try:
            self._downloader.fetch(
                descriptor.source_url,
                archive,
                connect_timeout=self._config.connect_timeout,
                read_timeout=self._read_timeout(descriptor.engine_kind),
                on_progress=on_progress,
            )
            count = self._installer.install_zip(archive, descriptor.archive_root_prefix or '', target)
        finally:
            self._store.discard(archive)

        if not self._store.exists(descriptor):
            log.error(
                'Extracted %d files for %s but marker %r is missing; removing %s',
                count,
                descriptor.id,
                descriptor.marker_name,
                target,
            )
            self._store.remove(descriptor)
            raise IncompleteInstallError(
                f'Archive for {descriptor.id} did not contain {descriptor.archive_root_prefix}/{descriptor.marker_name}'
            )

    def _read_timeout(self, kind: EngineKind) -> float:
        if kind == EngineKind.VOSK:
            return self._config.vosk_read_timeout
        return self._config.whisper_read_timeout

    def _lock_for(self, path: Path) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(path)
            if lock is None:
                lock = threading.Lock()
                self._locks[path] = lock
            return lock
