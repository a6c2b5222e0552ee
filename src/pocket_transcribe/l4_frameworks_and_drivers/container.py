"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from pocket_transcribe.l1_entities.config import AppConfig
from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.model_catalog import ModelCatalog
from pocket_transcribe.l2_use_cases.download_model_use_case import DownloadModelUseCase
from pocket_transcribe.l2_use_cases.ports.archive_installer import ArchiveInstaller
from pocket_transcribe.l2_use_cases.ports.downloader import Downloader
from pocket_transcribe.l2_use_cases.ports.engine import Engine
from pocket_transcribe.l2_use_cases.transcribe_use_case import TranscribeUseCase
from pocket_transcribe.l3_interface_adapters.controllers.model_controller import ModelController
from pocket_transcribe.l3_interface_adapters.gateways.cli_engines import VoskEngine, WhisperEngine
from pocket_transcribe.l3_interface_adapters.gateways.fs_model_store import FileSystemModelStore
from pocket_transcribe.l3_interface_adapters.gateways.http_downloader import RequestsDownloader
from pocket_transcribe.l3_interface_adapters.gateways.paths import DATA_DIR
from pocket_transcribe.l3_interface_adapters.gateways.zip_archive_installer import ZipArchiveInstaller


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        data_dir: Path | None = None,
        downloader: Downloader | None = None,
        engines: dict[EngineKind, Engine] | None = None,
    ) -> None:
        self.config = config
        self.data_dir = data_dir or Path(config.storage.data_dir or DATA_DIR)

        self.catalog = ModelCatalog(config.catalog)
        self.store = FileSystemModelStore(self.data_dir)
        self.store.ensure_layout()
        self.downloader: Downloader = downloader or RequestsDownloader(chunk_size=config.download.chunk_size)
        self.installer: ArchiveInstaller = ZipArchiveInstaller()
        self.engines: dict[EngineKind, Engine] = engines or {
            EngineKind.WHISPER: WhisperEngine(config.engines.whisper_binary),
            EngineKind.VOSK: VoskEngine(config.engines.vosk_binary),
        }

        self.controller = ModelController(
            download_uc=DownloadModelUseCase(
                catalog=self.catalog,
                store=self.store,
                downloader=self.downloader,
                installer=self.installer,
                download_config=config.download,
            ),
            transcribe_uc=TranscribeUseCase(
                catalog=self.catalog,
                store=self.store,
                engines=self.engines,
            ),
        )
