"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import io
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from pocket_transcribe.l1_entities.config import AppConfig
from pocket_transcribe.l1_entities.errors import EngineExecutionFailedError, NetworkFailureError
from pocket_transcribe.l1_entities.model_catalog import ModelCatalog
from pocket_transcribe.l3_interface_adapters.gateways.fs_model_store import FileSystemModelStore
from pocket_transcribe.l4_frameworks_and_drivers.config import build_app_config

EN_ROOT = 'vosk-model-small-en-us-0.15'


def make_vosk_zip(root: str = EN_ROOT, *, marker: bool = True, extra: dict[str, bytes] | None = None) -> bytes:
    """Build an in-memory zip laid out like a Vosk model package."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w') as zf:
        zf.writestr(f'{root}/', b'')
        zf.writestr(f'{root}/am/', b'')
        zf.writestr(f'{root}/am/final.mdl', b'acoustic-model')
        zf.writestr(f'{root}/conf/model.conf', b'--sample-frequency=16000\n')
        if marker:
            zf.writestr(f'{root}/README', b'US English model for mobile Vosk applications\n')
        for name, data in (extra or {}).items():
            zf.writestr(name, data)
    return buf.getvalue()


# --- Protocol-conforming Fakes ---


class FakeDownloader:
    """Fake downloader — writes canned bytes instead of touching the network."""

    def __init__(self, payload: bytes = b'ggml-model-bytes') -> None:
        self._payload = payload
        self._error: str | None = None
        self.fetch_calls: list[tuple[str, Path, float, float]] = []

    def fetch(
        self,
        url: str,
        destination: Path,
        connect_timeout: float,
        read_timeout: float,
        on_progress: Callable[[int], None] | None = None,
    ) -> Path:
        self.fetch_calls.append((url, destination, connect_timeout, read_timeout))
        if self._error is not None:
            raise NetworkFailureError(self._error)
        destination.write_bytes(self._payload)
        if on_progress is not None:
            on_progress(100)
        return destination

    def set_payload(self, payload: bytes) -> None:
        self._payload = payload

    def set_error(self, message: str | None) -> None:
        self._error = message


class FakeEngine:
    """Fake engine — records invocations, returns canned stdout or fails."""

    def __init__(self, name: str = 'fake', stdout: str = '') -> None:
        self.name = name
        self._stdout = stdout
        self._failure: tuple[int, str] | None = None
        self.run_calls: list[tuple[Path, Path]] = []

    def run(self, model_path: Path, audio_path: Path) -> str:
        self.run_calls.append((model_path, audio_path))
        if self._failure is not None:
            returncode, stderr = self._failure
            raise EngineExecutionFailedError(self.name, returncode, stderr)
        return self._stdout

    def set_stdout(self, stdout: str) -> None:
        self._stdout = stdout

    def set_failure(self, returncode: int, stderr: str) -> None:
        self._failure = (returncode, stderr)


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def catalog(default_config: AppConfig) -> ModelCatalog:
    return ModelCatalog(default_config.catalog)


@pytest.fixture
def store(tmp_path: Path) -> FileSystemModelStore:
    s = FileSystemModelStore(tmp_path / 'data')
    s.ensure_layout()
    return s


@pytest.fixture
def fake_downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    p = tmp_path / 'clip.wav'
    p.write_bytes(b'RIFF\x00\x00\x00\x00WAVE')
    return p


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
catalog:
  vosk:
    languages:
      de:
        url: "https://example.test/vosk-model-small-de-0.15.zip"
        root_folder: "vosk-model-small-de-0.15"
download:
  connect_timeout: 5
engines:
  whisper_binary: "/opt/whisper/bin/whisper-cli"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
