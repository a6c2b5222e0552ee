"""Tests for the engine executables — runs real stub scripts as subprocesses."""

from __future__ import annotations

import stat
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from pocket_transcribe.l1_entities.errors import EngineExecutionFailedError
from pocket_transcribe.l3_interface_adapters.gateways.cli_engines import VoskEngine, WhisperEngine

pytestmark = pytest.mark.skipif(sys.platform == 'win32', reason='stub engines are POSIX shell scripts')


def _stub(tmp_path: Path, body: str, name: str = 'engine') -> str:
    script = tmp_path / name
    script.write_text('#!/bin/sh\n' + body, encoding='utf-8')
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)


class TestCommandShape:
    def test_whisper_flags(self):
        cmd = WhisperEngine('/bin/whisper-cli').build_command(Path('/m/ggml-tiny.bin'), Path('/a/clip.wav'))
        assert cmd == [
            '/bin/whisper-cli',
            '--model',
            '/m/ggml-tiny.bin',
            '--file',
            '/a/clip.wav',
            '--language',
            'auto',
            '--no-timestamps',
            '--no-prints',
        ]

    def test_vosk_positional(self):
        cmd = VoskEngine('vosk-transcribe').build_command(Path('/m/en'), Path('/a/clip.wav'))
        assert cmd == ['vosk-transcribe', '/m/en', '/a/clip.wav']


class TestRun:
    def test_returns_stdout(self, tmp_path: Path):
        binary = _stub(tmp_path, 'printf "hello\\nworld"\necho "banner noise" >&2\n')
        assert WhisperEngine(binary).run(Path('m'), Path('a')) == 'hello\nworld'

    def test_receives_arguments(self, tmp_path: Path):
        binary = _stub(tmp_path, 'echo "$1|$2"\n')
        out = VoskEngine(binary).run(tmp_path / 'model dir', tmp_path / 'clip.wav')
        assert out.strip() == f'{tmp_path / "model dir"}|{tmp_path / "clip.wav"}'

    def test_nonzero_exit_carries_stderr(self, tmp_path: Path):
        binary = _stub(tmp_path, 'echo partial\nprintf "error: failed to open audio\\n" >&2\nexit 3\n')
        with pytest.raises(EngineExecutionFailedError) as exc_info:
            VoskEngine(binary).run(Path('m'), Path('a'))
        assert exc_info.value.returncode == 3
        assert exc_info.value.stderr == 'error: failed to open audio\n'
        assert exc_info.value.engine == 'vosk'

    def test_missing_binary(self, tmp_path: Path):
        with pytest.raises(EngineExecutionFailedError) as exc_info:
            WhisperEngine(str(tmp_path / 'not-installed')).run(Path('m'), Path('a'))
        assert exc_info.value.returncode == 127

    def test_no_shell(self, tmp_path: Path):
        binary = _stub(tmp_path, 'echo ok\n')
        with patch(
            'pocket_transcribe.l3_interface_adapters.gateways.cli_engines.subprocess.run',
            wraps=subprocess.run,
        ) as run:
            WhisperEngine(binary).run(Path('m; rm -rf /'), Path('a'))
        assert run.call_args.kwargs.get('shell') in (None, False)
        assert isinstance(run.call_args.args[0], list)
