"""Gateway: external recognizer executables — implement the Engine port."""

from __future__ import annotations

import logging
import shlex
import subprocess  # noqa: S404 -- intentional: fixed arg list, not shell=True
from pathlib import Path

from pocket_transcribe.l1_entities.errors import EngineExecutionFailedError

log = logging.getLogger('pt.engine')

_SPAWN_FAILED = 127


class CliEngine:
    """Runs one recognizer binary per request and returns its stdout.

    stdout and stderr are captured separately. A non-zero exit (or a binary that
    cannot be started) raises EngineExecutionFailedError carrying stderr as-is.
    The process is not timed out or cancelled once started.
    """

    name = 'engine'

    def __init__(self, binary: str) -> None:
        self.binary = binary

    def build_command(self, model_path: Path, audio_path: Path) -> list[str]:
        raise NotImplementedError

    def run(self, model_path: Path, audio_path: Path) -> str:
        cmd = self.build_command(model_path, audio_path)
        log.debug('Executing %s command: %s', self.name, shlex.join(cmd))
        try:
            proc = subprocess.run(  # noqa: S603 -- fixed arg list, not shell=True
                cmd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                check=False,
            )
        except OSError as e:
            log.error('Cannot start %s binary %s: %s', self.name, self.binary, e)
            raise EngineExecutionFailedError(self.name, _SPAWN_FAILED, str(e)) from e

        if proc.returncode != 0:
            log.error('%s exited with %d: %s', self.name, proc.returncode, proc.stderr.strip())
            raise EngineExecutionFailedError(self.name, proc.returncode, proc.stderr)
        return proc.stdout


class WhisperEngine(CliEngine):
    """whisper.cpp command-line runner: auto language, plain text, no banner."""

    name = 'whisper'

    def build_command(self, model_path: Path, audio_path: Path) -> list[str]:
        return [
            self.binary,
            '--model',
            str(model_path),
            '--file',
            str(audio_path),
            '--language',
            'auto',
            '--no-timestamps',
            '--no-prints',
        ]


class VoskEngine(CliEngine):
    """Vosk runner taking the model directory and audio file positionally."""

    name = 'vosk'

    def build_command(self, model_path: Path, audio_path: Path) -> list[str]:
        return [self.binary, str(model_path), str(audio_path)]
