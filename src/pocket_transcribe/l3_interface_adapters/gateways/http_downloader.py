"""Gateway: HTTP downloader over requests — implements Downloader port."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

import requests

from pocket_transcribe.l1_entities.errors import NetworkFailureError

log = logging.getLogger('pt.download')

DEFAULT_CHUNK_SIZE = 64 * 1024


class _PercentReporter:
    """Turns byte counts into 0-100 progress callbacks, emitting only on change."""

    def __init__(self, total: int, callback: Callable[[int], None]) -> None:
        self.total = total
        self.n = 0
        self._callback = callback
        self._last = -1
        if self.total > 0:
            self._emit(0)

    def update(self, n: int) -> None:
        self.n += n
        if self.total > 0:
            self._emit(min(int(self.n / self.total * 100), 100))

    def _emit(self, percent: int) -> None:
        if percent != self._last:
            self._last = percent
            self._callback(percent)


class RequestsDownloader:
    """Streams a URL to disk in chunks; never buffers the whole body.

    Bytes go to ``<destination>.part`` and are renamed into place only after the
    stream completes, so *destination* is either complete or absent. No retries.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunk_size = chunk_size

    def fetch(
        self,
        url: str,
        destination: Path,
        connect_timeout: float,
        read_timeout: float,
        on_progress: Callable[[int], None] | None = None,
    ) -> Path:
        part = destination.with_name(destination.name + '.part')
        log.info('Downloading %s -> %s', url, destination)
        try:
            written = self._stream(url, part, (connect_timeout, read_timeout), on_progress)
            os.replace(part, destination)
        except (requests.RequestException, OSError) as e:
            log.error('Download of %s failed: %s', url, e)
            destination.unlink(missing_ok=True)
            raise NetworkFailureError(f'Failed to download {url}: {e}') from e
        finally:
            part.unlink(missing_ok=True)
        log.info('Downloaded %d bytes to %s', written, destination)
        return destination

    def _stream(
        self,
        url: str,
        part: Path,
        timeout: tuple[float, float],
        on_progress: Callable[[int], None] | None,
    ) -> int:
        with requests.get(url, stream=True, timeout=timeout) as resp:
            resp.raise_for_status()
            total = int(resp.headers.get('Content-Length') or 0)
            reporter = _PercentReporter(total, on_progress) if on_progress else None
            written = 0
            with part.open('wb') as f:
                for chunk in resp.iter_content(chunk_size=self._chunk_size):
                    if not chunk:
                        continue
                    f.write(chunk)
                    written += len(chunk)
                    if reporter is not None:
                        reporter.update(len(chunk))
        return written
