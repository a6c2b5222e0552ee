"""Gateway: zip model installer — implements ArchiveInstaller port."""

from __future__ import annotations

import logging
import shutil
import zipfile
import zlib
from pathlib import Path

from pocket_transcribe.l1_entities.errors import ArchiveCorruptError

log = logging.getLogger('pt.install')


class ZipArchiveInstaller:
    """Extracts ``<root_prefix>/...`` entries of a zip into *target_dir*, dropping the prefix.

    Any previous install is deleted first. On failure the target is removed, so
    callers see either a fresh install or nothing. Entries outside the prefix are
    skipped. The archive file itself is left for the caller to delete.
    """

    def install_zip(self, archive_path: Path, root_prefix: str, target_dir: Path) -> int:
        try:
            if target_dir.exists() or target_dir.is_symlink():
                log.info('Removing previous install at %s', target_dir)
                _remove(target_dir)
            log.info('Extracting %s into %s', archive_path.name, target_dir)
            count = _extract(archive_path, root_prefix.strip('/') + '/', target_dir)
        except ArchiveCorruptError:
            _discard_partial(target_dir)
            raise
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError) as e:
            _discard_partial(target_dir)
            raise ArchiveCorruptError(f'Cannot install {archive_path.name} into {target_dir}: {e}') from e
        log.info('Extraction complete: %d files in %s', count, target_dir)
        return count


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _discard_partial(path: Path) -> None:
    try:
        if path.exists() or path.is_symlink():
            _remove(path)
    except OSError as e:
        log.warning('Could not remove partial install at %s: %s', path, e)


def _extract(archive_path: Path, prefix: str, target_dir: Path) -> int:
    target_dir.mkdir(parents=True)
    root = target_dir.resolve()
    count = 0
    with zipfile.ZipFile(archive_path) as zf:
        for info in zf.infolist():
            if not info.filename.startswith(prefix):
                continue
            rel = info.filename[len(prefix) :]
            if not rel:
                continue
            dest = (root / rel).resolve()
            if not dest.is_relative_to(root):
                raise ArchiveCorruptError(f'Archive entry escapes install directory: {info.filename}')
            if info.is_dir():
                dest.mkdir(parents=True, exist_ok=True)
                continue
            dest.parent.mkdir(parents=True, exist_ok=True)
            with zf.open(info) as src, dest.open('wb') as dst:
                shutil.copyfileobj(src, dst)
            count += 1
    return count
