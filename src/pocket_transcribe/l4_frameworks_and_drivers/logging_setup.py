"""File-based debug logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logging(log_dir: Path, verbose: bool = False) -> Path | None:
    """Send the ``pt`` logger tree to ``pt_debug.log`` and, if *verbose*, to stderr.

    Returns the log file path, or None when the directory is not writable.
    """
    root = logging.getLogger('pt')
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):  # re-entrant: one CLI run, one set of handlers
        root.removeHandler(old)
        old.close()

    if verbose:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        root.addHandler(stream)

    log_path = log_dir / 'pt_debug.log'
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError as e:
        root.warning('File logging disabled (%s)', e)
        return None
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    logging.getLogger('pt.cli').info('Debug logging started → %s', log_path)
    return log_path
