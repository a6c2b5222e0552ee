"""Tests for shared path constants."""

from __future__ import annotations

from pathlib import Path

from pocket_transcribe.l3_interface_adapters.gateways.paths import (
    CONFIG_DIR,
    DATA_DIR,
    DEFAULT_CONFIG_PATHS,
)


class TestPaths:
    def test_dirs_are_paths(self):
        assert isinstance(CONFIG_DIR, Path)
        assert isinstance(DATA_DIR, Path)

    def test_dir_names(self):
        assert CONFIG_DIR.name == 'pocket-transcribe'
        assert DATA_DIR.name == 'pocket-transcribe'

    def test_default_config_paths_are_under_config_dir(self):
        assert len(DEFAULT_CONFIG_PATHS) == 2
        for p in DEFAULT_CONFIG_PATHS:
            assert p.parent == CONFIG_DIR
