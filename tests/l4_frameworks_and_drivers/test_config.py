"""Tests for config defaults and the build_app_config factory."""

from __future__ import annotations

import copy

import pytest
from pydantic import ValidationError

from pocket_transcribe.l4_frameworks_and_drivers.config import APP_CONFIG_DEFAULTS, build_app_config


class TestBuildAppConfig:
    def test_defaults_produce_valid_config(self):
        cfg = build_app_config({})
        assert cfg.download.connect_timeout == 15.0
        assert cfg.download.whisper_read_timeout == 30.0
        assert cfg.download.vosk_read_timeout == 60.0
        assert cfg.catalog.vosk.marker == 'README'
        assert sorted(cfg.catalog.vosk.languages) == ['cn', 'en', 'ru', 'uk']
        assert cfg.catalog.vosk.languages['uk'].root_folder == 'vosk-model-small-uk-v3-nano'
        assert cfg.storage.data_dir is None
        assert cfg.engines.whisper_binary == 'whisper-cli'

    def test_user_overrides_take_precedence(self):
        cfg = build_app_config(
            {
                'catalog': {'vosk': {'languages': {'de': {'url': 'https://x/de.zip', 'root_folder': 'de'}}}},
                'engines': {'vosk_binary': '/opt/vosk'},
            }
        )
        assert 'de' in cfg.catalog.vosk.languages
        assert 'en' in cfg.catalog.vosk.languages  # default preserved
        assert cfg.engines.vosk_binary == '/opt/vosk'
        assert cfg.engines.whisper_binary == 'whisper-cli'

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            build_app_config({'download': {'connect_timeout': 'soon'}})

    def test_build_does_not_mutate_defaults(self):
        snapshot = copy.deepcopy(APP_CONFIG_DEFAULTS)
        build_app_config({'engines': {'whisper_binary': 'mutant'}})
        assert APP_CONFIG_DEFAULTS == snapshot
