"""App config defaults and the build_app_config factory."""

from __future__ import annotations

import copy

from pocket_transcribe.l1_entities.config import AppConfig
from pocket_transcribe.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

_VOSK_BASE_URL = 'https://alphacephei.com/vosk/models'

APP_CONFIG_DEFAULTS: dict = {
    'catalog': {
        'whisper': {
            'url_template': 'https://huggingface.co/ggerganov/whisper.cpp/resolve/main/ggml-{model}.bin?download=true',
            'file_template': 'ggml-{model}.bin',
            'known_models': ['tiny', 'base', 'small'],
        },
        'vosk': {
            'marker': 'README',
            'languages': {
                'en': {
                    'url': f'{_VOSK_BASE_URL}/vosk-model-small-en-us-0.15.zip',
                    'root_folder': 'vosk-model-small-en-us-0.15',
                },
                'cn': {
                    'url': f'{_VOSK_BASE_URL}/vosk-model-small-cn-0.22.zip',
                    'root_folder': 'vosk-model-small-cn-0.22',
                },
                'uk': {
                    'url': f'{_VOSK_BASE_URL}/vosk-model-small-uk-v3-nano.zip',
                    'root_folder': 'vosk-model-small-uk-v3-nano',
                },
                'ru': {
                    'url': f'{_VOSK_BASE_URL}/vosk-model-small-ru-0.22.zip',
                    'root_folder': 'vosk-model-small-ru-0.22',
                },
            },
        },
    },
    'storage': {
        'data_dir': None,
    },
    'download': {
        'connect_timeout': 15.0,
        'whisper_read_timeout': 30.0,
        'vosk_read_timeout': 60.0,
        'chunk_size': 65536,
    },
    'engines': {
        'whisper_binary': 'whisper-cli',
        'vosk_binary': 'vosk-transcribe',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
