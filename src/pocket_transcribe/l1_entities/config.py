"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WhisperCatalogConfig(BaseModel):
    url_template: str
    file_template: str
    known_models: list[str] = Field(default_factory=list)  # listing only; any size resolves


class VoskLanguage(BaseModel):
    url: str
    root_folder: str


class VoskCatalogConfig(BaseModel):
    marker: str
    languages: dict[str, VoskLanguage] = Field(default_factory=dict)


class CatalogConfig(BaseModel):
    whisper: WhisperCatalogConfig
    vosk: VoskCatalogConfig


class StorageConfig(BaseModel):
    data_dir: str | None = None  # None = platform user data dir


class DownloadConfig(BaseModel):
    connect_timeout: float
    whisper_read_timeout: float
    vosk_read_timeout: float
    chunk_size: int


class EnginesConfig(BaseModel):
    whisper_binary: str
    vosk_binary: str


class AppConfig(BaseModel):
    catalog: CatalogConfig
    storage: StorageConfig = Field(default_factory=StorageConfig)
    download: DownloadConfig
    engines: EnginesConfig
