"""Model descriptor entity — immutable catalog entry for one installable model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pocket_transcribe.l1_entities.engine_kind import EngineKind


class ModelDescriptor(BaseModel):
    """Where a model comes from and how it is laid out once installed.

    ``local_name`` is the file name (Whisper) or directory name (Vosk) inside the
    engine's model namespace; together with ``engine_kind`` it fully determines
    the installed path.
    """

    model_config = ConfigDict(frozen=True)

    engine_kind: EngineKind
    id: str
    source_url: str
    local_name: str
    archive_root_prefix: str | None = None
    marker_name: str | None = None  # completion marker inside a directory install

    @property
    def is_archive(self) -> bool:
        return self.archive_root_prefix is not None
