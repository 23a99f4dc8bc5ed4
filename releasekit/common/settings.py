# releasekit/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from releasekit.domain.dataclasses.release import ReleaseConfig


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class MediaInfoConfig(BaseModel):
    bin: str = "mediainfo"
    timeout_sec: int = Field(60, ge=1)


class TorrentConfig(BaseModel):
    announce_url: str = ""
    comment: str = "Created by releasekit"
    created_by: str = "releasekit"


class NfoConfig(BaseModel):
    width: int = Field(80, ge=40, le=200)
    label_width: int = Field(25, ge=8, le=60)
    cast_limit: int = Field(5, ge=0)

    @model_validator(mode="after")
    def _label_fits(self) -> "NfoConfig":
        # the box needs room for its edges, the ": " separator and a value column
        if self.label_width > self.width - 8:
            raise ValueError(f"label_width {self.label_width} does not fit in width {self.width}")
        return self


class Settings(BaseSettings):
    # -------- App --------
    app_name: str = "releasekit"
    log_level: str = "INFO"

    # -------- Release --------
    group_name: str = "TORRENT-AIO"
    output_dir: Optional[Path] = None  # defaults to the input file's directory
    default_source: str = ""           # empty: ask the prompter
    skip_torrent: bool = False
    no_rename: bool = False

    # -------- Sub-configs --------
    mediainfo: MediaInfoConfig = MediaInfoConfig()
    torrent: TorrentConfig = TorrentConfig()
    nfo: NfoConfig = NfoConfig()

    model_config = SettingsConfigDict(
        env_prefix="RELEASEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("skip_torrent", "no_rename", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    def release_config(self) -> ReleaseConfig:
        """Freeze the parts of the settings the naming/rendering code needs."""
        return ReleaseConfig(
            group_name=self.group_name,
            nfo_width=self.nfo.width,
            nfo_label_width=self.nfo.label_width,
            cast_limit=self.nfo.cast_limit,
            generator_label=self.app_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Only entry points should call this:
        from releasekit.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings reads env and .env
