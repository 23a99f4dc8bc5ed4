from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ReleaseConfig:
    """
    Per-invocation configuration handed to the composer and the renderers.
    Built once (usually from Settings.release_config()) and passed by parameter;
    nothing in the domain layer reads process-wide settings.
    """
    group_name: str = "TORRENT-AIO"
    nfo_width: int = 80
    nfo_label_width: int = 25
    cast_limit: int = 5
    generator_label: str = "releasekit"


@dataclass(frozen=True)
class PiecePlan:
    """Layout decision handed to the torrent writer together with the final path."""
    path: Path
    total_size: int
    piece_length: int
    is_directory: bool = False


@dataclass(frozen=True)
class ReleaseArtifacts:
    """Where the pipeline put things. Optional paths are None when a step was skipped."""
    release_name: str
    media_path: Path
    nfo_path: Path
    presentation_path: Path
    torrent_path: Optional[Path] = None
    plan: Optional[PiecePlan] = None
