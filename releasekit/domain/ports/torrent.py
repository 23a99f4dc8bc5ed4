from __future__ import annotations
from pathlib import Path
from typing import Protocol
from releasekit.domain.dataclasses.release import PiecePlan

class TorrentWriterPort(Protocol):
    """Hashes the payload described by `plan` and writes a bencoded metainfo file."""
    def write(self, plan: PiecePlan, output_path: Path, *, announce: str = "", comment: str = "", created_by: str = "") -> Path: ...
