# releasekit/services/probe/mediainfo_adapter.py
from __future__ import annotations

import json
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from releasekit.common.logging import get_logger
from releasekit.common.probe.mediainfo_helpers import build_mediainfo_cmd
from releasekit.domain.entities.fact_sheet import FactSheet
from releasekit.domain.ports.probe import MediaProbePort
from releasekit.services.mappers.fact_sheet import fact_sheet_from_mediainfo

logger = get_logger(__name__)


@dataclass(eq=False)
class MediaInfoError(RuntimeError):
    """Adapter-level error for probe failures."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class MediaInfoAdapter(MediaProbePort):
    """
    MediaProbePort backed by the `mediainfo` CLI.
    Blocking; the pipeline runs it on a worker thread.
    """

    def __init__(self, mediainfo_bin: str = "mediainfo", timeout_sec: int = 60):
        resolved = shutil.which(mediainfo_bin)
        if not resolved:
            raise MediaInfoError(f"{mediainfo_bin} not found on PATH; install mediainfo or set RELEASEKIT_MEDIAINFO__BIN.")
        self.mediainfo_bin = resolved
        self.timeout_sec = int(timeout_sec)

    def probe(self, path: Path) -> FactSheet:
        if not path:
            raise MediaInfoError("No path provided to probe().")
        p = Path(path)
        if not p.is_file():
            raise MediaInfoError(f"File not found: {p}")

        cmd = build_mediainfo_cmd(p, binary=self.mediainfo_bin)
        logger.debug("mediainfo cmd: %s", " ".join(shlex.quote(c) for c in cmd))
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
                check=False,  # rc handled below so stderr is attached
            )
        except subprocess.TimeoutExpired as e:
            raise MediaInfoError(f"mediainfo timed out after {self.timeout_sec}s", stderr=str(e)) from e
        except OSError as e:
            raise MediaInfoError("Failed to execute mediainfo (OS error).", stderr=str(e)) from e

        if proc.returncode != 0:
            raise MediaInfoError("mediainfo returned non-zero exit code", stderr=proc.stderr, rc=proc.returncode)

        try:
            data = json.loads(proc.stdout or "{}")
        except json.JSONDecodeError as e:
            raise MediaInfoError("mediainfo produced invalid JSON", stderr=proc.stdout) from e

        return fact_sheet_from_mediainfo(data, p.resolve(), file_size=p.stat().st_size)
