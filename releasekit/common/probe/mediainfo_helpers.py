# releasekit/common/probe/mediainfo_helpers.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def build_mediainfo_cmd(
    input_path: str | Path,
    *,
    binary: str = "mediainfo",
    extra_args: Iterable[str] | None = None,
) -> List[str]:
    """
    Build a mediainfo command that emits the full JSON track list.
    The input path is always the last element.
    """
    cmd = [binary, "--Output=JSON", "--Full"]
    if extra_args:
        cmd.extend(extra_args)
    cmd.append(str(input_path))
    return cmd
