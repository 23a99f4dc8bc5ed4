# releasekit/domain/policies/release_name.py
from __future__ import annotations

from typing import List, Optional, Tuple

from releasekit.common.naming.slugger import sanitize_title
from releasekit.domain.dataclasses.release import ReleaseConfig
from releasekit.domain.entities.fact_sheet import FactSheet
from releasekit.domain.entities.movie import Movie
from releasekit.domain.policies.languages import release_language

TEN_BIT = "10bit"

# Filename markers, longest first so "web-dl" wins over "web".
_SOURCE_MARKERS: List[Tuple[str, str]] = [
    ("blu-ray", "BluRay"),
    ("web-rip", "WEBRip"),
    ("bluray", "BluRay"),
    ("web-dl", "WEB-DL"),
    ("webrip", "WEBRip"),
    ("dvdrip", "DVDRip"),
    ("bdrip", "BDRip"),
    ("brrip", "BRRip"),
    ("hdrip", "HDRip"),
    ("webdl", "WEB-DL"),
    ("hdtv", "HDTV"),
    ("dvd", "DVD"),
    ("uhd", "UHD.BluRay"),
    ("web", "WEB"),
]

_BLURAY_BITRATE_FLOOR = 10_000_000


def detect_source(facts: FactSheet) -> str:
    """
    Best-effort guess of the source token when nobody supplied one.
    Filename markers first, then a resolution/container/bitrate heuristic.
    """
    name = facts.file_name.lower()
    for marker, source in _SOURCE_MARKERS:
        if marker in name:
            return source

    container = facts.container.lower()
    resolution = facts.video.resolution
    if resolution == "2160p":
        return "UHD.BluRay" if container in ("mkv", "matroska") else "WEB-DL"
    if resolution == "1080p":
        if container in ("mkv", "matroska") and facts.video.bitrate > _BLURAY_BITRATE_FLOOR:
            return "BluRay"
        return "WEB-DL"
    return ""


class ReleaseNamer:
    """
    Builds warez-style release names:

        Title.Year.Resolution.Source.HDR.VideoCodec.10bit.Audio.Channels.Lang-GROUP

    Every segment is optional except the group suffix; empty segments are skipped.
    """

    def __init__(self, config: Optional[ReleaseConfig] = None) -> None:
        self.config = config or ReleaseConfig()

    def segments(self, movie: Movie, facts: FactSheet, source_type: str) -> List[str]:
        video = facts.video
        parts = [
            sanitize_title(movie.original_title or movie.title),
            movie.year(),
            video.resolution,
            source_type or "",
            video.hdr,
            video.codec_tag,
            TEN_BIT if video.bit_depth == 10 else "",
        ]

        primary = facts.primary_audio
        if primary is not None and primary.codec_tag:
            parts.append(f"{primary.codec_tag}.{primary.layout_short}")

        parts.append(release_language(a.language for a in facts.audio))
        return [p for p in parts if p]

    def compose(self, movie: Movie, facts: FactSheet, source_type: str) -> str:
        name = ".".join(self.segments(movie, facts, source_type))
        return f"{name}-{self.config.group_name}"


def compose_release_name(
    movie: Movie,
    facts: FactSheet,
    source_type: str,
    config: Optional[ReleaseConfig] = None,
) -> str:
    return ReleaseNamer(config).compose(movie, facts, source_type)
