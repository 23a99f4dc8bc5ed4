# releasekit/domain/entities/fact_sheet.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Tuple

from releasekit.common.strings.units import format_duration, format_size
from releasekit.domain.policies import tags


@dataclass(frozen=True)
class VideoFacts:
    codec: str = ""
    codec_info: str = ""
    codec_profile: str = ""
    codec_id: str = ""
    width: int = 0
    height: int = 0
    bitrate: int = 0
    frame_rate: float = 0.0
    frame_rate_mode: str = ""
    aspect_ratio: str = ""
    bit_depth: int = 0
    hdr_format: str = ""                 # raw HDR_Format text
    transfer_characteristics: str = ""
    color_space: str = ""
    chroma_subsampling: str = ""
    color_range: str = ""
    color_primaries: str = ""
    matrix_coefficients: str = ""
    stream_size: int = 0

    @property
    def resolution(self) -> str:
        if not (self.width or self.height):
            return ""  # probe reported no frame size
        return tags.resolution_bucket(self.width, self.height)

    @property
    def hdr(self) -> str:
        return tags.hdr_bucket(self.hdr_format, self.transfer_characteristics)

    @property
    def codec_tag(self) -> str:
        return tags.video_codec_tag(self.codec)


@dataclass(frozen=True)
class AudioFacts:
    codec: str = ""
    codec_info: str = ""
    commercial_name: str = ""
    codec_id: str = ""
    channels: int = 0
    channel_layout: str = ""
    sample_rate: int = 0
    bitrate: int = 0
    bitrate_mode: str = ""
    bit_depth: int = 0
    compression: str = ""
    stream_size: int = 0
    language: str = ""
    title: str = ""
    service_kind: str = ""
    default: bool = False
    forced: bool = False

    @property
    def codec_tag(self) -> str:
        return tags.audio_codec_tag(self.codec, self.title)

    @property
    def layout_short(self) -> str:
        return tags.channel_layout_short(self.channels)

    @property
    def layout_long(self) -> str:
        return tags.channel_layout_long(self.channel_layout, self.channels)


@dataclass(frozen=True)
class SubtitleFacts:
    format: str = ""
    codec_id: str = ""
    language: str = ""
    title: str = ""
    default: bool = False
    forced: bool = False

    @property
    def format_display(self) -> str:
        return tags.subtitle_format(self.format, self.codec_id)


@dataclass(frozen=True)
class FactSheet:
    """
    Technical facts about one media file, as reported by the probe.
    Read-only once built; a rename is recorded with with_path(), which
    returns a new sheet.
    """
    file_name: str = ""
    file_path: str = ""
    file_size: int = 0
    container: str = ""
    container_version: str = ""
    duration: int = 0                    # seconds
    overall_bitrate: int = 0
    movie_name: str = ""
    encoded_date: str = ""
    writing_application: str = ""
    writing_library: str = ""
    video: VideoFacts = field(default_factory=VideoFacts)
    audio: Tuple[AudioFacts, ...] = ()
    subtitles: Tuple[SubtitleFacts, ...] = ()

    @property
    def primary_audio(self) -> AudioFacts | None:
        return self.audio[0] if self.audio else None

    def with_path(self, new_path: str | Path) -> "FactSheet":
        p = Path(new_path)
        return replace(self, file_path=str(p), file_name=p.name)

    def file_size_formatted(self) -> str:
        return format_size(self.file_size)

    def duration_formatted(self) -> str:
        return format_duration(self.duration)
