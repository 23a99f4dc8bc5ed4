# releasekit/services/mappers/fact_sheet.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional

from releasekit.domain.entities.fact_sheet import AudioFacts, FactSheet, SubtitleFacts, VideoFacts
from releasekit.services.schemas.mediainfo import MediaInfoDocument, MediaInfoTrack


# ---- tiny parse helpers -------------------------------------------------------
def _parse_float(x: str) -> float:
    try:
        return float(str(x).strip().replace(" ", ""))
    except (TypeError, ValueError):
        return 0.0


def _parse_int(x: str) -> int:
    s = str(x or "").strip().replace(" ", "")
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return int(float(s))
    except (ValueError, OverflowError):
        return 0


def _yes(x: str) -> bool:
    return str(x).strip().lower() == "yes"


def _video(t: MediaInfoTrack) -> VideoFacts:
    return VideoFacts(
        codec=t.format,
        codec_info=t.format_info,
        codec_profile=t.format_profile,
        codec_id=t.codec_id,
        width=_parse_int(t.width),
        height=_parse_int(t.height),
        bitrate=_parse_int(t.bit_rate),
        frame_rate=_parse_float(t.frame_rate),
        frame_rate_mode=t.frame_rate_mode,
        aspect_ratio=t.display_aspect_ratio or t.display_aspect_ratio_raw,
        bit_depth=_parse_int(t.bit_depth),
        hdr_format=t.hdr_format,
        transfer_characteristics=t.transfer_characteristics,
        color_space=t.color_space,
        chroma_subsampling=t.chroma_subsampling,
        color_range=t.color_range,
        color_primaries=t.color_primaries,
        matrix_coefficients=t.matrix_coefficients,
        stream_size=_parse_int(t.stream_size),
    )


def _audio(t: MediaInfoTrack) -> AudioFacts:
    return AudioFacts(
        codec=t.format,
        codec_info=t.format_info,
        commercial_name=t.format_commercial,
        codec_id=t.codec_id,
        channels=_parse_int(t.channels),
        channel_layout=t.channel_layout,
        sample_rate=_parse_int(t.sampling_rate),
        bitrate=_parse_int(t.bit_rate),
        bitrate_mode=t.bit_rate_mode,
        bit_depth=_parse_int(t.bit_depth),
        compression=t.compression_mode,
        stream_size=_parse_int(t.stream_size),
        language=t.language,
        title=t.title,
        service_kind=t.service_kind,
        default=_yes(t.default),
        forced=_yes(t.forced),
    )


def _subtitle(t: MediaInfoTrack) -> SubtitleFacts:
    return SubtitleFacts(
        format=t.format,
        codec_id=t.codec_id,
        language=t.language,
        title=t.title,
        default=_yes(t.default),
        forced=_yes(t.forced),
    )


def fact_sheet_from_mediainfo(
    data: Mapping[str, Any] | None,
    path: Path | str = "",
    *,
    file_size: Optional[int] = None,
) -> FactSheet:
    """
    Build a FactSheet from mediainfo JSON. Safe on partial documents:
    unknown or unparseable values fall back to "" / 0. Only the first video
    track is kept; audio and text tracks keep their probe order.
    """
    doc = MediaInfoDocument.model_validate(data or {})
    p = Path(path) if path else None

    general: Optional[MediaInfoTrack] = None
    video: Optional[VideoFacts] = None
    audio: List[AudioFacts] = []
    subtitles: List[SubtitleFacts] = []

    for track in doc.media.tracks:
        if track.type == "General" and general is None:
            general = track
        elif track.type == "Video" and video is None:
            video = _video(track)
        elif track.type == "Audio":
            audio.append(_audio(track))
        elif track.type == "Text":
            subtitles.append(_subtitle(track))

    g = general or MediaInfoTrack()
    size = file_size if file_size is not None else _parse_int(g.file_size)
    return FactSheet(
        file_name=p.name if p else "",
        file_path=str(p) if p else "",
        file_size=size,
        container=g.format,
        container_version=g.format_version,
        duration=_parse_int(g.duration),
        overall_bitrate=_parse_int(g.overall_bit_rate),
        movie_name=g.movie_name,
        encoded_date=g.encoded_date,
        writing_application=g.writing_application,
        writing_library=g.writing_library,
        video=video or VideoFacts(),
        audio=tuple(audio),
        subtitles=tuple(subtitles),
    )
