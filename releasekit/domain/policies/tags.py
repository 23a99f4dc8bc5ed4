# releasekit/domain/policies/tags.py
"""
Canonical release tags derived from raw probe strings.

Every function here is total: unmapped input falls through to an echo of the
raw value (usually upper-cased), never an exception. Priority is the written
order of each rule list; more specific rules sit above their generic codec.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Tuple

# (predicate on lowered codec, lowered title) -> tag
_AudioRule = Tuple[Callable[[str, str], bool], str]

_VIDEO_CODEC_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("hevc", "h265", "x265"), "x265"),
    (("avc", "h264", "x264"), "x264"),
    (("av1",), "AV1"),
    (("vp9",), "VP9"),
]

_AUDIO_CODEC_RULES: List[_AudioRule] = [
    (lambda c, t: "truehd" in c and "atmos" in t, "TrueHD.Atmos"),
    (lambda c, t: "truehd" in c, "TrueHD"),
    (lambda c, t: "dts" in c and "x" in t, "DTS-X"),
    (lambda c, t: "dts-hd" in c or ("dts" in c and "ma" in t), "DTS-HD.MA"),
    (lambda c, t: "dts" in c, "DTS"),
    (lambda c, t: ("e-ac-3" in c or "eac3" in c) and "atmos" in t, "EAC3.Atmos"),
    (lambda c, t: "e-ac-3" in c or "eac3" in c, "EAC3"),
    (lambda c, t: "ac-3" in c or "ac3" in c, "AC3"),
    (lambda c, t: "aac" in c, "AAC"),
    (lambda c, t: "flac" in c, "FLAC"),
    (lambda c, t: "opus" in c, "Opus"),
]

_CHANNELS_SHORT: Dict[int, str] = {1: "1.0", 2: "2.0", 6: "5.1", 8: "7.1"}

_CHANNELS_LONG: Dict[int, str] = {
    1: "C",
    2: "L R",
    6: "L R C LFE Ls Rs",
    8: "L R C LFE Ls Rs Lb Rb",
}

SRT = "SRT (UTF-8)"

# (predicate on lowered format, lowered codec id) -> display name
_SUBTITLE_RULES: List[Tuple[Callable[[str, str], bool], str]] = [
    (lambda f, c: "subrip" in f, SRT),
    (lambda f, c: f == "utf-8" and c in ("s_text/utf8", ""), SRT),
    (lambda f, c: c == "s_text/utf8", SRT),
    (lambda f, c: "pgs" in f, "PGS"),
    (lambda f, c: c == "s_hdmv/pgs", "PGS"),
    (lambda f, c: "vobsub" in f, "VobSub"),
    (lambda f, c: c == "s_vobsub", "VobSub"),
    (lambda f, c: "ass" in f, "ASS"),
    (lambda f, c: "ssa" in f, "SSA"),
    (lambda f, c: c in ("s_text/ass", "s_text/ssa"), "ASS"),
    (lambda f, c: "webvtt" in f, "WebVTT"),
    (lambda f, c: "dvb" in f, "DVB"),
    (lambda f, c: "ttml" in f, "TTML"),
]


def resolution_bucket(width: int, height: int) -> str:
    """
    Bucket a frame size. Width and height are each sufficient on their own,
    so a 1920x800 scope frame is still 1080p.
    """
    if height >= 2160 or width >= 3840:
        return "2160p"
    if height >= 1080 or width >= 1920:
        return "1080p"
    if height >= 720 or width >= 1280:
        return "720p"
    if height >= 480:
        return "480p"
    return f"{height}p"


def hdr_bucket(hdr_format: str, transfer_characteristics: str = "") -> str:
    fmt = (hdr_format or "").lower()
    transfer = (transfer_characteristics or "").lower()

    found: List[str] = []
    if "dolby vision" in fmt:
        found.append("DV")
    if "hdr10+" in fmt or "hdr10+" in transfer:
        found.append("HDR10+")
    elif "hdr10" in fmt or "pq" in transfer:
        found.append("HDR10")
    if "hlg" in fmt:
        found.append("HLG")
    return "+".join(found)


def video_codec_tag(codec: str) -> str:
    lowered = (codec or "").lower()
    for needles, tag in _VIDEO_CODEC_RULES:
        if any(n in lowered for n in needles):
            return tag
    return (codec or "").upper()


def audio_codec_tag(codec: str, title: str = "") -> str:
    c = (codec or "").lower()
    t = (title or "").lower()
    for matches, tag in _AUDIO_CODEC_RULES:
        if matches(c, t):
            return tag
    return (codec or "").upper()


def channel_layout_short(channels: int) -> str:
    return _CHANNELS_SHORT.get(channels, f"{channels}.0")


def channel_layout_long(explicit: str, channels: int) -> str:
    if explicit:
        return explicit
    return _CHANNELS_LONG.get(channels, "")


def subtitle_format(fmt: str, codec_id: str = "") -> str:
    f = (fmt or "").lower()
    c = (codec_id or "").lower()
    for matches, name in _SUBTITLE_RULES:
        if matches(f, c):
            return name
    if fmt and fmt != "UTF-8":
        return fmt
    return SRT
