import pytest

from releasekit.domain.policies import tags


@pytest.mark.parametrize(
    "width,height,expected",
    [
        (3840, 2160, "2160p"),
        (3840, 1600, "2160p"),   # scope UHD: width alone qualifies
        (1920, 2160, "2160p"),
        (1920, 1080, "1080p"),
        (1440, 1080, "1080p"),
        (1920, 800, "1080p"),
        (1900, 1079, "720p"),
        (1280, 536, "720p"),
        (1000, 720, "720p"),
        (720, 480, "480p"),
        (640, 360, "360p"),
        (0, 0, "0p"),
    ],
)
def test_resolution_bucket(width, height, expected):
    assert tags.resolution_bucket(width, height) == expected


@pytest.mark.parametrize(
    "hdr,transfer,expected",
    [
        ("", "", ""),
        ("Dolby Vision", "", "DV"),
        ("Dolby Vision / SMPTE ST 2094 App 4", "", "DV"),
        ("SMPTE ST 2094 App 4 / HDR10+ Profile A", "PQ", "HDR10+"),
        ("SMPTE ST 2086 / HDR10", "", "HDR10"),
        ("", "PQ", "HDR10"),
        ("Dolby Vision / HDR10", "PQ", "DV+HDR10"),
        ("HLG", "", "HLG"),
        ("Dolby Vision / HLG", "HLG", "DV+HLG"),
        ("", "BT.709", ""),
    ],
)
def test_hdr_bucket(hdr, transfer, expected):
    assert tags.hdr_bucket(hdr, transfer) == expected


@pytest.mark.parametrize(
    "codec,expected",
    [
        ("HEVC", "x265"),
        ("h265", "x265"),
        ("AVC", "x264"),
        ("H.264 / x264", "x264"),
        ("AV1", "AV1"),
        ("VP9", "VP9"),
        ("mpeg-4 visual", "MPEG-4 VISUAL"),
        ("", ""),
    ],
)
def test_video_codec_tag(codec, expected):
    assert tags.video_codec_tag(codec) == expected


@pytest.mark.parametrize(
    "codec,title,expected",
    [
        ("TrueHD", "Dolby ATMOS 7.1", "TrueHD.Atmos"),
        ("MLP FBA TrueHD", "", "TrueHD"),
        ("DTS", "DTS:X", "DTS-X"),
        ("DTS-HD", "", "DTS-HD.MA"),
        ("DTS", "Master Audio", "DTS-HD.MA"),
        ("DTS", "", "DTS"),
        ("E-AC-3", "Atmos", "EAC3.Atmos"),
        ("E-AC-3", "", "EAC3"),
        ("AC-3", "", "AC3"),
        ("AAC LC", "", "AAC"),
        ("FLAC", "", "FLAC"),
        ("Opus", "", "Opus"),
        ("pcm", "", "PCM"),
    ],
)
def test_audio_codec_tag(codec, title, expected):
    assert tags.audio_codec_tag(codec, title) == expected


def test_truehd_with_atmos_title_is_never_plain_truehd():
    for title in ("atmos", "ATMOS", "English Atmos 7.1", "TrueHD Atmos"):
        assert tags.audio_codec_tag("TrueHD", title) == "TrueHD.Atmos"


def test_channel_layouts():
    assert [tags.channel_layout_short(n) for n in (1, 2, 6, 8, 3)] == ["1.0", "2.0", "5.1", "7.1", "3.0"]
    assert tags.channel_layout_long("", 6) == "L R C LFE Ls Rs"
    assert tags.channel_layout_long("L R C", 6) == "L R C"
    assert tags.channel_layout_long("", 3) == ""


@pytest.mark.parametrize(
    "fmt,codec_id,expected",
    [
        ("SubRip", "", "SRT (UTF-8)"),
        ("UTF-8", "S_TEXT/UTF8", "SRT (UTF-8)"),
        ("UTF-8", "", "SRT (UTF-8)"),
        ("", "S_TEXT/UTF8", "SRT (UTF-8)"),
        ("PGS", "S_HDMV/PGS", "PGS"),
        ("", "S_HDMV/PGS", "PGS"),
        ("VobSub", "S_VOBSUB", "VobSub"),
        ("ASS", "S_TEXT/ASS", "ASS"),
        ("SSA", "", "SSA"),
        ("", "S_TEXT/SSA", "ASS"),
        ("WebVTT", "", "WebVTT"),
        ("DVB Subtitle", "", "DVB"),
        ("TTML", "", "TTML"),
        ("Timed Text", "tx3g", "Timed Text"),
        ("", "", "SRT (UTF-8)"),
    ],
)
def test_subtitle_format(fmt, codec_id, expected):
    assert tags.subtitle_format(fmt, codec_id) == expected
