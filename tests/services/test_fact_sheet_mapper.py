from releasekit.services.mappers.fact_sheet import _parse_int, fact_sheet_from_mediainfo

MEDIAINFO_JSON = {
    "creatingLibrary": {"name": "MediaInfoLib", "version": "24.01"},
    "media": {
        "@ref": "/data/movie.mkv",
        "track": [
            {
                "@type": "General",
                "Format": "Matroska",
                "Format_Version": "4",
                "FileSize": "4294967296",
                "Duration": "7500.480",
                "OverallBitRate": "8456789",
                "Movie": "The Matrix",
                "Encoded_Application": "mkvmerge v80.0",
                "Encoded_Library": "libebml v1.4.4",
                "extra": {"ErrorDetectionType": "Per level 1"},
            },
            {
                "@type": "Video",
                "Format": "HEVC",
                "Format_Profile": "Main 10",
                "CodecID": "V_MPEGH/ISO/HEVC",
                "Width": "1920",
                "Height": "800",
                "BitRate": "6543210",
                "FrameRate": "23.976",
                "DisplayAspectRatio": "2.400",
                "BitDepth": "10",
                "HDR_Format": "SMPTE ST 2086",
                "transfer_characteristics": "PQ",
            },
            {"@type": "Video", "Format": "AVC", "Width": "640", "Height": "480"},
            {
                "@type": "Audio",
                "Format": "E-AC-3",
                "Format_Commercial_IfAny": "Dolby Digital Plus with Dolby Atmos",
                "Channels": "6",
                "ChannelLayout": "L R C LFE Ls Rs",
                "SamplingRate": "48000",
                "BitRate": "768000",
                "Language": "fr",
                "Title": "Atmos",
                "Default": "Yes",
                "Forced": "No",
            },
            {"@type": "Audio", "Format": "AAC", "Channels": "2", "Language": "en", "BitRate": None},
            {"@type": "Text", "Format": "UTF-8", "CodecID": "S_TEXT/UTF8", "Language": "fr", "Forced": "Yes"},
            {"@type": "Text", "Format": "PGS", "CodecID": "S_HDMV/PGS", "Language": "en"},
            {"@type": "Menu"},
        ],
    },
}


def test_maps_general_video_audio_and_text():
    facts = fact_sheet_from_mediainfo(MEDIAINFO_JSON, "/data/movie.mkv")

    assert facts.file_name == "movie.mkv"
    assert facts.file_path == "/data/movie.mkv"
    assert facts.file_size == 4294967296
    assert facts.container == "Matroska"
    assert facts.duration == 7500
    assert facts.overall_bitrate == 8456789
    assert facts.writing_application == "mkvmerge v80.0"
    assert facts.writing_library == "libebml v1.4.4"

    v = facts.video
    assert (v.codec, v.width, v.height, v.bit_depth) == ("HEVC", 1920, 800, 10)
    assert v.resolution == "1080p"
    assert v.hdr == "HDR10"
    assert v.aspect_ratio == "2.400"
    assert v.frame_rate == 23.976

    assert [a.codec for a in facts.audio] == ["E-AC-3", "AAC"]
    first = facts.audio[0]
    assert first.codec_tag == "EAC3.Atmos"
    assert first.default is True and first.forced is False
    assert facts.audio[1].bitrate == 0

    assert [s.format_display for s in facts.subtitles] == ["SRT (UTF-8)", "PGS"]
    assert facts.subtitles[0].forced is True


def test_explicit_file_size_wins():
    facts = fact_sheet_from_mediainfo(MEDIAINFO_JSON, "/data/movie.mkv", file_size=42)
    assert facts.file_size == 42


def test_partial_documents_fall_back_to_empty_values():
    assert fact_sheet_from_mediainfo(None).file_name == ""
    assert fact_sheet_from_mediainfo({"media": None}).audio == ()
    facts = fact_sheet_from_mediainfo({"media": {"track": [{"@type": "Video", "Width": "n/a"}]}})
    assert facts.video.width == 0
    assert facts.video.resolution == ""


def test_parse_int_tolerates_junk():
    assert _parse_int("1 920") == 1920
    assert _parse_int("23.976") == 23
    assert _parse_int("inf") == 0
    assert _parse_int("nan") == 0
    assert _parse_int("") == 0


def test_single_track_object_is_accepted():
    facts = fact_sheet_from_mediainfo({"media": {"track": {"@type": "General", "Format": "Matroska", "Duration": "60"}}})
    assert facts.container == "Matroska"
    assert facts.duration == 60
    assert facts.audio == ()
