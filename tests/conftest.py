# tests/conftest.py
from __future__ import annotations

import pytest

from releasekit.domain.dataclasses.release import ReleaseConfig
from releasekit.domain.entities.fact_sheet import AudioFacts, FactSheet, SubtitleFacts, VideoFacts
from releasekit.domain.entities.movie import CastMember, Movie


@pytest.fixture()
def release_config() -> ReleaseConfig:
    return ReleaseConfig(group_name="AIO")


@pytest.fixture()
def facts() -> FactSheet:
    """1080p HEVC 10-bit file with French Atmos + English audio and two subtitle tracks."""
    return FactSheet(
        file_name="example.movie.2023.mkv",
        file_path="/data/example.movie.2023.mkv",
        file_size=4 * 1024 ** 3,
        container="Matroska",
        container_version="4",
        duration=2 * 3600 + 5 * 60,
        overall_bitrate=8_456_789,
        writing_application="mkvmerge v80.0",
        video=VideoFacts(
            codec="HEVC",
            codec_profile="Main 10",
            width=1920,
            height=1080,
            bitrate=6_543_210,
            frame_rate=23.976,
            aspect_ratio="16:9",
            bit_depth=10,
            stream_size=3 * 1024 ** 3,
        ),
        audio=(
            AudioFacts(codec="E-AC-3", title="Atmos", channels=6, language="fre", bitrate=768_000, sample_rate=48000),
            AudioFacts(codec="AAC", channels=2, language="eng", bitrate=128_999),
        ),
        subtitles=(
            SubtitleFacts(format="UTF-8", codec_id="S_TEXT/UTF8", language="fre", forced=True),
            SubtitleFacts(format="PGS", codec_id="S_HDMV/PGS", language="eng"),
        ),
    )


@pytest.fixture()
def movie() -> Movie:
    return Movie(
        id=603,
        title="Matrix",
        original_title="The Matrix",
        overview="A computer hacker learns from mysterious rebels about the true nature of his reality.",
        release_date="1999-03-31",
        poster_path="/poster.jpg",
        vote_average=8.2,
        runtime=136,
        tagline="Welcome to the Real World.",
        imdb_id="tt0133093",
        genres=["Action", "Science Fiction"],
        directors=["Lana Wachowski", "Lilly Wachowski"],
        cast=[
            CastMember(name="Keanu Reeves", character="Neo", order=0, profile_path="/keanu.jpg"),
            CastMember(name="Laurence Fishburne", character="Morpheus", order=1, profile_path="/laurence.jpg"),
            CastMember(name="Carrie-Anne Moss", character="Trinity", order=2),
        ],
    )
