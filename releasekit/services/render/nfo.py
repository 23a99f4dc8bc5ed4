# releasekit/services/render/nfo.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from releasekit.common.strings.layout import truncate, wrap_words
from releasekit.common.strings.units import GIB, MIB, kbps
from releasekit.domain.dataclasses.release import ReleaseConfig
from releasekit.domain.entities.fact_sheet import FactSheet
from releasekit.domain.entities.movie import Movie


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _share(part: int, whole: int) -> str:
    if whole <= 0:
        return ""
    return f" ({part / whole * 100:.0f}%)"


class _Box:
    """
    Line builder for the boxed report. Every emitted line is width + 2
    characters: the inner area plus the two vertical edges.
    """

    def __init__(self, width: int, label_width: int) -> None:
        self.width = width
        self.label_width = label_width
        self.value_width = width - label_width - 4  # "║ " + label + ": " + value + " ║"
        self.lines: List[str] = []

    def top(self) -> None:
        self.lines.append(f"╔{'═' * self.width}╗")

    def rule(self) -> None:
        self.lines.append(f"╠{'═' * self.width}╣")

    def thin(self) -> None:
        self.lines.append(f"╠{'─' * self.width}╣")

    def bottom(self) -> None:
        self.lines.append(f"╚{'═' * self.width}╝")

    def center(self, text: str) -> None:
        text = truncate(text, self.width - 4)
        left = (self.width - len(text)) // 2
        right = self.width - left - len(text)
        self.lines.append(f"║{' ' * left}{text}{' ' * right}║")

    def row(self, label: str, value: Optional[str]) -> None:
        """Emit `label: value`; a None or empty value means the row is absent."""
        if not value:
            return
        label = truncate(label, self.label_width)
        value = truncate(value, self.value_width)
        self.lines.append(f"║ {label.ljust(self.label_width)}: {value.ljust(self.value_width)} ║")

    def paragraph(self, text: str) -> None:
        inner = self.width - 4
        for line in wrap_words(text, inner):
            # a single word wider than the box is hard-wrapped, never cut
            for start in range(0, len(line), inner):
                self.lines.append(f"║ {line[start:start + inner].ljust(inner)} ║")

    def section(self, title: str) -> None:
        self.rule()
        self.center(title)
        self.thin()

    def render(self) -> str:
        return "\n".join(self.lines) + "\n"


class NfoRenderer:
    """
    Fixed-width MediaInfo-style NFO. Pure: same inputs, same text; the
    generation date is a parameter.
    """

    def __init__(self, config: Optional[ReleaseConfig] = None) -> None:
        self.config = config or ReleaseConfig()

    def render(
        self,
        movie: Movie,
        facts: FactSheet,
        file_name: str = "",
        *,
        generated_on: Optional[date] = None,
    ) -> str:
        cfg = self.config
        box = _Box(cfg.nfo_width, cfg.nfo_label_width)

        box.top()
        box.center(f"{cfg.group_name} presents")
        box.rule()
        box.center(movie.display_title())
        if movie.original_title and movie.original_title != movie.title:
            box.center(f"({movie.original_title})")

        self._general(box, facts, file_name or facts.file_name)
        self._video(box, facts)
        self._audio(box, facts)
        self._text(box, facts)
        self._movie_info(box, movie)

        if movie.overview:
            box.section("Synopsis")
            box.paragraph(movie.overview)

        box.rule()
        box.center(f"Generated by {cfg.generator_label}")
        box.center((generated_on or date.today()).isoformat())
        box.bottom()
        return box.render()

    # ---- sections -------------------------------------------------------------
    @staticmethod
    def _general(box: _Box, facts: FactSheet, file_name: str) -> None:
        box.section("General")
        box.row("Complete name", file_name)
        box.row("Format", facts.container)
        box.row("Format version", facts.container_version)
        box.row("File size", facts.file_size_formatted() if facts.file_size else None)
        box.row("Duration", facts.duration_formatted() if facts.duration else None)
        box.row("Overall bit rate", f"{kbps(facts.overall_bitrate)} kb/s" if facts.overall_bitrate > 0 else None)
        box.row("Movie name", facts.movie_name)
        box.row("Encoded date", facts.encoded_date)
        box.row("Writing application", facts.writing_application)
        box.row("Writing library", facts.writing_library)

    @staticmethod
    def _video(box: _Box, facts: FactSheet) -> None:
        v = facts.video
        box.section("Video")
        box.row("Format", v.codec)
        box.row("Format/Info", v.codec_info)
        box.row("Format profile", v.codec_profile)
        box.row("Codec ID", v.codec_id)
        box.row("Duration", facts.duration_formatted() if facts.duration else None)
        box.row("Bit rate", f"{kbps(v.bitrate)} kb/s" if v.bitrate > 0 else None)
        box.row("Width", f"{v.width} pixels" if v.width else None)
        box.row("Height", f"{v.height} pixels" if v.height else None)
        box.row("Display aspect ratio", v.aspect_ratio)
        box.row("Frame rate mode", v.frame_rate_mode)
        box.row("Frame rate", f"{v.frame_rate:.3f} FPS" if v.frame_rate > 0 else None)
        box.row("Color space", v.color_space)
        box.row("Chroma subsampling", v.chroma_subsampling)
        box.row("Bit depth", f"{v.bit_depth} bits" if v.bit_depth > 0 else None)
        if v.stream_size > 0:
            box.row("Stream size", f"{v.stream_size / GIB:.2f} GiB{_share(v.stream_size, facts.file_size)}")
        box.row("Color range", v.color_range)
        box.row("Color primaries", v.color_primaries)
        box.row("Transfer characteristics", v.transfer_characteristics)
        box.row("Matrix coefficients", v.matrix_coefficients)
        box.row("HDR format", v.hdr)

    @staticmethod
    def _audio(box: _Box, facts: FactSheet) -> None:
        for i, a in enumerate(facts.audio, start=1):
            box.section(f"Audio #{i}")
            box.row("Format", a.codec)
            box.row("Format/Info", a.codec_info)
            box.row("Commercial name", a.commercial_name)
            box.row("Codec ID", a.codec_id)
            box.row("Duration", facts.duration_formatted() if facts.duration else None)
            box.row("Bit rate mode", a.bitrate_mode)
            box.row("Bit rate", f"{kbps(a.bitrate)} kb/s" if a.bitrate > 0 else None)
            box.row("Channel(s)", f"{a.channels} channels" if a.channels else None)
            box.row("Channel layout", a.layout_long)
            box.row("Sampling rate", f"{a.sample_rate / 1000:.1f} kHz" if a.sample_rate > 0 else None)
            box.row("Bit depth", f"{a.bit_depth} bits" if a.bit_depth > 0 else None)
            box.row("Compression mode", a.compression)
            if a.stream_size > 0:
                box.row("Stream size", f"{a.stream_size / MIB:.0f} MiB{_share(a.stream_size, facts.file_size)}")
            box.row("Title", a.title)
            box.row("Language", a.language)
            box.row("Service kind", a.service_kind)
            box.row("Default", _yes_no(a.default))
            box.row("Forced", _yes_no(a.forced))

    @staticmethod
    def _text(box: _Box, facts: FactSheet) -> None:
        for i, s in enumerate(facts.subtitles, start=1):
            box.section(f"Text #{i}")
            box.row("Format", s.format)
            box.row("Codec ID", s.codec_id)
            box.row("Title", s.title)
            box.row("Language", s.language)
            box.row("Default", _yes_no(s.default))
            box.row("Forced", _yes_no(s.forced))

    def _movie_info(self, box: _Box, movie: Movie) -> None:
        box.section("Movie Info")
        box.row("Release Date", movie.release_date)
        box.row("Genre", ", ".join(movie.genres))
        box.row("Runtime", f"{movie.runtime} min" if movie.runtime > 0 else None)
        box.row("Rating", f"{movie.vote_average:.1f}/10" if movie.vote_average > 0 else None)
        box.row("IMDb", movie.imdb_url())
        box.row("TMDB", movie.tmdb_url() if movie.id else None)
        box.row("Director", ", ".join(movie.directors))
        box.row("Cast", ", ".join(c.name for c in movie.cast[: self.config.cast_limit]))
