# releasekit/services/release/pipeline.py
from __future__ import annotations

import shutil
from datetime import date
from pathlib import Path
from typing import Optional

from releasekit.common.concurrency.fan_out import run_pair
from releasekit.common.logging import get_logger
from releasekit.common.naming.keywords import extract_keywords, parse_direct_id
from releasekit.common.settings import Settings, get_settings
from releasekit.domain.dataclasses.release import ReleaseArtifacts
from releasekit.domain.dataclasses.reports import ReleaseReport
from releasekit.domain.entities.movie import Movie
from releasekit.domain.policies.piece_planner import plan_layout
from releasekit.domain.policies.release_name import ReleaseNamer, detect_source
from releasekit.domain.ports.movies import MovieLookupPort
from releasekit.domain.ports.probe import MediaProbePort
from releasekit.domain.ports.prompter import PrompterPort
from releasekit.domain.ports.torrent import TorrentWriterPort
from releasekit.services.probe.mediainfo_adapter import MediaInfoAdapter
from releasekit.services.release.errors import ReleaseError
from releasekit.services.render.bbcode import render_presentation
from releasekit.services.render.nfo import NfoRenderer

logger = get_logger(__name__)

MAX_LOOKUP_ROUNDS = 5
ID_PROMPT = "New search terms or a TMDB id (e.g. id:12345):"


class ReleasePipeline:
    """
    End-to-end release preparation for one video file:

      1. probe the file and identify the movie (concurrently)
      2. compose the release name and rename the file
      3. write the NFO and the BBCode presentation next to it
      4. plan the piece layout and hand it to the torrent writer

    Collaborators come in through ports; settings are read once here and
    passed down as a ReleaseConfig.
    """

    def __init__(
        self,
        probe: MediaProbePort,
        movies: MovieLookupPort,
        prompter: PrompterPort,
        torrent_writer: Optional[TorrentWriterPort] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.probe = probe
        self.movies = movies
        self.prompter = prompter
        self.torrent_writer = torrent_writer
        self.cfg = settings or get_settings()
        get_logger("releasekit", self.cfg.log_level.upper())
        self.release_config = self.cfg.release_config()
        self.namer = ReleaseNamer(self.release_config)
        self.nfo = NfoRenderer(self.release_config)

    @classmethod
    def from_settings(
        cls,
        movies: MovieLookupPort,
        prompter: PrompterPort,
        torrent_writer: Optional[TorrentWriterPort] = None,
        settings: Optional[Settings] = None,
    ) -> "ReleasePipeline":
        cfg = settings or get_settings()
        probe = MediaInfoAdapter(cfg.mediainfo.bin, cfg.mediainfo.timeout_sec)
        return cls(probe, movies, prompter, torrent_writer=torrent_writer, settings=cfg)

    # ---------------- identification ----------------

    def identify(self, filename: str) -> Movie:
        """
        Search by keywords from the filename; let the prompter pick. When nothing
        is picked, ask for new keywords or a direct id ("id:123").
        """
        keywords = extract_keywords(filename)
        for _ in range(MAX_LOOKUP_ROUNDS):
            if keywords:
                results = self.movies.search(keywords)
                logger.info("lookup %r: %d result(s)", keywords, len(results))
                choice = self.prompter.select_movie(results) if results else None
                if choice is not None:
                    return self.movies.details(choice.id) if choice.id else choice

            answer = (self.prompter.ask_for_input(ID_PROMPT) or "").strip()
            if not answer:
                break
            movie_id = parse_direct_id(answer)
            if movie_id is not None:
                return self.movies.details(movie_id)
            keywords = answer

        raise LookupError(f"no movie selected for {filename!r}")

    # ---------------- run ----------------

    def run(self, path: Path | str, source_type: Optional[str] = None) -> ReleaseReport:
        src = Path(path).expanduser().resolve()
        report = ReleaseReport(source_path=str(src))
        report.start()

        if not src.is_file():
            report.add_error("input", f"file not found: {src}")
            raise ReleaseError("input", f"file not found: {src}", report)

        try:
            facts, movie = run_pair(
                lambda: self.probe.probe(src),
                lambda: self.identify(src.name),
                name="release-intake",
            )
        except Exception as e:
            report.add_error("intake", str(e))
            raise ReleaseError("intake", str(e), report) from e
        report.record("probe", facts.file_name)
        report.record("identify", movie.display_title())

        out_dir = Path(self.cfg.output_dir) if self.cfg.output_dir else src.parent
        out_dir.mkdir(parents=True, exist_ok=True)

        if self.cfg.no_rename:
            name = src.stem
            media_path = src
            logger.info("keeping current name: %s", name)
        else:
            source = source_type or self.cfg.default_source or self.prompter.select_source_type() or detect_source(facts)
            name = self.namer.compose(movie, facts, source)
            media_path = out_dir / f"{name}{src.suffix}"
            logger.info("renaming to %s", media_path.name)
            try:
                self._move(src, media_path)
            except OSError as e:
                report.add_error("rename", str(e))
                raise ReleaseError("rename", str(e), report) from e
            facts = facts.with_path(media_path)
            report.record("rename", media_path.name)
        report.release_name = name

        nfo_path = out_dir / f"{name}.nfo"
        presentation_path = out_dir / f"{name}.bbcode"
        nfo_path.write_text(self.nfo.render(movie, facts, media_path.name, generated_on=date.today()), encoding="utf-8")
        report.record("nfo", str(nfo_path))
        presentation_path.write_text(render_presentation(movie, facts, self.release_config), encoding="utf-8")
        report.record("presentation", str(presentation_path))

        plan = plan_layout(media_path)
        torrent_path: Optional[Path] = None
        if self.cfg.skip_torrent or self.torrent_writer is None:
            report.record("torrent", "skipped")
        else:
            torrent_path = out_dir / f"{name}.torrent"
            try:
                self.torrent_writer.write(
                    plan,
                    torrent_path,
                    announce=self.cfg.torrent.announce_url,
                    comment=self.cfg.torrent.comment,
                    created_by=self.cfg.torrent.created_by,
                )
            except Exception as e:
                report.add_error("torrent", str(e))
                raise ReleaseError("torrent", str(e), report) from e
            report.record("torrent", str(torrent_path))

        report.artifacts = ReleaseArtifacts(
            release_name=name,
            media_path=media_path,
            nfo_path=nfo_path,
            presentation_path=presentation_path,
            torrent_path=torrent_path,
            plan=plan,
        )
        report.stop()
        logger.info("release %s ready (piece length %d)", name, plan.piece_length)
        return report

    @staticmethod
    def _move(src: Path, dst: Path) -> None:
        if src == dst:
            return
        if dst.exists():
            raise FileExistsError(f"Destination exists: {dst}")
        # shutil.move handles cross-device moves (copy+unlink)
        shutil.move(str(src), str(dst))
