# releasekit/services/render/bbcode.py
from __future__ import annotations

from typing import List, Optional

from releasekit.common.strings.units import kbps
from releasekit.domain.dataclasses.release import ReleaseConfig
from releasekit.domain.entities.fact_sheet import FactSheet
from releasekit.domain.entities.movie import Movie
from releasekit.domain.policies.languages import language_flag, language_name

TITLE_COLOR = "#aa0000"
SECTION_COLOR = "#9900ff"
RATING_ICON = "[img]https://zupimages.net/up/21/02/xro7.png[/img]"
TMDB_ICON = "[img]https://zupimages.net/up/21/03/mxao.png[/img]"
IMDB_ICON = "[img]https://zupimages.net/up/21/03/od5a.png[/img]"
PORTRAIT_URL = "https://image.tmdb.org/t/p/w138_and_h175_face{path}"
PORTRAIT_COUNT = 2


def _section(title: str) -> str:
    return f"[font=Verdana][color={SECTION_COLOR}][size=150][b]{title}[/b][/size][/color][/font]\n \n"


def render_presentation(movie: Movie, facts: FactSheet, config: Optional[ReleaseConfig] = None) -> str:
    """
    Forum (BBCode) presentation. Section order is fixed:
    title, poster, tagline, informations, synopsis, cast portraits,
    technical details (languages, subtitles), downloads.
    """
    cfg = config or ReleaseConfig()
    out: List[str] = ["[center]"]

    # ---- title --------------------------------------------------------------
    out.append(f"[font=Verdana][size=200][color={TITLE_COLOR}][b]{movie.display_title()}[/b][/color][/size][/font]\n")
    if movie.year():
        out.append(f"[font=Verdana][size=150][color={TITLE_COLOR}]({movie.year()})[/color][/size][/font]\n")
    out.append("\n\n")

    if movie.poster_path:
        out.append(f"[img]{movie.poster_url('w500')}[/img]\n\n")

    if movie.tagline:
        out.append(f"[font=Verdana][size=100][color={TITLE_COLOR}][i]« {movie.tagline} »[/i][/color][/size][/font]\n")
        out.append(" \n \n")

    # ---- informations -------------------------------------------------------
    out.append(_section("Informations"))
    out.append("[font=Verdana]")
    if movie.original_title and movie.original_title != movie.title:
        out.append(f"[b]Titre original :[/b] {movie.original_title}\n")
    if movie.release_date:
        out.append(f"[b]Sortie :[/b] {movie.release_date}\n")
    if movie.runtime > 0:
        out.append(f"[b]Durée :[/b] {movie.runtime} min\n")
    out.append(" \n")
    if movie.directors:
        out.append(f"[b]Réalisateur :[/b] {', '.join(movie.directors)}\n \n")
    actors = [c.name for c in movie.cast[: cfg.cast_limit]]
    if actors:
        out.append(f"[b]Acteurs :[/b]\n{', '.join(actors)}\n \n")
    if movie.genres:
        out.append(f"[b]Genres :[/b]\n{', '.join(movie.genres)}\n \n")
    if movie.vote_average > 0:
        out.append(f"{RATING_ICON} {movie.vote_average:.2f}\n \n")
    if movie.id:
        out.append(f"{TMDB_ICON} [url={movie.tmdb_url()}]Fiche du film[/url]\n")
    if movie.imdb_id:
        out.append(f"{IMDB_ICON} [url={movie.imdb_url()}]{movie.imdb_id}[/url]\n")
    out.append("[/font]\n \n")

    # ---- synopsis -----------------------------------------------------------
    out.append(_section("Synopsis"))
    out.append("[font=Verdana]\n")
    out.append(movie.overview)
    out.append("\n \n \n[/font]\n")

    portraits = [c.profile_path for c in movie.cast[:PORTRAIT_COUNT] if c.profile_path]
    if portraits:
        out.append("".join(f" [img]{PORTRAIT_URL.format(path=p)}[/img] " for p in portraits))
        out.append("\n \n \n")

    # ---- technical ----------------------------------------------------------
    v = facts.video
    out.append(_section("Détails techniques"))
    out.append("[font=Verdana]")
    out.append(f"[b]Format :[/b] {facts.container.upper()}\n")
    out.append(f"[b]Codec Vidéo :[/b] {v.codec_tag}{' 10-bit' if v.bit_depth == 10 else ''}\n")
    if v.bitrate > 0:
        out.append(f"[b]Débit Vidéo :[/b] ~{kbps(v.bitrate)} kb/s\n")
    if v.resolution:
        out.append(f"[b]Résolution :[/b] {v.resolution}\n")
    if v.hdr:
        out.append(f"[b]HDR :[/b] {v.hdr}\n")
    out.append(" \n")

    if facts.audio:
        out.append("[b]Langue(s) :[/b]\n")
        for a in facts.audio:
            line = f"{language_flag(a.language)} {language_name(a.language)} [{a.layout_short}] | {a.codec_tag}"
            if a.bitrate > 0:
                line += f" à {kbps(a.bitrate)} kb/s"
            out.append(line + "\n")
        out.append("\n \n")

    if facts.subtitles:
        out.append("[b]Sous-titres :[/b]\n")
        for s in facts.subtitles:
            kind = "forced" if s.forced else "full"
            out.append(f"{language_flag(s.language)} {language_name(s.language)} | {s.format_display} ({kind})\n")
        out.append("\n \n")

    if facts.overall_bitrate > 0:
        out.append(f"[b]Débit Global :[/b] ~{kbps(facts.overall_bitrate)} kb/s")
    out.append("[/font]\n \n")

    # ---- downloads ----------------------------------------------------------
    out.append(_section("Téléchargements"))
    out.append(f"[b]Fichier :[/b] {facts.file_name}\n")
    out.append(f"[b]Poids Total :[/b] {facts.file_size_formatted()}")
    out.append("[/center] \n")
    return "".join(out)
