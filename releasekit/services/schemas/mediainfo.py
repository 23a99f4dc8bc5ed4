# releasekit/services/schemas/mediainfo.py
from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class MediaInfoTrack(BaseModel):
    """
    One entry of mediainfo's `--Output=JSON` track list. mediainfo reports
    almost everything as strings; anything absent becomes "".
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = Field("", alias="@type")
    format: str = Field("", alias="Format")
    format_info: str = Field("", alias="Format_Info")
    format_profile: str = Field("", alias="Format_Profile")
    format_commercial: str = Field("", alias="Format_Commercial_IfAny")
    codec_id: str = Field("", alias="CodecID")
    format_version: str = Field("", alias="Format_Version")
    duration: str = Field("", alias="Duration")
    overall_bit_rate: str = Field("", alias="OverallBitRate")
    file_size: str = Field("", alias="FileSize")
    movie_name: str = Field("", alias="Movie")
    encoded_date: str = Field("", alias="Encoded_Date")
    writing_application: str = Field("", validation_alias=AliasChoices("Encoded_Application", "Writing_Application"))
    writing_library: str = Field("", validation_alias=AliasChoices("Encoded_Library", "Writing_Library"))
    width: str = Field("", alias="Width")
    height: str = Field("", alias="Height")
    bit_rate: str = Field("", alias="BitRate")
    bit_rate_mode: str = Field("", alias="BitRate_Mode")
    frame_rate: str = Field("", alias="FrameRate")
    frame_rate_mode: str = Field("", alias="FrameRate_Mode")
    display_aspect_ratio: str = Field("", alias="DisplayAspectRatio_String")
    display_aspect_ratio_raw: str = Field("", alias="DisplayAspectRatio")
    bit_depth: str = Field("", alias="BitDepth")
    hdr_format: str = Field("", alias="HDR_Format")
    transfer_characteristics: str = Field("", alias="transfer_characteristics")
    color_space: str = Field("", alias="ColorSpace")
    chroma_subsampling: str = Field("", alias="ChromaSubsampling")
    color_range: str = Field("", alias="colour_range")
    color_primaries: str = Field("", alias="colour_primaries")
    matrix_coefficients: str = Field("", alias="matrix_coefficients")
    stream_size: str = Field("", alias="StreamSize")
    channels: str = Field("", alias="Channels")
    channel_layout: str = Field("", alias="ChannelLayout")
    sampling_rate: str = Field("", alias="SamplingRate")
    compression_mode: str = Field("", alias="Compression_Mode")
    service_kind: str = Field("", alias="ServiceKind")
    language: str = Field("", alias="Language")
    title: str = Field("", alias="Title")
    default: str = Field("", alias="Default")
    forced: str = Field("", alias="Forced")

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, v):
        if v is None or isinstance(v, (dict, list)):
            return ""
        return str(v)


class MediaInfoMedia(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tracks: List[MediaInfoTrack] = Field(default_factory=list, alias="track")

    @field_validator("tracks", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        if isinstance(v, dict):
            return [v]  # single-track documents
        return v or []


class MediaInfoDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    media: MediaInfoMedia = Field(default_factory=MediaInfoMedia)

    @field_validator("media", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return v or {}
