from __future__ import annotations
from enum import StrEnum

class SourceType(StrEnum):
    bluray = "BluRay"
    bluray_hdlight = "BluRay.HDLight"
    remux = "REMUX"
    web = "WEB"
    web_dl = "WEB-DL"
    webrip = "WEBRip"
