from releasekit.domain.enums.source_type import SourceType
__all__ = [
    "SourceType",
]
