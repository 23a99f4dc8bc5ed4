from __future__ import annotations

KIB = 1024
MIB = KIB * 1024
GIB = MIB * 1024


def format_size(size: int) -> str:
    """Binary-unit size: '512 B', '1.50 KiB', '4.37 GiB'."""
    if size < KIB:
        return f"{size} B"
    value = float(size)
    for unit in "KMGTPE":
        value /= KIB
        if value < KIB or unit == "E":
            return f"{value:.2f} {unit}iB"
    return f"{size} B"  # unreachable


def format_duration(seconds: int) -> str:
    hours, rest = divmod(max(0, int(seconds)), 3600)
    minutes = rest // 60
    if hours > 0:
        return f"{hours} h {minutes} min"
    return f"{minutes} min"


def kbps(bits_per_second: int) -> int:
    """Bit rate in kb/s, truncated (no rounding)."""
    return int(bits_per_second) // 1000
