# app/display.py
"""
Avatar helpers for rendering an employee without a photo.
Pure functions of their input, so the same name always gets the same badge.
"""
from typing import Optional

FALLBACK_COLOR = "#6b7280"  # gray, for records with no usable name

STATUS_COLORS = {
    "Active": "green",
    "Remote": "teal",
    "OnLeave": "orange",
    "Resigned": "red",
}


def _int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def color_from_string(name: str) -> str:
    """
    HSL color from a rolling hash (h = h*31 + unit) over UTF-16 code units,
    wrapping like a signed 32-bit int at every step.
    """
    h = 0
    data = name.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _int32(h * 31 + unit)
    hue = abs(h) % 360
    return f"hsl({hue}, 70%, 45%)"


def avatar_color(name: Optional[str]) -> str:
    if not name or not name.strip():
        return FALLBACK_COLOR
    return color_from_string(name)


def initials_from_name(name: Optional[str]) -> str:
    """
    "John Doe" -> "JD"; a single token gives two letters ("Madonna" -> "MA").

    Slices whole characters, not UTF-16 units, so a name starting with an
    emoji never yields half a surrogate pair (which JSON responses cannot encode).
    """
    if not name:
        return ""
    parts = name.split()
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()


def status_color(status: Optional[str]) -> str:
    return STATUS_COLORS.get(status or "", "gray")
