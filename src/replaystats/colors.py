"""Player color codes to display colors."""

from __future__ import annotations

DEFAULT_COLOR = "#000000"

PLAYER_COLORS: dict[int, str] = {
    0: "#ff0303",  # red
    1: "#0042ff",  # blue
    2: "#1ce6b9",  # teal
    3: "#540081",  # purple
    4: "#fffc00",  # yellow
    5: "#fe8a0e",  # orange
    6: "#20c000",  # green
    7: "#e55bb0",  # pink
    8: "#959697",  # gray
    9: "#7ebff1",  # light blue
    10: "#106246",  # dark green
    11: "#4a2a04",  # brown
    12: "#9b0000",  # maroon
    13: "#0000c3",  # navy
    14: "#00eaff",  # turquoise
    15: "#be00fe",  # violet
    16: "#ebcd87",  # wheat
    17: "#f8a48b",  # peach
    18: "#bfff80",  # mint
    19: "#dcb9eb",  # lavender
    20: "#282828",  # coal
    21: "#ebf0ff",  # snow
    22: "#00781e",  # emerald
    23: "#a46f33",  # peanut
}


def player_color(code: int) -> str:
    """Convert a numeric slot color to a hex display color."""
    return PLAYER_COLORS.get(code, DEFAULT_COLOR)
