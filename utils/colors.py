"""Color and paint helpers shared by the primitive builders."""
import re

from errors import InvalidColorFormat
from models.style import Color, Paint

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


def parse_hex_color(hex_color: str) -> Color:
    """Convert ``#RRGGBB`` to unit-interval RGB floats.

    Raises InvalidColorFormat for anything other than ``#`` + 6 hex digits.
    """
    if not isinstance(hex_color, str) or not _HEX_COLOR.fullmatch(hex_color):
        raise InvalidColorFormat(hex_color)
    return Color(
        r=int(hex_color[1:3], 16) / 255,
        g=int(hex_color[3:5], 16) / 255,
        b=int(hex_color[5:7], 16) / 255,
    )


def make_fill(hex_color: str, opacity: float = 1.0) -> list[Paint]:
    """Single solid fill.

    ``opacity`` must already lie in [0, 1]; it is passed through unchecked.
    """
    return [Paint.model_construct(type="SOLID", color=parse_hex_color(hex_color), opacity=opacity)]


def make_stroke(hex_color: str) -> list[Paint]:
    return [Paint(color=parse_hex_color(hex_color))]


def no_fill() -> list[Paint]:
    return []
