"""Text extents: sizes the layout needs but only a renderer can know.

Section builders ask ``TextExtents.size(node)`` whenever a position depends
on how big a text node turns out to be. Keys the renderer has already
reported are answered exactly; anything else gets a rough estimate and is
recorded in ``pending`` so the assembler can have it measured and lay the
page out again.
"""
import math

from pydantic import BaseModel, Field

from models.nodes import TextNode
from utils.geometry import round_half_up

# Rough average advance of a glyph relative to the font size
_EST_CHAR_WIDTH = 0.6
# Line height a host uses when none is set ("auto")
AUTO_LINE_HEIGHT = 1.21


class TextExtent(BaseModel):
    width: float = Field(ge=0.0)
    height: float = Field(ge=0.0)


class TextExtents(BaseModel):
    reported: dict[str, TextExtent] = Field(default_factory=dict)
    pending: dict[str, TextNode] = Field(default_factory=dict)

    def size(self, node: TextNode) -> TextExtent:
        if node.key is None:
            raise ValueError(f"{node.name}: text whose size the layout depends on needs a key")
        extent = self.reported.get(node.key)
        if extent is not None:
            return extent
        self.pending[node.key] = node
        return estimate_extent(node)

    def height(self, node: TextNode) -> float:
        return self.size(node).height

    def width(self, node: TextNode) -> float:
        return self.size(node).width

    @property
    def resolved(self) -> bool:
        return not self.pending


def line_height_of(node: TextNode) -> float:
    style = node.style
    return style.line_height or round_half_up(style.size * AUTO_LINE_HEIGHT)


def estimate_extent(node: TextNode) -> TextExtent:
    """Character-count estimate, used until the renderer reports real sizes."""
    style = node.style
    # Negative tracking can cancel the glyph advance entirely
    advance = max(style.size * _EST_CHAR_WIDTH + style.tracking, 1.0)
    paragraphs = node.content.split("\n")

    if style.fixed_width:
        per_line = max(1, int(style.fixed_width // advance))
        lines = sum(max(1, math.ceil(len(p) / per_line)) for p in paragraphs)
        width = style.fixed_width
    else:
        lines = len(paragraphs)
        width = max(len(p) for p in paragraphs) * advance

    return TextExtent(width=width, height=lines * line_height_of(node))
