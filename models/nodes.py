"""Node descriptors: the host-independent page tree.

A descriptor records position, size and style of one shape or text element.
Frames hold an ordered list of children; insertion order is paint order.
The tree is built once by the assembler and handed read-only to a renderer.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from models.style import Paint, StyleOptions


class RectangleNode(BaseModel):
    kind: Literal["rectangle"] = "rectangle"
    name: str = "Rect"
    x: float = 0.0
    y: float = 0.0
    width: float = Field(ge=0.0)
    height: float = Field(ge=0.0)
    fills: list[Paint] = Field(default_factory=list)
    corner_radius: float = 0.0


class TextNode(BaseModel):
    """Text element.

    ``key`` identifies the node across layout passes so renderer-reported
    sizes can be fed back; text whose size nothing depends on may leave it
    unset. ``width`` is the wrap width for auto-height text and None for text
    that sizes itself to its content; the height is never known to the
    layout module.
    """

    kind: Literal["text"] = "text"
    key: str | None = None
    content: str
    x: float = 0.0
    y: float = 0.0
    style: StyleOptions = Field(default_factory=StyleOptions)
    fills: list[Paint] = Field(default_factory=list)
    auto_height: bool = False

    @property
    def name(self) -> str:
        return self.style.name

    @property
    def width(self) -> float | None:
        return self.style.fixed_width


class FrameNode(BaseModel):
    kind: Literal["frame"] = "frame"
    name: str = "Frame"
    x: float = 0.0
    y: float = 0.0
    width: float = Field(ge=0.0)
    height: float = Field(ge=0.0)
    fills: list[Paint] = Field(default_factory=list)  # empty = unfilled
    strokes: list[Paint] = Field(default_factory=list)
    stroke_weight: float = 0.0
    stroke_align: Literal["inside", "center", "outside"] = "inside"
    clips_content: bool = False
    rotation: float = 0.0  # degrees, counter-clockwise positive
    children: list["NodeDescriptor"] = Field(default_factory=list)

    def append(self, child: "NodeDescriptor") -> "NodeDescriptor":
        """Attach ``child`` on top of the existing children and return it."""
        self.children.append(child)
        return child

    def walk(self):
        """Yield every descendant depth-first, in paint order."""
        for child in self.children:
            yield child
            if isinstance(child, FrameNode):
                yield from child.walk()


NodeDescriptor = Annotated[
    Union[RectangleNode, FrameNode, TextNode],
    Field(discriminator="kind"),
]

FrameNode.model_rebuild()


class PageLayout(BaseModel):
    """The finished tree plus the page's outer size."""

    root: FrameNode
    width: float
    height: float
