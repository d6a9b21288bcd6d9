"""Paint and text style types shared by every node descriptor."""
from typing import Literal

from pydantic import BaseModel, Field

FontWeight = Literal["Regular", "Light", "Medium", "SemiBold", "Bold"]


class Color(BaseModel):
    """Normalized RGB, each channel in [0, 1]."""

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)


class Paint(BaseModel):
    """A solid fill or stroke."""

    type: Literal["SOLID"] = "SOLID"
    color: Color
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)


class StyleOptions(BaseModel):
    """Text styling. ``color`` stays a hex string until the fill is built.

    Setting ``fixed_width`` makes the text wrap inside that width; its height
    is then only known once the renderer has shaped it.
    """

    size: float = Field(default=16.0, gt=0)
    weight: FontWeight = "Regular"
    color: str = "#161616"
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    fixed_width: float | None = Field(default=None, gt=0)
    line_height: float | None = Field(default=None, gt=0)
    tracking: float = 0.0
    align: Literal["left", "center", "right"] = "left"
    decoration: Literal["none", "underline"] = "none"
    name: str = "Text"  # diagnostics only
