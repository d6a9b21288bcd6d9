"""Design system model — typed representation of design.yaml.

Loaded once at build start and passed to every section builder and to the
renderer. Every field has a default, so the page builds without a file.
"""
from pathlib import Path
from typing import get_args

from pydantic import BaseModel, Field, field_validator, model_validator

from models.style import FontWeight
from utils.colors import parse_hex_color
from utils.geometry import round_half_up


class PageGeometry(BaseModel):
    """Frame width and the two-column grid derived from it.

    The grid keeps a fixed margin on both sides and splits into two equal
    columns. Project copy sits ``content_width`` wide inside a column with a
    right-hand margin of ``content_margin_ratio`` of the column.
    """

    frame_width: int = Field(default=1440, gt=0)
    grid_margin: int = Field(default=120, ge=0)
    content_width: int = Field(default=400, gt=0)
    content_margin_ratio: float = Field(default=0.24, ge=0.0, lt=1.0)

    @model_validator(mode="after")
    def content_must_fit_column(self) -> "PageGeometry":
        if self.grid_width <= 0:
            raise ValueError("frame_width must exceed twice the grid_margin")
        if self.content_inset < 0:
            raise ValueError(
                f"column of {self.column_width}px is too narrow for "
                f"{self.content_width}px of content"
            )
        return self

    @property
    def grid_width(self) -> int:
        return self.frame_width - 2 * self.grid_margin

    @property
    def grid_x(self) -> float:
        return (self.frame_width - self.grid_width) / 2

    @property
    def column_width(self) -> float:
        return self.grid_width / 2

    @property
    def content_inset(self) -> float:
        """Left offset of project copy inside its column (56px at 1440)."""
        col = self.column_width
        return col - self.content_width - round_half_up(col * self.content_margin_ratio)

    @property
    def edge_inset(self) -> int:
        """Distance of the hero's right-hand anchor from the frame edge."""
        return round_half_up(self.frame_width * 0.05)


class FontSpec(BaseModel):
    """Font family and the styles loaded before layout.

    The sections set text in every weight, so ``styles`` must name all of them.
    """
    family: str = "Inter"
    styles: list[FontWeight] = Field(
        default_factory=lambda: ["Regular", "Light", "Medium", "SemiBold", "Bold"]
    )

    @field_validator("styles")
    @classmethod
    def must_cover_layout_weights(cls, v: list[str]) -> list[str]:
        missing = [w for w in get_args(FontWeight) if w not in v]
        if missing:
            raise ValueError(f"fonts.styles is missing {', '.join(missing)}; the layout uses every weight")
        return v


class ColorPalette(BaseModel):
    paper: str = "#ffffff"
    ink: str = "#161616"
    hero_backdrop: str = "#1a1208"
    hero_border: str = "#333333"
    menu_bar: str = "#FEFEFE"
    projects_bg: str = "#161616"
    about_bg: str = "#F5F9FC"
    about_ink: str = "#1d1d1d"
    accent: str = "#005397"

    @field_validator("*")
    @classmethod
    def must_be_hex(cls, v: str) -> str:
        parse_hex_color(v)
        return v


class DesignSystem(BaseModel):
    """Complete design system loaded from design.yaml.

    Provides defaults for every field so it is usable even when design.yaml
    is absent or partially specified.
    """
    geometry: PageGeometry = Field(default_factory=PageGeometry)
    fonts: FontSpec = Field(default_factory=FontSpec)
    colors: ColorPalette = Field(default_factory=ColorPalette)

    @classmethod
    def load(cls, path: Path) -> "DesignSystem":
        """Load from a YAML file. Missing fields use Pydantic defaults.

        Raises FileNotFoundError if path does not exist.
        """
        import yaml
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path) -> "DesignSystem":
        """Load from path if it exists, otherwise return default design system."""
        if path.exists():
            return cls.load(path)
        return cls()

    def with_frame_width(self, frame_width: int | None) -> "DesignSystem":
        """Copy with the geometry re-derived for another frame width."""
        if frame_width is None:
            return self
        geometry = PageGeometry.model_validate(
            {**self.geometry.model_dump(), "frame_width": frame_width}
        )
        return self.model_copy(update={"geometry": geometry})
