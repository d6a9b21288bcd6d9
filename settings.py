import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_dir: Path = Path("./data")
    frame_width: int | None = None  # overrides design.yaml geometry
    font_dirs: list[Path] = Field(default_factory=list)
    write_pdf: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PFL_",
        env_file_encoding="utf-8",
    )

    @field_validator("frame_width")
    @classmethod
    def frame_width_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("frame_width must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def content_yaml_path(self) -> Path:
        return self.project_dir / "content.yaml"

    @property
    def design_yaml_path(self) -> Path:
        return self.project_dir / "design.yaml"

    @property
    def fonts_dir(self) -> Path:
        return self.project_dir / "fonts"

    @property
    def output_dir(self) -> Path:
        return self.project_dir / "output"

    @property
    def html_output_path(self) -> Path:
        return self.output_dir / "page.html"

    @property
    def pdf_output_path(self) -> Path:
        return self.output_dir / "page.pdf"
