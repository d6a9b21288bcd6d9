from pathlib import Path

import pytest

from errors import FontLoadError
from models.content import PageContent
from models.design import DesignSystem
from models.extents import line_height_of
from models.nodes import FrameNode, TextNode
from pipeline.render import HostNode
from settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_PROJECT_DIR = FIXTURES_DIR / "sample_project"

# Stub metrics: every character is 10px wide, whatever the font size
CHAR_WIDTH = 10.0


class FixedMetricsRenderer:
    """Deterministic stand-in for a host renderer.

    Text width is CHAR_WIDTH per character of the longest line (or the wrap
    width), height is one line height per paragraph. Individual keys can be
    overridden through ``heights`` / ``widths``.
    """

    def __init__(self, heights=None, widths=None, missing_styles=()):
        self.heights = heights or {}
        self.widths = widths or {}
        self.missing_styles = set(missing_styles)
        self.loaded: list[tuple[str, str]] = []
        self.measured: list[str] = []
        self.outcome = None

    def load_fonts(self, family, styles):
        missing = [s for s in styles if s in self.missing_styles]
        if missing:
            raise FontLoadError(f"Font '{family}' is missing style(s) {', '.join(missing)}")
        self.loaded = [(family, s) for s in styles]

    def materialize(self, node):
        if isinstance(node, TextNode):
            self.measured.append(node.key)
            lines = node.content.split("\n")
            width = self.widths.get(
                node.key, node.style.fixed_width or CHAR_WIDTH * max(len(line) for line in lines)
            )
            height = self.heights.get(node.key, len(lines) * line_height_of(node))
            return HostNode(
                kind="text", name=node.name, x=node.x, y=node.y, width=width, height=height,
                content=node.content, lines=lines, style=node.style,
            )
        children = [self.materialize(c) for c in node.children] if isinstance(node, FrameNode) else []
        return HostNode(
            kind=node.kind, name=node.name, x=node.x, y=node.y,
            width=node.width, height=node.height, children=children,
        )

    def report_text_height(self, handle):
        return handle.height

    def report_text_width(self, handle):
        return handle.width

    def report_outcome(self, success, message):
        self.outcome = (success, message)


@pytest.fixture
def sample_project_dir() -> Path:
    """Project directory with a partial content.yaml and design.yaml."""
    return SAMPLE_PROJECT_DIR


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh temp directory; no fonts installed there."""
    (tmp_path / "fonts").mkdir()
    return Settings(project_dir=tmp_path)


@pytest.fixture
def design() -> DesignSystem:
    return DesignSystem()


@pytest.fixture
def content() -> PageContent:
    return PageContent()


@pytest.fixture
def renderer() -> FixedMetricsRenderer:
    return FixedMetricsRenderer()
