"""Rendering: turn the node-descriptor tree into a document.

``Renderer`` is the contract the layout needs from any host: load fonts,
materialize descriptors, report measured text sizes, and receive the final
outcome. ``HtmlRenderer`` implements it with Pillow for text metrics and
Jinja2 for an absolutely positioned HTML page, optionally converted to PDF
via WeasyPrint.

Writes: data/output/page.html   (always)
        data/output/page.pdf    (with --pdf)
"""
import functools
import logging
from pathlib import Path
from typing import Literal, Protocol

from jinja2 import Environment, FileSystemLoader, select_autoescape
from PIL import ImageFont
from pydantic import BaseModel, Field

try:
    import weasyprint as _weasyprint  # requires native GTK/Pango libs at runtime
except OSError:  # pragma: no cover
    _weasyprint = None  # type: ignore[assignment]

from errors import FontLoadError, RenderError
from models.design import DesignSystem
from models.extents import line_height_of
from models.nodes import FrameNode, NodeDescriptor, RectangleNode, TextNode
from models.style import Paint, StyleOptions
from settings import Settings

logger = logging.getLogger(__name__)

# Path (relative to the package root) where Jinja2 looks for templates
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class HostNode(BaseModel):
    """A materialized node: the descriptor's geometry plus measured size."""

    kind: Literal["rectangle", "frame", "text"]
    name: str
    x: float
    y: float
    width: float
    height: float
    fills: list[Paint] = Field(default_factory=list)
    strokes: list[Paint] = Field(default_factory=list)
    stroke_weight: float = 0.0
    corner_radius: float = 0.0
    clips_content: bool = False
    rotation: float = 0.0
    content: str | None = None
    lines: list[str] = Field(default_factory=list)
    style: StyleOptions | None = None
    children: list["HostNode"] = Field(default_factory=list)


class Renderer(Protocol):
    def load_fonts(self, family: str, styles: list[str]) -> None: ...

    def materialize(self, node: NodeDescriptor) -> HostNode: ...

    def report_text_height(self, handle: HostNode) -> float: ...

    def report_text_width(self, handle: HostNode) -> float: ...

    def report_outcome(self, success: bool, message: str) -> None: ...


# ---------------------------------------------------------------------------
# Font discovery
# ---------------------------------------------------------------------------

# Standard directories where TTF/OTF fonts live on Linux/macOS
_FONT_SEARCH_DIRS = [
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path.home() / ".local/share/fonts",
    Path.home() / ".fonts",
]

# Style name → CSS font-weight
_CSS_WEIGHTS = {
    "Light": 300,
    "Regular": 400,
    "Medium": 500,
    "SemiBold": 600,
    "Bold": 700,
}


def _find_font_files(family: str, search_dirs: list[Path]) -> dict[str, Path]:
    """Scan ``search_dirs`` for TTF/OTF files of ``family``.

    Returns style name (as in _CSS_WEIGHTS) → first matching file. Accepts
    "Inter-Bold.ttf", "Inter Bold.otf" and "inter_semibold.ttf"; a bare
    "Inter.ttf" counts as Regular.
    """
    slug = family.lower().replace(" ", "")
    styles = {name.lower(): name for name in _CSS_WEIGHTS}
    found: dict[str, Path] = {}
    for base in search_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.TTF", "*.otf", "*.OTF"):
            for path in sorted(base.rglob(ext)):
                stem = path.stem.lower().replace(" ", "-").replace("_", "-")
                head, _, suffix = stem.partition("-")
                if head != slug:
                    continue
                style = styles.get(suffix.replace("-", "") or "regular")
                if style is not None:
                    found.setdefault(style, path)
    return found


def _build_font_face_css(family: str, font_files: dict[str, Path]) -> str:
    """``@font-face`` rules pointing at the loaded font files."""
    rules = []
    for style, path in font_files.items():
        rules.append(
            f'@font-face {{\n'
            f'  font-family: "{family}";\n'
            f'  src: url({path.as_uri()});\n'
            f'  font-weight: {_CSS_WEIGHTS[style]};\n'
            f'  font-style: normal;\n'
            f'}}'
        )
    return "\n".join(rules)


# ---------------------------------------------------------------------------
# Text shaping
# ---------------------------------------------------------------------------

def _line_width(font, line: str, tracking: float) -> float:
    return font.getlength(line) + tracking * len(line)


def _wrap_words(font, text: str, tracking: float, max_width: float) -> list[str]:
    """Greedy word wrap; explicit newlines always break."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current: list[str] = []
        for word in paragraph.split(" "):
            candidate = " ".join(current + [word])
            if not current or _line_width(font, candidate, tracking) <= max_width:
                current.append(word)
                continue
            lines.append(" ".join(current))
            current = [word]
        lines.append(" ".join(current))
    return lines


def _css_rgba(paint: Paint) -> str:
    c = paint.color
    return f"rgba({round(c.r * 255)}, {round(c.g * 255)}, {round(c.b * 255)}, {paint.opacity:g})"


# ---------------------------------------------------------------------------
# HTML renderer
# ---------------------------------------------------------------------------

class HtmlRenderer:
    """Renderer that materializes into HTML, measuring text with Pillow."""

    def __init__(self, settings: Settings, design: DesignSystem):
        self.settings = settings
        self.design = design
        self.font_files: dict[str, Path] = {}
        self.outcome: tuple[bool, str] | None = None

    @property
    def search_dirs(self) -> list[Path]:
        return [self.settings.fonts_dir, *self.settings.font_dirs, *_FONT_SEARCH_DIRS]

    def load_fonts(self, family: str, styles: list[str]) -> None:
        """Locate a file for every requested style of ``family``.

        Raises FontLoadError naming the styles that could not be found.
        """
        available = _find_font_files(family, self.search_dirs)
        missing = [s for s in styles if s not in available]
        if missing:
            raise FontLoadError(
                f"Font '{family}' is missing style(s) {', '.join(missing)} "
                f"(searched {len(self.search_dirs)} directories)"
            )
        self.font_files = {s: available[s] for s in styles}
        for style, path in self.font_files.items():
            logger.info("  %-9s %s", style, path)

    def _font(self, weight: str, size: float):
        path = self.font_files.get(weight)
        if path is None:
            raise RenderError(f"Font style '{weight}' was not loaded before use")
        return _truetype(str(path), size)

    def materialize(self, node: NodeDescriptor) -> HostNode:
        """Create the host tree for ``node``, preserving child order."""
        if isinstance(node, TextNode):
            return self._materialize_text(node)
        if isinstance(node, RectangleNode):
            return HostNode(
                kind="rectangle", name=node.name, x=node.x, y=node.y,
                width=node.width, height=node.height, fills=node.fills,
                corner_radius=node.corner_radius,
            )
        if isinstance(node, FrameNode):
            return HostNode(
                kind="frame", name=node.name, x=node.x, y=node.y,
                width=node.width, height=node.height, fills=node.fills,
                strokes=node.strokes, stroke_weight=node.stroke_weight,
                clips_content=node.clips_content, rotation=node.rotation,
                children=[self.materialize(child) for child in node.children],
            )
        raise RenderError(f"Cannot materialize {type(node).__name__}")

    def _materialize_text(self, node: TextNode) -> HostNode:
        style = node.style
        font = self._font(style.weight, style.size)
        try:
            if style.fixed_width:
                lines = _wrap_words(font, node.content, style.tracking, style.fixed_width)
                width = style.fixed_width
            else:
                lines = node.content.split("\n")
                width = max(_line_width(font, line, style.tracking) for line in lines)
        except (OSError, ValueError) as exc:
            raise RenderError(f"Could not shape text '{node.key}': {exc}") from exc

        return HostNode(
            kind="text", name=node.name, x=node.x, y=node.y,
            width=width, height=len(lines) * line_height_of(node),
            fills=node.fills, content=node.content, lines=lines, style=style,
        )

    def report_text_height(self, handle: HostNode) -> float:
        return handle.height

    def report_text_width(self, handle: HostNode) -> float:
        return handle.width

    def report_outcome(self, success: bool, message: str) -> None:
        self.outcome = (success, message)
        if success:
            logger.info(message)
        else:
            logger.error(message)

    # -----------------------------------------------------------------------
    # Output
    # -----------------------------------------------------------------------

    def render_html(self, root: HostNode, title: str) -> str:
        env = Environment(
            loader=FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "j2"]),
        )
        env.filters["rgba"] = _css_rgba
        env.globals["css_weight"] = lambda style: _CSS_WEIGHTS[style]
        template = env.get_template("page.html.j2")
        return template.render(
            root=root,
            title=title,
            font_family=self.design.fonts.family,
            font_css=_build_font_face_css(self.design.fonts.family, self.font_files),
        )

    def write_html(self, root: HostNode, path: Path, title: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render_html(root, title or root.name), encoding="utf-8")
        logger.info("HTML written → %s", path)
        return path

    def write_pdf(self, html_path: Path, pdf_path: Path) -> Path:
        if _weasyprint is None:  # pragma: no cover
            raise RuntimeError(
                "WeasyPrint native libraries (GTK/Pango) are not available. "
                "Follow https://doc.courtbouillon.org/weasyprint/stable/first_steps.html"
            )
        pdf_path.parent.mkdir(parents=True, exist_ok=True)
        _weasyprint.HTML(filename=str(html_path)).write_pdf(str(pdf_path))
        logger.info("PDF written → %s", pdf_path)
        return pdf_path


@functools.lru_cache(maxsize=64)
def _truetype(path: str, size: float):
    try:
        return ImageFont.truetype(path, size)
    except OSError as exc:
        raise RenderError(f"Cannot open font {path}: {exc}") from exc
