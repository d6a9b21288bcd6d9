"""Page assembly — stack the sections and settle deferred text sizes.

``assemble_page`` is pure: content, design and a set of text extents in, a
``PageLayout`` out. ``build_layout`` runs it twice around a renderer: the
first pass collects every text node whose size the layout depends on, the
renderer measures them, and the second pass lays the page out again with
the measured sizes.
"""
import logging

from errors import RenderError
from models.content import PageContent
from models.design import DesignSystem
from models.extents import TextExtent, TextExtents
from models.nodes import PageLayout, TextNode
from pipeline.primitives import make_frame
from pipeline.render import Renderer
from pipeline.section_about import build_about
from pipeline.section_hero import build_hero
from pipeline.section_projects import build_projects

logger = logging.getLogger(__name__)

# Top-to-bottom
SECTION_BUILDERS = (build_hero, build_projects, build_about)


def assemble_page(
    content: PageContent,
    design: DesignSystem,
    extents: TextExtents | None = None,
) -> PageLayout:
    """Stack every section under the previous one inside a root frame.

    Without ``extents`` all text sizes are estimated.
    """
    if extents is None:
        extents = TextExtents()
    width = design.geometry.frame_width
    root = make_frame(0, 0, width, 0, design.colors.paper, content.title)

    offset = 0.0
    for builder in SECTION_BUILDERS:
        section, consumed = builder(content, offset, design, extents)
        root.append(section)
        offset += consumed

    root.height = offset
    return PageLayout(root=root, width=width, height=offset)


def measure_deferred(pending: dict[str, TextNode], renderer: Renderer) -> dict[str, TextExtent]:
    """Have the renderer shape each pending text node and report its size."""
    measured: dict[str, TextExtent] = {}
    for key, node in pending.items():
        handle = renderer.materialize(node)
        measured[key] = TextExtent(
            width=renderer.report_text_width(handle),
            height=renderer.report_text_height(handle),
        )
    return measured


def build_layout(content: PageContent, design: DesignSystem, renderer: Renderer) -> PageLayout:
    """Two-pass layout with renderer-reported text sizes.

    Fonts must already be loaded. Raises RenderError if the second pass still
    depends on a size nobody measured.
    """
    draft = TextExtents()
    assemble_page(content, design, draft)
    logger.info("Measuring %d text node(s)", len(draft.pending))

    extents = TextExtents(reported=measure_deferred(draft.pending, renderer))
    layout = assemble_page(content, design, extents)
    if not extents.resolved:
        raise RenderError(f"Unmeasured text after layout: {sorted(extents.pending)}")

    logger.info("Layout complete: %.0f x %.0f px, %d sections",
                layout.width, layout.height, len(layout.root.children))
    return layout
