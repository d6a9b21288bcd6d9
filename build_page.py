#!/usr/bin/env python3
"""Build the portfolio page layout and render it to HTML (and optionally PDF).

Usage:
    python build_page.py                      # data/output/page.html
    python build_page.py --pdf                # also data/output/page.pdf
    python build_page.py --frame-width 1640   # lay the page out wider
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

sys.path.insert(0, str(Path(__file__).resolve().parent))

from models.content import PageContent
from models.design import DesignSystem
from pipeline.assemble import build_layout
from pipeline.render import HostNode, HtmlRenderer, Renderer
from settings import Settings

logger = logging.getLogger("build_page")

SUCCESS_MESSAGE = "Portfolio design created!"


def build(
    content: PageContent,
    design: DesignSystem,
    renderer: Renderer,
    publish: Callable[[HostNode], None] | None = None,
):
    """Load fonts, lay the page out, materialize it and hand it to ``publish``.

    Any failure, including one while publishing, is reported to the renderer
    as "Error: <message>" and the build stops there. Success is reported only
    once everything has been written. Returns the materialized root, or None
    on failure.
    """
    try:
        renderer.load_fonts(design.fonts.family, design.fonts.styles)
        layout = build_layout(content, design, renderer)
        root = renderer.materialize(layout.root)
        if publish is not None:
            publish(root)
    except Exception as exc:
        logger.exception("Build failed")
        renderer.report_outcome(False, f"Error: {exc}")
        return None
    renderer.report_outcome(True, SUCCESS_MESSAGE)
    return root


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--pdf", action="store_true", help="Also convert the page to PDF")
    parser.add_argument("--frame-width", type=int, dest="frame_width",
                        help="Frame width in px (default: design.yaml or 1440)")
    parser.add_argument("--content", type=Path, help="Page copy YAML (default: <project>/content.yaml)")
    parser.add_argument("--design", type=Path, help="Design YAML (default: <project>/design.yaml)")
    args = parser.parse_args(argv)

    overrides = {}
    if args.frame_width is not None:
        overrides["frame_width"] = args.frame_width
    if args.pdf:
        overrides["write_pdf"] = True
    settings = Settings(**overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    design = DesignSystem.load_or_default(args.design or settings.design_yaml_path)
    design = design.with_frame_width(settings.frame_width)
    content = PageContent.load_or_default(args.content or settings.content_yaml_path)

    renderer = HtmlRenderer(settings, design)
    logger.info("=== Building '%s' at %dpx ===", content.title, design.geometry.frame_width)

    def publish(root: HostNode) -> None:
        html_path = renderer.write_html(root, settings.html_output_path, content.title)
        if settings.write_pdf:
            renderer.write_pdf(html_path, settings.pdf_output_path)

    if build(content, design, renderer, publish) is None:
        return 1

    logger.info("=== Done → %s ===", settings.html_output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
