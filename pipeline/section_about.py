"""About section: experience, languages and skills columns over a centered footer.

Unlike the other sections its height is not fixed: the footer starts below
whichever column runs longer, and the right column ends in wrapped skills
text whose height only the renderer knows.
"""
import logging

from models.content import InfoRow, PageContent
from models.design import DesignSystem
from models.extents import TextExtents
from models.nodes import FrameNode
from models.style import StyleOptions
from pipeline.primitives import (
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    ICON_SIZE,
    add_inline_row,
    add_social_icons,
    icon_strip_width,
    make_button,
    make_frame,
    make_rect,
    make_text,
)
from utils.geometry import centered

logger = logging.getLogger(__name__)

PADDING_TOP = 80
PADDING_BOTTOM = 80
FOOTER_GAP = 80

_HEADING_GAP = 32
_SKILLS_GAP = 48
_SKILLS_HEADING_GAP = 16
_DIVIDER_WIDTH = 190
_DIVIDER_HEIGHT = 5
# Placeholder height until the column lengths are known
_INITIAL_HEIGHT = 900


def build_about(
    content: PageContent,
    origin_y: float,
    design: DesignSystem,
    extents: TextExtents,
) -> tuple[FrameNode, float]:
    geometry = design.geometry
    about = content.about
    section = make_frame(
        0, origin_y, geometry.frame_width, _INITIAL_HEIGHT, design.colors.about_bg, "Section – About",
    )

    left_x = geometry.grid_x
    right_x = geometry.grid_x + geometry.column_width

    left_y = PADDING_TOP
    left_y += _heading(section, about.experience_heading, left_x, left_y, "about.experience", design, extents)
    left_y += _rows(section, about.experience, left_x, left_y, "about.experience", design, extents)

    right_y = PADDING_TOP
    right_y += _heading(section, about.languages_heading, right_x, right_y, "about.languages", design, extents)
    right_y += _rows(section, about.languages, right_x, right_y, "about.languages", design, extents)
    right_y += _SKILLS_GAP

    skills_heading = section.append(_heading_text(about.skills_heading, right_x, right_y, "about.skills", design))
    right_y += extents.height(skills_heading) + _SKILLS_HEADING_GAP

    skills = section.append(make_text(
        about.skills, right_x, right_y,
        StyleOptions(size=16, color=design.colors.about_ink,
                     fixed_width=geometry.column_width - 40, line_height=30, name="Skills"),
        key="about.skills.text",
    ))

    footer_top = max(left_y, right_y + extents.height(skills)) + FOOTER_GAP
    height = _footer(section, content, footer_top, design, extents)

    section.height = height
    logger.debug("About: columns end at %.0f/%.0f, height %.0f", left_y, right_y, height)
    return section, height


def _heading_text(text: str, x: float, y: float, key: str, design: DesignSystem):
    return make_text(
        text, x, y,
        StyleOptions(size=64, weight="Bold", color=design.colors.about_ink,
                     line_height=60, name=f"{text} Heading"),
        key=f"{key}.heading",
    )


def _heading(
    section: FrameNode,
    text: str,
    x: float,
    y: float,
    key: str,
    design: DesignSystem,
    extents: TextExtents,
) -> float:
    node = section.append(_heading_text(text, x, y, key, design))
    return extents.height(node) + _HEADING_GAP


def _rows(
    section: FrameNode,
    rows: list[InfoRow],
    x: float,
    y: float,
    key: str,
    design: DesignSystem,
    extents: TextExtents,
) -> float:
    consumed = 0.0
    for index, row in enumerate(rows):
        consumed += add_inline_row(
            section, x, y + consumed, row.label, row.value, extents, f"{key}.{index}",
            accent_color=design.colors.accent, body_color=design.colors.about_ink,
        )
    return consumed


def _footer(
    section: FrameNode,
    content: PageContent,
    top: float,
    design: DesignSystem,
    extents: TextExtents,
) -> float:
    """LinkedIn button, email, divider and icons, all centered.

    Returns the section height measured to the bottom padding.
    """
    width = design.geometry.frame_width
    ink = design.colors.ink

    section.append(make_button(
        content.about.linkedin_label, centered(width, BUTTON_WIDTH), top, extents, "about.linkedin",
    ))

    email_y = top + BUTTON_HEIGHT + 48
    email = make_text(
        content.contact.email, 0, email_y,
        StyleOptions(size=20, weight="Bold", color=ink, align="center", name="Footer Email"),
        key="about.email",
    )
    email_size = extents.size(email)
    email.x = centered(width, email_size.width)
    section.append(email)

    divider_y = email_y + email_size.height + 16
    section.append(make_rect(
        centered(width, _DIVIDER_WIDTH), divider_y, _DIVIDER_WIDTH, _DIVIDER_HEIGHT, ink,
        name="Footer Divider",
    ))

    labels = content.contact.social_links
    icons_y = divider_y + _DIVIDER_HEIGHT + 16
    add_social_icons(section, centered(width, icon_strip_width(len(labels))), icons_y, labels, ink)

    return icons_y + ICON_SIZE + PADDING_BOTTOM
