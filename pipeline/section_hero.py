"""Hero section — full-bleed 960px header with headline and contact block.

Layers, bottom to top: dark backdrop, 70% white overlay, hamburger, logo
mark, rotated name label, right-hand contact block, centered headline,
bordered description.
"""
import logging

from models.content import PageContent
from models.design import DesignSystem
from models.extents import TextExtents
from models.nodes import FrameNode
from models.style import StyleOptions
from pipeline.primitives import (
    add_social_icons,
    icon_strip_width,
    make_frame,
    make_rect,
    make_text,
)
from utils.geometry import round_half_up

logger = logging.getLogger(__name__)

HERO_HEIGHT = 960

_MENU_SIZE = 60
_MENU_BAR_OFFSETS = (19, 29, 39)
_LABEL_MIN_WIDTH = 160
_LABEL_HEIGHT = 60
_DIVIDER_WIDTH = 190
_DIVIDER_HEIGHT = 5


def build_hero(
    content: PageContent,
    origin_y: float,
    design: DesignSystem,
    extents: TextExtents,
) -> tuple[FrameNode, float]:
    """Build the hero frame at ``origin_y``. Always consumes HERO_HEIGHT."""
    colors = design.colors
    width = design.geometry.frame_width
    hero = make_frame(0, origin_y, width, HERO_HEIGHT, None, "Section – Hero")
    hero.clips_content = True

    hero.append(make_rect(0, 0, width, HERO_HEIGHT, colors.hero_backdrop, name="Video BG"))
    hero.append(make_rect(0, 0, width, HERO_HEIGHT, "#ffffff", 0.7, name="White Overlay"))

    hero.append(_menu_button(width - design.geometry.edge_inset - _MENU_SIZE, design))
    hero.append(make_rect(20, 20, 40, 40, colors.ink, name="Logo Mark"))
    hero.append(_rotated_label(content, design, extents))

    _contact_block(hero, content, design, extents)
    _headline(hero, content, design, extents)

    logger.debug("Hero: %d nodes, height %d", len(hero.children), HERO_HEIGHT)
    return hero, HERO_HEIGHT


def _menu_button(x: float, design: DesignSystem) -> FrameNode:
    menu = make_frame(x, 0, _MENU_SIZE, _MENU_SIZE, design.colors.ink, "Hamburger")
    for bar_y in _MENU_BAR_OFFSETS:
        menu.append(make_rect(14, bar_y, 32, 2, design.colors.menu_bar, name="Bar"))
    return menu


def _rotated_label(content: PageContent, design: DesignSystem, extents: TextExtents) -> FrameNode:
    """Name + role stacked, turned -90° and pinned to the left edge.

    The placement (x=-20, y=mid-height + half the label width) was tuned for
    a host that rotates frames about their top-left corner; kept literally.
    """
    ink = design.colors.ink
    label = make_frame(0, 0, 200, _LABEL_HEIGHT, None, "Logo Label")
    name = label.append(make_text(
        content.hero.name, 0, 0,
        StyleOptions(size=24, weight="Bold", color=ink, decoration="underline", name="Logo Name"),
        key="hero.logo_name",
    ))
    name_size = extents.size(name)
    label.append(make_text(
        content.hero.role_label, 0, name_size.height + 4,
        StyleOptions(size=16, color=ink, name="Logo Role"),
        key="hero.logo_role",
    ))

    label.width = max(name_size.width, _LABEL_MIN_WIDTH)
    label.height = _LABEL_HEIGHT
    label.rotation = -90
    label.x = -20
    label.y = round_half_up(HERO_HEIGHT / 2) + round_half_up(label.width / 2)
    return label


def _contact_block(
    hero: FrameNode,
    content: PageContent,
    design: DesignSystem,
    extents: TextExtents,
) -> None:
    """Email, divider and icon strip, right-aligned at the edge inset."""
    ink = design.colors.ink
    right = design.geometry.frame_width - design.geometry.edge_inset
    top = round_half_up(HERO_HEIGHT / 2) - 40

    email = make_text(
        content.contact.email, 0, top,
        StyleOptions(size=20, weight="Bold", color=ink, name="Email"),
        key="hero.email",
    )
    email_size = extents.size(email)
    email.x = right - email_size.width
    hero.append(email)

    divider = hero.append(make_rect(
        right - _DIVIDER_WIDTH, top + email_size.height + 20,
        _DIVIDER_WIDTH, _DIVIDER_HEIGHT, ink, name="Contact Divider",
    ))

    labels = content.contact.social_links
    add_social_icons(
        hero, right - icon_strip_width(len(labels)), divider.y + _DIVIDER_HEIGHT + 16, labels, ink,
    )


def _headline(
    hero: FrameNode,
    content: PageContent,
    design: DesignSystem,
    extents: TextExtents,
) -> None:
    width = design.geometry.frame_width
    ink = design.colors.ink
    h1 = hero.append(make_text(
        content.hero.headline, 0, round_half_up(HERO_HEIGHT * 0.38),
        StyleOptions(
            size=74, weight="Bold", color=ink, fixed_width=width,
            line_height=180, tracking=2, align="center", name="Hero H1",
        ),
        key="hero.headline",
    ))

    text_y = h1.y + extents.height(h1) - 16
    text_width = width - 200
    hero.append(make_rect(100, text_y, text_width, 8, design.colors.hero_border, name="Hero Border"))
    hero.append(make_text(
        content.hero.description, 100, text_y + 16,
        StyleOptions(
            size=28, weight="SemiBold", color=ink, fixed_width=text_width,
            line_height=50, name="Hero Description",
        ),
        key="hero.description",
    ))
