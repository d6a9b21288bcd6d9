"""Primitive builders: rectangles, frames, text and the small composites
(button, inline row, icon strip) the sections are assembled from.

Nothing here talks to a renderer. Builders that need to know how large a
text node will be ask the ``TextExtents`` they are given.
"""
from models.extents import TextExtents
from models.nodes import FrameNode, RectangleNode, TextNode
from models.style import StyleOptions
from utils.colors import make_fill, make_stroke, no_fill

BUTTON_WIDTH = 164
BUTTON_HEIGHT = 52

ICON_SIZE = 24
ICON_STEP = 48  # icon plus gap
INLINE_ROW_HEIGHT = 30

_ACCENT_ROW_COLOR = "#005397"
_BODY_ROW_COLOR = "#1d1d1d"


def make_rect(
    x: float,
    y: float,
    w: float,
    h: float,
    color: str,
    opacity: float = 1.0,
    name: str = "Rect",
) -> RectangleNode:
    if w < 0 or h < 0:
        raise ValueError(f"{name}: width and height must not be negative ({w}x{h})")
    return RectangleNode(name=name, x=x, y=y, width=w, height=h, fills=make_fill(color, opacity))


def make_frame(
    x: float,
    y: float,
    w: float,
    h: float,
    color: str | None,
    name: str = "Frame",
) -> FrameNode:
    """Empty frame; ``color=None`` leaves it unfilled."""
    fills = make_fill(color) if color else no_fill()
    return FrameNode(name=name, x=x, y=y, width=w, height=h, fills=fills)


def make_text(
    content: str,
    x: float,
    y: float,
    options: StyleOptions | None = None,
    key: str | None = None,
) -> TextNode:
    """Text descriptor.

    With ``options.fixed_width`` the text wraps and its height is left to the
    renderer (``auto_height``); otherwise it grows to fit its content.
    """
    options = options or StyleOptions()
    return TextNode(
        key=key,
        content=content,
        x=x,
        y=y,
        style=options,
        fills=make_fill(options.color, options.opacity),
        auto_height=options.fixed_width is not None,
    )


def make_button(
    label: str,
    x: float,
    y: float,
    extents: TextExtents,
    key: str,
    border: str = "#161616",
    text_color: str = "#161616",
) -> FrameNode:
    """Outlined button with its label centered."""
    button = make_frame(x, y, BUTTON_WIDTH, BUTTON_HEIGHT, None, f"Button – {label}")
    button.strokes = make_stroke(border)
    button.stroke_weight = 2
    button.stroke_align = "inside"

    text = make_text(
        label, 0, 0,
        StyleOptions(size=14, weight="Medium", color=text_color, tracking=1.2, name="Button Label"),
        key=key,
    )
    size = extents.size(text)
    text.x = (BUTTON_WIDTH - size.width) / 2
    text.y = (BUTTON_HEIGHT - size.height) / 2
    button.append(text)
    return button


def add_inline_row(
    parent: FrameNode,
    x: float,
    y: float,
    accent: str,
    body: str,
    extents: TextExtents,
    key: str,
    accent_color: str = _ACCENT_ROW_COLOR,
    body_color: str = _BODY_ROW_COLOR,
) -> float:
    """Bold accent text followed by dimmed body text on one line.

    Returns the height the row consumes.
    """
    lead = parent.append(make_text(
        accent, x, y,
        StyleOptions(size=16, weight="Bold", color=accent_color, name="Row Label"),
        key=f"{key}.label",
    ))
    parent.append(make_text(
        "  " + body, x + extents.width(lead), y,
        StyleOptions(size=16, color=body_color, opacity=0.68, name="Row Value"),
        key=f"{key}.value",
    ))
    return INLINE_ROW_HEIGHT


def icon_strip_width(count: int) -> int:
    if count == 0:
        return 0
    return ICON_SIZE * count + ICON_SIZE * (count - 1)


def add_social_icons(
    parent: FrameNode,
    x: float,
    y: float,
    labels: list[str],
    color: str = "#161616",
) -> None:
    for index, label in enumerate(labels):
        icon = make_rect(x + index * ICON_STEP, y, ICON_SIZE, ICON_SIZE, color, name=label)
        icon.corner_radius = 4
        parent.append(icon)
