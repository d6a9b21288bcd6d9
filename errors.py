"""Error kinds raised while computing or materializing a page layout.

The layout module fails fast: none of these are caught below the entry
script, which reports the message to the renderer and exits.
"""


class LayoutError(Exception):
    """Base class for every failure of a page build."""


class InvalidColorFormat(LayoutError, ValueError):
    """A color string is not ``#`` followed by exactly six hex digits."""

    def __init__(self, value: object):
        super().__init__(f"Invalid color {value!r}: expected '#RRGGBB'")
        self.value = value


class FontLoadError(LayoutError):
    """A requested font family/style is not available to the renderer."""


class RenderError(LayoutError):
    """Materializing or measuring a node descriptor failed."""
