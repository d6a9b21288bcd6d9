"""Projects section — "Selected Projects" heading and two-column showcase rows.

Each row is a pair of column frames on the grid. One column holds the image
placeholder, the other the copy (title, description, role/year, button);
``ProjectEntry.image_left`` decides which is which.
"""
import logging

from models.content import PageContent, ProjectEntry
from models.design import DesignSystem
from models.extents import TextExtents
from models.nodes import FrameNode
from models.style import StyleOptions
from pipeline.primitives import make_button, make_frame, make_text
from utils.geometry import round_half_up

logger = logging.getLogger(__name__)

PADDING_TOP = 80
# The section height reserves a fixed heading block, but rows start below the
# measured heading plus _HEADING_GAP (111 + 40 at the default size). The last
# row therefore eats 31px of the bottom padding; the shipped page does the same.
HEADING_BLOCK = 120
ROW_GAP = 40
PADDING_BOTTOM = 80

_HEADING_GAP = 40
_INFO_WIDTH = 300
_INFO_HEIGHT = 56
_INFO_COLUMN = 160

# (heading, body, list, button) text colors per row theme
_DARK_THEME = ("#fafefe", "#999999", "#cccccc", "#ffffff")
_LIGHT_THEME = ("#161616", "#5a5a5a", "#161616", "#161616")


def section_height(projects: list[ProjectEntry]) -> int:
    """Fixed paddings plus every row and the gaps between rows."""
    gaps = ROW_GAP * max(len(projects) - 1, 0)
    rows = sum(p.height for p in projects)
    return PADDING_TOP + HEADING_BLOCK + rows + gaps + PADDING_BOTTOM


def column_backgrounds(project: ProjectEntry) -> tuple[str, str]:
    """(left, right) background colors; they swap along with the image side."""
    if project.image_left:
        return project.image_bg, project.content_bg
    return project.content_bg, project.image_bg


def build_projects(
    content: PageContent,
    origin_y: float,
    design: DesignSystem,
    extents: TextExtents,
) -> tuple[FrameNode, float]:
    geometry = design.geometry
    total = section_height(content.projects)
    section = make_frame(
        0, origin_y, geometry.frame_width, total, design.colors.projects_bg, "Section – Projects",
    )

    heading = section.append(make_text(
        content.projects_heading, geometry.grid_x, PADDING_TOP,
        StyleOptions(size=74, weight="Bold", color="#ffffff", line_height=111, name="Selected Projects"),
        key="projects.heading",
    ))

    row_y = PADDING_TOP + extents.height(heading) + _HEADING_GAP
    for index, project in enumerate(content.projects):
        _project_row(section, project, index, row_y, design, extents)
        row_y += project.height + ROW_GAP

    logger.debug("Projects: %d rows, height %d", len(content.projects), total)
    return section, total


def _project_row(
    section: FrameNode,
    project: ProjectEntry,
    index: int,
    row_y: float,
    design: DesignSystem,
    extents: TextExtents,
) -> None:
    geometry = design.geometry
    col = geometry.column_width
    left_bg, right_bg = column_backgrounds(project)
    image_name = f"{project.title} – Image"
    content_name = f"{project.title} – Content"

    left = section.append(make_frame(
        geometry.grid_x, row_y, col, project.height, left_bg,
        image_name if project.image_left else content_name,
    ))
    right = section.append(make_frame(
        geometry.grid_x + col, row_y, col, project.height, right_bg,
        content_name if project.image_left else image_name,
    ))
    image_col, copy_col = (left, right) if project.image_left else (right, left)

    image_col.append(make_text(
        f"[Image: {project.title}]", col / 2 - 80, project.height / 2 - 10,
        StyleOptions(size=14, color="#555555" if project.dark else "#888888", name="Image Placeholder"),
        key=f"projects.{index}.image",
    ))
    _project_copy(copy_col, project, index, geometry.content_inset, geometry.content_width, extents)


def _project_copy(
    column: FrameNode,
    project: ProjectEntry,
    index: int,
    x: float,
    width: float,
    extents: TextExtents,
) -> None:
    heading_c, body_c, list_c, button_c = _DARK_THEME if project.dark else _LIGHT_THEME
    key = f"projects.{index}"
    y = round_half_up(project.height * 0.2)

    title = column.append(make_text(
        project.title, x, y,
        StyleOptions(size=50, weight="Bold", color=heading_c, fixed_width=width,
                     line_height=75, tracking=1, name="Project Title"),
        key=f"{key}.title",
    ))
    y += extents.height(title) + 24

    description = column.append(make_text(
        project.description, x, y,
        StyleOptions(size=16, weight="Light", color=body_c, fixed_width=width,
                     line_height=24, tracking=1, name="Project Description"),
        key=f"{key}.description",
    ))
    y += extents.height(description) + 30

    info = column.append(make_frame(x, y, _INFO_WIDTH, _INFO_HEIGHT, None, "Info"))
    for col_x, label, value, part in (
        (0, "My role", project.role, "role"),
        (_INFO_COLUMN, "Year", project.year, "year"),
    ):
        info.append(make_text(
            label, col_x, 0,
            StyleOptions(size=17, weight="SemiBold", color=list_c, name=f"{label} Label"),
            key=f"{key}.{part}_label",
        ))
        info.append(make_text(
            value, col_x, 22,
            StyleOptions(size=14, color=list_c, name=f"{label} Value"),
            key=f"{key}.{part}",
        ))
    y += _INFO_HEIGHT + 50

    column.append(make_button(
        project.button_label, x, y, extents, f"{key}.button", border=button_c, text_color=button_c,
    ))
    logger.debug("  row %d %r: button at y=%.0f", index, project.title, y)
