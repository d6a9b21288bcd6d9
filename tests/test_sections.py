"""Tests for the hero, projects and about section builders."""
import pytest

from conftest import FixedMetricsRenderer
from errors import InvalidColorFormat
from models.content import PageContent, ProjectEntry
from models.design import DesignSystem
from models.extents import TextExtents
from models.nodes import FrameNode, RectangleNode, TextNode
from pipeline.assemble import assemble_page, measure_deferred
from pipeline.section_about import build_about
from pipeline.section_hero import HERO_HEIGHT, build_hero
from pipeline.section_projects import build_projects, column_backgrounds, section_height


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _extents(content: PageContent, design: DesignSystem, renderer=None) -> TextExtents:
    """Text sizes as the stub renderer would report them."""
    draft = TextExtents()
    assemble_page(content, design, draft)
    return TextExtents(reported=measure_deferred(draft.pending, renderer or FixedMetricsRenderer()))


def _by_name(frame: FrameNode, name: str):
    return next(n for n in frame.walk() if n.name == name)


def _project(**kwargs) -> ProjectEntry:
    defaults = dict(
        title="Row", description="Copy.", role="Designer", year="2020",
        image_left=True, image_bg="#DDE7E7", content_bg="#161616", dark=True, height=650,
    )
    return ProjectEntry(**{**defaults, **kwargs})


# ---------------------------------------------------------------------------
# Hero
# ---------------------------------------------------------------------------

class TestHero:
    def _hero(self, content, design):
        return build_hero(content, 0, design, _extents(content, design))

    def test_consumes_960(self, content, design):
        hero, consumed = self._hero(content, design)
        assert consumed == 960
        assert hero.height == HERO_HEIGHT
        assert hero.clips_content

    def test_headline_centered_across_frame(self, content, design):
        hero, _ = self._hero(content, design)
        h1 = _by_name(hero, "Hero H1")
        assert h1.content == "PRODUCT DESIGNER"
        assert h1.x == 0
        assert h1.y == 365  # round(960 * 0.38)
        assert h1.style.align == "center"
        assert h1.style.fixed_width == 1440
        assert h1.auto_height

    def test_description_below_headline_border(self, content, design):
        hero, _ = self._hero(content, design)
        border = _by_name(hero, "Hero Border")
        description = _by_name(hero, "Hero Description")
        assert border.y == 365 + 180 - 16
        assert (border.x, border.width, border.height) == (100, 1240, 8)
        assert description.y == border.y + 16
        assert description.style.fixed_width == 1240

    def test_layer_order(self, content, design):
        hero, _ = self._hero(content, design)
        names = [c.name for c in hero.children]
        assert names[:5] == ["Video BG", "White Overlay", "Hamburger", "Logo Mark", "Logo Label"]
        assert names[-2:] == ["Hero Border", "Hero Description"]

    def test_overlay_is_translucent_white(self, content, design):
        hero, _ = self._hero(content, design)
        overlay = hero.children[1]
        assert overlay.fills[0].opacity == 0.7
        assert overlay.fills[0].color.r == 1.0

    def test_hamburger(self, content, design):
        hero, _ = self._hero(content, design)
        menu = _by_name(hero, "Hamburger")
        assert menu.x == 1440 - 72 - 60
        assert [bar.y for bar in menu.children] == [19, 29, 39]

    def test_email_right_aligned(self, content, design):
        hero, _ = self._hero(content, design)
        email = _by_name(hero, "Email")
        # stub width: 17 characters * 10px
        assert email.x == 1368 - 170
        assert email.y == 440

    def test_contact_divider_and_icons(self, content, design):
        hero, _ = self._hero(content, design)
        divider = _by_name(hero, "Contact Divider")
        assert (divider.x, divider.y) == (1368 - 190, 440 + 24 + 20)
        icons = [c for c in hero.children if c.name in content.contact.social_links]
        assert [i.x for i in icons] == [1200, 1248, 1296, 1344]
        assert all(i.y == divider.y + 21 for i in icons)

    def test_rotated_label(self, content, design):
        hero, _ = self._hero(content, design)
        label = _by_name(hero, "Logo Label")
        assert label.rotation == -90
        assert label.width == 160  # stub name width 140 < minimum
        assert (label.x, label.y) == (-20, 480 + 80)
        name, role = label.children
        assert name.style.decoration == "underline"
        assert role.y == 29 + 4

    def test_wide_name_widens_label(self, content, design):
        extents = _extents(content, design, FixedMetricsRenderer(widths={"hero.logo_name": 301}))
        hero, _ = build_hero(content, 0, design, extents)
        label = _by_name(hero, "Logo Label")
        assert label.width == 301
        assert label.y == 480 + 151

    def test_origin_offsets_frame_only(self, content, design):
        hero, _ = build_hero(content, 500, design, _extents(content, design))
        assert hero.y == 500
        assert _by_name(hero, "Hero H1").y == 365


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

class TestProjects:
    def _projects(self, content, design, origin=0):
        return build_projects(content, origin, design, _extents(content, design))

    def test_total_height_of_shipped_rows(self, content, design):
        section, consumed = self._projects(content, design)
        assert consumed == 80 + 120 + 650 + 40 + 700 + 40 + 698 + 80 == 2408
        assert section.height == 2408

    def test_section_height_formula(self):
        assert section_height([_project(height=100)]) == 80 + 120 + 100 + 80
        assert section_height([_project(height=100), _project(height=200)]) == 80 + 120 + 300 + 40 + 80
        assert section_height([]) == 280

    def test_heading(self, content, design):
        section, _ = self._projects(content, design)
        heading = section.children[0]
        assert heading.content == "Selected Projects"
        assert (heading.x, heading.y) == (120, 80)

    def test_rows_stack_below_heading(self, content, design):
        section, _ = self._projects(content, design)
        columns = section.children[1:]
        assert len(columns) == 6
        row_tops = [c.y for c in columns[::2]]
        assert row_tops == [231, 231 + 650 + 40, 231 + 650 + 40 + 700 + 40]

    def test_last_row_runs_into_bottom_padding(self, content, design):
        section, consumed = self._projects(content, design)
        last = section.children[-1]
        # measured heading 111 + gap 40 overshoots the 120 block by 31
        assert last.y + last.height == 2359
        assert consumed - (last.y + last.height) == 80 - 31

    def test_columns_on_grid(self, content, design):
        section, _ = self._projects(content, design)
        left, right = section.children[1:3]
        assert (left.x, left.width) == (120, 600)
        assert (right.x, right.width) == (720, 600)
        assert left.height == right.height == 650

    def test_copy_uses_content_inset(self, content, design):
        section, _ = self._projects(content, design)
        copy = section.children[2]  # first row: image left, copy right
        title = copy.children[0]
        assert title.x == 56
        assert title.y == 130  # round(650 * 0.2)

    def test_copy_stacking(self, content, design):
        extents = _extents(content, design, FixedMetricsRenderer(heights={
            "projects.0.title": 150, "projects.0.description": 96,
        }))
        section, _ = build_projects(content, 0, design, extents)
        title, description, info, button = section.children[2].children
        assert description.y == 130 + 150 + 24
        assert info.y == description.y + 96 + 30
        assert (info.width, info.height) == (300, 56)
        assert button.y == info.y + 56 + 50
        assert button.x == 56

    def test_info_frame(self, content, design):
        section, _ = self._projects(content, design)
        info = section.children[2].children[2]
        assert [c.content for c in info.children] == ["My role", "Co-Founder", "Year", "2017 - Present"]
        assert [(c.x, c.y) for c in info.children] == [(0, 0), (0, 22), (160, 0), (160, 22)]

    def test_image_placeholder(self, content, design):
        section, _ = self._projects(content, design)
        image_col = section.children[1]
        [placeholder] = image_col.children
        assert placeholder.content == "[Image: Places2go.co]"
        assert (placeholder.x, placeholder.y) == (300 - 80, 325 - 10)

    def test_image_right_swaps_columns(self, content, design):
        section, _ = self._projects(content, design)
        left, right = section.children[3:5]  # second row: image right
        assert left.name == "Mobile Banking App – Content"
        assert right.name == "Mobile Banking App – Image"
        assert len(right.children) == 1
        assert left.children[0].content == "Mobile Banking App"

    def test_theme_colors(self, content, design):
        section, _ = self._projects(content, design)
        light_title = section.children[2].children[0]
        dark_title = section.children[3].children[0]
        assert light_title.style.color == "#161616"
        assert dark_title.style.color == "#fafefe"

    def test_inset_follows_frame_width(self, content):
        design = DesignSystem().with_frame_width(1840)
        section, _ = build_projects(content, 0, design, _extents(content, design))
        assert section.children[1].width == 800
        assert section.children[2].children[0].x == 208


class TestImageSideSwap:
    def test_backgrounds_swap(self):
        left_image = _project(image_left=True)
        right_image = _project(image_left=False)
        assert column_backgrounds(left_image) == ("#DDE7E7", "#161616")
        assert column_backgrounds(right_image) == ("#161616", "#DDE7E7")

    def test_swap_moves_placeholder_and_keeps_colors(self, design):
        def row(image_left):
            content = PageContent(projects=[_project(image_left=image_left)])
            section, _ = build_projects(content, 0, design, _extents(content, design))
            return section.children[1], section.children[2]

        left_a, right_a = row(True)
        left_b, right_b = row(False)

        assert left_a.children[0].content.startswith("[Image:")
        assert right_b.children[0].content.startswith("[Image:")
        assert left_a.fills == right_b.fills
        assert right_a.fills == left_b.fills
        def colors(*frames):
            return {tuple(f.fills[0].color.model_dump().values()) for f in frames}

        assert colors(left_a, right_a) == colors(left_b, right_b)

    def test_bad_row_color_fails_fast(self, design):
        content = PageContent(projects=[_project(image_bg="#DDE7E")])
        with pytest.raises(InvalidColorFormat):
            build_projects(content, 0, design, TextExtents())


# ---------------------------------------------------------------------------
# About
# ---------------------------------------------------------------------------

class TestAbout:
    def test_height_with_stub_metrics(self, content, design):
        section, consumed = build_about(content, 0, design, _extents(content, design))
        # skills column ends lower: 80 + 92 + 90 + 48 + 76 + 60 = 446
        footer_top = 446 + 80
        assert consumed == footer_top + 52 + 48 + 24 + 16 + 5 + 16 + 24 + 80
        assert section.height == consumed

    def test_footer_follows_skill_text_height(self, content, design):
        short = _extents(content, design)
        tall = _extents(content, design, FixedMetricsRenderer(heights={"about.skills.text": 300}))
        _, short_height = build_about(content, 0, design, short)
        section, tall_height = build_about(content, 0, design, tall)
        assert tall_height - short_height == 300 - 60
        assert _by_name(section, "Button – View LinkedIn").y == 80 + 92 + 90 + 48 + 76 + 300 + 80

    def test_left_column_wins_when_longer(self, design):
        content = PageContent()
        many = content.about.model_copy(update={"experience": content.about.experience * 5})
        content = content.model_copy(update={"about": many})
        section, _ = build_about(content, 0, design, _extents(content, design))
        button = _by_name(section, "Button – View LinkedIn")
        assert button.y == 80 + 92 + 20 * 30 + 80

    def test_rows(self, content, design):
        section, _ = build_about(content, 0, design, _extents(content, design))
        labels = [c for c in section.children if isinstance(c, TextNode) and c.name == "Row Label"]
        assert [l.content for l in labels][:4] == ["2016 - Present", "2013 - 2016", "2010 - 2013", "2006 - 2010"]
        assert [l.y for l in labels][:4] == [172, 202, 232, 262]
        assert all(l.x == 120 for l in labels[:4])
        assert all(l.x == 720 for l in labels[4:])
        values = [c for c in section.children if isinstance(c, TextNode) and c.name == "Row Value"]
        assert values[0].x == 120 + 140

    def test_footer_centered(self, content, design):
        section, consumed = build_about(content, 0, design, _extents(content, design))
        assert _by_name(section, "Button – View LinkedIn").x == 638
        email = _by_name(section, "Footer Email")
        assert email.x == 635  # (1440 - 170) / 2
        assert email.y == 526 + 52 + 48
        divider = _by_name(section, "Footer Divider")
        assert (divider.x, divider.y) == (625, email.y + 24 + 16)
        icons = [c for c in section.children if isinstance(c, RectangleNode) and c.name == "Dribbble"]
        assert icons[0].x == 636
        assert icons[0].y == divider.y + 21
        assert consumed == icons[0].y + 24 + 80

    def test_skills_text_wraps_in_column(self, content, design):
        section, _ = build_about(content, 0, design, _extents(content, design))
        skills = _by_name(section, "Skills")
        assert skills.auto_height
        assert skills.style.fixed_width == 560
        assert skills.x == 720
