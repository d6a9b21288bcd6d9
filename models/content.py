"""Page copy: the literal content the layout is built from.

Defaults reproduce the shipped portfolio page. A ``content.yaml`` in the
project directory may override any part of it.
"""
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

_HERO_DESCRIPTION = (
    "I'm Catalin Sandru a Product designer born in Romania, currently living in "
    "Bucharest, and working as an in-house designer.\n"
    "Strengths – website and app design.\n"
    "Co-founder of Places2Go.co\n"
    "If you want to know more about me, my work or if you're a Nigerian prince "
    "who wants to offer me a lot of money, feel free to contact me on hi[at]catasandru.com"
)


class ContactInfo(BaseModel):
    email: str = "hi@catasandru.com"
    social_links: list[str] = Field(
        default_factory=lambda: ["Dribbble", "Instagram", "Behance", "Skype"]
    )


class HeroContent(BaseModel):
    name: str = "Catalin Sandru"
    role_label: str = "Product Designer"
    headline: str = "PRODUCT DESIGNER"
    description: str = _HERO_DESCRIPTION


class ProjectEntry(BaseModel):
    """One showcase row. Never mutated once built.

    ``image_left`` puts the image placeholder in the left column; the
    background colors follow the same swap.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    role: str
    year: str
    button_label: str = "View Project"
    image_left: bool = True
    image_bg: str = "#161616"
    content_bg: str = "#161616"
    dark: bool = True
    height: int = Field(gt=0)


class InfoRow(BaseModel):
    """Accent label followed by body text, e.g. a year and an employer."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str


def _default_projects() -> list[ProjectEntry]:
    return [
        ProjectEntry(
            title="Places2go.co",
            description=(
                "Personal projects are usually the most complicated ones. This was not "
                "the case for Places2Go. Yeah... it actually was. A website for traveling "
                "with locals that focuses on making website interactions so easy that "
                "even grandmas understand how to use the platform."
            ),
            role="Co-Founder",
            year="2017 - Present",
            button_label="VIEW PROJECT",
            image_left=True,
            image_bg="#DDE7E7",
            content_bg="#DDE7E7",
            dark=False,
            height=650,
        ),
        ProjectEntry(
            title="Mobile Banking App",
            description=(
                "In-house UI designer, UX and project manager – my roles in this project. "
                "This meant a 360 degrees view of a behavior-learning mobile banking app.\n"
                "In addition to regular banking features, savings are automatically sent "
                "to a separate account based on the clients' buying behavior and the "
                "financial goals set."
            ),
            role="Product Designer",
            year="2017",
            image_left=False,
            height=700,
        ),
        ProjectEntry(
            title="Cloudfinity Responsive App",
            description=(
                "A project that started with an idea. No features, no plans.\n"
                "Lots of meetings and Skype calls, product goals and wireframes later, "
                "the project turned into a 46 pages responsive app."
            ),
            role="Product Designer",
            year="2016 - Present",
            image_left=True,
            height=698,
        ),
    ]


class AboutContent(BaseModel):
    experience_heading: str = "Experience"
    experience: list[InfoRow] = Field(default_factory=lambda: [
        InfoRow(label="2016 - Present", value="Docler Holding Luxembourg"),
        InfoRow(label="2013 - 2016", value="Commercial Carpatica Bank, Sibiu, Romania"),
        InfoRow(label="2010 - 2013", value="Commercial Carpatica Bank, Sibiu, Romania"),
        InfoRow(label="2006 - 2010", value="Freelancer"),
    ])
    languages_heading: str = "Languages"
    languages: list[InfoRow] = Field(default_factory=lambda: [
        InfoRow(label="English", value="Fluent"),
        InfoRow(label="Italian", value="Intermediate"),
        InfoRow(label="Romanian", value="Native"),
    ])
    skills_heading: str = "Skills"
    skills: str = (
        "Photoshop, Sketch, Illustrator, Lightroom.\n"
        "Invision and a good understanding of front end development."
    )
    linkedin_label: str = "View LinkedIn"


class PageContent(BaseModel):
    """Everything the assembler needs besides the design system."""

    title: str = "Portfolio – Catalin Sandru"
    hero: HeroContent = Field(default_factory=HeroContent)
    contact: ContactInfo = Field(default_factory=ContactInfo)
    projects_heading: str = "Selected Projects"
    projects: list[ProjectEntry] = Field(default_factory=_default_projects)
    about: AboutContent = Field(default_factory=AboutContent)

    @classmethod
    def load(cls, path: Path) -> "PageContent":
        """Load from a YAML file; keys left out keep their defaults."""
        import yaml
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path) -> "PageContent":
        if path.exists():
            return cls.load(path)
        return cls()
