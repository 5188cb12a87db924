"""
PDF Layout Engine

Maps the resume record onto an ordered list of drawing instructions: rows of
12-unit grid columns holding styled text runs and decorative rules. The instructions
carry no page positions; the backend flows them onto pages.

Layout is deterministic: the same record always yields the same rows.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from vitae.contexts.rendering import styling as st
from vitae.contexts.templating.resume_data_structure import (
    Education,
    Experience,
    Language,
    Project,
    ResumeData,
    SkillCategory,
)
from vitae.utils.text_processing import group_items, indent_continuation_lines, wrap_text_to_width

TEXT_STYLES = ("normal", "bold", "italic", "bold_italic")
ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class TextRun:
    """
    A block of text with uniform styling.

    Attributes:
        text: Content; newlines force line breaks, runs of spaces are kept
        size: Font size in points
        style: One of TEXT_STYLES
        color: Hex color string
        align: One of ALIGNMENTS
        top: Padding above the text in millimetres
    """

    text: str
    size: float = st.FONT_SIZE_NORMAL
    style: str = "normal"
    color: str = st.PRIMARY_COLOR
    align: str = "left"
    top: float = 0.0

    def __post_init__(self):
        if self.style not in TEXT_STYLES:
            raise ValueError(f"Unknown text style: {self.style!r}")
        if self.align not in ALIGNMENTS:
            raise ValueError(f"Unknown alignment: {self.align!r}")


@dataclass(frozen=True)
class Rule:
    """
    A horizontal decorative line.

    Attributes:
        length: Fraction of the column width (0 < length <= 1)
        color: Hex color string
        thickness: Line thickness in points
    """

    length: float = 1.0
    color: str = st.HEADER_COLOR
    thickness: float = st.RULE_THICKNESS


LayoutItem = Union[TextRun, Rule]


@dataclass
class Column:
    """A grid column spanning `span` of the row's 12 units."""

    span: int
    items: List[LayoutItem] = field(default_factory=list)


@dataclass
class Row:
    """
    A horizontal band of the document.

    A row without columns is vertical spacing.

    Attributes:
        height: Minimum height in millimetres
        columns: Columns laid out left to right
    """

    height: float
    columns: List[Column] = field(default_factory=list)

    def __post_init__(self):
        total = sum(col.span for col in self.columns)
        if total > st.GRID_COLUMNS:
            raise ValueError(f"Row spans {total} grid units, maximum is {st.GRID_COLUMNS}")

    @property
    def is_spacer(self) -> bool:
        return not self.columns

    def texts(self) -> List[str]:
        return [item.text for col in self.columns for item in col.items if isinstance(item, TextRun)]


def layout_texts(rows: List[Row]) -> List[str]:
    """All text runs of a layout, in document order."""
    return [text for row in rows for text in row.texts()]


class ResumeLayoutBuilder:
    """
    Accumulates rows for one resume document.

    A builder is single-use and owned by one request; nothing is shared between
    builders apart from the read-only resume record.
    """

    def __init__(self):
        self.rows: List[Row] = []

    # Primitive row helpers

    def spacer(self, height: float) -> None:
        self.rows.append(Row(height))

    def full_row(self, height: float, *items: LayoutItem) -> None:
        self.rows.append(Row(height, [Column(st.GRID_COLUMNS, list(items))]))

    def split_row(self, height: float, left: TextRun, right: TextRun, left_span: int = 8) -> None:
        self.rows.append(
            Row(
                height,
                [Column(left_span, [left]), Column(st.GRID_COLUMNS - left_span, [right])],
            )
        )

    # Sections

    def add_header(self, resume: ResumeData) -> None:
        personal = resume.personal
        self.full_row(
            16,
            TextRun(
                personal.name,
                size=st.FONT_SIZE_NAME,
                style="bold",
                align="center",
                color=st.HEADER_COLOR,
            ),
        )
        if personal.title:
            self.full_row(
                8,
                TextRun(
                    personal.title,
                    size=st.FONT_SIZE_SUBTITLE,
                    align="center",
                    color=st.HEADER_COLOR,
                ),
            )
        if personal.summary:
            self.spacer(3)
            self.full_row(
                6,
                TextRun(
                    wrap_text_to_width(personal.summary, st.SUMMARY_WRAP_WIDTH),
                    align="center",
                    color=st.PRIMARY_COLOR,
                ),
            )
        self.spacer(2)

    def add_section_title(self, title: str, subtitle: Optional[str] = None) -> None:
        self.spacer(8)
        self.full_row(
            10,
            TextRun(
                title,
                size=st.FONT_SIZE_HEADING,
                style="bold",
                color=st.HEADER_COLOR,
                top=2,
            ),
        )
        self.full_row(2, Rule(length=st.SECTION_RULE_LENGTH))
        self.spacer(2)
        if subtitle:
            self.full_row(6, TextRun(subtitle, style="italic", color=st.ACCENT_COLOR, top=1))
            self.spacer(5)

    def add_contact(self, resume: ResumeData) -> None:
        contact = resume.contact_items()
        if not contact:
            return

        self.add_section_title("Contact Information")
        for label, value in contact:
            self.rows.append(
                Row(
                    7,
                    [
                        Column(3, [TextRun(label, style="bold", color=st.HEADER_COLOR)]),
                        Column(9, [TextRun(value, color=st.PRIMARY_COLOR)]),
                    ],
                )
            )

    def add_experience_item(self, exp: Experience) -> None:
        self.spacer(3)
        self.split_row(
            10,
            TextRun(
                exp.position,
                size=st.FONT_SIZE_SUBHEADING,
                style="bold",
                color=st.HEADER_COLOR,
                top=2,
            ),
            TextRun(exp.period, style="bold", align="right", color=st.GRAY_COLOR, top=2),
        )
        self.split_row(
            7,
            TextRun(exp.company, style="bold", color=st.PRIMARY_COLOR, top=1),
            TextRun(exp.location, style="italic", align="right", color=st.GRAY_COLOR, top=1),
        )

        if exp.employment_type:
            self.full_row(
                7,
                TextRun(
                    f"• {exp.employment_type} •",
                    style="bold",
                    color=st.HEADER_COLOR,
                    top=1,
                ),
            )

        bullets = [line for line in exp.description if line.strip()]
        if bullets:
            self.spacer(2)
        for line in bullets:
            wrapped = wrap_text_to_width(line.strip(), st.DESCRIPTION_WRAP_WIDTH)
            bullet = indent_continuation_lines(st.BULLET + wrapped, st.CONTINUATION_INDENT)
            self.full_row(6, TextRun(bullet, color=st.PRIMARY_COLOR, top=1.5))

        if exp.technologies:
            self.add_technologies(exp.technologies)

        self.spacer(4)
        self.full_row(
            3,
            TextRun(
                st.EXPERIENCE_SEPARATOR,
                size=st.FONT_SIZE_SMALL,
                align="center",
                color=st.GRAY_COLOR,
            ),
        )
        self.spacer(4)

    def add_technologies(self, technologies) -> None:
        text = "Technologies: " + ", ".join(tech.name for tech in technologies)
        wrapped = wrap_text_to_width(text, st.SKILLS_WRAP_WIDTH)
        self.full_row(
            6,
            TextRun(
                indent_continuation_lines(wrapped, st.CONTINUATION_INDENT),
                style="italic",
                color=st.GRAY_COLOR,
                top=1.5,
            ),
        )

    def add_education_item(self, edu: Education) -> None:
        self.spacer(2)
        self.split_row(
            8,
            TextRun(
                edu.degree,
                size=st.FONT_SIZE_SUBHEADING,
                style="bold",
                color=st.HEADER_COLOR,
                top=1,
            ),
            TextRun(edu.period, align="right", color=st.GRAY_COLOR, top=1),
        )
        self.split_row(
            7,
            TextRun(edu.institution, style="bold", color=st.PRIMARY_COLOR, top=1),
            TextRun(edu.location, style="italic", align="right", color=st.GRAY_COLOR, top=1),
        )
        self.full_row(
            4,
            TextRun(
                st.EDUCATION_SEPARATOR,
                size=st.FONT_SIZE_SMALL,
                align="center",
                color=st.GRAY_COLOR,
            ),
        )

    def add_skill_category(self, category: SkillCategory, first: bool) -> None:
        if not first:
            self.spacer(3)

        self.full_row(
            8,
            TextRun(
                category.category,
                size=st.FONT_SIZE_SUBHEADING,
                style="bold",
                color=st.HEADER_COLOR,
                top=1,
            ),
        )
        self.full_row(1, Rule(length=st.CATEGORY_RULE_LENGTH))
        self.spacer(2)

        formatted = [st.BULLET + item.name for item in category.items]
        for group in group_items(formatted, st.SKILL_GROUP_SIZE):
            text = wrap_text_to_width(st.SKILL_SEPARATOR.join(group), st.SKILLS_WRAP_WIDTH)
            self.full_row(6, TextRun(text, color=st.PRIMARY_COLOR, top=1))

        self.spacer(1)

    def add_language(self, lang: Language) -> None:
        text = st.BULLET + lang.language
        if lang.proficiency:
            text += f" — {lang.proficiency}"
        self.full_row(7, TextRun(text, color=st.PRIMARY_COLOR))

    def add_project(self, project: Project) -> None:
        self.spacer(2)
        self.full_row(
            8,
            TextRun(
                project.name,
                size=st.FONT_SIZE_SUBHEADING,
                style="bold",
                color=st.HEADER_COLOR,
                top=1,
            ),
        )
        if project.link:
            self.full_row(
                5,
                TextRun(project.link, size=st.FONT_SIZE_SMALL, style="italic", color=st.GRAY_COLOR),
            )
        if project.description:
            wrapped = wrap_text_to_width(project.description, st.PROJECT_WRAP_WIDTH)
            self.full_row(6, TextRun(wrapped, color=st.PRIMARY_COLOR, top=1))
        if project.technologies:
            self.add_technologies(project.technologies)
        self.full_row(
            4,
            TextRun(
                st.EDUCATION_SEPARATOR,
                size=st.FONT_SIZE_SMALL,
                align="center",
                color=st.GRAY_COLOR,
            ),
        )

    def build(self, resume: ResumeData) -> List[Row]:
        """
        Emit every section of the resume in document order.

        Order: header, contact, experience, education, skills, languages, projects.
        Sections backed by an empty list are skipped entirely.
        """
        self.add_header(resume)
        self.add_contact(resume)

        if resume.experience:
            self.add_section_title("Experience", st.SECTION_SUBTITLES["Experience"])
            for exp in resume.experience:
                self.add_experience_item(exp)

        if resume.education:
            self.add_section_title("Education", st.SECTION_SUBTITLES["Education"])
            for edu in resume.education:
                self.add_education_item(edu)

        if resume.skills:
            self.add_section_title("Skills", st.SECTION_SUBTITLES["Skills"])
            for i, category in enumerate(resume.skills):
                self.add_skill_category(category, first=i == 0)

        if resume.languages:
            self.add_section_title("Languages")
            for lang in resume.languages:
                self.add_language(lang)
            self.spacer(3)

        if resume.projects:
            self.add_section_title("Projects", st.SECTION_SUBTITLES["Projects"])
            for project in resume.projects:
                self.add_project(project)

        return self.rows


def build_layout(resume: ResumeData) -> List[Row]:
    """
    Build the drawing instructions for a resume.

    Args:
        resume: Resume record

    Returns:
        Ordered list of rows for the PDF backend
    """
    return ResumeLayoutBuilder().build(resume)
