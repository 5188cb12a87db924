"""
Resume Data Structure

Defines the in-memory representation of the resume configuration file.

The structure is built once at startup by the loader and never mutated afterwards,
so a single instance can be shared by every request handler. All dataclasses are
frozen and all collections are tuples.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


def format_period(start: str, end: str) -> str:
    """Join two opaque date strings into a display range, dropping an empty side."""
    if start and end:
        return f"{start} - {end}"
    return start or end


@dataclass(frozen=True)
class LinkedItem:
    """
    A named entry with an optional URL (skills, technologies).

    Attributes:
        name: Display name
        link: Optional URL ("" when absent)
    """

    name: str
    link: str = ""


@dataclass(frozen=True)
class Personal:
    """
    Personal and contact details shown in the page header.

    Attributes:
        name: Full name
        title: Professional title / headline
        email: Email address
        phone: Phone number (display string)
        location: City, country, etc.
        linkedin: LinkedIn profile URL or handle
        github: GitHub profile URL or handle
        summary: Short professional summary
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""


@dataclass(frozen=True)
class SkillCategory:
    category: str
    items: Tuple[LinkedItem, ...] = ()


@dataclass(frozen=True)
class Experience:
    """
    One position in the work history.

    Attributes:
        company: Employer name
        position: Job title
        location: Where the job was based
        start_date: Opaque display string (e.g., "Jan 2021")
        end_date: Opaque display string (e.g., "Present")
        description: Bullet points, in order
        employment_type: e.g., "Full-time", "Contract" ("" when absent)
        technologies: Technologies used, in order
    """

    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: Tuple[str, ...] = ()
    employment_type: str = ""
    technologies: Tuple[LinkedItem, ...] = ()

    @property
    def period(self) -> str:
        return format_period(self.start_date, self.end_date)


@dataclass(frozen=True)
class Education:
    institution: str = ""
    degree: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""

    @property
    def period(self) -> str:
        return format_period(self.start_date, self.end_date)


@dataclass(frozen=True)
class Project:
    name: str = ""
    description: str = ""
    technologies: Tuple[LinkedItem, ...] = ()
    link: str = ""


@dataclass(frozen=True)
class Language:
    language: str = ""
    proficiency: str = ""


# Contact fields in display order: (attribute, label)
CONTACT_FIELDS = (
    ("email", "Email:"),
    ("phone", "Phone:"),
    ("location", "Location:"),
    ("linkedin", "LinkedIn:"),
    ("github", "GitHub:"),
)


@dataclass(frozen=True)
class ResumeData:
    """
    Complete resume record.

    Every list-backed section may be empty; renderers omit empty sections.

    Attributes:
        personal: Header and contact details
        skills: Skill categories, in order
        experience: Work history, in order
        education: Education history, in order
        projects: Projects, in order
        languages: Spoken languages, in order
    """

    personal: Personal = field(default_factory=Personal)
    skills: Tuple[SkillCategory, ...] = ()
    experience: Tuple[Experience, ...] = ()
    education: Tuple[Education, ...] = ()
    projects: Tuple[Project, ...] = ()
    languages: Tuple[Language, ...] = ()

    def contact_items(self) -> List[Tuple[str, str]]:
        """Ordered (label, value) pairs for the non-empty contact fields."""
        return [
            (label, getattr(self.personal, attr))
            for attr, label in CONTACT_FIELDS
            if getattr(self.personal, attr)
        ]

    def section_counts(self) -> Dict[str, int]:
        """Number of entries in each list-backed section."""
        return {
            "experience": len(self.experience),
            "education": len(self.education),
            "skills": len(self.skills),
            "languages": len(self.languages),
            "projects": len(self.projects),
        }
