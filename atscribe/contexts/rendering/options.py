"""
Formatting options.

Output formats, the closed set of optional résumé sections, and the
options record consumed by the renderer.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, Iterable


class OutputFormat(Enum):
    """Document formats a résumé can be rendered to."""

    MARKDOWN = "markdown"
    PLAINTEXT = "plaintext"
    JSON = "json"
    HTML = "html"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        """File extension (without dot) for this format."""
        return _EXTENSIONS[self]


_EXTENSIONS = {
    OutputFormat.MARKDOWN: "md",
    OutputFormat.PLAINTEXT: "txt",
    OutputFormat.JSON: "json",
    OutputFormat.HTML: "html",
    OutputFormat.PDF: "pdf",
}


class ResumeSection(Enum):
    """Sections whose rendering can be switched off."""

    EXPERIENCES = "experiences"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    LANGUAGES = "languages"
    PUBLICATIONS = "publications"
    VOLUNTEER = "volunteer"


@dataclass(frozen=True)
class SectionOptions:
    """
    Per-section inclusion switches. Every section is included by default.

    Field names match ResumeSection values, so a section can be looked up
    either by attribute or through includes().
    """

    experiences: bool = True
    education: bool = True
    skills: bool = True
    projects: bool = True
    certifications: bool = True
    languages: bool = True
    publications: bool = True
    volunteer: bool = True

    def includes(self, section: ResumeSection) -> bool:
        return getattr(self, section.value)

    @classmethod
    def excluding(cls, sections: Iterable[ResumeSection]) -> "SectionOptions":
        """
        Build options with the given sections switched off.

        Example:
            >>> SectionOptions.excluding([ResumeSection.PROJECTS]).projects
            False
        """
        return cls(**{section.value: False for section in sections})

    def excluded(self) -> list:
        """Sections currently switched off, in declaration order."""
        return [ResumeSection(f.name) for f in fields(self) if not getattr(self, f.name)]


@dataclass
class FormattingOptions:
    """
    Rendering configuration.

    Attributes:
        template: Name of a registered template
        include_contact_info: Emit the Contact Information block
        include_picture: Reserved; not used by the Markdown layout
        date_format: strftime pattern for date ranges
        sections: Per-section inclusion switches
        custom_options: Free-form settings reserved for custom templates
    """

    template: str = "modern"
    include_contact_info: bool = True
    include_picture: bool = False
    date_format: str = "%B %Y"
    sections: SectionOptions = field(default_factory=SectionOptions)
    custom_options: Dict[str, str] = field(default_factory=dict)
