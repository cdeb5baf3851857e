"""
Resume Record Structure

Defines the structured résumé record shared by the Rendering and Targeting
contexts. Records are plain value objects: callers build them (or load them via
the serializer) and the contexts consume them read-only.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from atscribe.utils.token_processing import KeywordExtractor


class LanguageProficiency(Enum):
    """Spoken language proficiency levels."""

    ELEMENTARY = "Elementary"
    LIMITED = "Limited"
    PROFESSIONAL = "Professional"
    FULL_PROFESSIONAL = "FullProfessional"
    NATIVE = "Native"

    @property
    def label(self) -> str:
        """Human-readable label (e.g. 'Full Professional')."""
        return "Full Professional" if self is LanguageProficiency.FULL_PROFESSIONAL else self.value


@dataclass
class Location:
    """
    Postal location. Empty strings mean the part is absent.

    Only city and country are used when rendering.
    """

    address: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    postal_code: str = ""

    def display(self) -> str:
        """
        Compose "city, country", falling back to whichever part is present.

        Returns:
            Composed location, or "" when neither part is present
        """
        return ", ".join(part for part in (self.city, self.country) if part)


@dataclass
class Profile:
    """
    Personal details and headline. Empty strings mean the field is absent.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    location: Location = field(default_factory=Location)
    website: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""
    title: str = ""
    additional_links: Dict[str, str] = field(default_factory=dict)


@dataclass
class Experience:
    company: str
    title: str
    description: str = ""
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    achievements: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)


@dataclass
class Education:
    institution: str
    degree: str
    field_of_study: str = ""
    description: str = ""
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    gpa: Optional[float] = None
    courses: List[str] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)


@dataclass
class Project:
    name: str
    description: str = ""
    url: Optional[str] = None
    github: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    highlights: List[str] = field(default_factory=list)


@dataclass
class Skill:
    name: str
    level: Optional[str] = None
    years: Optional[int] = None


@dataclass
class Skills:
    """Skills partitioned into categories, each an ordered list."""

    technical: List[Skill] = field(default_factory=list)
    soft: List[Skill] = field(default_factory=list)
    languages: List[Skill] = field(default_factory=list)
    tools: List[Skill] = field(default_factory=list)
    other: List[Skill] = field(default_factory=list)


@dataclass
class Certification:
    name: str
    issuer: str = ""
    date_obtained: Optional[date] = None
    expiry_date: Optional[date] = None
    credential_id: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Language:
    name: str
    proficiency: LanguageProficiency = LanguageProficiency.PROFESSIONAL


@dataclass
class Publication:
    title: str
    publisher: str = ""
    published_date: Optional[date] = None
    authors: List[str] = field(default_factory=list)
    url: Optional[str] = None
    description: str = ""


@dataclass
class Volunteer:
    organization: str
    role: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    description: str = ""
    location: Optional[str] = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ResumeMetadata:
    last_updated: datetime = field(default_factory=_utc_now)
    version: str = "1.0.0"
    template: str = "default"
    custom_fields: Dict[str, str] = field(default_factory=dict)


@dataclass
class Resume:
    """
    Complete résumé record.

    Attributes:
        profile: Personal details, contact information and summary
        experiences: Work history, most relevant first
        education: Degrees and programs
        skills: Categorized skills
        projects: Personal or professional projects
        certifications: Professional certifications
        languages: Spoken languages with proficiency
        publications: Papers, articles and books
        volunteer: Volunteer roles
        metadata: Bookkeeping (version, template, last update)
    """

    profile: Profile
    experiences: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    publications: List[Publication] = field(default_factory=list)
    volunteer: List[Volunteer] = field(default_factory=list)
    metadata: ResumeMetadata = field(default_factory=ResumeMetadata)

    @classmethod
    def new(cls, profile: Profile) -> "Resume":
        """Create a résumé with empty sections and default metadata."""
        return cls(profile=profile)

    def keyword_text(self) -> str:
        """
        Aggregate the free text searched for keywords.

        Covers profile summary/title/name, experience titles, descriptions,
        achievements and technologies, education degrees, fields, descriptions
        and courses, technical/soft/language/tool skill names, and project
        names, descriptions and technologies. Fields are joined with spaces so
        words from adjacent fields never merge.
        """
        parts: List[str] = [self.profile.summary, self.profile.title, self.profile.name]

        for experience in self.experiences:
            parts.extend([experience.title, experience.description])
            parts.extend(experience.achievements)
            parts.extend(experience.technologies)

        for education in self.education:
            parts.extend([education.degree, education.field_of_study, education.description])
            parts.extend(education.courses)

        for category in (
            self.skills.technical,
            self.skills.soft,
            self.skills.languages,
            self.skills.tools,
        ):
            parts.extend(skill.name for skill in category)

        for project in self.projects:
            parts.extend([project.name, project.description])
            parts.extend(project.technologies)

        return " ".join(part for part in parts if part)

    def count_keywords(self, extractor: Optional[KeywordExtractor] = None) -> Dict[str, int]:
        """
        Count normalized keywords across the résumé's free text.

        Args:
            extractor: Keyword extractor to use (default: bundled vocabulary)

        Returns:
            Dict mapping normalized keyword -> occurrence count
        """
        extractor = extractor or KeywordExtractor()
        return extractor.count(self.keyword_text())

    def contains_keyword(self, keyword: str, extractor: Optional[KeywordExtractor] = None) -> bool:
        """
        Check whether a keyword (or its acronym equivalent) appears in the résumé.

        Example:
            >>> resume.contains_keyword("AWS")  # matches "amazon web services" too
            True
        """
        extractor = extractor or KeywordExtractor()
        return extractor.normalize(keyword) in self.count_keywords(extractor)

    def validate(self) -> None:
        """
        Validate required fields and value ranges.

        Raises:
            ResumeValidationError: First problem found (see intake.validator)
        """
        # Import here to avoid circular dependency
        from atscribe.contexts.intake.validator import validate_resume

        validate_resume(self)
