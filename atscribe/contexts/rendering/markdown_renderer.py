"""
Markdown Renderer

Serializes a Resume into a single Markdown document with a fixed layout. This is
the source document for every derived format: PlainText and HTML are computed
from its output, never from the résumé record.

Layout:
    # Name
    ## Title
    ## Contact Information
    ## Professional Summary
    ## Work Experience / Education / Skills / Projects
    ## Certifications / Languages / Publications / Volunteer Experience

Every block after the summary can be switched off through SectionOptions.
"""

from datetime import date
from typing import List, Optional, Tuple

from atscribe.contexts.intake.resume_data_structure import (
    Certification,
    Education,
    Experience,
    Project,
    Publication,
    Resume,
    Skill,
    Volunteer,
)
from atscribe.contexts.rendering.logger import _log_debug
from atscribe.contexts.rendering.options import FormattingOptions, ResumeSection

PRESENT_LABEL = "Present"

NO_EXPERIENCE_WARNING = "Resume doesn't have any work experiences"
NO_EDUCATION_WARNING = "Resume doesn't have any education entries"
NO_TECHNICAL_SKILLS_WARNING = "Resume doesn't have any technical skills"


def _skill_names(skills: List[Skill]) -> str:
    return ", ".join(skill.name for skill in skills)


def _bullets(items: List[str]) -> str:
    return "".join(f"- {item}\n" for item in items)


class MarkdownRenderer:
    """
    Renders résumés to Markdown.

    The renderer holds only its options, so one instance can render any number
    of résumés, including concurrently.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()

    def render(self, resume: Resume) -> Tuple[str, List[str]]:
        """
        Render a résumé as Markdown.

        Args:
            resume: Résumé record (not modified)

        Returns:
            Tuple of (markdown, warnings). Warnings flag missing content and
            never change the markdown.
        """
        sections = self.options.sections
        parts: List[str] = [self._render_header(resume)]

        if self.options.include_contact_info:
            parts.append(self._render_contact(resume))

        if resume.profile.summary:
            parts.append(f"## Professional Summary\n\n{resume.profile.summary}\n\n")

        if sections.includes(ResumeSection.EXPERIENCES) and resume.experiences:
            parts.append("## Work Experience\n\n")
            parts.extend(self._render_experience(item) for item in resume.experiences)

        if sections.includes(ResumeSection.EDUCATION) and resume.education:
            parts.append("## Education\n\n")
            parts.extend(self._render_education(item) for item in resume.education)

        if sections.includes(ResumeSection.SKILLS):
            parts.append(self._render_skills(resume))

        if sections.includes(ResumeSection.PROJECTS) and resume.projects:
            parts.append("## Projects\n\n")
            parts.extend(self._render_project(item) for item in resume.projects)

        if sections.includes(ResumeSection.CERTIFICATIONS) and resume.certifications:
            parts.append("## Certifications\n\n")
            parts.extend(self._render_certification(item) for item in resume.certifications)

        if sections.includes(ResumeSection.LANGUAGES) and resume.languages:
            parts.append("## Languages\n\n")
            parts.append(
                _bullets([f"{lang.name} ({lang.proficiency.label})" for lang in resume.languages])
            )
            parts.append("\n")

        if sections.includes(ResumeSection.PUBLICATIONS) and resume.publications:
            parts.append("## Publications\n\n")
            parts.extend(self._render_publication(item) for item in resume.publications)

        if sections.includes(ResumeSection.VOLUNTEER) and resume.volunteer:
            parts.append("## Volunteer Experience\n\n")
            parts.extend(self._render_volunteer(item) for item in resume.volunteer)

        warnings = self._collect_warnings(resume)
        content = "".join(parts)

        _log_debug(f"Rendered markdown: {len(content)} characters, {len(warnings)} warnings")
        return content, warnings

    # -------------------------------------------------------------------------
    # Dates
    # -------------------------------------------------------------------------

    def format_date(self, value: Optional[date]) -> str:
        return value.strftime(self.options.date_format) if value else ""

    def format_date_range(
        self, start: Optional[date], end: Optional[date], current: bool = False
    ) -> str:
        """
        Format a start/end pair with the configured date format.

        Current entries always end in "Present", whatever the end date.

        Examples:
            >>> renderer.format_date_range(date(2020, 1, 1), date(2021, 12, 1))
            'January 2020 - December 2021'
            >>> renderer.format_date_range(date(2019, 3, 1), None, current=True)
            'March 2019 - Present'
            >>> renderer.format_date_range(date(2019, 3, 1), None)
            'From March 2019'
            >>> renderer.format_date_range(None, date(2021, 12, 1))
            'Until December 2021'
        """
        start_str = self.format_date(start)
        end_str = PRESENT_LABEL if current else self.format_date(end)

        if start_str and end_str:
            return f"{start_str} - {end_str}"
        if start_str:
            return f"From {start_str}"
        if end_str:
            return f"Until {end_str}"
        return ""

    def _render_dates_line(self, start, end, current: bool) -> str:
        date_range = self.format_date_range(start, end, current)
        return f"_{date_range}_\n" if date_range else ""

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def _render_header(self, resume: Resume) -> str:
        header = f"# {resume.profile.name}\n"
        if resume.profile.title:
            header += f"## {resume.profile.title}\n\n"
        return header

    def _render_contact(self, resume: Resume) -> str:
        profile = resume.profile
        fields = [
            ("Email", profile.email),
            ("Phone", profile.phone),
            ("Location", profile.location.display()),
            ("LinkedIn", profile.linkedin),
            ("GitHub", profile.github),
            ("Website", profile.website),
        ]

        lines = ["## Contact Information\n\n"]
        lines.extend(f"- {label}: {value}\n" for label, value in fields if value)
        lines.append("\n")
        return "".join(lines)

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def _render_experience(self, experience: Experience) -> str:
        parts = [
            f"### {experience.title} at {experience.company}\n",
            self._render_dates_line(
                experience.start_date, experience.end_date, experience.current
            ),
            "\n",
        ]

        if experience.location:
            parts.append(f"**Location:** {experience.location}\n\n")

        if experience.description:
            parts.append(f"{experience.description}\n\n")

        if experience.achievements:
            parts.append("**Key Achievements:**\n\n")
            parts.append(_bullets(experience.achievements))
            parts.append("\n")

        if experience.technologies:
            parts.append(f"**Technologies:** {', '.join(experience.technologies)}\n\n")

        return "".join(parts)

    def _render_education(self, education: Education) -> str:
        heading = education.degree
        if education.field_of_study:
            heading = f"{heading} in {education.field_of_study}"

        parts = [
            f"### {heading}\n",
            f"**{education.institution}**\n",
            self._render_dates_line(education.start_date, education.end_date, education.current),
            "\n",
        ]

        if education.gpa is not None:
            parts.append(f"**GPA:** {education.gpa:.2f}\n\n")

        if education.description:
            parts.append(f"{education.description}\n\n")

        if education.courses:
            parts.append("**Relevant Courses:**\n\n")
            parts.append(_bullets(education.courses))
            parts.append("\n")

        if education.achievements:
            parts.append("**Achievements:**\n\n")
            parts.append(_bullets(education.achievements))
            parts.append("\n")

        return "".join(parts)

    def _render_skills(self, resume: Resume) -> str:
        skills = resume.skills
        parts = ["## Skills\n\n"]

        # Comma-joined categories, in display order
        for heading, category in (
            ("Technical Skills", skills.technical),
            ("Soft Skills", skills.soft),
            ("Tools", skills.tools),
        ):
            if category:
                parts.append(f"### {heading}\n\n{_skill_names(category)}\n\n")

        if skills.languages:
            parts.append("### Languages\n\n")
            parts.append(_bullets([skill.name for skill in skills.languages]))
            parts.append("\n")

        if skills.other:
            parts.append(f"### Other Skills\n\n{_skill_names(skills.other)}\n\n")

        return "".join(parts)

    def _render_project(self, project: Project) -> str:
        parts = [f"### {project.name}\n\n"]

        dates = self._render_dates_line(project.start_date, project.end_date, project.current)
        if dates:
            parts.append(f"{dates}\n")

        if project.description:
            parts.append(f"{project.description}\n\n")

        if project.url:
            parts.append(f"**Link:** [Project Link]({project.url})\n\n")

        if project.github:
            parts.append(f"**GitHub:** [Repository]({project.github})\n\n")

        if project.technologies:
            parts.append(f"**Technologies:** {', '.join(project.technologies)}\n\n")

        if project.highlights:
            parts.append("**Highlights:**\n\n")
            parts.append(_bullets(project.highlights))
            parts.append("\n")

        return "".join(parts)

    def _render_certification(self, certification: Certification) -> str:
        parts = [f"### {certification.name}\n"]

        if certification.issuer:
            parts.append(f"**{certification.issuer}**\n")

        issued = self.format_date(certification.date_obtained)
        expires = self.format_date(certification.expiry_date)
        if issued and expires:
            parts.append(f"_Issued {issued}, expires {expires}_\n")
        elif issued:
            parts.append(f"_Issued {issued}_\n")
        elif expires:
            parts.append(f"_Expires {expires}_\n")
        parts.append("\n")

        if certification.credential_id:
            parts.append(f"**Credential ID:** {certification.credential_id}\n\n")

        if certification.url:
            parts.append(f"**Link:** [Credential]({certification.url})\n\n")

        return "".join(parts)

    def _render_publication(self, publication: Publication) -> str:
        parts = [f"### {publication.title}\n"]

        if publication.publisher:
            parts.append(f"**{publication.publisher}**\n")

        published = self.format_date(publication.published_date)
        if published:
            parts.append(f"_{published}_\n")
        parts.append("\n")

        if publication.authors:
            parts.append(f"**Authors:** {', '.join(publication.authors)}\n\n")

        if publication.description:
            parts.append(f"{publication.description}\n\n")

        if publication.url:
            parts.append(f"**Link:** [Publication]({publication.url})\n\n")

        return "".join(parts)

    def _render_volunteer(self, volunteer: Volunteer) -> str:
        parts = [
            f"### {volunteer.role} at {volunteer.organization}\n",
            self._render_dates_line(volunteer.start_date, volunteer.end_date, volunteer.current),
            "\n",
        ]

        if volunteer.location:
            parts.append(f"**Location:** {volunteer.location}\n\n")

        if volunteer.description:
            parts.append(f"{volunteer.description}\n\n")

        return "".join(parts)

    # -------------------------------------------------------------------------
    # Warnings
    # -------------------------------------------------------------------------

    def _collect_warnings(self, resume: Resume) -> List[str]:
        warnings = []

        if not resume.experiences:
            warnings.append(NO_EXPERIENCE_WARNING)

        if not resume.education:
            warnings.append(NO_EDUCATION_WARNING)

        if not resume.skills.technical:
            warnings.append(NO_TECHNICAL_SKILLS_WARNING)

        return warnings
