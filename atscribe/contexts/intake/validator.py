"""
Résumé record validation.

Presence and range checks on a Resume. validate_resume() raises the first
problem found; collect_validation_errors() returns all of them, in the same
order, for reporting.
"""

from datetime import date
from typing import Iterator, List, Optional

from atscribe.contexts.intake.exceptions import (
    DateRangeError,
    GPARangeError,
    MissingTechnicalSkillsError,
    ResumeValidationError,
)
from atscribe.contexts.intake.resume_data_structure import Resume

GPA_MIN = 0.0
GPA_MAX = 4.0
SECURE_URL_PREFIX = "https://"


def _dates_reversed(start: Optional[date], end: Optional[date]) -> bool:
    return start is not None and end is not None and end < start


def _iter_validation_errors(resume: Resume) -> Iterator[ResumeValidationError]:
    profile = resume.profile

    if not profile.name:
        yield ResumeValidationError("Name is required", field="profile.name")
    if not profile.email:
        yield ResumeValidationError("Email is required", field="profile.email")
    elif "@" not in profile.email:
        yield ResumeValidationError("Invalid email format", field="profile.email")

    for index, experience in enumerate(resume.experiences):
        if _dates_reversed(experience.start_date, experience.end_date):
            yield DateRangeError("experience", experience.company, field=f"experiences[{index}]")

    for index, education in enumerate(resume.education):
        if _dates_reversed(education.start_date, education.end_date):
            yield DateRangeError("education", education.institution, field=f"education[{index}]")
        if education.gpa is not None and not GPA_MIN <= education.gpa <= GPA_MAX:
            yield GPARangeError(
                education.institution, education.gpa, field=f"education[{index}].gpa"
            )

    for index, project in enumerate(resume.projects):
        if _dates_reversed(project.start_date, project.end_date):
            yield DateRangeError("project", project.name, field=f"projects[{index}]")

    if profile.linkedin and not profile.linkedin.startswith(SECURE_URL_PREFIX):
        yield ResumeValidationError(
            "LinkedIn URL must start with https://", field="profile.linkedin"
        )
    if profile.github and not profile.github.startswith(SECURE_URL_PREFIX):
        yield ResumeValidationError("GitHub URL must start with https://", field="profile.github")

    if not resume.skills.technical:
        yield MissingTechnicalSkillsError()


def validate_resume(resume: Resume) -> None:
    """
    Validate a résumé, raising on the first problem.

    Checks, in order: name, email presence and format, experience date ranges,
    education date ranges and GPA, project date ranges, LinkedIn/GitHub URL
    scheme, and presence of at least one technical skill.

    Args:
        resume: Résumé to validate

    Raises:
        ResumeValidationError: Profile field problems
        DateRangeError: End date before start date (names the entry)
        GPARangeError: GPA outside [0.0, 4.0]
        MissingTechnicalSkillsError: No technical skills
    """
    for error in _iter_validation_errors(resume):
        raise error


def collect_validation_errors(resume: Resume) -> List[ResumeValidationError]:
    """
    Run every validation check and return all failures.

    Args:
        resume: Résumé to validate

    Returns:
        List of validation errors (empty if the résumé is valid)
    """
    return list(_iter_validation_errors(resume))
