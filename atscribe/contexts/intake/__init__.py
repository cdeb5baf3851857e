"""
Intake Context

Responsibilities:
- Defines the structured résumé record consumed by the other contexts
- Loads and saves résumés as JSON or YAML
- Validates required fields and value ranges
- Loads and normalizes job descriptions

Owns: Résumé data model, (de)serialization, validation, job description ingestion
Never: Renders documents or scores keyword coverage
"""

from atscribe.contexts.intake.exceptions import (
    DateRangeError,
    GPARangeError,
    MissingTechnicalSkillsError,
    ResumeValidationError,
    SerializationError,
)
from atscribe.contexts.intake.job_description import load_job_description
from atscribe.contexts.intake.resume_data_structure import (
    Certification,
    Education,
    Experience,
    Language,
    LanguageProficiency,
    Location,
    Profile,
    Project,
    Publication,
    Resume,
    ResumeMetadata,
    Skill,
    Skills,
    Volunteer,
)
from atscribe.contexts.intake.serializer import (
    load_resume,
    resume_from_dict,
    resume_from_json,
    resume_to_dict,
    resume_to_json,
    save_resume,
)
from atscribe.contexts.intake.validator import collect_validation_errors, validate_resume

__all__ = [
    # Data structure classes
    "Resume",
    "Profile",
    "Location",
    "Experience",
    "Education",
    "Project",
    "Skill",
    "Skills",
    "Certification",
    "Language",
    "LanguageProficiency",
    "Publication",
    "Volunteer",
    "ResumeMetadata",
    # Serialization
    "load_resume",
    "save_resume",
    "resume_to_dict",
    "resume_from_dict",
    "resume_to_json",
    "resume_from_json",
    # Validation
    "validate_resume",
    "collect_validation_errors",
    # Job descriptions
    "load_job_description",
    # Exceptions
    "ResumeValidationError",
    "DateRangeError",
    "GPARangeError",
    "MissingTechnicalSkillsError",
    "SerializationError",
]
