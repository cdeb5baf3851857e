"""
Résumé (de)serialization.

Converts Resume records to and from plain dicts, pretty-printed JSON and YAML
files. Field names are preserved as-is; dates and timestamps are written as
ISO 8601 strings and enums by value, so a record survives a round trip
unchanged.
"""

import json
from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from omegaconf import OmegaConf

from atscribe.contexts.intake.exceptions import SerializationError
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

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def _to_plain(value: Any) -> Any:
    """Recursively convert dates, datetimes and enums to JSON-friendly values."""
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    # datetime is a subclass of date, so both are handled here
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _parse_proficiency(value: Any) -> LanguageProficiency:
    if isinstance(value, LanguageProficiency):
        return value
    try:
        return LanguageProficiency(value)
    except ValueError:
        # Also accept member names ("FULL_PROFESSIONAL") and labels ("Full Professional")
        key = str(value).replace(" ", "").replace("_", "").lower()
        for member in LanguageProficiency:
            if member.value.lower() == key:
                return member
        raise


def _strings(data: Dict[str, Any], key: str) -> list:
    return [str(item) for item in data.get(key) or []]


def _skill(data: Dict[str, Any]) -> Skill:
    years = data.get("years")
    return Skill(
        name=data["name"],
        level=data.get("level"),
        years=int(years) if years is not None else None,
    )


def _skills(data: Dict[str, Any]) -> Skills:
    return Skills(
        **{
            category: [_skill(item) for item in data.get(category) or []]
            for category in ("technical", "soft", "languages", "tools", "other")
        }
    )


def _profile(data: Dict[str, Any]) -> Profile:
    location = data.get("location") or {}
    # Older records store location as a single string
    if isinstance(location, str):
        location = {"city": location}

    return Profile(
        name=data.get("name", ""),
        email=data.get("email", ""),
        phone=data.get("phone", ""),
        location=Location(**location),
        website=data.get("website", ""),
        linkedin=data.get("linkedin", ""),
        github=data.get("github", ""),
        summary=data.get("summary", ""),
        title=data.get("title", ""),
        additional_links=dict(data.get("additional_links") or {}),
    )


def _experience(data: Dict[str, Any]) -> Experience:
    return Experience(
        company=data["company"],
        title=data["title"],
        description=data.get("description", ""),
        location=data.get("location"),
        start_date=_parse_date(data.get("start_date")),
        end_date=_parse_date(data.get("end_date")),
        current=bool(data.get("current", False)),
        achievements=_strings(data, "achievements"),
        technologies=_strings(data, "technologies"),
    )


def _education(data: Dict[str, Any]) -> Education:
    gpa = data.get("gpa")
    return Education(
        institution=data["institution"],
        degree=data["degree"],
        field_of_study=data.get("field_of_study", ""),
        description=data.get("description", ""),
        location=data.get("location"),
        start_date=_parse_date(data.get("start_date")),
        end_date=_parse_date(data.get("end_date")),
        current=bool(data.get("current", False)),
        gpa=float(gpa) if gpa is not None else None,
        courses=_strings(data, "courses"),
        achievements=_strings(data, "achievements"),
    )


def _project(data: Dict[str, Any]) -> Project:
    return Project(
        name=data["name"],
        description=data.get("description", ""),
        url=data.get("url"),
        github=data.get("github"),
        technologies=_strings(data, "technologies"),
        start_date=_parse_date(data.get("start_date")),
        end_date=_parse_date(data.get("end_date")),
        current=bool(data.get("current", False)),
        highlights=_strings(data, "highlights"),
    )


def _certification(data: Dict[str, Any]) -> Certification:
    return Certification(
        name=data["name"],
        issuer=data.get("issuer", ""),
        date_obtained=_parse_date(data.get("date_obtained")),
        expiry_date=_parse_date(data.get("expiry_date")),
        credential_id=data.get("credential_id"),
        url=data.get("url"),
    )


def _language(data: Dict[str, Any]) -> Language:
    proficiency = data.get("proficiency")
    if proficiency is None:
        return Language(name=data["name"])
    return Language(name=data["name"], proficiency=_parse_proficiency(proficiency))


def _publication(data: Dict[str, Any]) -> Publication:
    return Publication(
        title=data["title"],
        publisher=data.get("publisher", ""),
        published_date=_parse_date(data.get("published_date")),
        authors=_strings(data, "authors"),
        url=data.get("url"),
        description=data.get("description", ""),
    )


def _volunteer(data: Dict[str, Any]) -> Volunteer:
    return Volunteer(
        organization=data["organization"],
        role=data["role"],
        start_date=_parse_date(data.get("start_date")),
        end_date=_parse_date(data.get("end_date")),
        current=bool(data.get("current", False)),
        description=data.get("description", ""),
        location=data.get("location"),
    )


def _metadata(data: Dict[str, Any]) -> ResumeMetadata:
    metadata = ResumeMetadata(
        version=data.get("version", "1.0.0"),
        template=data.get("template", "default"),
        custom_fields=dict(data.get("custom_fields") or {}),
    )
    if data.get("last_updated"):
        metadata.last_updated = _parse_datetime(data["last_updated"])
    return metadata


def resume_to_dict(resume: Resume) -> Dict[str, Any]:
    """
    Convert a résumé to a plain dict of JSON-compatible values.

    Args:
        resume: Résumé record

    Returns:
        Nested dict with the dataclass field names as keys
    """
    return _to_plain(asdict(resume))


def resume_from_dict(data: Dict[str, Any]) -> Resume:
    """
    Build a résumé from a plain dict (as produced by resume_to_dict).

    Missing optional sections default to empty; missing metadata defaults to
    version 1.0.0 stamped with the current time.

    Args:
        data: Nested dict

    Returns:
        Resume record

    Raises:
        SerializationError: If required fields are missing or values are malformed
    """
    if not isinstance(data, dict) or "profile" not in data:
        raise SerializationError("Invalid resume structure: missing 'profile' key")

    try:
        return Resume(
            profile=_profile(data["profile"]),
            experiences=[_experience(item) for item in data.get("experiences") or []],
            education=[_education(item) for item in data.get("education") or []],
            skills=_skills(data.get("skills") or {}),
            projects=[_project(item) for item in data.get("projects") or []],
            certifications=[_certification(item) for item in data.get("certifications") or []],
            languages=[_language(item) for item in data.get("languages") or []],
            publications=[_publication(item) for item in data.get("publications") or []],
            volunteer=[_volunteer(item) for item in data.get("volunteer") or []],
            metadata=_metadata(data.get("metadata") or {}),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise SerializationError("Invalid resume structure", original_error=e) from e


def resume_to_json(resume: Resume, indent: int = 2) -> str:
    """
    Serialize a résumé as pretty-printed JSON.

    Raises:
        SerializationError: If a field holds a value JSON cannot encode
    """
    try:
        return json.dumps(resume_to_dict(resume), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError("Failed to format as JSON", original_error=e) from e


def resume_from_json(text: str) -> Resume:
    """
    Parse a résumé from JSON text.

    Raises:
        SerializationError: If the text is not valid JSON or not a résumé
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError("Failed to parse JSON", original_error=e) from e
    return resume_from_dict(data)


def load_resume(path: Path) -> Resume:
    """
    Load a résumé from a .json, .yaml or .yml file.

    Args:
        path: Résumé file

    Returns:
        Resume record

    Raises:
        FileNotFoundError: If path does not exist
        SerializationError: If the file cannot be parsed or has an unsupported suffix
    """
    if isinstance(path, str):
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(path.read_text(encoding="utf-8"))
        elif suffix in YAML_SUFFIXES:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        else:
            raise SerializationError(f"Unsupported resume file type: {suffix}", path=path)
    except SerializationError:
        raise
    except Exception as e:
        raise SerializationError("Failed to read resume file", path=path, original_error=e) from e

    try:
        return resume_from_dict(data)
    except SerializationError as e:
        raise SerializationError(e.message, path=path, original_error=e.original_error) from e


def save_resume(resume: Resume, path: Path) -> Path:
    """
    Write a résumé to a .json, .yaml or .yml file.

    Args:
        resume: Résumé record
        path: Destination file (parent directories are created)

    Returns:
        Path written
    """
    if isinstance(path, str):
        path = Path(path)

    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        content = resume_to_json(resume)
    elif suffix in YAML_SUFFIXES:
        content = OmegaConf.to_yaml(OmegaConf.create(resume_to_dict(resume)))
    else:
        raise SerializationError(f"Unsupported resume file type: {suffix}", path=path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
