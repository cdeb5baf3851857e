"""Shared résumé fixtures."""

from datetime import date

import pytest

from atscribe.contexts.intake import (
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
    Skill,
    Volunteer,
)


@pytest.fixture
def minimal_resume():
    """Résumé with a name, an email and nothing else."""
    return Resume.new(Profile(name="John Doe", email="john@example.com"))


@pytest.fixture
def full_resume():
    """Résumé with every section populated."""
    profile = Profile(
        name="Jane Smith",
        email="jane@example.com",
        phone="+1 555 0100",
        location=Location(city="Berlin", country="Germany"),
        website="https://janesmith.dev",
        linkedin="https://linkedin.com/in/janesmith",
        github="https://github.com/janesmith",
        summary="Backend engineer experienced in AWS and Kubernetes",
        title="Senior Software Engineer",
    )

    resume = Resume.new(profile)
    resume.experiences.append(
        Experience(
            company="Acme Corp",
            title="Software Engineer",
            description="Developed microservices in Python",
            location="Remote",
            start_date=date(2020, 1, 1),
            end_date=date(2021, 12, 1),
            achievements=["Reduced latency by 40%"],
            technologies=["Python", "Docker"],
        )
    )
    resume.education.append(
        Education(
            institution="State University",
            degree="BSc",
            field_of_study="Computer Science",
            start_date=date(2014, 9, 1),
            end_date=date(2018, 6, 1),
            gpa=3.8,
            courses=["Algorithms", "Databases"],
        )
    )
    resume.skills.technical.extend([Skill(name="Python", level="Expert", years=6), Skill(name="AWS")])
    resume.skills.soft.append(Skill(name="Mentoring"))
    resume.skills.tools.append(Skill(name="Docker"))
    resume.skills.languages.append(Skill(name="SQL"))
    resume.projects.append(
        Project(
            name="Resume Parser",
            description="Parses resumes",
            url="https://example.com/parser",
            github="https://github.com/janesmith/parser",
            technologies=["Python"],
            highlights=["1k stars"],
        )
    )
    resume.certifications.append(
        Certification(
            name="AWS Certified Developer",
            issuer="Amazon",
            date_obtained=date(2022, 3, 1),
            credential_id="ABC-123",
        )
    )
    resume.languages.append(Language(name="German", proficiency=LanguageProficiency.NATIVE))
    resume.publications.append(
        Publication(
            title="Scaling Services",
            publisher="Tech Journal",
            published_date=date(2021, 5, 1),
            authors=["Jane Smith", "Max Mustermann"],
        )
    )
    resume.volunteer.append(
        Volunteer(
            organization="Code Club",
            role="Mentor",
            start_date=date(2019, 2, 1),
            current=True,
        )
    )
    return resume


@pytest.fixture
def python_resume():
    """Résumé whose only technical skill is Python."""
    resume = Resume.new(Profile(name="John Doe", email="john@example.com"))
    resume.skills.technical.append(Skill(name="Python"))
    return resume
