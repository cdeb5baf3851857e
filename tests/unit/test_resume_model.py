"""Unit tests for the résumé record and its validation."""

from datetime import date

import pytest

from atscribe.contexts.intake import (
    DateRangeError,
    Education,
    Experience,
    GPARangeError,
    Location,
    MissingTechnicalSkillsError,
    Profile,
    Project,
    Resume,
    ResumeValidationError,
    Skill,
    collect_validation_errors,
    validate_resume,
)


@pytest.mark.unit
class TestResumeKeywords:
    """Test keyword aggregation over résumé fields."""

    def test_count_keywords_normalizes_acronyms(self):
        resume = Resume.new(
            Profile(name="John Doe", summary="Experienced in AWS and Kubernetes")
        )
        resume.skills.technical.append(Skill(name="AWS"))

        keywords = resume.count_keywords()

        assert keywords["amazon web services"] == 2
        assert "kubernetes" in keywords
        assert "in" not in keywords
        assert "and" not in keywords

    def test_adjacent_fields_do_not_merge(self):
        resume = Resume.new(Profile(name="John", summary="Python", title="Engineer"))
        keywords = resume.count_keywords()

        assert "python" in keywords
        assert "engineer" in keywords
        assert "pythonengineer" not in keywords

    def test_other_skills_excluded(self):
        resume = Resume.new(Profile(name="John"))
        resume.skills.other.append(Skill(name="Juggling"))
        assert "juggling" not in resume.count_keywords()

    def test_experience_and_project_fields_included(self, full_resume):
        keywords = full_resume.count_keywords()
        assert keywords["python"] >= 3
        assert "microservices" in keywords
        assert "algorithms" in keywords
        assert "parser" in keywords

    def test_contains_keyword(self, full_resume):
        assert full_resume.contains_keyword("AWS")
        assert full_resume.contains_keyword("amazon web services")
        assert not full_resume.contains_keyword("Haskell")


@pytest.mark.unit
class TestLocation:
    """Test city/country composition."""

    @pytest.mark.parametrize(
        "location,expected",
        [
            (Location(city="Berlin", country="Germany"), "Berlin, Germany"),
            (Location(city="Berlin"), "Berlin"),
            (Location(country="Germany"), "Germany"),
            (Location(region="Bavaria"), ""),
        ],
    )
    def test_display(self, location, expected):
        assert location.display() == expected


@pytest.mark.unit
class TestValidation:
    """Test résumé validation rules."""

    def test_valid_resume(self, full_resume):
        full_resume.validate()
        assert collect_validation_errors(full_resume) == []

    def test_name_required(self, python_resume):
        python_resume.profile.name = ""
        with pytest.raises(ResumeValidationError, match="Name is required"):
            validate_resume(python_resume)

    def test_email_required(self, python_resume):
        python_resume.profile.email = ""
        with pytest.raises(ResumeValidationError, match="Email is required"):
            python_resume.validate()

    def test_email_format(self, python_resume):
        python_resume.profile.email = "john.example.com"
        with pytest.raises(ResumeValidationError, match="Invalid email format") as exc_info:
            python_resume.validate()
        assert exc_info.value.field == "profile.email"

    def test_experience_dates_reversed(self, python_resume):
        python_resume.experiences.append(
            Experience(
                company="Acme Corp",
                title="Engineer",
                start_date=date(2022, 1, 1),
                end_date=date(2021, 1, 1),
            )
        )
        with pytest.raises(DateRangeError) as exc_info:
            python_resume.validate()

        assert exc_info.value.entry_name == "Acme Corp"
        assert "Acme Corp" in str(exc_info.value)

    def test_education_dates_reversed(self, python_resume):
        python_resume.education.append(
            Education(
                institution="State University",
                degree="BSc",
                start_date=date(2018, 9, 1),
                end_date=date(2014, 6, 1),
            )
        )
        with pytest.raises(DateRangeError, match="State University"):
            python_resume.validate()

    def test_project_dates_reversed(self, python_resume):
        python_resume.projects.append(
            Project(name="Parser", start_date=date(2020, 5, 1), end_date=date(2020, 4, 1))
        )
        with pytest.raises(DateRangeError, match="Parser"):
            python_resume.validate()

    def test_equal_dates_allowed(self, python_resume):
        python_resume.experiences.append(
            Experience(
                company="Acme Corp",
                title="Intern",
                start_date=date(2021, 6, 1),
                end_date=date(2021, 6, 1),
            )
        )
        python_resume.validate()

    @pytest.mark.parametrize("gpa", [-0.1, 4.01, 5.0])
    def test_gpa_out_of_range(self, python_resume, gpa):
        python_resume.education.append(
            Education(institution="State University", degree="BSc", gpa=gpa)
        )
        with pytest.raises(GPARangeError, match="between 0.0 and 4.0"):
            python_resume.validate()

    @pytest.mark.parametrize("gpa", [0.0, 3.5, 4.0])
    def test_gpa_in_range(self, python_resume, gpa):
        python_resume.education.append(
            Education(institution="State University", degree="BSc", gpa=gpa)
        )
        python_resume.validate()

    def test_missing_technical_skills_is_distinct_error(self, minimal_resume):
        with pytest.raises(MissingTechnicalSkillsError) as exc_info:
            minimal_resume.validate()

        assert isinstance(exc_info.value, ResumeValidationError)
        assert not isinstance(exc_info.value, (DateRangeError, GPARangeError))

    @pytest.mark.parametrize(
        "field_name,message",
        [
            ("linkedin", "LinkedIn URL must start with https://"),
            ("github", "GitHub URL must start with https://"),
        ],
    )
    def test_profile_urls_require_https(self, python_resume, field_name, message):
        setattr(python_resume.profile, field_name, "http://example.com/john")
        with pytest.raises(ResumeValidationError, match=message):
            python_resume.validate()

    def test_collect_all_errors_in_order(self):
        errors = collect_validation_errors(Resume.new(Profile()))
        assert [error.message for error in errors] == [
            "Name is required",
            "Email is required",
            "At least one technical skill is required",
        ]
