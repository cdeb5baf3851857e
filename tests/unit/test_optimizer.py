"""Unit tests for ResumeOptimizer."""

import pytest

from atscribe.contexts.intake import Experience, Skill
from atscribe.contexts.targeting import (
    IndustryNotFoundError,
    IndustryProfile,
    OptimizationResult,
    OptimizerConfig,
    ResumeOptimizer,
    load_optimizer_config,
)

REACT_JOB = "Looking for a Python developer with experience in Django and React"
JAVA_JOB = "Java/Spring/Hibernate/Oracle"
CLOUD_JOB = "Python developer with AWS and Kubernetes experience"
BROAD_JOB = "python java react docker kubernetes aws agile"
ACRONYM_JOB = "Python developer with AWS, SQL and CI/CD"


@pytest.fixture
def optimizer():
    return ResumeOptimizer()


@pytest.mark.unit
class TestIndustryConfig:
    """Test industry dictionary loading and selection."""

    def test_bundled_industries(self):
        config = load_optimizer_config()

        assert [profile.name for profile in config.industries] == [
            "software development",
            "data science",
        ]
        assert "developed" in config.action_verbs
        assert "responsible for" in config.weak_phrases

    def test_config_is_cached(self):
        assert load_optimizer_config() is load_optimizer_config()

    @pytest.mark.parametrize(
        "industry,expected",
        [
            ("software development", "software development"),
            ("Backend Developer", "software development"),
            ("Data Engineering", "software development"),
            ("Data Analyst", "data science"),
            ("Research Scientist", "data science"),
        ],
    )
    def test_find_industry_by_alias(self, industry, expected):
        assert load_optimizer_config().find_industry(industry).name == expected

    def test_default_industry_loaded(self, optimizer):
        assert list(optimizer.industry_keywords) == ["software development"]
        assert "kubernetes" in optimizer.industry_phrases()

    def test_keywords_stored_under_requested_name(self):
        optimizer = ResumeOptimizer(industries=["Backend Developer", "Data Analyst"])

        assert set(optimizer.industry_keywords) == {"Backend Developer", "Data Analyst"}
        assert "statistics" in optimizer.industry_phrases()
        assert "rest api" in optimizer.industry_phrases()

    def test_unknown_industry(self):
        with pytest.raises(IndustryNotFoundError) as exc_info:
            ResumeOptimizer(industries=["Marine Biology"])

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.message == "No keywords found for industry: Marine Biology"
        assert "software development" in str(exc_info.value)

    def test_custom_config(self, python_resume):
        config = OptimizerConfig(
            industries=(
                IndustryProfile(name="music", aliases=("music",), keywords=frozenset({"guitar"})),
            ),
            action_verbs=frozenset({"played"}),
            weak_phrases=frozenset(),
        )
        optimizer = ResumeOptimizer(industries=["music"], config=config)

        result = optimizer.optimize(python_resume, "Guitar teacher wanted")

        assert result.missing_keywords == {"guitar"}
        assert result.score == 0


@pytest.mark.unit
class TestJobKeywords:
    """Test job keyword extraction with industry boosting."""

    def test_industry_phrases_boosted(self, optimizer):
        keywords = optimizer.extract_job_keywords(REACT_JOB)

        assert keywords["python"] == 2
        assert keywords["react"] == 2
        assert keywords["django"] == 1
        assert "with" not in keywords

    def test_repeated_phrase(self, optimizer):
        keywords = optimizer.extract_job_keywords("Python, Python and more Python")
        assert keywords["python"] == 4

    def test_phrase_normalized(self, optimizer):
        keywords = optimizer.extract_job_keywords("Deploying on AWS")
        assert keywords["amazon web services"] == 2
        assert "aws" not in keywords

    def test_slash_separated_terms(self, optimizer):
        keywords = optimizer.extract_job_keywords(JAVA_JOB)
        assert keywords == {"java": 2, "spring": 1, "hibernate": 1, "oracle": 1}


@pytest.mark.unit
class TestOptimize:
    """Test scoring and keyword sets."""

    def test_partial_match(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, REACT_JOB)

        assert result.score == 50
        assert result.matching_keywords == {"python": 1}
        assert result.missing_keywords == {"react"}
        assert result.overused_keywords == set()

    def test_low_importance_never_missing(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, REACT_JOB)
        assert "django" not in result.missing_keywords
        assert "looking" not in result.missing_keywords

    def test_no_match(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, JAVA_JOB)

        assert result.score == 0
        assert result.missing_keywords == {"java"}

    def test_full_match(self, optimizer, full_resume):
        result = optimizer.optimize(full_resume, CLOUD_JOB)

        assert result.score == 100
        assert result.missing_keywords == set()
        assert result.matching_keywords["amazon web services"] == 2

    def test_no_important_keywords(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, "We are hiring")

        assert result.score == 0
        assert result.missing_keywords == set()

    def test_empty_job_description(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, "")

        assert result.score == 0
        assert result.matching_keywords == {}

    def test_overused_keywords(self, optimizer, python_resume):
        python_resume.profile.summary = "Python Python Python Python"

        result = optimizer.optimize(python_resume, REACT_JOB)

        # 4 in the summary plus the skill itself
        assert result.overused_keywords == {"python"}

    def test_four_uses_not_overused(self, optimizer, python_resume):
        python_resume.profile.summary = "Python Python Python"
        result = optimizer.optimize(python_resume, REACT_JOB)
        assert result.overused_keywords == set()

    def test_fresh_result_each_call(self, optimizer, python_resume):
        first = optimizer.optimize(python_resume, REACT_JOB)
        second = optimizer.optimize(python_resume, REACT_JOB)
        assert first is not second
        assert first == second

    def test_resume_not_modified(self, optimizer, full_resume):
        before = repr(full_resume)
        optimizer.optimize(full_resume, CLOUD_JOB)
        assert repr(full_resume) == before

    def test_to_dict_sorted(self, optimizer, minimal_resume):
        data = optimizer.optimize(minimal_resume, BROAD_JOB).to_dict()

        assert data["score"] == 0
        assert data["missing_keywords"] == sorted(data["missing_keywords"])
        assert data["missing_keywords"][0] == "agile"

    def test_default_result(self):
        assert OptimizationResult().to_dict() == {
            "score": 0,
            "missing_keywords": [],
            "matching_keywords": {},
            "overused_keywords": [],
            "suggestions": [],
            "section_improvements": {},
        }


@pytest.mark.unit
class TestSuggestions:
    """Test general and section-level suggestions."""

    def test_sparse_profile(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, REACT_JOB)

        assert result.suggestions == [
            "Add a professional summary to highlight your qualifications",
            "Add your phone number to contact information",
            "Add your LinkedIn profile to contact information",
            "Use more action verbs to describe your accomplishments",
        ]

    def test_short_summary(self, optimizer, full_resume):
        result = optimizer.optimize(full_resume, CLOUD_JOB)
        assert result.suggestions == [
            "Expand your professional summary to better highlight your experience"
        ]

    def test_weak_phrases(self, optimizer, python_resume):
        python_resume.experiences.append(
            Experience(company="Acme", title="Engineer", description="Responsible for various things")
        )
        suggestions = optimizer.general_suggestions(python_resume)

        assert "Replace passive or weak phrases with strong action verbs" in suggestions
        assert "Use more action verbs to describe your accomplishments" in suggestions

    def test_section_improvements(self, optimizer, python_resume):
        result = optimizer.optimize(python_resume, REACT_JOB)

        assert result.section_improvements == {
            "Experience": [
                "Add quantifiable achievements to your work experience",
                "Consider incorporating these keywords into your experience section: python, react",
            ],
            "Skills": ["Consider adding these skills if you have them: react"],
        }

    def test_many_missing_keywords(self, optimizer, minimal_resume):
        result = optimizer.optimize(minimal_resume, BROAD_JOB)

        assert result.section_improvements["Experience"][-1] == (
            "Many important keywords from the job description are missing "
            "from your experience section"
        )
        assert result.section_improvements["Skills"] == [
            "Many important skills from the job description are missing from your skills section"
        ]

    def test_experience_keyword_via_technologies(self, optimizer, python_resume):
        python_resume.experiences.append(
            Experience(
                company="Acme",
                title="Engineer",
                description="Built dashboards",
                achievements=["Shipped v2"],
                technologies=["React", "Python"],
            )
        )
        assert optimizer.analyze_experience_section(python_resume, ["python", "react"]) == []

    def test_uncategorized_skills(self, optimizer, minimal_resume):
        minimal_resume.skills.other.append(Skill(name="React"))

        improvements = optimizer.analyze_skills_section(minimal_resume, ["react"])

        assert improvements == [
            "Organize your skills into categories (technical, soft, tools, etc.)"
        ]

    def test_skills_section_absent_when_covered(self, optimizer, python_resume):
        python_resume.skills.technical.append(Skill(name="React"))
        result = optimizer.optimize(python_resume, REACT_JOB)
        assert "Skills" not in result.section_improvements

    def test_acronyms_found_in_sections(self, optimizer, python_resume):
        python_resume.skills.technical.extend([Skill(name="AWS"), Skill(name="SQL")])
        python_resume.skills.tools.append(Skill(name="CI/CD"))
        python_resume.experiences.append(
            Experience(
                company="Acme",
                title="Engineer",
                description="Developed services on AWS",
                achievements=["Cut deploy time by 50%"],
                technologies=["Python", "SQL", "CI/CD"],
            )
        )

        result = optimizer.optimize(python_resume, ACRONYM_JOB)

        assert result.score == 100
        assert result.missing_keywords == set()
        assert result.section_improvements == {}

    @pytest.mark.parametrize(
        "skill,keyword",
        [
            ("AWS", "amazon web services"),
            ("SQL", "structured query language"),
            ("CI/CD", "continuous integration / continuous deployment"),
            ("K8s", "kubernetes"),
        ],
    )
    def test_skill_acronym_matches_canonical_keyword(
        self, optimizer, minimal_resume, skill, keyword
    ):
        minimal_resume.skills.technical.append(Skill(name=skill))
        assert optimizer.analyze_skills_section(minimal_resume, [keyword]) == []

    def test_technology_acronym_matches_canonical_keyword(self, optimizer, python_resume):
        python_resume.experiences.append(
            Experience(
                company="Acme",
                title="Engineer",
                achievements=["Shipped v2"],
                technologies=["AWS"],
            )
        )
        assert optimizer.analyze_experience_section(python_resume, ["amazon web services"]) == []
