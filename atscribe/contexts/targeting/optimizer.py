"""
ATS Keyword Optimizer

Scores how well a résumé covers the keywords of a job description and suggests
improvements, approximating an applicant tracking system's keyword screen.

Job keywords come from the job description with industry phrases boosted:
a phrase found n times gets importance n + 1, so industry terms count as
important even when mentioned once. Only important keywords (importance > 1)
are scored or reported missing.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from omegaconf import OmegaConf

from atscribe.contexts.intake.resume_data_structure import Resume
from atscribe.contexts.targeting.exceptions import IndustryNotFoundError
from atscribe.contexts.targeting.logger import _log_debug
from atscribe.utils.token_processing import KeywordExtractor

INDUSTRIES_PATH = Path(__file__).parent / "industries.yaml"
DEFAULT_INDUSTRY = "software development"

# Scoring thresholds
IMPORTANCE_THRESHOLD = 1  # importance above this makes a keyword "important"
OVERUSE_THRESHOLD = 4  # résumé counts above this are overused
SUMMARY_MIN_WORDS = 20
MAX_LISTED_KEYWORDS = 5  # beyond this, report "many missing" instead of listing

EXPERIENCE_SECTION = "Experience"
SKILLS_SECTION = "Skills"


@dataclass(frozen=True)
class IndustryProfile:
    """
    Keyword dictionary for one industry.

    Attributes:
        name: Canonical industry name (e.g. 'software development')
        aliases: Lowercase substrings that select this industry
        keywords: Lowercase keywords/phrases matched in job descriptions
    """

    name: str
    aliases: Tuple[str, ...]
    keywords: FrozenSet[str]

    def matches(self, industry: str) -> bool:
        folded = industry.lower()
        return any(alias in folded for alias in self.aliases)


@dataclass(frozen=True)
class OptimizerConfig:
    """Immutable optimizer dictionaries loaded from industries.yaml."""

    industries: Tuple[IndustryProfile, ...]
    action_verbs: FrozenSet[str]
    weak_phrases: FrozenSet[str]

    def find_industry(self, industry: str) -> IndustryProfile:
        """
        Resolve an industry name to its dictionary (first match in file order).

        Raises:
            IndustryNotFoundError: If no industry alias occurs in the name
        """
        for profile in self.industries:
            if profile.matches(industry):
                return profile
        raise IndustryNotFoundError(industry, [profile.name for profile in self.industries])


def _lowercase_set(values: Iterable[Any]) -> FrozenSet[str]:
    return frozenset(str(value).lower() for value in values)


@lru_cache(maxsize=None)
def load_optimizer_config(path: Optional[Path] = None) -> OptimizerConfig:
    """
    Load industry dictionaries, action verbs and weak phrases (cached per path).

    Args:
        path: YAML file. Defaults to the bundled industries.yaml

    Returns:
        Frozen OptimizerConfig
    """
    data = OmegaConf.to_container(OmegaConf.load(path or INDUSTRIES_PATH), resolve=True)

    industries = tuple(
        IndustryProfile(
            name=name,
            aliases=tuple(str(alias).lower() for alias in entry.get("aliases") or [name]),
            keywords=_lowercase_set(entry.get("keywords") or []),
        )
        for name, entry in (data.get("industries") or {}).items()
    )

    return OptimizerConfig(
        industries=industries,
        action_verbs=_lowercase_set(data.get("action_verbs") or []),
        weak_phrases=_lowercase_set(data.get("weak_phrases") or []),
    )


@dataclass
class OptimizationResult:
    """
    Keyword match between a résumé and a job description.

    Attributes:
        score: Percentage (0-100) of important job keywords found in the résumé
        missing_keywords: Important job keywords absent from the résumé
        matching_keywords: Job keywords found in the résumé -> résumé count
        overused_keywords: Résumé keywords used more than 4 times
        suggestions: General improvement suggestions
        section_improvements: Section name -> suggestions for that section
    """

    score: int = 0
    missing_keywords: Set[str] = field(default_factory=set)
    matching_keywords: Dict[str, int] = field(default_factory=dict)
    overused_keywords: Set[str] = field(default_factory=set)
    suggestions: List[str] = field(default_factory=list)
    section_improvements: Dict[str, List[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with sets as sorted lists (for JSON output)."""
        return {
            "score": self.score,
            "missing_keywords": sorted(self.missing_keywords),
            "matching_keywords": dict(sorted(self.matching_keywords.items())),
            "overused_keywords": sorted(self.overused_keywords),
            "suggestions": list(self.suggestions),
            "section_improvements": {
                section: list(items) for section, items in self.section_improvements.items()
            },
        }


def _keyword_list_message(missing: List[str], listed: str, many: str) -> Optional[str]:
    if not missing:
        return None
    if len(missing) <= MAX_LISTED_KEYWORDS:
        return f"{listed}: {', '.join(missing)}"
    return many


class ResumeOptimizer:
    """
    Scores résumés against job descriptions.

    Industry dictionaries are loaded during construction (and by explicit
    load_keywords_for_industry calls); optimize() only reads them, so a fully
    configured optimizer can be shared between callers.
    """

    def __init__(
        self,
        industries: Optional[Iterable[str]] = None,
        config: Optional[OptimizerConfig] = None,
        extractor: Optional[KeywordExtractor] = None,
    ):
        """
        Initialize optimizer.

        Args:
            industries: Industry names to load (default: software development)
            config: Optimizer dictionaries (default: bundled industries.yaml)
            extractor: Keyword extractor (default: bundled vocabulary)

        Raises:
            IndustryNotFoundError: If an industry name matches no dictionary
        """
        self.config = config or load_optimizer_config()
        self.extractor = extractor or KeywordExtractor()
        self.industry_keywords: Dict[str, FrozenSet[str]] = {}

        for industry in industries or [DEFAULT_INDUSTRY]:
            self.load_keywords_for_industry(industry)

    @property
    def action_verbs(self) -> FrozenSet[str]:
        return self.config.action_verbs

    @property
    def weak_phrases(self) -> FrozenSet[str]:
        return self.config.weak_phrases

    def load_keywords_for_industry(self, industry: str) -> FrozenSet[str]:
        """
        Load an industry's keyword dictionary, stored under the given name.

        Example:
            >>> optimizer.load_keywords_for_industry("Backend Developer")
            # selects 'software development' via the 'developer' alias

        Args:
            industry: Industry name or job family

        Returns:
            The loaded keywords

        Raises:
            IndustryNotFoundError: If no dictionary matches the name
        """
        profile = self.config.find_industry(industry)
        self.industry_keywords[industry] = profile.keywords
        _log_debug(f"Loaded {len(profile.keywords)} keywords for '{industry}' ({profile.name})")
        return profile.keywords

    def industry_phrases(self) -> Set[str]:
        """Union of all loaded industry keywords."""
        return set().union(*self.industry_keywords.values())

    def extract_job_keywords(self, job_description: str) -> Dict[str, int]:
        """
        Extract job keywords with importance weights.

        Args:
            job_description: Job description text

        Returns:
            Dict mapping normalized keyword -> importance
        """
        return self.extractor.count_with_importance(job_description, self.industry_phrases())

    def optimize(self, resume: Resume, job_description: str) -> OptimizationResult:
        """
        Score a résumé against a job description.

        Args:
            resume: Résumé record (not modified)
            job_description: Job description text

        Returns:
            Fresh OptimizationResult
        """
        job_keywords = self.extract_job_keywords(job_description)
        resume_keywords = resume.count_keywords(self.extractor)
        important = sorted(
            keyword
            for keyword, importance in job_keywords.items()
            if importance > IMPORTANCE_THRESHOLD
        )

        result = OptimizationResult()
        result.matching_keywords = {
            keyword: resume_keywords[keyword]
            for keyword in job_keywords
            if keyword in resume_keywords
        }
        result.missing_keywords = {
            keyword for keyword in important if keyword not in resume_keywords
        }
        result.overused_keywords = {
            keyword for keyword, count in resume_keywords.items() if count > OVERUSE_THRESHOLD
        }

        if important:
            matched = len(important) - len(result.missing_keywords)
            result.score = matched * 100 // len(important)

        result.suggestions = self.general_suggestions(resume)

        for section, improvements in (
            (EXPERIENCE_SECTION, self.analyze_experience_section(resume, important)),
            (SKILLS_SECTION, self.analyze_skills_section(resume, important)),
        ):
            if improvements:
                result.section_improvements[section] = improvements

        _log_debug(
            f"Optimized against {len(job_keywords)} job keywords "
            f"({len(important)} important): score {result.score}"
        )
        return result

    def general_suggestions(self, resume: Resume) -> List[str]:
        """Profile and wording checks that do not depend on the job description."""
        suggestions = []
        profile = resume.profile

        if not profile.summary:
            suggestions.append("Add a professional summary to highlight your qualifications")
        elif len(profile.summary.split()) < SUMMARY_MIN_WORDS:
            suggestions.append(
                "Expand your professional summary to better highlight your experience"
            )

        if not profile.phone:
            suggestions.append("Add your phone number to contact information")

        if not profile.linkedin:
            suggestions.append("Add your LinkedIn profile to contact information")

        descriptions = [experience.description.lower() for experience in resume.experiences]

        if any(weak in description for description in descriptions for weak in self.weak_phrases):
            suggestions.append("Replace passive or weak phrases with strong action verbs")

        if not any(
            verb in description for description in descriptions for verb in self.action_verbs
        ):
            suggestions.append("Use more action verbs to describe your accomplishments")

        return suggestions

    def _searchable_text(self, *values: str) -> str:
        """
        Lowercased fields plus their normalized keywords, one field per line.

        Job keywords arrive normalized ("amazon web services"), so a skill
        written as "AWS" must be searchable under its canonical form too.

        Example:
            >>> optimizer._searchable_text("AWS")
            'aws amazon web services'
        """
        return "\n".join(
            f"{value.lower()} {' '.join(self.extractor.tokenize(value))}"
            for value in values
            if value
        )

    def analyze_experience_section(self, resume: Resume, important: List[str]) -> List[str]:
        """
        Experience-specific improvements.

        Args:
            resume: Résumé record
            important: Important job keywords, sorted

        Returns:
            Ordered improvements (empty if none)
        """
        improvements = []

        if not any(experience.achievements for experience in resume.experiences):
            improvements.append("Add quantifiable achievements to your work experience")

        searchable = [
            self._searchable_text(
                experience.description, experience.title, *experience.technologies
            )
            for experience in resume.experiences
        ]

        def mentioned(keyword: str) -> bool:
            return any(keyword in text for text in searchable)

        message = _keyword_list_message(
            [keyword for keyword in important if not mentioned(keyword)],
            listed="Consider incorporating these keywords into your experience section",
            many="Many important keywords from the job description are missing "
            "from your experience section",
        )
        if message:
            improvements.append(message)

        return improvements

    def analyze_skills_section(self, resume: Resume, important: List[str]) -> List[str]:
        """
        Skills-specific improvements.

        Args:
            resume: Résumé record
            important: Important job keywords, sorted

        Returns:
            Ordered improvements (empty if none)
        """
        improvements = []
        skills = resume.skills

        if not skills.technical and skills.other:
            improvements.append(
                "Organize your skills into categories (technical, soft, tools, etc.)"
            )

        skill_names = [
            self._searchable_text(skill.name)
            for category in (skills.technical, skills.soft, skills.tools, skills.other)
            for skill in category
        ]

        message = _keyword_list_message(
            [keyword for keyword in important if not any(keyword in name for name in skill_names)],
            listed="Consider adding these skills if you have them",
            many="Many important skills from the job description are missing "
            "from your skills section",
        )
        if message:
            improvements.append(message)

        return improvements
