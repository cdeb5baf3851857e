"""
Targeting Context

Responsibilities:
- Extracts weighted keywords from job descriptions
- Scores résumé keyword coverage against a job description
- Suggests general and section-level improvements
- Holds per-industry keyword dictionaries

Owns: Match scoring, industry keyword configuration, improvement suggestions
Never: Renders documents or modifies résumé records
"""

from atscribe.contexts.targeting.exceptions import IndustryNotFoundError
from atscribe.contexts.targeting.optimizer import (
    IndustryProfile,
    OptimizationResult,
    OptimizerConfig,
    ResumeOptimizer,
    load_optimizer_config,
)

__all__ = [
    "ResumeOptimizer",
    "OptimizationResult",
    "OptimizerConfig",
    "IndustryProfile",
    "load_optimizer_config",
    "IndustryNotFoundError",
]
