"""Domain layer: records, validation rules, scoring and static catalogs."""

from .catalog import DEFAULT_TEMPLATES, RESOURCES
from .models import (
    BiasTest,
    BiasTestResult,
    BiasTestTemplate,
    Resource,
    ResultStatus,
    Review,
    User,
)
from .scoring import ScoreBand, compute_score, rate_score

__all__ = [
    "DEFAULT_TEMPLATES",
    "RESOURCES",
    "BiasTest",
    "BiasTestResult",
    "BiasTestTemplate",
    "Resource",
    "ResultStatus",
    "Review",
    "ScoreBand",
    "User",
    "compute_score",
    "rate_score",
]
