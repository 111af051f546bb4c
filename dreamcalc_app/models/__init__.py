"""
Data models and contracts module.

Immutable data structures for savings plans, dream goals, projections
and self-test reports. Follows functional programming principles with
frozen dataclasses.
"""
from .plans import (
    ContributionPlan,
    ContributionTable,
    Frequency,
    GoalPlan,
    ProjectionResult,
    SelfTestReport,
    SelfTestResult,
    SeriesPoint,
    YearRow,
)

__all__ = [
    "ContributionPlan",
    "ContributionTable",
    "Frequency",
    "GoalPlan",
    "ProjectionResult",
    "SelfTestReport",
    "SelfTestResult",
    "SeriesPoint",
    "YearRow",
]
