"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from dreamcalc_app.models.plans import ContributionPlan, Frequency, GoalPlan


@pytest.fixture
def monthly_plan() -> ContributionPlan:
    """100 a month for one year at 12% with compounding."""
    return ContributionPlan(
        amount_per_period=100,
        annual_rate_pct=12,
        term_years=1,
        compounding=True,
        frequency=Frequency.MONTHLY,
        annual_growth_pct=0,
    )


@pytest.fixture
def growing_plan() -> ContributionPlan:
    """Monthly plan whose contribution is raised 10% every year."""
    return ContributionPlan(
        amount_per_period=100,
        annual_rate_pct=8,
        term_years=5,
        compounding=True,
        frequency=Frequency.MONTHLY,
        annual_growth_pct=10,
    )


@pytest.fixture
def bike_goal() -> GoalPlan:
    """A 1200 bike, one year away, no interest."""
    return GoalPlan(
        target_amount=1200,
        annual_rate_pct=0,
        term_years=1,
        compounding=False,
        frequency=Frequency.MONTHLY,
        dream_name="Bike",
    )


@pytest.fixture
def rate_table() -> Dict[str, float]:
    """Exchange rates per one USD."""
    return {
        "USD": 1.0,
        "EUR": 0.92,
        "GBP": 0.79,
        "RUB": 90.0,
    }


@pytest.fixture
def savings_form() -> Dict[str, Any]:
    """Raw savings calculator form data as a UI would submit it."""
    return {
        "amount_per_period": "100",
        "annual_rate_pct": "8",
        "term_years": "10",
        "compounding": True,
        "frequency": "monthly",
        "annual_growth_pct": "0",
    }


@pytest.fixture
def dream_form() -> Dict[str, Any]:
    """Raw dream calculator form data as a UI would submit it."""
    return {
        "dream_name": "  Telescope ",
        "target_amount": 20000,
        "annual_rate_pct": 8,
        "term_years": 5,
        "compounding": True,
        "frequency": "monthly",
    }


@pytest.fixture
def empty_config_dir(tmp_path):
    """Config directory without calculator.yaml, so only defaults apply."""
    return tmp_path
