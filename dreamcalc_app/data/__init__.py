"""
Form input normalization module.

Turns raw calculator form data into immutable plan models.
"""
from .plan_normalizer import PlanNormalizationResult, PlanNormalizer

__all__ = ["PlanNormalizationResult", "PlanNormalizer"]
