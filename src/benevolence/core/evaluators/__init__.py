"""Category evaluators for the scoring engine."""

from .completeness import CompletenessConfig, CompletenessEvaluator
from .financial import FinancialConfig, FinancialEvaluator
from .crisis import CrisisConfig, CrisisEvaluator
from .alternatives import AlternativesConfig, AlternativesEvaluator

__all__ = [
    "CompletenessConfig",
    "CompletenessEvaluator",
    "FinancialConfig",
    "FinancialEvaluator",
    "CrisisConfig",
    "CrisisEvaluator",
    "AlternativesConfig",
    "AlternativesEvaluator",
]
