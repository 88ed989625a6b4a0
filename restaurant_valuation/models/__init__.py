"""
Convenience re-exports of data models.

Models are defined in ``restaurant_valuation.engine``,
``restaurant_valuation.validation`` and ``restaurant_valuation.benchmarks``
and re-exported here for consumers who prefer
``from restaurant_valuation.models import CalculationInputs``.
"""

from restaurant_valuation.benchmarks import BenchmarkComparison, BenchmarkRange, IndustryBenchmarks
from restaurant_valuation.engine import (
    CalculationBreakdown,
    CalculationInputs,
    CalculationResults,
    InputError,
)
from restaurant_valuation.validation import ValidationResult

__all__ = [
    "BenchmarkComparison",
    "BenchmarkRange",
    "CalculationBreakdown",
    "CalculationInputs",
    "CalculationResults",
    "IndustryBenchmarks",
    "InputError",
    "ValidationResult",
]
