"""
Restaurant Valuation Engine
===========================

Pure SDE valuation and health-scoring engine with zero external dependencies.

Public API:
- ``CalculationInputs`` / ``CalculationResults`` / ``CalculationBreakdown``: data contracts
- ``compute_valuation(inputs)``: main valuation computation
- ``compute_health_score(inputs, profit_margin, cash_flow)``: 0-120 health score
- ``validate_inputs(inputs)``: advisory range checks
- ``build_calculation_inputs(data, overrides)``: canonical input preparation
- ``INDUSTRY_BENCHMARKS`` / ``compare_to_benchmarks(inputs)``: display benchmarks
"""

from restaurant_valuation.benchmarks import (
    INDUSTRY_BENCHMARKS,
    BenchmarkComparison,
    BenchmarkRange,
    IndustryBenchmarks,
    compare_to_benchmarks,
    profit_margin_gauge,
)
from restaurant_valuation.engine import (
    HEALTH_SCORE_MAX,
    OPERATING_EXPENSE_ADJUSTMENT,
    REFERENCE_INPUTS,
    CalculationBreakdown,
    CalculationInputs,
    CalculationResults,
    InputError,
    compute_health_score,
    compute_valuation,
    health_status_for_score,
    verify_reference_calculation,
)
from restaurant_valuation.inputs_builder import build_calculation_inputs
from restaurant_valuation.payload import calculation_payload
from restaurant_valuation.validation import ValidationResult, validate_inputs

__all__ = [
    "HEALTH_SCORE_MAX",
    "INDUSTRY_BENCHMARKS",
    "OPERATING_EXPENSE_ADJUSTMENT",
    "REFERENCE_INPUTS",
    "BenchmarkComparison",
    "BenchmarkRange",
    "CalculationBreakdown",
    "CalculationInputs",
    "CalculationResults",
    "IndustryBenchmarks",
    "InputError",
    "ValidationResult",
    "build_calculation_inputs",
    "calculation_payload",
    "compare_to_benchmarks",
    "compute_health_score",
    "compute_valuation",
    "health_status_for_score",
    "profit_margin_gauge",
    "validate_inputs",
    "verify_reference_calculation",
]
