"""
Industry Benchmarks
===================

Typical ranges for well-performing full-service restaurants, used by display
code for benchmark overlays. The engine's health score does not read these.

- Food cost: 28-35% (ideal 30%)
- Labor cost: 25-35% (ideal 30%)
- Occupancy: 6-10% (ideal 8%), rent, utilities, insurance
- Other expenses: 10-20% (ideal 15%), marketing, supplies, maintenance
- Profit margin: excellent 15%+, good 10%+, fair 5%+

Prime cost (food + labor) should usually stay below 65% of sales.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .engine import CalculationInputs


@dataclass(frozen=True)
class BenchmarkRange:
    min: float
    max: float
    ideal: float


@dataclass(frozen=True)
class ProfitMarginBenchmark:
    excellent: float
    good: float
    fair: float


@dataclass(frozen=True)
class IndustryBenchmarks:
    food_cost: BenchmarkRange
    labor_cost: BenchmarkRange
    occupancy_cost: BenchmarkRange
    other_expenses: BenchmarkRange
    profit_margin: ProfitMarginBenchmark

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        """camelCase representation consumed by UI and report code."""

        def _range(r: BenchmarkRange) -> Dict[str, float]:
            return {"min": r.min, "max": r.max, "ideal": r.ideal}

        return {
            "foodCost": _range(self.food_cost),
            "laborCost": _range(self.labor_cost),
            "occupancyCost": _range(self.occupancy_cost),
            "otherExpenses": _range(self.other_expenses),
            "profitMargin": {
                "excellent": self.profit_margin.excellent,
                "good": self.profit_margin.good,
                "fair": self.profit_margin.fair,
            },
        }


INDUSTRY_BENCHMARKS = IndustryBenchmarks(
    food_cost=BenchmarkRange(min=28, max=35, ideal=30),
    labor_cost=BenchmarkRange(min=25, max=35, ideal=30),
    occupancy_cost=BenchmarkRange(min=6, max=10, ideal=8),
    other_expenses=BenchmarkRange(min=10, max=20, ideal=15),
    profit_margin=ProfitMarginBenchmark(excellent=15, good=10, fair=5),
)

BELOW = "below"
WITHIN = "within"
ABOVE = "above"


@dataclass(frozen=True)
class BenchmarkComparison:
    label: str
    value: float
    benchmark: BenchmarkRange
    position: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "min": self.benchmark.min,
            "max": self.benchmark.max,
            "ideal": self.benchmark.ideal,
            "position": self.position,
        }


def _position(value: float, benchmark: BenchmarkRange) -> str:
    if value < benchmark.min:
        return BELOW
    if value > benchmark.max:
        return ABOVE
    return WITHIN


def compare_to_benchmarks(
    inputs: CalculationInputs,
    benchmarks: IndustryBenchmarks = INDUSTRY_BENCHMARKS,
) -> List[BenchmarkComparison]:
    """Place each cost ratio relative to its industry range (Food, Labor, Occupancy, Other)."""
    rows = (
        ("Food", inputs.food_cost_percent, benchmarks.food_cost),
        ("Labor", inputs.labor_cost_percent, benchmarks.labor_cost),
        ("Occupancy", inputs.occupancy_cost_percent, benchmarks.occupancy_cost),
        ("Other", inputs.other_expenses_percent, benchmarks.other_expenses),
    )
    return [
        BenchmarkComparison(label=label, value=value, benchmark=benchmark, position=_position(value, benchmark))
        for label, value, benchmark in rows
    ]


def profit_margin_gauge(profit_margin: float) -> float:
    """
    0-100 gauge for the profit-margin dial.

    Poor (<5%) maps to 0-35, fair (5-10%) to 35-60, good (10-15%) to 60-85 and
    excellent (15%+) to 85-100.
    """
    if profit_margin >= 15:
        return min(100.0, 85 + (profit_margin - 15) * 2)
    if profit_margin >= 10:
        return 60 + (profit_margin - 10) * 5
    if profit_margin >= 5:
        return 35 + (profit_margin - 5) * 5
    return max(0.0, profit_margin * 7)
