"""
Input validation rules.

Range checks are advisory: ``validate_inputs`` reports problems as messages and
never raises. Callers decide whether to block a submission or only warn; the
engine computes a result for invalid inputs either way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .engine import CalculationInputs

MIN_ANNUAL_SALES = 100_000
MAX_ANNUAL_SALES = 50_000_000
FOOD_COST_RANGE = (15, 60)
LABOR_COST_RANGE = (15, 50)
OCCUPANCY_COST_RANGE = (3, 20)
OTHER_EXPENSES_RANGE = (5, 30)
MAX_OWNER_COMPENSATION = 1_000_000
DESIRED_ROI_RANGE = (10, 50)
MAX_TOTAL_EXPENSE_PERCENT = 100


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def _outside(value: float, bounds) -> bool:
    low, high = bounds
    return value < low or value > high


def validate_inputs(inputs: CalculationInputs) -> ValidationResult:
    errors: List[str] = []

    if inputs.annual_sales < MIN_ANNUAL_SALES:
        errors.append("Annual sales must be at least $100,000")
    if inputs.annual_sales > MAX_ANNUAL_SALES:
        errors.append("Annual sales must not exceed $50,000,000")

    if _outside(inputs.food_cost_percent, FOOD_COST_RANGE):
        errors.append("Food cost must be between 15% and 60%")

    if _outside(inputs.labor_cost_percent, LABOR_COST_RANGE):
        errors.append("Labor cost must be between 15% and 50%")

    if _outside(inputs.occupancy_cost_percent, OCCUPANCY_COST_RANGE):
        errors.append("Occupancy cost must be between 3% and 20%")

    if _outside(inputs.other_expenses_percent, OTHER_EXPENSES_RANGE):
        errors.append("Other expenses must be between 5% and 30%")

    if inputs.owner_compensation < 0:
        errors.append("Owner compensation cannot be negative")
    if inputs.owner_compensation > MAX_OWNER_COMPENSATION:
        errors.append("Owner compensation must not exceed $1,000,000")

    if _outside(inputs.desired_roi, DESIRED_ROI_RANGE):
        errors.append("Desired ROI must be between 10% and 50%")

    if inputs.total_expense_percent > MAX_TOTAL_EXPENSE_PERCENT:
        errors.append("Total expenses cannot exceed 100% of sales")

    return ValidationResult(valid=not errors, errors=errors)
