"""
The ``{inputs, results}`` record handed to report and storage collaborators.

Keys are camelCase to match what the browser form posts and what stored
calculations already contain. Currency stays as plain numbers.
"""

from __future__ import annotations

from typing import Any, Dict

from .engine import CalculationInputs, CalculationResults
from .inputs_builder import FIELD_ALIASES


def inputs_to_dict(inputs: CalculationInputs) -> Dict[str, float]:
    return {alias: getattr(inputs, name) for name, alias in FIELD_ALIASES.items()}


def results_to_dict(results: CalculationResults) -> Dict[str, Any]:
    breakdown = results.breakdown
    return {
        "grossProfit": results.gross_profit,
        "operatingProfit": results.operating_profit,
        "cashFlow": results.cash_flow,
        "estimatedValue": results.estimated_value,
        "desiredROIValue": results.desired_roi_value,
        "healthStatus": results.health_status,
        "profitMargin": results.profit_margin,
        "healthScore": results.health_score,
        "breakdown": {
            "foodCost": breakdown.food_cost,
            "laborCost": breakdown.labor_cost,
            "occupancyCost": breakdown.occupancy_cost,
            "otherExpenses": breakdown.other_expenses,
            "totalOperatingExpenses": breakdown.total_operating_expenses,
        },
    }


def calculation_payload(inputs: CalculationInputs, results: CalculationResults) -> Dict[str, Any]:
    return {"inputs": inputs_to_dict(inputs), "results": results_to_dict(results)}
