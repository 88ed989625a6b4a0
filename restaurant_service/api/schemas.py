from typing import List

from pydantic import BaseModel, ConfigDict, Field

from restaurant_valuation.inputs_builder import DEFAULT_VALUES


class CalculationRequest(BaseModel):
    """Calculator inputs as posted by the browser form (camelCase) or API clients (snake_case)."""

    annual_sales: float = Field(
        DEFAULT_VALUES["annual_sales"], alias="annualSales", description="Total yearly revenue in USD"
    )
    food_cost_percent: float = Field(
        DEFAULT_VALUES["food_cost_percent"], alias="foodCostPercent", description="Cost of goods sold as % of sales"
    )
    labor_cost_percent: float = Field(
        DEFAULT_VALUES["labor_cost_percent"], alias="laborCostPercent", description="Staff costs as % of sales"
    )
    occupancy_cost_percent: float = Field(
        DEFAULT_VALUES["occupancy_cost_percent"],
        alias="occupancyCostPercent",
        description="Rent and facilities as % of sales",
    )
    other_expenses_percent: float = Field(
        DEFAULT_VALUES["other_expenses_percent"],
        alias="otherExpensesPercent",
        description="Other operating expenses as % of sales",
    )
    owner_compensation: float = Field(
        DEFAULT_VALUES["owner_compensation"], alias="ownerCompensation", description="Annual owner salary/draw in USD"
    )
    desired_roi: float = Field(
        DEFAULT_VALUES["desired_roi"], alias="desiredROI", description="Buyer's target return on investment, %"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "annualSales": 1200000,
                "foodCostPercent": 32,
                "laborCostPercent": 30,
                "occupancyCostPercent": 10,
                "otherExpensesPercent": 15,
                "ownerCompensation": 100000,
                "desiredROI": 25,
            }
        },
    )


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[str]
