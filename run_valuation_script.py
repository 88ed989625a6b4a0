import argparse
import json

from restaurant_valuation import (
    REFERENCE_INPUTS,
    build_calculation_inputs,
    calculation_payload,
    compute_valuation,
    validate_inputs,
)
from restaurant_valuation.formatting import format_currency, format_percent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a quick restaurant valuation (SDE method).")
    parser.add_argument("--sales", type=str, default=str(REFERENCE_INPUTS.annual_sales), help="Annual sales, e.g. '$1,200,000'")
    parser.add_argument("--food", type=str, default=str(REFERENCE_INPUTS.food_cost_percent), help="Food cost %% of sales")
    parser.add_argument("--labor", type=str, default=str(REFERENCE_INPUTS.labor_cost_percent), help="Labor cost %% of sales")
    parser.add_argument("--occupancy", type=str, default=str(REFERENCE_INPUTS.occupancy_cost_percent), help="Occupancy cost %% of sales")
    parser.add_argument("--other", type=str, default=str(REFERENCE_INPUTS.other_expenses_percent), help="Other expenses %% of sales")
    parser.add_argument("--owner-comp", type=str, default=str(REFERENCE_INPUTS.owner_compensation), help="Annual owner compensation")
    parser.add_argument("--roi", type=str, default=str(REFERENCE_INPUTS.desired_roi), help="Desired ROI %%")
    parser.add_argument("--json", action="store_true", help="Print the full {inputs, results} payload as JSON")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    inputs = build_calculation_inputs(
        {
            "annualSales": args.sales,
            "foodCostPercent": args.food,
            "laborCostPercent": args.labor,
            "occupancyCostPercent": args.occupancy,
            "otherExpensesPercent": args.other,
            "ownerCompensation": args.owner_comp,
            "desiredROI": args.roi,
        }
    )

    validation = validate_inputs(inputs)
    if not validation.valid:
        print("Warning: inputs fall outside typical ranges:")
        for error in validation.errors:
            print(f"- {error}")
        print()

    result = compute_valuation(inputs)

    if args.json:
        print(json.dumps(calculation_payload(inputs, result), indent=2))
        return

    print("Valuation Summary:")
    print(f"Gross Profit:      {format_currency(result.gross_profit)}")
    print(f"Operating Profit:  {format_currency(result.operating_profit)}")
    print(f"Cash Flow (SDE):   {format_currency(result.cash_flow)}")
    print(f"Estimated Value:   {format_currency(result.estimated_value)}")
    print(f"Profit Margin:     {format_percent(result.profit_margin)}")
    print(f"Health:            {result.health_status} ({result.health_score:.1f} / 120)")


if __name__ == "__main__":
    main()
