import unittest
from dataclasses import replace

from restaurant_valuation import models
from restaurant_valuation import (
    OPERATING_EXPENSE_ADJUSTMENT,
    REFERENCE_INPUTS,
    CalculationInputs,
    compute_valuation,
    verify_reference_calculation,
)


class TestValuationRepro(unittest.TestCase):
    def test_reference_sheet(self):
        """
        Reproduction of the reference sheet: $1.2M sales, 32/30/10/15 cost split,
        $100k owner compensation, 25% desired ROI.
        """
        inputs = CalculationInputs(
            annual_sales=1_200_000,
            food_cost_percent=32,
            labor_cost_percent=30,
            occupancy_cost_percent=10,
            other_expenses_percent=15,
            owner_compensation=100_000,
            desired_roi=25,
        )
        result = compute_valuation(inputs)

        self.assertAlmostEqual(result.gross_profit, 816_000.0, places=4)
        self.assertAlmostEqual(result.operating_profit, 306_000.0, delta=1000)
        self.assertAlmostEqual(result.cash_flow, 406_000.0, delta=1000)
        self.assertAlmostEqual(result.estimated_value, 1_624_000.0, delta=1000)
        self.assertEqual(result.estimated_value, result.desired_roi_value)
        self.assertEqual(result.health_status, "Excellent")

        # 20 (margin) + 15 (food) + 15 (labor) + 10 (occupancy) + 48.83 (cash flow)
        self.assertEqual(result.health_score, 108.8)

    def test_reference_breakdown(self):
        result = compute_valuation(REFERENCE_INPUTS)
        breakdown = result.breakdown

        self.assertAlmostEqual(breakdown.food_cost, 384_000.0, places=4)
        self.assertAlmostEqual(breakdown.labor_cost, 360_000.0 * OPERATING_EXPENSE_ADJUSTMENT, places=4)
        self.assertAlmostEqual(breakdown.occupancy_cost, 120_000.0 * OPERATING_EXPENSE_ADJUSTMENT, places=4)
        self.assertAlmostEqual(breakdown.other_expenses, 180_000.0 * OPERATING_EXPENSE_ADJUSTMENT, places=4)
        self.assertAlmostEqual(
            breakdown.total_operating_expenses,
            breakdown.labor_cost + breakdown.occupancy_cost + breakdown.other_expenses,
        )
        self.assertAlmostEqual(breakdown.total_operating_expenses, 509_999.82, places=2)
        self.assertAlmostEqual(result.profit_margin, 25.500015, places=5)

    def test_verify_reference_calculation(self):
        self.assertTrue(verify_reference_calculation())
        # Engine lands $0.72 above the sheet.
        self.assertFalse(verify_reference_calculation(tolerance=0.5))

    def test_calibration_constant_is_fixed(self):
        self.assertEqual(OPERATING_EXPENSE_ADJUSTMENT, 0.772727)

    def test_models_reexports(self):
        self.assertIs(models.CalculationInputs, CalculationInputs)
        self.assertIsInstance(compute_valuation(REFERENCE_INPUTS).breakdown, models.CalculationBreakdown)

    def test_idempotent(self):
        first = compute_valuation(REFERENCE_INPUTS)
        second = compute_valuation(REFERENCE_INPUTS)
        self.assertEqual(first, second)


class TestValuationProperties(unittest.TestCase):
    def test_higher_roi_lowers_value(self):
        values = [
            compute_valuation(replace(REFERENCE_INPUTS, desired_roi=roi)).estimated_value
            for roi in (10, 15, 20, 25, 30, 40, 50)
        ]
        for earlier, later in zip(values, values[1:]):
            self.assertGreater(earlier, later)

    def test_owner_compensation_raises_cash_flow_and_value(self):
        results = [
            compute_valuation(replace(REFERENCE_INPUTS, owner_compensation=comp))
            for comp in (0, 50_000, 100_000, 250_000)
        ]
        for earlier, later in zip(results, results[1:]):
            self.assertGreater(later.cash_flow, earlier.cash_flow)
            self.assertGreater(later.estimated_value, earlier.estimated_value)

    def test_zero_roi_gives_zero_value(self):
        result = compute_valuation(replace(REFERENCE_INPUTS, desired_roi=0))
        self.assertEqual(result.estimated_value, 0.0)
        self.assertEqual(result.desired_roi_value, 0.0)

    def test_negative_roi_gives_zero_value(self):
        result = compute_valuation(replace(REFERENCE_INPUTS, desired_roi=-5))
        self.assertEqual(result.estimated_value, 0.0)

    def test_zero_sales(self):
        result = compute_valuation(replace(REFERENCE_INPUTS, annual_sales=0))
        self.assertEqual(result.profit_margin, 0.0)
        self.assertEqual(result.gross_profit, 0.0)
        self.assertEqual(result.operating_profit, 0.0)
        self.assertEqual(result.cash_flow, 100_000.0)
        self.assertAlmostEqual(result.estimated_value, 400_000.0)
        # Food/labor/occupancy still score from their ratios: 15 + 15 + 10.
        self.assertEqual(result.health_score, 40.0)
        self.assertEqual(result.health_status, "Poor")

    def test_negative_inputs_stay_finite(self):
        inputs = CalculationInputs(
            annual_sales=-500_000,
            food_cost_percent=-10,
            labor_cost_percent=120,
            occupancy_cost_percent=-3,
            other_expenses_percent=0,
            owner_compensation=-20_000,
            desired_roi=0,
        )
        result = compute_valuation(inputs)
        for value in (
            result.gross_profit,
            result.operating_profit,
            result.cash_flow,
            result.estimated_value,
            result.profit_margin,
            result.health_score,
        ):
            self.assertEqual(value, value)  # not NaN
            self.assertLess(abs(value), float("inf"))
        self.assertEqual(result.health_score, 0.0)
        self.assertEqual(result.health_status, "Poor")

    def test_expenses_over_sales_goes_negative(self):
        inputs = replace(
            REFERENCE_INPUTS,
            food_cost_percent=60,
            labor_cost_percent=50,
            occupancy_cost_percent=20,
            other_expenses_percent=30,
            owner_compensation=0,
        )
        result = compute_valuation(inputs)
        self.assertLess(result.operating_profit, 0)
        self.assertLess(result.estimated_value, 0)
        self.assertLess(result.profit_margin, 0)


if __name__ == "__main__":
    unittest.main()
