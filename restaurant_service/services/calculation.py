"""
Calculation Service
===================

Thin orchestration layer: prepare inputs via the shared
``build_calculation_inputs`` builder, run validation and the engine, and
return an API-friendly dict.

All input-preparation and computation logic lives in **restaurant_valuation**
so there is exactly one source of truth.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from restaurant_valuation import (
    ValidationResult,
    build_calculation_inputs,
    calculation_payload,
    compare_to_benchmarks,
    compute_valuation,
    validate_inputs,
)

logger = logging.getLogger(__name__)


class CalculationService:
    def __init__(self, strict_validation: bool = False):
        self.strict_validation = strict_validation

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        inputs = build_calculation_inputs(data)
        return validate_inputs(inputs)

    def calculate(self, data: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Orchestrates one calculation.

        1. Prepare CalculationInputs via the shared builder.
        2. Validate (advisory unless the service is strict).
        3. Run the engine.
        4. Return payload + validation + benchmark positions as a dict.
        """
        # 1. Build inputs via canonical builder (single source of truth)
        inputs = build_calculation_inputs(data, overrides)

        # 2. Validate
        validation = validate_inputs(inputs)
        if not validation.valid:
            if self.strict_validation:
                raise ValueError("; ".join(validation.errors))
            logger.info(f"Calculating despite {len(validation.errors)} validation error(s)")

        # 3. Run Engine
        results = compute_valuation(inputs)

        # 4. Return results (Dict for API)
        payload = calculation_payload(inputs, results)
        payload["validation"] = {"valid": validation.valid, "errors": list(validation.errors)}
        payload["benchmarks"] = [comparison.as_dict() for comparison in compare_to_benchmarks(inputs)]
        return payload
