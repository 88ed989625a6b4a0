"""
API Router: all endpoint definitions for the calculator service.
"""

import logging

from fastapi import APIRouter, HTTPException

from restaurant_service.api.schemas import CalculationRequest, ValidationResponse
from restaurant_service.config import get_settings
from restaurant_service.services.calculation import CalculationService
from restaurant_valuation import INDUSTRY_BENCHMARKS

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/benchmarks",
    summary="Get Industry Benchmarks",
    description="Typical cost ratios and profit-margin tiers for full-service restaurants.",
    response_description="Benchmark ranges keyed by category.",
)
def get_benchmarks():
    return INDUSTRY_BENCHMARKS.as_dict()


@router.post(
    "/valuation/validate",
    summary="Validate Inputs",
    description="Checks calculator inputs against realistic ranges. Never blocks; returns the messages.",
    response_model=ValidationResponse,
)
def validate_calculation(request: CalculationRequest):
    try:
        service = CalculationService()
        result = service.validate(request.model_dump())
        return ValidationResponse(valid=result.valid, errors=result.errors)
    except ValueError as e:
        logger.warning(f"Bad Request validating inputs: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Internal Error validating inputs: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post(
    "/valuation/calculate",
    summary="Calculate Valuation",
    description="Runs the SDE valuation and health score. Validation errors are returned alongside results.",
    response_description="Inputs, results with expense breakdown, validation messages and benchmark positions.",
)
def calculate_valuation(request: CalculationRequest):
    try:
        service = CalculationService(strict_validation=get_settings().strict_validation)
        return service.calculate(request.model_dump())
    except ValueError as e:
        logger.warning(f"Bad Request calculating valuation: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Internal Error calculating valuation: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
