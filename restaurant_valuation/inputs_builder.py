"""
Inputs Builder
==============

Canonical logic for preparing ``CalculationInputs`` from a raw record (a
posted form, a stored calculation, CLI arguments) and optional user edits.

This module is the **single source of truth** for:
- Accepting both camelCase (``annualSales``) and snake_case (``annual_sales``) keys
- Coercing user-typed strings such as ``"$1,200,000"`` or ``"32%"``
- Falling back to the default form values for anything missing
- Merging user overrides over the raw record

The service, the CLI and tests all go through ``build_calculation_inputs()``
so inputs are prepared identically at every call-site.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping, Optional

from .engine import REFERENCE_INPUTS, CalculationInputs, InputError
from .formatting import parse_currency

logger = logging.getLogger(__name__)

# snake_case field -> camelCase key used by the browser form and stored records.
FIELD_ALIASES: Dict[str, str] = {
    "annual_sales": "annualSales",
    "food_cost_percent": "foodCostPercent",
    "labor_cost_percent": "laborCostPercent",
    "occupancy_cost_percent": "occupancyCostPercent",
    "other_expenses_percent": "otherExpensesPercent",
    "owner_compensation": "ownerCompensation",
    "desired_roi": "desiredROI",
}

# Canonical defaults. The calculator opens on the reference scenario.
DEFAULT_VALUES: Dict[str, float] = {name: getattr(REFERENCE_INPUTS, name) for name in FIELD_ALIASES}


def coerce_number(field_name: str, value: Any) -> float:
    """Turn a form value into a float; strings go through ``parse_currency``."""
    # bool is an int subclass, but True is never a sensible dollar amount.
    if isinstance(value, bool):
        raise InputError(f"{field_name} must be a number, got a boolean")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf
        if not math.isfinite(number):
            raise InputError(f"{field_name} must be a finite number, got {value!r}")
        return number
    if isinstance(value, str):
        return parse_currency(value.replace("%", ""))
    raise InputError(f"{field_name} must be a number or numeric string, got {type(value).__name__}")


def _lookup(source: Mapping[str, Any], name: str) -> Optional[Any]:
    if name in source:
        return source[name]
    alias = FIELD_ALIASES[name]
    if alias in source:
        return source[alias]
    return None


def build_calculation_inputs(
    data: Mapping[str, Any],
    overrides: Optional[Mapping[str, Any]] = None,
) -> CalculationInputs:
    """
    Merge a raw input record with user overrides.

    Parameters
    ----------
    data : mapping
        Raw record, e.g. the ``inputs`` object of a stored calculation.
        Keys may be camelCase or snake_case.
    overrides : mapping, optional
        Edits that take precedence over *data*.

    Returns
    -------
    CalculationInputs
        Fully-populated value object ready for ``compute_valuation()``.

    Raises
    ------
    InputError
        If a value is neither a number nor a string, or is a non-finite number.
    """
    if overrides is None:
        overrides = {}

    values: Dict[str, float] = {}
    for name in FIELD_ALIASES:
        raw = _lookup(overrides, name)
        if raw is None:
            raw = _lookup(data, name)
        if raw is None:
            logger.debug(f"{name} missing, using default {DEFAULT_VALUES[name]}")
            values[name] = DEFAULT_VALUES[name]
            continue
        values[name] = coerce_number(name, raw)

    return CalculationInputs(**values)
