"""Pricing orchestrator — the single-pass pipeline.

  inputs → cost aggregation → usage price → billing projection → result

No state survives a call; every run is a pure function of its inputs and
the policy constants, so callers may run any number of them concurrently.

Entry points:
  - ``compute(inputs)``      → ``CalculationResult`` (the external contract)
  - ``run_pricing(inputs)``  → ``PricingReport`` with every intermediate figure
"""

from __future__ import annotations

import logging

from ppu_pricing.config.pricing import PricingConstants, PricingInputs
from ppu_pricing.engine.billing import compute_diagnostics, project_billing
from ppu_pricing.engine.cost_aggregation import compute_cost_breakdown
from ppu_pricing.engine.usage_price import compute_usage_price
from ppu_pricing.exceptions import ComputationError, PricingError, PricingValidationError
from ppu_pricing.models.results import CalculationResult, PricingReport

logger = logging.getLogger(__name__)

_STRICTLY_POSITIVE = ("number_of_assets", "expected_consumption", "minimum_usage_term")


def validate_inputs(inputs: PricingInputs) -> None:
    """Reject inputs that would divide by zero before any annuity math runs.

    ``PricingInputs`` already enforces this on construction; the check is
    repeated for instances built without validation (``model_construct``).
    """
    bad = []
    for name in _STRICTLY_POSITIVE:
        value = getattr(inputs, name, None)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not value > 0:
            bad.append(name)
    if bad:
        raise PricingValidationError(
            f"Must be strictly positive: {', '.join(bad)}",
            errors=[{"loc": (name,), "msg": "must be greater than 0", "type": "greater_than"} for name in bad],
        )


def run_pricing(
    inputs: PricingInputs,
    constants: PricingConstants | None = None,
    include_diagnostics: bool = False,
) -> PricingReport:
    """Run the full pipeline and keep every intermediate record.

    Raises
    ------
    PricingValidationError
        Inputs rejected before any computation.
    DegenerateMathError
        An annuity had no finite answer.
    ComputationError
        Anything else failed; the cause is chained but not exposed.
    """
    validate_inputs(inputs)
    constants = constants or PricingConstants()

    try:
        costs = compute_cost_breakdown(inputs, constants)
        usage_price = compute_usage_price(inputs, costs.subtotal_cost_absolute, constants)
        result = project_billing(inputs, usage_price.unit_price)
        diagnostics = (
            compute_diagnostics(inputs, usage_price.unit_price, constants)
            if include_diagnostics
            else None
        )
    except PricingError:
        raise
    except Exception as exc:
        raise ComputationError("Calculation failed") from exc

    logger.debug("priced %s: %r per %s", inputs.geography or "-", result.cost_per_unit, result.pay_per)

    return PricingReport(
        inputs=inputs,
        constants=constants,
        costs=costs,
        usage_price=usage_price,
        result=result,
        diagnostics=diagnostics,
    )


def compute(inputs: PricingInputs, constants: PricingConstants | None = None) -> CalculationResult:
    """Price one pay-per-use offer.  See :func:`run_pricing` for errors."""
    return run_pricing(inputs, constants).result
