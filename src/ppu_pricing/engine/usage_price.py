"""Usage price — annual cost per asset → price per metered unit."""

from __future__ import annotations

import logging
import math

from ppu_pricing.config.pricing import PricingConstants, PricingInputs
from ppu_pricing.models.results import UsagePriceBreakdown

logger = logging.getLogger(__name__)


def ceil_to_cents(value: float) -> float:
    """Round up to the next whole cent.  Never rounds down."""
    return math.ceil(value * 100) / 100


def compute_usage_price(
    inputs: PricingInputs,
    subtotal_cost_absolute: float,
    constants: PricingConstants,
) -> UsagePriceBreakdown:
    """Blend per-unit cost, risk uplift and consumables into one unit price.

    Only ``utilization_risk_uplift_factor`` of the offloaded risk percentage
    is loaded onto the price.  Rounding happens once, on the sum.
    """
    base = subtotal_cost_absolute / inputs.expected_consumption
    risk_share = inputs.utilization_risk_offloading / 100 * constants.utilization_risk_uplift_factor
    uplifted = base * (1 + risk_share)
    consumables_term = inputs.consumables_cost * (1 + constants.uplift_on_consumables)

    unrounded = uplifted + consumables_term
    unit_price = ceil_to_cents(unrounded)

    logger.debug(
        "unit price: base=%r uplifted=%r consumables=%r unrounded=%r price=%r",
        base, uplifted, consumables_term, unrounded, unit_price,
    )

    return UsagePriceBreakdown(
        base_cost_per_unit=base,
        risk_uplifted_cost_per_unit=uplifted,
        consumables_term=consumables_term,
        unrounded_unit_price=unrounded,
        unit_price=unit_price,
    )
