"""Cost aggregation — annual cost per asset the provider must recover.

Each one-time capital outlay (core assets, accessories, project cost) is
turned into a unit-less *relative* amortization factor with PMT, then
scaled by the outlay per asset.  The same factor shape is reused for all
three outlays; only the residual value differs.

Key formulas:
  term_years = minimum_usage_term / 12
  relative   = PMT(r, term_years, −(1 + term_years × margin), residual% / 100)
  absolute   = relative × outlay / number_of_assets
  operating  = (maint_core + maint_accessories + consumables) / number_of_assets
  subtotal   = core + accessories + project + operating
"""

from __future__ import annotations

import logging

from ppu_pricing.config.pricing import PricingConstants, PricingInputs
from ppu_pricing.finance.annuity import pmt
from ppu_pricing.models.results import CostBreakdown

logger = logging.getLogger(__name__)


def compute_relative_factor(
    term_months: float,
    residual_value_pct: float,
    constants: PricingConstants,
) -> float:
    """Annual payment per currency unit of principal, net of resale.

    The provider fronts 1 unit of capital plus a margin proportional to the
    term, and gets ``residual_value_pct`` percent of it back at term end.
    """
    term_years = term_months / 12
    principal_with_margin = -(1 + term_years * constants.margin_expectation)
    return pmt(
        constants.market_interest_rate,
        term_years,
        principal_with_margin,
        residual_value_pct / 100,
        0,
    )


def compute_cost_breakdown(inputs: PricingInputs, constants: PricingConstants) -> CostBreakdown:
    """Aggregate amortized capital and operating cost into a per-asset subtotal."""
    n = inputs.number_of_assets
    term = inputs.minimum_usage_term

    core_relative = compute_relative_factor(term, inputs.residual_value_core, constants)
    core_absolute = core_relative * (inputs.acquisition_cost_core / n)

    accessories_relative = compute_relative_factor(term, inputs.residual_value_accessories, constants)
    accessories_absolute = accessories_relative * (inputs.acquisition_cost_accessories / n)

    # No resale for project / integration cost
    project_relative = compute_relative_factor(term, 0.0, constants)
    project_absolute = project_relative * (inputs.project_cost / n)

    operating_absolute = (
        inputs.maintenance_fee_core
        + inputs.maintenance_fee_accessories
        + inputs.consumables_cost
    ) / n

    subtotal = core_absolute + accessories_absolute + project_absolute + operating_absolute

    logger.debug("core assets: relative=%r absolute=%r", core_relative, core_absolute)
    logger.debug("accessories: relative=%r absolute=%r", accessories_relative, accessories_absolute)
    logger.debug("project cost: relative=%r absolute=%r", project_relative, project_absolute)
    logger.debug("operating cost per asset=%r subtotal per asset=%r", operating_absolute, subtotal)

    return CostBreakdown(
        core_assets_relative=core_relative,
        core_assets_absolute=core_absolute,
        accessories_relative=accessories_relative,
        accessories_absolute=accessories_absolute,
        project_cost_relative=project_relative,
        project_cost_absolute=project_absolute,
        operating_cost_absolute=operating_absolute,
        subtotal_cost_absolute=subtotal,
    )
