"""Billing projection — unit price → reported customer cash flows.

  total_investment     = core + accessories + project   (fleet-wide)
  usage_cost_per_asset = unit_price × consumption
  additional_cost      = usage_cost_per_asset × (1 − offloading%/100)
  monthly_per_asset    = additional_cost / 12
  monthly_total        = monthly_per_asset × number_of_assets

``additional_cost`` is the customer's risk-retained share: billed as a
monthly advance regardless of actual consumption.
"""

from __future__ import annotations

import logging

from ppu_pricing.config.pricing import PricingConstants, PricingInputs
from ppu_pricing.finance.annuity import pv
from ppu_pricing.models.results import CalculationResult, InputSummary, PricingDiagnostics

logger = logging.getLogger(__name__)


def project_billing(inputs: PricingInputs, unit_price: float) -> CalculationResult:
    """Derive the externally reported figures from the unit price."""
    total_investment = (
        inputs.acquisition_cost_core
        + inputs.acquisition_cost_accessories
        + inputs.project_cost
    )
    usage_cost_per_asset = unit_price * inputs.expected_consumption
    additional_cost = (
        unit_price * inputs.expected_consumption
        * (1 - inputs.utilization_risk_offloading / 100)
    )
    monthly_per_asset = additional_cost / 12

    return CalculationResult(
        total_investment_cost=total_investment,
        pay_per=inputs.billing_metric,
        cost_per_unit=unit_price,
        total_usage_cost_per_asset=usage_cost_per_asset,
        additional_cost=additional_cost,
        monthly_advance_payment_per_asset=monthly_per_asset,
        monthly_advance_payment_total=monthly_per_asset * inputs.number_of_assets,
    )


def compute_diagnostics(
    inputs: PricingInputs,
    unit_price: float,
    constants: PricingConstants,
) -> PricingDiagnostics:
    """Present-value figures that are computed but not part of the result.

    Resale values are discounted as one period at ``r × term_years``.  The
    worst-case usage PV combines the guaranteed monthly advances (annuity-due
    over ``term`` periods) with the offloaded remainder received at term end,
    both net of consumables.  Both formulas are kept exactly as quoted,
    including the annual rate applied per month in the advance annuity.
    """
    r = constants.market_interest_rate
    term_months = inputs.minimum_usage_term
    term_years = term_months / 12
    consumption = inputs.expected_consumption
    n = inputs.number_of_assets
    offloaded = inputs.utilization_risk_offloading / 100
    retained = 1 - offloaded
    consumables_uplifted = inputs.consumables_cost * (1 + constants.uplift_on_consumables)

    core_relative = pv(r * term_years, 1, 0, inputs.residual_value_core / 100, 0)
    accessories_relative = pv(r * term_years, 1, 0, inputs.residual_value_accessories / 100, 0)

    guaranteed_monthly = (
        ((unit_price * consumption * retained) / 12) * n
        - (consumption / 12 * n * retained * consumables_uplifted)
    )
    offloaded_at_term_end = (
        unit_price * consumption
        - unit_price * consumption * retained
        - consumption * n * offloaded * consumables_uplifted
    )
    worst_case = (
        -pv(r, term_months, guaranteed_monthly, 0, 1)
        + pv(r * term_years, 1, offloaded_at_term_end, 0, 0)
    )

    logger.debug(
        "resale pv: core=%r accessories=%r worst-case usage pv=%r",
        core_relative, accessories_relative, worst_case,
    )

    return PricingDiagnostics(
        pv_core_assets_resale_relative=core_relative,
        pv_core_assets_resale_absolute=core_relative * inputs.acquisition_cost_core,
        pv_accessories_resale_relative=accessories_relative,
        pv_accessories_resale_absolute=accessories_relative * inputs.acquisition_cost_accessories,
        pv_usage_payments_worst_case_absolute=worst_case,
    )


def summarize_inputs(inputs: PricingInputs) -> InputSummary:
    """Per-asset acquisition and maintenance figures for the input form."""
    total_acquisition = (
        inputs.acquisition_cost_core
        + inputs.acquisition_cost_accessories
        + inputs.project_cost
    )
    return InputSummary(
        total_acquisition_cost=total_acquisition,
        total_acquisition_cost_per_asset=total_acquisition / inputs.number_of_assets,
        operating_cost_per_asset=(
            inputs.maintenance_fee_core + inputs.maintenance_fee_accessories
        ) / inputs.number_of_assets,
    )
