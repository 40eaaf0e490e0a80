"""Result types — the contract between engine, API and callers.

``CalculationResult`` is the external contract; its camelCase JSON shape
must stay interchangeable with the existing form and request handler.
Everything else here is an intermediate record that the engine exposes for
tracing and reporting but that callers are free to ignore.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ppu_pricing.config.pricing import PricingConstants, PricingInputs


class _Record(BaseModel):
    """Immutable record, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Cost aggregation
# ═══════════════════════════════════════════════════════════════════════════

class CostBreakdown(_Record):
    """Annual cost the provider must recover per asset.

    Key formula:
      relative = PMT(r, term_years, −(1 + term_years × margin), residual%/100)
      absolute = relative × outlay / number_of_assets
      subtotal = Σ absolutes + operating cost per asset
    """

    core_assets_relative: float
    """Unit-less amortization factor for core assets."""
    core_assets_absolute: float
    """Annual per-asset cost of core assets."""

    accessories_relative: float
    accessories_absolute: float

    project_cost_relative: float
    """Factor with zero residual: project cost has no resale."""
    project_cost_absolute: float

    operating_cost_absolute: float
    """(maintenance core + maintenance accessories + consumables) / assets.
    Consumables is a per-unit rate summed into an annual figure; kept as-is."""

    subtotal_cost_absolute: float
    """Full annual cost per asset, independent of consumption."""


# ═══════════════════════════════════════════════════════════════════════════
# Usage price
# ═══════════════════════════════════════════════════════════════════════════

class UsagePriceBreakdown(_Record):
    """Components of the price per metered unit."""

    base_cost_per_unit: float
    """subtotal / expected_consumption."""
    risk_uplifted_cost_per_unit: float
    """base × (1 + offloading%/100 × uplift factor)."""
    consumables_term: float
    """consumables_cost × (1 + uplift on consumables)."""
    unrounded_unit_price: float
    unit_price: float
    """Ceiled to the next whole cent, exactly once."""


# ═══════════════════════════════════════════════════════════════════════════
# Billing
# ═══════════════════════════════════════════════════════════════════════════

class CalculationResult(_Record):
    """Externally reported figures for one pricing request."""

    total_investment_cost: float
    pay_per: str
    cost_per_unit: float
    total_usage_cost_per_asset: float
    additional_cost: float
    monthly_advance_payment_per_asset: float
    monthly_advance_payment_total: float


class PricingDiagnostics(_Record):
    """Present-value figures computed alongside the price but not reported.

    Resale PVs discount the residual value over the whole term at a
    simple (non-compounded) rate of ``market_rate × term_years``.
    """

    pv_core_assets_resale_relative: float
    pv_core_assets_resale_absolute: float
    pv_accessories_resale_relative: float
    pv_accessories_resale_absolute: float
    pv_usage_payments_worst_case_absolute: float


class InputSummary(_Record):
    """Per-asset figures shown next to the input form while typing."""

    total_acquisition_cost: float
    total_acquisition_cost_per_asset: float
    operating_cost_per_asset: float
    """Maintenance fees only; consumables are billed per unit."""


class PricingReport(_Record):
    """Everything one pricing run produced, for audit and debugging."""

    inputs: PricingInputs
    constants: PricingConstants
    costs: CostBreakdown
    usage_price: UsagePriceBreakdown
    result: CalculationResult
    diagnostics: PricingDiagnostics | None = None
