"""Pricing inputs and the fixed commercial policy constants."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ppu_pricing.exceptions import PricingValidationError


class PricingConstants(BaseModel):
    """Commercial terms of the pay-per-use product.

    These are policy, not request inputs: changing one changes the product
    for every customer.  Passed explicitly into the engine so that tests can
    vary them without touching engine code.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )

    market_interest_rate: float = Field(
        default=0.048, ge=0,
        description="Annual market interest rate used for amortization (4.80%).",
    )
    margin_expectation: float = Field(
        default=0.015, ge=0,
        description="Provider margin per year of term, added on top of the principal (1.50%).",
    )
    utilization_risk_uplift_factor: float = Field(
        default=0.5, ge=0,
        description="Share of the offloaded utilization risk loaded onto the unit price.",
    )
    uplift_on_consumables: float = Field(
        default=0.02, ge=0,
        description="Markup applied to consumables cost per metered unit (2.00%).",
    )


class PricingInputs(BaseModel):
    """One pricing request.

    Attribute names are snake_case; the JSON contract is camelCase
    (``numberOfAssets``, ``minimumUsageTerm`` ...).  Either spelling is
    accepted on input.  Percentages are plain numbers 0–100, currency is in
    the caller's native unit, the term is in months.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )

    # --- Usage ---
    billing_metric: str = Field(
        min_length=1,
        description="Metered unit the customer pays per: hours, kg, l, kWh or free text.",
    )
    expected_consumption: float = Field(
        gt=0, description="Expected metered units per asset per year.",
    )
    number_of_assets: int = Field(
        gt=0, strict=True,
        description="Fleet size. Whole numbers only; booleans and floats are rejected.",
    )
    geography: str = Field(default="", description="Deployment region (informational).")
    utilization_risk_offloading: float = Field(
        default=0.0, ge=0, le=100,
        description="Percent of underutilization risk the provider absorbs.",
    )

    # --- Capital outlay (fleet-wide) ---
    acquisition_cost_core: float = Field(default=0.0, ge=0, description="Core assets purchase cost.")
    acquisition_cost_accessories: float = Field(default=0.0, ge=0, description="Accessories purchase cost.")
    project_cost: float = Field(default=0.0, ge=0, description="Project / integration cost (no resale).")

    # --- Term & residuals ---
    minimum_usage_term: float = Field(gt=0, description="Minimum usage term (months).")
    residual_value_core: float = Field(
        default=0.0, description="Core resale value at term end, percent of cost (typically 0–100).",
    )
    residual_value_accessories: float = Field(
        default=0.0, description="Accessories resale value at term end, percent of cost (typically 0–100).",
    )

    # --- Operating cost ---
    maintenance_fee_core: float = Field(default=0.0, ge=0, description="Annual maintenance, core assets.")
    maintenance_fee_accessories: float = Field(default=0.0, ge=0, description="Annual maintenance, accessories.")
    consumables_cost: float = Field(default=0.0, ge=0, description="Consumables cost per metered unit.")


def parse_inputs(payload: Mapping[str, Any]) -> PricingInputs:
    """Build ``PricingInputs`` from a JSON-shaped mapping.

    Raises
    ------
    PricingValidationError
        If any field is missing, mistyped, or out of range.
    """
    try:
        return PricingInputs.model_validate(dict(payload))
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in errors})
        raise PricingValidationError(
            f"Invalid pricing inputs: {', '.join(fields)}", errors=errors,
        ) from exc
