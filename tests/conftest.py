"""Shared test fixtures — the reference pricing scenario."""

from __future__ import annotations

from typing import Callable

import pytest

from ppu_pricing.config import PricingConstants, PricingInputs


REFERENCE_PAYLOAD = {
    "billingMetric": "kg",
    "expectedConsumption": 960,
    "numberOfAssets": 1000,
    "geography": "DE",
    "utilizationRiskOffloading": 50,
    "acquisitionCostCore": 22_000_000,
    "acquisitionCostAccessories": 6_000_000,
    "projectCost": 9_000_000,
    "minimumUsageTerm": 60,
    "residualValueCore": 10,
    "residualValueAccessories": 25,
    "maintenanceFeeCore": 1_100_000,
    "maintenanceFeeAccessories": 300_000,
    "consumablesCost": 10,
}

# Smallest valid request: every cost defaults to zero.
MINIMAL_FIELDS = {
    "billing_metric": "hours",
    "expected_consumption": 1,
    "number_of_assets": 1,
    "minimum_usage_term": 60,
}


@pytest.fixture
def reference_payload() -> dict:
    return dict(REFERENCE_PAYLOAD)


@pytest.fixture
def inputs() -> PricingInputs:
    return PricingInputs(**REFERENCE_PAYLOAD)


@pytest.fixture
def constants() -> PricingConstants:
    return PricingConstants()


@pytest.fixture
def make_inputs() -> Callable[..., PricingInputs]:
    """Factory: minimal valid inputs with snake_case overrides."""

    def _make(**overrides) -> PricingInputs:
        return PricingInputs(**{**MINIMAL_FIELDS, **overrides})

    return _make


@pytest.fixture
def reference_with() -> Callable[..., PricingInputs]:
    """Factory: the reference scenario with camelCase overrides."""

    def _make(**overrides) -> PricingInputs:
        return PricingInputs(**{**REFERENCE_PAYLOAD, **overrides})

    return _make
