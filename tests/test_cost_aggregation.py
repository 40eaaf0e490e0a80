"""Tests for engine/cost_aggregation.py."""

from __future__ import annotations

import pytest

from ppu_pricing.config import PricingConstants, PricingInputs
from ppu_pricing.engine.cost_aggregation import compute_cost_breakdown, compute_relative_factor
from ppu_pricing.finance.annuity import pmt


class TestRelativeFactor:
    def test_matches_pmt_with_margin(self, constants: PricingConstants):
        # 60 months → 5 years; principal −(1 + 5 × 1.5%) = −1.075
        expected = pmt(0.048, 5.0, -1.075, 0.10, 0)
        assert compute_relative_factor(60, 10, constants) == pytest.approx(expected, rel=1e-12)

    def test_reference_factors(self, constants: PricingConstants):
        assert compute_relative_factor(60, 10, constants) == pytest.approx(0.228756825853, abs=1e-11)
        assert compute_relative_factor(60, 25, constants) == pytest.approx(0.201501929568, abs=1e-11)
        assert compute_relative_factor(60, 0, constants) == pytest.approx(0.246926756709, abs=1e-11)

    def test_higher_residual_lowers_factor(self, constants: PricingConstants):
        assert compute_relative_factor(60, 50, constants) < compute_relative_factor(60, 10, constants)

    def test_zero_interest_rate(self):
        c = PricingConstants(market_interest_rate=0.0, margin_expectation=0.0)
        # No interest, no margin: recover (1 − residual) evenly over 4 years
        assert compute_relative_factor(48, 20, c) == pytest.approx(0.8 / 4, rel=1e-15)


class TestCostBreakdown:
    def test_absolutes_scale_per_asset(self, inputs: PricingInputs, constants: PricingConstants):
        costs = compute_cost_breakdown(inputs, constants)
        assert costs.core_assets_absolute == pytest.approx(costs.core_assets_relative * 22_000, rel=1e-15)
        assert costs.accessories_absolute == pytest.approx(costs.accessories_relative * 6_000, rel=1e-15)
        assert costs.project_cost_absolute == pytest.approx(costs.project_cost_relative * 9_000, rel=1e-15)

    def test_project_cost_has_no_residual(self, inputs: PricingInputs, constants: PricingConstants):
        costs = compute_cost_breakdown(inputs, constants)
        assert costs.project_cost_relative == compute_relative_factor(60, 0, constants)

    def test_operating_cost_includes_consumables(self, inputs: PricingInputs, constants: PricingConstants):
        """Consumables (a per-unit rate) is summed into the annual operating cost."""
        costs = compute_cost_breakdown(inputs, constants)
        assert costs.operating_cost_absolute == pytest.approx((1_100_000 + 300_000 + 10) / 1000, rel=1e-15)

    def test_subtotal_is_sum_of_components(self, inputs: PricingInputs, constants: PricingConstants):
        costs = compute_cost_breakdown(inputs, constants)
        component_sum = (
            costs.core_assets_absolute + costs.accessories_absolute
            + costs.project_cost_absolute + costs.operating_cost_absolute
        )
        assert costs.subtotal_cost_absolute == pytest.approx(component_sum, rel=1e-15)
        assert costs.subtotal_cost_absolute == pytest.approx(9864.0125565432, abs=1e-6)

    def test_no_capital_only_operating(self, make_inputs, constants: PricingConstants):
        inputs = make_inputs(
            expected_consumption=100, number_of_assets=4,
            maintenance_fee_core=400, maintenance_fee_accessories=0,
        )
        costs = compute_cost_breakdown(inputs, constants)
        assert costs.core_assets_absolute == 0
        assert costs.subtotal_cost_absolute == 100
