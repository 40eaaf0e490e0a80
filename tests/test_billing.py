"""Tests for engine/billing.py — reported figures and PV diagnostics."""

from __future__ import annotations

import pytest

from ppu_pricing.config import PricingConstants, PricingInputs
from ppu_pricing.engine.billing import compute_diagnostics, project_billing, summarize_inputs


class TestProjectBilling:
    def test_reference_figures(self, inputs: PricingInputs):
        result = project_billing(inputs, 23.05)
        assert result.total_investment_cost == 37_000_000
        assert result.pay_per == "kg"
        assert result.cost_per_unit == 23.05
        assert result.total_usage_cost_per_asset == pytest.approx(22_128, rel=1e-12)
        assert result.additional_cost == pytest.approx(11_064, rel=1e-12)
        assert result.monthly_advance_payment_per_asset == pytest.approx(922, rel=1e-12)
        assert result.monthly_advance_payment_total == pytest.approx(922_000, rel=1e-12)

    def test_full_offloading_means_no_advance(self, make_inputs):
        inputs = make_inputs(expected_consumption=500, number_of_assets=3, utilization_risk_offloading=100)
        result = project_billing(inputs, 4.2)
        assert result.additional_cost == 0
        assert result.monthly_advance_payment_total == 0
        assert result.total_usage_cost_per_asset == pytest.approx(2_100, rel=1e-12)

    def test_no_offloading_advance_is_full_usage(self, make_inputs):
        inputs = make_inputs(expected_consumption=1_200, number_of_assets=2, utilization_risk_offloading=0)
        result = project_billing(inputs, 1.5)
        assert result.additional_cost == result.total_usage_cost_per_asset
        assert result.monthly_advance_payment_per_asset == pytest.approx(150, rel=1e-12)
        assert result.monthly_advance_payment_total == pytest.approx(300, rel=1e-12)

    def test_total_investment_not_amortized(self, make_inputs):
        inputs = make_inputs(
            number_of_assets=10,
            acquisition_cost_core=100, acquisition_cost_accessories=20, project_cost=3,
        )
        assert project_billing(inputs, 1.0).total_investment_cost == 123

    def test_echoes_free_text_metric(self, make_inputs):
        inputs = make_inputs(billing_metric="wash cycles")
        assert project_billing(inputs, 1.0).pay_per == "wash cycles"


class TestDiagnostics:
    def test_resale_present_values(self, inputs: PricingInputs, constants: PricingConstants):
        diag = compute_diagnostics(inputs, 23.05, constants)
        # Discounted one period at 4.8% × 5 years = 24%
        assert diag.pv_core_assets_resale_relative == pytest.approx(0.10 / 1.24, rel=1e-12)
        assert diag.pv_accessories_resale_relative == pytest.approx(0.25 / 1.24, rel=1e-12)
        assert diag.pv_core_assets_resale_absolute == pytest.approx(0.10 / 1.24 * 22_000_000, rel=1e-12)
        assert diag.pv_accessories_resale_absolute == pytest.approx(0.25 / 1.24 * 6_000_000, rel=1e-12)

    def test_worst_case_usage_payments(self, inputs: PricingInputs, constants: PricingConstants):
        diag = compute_diagnostics(inputs, 23.05, constants)
        assert diag.pv_usage_payments_worst_case_absolute == pytest.approx(1_406_490.375502, rel=1e-9)

    def test_diagnostics_are_not_part_of_result(self, inputs: PricingInputs):
        dumped = project_billing(inputs, 23.05).model_dump()
        assert not any(key.startswith("pv") for key in dumped)


class TestSummarizeInputs:
    def test_reference_summary(self, inputs: PricingInputs):
        summary = summarize_inputs(inputs)
        assert summary.total_acquisition_cost == 37_000_000
        assert summary.total_acquisition_cost_per_asset == 37_000
        # Maintenance only; consumables are billed per unit
        assert summary.operating_cost_per_asset == 1_400
