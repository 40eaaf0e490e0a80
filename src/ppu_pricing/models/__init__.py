"""Result models — pricing output contracts."""

from ppu_pricing.models.results import (
    CalculationResult,
    CostBreakdown,
    InputSummary,
    PricingDiagnostics,
    PricingReport,
    UsagePriceBreakdown,
)

__all__ = [
    "CalculationResult",
    "CostBreakdown",
    "InputSummary",
    "PricingDiagnostics",
    "PricingReport",
    "UsagePriceBreakdown",
]
