"""Engine — cost aggregation, usage pricing and billing projection."""

from ppu_pricing.engine.cost_aggregation import compute_cost_breakdown, compute_relative_factor
from ppu_pricing.engine.usage_price import ceil_to_cents, compute_usage_price
from ppu_pricing.engine.billing import compute_diagnostics, project_billing, summarize_inputs
from ppu_pricing.engine.orchestrator import compute, run_pricing, validate_inputs

__all__ = [
    "compute_relative_factor",
    "compute_cost_breakdown",
    "ceil_to_cents",
    "compute_usage_price",
    "project_billing",
    "compute_diagnostics",
    "summarize_inputs",
    # Entry points
    "compute",
    "run_pricing",
    "validate_inputs",
]
