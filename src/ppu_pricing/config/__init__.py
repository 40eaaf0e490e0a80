"""Configuration models — pricing inputs and policy constants."""

from ppu_pricing.config.pricing import PricingConstants, PricingInputs, parse_inputs

__all__ = [
    "PricingConstants",
    "PricingInputs",
    "parse_inputs",
]
