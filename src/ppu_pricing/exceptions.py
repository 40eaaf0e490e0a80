"""Error taxonomy for the pricing pipeline.

Every failure of a single calculation is terminal: the pipeline never
returns a partial result and never retries (the computation is
deterministic, so a retry would reproduce the same failure).

  PricingValidationError  — bad inputs, detected before any annuity math
  DegenerateMathError     — an annuity would divide by zero / go non-finite
  ComputationError        — anything else that broke inside the pipeline
"""

from __future__ import annotations

from typing import Any


class PricingError(Exception):
    """Base class for every pricing failure."""


class PricingValidationError(PricingError, ValueError):
    """A required field is missing, zero, or outside its allowed range."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class DegenerateMathError(PricingError, ArithmeticError):
    """An annuity computation has no finite answer (e.g. zero periods)."""


class ComputationError(PricingError):
    """Opaque catch-all: the calculation failed for an unexpected reason."""
