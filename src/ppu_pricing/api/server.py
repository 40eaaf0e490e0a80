"""FastAPI server — HTTP front for the pay-per-use pricing engine.

Run with:
    uvicorn ppu_pricing.api.server:app --reload --port 8000

Or:
    python -m ppu_pricing.api.server

Endpoints:
    GET  /health                 — liveness probe
    GET  /api/constants          — the active commercial policy constants
    POST /api/calculate          — price one offer → CalculationResult
    POST /api/calculate/report   — price one offer → full PricingReport
    POST /api/preview            — per-asset input summary for the form
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ppu_pricing.config.pricing import PricingConstants, parse_inputs
from ppu_pricing.engine.billing import summarize_inputs
from ppu_pricing.engine.orchestrator import run_pricing
from ppu_pricing.exceptions import PricingValidationError

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Pay-Per-Use Pricing API",
    version="1.0",
    description=(
        "Prices a pay-per-use equipment leasing offer: amortizes capital "
        "outlays over the minimum usage term, derives a price per metered "
        "unit and the resulting monthly advance payments."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

CONSTANTS = PricingConstants()

_REQUIRED_FIELDS = (
    ("numberOfAssets", "number_of_assets"),
    ("expectedConsumption", "expected_consumption"),
)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def _missing_required(payload: dict[str, Any]) -> bool:
    """True if fleet size or consumption is absent, zero or empty."""
    for camel, snake in _REQUIRED_FIELDS:
        if not payload.get(camel, payload.get(snake)):
            return True
    return False


def _price(payload: dict[str, Any], include_diagnostics: bool) -> JSONResponse | dict[str, Any]:
    """Validate, price and serialize; map failures to 400 / 500."""
    if _missing_required(payload):
        return _error(400, "Missing required fields")

    try:
        inputs = parse_inputs(payload)
        report = run_pricing(inputs, CONSTANTS, include_diagnostics=include_diagnostics)
    except PricingValidationError as exc:
        logger.info("rejected pricing request: %s", exc)
        return _error(400, "Invalid input", details=exc.errors)
    except Exception:
        logger.exception("pricing calculation failed")
        return _error(500, "Calculation failed")

    if include_diagnostics:
        return report.model_dump(mode="json")
    return report.result.model_dump(mode="json")


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/api/constants")
def get_constants():
    """Commercial policy constants every calculation is priced with."""
    return CONSTANTS.model_dump()


@app.post("/api/calculate")
def calculate(payload: dict[str, Any] = Body(...)):
    """Price one offer.

    Body is a PricingInputs object with camelCase fields, e.g.
    ```json
    {"billingMetric": "kg", "expectedConsumption": 960, "numberOfAssets": 1000,
     "utilizationRiskOffloading": 50, "acquisitionCostCore": 22000000,
     "minimumUsageTerm": 60, "residualValueCore": 10}
    ```
    Returns a CalculationResult; 400 on bad input, 500 if the calculation fails.
    """
    return _price(payload, include_diagnostics=False)


@app.post("/api/calculate/report")
def calculate_report(payload: dict[str, Any] = Body(...)):
    """Same as /api/calculate but returns every intermediate figure,
    including the present-value diagnostics that the result omits."""
    return _price(payload, include_diagnostics=True)


@app.post("/api/preview")
def preview(payload: dict[str, Any] = Body(...)):
    """Per-asset acquisition and maintenance cost, shown while the form is filled in."""
    if _missing_required(payload):
        return _error(400, "Missing required fields")
    try:
        inputs = parse_inputs(payload)
    except PricingValidationError as exc:
        return _error(400, "Invalid input", details=exc.errors)
    return summarize_inputs(inputs).model_dump(mode="json")


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "ppu_pricing.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
