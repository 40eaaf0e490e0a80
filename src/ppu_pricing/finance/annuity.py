"""Annuity primitives — PMT and PV with spreadsheet sign convention.

Cash paid out is negative, cash received is positive, exactly like the
PMT/PV worksheet functions.  ``when`` selects the payment timing:
0 = end of period (ordinary annuity), 1 = start of period (annuity-due).

Key formulas (g = (1 + rate)^periods):
  PMT = rate / (g − 1) × −(pv × g + fv)        [÷ (1 + rate) if due]
  PV  = (fv + pmt × (1 − g)) / g               [÷ (1 + rate) if due]

With rate = 0 there is no compounding:
  PMT = −(pv + fv) / periods
  PV  = fv + pmt × periods

``pv`` is the quoting formula the resale and worst-case figures are
priced with; ``solve_pv`` is the textbook inverse of ``pmt``.
"""

from __future__ import annotations

import math

from ppu_pricing.exceptions import DegenerateMathError, PricingValidationError


def _check_args(rate: float, periods: float, when: int) -> None:
    if when not in (0, 1):
        raise PricingValidationError(f"when must be 0 (end) or 1 (start), got {when!r}")
    if periods == 0:
        raise DegenerateMathError("annuity term must be non-zero")
    if rate <= -1:
        raise DegenerateMathError(f"rate must be greater than -100%, got {rate!r}")


def _finite(value: float, name: str) -> float:
    if not math.isfinite(value):
        raise DegenerateMathError(f"{name} is not finite")
    return value


def _growth(rate: float, periods: float) -> float:
    try:
        return (1 + rate) ** periods
    except OverflowError as exc:
        raise DegenerateMathError("(1 + rate)^periods overflows") from exc


def pmt(
    rate: float,
    periods: float,
    present_value: float,
    future_value: float = 0.0,
    when: int = 0,
) -> float:
    """Periodic payment that takes ``present_value`` to ``future_value``.

    Parameters
    ----------
    rate : float
        Interest rate per period (e.g. 0.048 for 4.8%).
    periods : float
        Number of periods.  May be fractional; must be non-zero.
    present_value, future_value : float
        Balances at the start and end of the term (sign convention applies).
    when : int
        0 = payments at period end, 1 = payments at period start.

    Raises
    ------
    DegenerateMathError
        If ``periods`` is zero or the result is not finite.
    """
    _check_args(rate, periods, when)

    if rate == 0:
        return _finite(-(present_value + future_value) / periods, "PMT")

    growth = _growth(rate, periods)
    if growth == 1:
        raise DegenerateMathError("PMT has no solution: (1 + rate)^periods == 1")

    payment = rate / (growth - 1) * -(present_value * growth + future_value)
    if when == 1:
        payment /= 1 + rate
    return _finite(payment, "PMT")


def pv(
    rate: float,
    periods: float,
    payment: float,
    future_value: float = 0.0,
    when: int = 0,
) -> float:
    """Present value of ``periods`` payments of ``payment`` plus ``future_value``.

    Same argument conventions as :func:`pmt`.
    """
    _check_args(rate, periods, when)

    if rate == 0:
        return _finite(future_value + payment * periods, "PV")

    growth = _growth(rate, periods)
    value = (future_value + payment * (1 - growth)) / growth
    if when == 1:
        value /= 1 + rate
    return _finite(value, "PV")


def solve_pv(
    rate: float,
    periods: float,
    payment: float,
    future_value: float = 0.0,
    when: int = 0,
) -> float:
    """Present value that :func:`pmt` would amortize with ``payment``.

    The exact inverse of :func:`pmt`:
    ``solve_pv(r, n, pmt(r, n, p, f, w), f, w) == p`` up to rounding.
    :func:`pv` keeps the quoting formula the resale and worst-case figures
    were calibrated against, which is not an inverse of :func:`pmt`.
    """
    _check_args(rate, periods, when)

    if rate == 0:
        return _finite(-(future_value + payment * periods), "PV")

    growth = _growth(rate, periods)
    value = -(future_value + payment * (1 + rate * when) * (growth - 1) / rate) / growth
    return _finite(value, "PV")
