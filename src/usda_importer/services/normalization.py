"""Unit normalization to a per-100 g basis."""

import math

REFERENCE_GRAMS = 100.0


def per_100g_factor(basis_grams: float | None) -> float | None:
    """Return the factor converting a per-basis amount to per 100 g.

    Returns None when the basis is missing, non-positive or non-finite, or
    when it is so small that the factor itself overflows, so callers never
    receive an infinite or NaN factor.
    """
    if basis_grams is None or not math.isfinite(basis_grams) or basis_grams <= 0:
        return None
    factor = REFERENCE_GRAMS / basis_grams
    if not math.isfinite(factor):
        return None
    return factor


def normalize(raw_amount: float, basis_grams: float | None) -> float | None:
    """Convert an amount reported against basis_grams to an amount per 100 g.

    Returns None when there is no usable factor or the scaled amount is not
    finite.
    """
    factor = per_100g_factor(basis_grams)
    if factor is None:
        return None
    amount = raw_amount * factor
    if not math.isfinite(amount):
        return None
    return amount


def normalize_survey(raw_amount: float, basis_grams: float | None = None) -> float:
    """Survey amounts are already per 100 g; the basis is ignored."""
    return raw_amount


def usable_serving_size(serving_size_grams: float | None) -> float:
    """Return the serving size in grams, or 0.0 when it is missing or invalid."""
    if (
        serving_size_grams is None
        or not math.isfinite(serving_size_grams)
        or serving_size_grams <= 0
    ):
        return 0.0
    return serving_size_grams


def serving_size_multiplicand(serving_size_grams: float | None) -> float:
    """Return the factor that turns per-100 g values back into per-serving values."""
    return usable_serving_size(serving_size_grams) / REFERENCE_GRAMS
