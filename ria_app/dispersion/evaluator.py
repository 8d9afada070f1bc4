from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from ria_app.dispersion.formulas import FloatArray, evaluate
from ria_app.domain.errors import (
    ArityError,
    MissingComponentError,
    TabulatedInterpolationError,
    WavelengthRangeError,
)
from ria_app.domain.models import DispersionData, Material, Part, is_formula, part_of

__all__ = ["interpolate", "interpolate_array", "select_entry", "n", "k", "n_array", "k_array"]


def _check_range(entry: DispersionData, lam: FloatArray) -> None:
    lo, hi = entry.wavelength_range  # type: ignore[union-attr]
    # NaN compares false both ways and must count as outside.
    outside = ~((lam >= lo) & (lam <= hi))
    if bool(np.any(outside)):
        bad = float(np.atleast_1d(lam)[np.atleast_1d(outside)][0])
        raise WavelengthRangeError(bad, (lo, hi))


def interpolate_array(entry: DispersionData, lambda_um: ArrayLike) -> Tuple[FloatArray, Optional[FloatArray]]:
    """Evaluate one dispersion entry on a wavelength grid (μm).

    Returns (n, k). None of the formulas supply k, so k is None for them.
    Raises WavelengthRangeError if any wavelength is outside the entry's
    inclusive range, ArityError for a too-short coefficient list and
    TabulatedInterpolationError for tabulated entries.
    """
    if not is_formula(entry):
        raise TabulatedInterpolationError(f"Tabulated dispersion data ({entry.kind}) cannot be evaluated")
    lam = np.asarray(lambda_um, dtype=float)
    _check_range(entry, lam)
    c = entry.c  # type: ignore[union-attr]
    try:
        values = evaluate(entry.kind, lam, c)
    except IndexError as e:
        raise ArityError(f"{entry.kind} needs more than {len(c)} coefficients") from e
    return values, None


def interpolate(entry: DispersionData, wavelength_um: float) -> Tuple[float, Optional[float]]:
    """Scalar form of `interpolate_array`: (n, k or None) at one wavelength."""
    n_val, k_val = interpolate_array(entry, float(wavelength_um))
    return float(n_val), None if k_val is None else float(k_val)


def select_entry(material: Material, part: Part) -> DispersionData:
    """First entry supplying `part` ("real" or "imaginary"); "both" entries qualify for either."""
    for entry in material.data:
        if part_of(entry) in (part, "both"):
            return entry
    raise MissingComponentError(f"No {part} data found for {material.shelf} / {material.book} / {material.page}")


def n(material: Material, wavelength_um: float) -> float:
    """Real part of the refractive index at `wavelength_um`."""
    value, _ = interpolate(select_entry(material, "real"), wavelength_um)
    return value


def k(material: Material, wavelength_um: float) -> float:
    """Imaginary part of the refractive index at `wavelength_um`."""
    _, value = interpolate(select_entry(material, "imaginary"), wavelength_um)
    if value is None:
        raise MissingComponentError(f"No imaginary data found for {material.page}")
    return value


def n_array(material: Material, lambda_um: ArrayLike) -> FloatArray:
    values, _ = interpolate_array(select_entry(material, "real"), lambda_um)
    return values


def k_array(material: Material, lambda_um: ArrayLike) -> FloatArray:
    _, values = interpolate_array(select_entry(material, "imaginary"), lambda_um)
    if values is None:
        raise MissingComponentError(f"No imaginary data found for {material.page}")
    return values
