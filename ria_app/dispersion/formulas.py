r"""
Closed-form dispersion formulas of the refractiveindex.info database.

Each function takes the wavelength λ in μm (float or ndarray) and the
coefficient sequence c = (c0, c1, ...) and returns the real refractive index n.
Coefficients are read at fixed offsets, so a sequence shorter than the formula
needs raises IndexError. The validity range is checked by the caller.

    1  Sellmeier        n² = 1 + c0 + Σ c[i] λ² / (λ² − c[i+1]²)               i = 1, 3, 5, ...
    2  Sellmeier-2      n² = 1 + c0 + Σ c[i] λ² / (λ² − c[i+1])
    3  Polynomial       n² = c0 + Σ c[i] λ^c[i+1]
    4  RI.INFO          n² = c0 + Σ_{i=1,5} c[i] λ^c[i+1] / (λ² − c[i+2]^c[i+3]) + Σ_{i≥9} c[i] λ^c[i+1]
    5  Cauchy           n  = c0 + Σ c[i] λ^c[i+1]
    6  Gases            n  = 1 + c0 + Σ c[i] / (c[i+1] − λ⁻²)
    7  Herzberger       n  = c0 + c1/(λ²−0.028) + c2/(λ²−0.028)² + Σ_{i≥3, odd} c[i] λ^(i−1)
    8  Retro            s = c0 + c1 λ²/(λ²−c2) + c3 λ²;  n² = (2s + 1)/(1 − s)
    9  Exotic           n² = c0 + c1/(λ²−c2) + c3 (λ−c4)/((λ−c4)² + c5)

A negative n² yields NaN rather than an exception.
"""
from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

FloatArray = NDArray[np.float64]
FormulaFn = Callable[[FloatArray, Sequence[float]], FloatArray]

# Herzberger pole position, λ0² = 0.028 μm²
HERZBERGER_L0_SQ = 0.028


def _sqrt(x: FloatArray) -> FloatArray:
    with np.errstate(invalid="ignore"):
        return np.sqrt(x)


def _pairs(c: Sequence[float], start: int = 1, stride: int = 2) -> range:
    return range(start, len(c), stride)


def sellmeier(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    lam2 = lam**2
    acc = np.zeros_like(lam2)
    for i in _pairs(c):
        acc += c[i] * lam2 / (lam2 - c[i + 1] ** 2)
    return _sqrt(1.0 + c[0] + acc)


def sellmeier2(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    lam2 = lam**2
    acc = np.zeros_like(lam2)
    for i in _pairs(c):
        acc += c[i] * lam2 / (lam2 - c[i + 1])
    return _sqrt(1.0 + c[0] + acc)


def polynomial(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    acc = np.zeros_like(lam)
    for i in _pairs(c):
        acc += c[i] * lam ** c[i + 1]
    return _sqrt(c[0] + acc)


def riinfo(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    lam2 = lam**2
    acc = np.zeros_like(lam2)
    # two resonance-like terms of four coefficients, then power terms of two
    for i in _pairs(c, 1, 4):
        if i > 5:
            break
        acc += c[i] * lam ** c[i + 1] / (lam2 - c[i + 2] ** c[i + 3])
    for i in _pairs(c, 9, 2):
        acc += c[i] * lam ** c[i + 1]
    return _sqrt(c[0] + acc)


def cauchy(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    acc = np.zeros_like(lam)
    for i in _pairs(c):
        acc += c[i] * lam ** c[i + 1]
    return c[0] + acc


def gases(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    inv2 = lam**-2
    acc = np.zeros_like(lam)
    for i in _pairs(c):
        acc += c[i] / (c[i + 1] - inv2)
    return 1.0 + c[0] + acc


def herzberger(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    lam2 = lam**2
    d = lam2 - HERZBERGER_L0_SQ
    acc = np.zeros_like(lam)
    for i in _pairs(c, 3, 2):
        acc += c[i] * lam ** (i - 1)
    return c[0] + c[1] / d + c[2] / d**2 + acc


def retro(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    lam2 = lam**2
    s = c[0] + c[1] * lam2 / (lam2 - c[2]) + c[3] * lam2
    return _sqrt((2.0 * s + 1.0) / (1.0 - s))


def exotic(lam: FloatArray, c: Sequence[float]) -> FloatArray:
    lam2 = lam**2
    dl = lam - c[4]
    return _sqrt(c[0] + c[1] / (lam2 - c[2]) + c[3] * dl / (dl**2 + c[5]))


FORMULAS: dict[str, FormulaFn] = {
    "Formula1": sellmeier,
    "Formula2": sellmeier2,
    "Formula3": polynomial,
    "Formula4": riinfo,
    "Formula5": cauchy,
    "Formula6": gases,
    "Formula7": herzberger,
    "Formula8": retro,
    "Formula9": exotic,
}


def evaluate(kind: str, lambda_um: ArrayLike, c: Sequence[float]) -> FloatArray:
    """Evaluate formula `kind` ("Formula1".."Formula9") without a range check."""
    lam = np.asarray(lambda_um, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.asarray(FORMULAS[kind](lam, c), dtype=float)
