from __future__ import annotations

from ria_app.domain.errors import NumericParseError


def _to_float(token: str, what: str) -> float:
    # float() also accepts digit separators ("1_0"); data files never use them.
    if "_" in token:
        raise NumericParseError(f"Cannot parse {what} {token!r} as a number")
    try:
        return float(token)
    except ValueError as e:
        raise NumericParseError(f"Cannot parse {what} {token!r} as a number") from e


def _row(line: str, names: tuple[str, ...]) -> tuple[float, ...]:
    tokens = line.split()
    if len(tokens) < len(names):
        missing = names[len(tokens)]
        raise NumericParseError(f"Cannot find {missing} in row {line!r}")
    return tuple(_to_float(tok, name) for tok, name in zip(tokens, names))


def parse_coefficients(text: str) -> list[float]:
    """Whitespace-separated floats, e.g. ``"0 1.03961212 0.00600069867"``."""
    return [_to_float(tok, "coefficient") for tok in text.split()]


def parse_wavelength_range(text: str) -> tuple[float, float]:
    """First two whitespace-separated tokens as (min, max); extra tokens are ignored.

    No check that min <= max.
    """
    lo, hi = _row(text, ("minimum wavelength", "maximum wavelength"))
    return lo, hi


def parse_tabulated_2d(text: str) -> list[tuple[float, float]]:
    """One (wavelength, value) row per line."""
    rows = []
    for line in text.splitlines():
        wl, value = _row(line, ("wavelength", "refractive index value"))
        rows.append((wl, value))
    return rows


def parse_tabulated_3d(text: str) -> list[tuple[float, float, float]]:
    """One (wavelength, n, k) row per line."""
    rows = []
    for line in text.splitlines():
        wl, n, k = _row(line, ("wavelength", "real refractive index value", "imaginary refractive index value"))
        rows.append((wl, n, k))
    return rows
