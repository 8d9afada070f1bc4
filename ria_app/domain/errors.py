# """
# Error kinds raised while building a Store and while querying it.
#
# Build-time page errors (PageError and subclasses) are caught per page by the
# flattening engine. Everything under EvaluationError is surfaced to callers.
# """
from __future__ import annotations


class RiaError(Exception):
    """Base class for all errors raised by ria_app."""


class CatalogReadError(RiaError):
    """The catalog file itself cannot be read. Fatal for a build."""


class CatalogStructureError(RiaError):
    """The catalog document does not match the catalog schema. Fatal for a build."""


# --- build time, recovered per page -------------------------------------------------
class PageError(RiaError):
    """A single page could not be turned into a Store item."""


class PageReadError(PageError):
    """The material file referenced by a page cannot be read."""


class PageSchemaError(PageError):
    """The material file does not match the material record schema."""


class NumericParseError(PageError, ValueError):
    """A coefficient, range or tabulated text field is not numeric."""


# --- query time, always surfaced ----------------------------------------------------
class EvaluationError(RiaError):
    """A refractive index query failed."""


class WavelengthRangeError(EvaluationError, ValueError):
    """The wavelength lies outside the entry's validity range."""

    def __init__(self, wavelength: float, wavelength_range: tuple[float, float]) -> None:
        lo, hi = wavelength_range
        super().__init__(f"Wavelength {wavelength!r} is outside the valid range [{lo!r}, {hi!r}]")
        self.wavelength = wavelength
        self.wavelength_range = wavelength_range


class CapabilityError(EvaluationError):
    """The requested quantity cannot be produced from the available data."""


class MissingComponentError(CapabilityError):
    """No entry supplies the requested part (n or k) of the refractive index."""


class TabulatedInterpolationError(CapabilityError, NotImplementedError):
    """Tabulated dispersion data cannot be evaluated (interpolation is not implemented)."""


class ArityError(EvaluationError, IndexError):
    """A formula's coefficient list is shorter than the formula requires."""
