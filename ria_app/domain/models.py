#"""
#Domain models
#
#Pydantic v2 models for normalized dispersion data and Store items.
#Every variant carries a `kind` tag so all codecs round-trip the variant set.
#"""
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# --- Basic types ---
Row2 = tuple[float, float]  # (wavelength, value)
Row3 = tuple[float, float, float]  # (wavelength, n, k)
Part = Literal["real", "imaginary", "both"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")


# --- Tabulated data ---
class TabulatedN(_Frozen):
    kind: Literal["TabulatedN"] = "TabulatedN"
    data: tuple[Row2, ...]


class TabulatedK(_Frozen):
    kind: Literal["TabulatedK"] = "TabulatedK"
    data: tuple[Row2, ...]


class TabulatedNK(_Frozen):
    kind: Literal["TabulatedNK"] = "TabulatedNK"
    data: tuple[Row3, ...]


# --- Formula data: validity range (μm) and coefficients c0, c1, ... ---
class _Formula(_Frozen):
    wavelength_range: tuple[float, float]
    c: tuple[float, ...]


class Formula1(_Formula):
    """Sellmeier."""

    kind: Literal["Formula1"] = "Formula1"


class Formula2(_Formula):
    """Sellmeier-2."""

    kind: Literal["Formula2"] = "Formula2"


class Formula3(_Formula):
    """Polynomial."""

    kind: Literal["Formula3"] = "Formula3"


class Formula4(_Formula):
    """RefractiveIndex.INFO."""

    kind: Literal["Formula4"] = "Formula4"


class Formula5(_Formula):
    """Cauchy."""

    kind: Literal["Formula5"] = "Formula5"


class Formula6(_Formula):
    """Gases."""

    kind: Literal["Formula6"] = "Formula6"


class Formula7(_Formula):
    """Herzberger."""

    kind: Literal["Formula7"] = "Formula7"


class Formula8(_Formula):
    """Retro."""

    kind: Literal["Formula8"] = "Formula8"


class Formula9(_Formula):
    """Exotic."""

    kind: Literal["Formula9"] = "Formula9"


FORMULA_TYPES: tuple[type[_Formula], ...] = (
    Formula1,
    Formula2,
    Formula3,
    Formula4,
    Formula5,
    Formula6,
    Formula7,
    Formula8,
    Formula9,
)

DispersionData = Annotated[
    Union[
        TabulatedN,
        TabulatedK,
        TabulatedNK,
        Formula1,
        Formula2,
        Formula3,
        Formula4,
        Formula5,
        Formula6,
        Formula7,
        Formula8,
        Formula9,
    ],
    Field(discriminator="kind"),
]


def is_formula(entry: object) -> bool:
    return isinstance(entry, _Formula)


def part_of(entry: DispersionData) -> Part:
    """Which part of the refractive index an entry supplies.

    TabulatedN and every formula supply n, TabulatedK supplies k,
    TabulatedNK supplies both.
    """
    if isinstance(entry, TabulatedK):
        return "imaginary"
    if isinstance(entry, TabulatedNK):
        return "both"
    return "real"


# --- Store item ---
class Material(_Frozen):
    """One flattened catalog page: display names, free text and dispersion data."""

    shelf: str
    book: str
    page: str
    comments: str = ""
    references: str = ""
    data: tuple[DispersionData, ...] = ()

    def n(self, wavelength_um: float) -> float:
        from ria_app.dispersion.evaluator import n

        return n(self, wavelength_um)

    def k(self, wavelength_um: float) -> float:
        from ria_app.dispersion.evaluator import k

        return k(self, wavelength_um)
