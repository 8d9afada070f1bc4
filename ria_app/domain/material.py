"""
Raw material record schema: the per-page YAML file as published, before any
numeric parsing. Text fields are kept as text here; ``ria_app.parsing`` turns
them into numbers.
"""
from __future__ import annotations

import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _scalar_as_text(value: Any) -> Any:
    # YAML resolves single-token fields: "coefficients: 1.5" is a float,
    # "COMMENTS: 2020-01-01" a date, "REFERENCES: yes" a bool.
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


Text = Annotated[str, BeforeValidator(_scalar_as_text)]


class _RawEntry(BaseModel):
    model_config = ConfigDict(frozen=True)


class RawTabulatedN(_RawEntry):
    type: Literal["tabulated n"]
    data: Text


class RawTabulatedK(_RawEntry):
    type: Literal["tabulated k"]
    data: Text


class RawTabulatedNK(_RawEntry):
    type: Literal["tabulated nk"]
    data: Text


class RawFormula(_RawEntry):
    type: Literal[
        "formula 1",
        "formula 2",
        "formula 3",
        "formula 4",
        "formula 5",
        "formula 6",
        "formula 7",
        "formula 8",
        "formula 9",
    ]
    wavelength_range: Text
    coefficients: Text

    @property
    def number(self) -> int:
        return int(self.type.split()[1])


RawDispersionEntry = Annotated[
    Union[RawTabulatedN, RawTabulatedK, RawTabulatedNK, RawFormula],
    Field(discriminator="type"),
]


class RawMaterial(BaseModel):
    """One material file. ``SPECS`` is carried through untouched."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    references: Text = Field("", alias="REFERENCES")
    comments: Text = Field("", alias="COMMENTS")
    data: list[RawDispersionEntry] = Field(..., alias="DATA")
    specs: dict[str, Any] | None = Field(None, alias="SPECS")
