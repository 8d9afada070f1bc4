from __future__ import annotations

from typing import Any

import yaml
from pydantic import ValidationError

from ria_app.domain.errors import PageSchemaError
from ria_app.domain.material import RawDispersionEntry, RawFormula, RawMaterial, RawTabulatedK, RawTabulatedN
from ria_app.domain.models import FORMULA_TYPES, DispersionData, Material, TabulatedK, TabulatedN, TabulatedNK
from ria_app.parsing.numeric import (
    parse_coefficients,
    parse_tabulated_2d,
    parse_tabulated_3d,
    parse_wavelength_range,
)


def parse_raw_material(text: str) -> RawMaterial:
    """Parse material-file YAML text against the raw record schema."""
    try:
        obj: Any = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises a bare ValueError for an impossible timestamp such as 2020-13-45.
        raise PageSchemaError(f"Material file is not valid YAML: {e}") from e
    if not isinstance(obj, dict):
        raise PageSchemaError(f"Material file must be a mapping, got {type(obj).__name__}")
    try:
        return RawMaterial.model_validate(obj)
    except ValidationError as e:
        raise PageSchemaError(f"Material file does not match the schema: {e}") from e


def to_dispersion_data(entry: RawDispersionEntry) -> DispersionData:
    """Convert one raw entry to its numeric form. Raises NumericParseError."""
    if isinstance(entry, RawFormula):
        cls = FORMULA_TYPES[entry.number - 1]
        return cls(
            wavelength_range=parse_wavelength_range(entry.wavelength_range),
            c=tuple(parse_coefficients(entry.coefficients)),
        )
    if isinstance(entry, RawTabulatedN):
        return TabulatedN(data=tuple(parse_tabulated_2d(entry.data)))
    if isinstance(entry, RawTabulatedK):
        return TabulatedK(data=tuple(parse_tabulated_2d(entry.data)))
    return TabulatedNK(data=tuple(parse_tabulated_3d(entry.data)))


def to_material(raw: RawMaterial, *, shelf: str, book: str, page: str) -> Material:
    """Assemble a Store item. Any failing entry fails the whole record."""
    return Material(
        shelf=shelf,
        book=book,
        page=page,
        comments=raw.comments,
        references=raw.references,
        data=tuple(to_dispersion_data(e) for e in raw.data),
    )
