from __future__ import annotations

import pytest

from ria_app.domain.errors import NumericParseError, PageSchemaError
from ria_app.domain.models import Formula2, Formula5, TabulatedK, TabulatedNK
from ria_app.parsing.records import parse_raw_material, to_dispersion_data, to_material

from samples import AG_JOHNSON_YML, BK7_YML, BROKEN_COEFFICIENTS_YML, HIKARI_YML


def test_raw_record_keeps_text_and_specs() -> None:
    raw = parse_raw_material(BK7_YML)
    assert raw.comments == "lead containing glass type"
    assert [e.type for e in raw.data] == ["formula 2", "tabulated k"]
    assert raw.specs is not None and raw.specs["wavelength_vacuum"] is True


def test_comments_are_optional() -> None:
    raw = parse_raw_material(AG_JOHNSON_YML)
    assert raw.comments == ""


def test_entries_normalize_to_numbers() -> None:
    material = to_material(parse_raw_material(BK7_YML), shelf="glass", book="BK", page="N-BK7")
    formula, tab_k = material.data
    assert isinstance(formula, Formula2)
    assert formula.wavelength_range == (0.3, 2.5)
    assert formula.c[1] == pytest.approx(1.03961212)
    assert len(formula.c) == 7
    assert isinstance(tab_k, TabulatedK)
    assert tab_k.data[0] == (0.37, 5.4237e-06)

    nk = to_dispersion_data(parse_raw_material(AG_JOHNSON_YML).data[0])
    assert isinstance(nk, TabulatedNK)
    assert nk.data[-1] == (0.1953, 1.12, 1.255)


def test_formula_number_selects_variant() -> None:
    entry = to_dispersion_data(parse_raw_material(HIKARI_YML).data[0])
    assert isinstance(entry, Formula5)
    assert entry.c == (1.502787, 455872.4e-8, -2.0, 9.844856e-5, -4.0)


def test_single_number_coefficients_are_accepted() -> None:
    raw = parse_raw_material(
        "REFERENCES: r\nDATA:\n  - type: formula 5\n    wavelength_range: 0.3 2.5\n    coefficients: 1.5\n"
    )
    assert to_dispersion_data(raw.data[0]).c == (1.5,)  # type: ignore[union-attr]


def test_date_and_boolean_free_text_is_kept() -> None:
    raw = parse_raw_material(
        "REFERENCES: yes\nCOMMENTS: 2020-01-01\nDATA:\n  - type: formula 5\n    wavelength_range: 0.3 2.5\n    coefficients: 1.5\n"
    )
    assert raw.references == "true"
    assert raw.comments == "2020-01-01"


def test_bad_number_fails_whole_record() -> None:
    raw = parse_raw_material(BROKEN_COEFFICIENTS_YML)
    with pytest.raises(NumericParseError):
        to_material(raw, shelf="s", book="b", page="p")


@pytest.mark.parametrize(
    "text",
    [
        "REFERENCES: r\n",  # no DATA
        "DATA:\n  - type: formula 12\n    wavelength_range: 0 1\n    coefficients: 1\n",
        "DATA:\n  - type: formula 1\n    coefficients: 1\n",
        "DATA:\n  - type: tabulated n\n",
        "- just a list",
        "DATA: [unbalanced",
        "COMMENTS: 2020-13-45\nDATA: []\n",  # impossible timestamp
    ],
)
def test_schema_violations(text: str) -> None:
    with pytest.raises(PageSchemaError):
        parse_raw_material(text)
