from __future__ import annotations

from typing import Sequence

import numpy as np
import xarray as xr

from ria_app.dispersion.evaluator import k_array, n_array, select_entry
from ria_app.domain.errors import MissingComponentError
from ria_app.domain.models import Material
from ria_app.domain.ports import MaterialDB
from ria_app.store.store import Store

# All wavelengths are in micrometers (μm), the unit of the database ranges.


class StoreMaterialDB(MaterialDB):
    """MaterialDB port backed by a flattened Store."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def material(self, key: str) -> Material:
        item = self.store.get(key)
        if item is None:
            raise KeyError(f"Unknown material '{key}'")
        return item

    def list_materials(self) -> list[str]:
        return sorted(self.store.keys())

    def get_nk(self, name: str, lambda_um: Sequence[float]) -> xr.Dataset:
        """n and k on a wavelength grid; k is NaN when the material has no imaginary data.

        Range and capability errors of the selected entries propagate.
        """
        item = self.material(name)
        lam = np.asarray(lambda_um, dtype=float)
        n = np.broadcast_to(n_array(item, lam), lam.shape).astype(float)
        try:
            select_entry(item, "imaginary")
        except MissingComponentError:
            k = np.full_like(lam, np.nan)
        else:
            k = np.broadcast_to(k_array(item, lam), lam.shape).astype(float)
        return xr.Dataset(
            data_vars=dict(n=(("lambda_um",), n), k=(("lambda_um",), k)),
            coords=dict(lambda_um=lam),
            attrs=dict(material=name, shelf=item.shelf, book=item.book, page=item.page),
        )

    def n_of_lambda(self, ref: str, lambda_um: float) -> complex:
        """Complex index n + ik at one wavelength; k = 0 when the material has no imaginary data."""
        item = self.material(ref)
        n = item.n(lambda_um)
        try:
            k = item.k(lambda_um)
        except MissingComponentError:
            k = 0.0
        return complex(n, k)
