from __future__ import annotations

import io

import numpy as np
import pandas as pd

from ria_app.domain.models import DispersionData, is_formula
from ria_app.store.store import Store


def _wavelength_span(entry: DispersionData) -> tuple[float, float]:
    if is_formula(entry):
        lo, hi = entry.wavelength_range  # type: ignore[union-attr]
        return float(lo), float(hi)
    if not entry.data:  # type: ignore[union-attr]
        return float("nan"), float("nan")
    wl = np.asarray([row[0] for row in entry.data], dtype=float)  # type: ignore[union-attr]
    return float(wl.min()), float(wl.max())


def store_summary_table(store: Store) -> pd.DataFrame:
    """One row per material: key, display names, entry kinds and overall wavelength span (μm)."""
    rows = []
    for key, item in store.items():
        spans = np.asarray([_wavelength_span(e) for e in item.data], dtype=float).reshape(-1, 2)
        lam_min = float(np.nanmin(spans[:, 0])) if np.isfinite(spans[:, 0]).any() else np.nan
        lam_max = float(np.nanmax(spans[:, 1])) if np.isfinite(spans[:, 1]).any() else np.nan
        rows.append(
            {
                "key": key,
                "shelf": item.shelf,
                "book": item.book,
                "page": item.page,
                "kinds": ",".join(e.kind for e in item.data),
                "lambda_min_um": lam_min,
                "lambda_max_um": lam_max,
            }
        )
    columns = ["key", "shelf", "book", "page", "kinds", "lambda_min_um", "lambda_max_um"]
    return pd.DataFrame(rows, columns=columns).sort_values("key").reset_index(drop=True)


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
