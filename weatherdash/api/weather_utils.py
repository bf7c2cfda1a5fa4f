"""Tolerant scalar coercion for provider payloads.

Open-Meteo returns plain JSON numbers, but nulls show up for missing
observations and some mirrors hand back strings with decimal commas. These
helpers turn whatever arrived into ``int``/``float``/``bool`` or ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd


def _cast_to_bool(value: Any) -> bool | None:
    """Muunna arvo bool-tyypiksi, tai palauta None jos ei järkevää tulkintaa."""
    if isinstance(value, bool):
        return value

    if isinstance(value, int | float):
        return bool(int(value))

    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("true", "1", "yes"):
            return True
        if s in ("false", "0", "no", ""):
            return False
        try:
            return bool(int(float(s)))
        except (ValueError, TypeError):
            return None

    return None


def _cast_to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _cast_to_int(value: Any) -> int | None:
    as_number = _cast_to_float(value)
    if as_number is None:
        return None
    try:
        return int(as_number)
    except (OverflowError, ValueError):
        # inf / nan
        return None


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely:
    - None → None
    - pandas NA / NaN → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # listat yms. joille pd.isna palauttaa taulukon
        return None

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


_DISPATCH = {
    bool: _cast_to_bool,
    int: _cast_to_int,
    float: _cast_to_float,
}


def safe_cast(value: Any, type_: type) -> Any | None:
    """Cast ``value`` to ``bool``/``int``/``float``; ``None`` when that is not possible."""
    value = _normalize_scalar(value)
    if value is None:
        return None
    return _DISPATCH[type_](value)


def as_bool(x: Any) -> bool | None:
    return safe_cast(x, bool)


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def value_at(values: Sequence[Any] | None, idx: int) -> Any | None:
    """Rinnakkaisten listojen turvallinen indeksointi (lyhyempi lista → None)."""
    if not values or idx >= len(values):
        return None
    return values[idx]
