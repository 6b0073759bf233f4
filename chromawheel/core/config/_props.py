from __future__ import annotations

import math


def bool_prop(key: str, *, default: bool) -> property:
    def _get(self) -> bool:
        return bool(self._settings.get(key, default))

    def _set(self, value: bool) -> None:
        self._settings[key] = bool(value)
        self._save()

    return property(_get, _set)


def _coerce_float(value, default: float, min_v: float | None, max_v: float | None) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        v = float(default)
    if not math.isfinite(v):
        v = float(default)
    if min_v is not None:
        v = max(float(min_v), v)
    if max_v is not None:
        v = min(float(max_v), v)
    return v


def float_prop(key: str, *, default: float, min_v: float | None = None, max_v: float | None = None) -> property:
    def _get(self) -> float:
        return _coerce_float(self._settings.get(key, default), default, min_v, max_v)

    def _set(self, value: float) -> None:
        self._settings[key] = _coerce_float(value, default, min_v, max_v)
        self._save()

    return property(_get, _set)
