# utils/type_coercion.py
#
# Type coercion utilities.

from __future__ import annotations

import math
from typing import Final, Union


class Undefined:
    """Marker for an argument that was never supplied."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = Undefined()

LogValue = Union[str, int, float, bool, None, Undefined]


def _float_to_str(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def coerce_to_display_str(value: LogValue) -> str:
    """
    Render a value for a human-readable message.

    - UNDEFINED -> "undefined", None -> "null"
    - strings are passed through verbatim
    - booleans -> "true" / "false"
    - ints as decimal text; floats drop a zero fractional part ("2.0" -> "2")
      and spell NaN/Infinity out
    - anything else falls back to str()
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_to_str(value)
    return str(value)
