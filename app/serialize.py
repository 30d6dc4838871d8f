# app/serialize.py
from typing import Any
import numpy as np

from mathfn.parser import MAX_SAFE_INTEGER, normalize

def to_jsonable(value) -> Any:
    """Make a computed result JSON-safe.

    NaN and +/-inf become null, integral floats that are exact become ints
    and numpy scalars become builtins; lists and tuples are converted
    element by element. Integers past 2^53 go out as floats, and as null
    once they no longer fit a double.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None if value is None else bool(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (int, np.integer)):
        value = int(value)
        if abs(value) <= MAX_SAFE_INTEGER:
            return value
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            return None
        return normalize(float(value))
    return value
