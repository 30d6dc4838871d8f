"""Permissive coercion of query-string tokens into numbers.

Nothing here raises on bad input: a token that is not a number becomes NaN
and flows into the computation as is.
"""
import re
from typing import List, Sequence, Union

import numpy as np
from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError

MATRIX_GRAMMAR = r"""
?start: array
array: "[" [_items] "]"
_items: value ("," value)*
?value: array
      | NUMBER -> number
NUMBER: /[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?/
%ignore /[ \t\r\n]+/
"""

matrix_parser = Lark(MATRIX_GRAMMAR, start="start", parser="lalr")

_DECIMAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_RADIX = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = {"Infinity": np.inf, "+Infinity": np.inf, "-Infinity": -np.inf}

# integral floats within this bound are exact, so they are handed out as int
MAX_SAFE_INTEGER = 2 ** 53

Number = Union[int, float]


def normalize(x: float) -> Number:
    if np.isfinite(x) and float(x).is_integer() and abs(x) <= MAX_SAFE_INTEGER:
        return int(x)
    return float(x)


@v_args(inline=True)
class MatrixBuilder(Transformer):
    def number(self, tok): return normalize(float(tok))

    def array(self, *items):
        # an empty "[]" comes through as a single None placeholder
        return [x for x in items if x is not None]


def parse_matrix(src: str) -> list:
    tree = matrix_parser.parse(src)
    return MatrixBuilder().transform(tree)


def to_number(token):
    """Coerce one raw parameter.

    ``None`` (a parameter that was never supplied) and unparsable text give
    NaN, blank text gives 0, ``[[..],[..]]`` gives a nested list.
    """
    if token is None:
        return np.nan
    s = token.strip()
    if s == "":
        return 0
    if s.startswith("["):
        try:
            return parse_matrix(s)
        except LarkError:
            return np.nan
    if _DECIMAL.fullmatch(s):
        return normalize(float(s))
    if _RADIX.fullmatch(s):
        return int(s, 0)
    if s in _INFINITY:
        return _INFINITY[s]
    return np.nan


def coerce_params(raw_params: Sequence[str]) -> List:
    return [to_number(tok) for tok in raw_params]
