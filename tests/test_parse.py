
import math
import pytest
from mathfn.parser import to_number, coerce_params, parse_matrix

@pytest.mark.parametrize("src,expected", [
    ("10", 10),
    (" 7 ", 7),
    ("-3", -3),
    ("2.5", 2.5),
    (".5", 0.5),
    ("1e3", 1000),
    ("0x10", 16),
    ("", 0),
])
def test_numeric_tokens(src, expected):
    out = to_number(src)
    assert out == expected
    assert type(out) is type(expected)

@pytest.mark.parametrize("src", ["abc", "1,2", "12abc", "nan", "[[1,2]", None])
def test_non_numeric_is_nan(src):
    assert math.isnan(to_number(src))

def test_infinity():
    assert to_number("Infinity") == math.inf
    assert to_number("-Infinity") == -math.inf

def test_matrix_literal():
    assert to_number("[[1, 2], [3.5, -4]]") == [[1, 2], [3.5, -4]]

def test_empty_matrix():
    assert parse_matrix("[]") == []

def test_coerce_keeps_order():
    out = coerce_params(["3", "x", "1"])
    assert out[0] == 3 and out[2] == 1
    assert math.isnan(out[1])
