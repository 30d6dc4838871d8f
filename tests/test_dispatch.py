
import math
import pytest
from mathfn.dispatch import invoke, Success, Failure, ErrorKind

def test_success():
    assert invoke("gcd", ["48", "18"]) == Success(6)

def test_unknown_function():
    out = invoke("notarealfn", ["1"])
    assert out == Failure(ErrorKind.INVALID_FUNCTION, "Invalid function")

def test_empty_or_missing_function():
    assert isinstance(invoke("", []), Failure)
    assert invoke(None, []).kind is ErrorKind.INVALID_FUNCTION

def test_lookup_is_case_sensitive():
    assert invoke("FIB", ["5"]).kind is ErrorKind.INVALID_FUNCTION

def test_extra_params_ignored():
    assert invoke("fib", ["10", "99", "x"]) == Success(55)

def test_missing_param_is_nan():
    out = invoke("geometric", ["2"])
    assert isinstance(out, Success)
    assert math.isnan(out.value)

def test_malformed_param_degrades_silently():
    out = invoke("harmonic", ["abc"])
    assert out == Success(0)

def test_recursion_fault_is_runtime_error():
    out = invoke("fib", ["abc"])
    assert isinstance(out, Failure)
    assert out.kind is ErrorKind.RUNTIME_ERROR
    assert "recursion" in out.message

def test_division_fault_is_runtime_error():
    out = invoke("geometric", ["1", "3"])
    assert out.kind is ErrorKind.RUNTIME_ERROR

def test_matrix_params():
    out = invoke("matmul", ["[[1,2],[3,4]]", "[[1,0],[0,1]]"])
    assert out == Success([[1, 2], [3, 4]])

def test_scalar_into_matmul_faults():
    assert invoke("matmul", ["1", "2"]).kind is ErrorKind.RUNTIME_ERROR

def test_same_call_twice():
    assert invoke("collatz", ["6"]) == invoke("collatz", ["6"])

@pytest.mark.parametrize("func,params,expected", [
    ("isHappy", ["abc"], False),
    ("isHappy", ["-7"], False),
    ("isHappy", ["2.5"], False),
    ("isHappy", [], False),
    ("powmod", ["2", "abc", "5"], 1),
    ("powmod", ["2", "Infinity", "5"], 1),
    ("powmod", ["2"], 1),
])
def test_loop_entries_degrade_silently(func, params, expected):
    assert invoke(func, params) == Success(expected)

@pytest.mark.parametrize("func,params", [
    ("schroeder", ["-1"]),
    ("schroeder", ["1.5"]),
    ("schroeder", ["abc"]),
    ("eulerZigzag", ["-3"]),
    ("eulerZigzag", ["2.5"]),
    ("bell", ["-2"]),
])
def test_out_of_range_index_is_nan(func, params):
    out = invoke(func, params)
    assert isinstance(out, Success)
    assert math.isnan(out.value)

@pytest.mark.parametrize("params", [["2.5", "2"], ["2", "0.5"], ["abc", "2"], ["3"]])
def test_delannoy_rejects_non_integer_size(params):
    out = invoke("delannoy", params)
    assert out.kind is ErrorKind.RUNTIME_ERROR
