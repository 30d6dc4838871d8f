import math
import numpy as np
from ..registry import register

@register("isPrime", arity=[1], kind="number_theory", doc="primality by trial division")
def is_prime(n):
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True

@register("gcd", arity=[2], kind="number_theory", doc="greatest common divisor (Euclid)")
def gcd(a, b):
    return a if b == 0 else gcd(b, a % b)

@register("totient", arity=[1], kind="number_theory", doc="Euler's totient by counting coprimes in 1..n")
def totient(n):
    r = 0
    i = 1
    while i <= n:
        if gcd(n, i) == 1:
            r += 1
        i += 1
    return r

@register("modinv", arity=[2], kind="number_theory", doc="smallest x in [1, m) with a*x = 1 (mod m), else null")
def modinv(a, m):
    x = 1
    while x < m:
        if (a * x) % m == 1:
            return x
        x += 1
    return None

@register("powmod", arity=[3], kind="number_theory", doc="b^e mod m by square-and-multiply")
def powmod(b, e, m):
    r = 1
    if isinstance(e, float) and not math.isfinite(e):
        return r
    e = int(e)
    while e:
        if e & 1:
            r = (r * b) % m
        b = (b * b) % m
        e >>= 1
    return r

@register("legendre", arity=[1], kind="number_theory", doc="sum of floor(n/i) for i in 1..n")
def legendre(n):
    s = 0
    i = 1
    while i <= n:
        s += n // i
        i += 1
    return s

@register("mersenne", arity=[1], kind="number_theory", doc="Mersenne number 2^p - 1")
def mersenne(p):
    return 2 ** p - 1

@register("fermat", arity=[1], kind="number_theory", doc="Fermat number 2^(2^n) + 1 (float, overflows to inf)")
def fermat(n):
    with np.errstate(over="ignore"):
        return np.power(2.0, np.power(2.0, n)) + 1

def _digit_square_sum(n):
    s = str(n)
    if not s.isdigit():
        return None
    return sum(int(d) * int(d) for d in s)

@register("isHappy", arity=[1], kind="number_theory", doc="happy-number test with cycle detection")
def is_happy(n):
    seen = set()
    while n != 1 and n not in seen:
        seen.add(n)
        n = _digit_square_sum(n)
        if n is None:
            # signs, decimal points and NaN have no digits to square
            return False
    return n == 1
