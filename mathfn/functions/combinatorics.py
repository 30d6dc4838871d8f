"""Counting functions.

``binom`` and everything built on it divide factorials with true division,
so results are floats and lose precision (or overflow) for large n.
"""
import numpy as np
from ..registry import register

def _at(seq, n):
    # a negative or fractional index reads as NaN
    if isinstance(n, int) and 0 <= n < len(seq):
        return seq[n]
    return np.nan

def _table_size(x):
    size = int(x)
    if size != x:
        raise ValueError(f"invalid table size: {x}")
    return size

@register("fact", arity=[1], kind="combinatorics", doc="factorial n!")
def fact(n):
    return 1 if n <= 1 else n * fact(n - 1)

@register("binom", arity=[2], kind="combinatorics", doc="binomial coefficient n! / (k! (n-k)!)")
def binom(n, k):
    return fact(n) / (fact(k) * fact(n - k))

@register("catalan", arity=[1], kind="combinatorics", doc="Catalan number binom(2n, n) / (n + 1)")
def catalan(n):
    return binom(2 * n, n) / (n + 1)

@register("narayana", arity=[2], kind="combinatorics", doc="Narayana number binom(n,k) binom(n,k-1) / n")
def narayana(n, k):
    return binom(n, k) * binom(n, k - 1) / n

@register("stirling", arity=[2], kind="combinatorics", doc="Stirling number of the second kind S(n, k)")
def stirling(n, k):
    """Standard base cases: S(n,0)=0 for n>0, the older /math service seeded S(n,0)=1."""
    if k == n:
        return 1
    if k == 0 or k > n:
        return 0
    return k * stirling(n - 1, k) + stirling(n - 1, k - 1)

@register("bell", arity=[1], kind="combinatorics", doc="Bell number via the Bell triangle")
def bell(n):
    if not (isinstance(n, int) and n >= 0):
        return np.nan
    row = [1]
    i = 1
    while i <= n:
        nxt = [row[-1]]
        for x in row:
            nxt.append(nxt[-1] + x)
        row = nxt
        i += 1
    return row[0]

@register("motzkin", arity=[1], kind="combinatorics", doc="Motzkin number, (n+2)M(n) = (2n+1)M(n-1) + (3n-3)M(n-2)")
def motzkin(n):
    if n <= 1:
        return 1
    return ((2 * n + 1) * motzkin(n - 1) + (3 * n - 3) * motzkin(n - 2)) // (n + 2)

@register("delannoy", arity=[2], kind="combinatorics", doc="Delannoy number D(m, n)")
def delannoy(m, n):
    m, n = _table_size(m), _table_size(n)
    d = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        for j in range(n + 1):
            if i == 0 or j == 0:
                d[i][j] = 1
            else:
                d[i][j] = d[i - 1][j] + d[i][j - 1] + d[i - 1][j - 1]
    return d[m][n]

@register("schroeder", arity=[1], kind="combinatorics", doc="large Schroeder number")
def schroeder(n):
    s = [1, 2]
    i = 2
    while i <= n:
        s.append((3 * (2 * i - 1) * s[i - 1] - (i - 2) * s[i - 2]) // (i + 1))
        i += 1
    return _at(s, n)

@register("eulerZigzag", arity=[1], kind="combinatorics", doc="Euler zigzag (up/down) number")
def euler_zigzag(n):
    if not (isinstance(n, int) and n >= 0):
        return np.nan
    # Seidel boustrophedon: each row is the running sum of the previous one reversed
    row = [1]
    i = 1
    while i <= n:
        nxt = [0]
        for x in reversed(row):
            nxt.append(nxt[-1] + x)
        row = nxt
        i += 1
    return row[-1]
