"""Integer sequences.

The recursive ones carry no memoisation: cost grows exponentially with n,
and inputs that never hit a base case (NaN, non-integers that skip it)
end in RecursionError at the dispatch boundary.
"""
from ..registry import register

@register("fib", arity=[1], kind="sequence", doc="Fibonacci number F(n)")
def fib(n):
    return n if n <= 1 else fib(n - 1) + fib(n - 2)

@register("lucas", arity=[1], kind="sequence", doc="Lucas number, L(0)=2, L(1)=1")
def lucas(n):
    if n == 0:
        return 2
    if n == 1:
        return 1
    return lucas(n - 1) + lucas(n - 2)

@register("pell", arity=[1], kind="sequence", doc="Pell number P(n) = 2P(n-1) + P(n-2)")
def pell(n):
    return n if n <= 1 else 2 * pell(n - 1) + pell(n - 2)

@register("tribonacci", arity=[1], kind="sequence", doc="T(n) = T(n-1) + T(n-2) + T(n-3), T(0)=T(1)=0, T(2)=1")
def tribonacci(n):
    """Seeds T(0)=T(1)=0, T(2)=1 (OEIS A000073); not the T(n)=n seeding of the older /math service."""
    if n <= 1:
        return 0
    if n == 2:
        return 1
    return tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)

@register("padovan", arity=[1], kind="sequence", doc="Padovan P(n) = P(n-2) + P(n-3), P(0..2)=1")
def padovan(n):
    return 1 if n <= 2 else padovan(n - 2) + padovan(n - 3)

@register("jacobsthal", arity=[1], kind="sequence", doc="Jacobsthal J(n) = J(n-1) + 2J(n-2)")
def jacobsthal(n):
    if n == 0:
        return 0
    if n == 1:
        return 1
    return jacobsthal(n - 1) + 2 * jacobsthal(n - 2)

@register("sylvester", arity=[1], kind="sequence", doc="s(n) = s(n-1)^2 - s(n-1) + 1, s(0)=2")
def sylvester(n):
    """Sylvester's sequence 2, 3, 7, 43; the older /math service returned the offset 1, 2, 6, 42."""
    if n <= 0:
        return 2
    # s(n-1) is evaluated twice
    return sylvester(n - 1) * (sylvester(n - 1) - 1) + 1

@register("collatz", arity=[1], kind="sequence", doc="Collatz trajectory from n down to 1")
def collatz(n):
    seq = [n]
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        seq.append(n)
    return seq
