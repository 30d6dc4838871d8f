import math
from ..registry import register

@register("matmul", arity=[2], kind="algebra", doc="matrix product a @ b (no shape checks)")
def matmul(a, b):
    return [[sum(val * b[j][i] for j, val in enumerate(row)) for i in range(len(row))] for row in a]

@register("det2", arity=[1], kind="algebra", doc="determinant of a 2x2 matrix")
def det2(m):
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]

@register("quad", arity=[3], kind="algebra", doc="real roots of ax^2 + bx + c, [] when the discriminant is negative")
def quad(a, b, c):
    d = b * b - 4 * a * c
    if d < 0:
        return []
    return [(-b + math.sqrt(d)) / (2 * a), (-b - math.sqrt(d)) / (2 * a)]

@register("harmonic", arity=[1], kind="algebra", doc="harmonic number H(n) = sum 1/i")
def harmonic(n):
    h = 0
    i = 1
    while i <= n:
        h += 1 / i
        i += 1
    return h

@register("geometric", arity=[2], kind="algebra", doc="geometric series sum of r^i for i in 0..n")
def geometric(r, n):
    return (1 - math.pow(r, n + 1)) / (1 - r)

@register("ack", arity=[2], kind="algebra", doc="Ackermann function A(m, n)")
def ack(m, n):
    if m == 0:
        return n + 1
    if n == 0:
        return ack(m - 1, 1)
    return ack(m - 1, ack(m, n - 1))
