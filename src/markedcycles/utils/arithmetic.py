"""Divisor arithmetic: Moebius inversion, totients, Dirichlet convolution."""
from __future__ import annotations

from math import gcd
from typing import Callable, List

IntFn = Callable[[int], int]


def divisors(n: int) -> List[int]:
    """Sorted positive divisors of n (empty for n <= 0)."""
    if n <= 0:
        return []
    small: List[int] = []
    large: List[int] = []
    x = 1
    while x * x <= n:
        if n % x == 0:
            small.append(x)
            if x * x != n:
                large.append(n // x)
        x += 1
    return small + large[::-1]


def proper_divisors(n: int) -> List[int]:
    return [d for d in divisors(n) if d != n]


def euler_totient(n: int) -> int:
    return sum(1 for x in range(1, n + 1) if gcd(x, n) == 1)


def moebius(n: int) -> int:
    """Moebius function mu(n) for n >= 1."""
    if n == 1:
        return 1
    result = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            result = -result
            n //= i
            if n % i == 0:
                return 0
        i += 1
    if n > 1:
        result = -result
    return result


def dirichlet_convolution(f: IntFn, g: IntFn, n: int) -> int:
    """(f * g)(n) = sum over d | n of f(d) g(n/d)."""
    return sum(f(d) * g(n // d) for d in divisors(n))


def filtered_dirichlet_convolution(
    f: IntFn,
    g: IntFn,
    n: int,
    keep: Callable[[int], bool],
) -> int:
    """Dirichlet convolution restricted to divisors d with keep(d)."""
    return sum(f(d) * g(n // d) for d in divisors(n) if keep(d))


def moebius_inversion(f: IntFn, n: int) -> int:
    """Recover g(n) from f(n) = sum over d | n of g(d)."""
    return dirichlet_convolution(moebius, f, n)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (C semantics, not floor)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q
