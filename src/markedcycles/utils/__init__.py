from .arithmetic import (
    divisors,
    proper_divisors,
    euler_totient,
    moebius,
    dirichlet_convolution,
    filtered_dirichlet_convolution,
    moebius_inversion,
    trunc_div,
)

__all__ = [
    "divisors",
    "proper_divisors",
    "euler_totient",
    "moebius",
    "dirichlet_convolution",
    "filtered_dirichlet_convolution",
    "moebius_inversion",
    "trunc_div",
]
