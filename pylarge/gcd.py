#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pylarge.uint import Uint, check_same_size


def gcd_euclidean(a, b):
    '''
    Greatest common divisor by repeated remainders, gcd(a, b) = gcd(b, a % b).
    '''
    check_same_size(a, b)
    while b:
        a, b = b, a % b
    return a


def gcd_binary(u, v):
    '''
    Greatest common divisor with Stein's algorithm, which only needs shifts,
    subtraction and parity tests.
    '''
    check_same_size(u, v)
    if not u:
        return v
    elif not v:
        return u

    i, j = u.trailing_zeros(), v.trailing_zeros()
    u, v = u >> i, v >> j
    k = min(i, j)

    while True:
        assert u.is_odd() and v.is_odd(), f"Expected odd operands, got {u} and {v}"
        if u > v:
            u, v = v, u

        # gcd(u, v) = gcd(v - u, u), and the difference of two odd numbers is even
        v = v - u
        if not v:
            # put back the common factors of two removed above
            return u << k

        v = v >> v.trailing_zeros()


def lcm(a, b):
    '''
    Least common multiple. The product `a * b` has to fit the width of the
    operands, no widening happens here.
    '''
    check_same_size(a, b)
    if not a and not b:
        return Uint.zero(a.size)
    return (a * b) // gcd_euclidean(a, b)
