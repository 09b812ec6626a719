#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pylarge.errors import DivideByZero
from pylarge.uint import B, DIGIT_BITS, DIGIT_MAX, Uint, check_same_size

'''
Long division of fixed-width unsigned integers. Multi-digit divisors go through
Knuth's Algorithm D (The Art of Computer Programming, Vol. 2, 4.3.1), single-digit
divisors through a short division.
'''


def div_rem(a, b, with_remainder=True):
    '''
    Divide `a` by `b`, both of the same width, returning `(a // b, a % b)`. When
    `with_remainder` is False the remainder is not computed and is returned as zero.
    '''
    check_same_size(a, b)
    size = a.size
    if not b:
        raise DivideByZero("Attempt to divide by zero")

    if b == Uint.one(size):
        return a, Uint.zero(size)

    order = a.compare(b)
    if order < 0:
        return Uint.zero(size), a
    elif order == 0:
        return Uint.one(size), Uint.zero(size)

    if b.significant_digits() == 1:
        quotient, rem = div_rem_digit(a, b.msd())
        return quotient, Uint(rem, size) if with_remainder else Uint.zero(size)

    return _long_div(a, b, with_remainder)


def div_rem_digit(a, divisor):
    '''
    Short division by a single nonzero digit, one pass from the most significant
    digit down. Returns the quotient, of the width of `a`, and the remainder as int.
    '''
    divisor = int(divisor)
    if divisor == 0:
        raise DivideByZero("Attempt to divide by zero")
    if divisor not in range(B):
        raise ValueError(f"Divisor {divisor} is not a single digit")
    quotient = []
    rem = 0
    for digit in a.digits.tolist():
        rem = (rem << DIGIT_BITS) | digit
        quotient.append(rem // divisor)
        rem -= quotient[-1] * divisor
    return Uint.from_digits(quotient), rem


def _long_div(a, b, with_remainder):
    # needs a > b and at least two significant digits in b
    size = a.size

    # one extra digit of headroom so that normalization cannot overflow
    a = a.resized(size + 1)
    b = b.resized(size + 1)
    normalization_factor = 1
    if b.significant_digits() > 1 and b.msd() < B // 2:
        normalization_factor = B // (b.msd() + 1)
        a = a.mul_digit(normalization_factor)
        b = b.mul_digit(normalization_factor)

    divisor_len = b.significant_digits()
    divisor_msd = b.msd()
    dividend = iter(a.digits_be())

    # the IDD is left-padded with zeros, its window starts at `idd_msd` and is
    # one digit longer than the divisor
    idd_msd = (size + 1) - (divisor_len + 1)
    window = [0] * (size + 1)
    for i in range(divisor_len):
        window[idd_msd + 1 + i] = next(dividend)
    idd = Uint.from_digits(window)

    quotient = []
    while True:
        hi, lo = int(idd.digits[idd_msd]), int(idd.digits[idd_msd + 1])
        estimate = min(((hi << DIGIT_BITS) | lo) // divisor_msd, DIGIT_MAX)

        digit, product = correct_digit(estimate, b, idd)
        quotient.append(digit)
        idd = idd - product

        next_digit = next(dividend, None)
        if next_digit is None:
            break
        idd = idd.push_lsd(next_digit)

    # digits were emitted most significant first, right-align them
    quotient = Uint.from_digits([0] * (size - len(quotient)) + quotient)

    if not with_remainder:
        return quotient, Uint.zero(size)
    rem = idd.resized(size)
    if normalization_factor != 1:
        rem, _ = div_rem_digit(rem, normalization_factor)
    return quotient, rem


def correct_digit(digit, divisor, idd):
    '''
    Lower an estimated quotient digit until `divisor * digit` fits into the IDD.
    Returns the corrected digit and that product. The estimate from the two leading
    IDD digits is never more than two too large.
    '''
    product = divisor.mul_digit(digit)
    num_corrections = 0
    while product > idd:
        digit -= 1
        product = product - divisor
        num_corrections += 1
        assert num_corrections <= 2, "Quotient digit estimate was off by more than two"
    return digit, product
