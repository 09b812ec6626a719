#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import numbers

from pylarge.errors import DivideByZero
from pylarge.sign import Sign
from pylarge.uint import DIGIT_BITS, Uint, check_same_size


def to_same_denominator(a, b):
    '''
    Bring two rationals onto a common denominator by cross-multiplying. Nothing is
    multiplied when the denominators are equal already. The products need twice
    the digits of the inputs, so widen first.
    '''
    if a.den == b.den:
        return a, b
    den = a.den * b.den
    return Rational(a.sign, a.num * b.den, den), Rational(b.sign, b.num * a.den, den)


class Rational:
    '''
    Signed fraction whose numerator and denominator are fixed-width unsigned
    integers of one size. The denominator must not be zero, which is up to the
    caller. Results of arithmetic are reduced, constructed values are kept as is.

    Arithmetic widens both operands to twice the size, so that cross-multiplying
    cannot overflow, and narrows the result back afterwards.
    '''

    def __init__(self, sign, num, den):
        check_same_size(num, den)
        self.sign = Sign(sign)
        self.num = num
        self.den = den

    @property
    def size(self):
        return self.num.size

    @classmethod
    def zero(cls, size=4): return cls(Sign.POS, Uint.zero(size), Uint.one(size))

    @classmethod
    def one(cls, size=4): return cls(Sign.POS, Uint.one(size), Uint.one(size))

    @classmethod
    def from_int(cls, num, size=4):
        '''
        Rational for a signed integer, keeping its magnitude and sign.
        '''
        num = int(num)
        sign = Sign.NEG if num < 0 else Sign.POS
        return cls(sign, Uint(abs(num), size), Uint.one(size))

    @classmethod
    def from_u32(cls, num, size=4):
        return cls(Sign.POS, Uint.from_u32(num, size), Uint.one(size))

    def with_sign(self, sign):
        return Rational(sign, self.num, self.den)

    def __neg__(self):
        return self.with_sign(-self.sign)

    def __abs__(self):
        return self.with_sign(Sign.POS)

    def reduced(self):
        '''
        Divide numerator and denominator by their greatest common divisor.
        '''
        gcd = self.num.gcd_binary(self.den)
        if not gcd:
            return self
        return Rational(self.sign, self.num // gcd, self.den // gcd)

    def recip(self):
        if not self.num:
            raise DivideByZero("Reciprocal of zero")
        return Rational(self.sign, self.den, self.num)

    def resized(self, size):
        '''
        Convert to a different size. Narrowing a value that does not fit drops the
        same number of least significant digits from numerator and denominator,
        which keeps their ratio only approximately. This always truncates whole
        32-bit digits, there is no rounding.
        '''
        num, den = self.num, self.den
        if size < self.size:
            significant_digits = max(num.significant_digits(), den.significant_digits())
            if size < significant_digits:
                excess = significant_digits - size
                logging.debug(f"Narrowing {self.size:,d}-digit rational to {size:,d} digits, dropping {excess:,d} digits.")
                num, den = num.shr_digits(excess), den.shr_digits(excess)
        return Rational(self.sign, num.resized(size), den.resized(size))

    def _coerce(self, o):
        if isinstance(o, Rational):
            check_same_size(self.num, o.num)
            return o
        if isinstance(o, numbers.Integral):
            return Rational.from_int(o, self.size)
        return None

    def compare(self, o):
        '''
        -1, 0 or 1 as this value is less than, equal to or greater than `o`. Values
        of different sign are ordered by their sign alone, so -0 < +0.
        '''
        o = self._coerce(o)
        if o is None:
            raise TypeError("Can only compare with rationals and integers")
        if self.sign != o.sign:
            return -1 if self.sign < o.sign else 1
        wide = 2 * self.size
        a, b = to_same_denominator(self.resized(wide), o.resized(wide))
        order = a.num.compare(b.num)
        return -order if self.sign is Sign.NEG else order

    def _compare_with(self, o, accept):
        if self._coerce(o) is None:
            return NotImplemented
        return accept(self.compare(o))

    def __eq__(self, o):
        if isinstance(o, Rational) and o.size != self.size:
            return False
        if isinstance(o, numbers.Integral) and abs(int(o)).bit_length() > DIGIT_BITS * self.size:
            return False
        return self._compare_with(o, lambda order: order == 0)

    def __lt__(self, o): return self._compare_with(o, lambda order: order < 0)
    def __le__(self, o): return self._compare_with(o, lambda order: order <= 0)
    def __gt__(self, o): return self._compare_with(o, lambda order: order > 0)
    def __ge__(self, o): return self._compare_with(o, lambda order: order >= 0)

    def __hash__(self):
        reduced = self.reduced()
        return hash((reduced.sign, reduced.num, reduced.den))

    def __add__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        return add_signed(self, o)

    def __radd__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        return add_signed(o, self)

    def __sub__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        return add_signed(self, -o)

    def __rsub__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        return add_signed(o, -self)

    def __mul__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        wide = 2 * self.size
        a, b = self.resized(wide), o.resized(wide)
        product = Rational(a.sign * b.sign, a.num * b.num, a.den * b.den)
        return product.resized(self.size).reduced()

    __rmul__ = __mul__

    def __truediv__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        return self * o.recip()

    def __rtruediv__(self, o):
        o = self._coerce(o)
        if o is None:
            return NotImplemented
        return o * self.recip()

    def __repr__(self):
        return f"Rational(Sign.{self.sign.name}, {self.num!r}, {self.den!r})"

    def __str__(self):
        sign = '-' if self.sign is Sign.NEG else ''
        return f"{sign}{self.num}/{self.den}"


def add_signed(a, b):
    '''
    Sum of two rationals of any sign. Every sign combination comes down to adding
    two positive values, or subtracting the smaller positive value from the larger.
    Subtraction is addition of the negated right operand.
    '''
    if a.sign is Sign.POS and b.sign is Sign.POS:
        return add_positive(a, b)
    elif a.sign is Sign.NEG and b.sign is Sign.NEG:
        # (-a) + (-b) = -(a + b)
        return add_positive(abs(a), abs(b)).with_sign(Sign.NEG)
    elif a.sign is Sign.POS:
        # a + (-b) = a - b
        return sub_positive(a, abs(b))
    else:
        # (-a) + b = b - a
        return sub_positive(b, abs(a))


def add_positive(a, b):
    assert a.sign is Sign.POS and b.sign is Sign.POS
    size = a.size
    a, b = to_same_denominator(a.resized(2 * size), b.resized(2 * size))
    return Rational(Sign.POS, a.num + b.num, a.den).reduced().resized(size)


def sub_positive(a, b):
    '''
    `a - b` for two positive values, negative if `b` is the larger one.
    '''
    assert a.sign is Sign.POS and b.sign is Sign.POS
    sign = Sign.POS
    if b > a:
        a, b, sign = b, a, Sign.NEG

    size = a.size
    a, b = to_same_denominator(a.resized(2 * size), b.resized(2 * size))
    return Rational(sign, a.num - b.num, a.den).reduced().resized(size)
