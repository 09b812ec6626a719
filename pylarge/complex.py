#!/usr/bin/env python
# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Complex:
    '''
    Complex number over any element type with `+`, `-` and `*`, such as Rational.
    '''
    r: Any
    i: Any

    def abs_squared(self):
        return self.r * self.r + self.i * self.i

    def __add__(self, o):
        return Complex(self.r + o.r, self.i + o.i)

    def __sub__(self, o):
        return Complex(self.r - o.r, self.i - o.i)

    def __mul__(self, o):
        # (a + bi)(x + yi) = (ax - by) + (bx + ay)i
        return Complex(self.r * o.r - self.i * o.i, self.i * o.r + self.r * o.i)

    def __str__(self):
        return f"{self.r} + {self.i}i"
