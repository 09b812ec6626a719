#!/usr/bin/env python
# -*- coding: utf-8 -*-


class LargeError(ArithmeticError):
    '''
    Base class for the arithmetic errors raised by fixed-width integers and
    rationals.
    '''


class DivideByZero(LargeError, ZeroDivisionError):
    '''
    Division, remainder or reciprocal with a zero divisor.
    '''


class CapacityOverflow(LargeError, OverflowError):
    '''
    A sum, difference, product or constructor value does not fit the width of
    the destination. Widen the operands first, then narrow the result.
    '''
