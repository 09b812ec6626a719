#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum


class Sign(Enum):
    '''
    Sign of a rational number, ordered NEG < POS.
    '''
    NEG = -1
    POS = 1

    def __mul__(self, o):
        if not isinstance(o, Sign):
            return NotImplemented
        return Sign(self.value * o.value)

    def __neg__(self):
        return Sign(-self.value)

    def __lt__(self, o): return self.value < o.value if isinstance(o, Sign) else NotImplemented
    def __le__(self, o): return self.value <= o.value if isinstance(o, Sign) else NotImplemented
    def __gt__(self, o): return self.value > o.value if isinstance(o, Sign) else NotImplemented
    def __ge__(self, o): return self.value >= o.value if isinstance(o, Sign) else NotImplemented

    def __str__(self):
        return '-' if self is Sign.NEG else '+'
