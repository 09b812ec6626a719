#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from pylarge.complex import Complex
from pylarge.rational import Rational

'''
ASCII rendering of the Mandelbrot set, computed with exact rationals.
'''

ITERATIONS = 15
ROWS, COLS = 20, 80
SIZE = 8
THRESHOLD_SQUARED = 4
SHADES = ' .+x'
INSIDE = '#'


def default_viewport(size=SIZE):
    '''
    Lower-left and upper-right corners, from -2-1i to 1/2+1i.
    '''
    return (
        Complex(Rational.from_int(-2, size), Rational.from_int(-1, size)),
        Complex(Rational.from_int(1, size) / 2, Rational.from_int(1, size)),
    )


def escape_time(c, iterations=ITERATIONS, threshold_squared=THRESHOLD_SQUARED):
    '''
    Iterate z = z ** 2 + c from zero. Returns the first iteration, counting from
    one, at which |z| ** 2 exceeds the threshold, or None if it never does.
    '''
    size = c.r.size
    z = Complex(Rational.zero(size), Rational.zero(size))
    for i in range(1, iterations + 1):
        z = z * z + c
        if z.abs_squared() > threshold_squared:
            return i
    return None


def render(rows=ROWS, cols=COLS, iterations=ITERATIONS, size=SIZE, viewport=None):
    '''
    Render the viewport as `rows` strings of `cols` characters. Points that stay
    bounded are drawn as '#', the others shaded by how quickly they escape.
    '''
    lower, upper = viewport or default_viewport(size)
    logging.info(f"Rendering {rows:,d}x{cols:,d} points, {iterations:,d} iterations at {size:,d} digits.")
    r_step = (upper.r - lower.r) / cols
    i_step = (upper.i - lower.i) / rows

    lines = []
    y = lower.i
    for _ in range(rows):
        line = []
        x = lower.r
        for _ in range(cols):
            n = escape_time(Complex(x, y), iterations)
            line.append(INSIDE if n is None else SHADES[(len(SHADES) - 1) * n // iterations])
            x = x + r_step
        logging.debug(f"Rendered row at {y}.")
        lines.append(''.join(line))
        y = y + i_step
    return lines


def main():
    logging.basicConfig(level=logging.INFO)
    for line in render():
        print(line)


if __name__ == '__main__':
    main()
