#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re

from pylarge.uint import DIGIT_MAX, Uint

'''
Conversion of fixed-width unsigned integers to digits in other bases, and the
textual renderings built on it.
'''

DECIMAL_CHUNK = 10 ** 9
DECIMAL_CHUNK_WIDTH = 9
DIGIT_CHARS = '0123456789abcdefghijklmnopqrstuvwxyz'


class BaseDigits:
    '''
    The digits of a value in some base, least significant first. Each iteration
    starts over from the value, repeatedly dividing by the base until the quotient
    is zero, so there is always at least one digit.
    '''

    def __init__(self, value, base):
        base = int(base)
        if base not in range(2, DIGIT_MAX + 1):
            raise ValueError(f"Base {base} out-of-range, must be in [2, {DIGIT_MAX}]")
        self.value = value
        self.base = base

    def __iter__(self):
        value = self.value
        base = Uint(self.base, value.size)
        while True:
            value, rem = value.div_rem(base)
            # rem < base, so it fits into the least significant digit
            yield int(rem.digits[-1])
            if not value:
                return

    def __repr__(self):
        return f"BaseDigits({self.value!r}, base={self.base:d})"


def to_base_le(value, base):
    '''
    Digits of `value` in `base`, least significant first.
    '''
    return BaseDigits(value, base)


def to_base_10_be(value):
    '''
    Digits of `value` in base 10**9, most significant first.
    '''
    chunks = list(to_base_le(value, DECIMAL_CHUNK))
    chunks.reverse()
    return chunks


def to_decimal_string(value):
    chunks = to_base_10_be(value)
    # only the most significant chunk goes without leading zeros
    return str(chunks[0]) + ''.join(f"{chunk:0{DECIMAL_CHUNK_WIDTH}d}" for chunk in chunks[1:])


def to_string_radix(value, radix):
    '''
    Render `value` with the digits 0-9 and a-z, for a radix between 2 and 36.
    '''
    if radix not in range(2, len(DIGIT_CHARS) + 1):
        raise ValueError(f"Radix {radix} out-of-range, must be in [2, {len(DIGIT_CHARS)}]")
    chars = [DIGIT_CHARS[digit] for digit in to_base_le(value, radix)]
    return ''.join(reversed(chars))


def to_binary_string(value): return to_string_radix(value, 2)
def to_octal_string(value): return to_string_radix(value, 8)
def to_hex_string(value): return to_string_radix(value, 16)
def to_upper_hex_string(value): return to_hex_string(value).upper()


RENDERERS = {
    '': to_decimal_string,
    'd': to_decimal_string,
    'b': to_binary_string,
    'o': to_octal_string,
    'x': to_hex_string,
    'X': to_upper_hex_string,
}

PREFIXES = {
    'b': '0b',
    'o': '0o',
    'x': '0x',
    'X': '0X',
}

FORMAT_SPEC = re.compile(
    r'(?:(?P<fill>.)?(?P<align>[<>=^]))?'
    r'(?P<sign>[-+ ])?(?P<alt>#)?(?P<zero>0)?(?P<width>\d+)?'
    r'(?P<grouping>[,_])?(?P<kind>[bdoxX])?\Z',
    re.DOTALL,
)


def group_digits(digits, separator, interval):
    head = len(digits) % interval or interval
    groups = [digits[:head]] + [digits[i:i + interval] for i in range(head, len(digits), interval)]
    return separator.join(groups)


def format_uint(value, format_spec):
    '''
    Implementation of format() for fixed-width integers, following the integer
    format spec: `[[fill]align][sign][#][0][width][grouping][type]` with the `d`,
    `b`, `o`, `x` and `X` types. Zero padding goes between the sign and prefix
    and the digits, like it does for int.
    '''
    match = FORMAT_SPEC.match(format_spec)
    if match is None:
        raise ValueError(f"Invalid format specifier '{format_spec}' for Uint")
    spec = match.groupdict()
    kind = spec['kind'] or ''
    grouping = spec['grouping']
    if grouping == ',' and kind not in ('', 'd'):
        raise ValueError(f"Cannot specify ',' with '{kind}'")
    # decimal digits are grouped by thousands, the power of two bases by four
    interval = 3 if kind in ('', 'd') else 4

    fill, align = spec['fill'], spec['align']
    if spec['zero']:
        fill = fill or '0'
        align = align or '='
    fill = fill or ' '
    align = align or '>'
    width = int(spec['width'] or 0)

    head = ('' if spec['sign'] in (None, '-') else spec['sign']) + (PREFIXES.get(kind, '') if spec['alt'] else '')
    digits = RENDERERS[kind](value)
    text = group_digits(digits, grouping, interval) if grouping else digits
    if grouping and spec['zero'] and align == '=' and fill == '0':
        # zero padding is grouped as well
        while len(head) + len(text) < width:
            digits = '0' + digits
            text = group_digits(digits, grouping, interval)

    pad = max(width - len(head) - len(text), 0)
    if align == '=':
        return head + fill * pad + text
    body = head + text
    if align == '<':
        return body + fill * pad
    if align == '^':
        return fill * (pad // 2) + body + fill * (pad - pad // 2)
    return fill * pad + body
