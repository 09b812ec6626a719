#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numbers

import numpy as np

from pylarge.errors import CapacityOverflow

DIGIT_BITS = 32
B = 2 ** DIGIT_BITS
DIGIT_MAX = B - 1


def check_same_size(a, b):
    '''
    Binary operations are only defined between values of the same width.
    '''
    if a.size != b.size:
        raise ValueError(f"Width mismatch, {a.size:,d} vs. {b.size:,d} digits")


class Uint:
    '''
    Fixed-width unsigned integers, made of `size` 32-bit digits with the most
    significant digit first. Unlike the wrapping integers of other libraries, a
    sum, difference or product that does not fit raises CapacityOverflow. Use the
    `wrapping_*` methods for explicit modular arithmetic.

    Values are immutable, every operation returns a new instance.
    '''

    def __init__(self, num=0, size=4):
        '''
        Initialize the class with a value that can be converted to an unsigned integer
        with the top-level int() call, and also a particular number of digits.
        :param num: Non-negative integer value
        :param size: Number of 32-bit digits for this unsigned integer. Defaults to 4 for
        a 128-bit integer.
        '''
        int_num, size = int(num), int(size)
        if size < 1:
            raise ValueError(f"Width of {size:,d} digits, need at least one")
        if int_num < 0:
            raise ValueError(f"Value {int_num} is negative")
        if int_num.bit_length() > size * DIGIT_BITS:
            raise CapacityOverflow(f"Value {int_num} out-of-range for {size:,d} digits")
        raw = int_num.to_bytes(size * DIGIT_BITS // 8, 'big')
        self._init_digits(np.frombuffer(raw, dtype='>u4'))

    def _init_digits(self, digits):
        self.digits = np.array(digits, dtype=np.uint32)
        self.digits.flags.writeable = False
        self.size = len(self.digits)

    @classmethod
    def from_digits(cls, digits):
        '''
        Build a value from its digits, most significant first. The number of digits
        is the width of the new value.
        '''
        digits = [int(d) for d in digits]
        if len(digits) == 0:
            raise ValueError("Need at least one digit")
        for digit in digits:
            if digit not in range(B):
                raise ValueError(f"Digit {digit} out-of-range for {DIGIT_BITS:d} bits")
        obj = cls.__new__(cls)
        obj._init_digits(digits)
        return obj

    @classmethod
    def _from_native(cls, num, num_bits, size):
        int_num = int(num)
        if int_num not in range(2 ** num_bits):
            raise ValueError(f"Value {int_num} out-of-range for unsigned {num_bits:,d} bits")
        min_size = -(-num_bits // DIGIT_BITS)
        if size < min_size:
            raise ValueError(f"Unsigned {num_bits:,d} bits need at least {min_size:,d} digits, got {size:,d}")
        return cls(int_num, size)

    @classmethod
    def from_u8(cls, num, size=4): return cls._from_native(num, 8, size)

    @classmethod
    def from_u16(cls, num, size=4): return cls._from_native(num, 16, size)

    @classmethod
    def from_u32(cls, num, size=4): return cls._from_native(num, 32, size)

    @classmethod
    def from_u64(cls, num, size=4): return cls._from_native(num, 64, size)

    @classmethod
    def from_u128(cls, num, size=4): return cls._from_native(num, 128, size)

    @classmethod
    def zero(cls, size=4): return cls(0, size)

    @classmethod
    def one(cls, size=4): return cls(1, size)

    @classmethod
    def two(cls, size=4): return cls(2, size)

    @classmethod
    def max(cls, size=4): return cls.from_digits([DIGIT_MAX] * size)

    def to_u128(self):
        '''
        The value as an int, if it fits an unsigned 128-bit integer. Otherwise None.
        '''
        if self.significant_digits() > 128 // DIGIT_BITS:
            return None
        return int(self)

    def __int__(self):
        return int.from_bytes(self.digits.astype('>u4').tobytes(), 'big')

    def __bool__(self):
        return bool(self.digits.any())

    def __hash__(self):
        return hash((self.size, self.digits.tobytes()))

    def __repr__(self):
        return f"Uint({int(self)}, size={self.size})"

    def __str__(self):
        from pylarge.base import to_decimal_string
        return to_decimal_string(self)

    def __format__(self, format_spec):
        from pylarge.base import format_uint
        return format_uint(self, format_spec)

    def resized(self, size):
        '''
        Convert to a different width, behaving like a cast: widening zero-extends
        the most significant end, narrowing drops the most significant digits
        whether they are zero or not.
        '''
        keep = min(size, self.size)
        digits = np.zeros(size, dtype=np.uint32)
        digits[size - keep:] = self.digits[self.size - keep:]
        return self.from_digits(digits)

    def msd_idx(self):
        '''
        Index of the most significant nonzero digit, or `size - 1` for zero.
        '''
        nonzero = np.flatnonzero(self.digits)
        return int(nonzero[0]) if len(nonzero) else self.size - 1

    def msd(self):
        return int(self.digits[self.msd_idx()])

    def digits_be(self):
        '''
        The significant digits as ints, most significant first. Zero has one digit.
        '''
        return self.digits[self.msd_idx():].tolist()

    def significant_digits(self):
        return self.size - self.msd_idx()

    def trailing_zeros(self):
        '''
        Number of trailing zero bits, across digit boundaries. Zero reports every
        bit of the width.
        '''
        nonzero = np.flatnonzero(self.digits)
        if len(nonzero) == 0:
            return self.size * DIGIT_BITS
        last = int(nonzero[-1])
        digit = int(self.digits[last])
        return (self.size - 1 - last) * DIGIT_BITS + (digit & -digit).bit_length() - 1

    def is_odd(self):
        return bool(self.digits[-1] & 1)

    def shl_digits(self, n):
        '''
        Move every digit `n` places towards the most significant end, filling with
        zeros. Digits moved past the width are dropped. Same as `self * B**n`
        when nothing is dropped.
        '''
        if n == 0:
            return self
        if n >= self.size:
            return self.zero(self.size)
        digits = np.roll(self.digits, -n)
        digits[self.size - n:] = 0
        return self.from_digits(digits)

    def shr_digits(self, n):
        '''
        Move every digit `n` places towards the least significant end, filling with
        zeros.
        '''
        if n == 0:
            return self
        if n >= self.size:
            return self.zero(self.size)
        digits = np.roll(self.digits, n)
        digits[:n] = 0
        return self.from_digits(digits)

    def push_lsd(self, lsd):
        '''
        Shift one digit to the left and append `lsd` as the new least significant
        digit.
        '''
        digits = np.roll(self.digits, -1)
        digits[-1] = lsd
        return self.from_digits(digits)

    def __lshift__(self, num_bits):
        if not isinstance(num_bits, numbers.Integral):
            return NotImplemented
        if num_bits < 0:
            raise ValueError(f"Negative shift count {num_bits}")
        if num_bits == 0:
            return self
        whole, rest = divmod(int(num_bits), DIGIT_BITS)
        shifted = self.shl_digits(whole)
        if rest == 0:
            return shifted

        digits = shifted.digits.astype(np.uint64)
        mask = np.uint64(((1 << rest) - 1) << (DIGIT_BITS - rest))
        # the high bits of each digit move into the digit above it
        carry = (digits & mask) >> np.uint64(DIGIT_BITS - rest)
        result = (digits << np.uint64(rest)) & np.uint64(DIGIT_MAX)
        result[:-1] |= carry[1:]
        return self.from_digits(result)

    def __rshift__(self, num_bits):
        if not isinstance(num_bits, numbers.Integral):
            return NotImplemented
        if num_bits < 0:
            raise ValueError(f"Negative shift count {num_bits}")
        if num_bits == 0:
            return self
        whole, rest = divmod(int(num_bits), DIGIT_BITS)
        shifted = self.shr_digits(whole)
        if rest == 0:
            return shifted

        digits = shifted.digits.astype(np.uint64)
        mask = np.uint64((1 << rest) - 1)
        # the low bits of each digit move into the digit below it
        carry = (digits & mask) << np.uint64(DIGIT_BITS - rest)
        result = digits >> np.uint64(rest)
        result[1:] |= carry[:-1]
        return self.from_digits(result)

    def compare(self, o):
        '''
        -1, 0 or 1 as this value is less than, equal to or greater than `o`.
        '''
        check_same_size(self, o)
        differ = np.flatnonzero(self.digits != o.digits)
        if len(differ) == 0:
            return 0
        i = differ[0]
        return -1 if self.digits[i] < o.digits[i] else 1

    '''
    Comparisons never overflow. Ordering is only defined between values of one
    width, values of different widths are never equal.
    '''
    def __eq__(self, o): return self.size == o.size and self.compare(o) == 0 if isinstance(o, Uint) else NotImplemented
    def __lt__(self, o): return self.compare(o) < 0 if isinstance(o, Uint) else NotImplemented
    def __le__(self, o): return self.compare(o) <= 0 if isinstance(o, Uint) else NotImplemented
    def __gt__(self, o): return self.compare(o) > 0 if isinstance(o, Uint) else NotImplemented
    def __ge__(self, o): return self.compare(o) >= 0 if isinstance(o, Uint) else NotImplemented

    def _carrying_add(self, o):
        a, b = self.digits.tolist(), o.digits.tolist()
        result = [0] * self.size
        carry = 0
        for i in reversed(range(self.size)):
            total = a[i] + b[i] + carry
            result[i] = total & DIGIT_MAX
            carry = total >> DIGIT_BITS
        return result, carry

    def _borrowing_sub(self, o):
        a, b = self.digits.tolist(), o.digits.tolist()
        result = [0] * self.size
        borrow = 0
        for i in reversed(range(self.size)):
            total = a[i] - b[i] - borrow
            borrow = 1 if total < 0 else 0
            result[i] = total + (B if borrow else 0)
        return result, borrow

    def _carrying_mul_digit(self, digit):
        result = [0] * self.size
        carry = 0
        for i, d in reversed(list(enumerate(self.digits.tolist()))):
            prod = d * digit + carry
            result[i] = prod & DIGIT_MAX
            carry = prod >> DIGIT_BITS
        return result, carry

    def __add__(self, o):
        if not isinstance(o, Uint):
            return NotImplemented
        check_same_size(self, o)
        digits, carry = self._carrying_add(o)
        if carry:
            raise CapacityOverflow(f"Attempt to add with overflow at {self.size:,d} digits")
        return self.from_digits(digits)

    def __sub__(self, o):
        if not isinstance(o, Uint):
            return NotImplemented
        check_same_size(self, o)
        digits, borrow = self._borrowing_sub(o)
        if borrow:
            raise CapacityOverflow(f"Attempt to subtract with overflow at {self.size:,d} digits")
        return self.from_digits(digits)

    def mul_digit(self, digit):
        '''
        Multiply by a single 32-bit digit.
        '''
        if int(digit) not in range(B):
            raise ValueError(f"Multiplier {digit} is not a single digit")
        if digit == 0:
            return self.zero(self.size)
        if digit == 1:
            return self
        digits, carry = self._carrying_mul_digit(int(digit))
        if carry:
            raise CapacityOverflow(f"Attempt to multiply with overflow at {self.size:,d} digits")
        return self.from_digits(digits)

    def _mul_uint(self, o):
        check_same_size(self, o)
        out = self.zero(self.size)
        rhs = o.digits.tolist()
        for j in reversed(range(self.size)):
            if rhs[j] == 0:
                continue
            row = self.mul_digit(rhs[j])
            # the partial product is shifted by the position of the digit
            shift = self.size - 1 - j
            if row.significant_digits() + shift > self.size:
                raise CapacityOverflow(f"Attempt to multiply with overflow at {self.size:,d} digits")
            digits, carry = out._carrying_add(row.shl_digits(shift))
            if carry:
                raise CapacityOverflow(f"Attempt to multiply with overflow at {self.size:,d} digits")
            out = self.from_digits(digits)
        return out

    def __mul__(self, o):
        if isinstance(o, Uint):
            return self._mul_uint(o)
        if isinstance(o, numbers.Integral):
            if 0 <= o <= DIGIT_MAX:
                return self.mul_digit(o)
            return self._mul_uint(Uint(o, self.size))
        return NotImplemented

    __rmul__ = __mul__

    '''
    Explicitly wrapping variants, reducing the exact result modulo 2 ** (32 * size).
    '''
    def _mask(self):
        return (1 << (self.size * DIGIT_BITS)) - 1

    def wrapping_add(self, o):
        check_same_size(self, o)
        return Uint((int(self) + int(o)) & self._mask(), self.size)

    def wrapping_sub(self, o):
        check_same_size(self, o)
        return Uint((int(self) - int(o)) & self._mask(), self.size)

    def wrapping_mul(self, o):
        check_same_size(self, o)
        return Uint((int(self) * int(o)) & self._mask(), self.size)

    def _coerce_divisor(self, o):
        if isinstance(o, Uint):
            return o
        if isinstance(o, numbers.Integral):
            return Uint(o, self.size)
        return None

    def div_rem(self, o):
        '''
        Divide by `o`, returning `(self // o, self % o)`. Raises DivideByZero for a
        zero divisor.
        '''
        from pylarge.div import div_rem
        divisor = self._coerce_divisor(o)
        if divisor is None:
            raise TypeError(f"Cannot divide by {type(o).__name__}")
        return div_rem(self, divisor)

    def __floordiv__(self, o):
        from pylarge.div import div_rem
        divisor = self._coerce_divisor(o)
        if divisor is None:
            return NotImplemented
        return div_rem(self, divisor, with_remainder=False)[0]

    __truediv__ = __floordiv__

    def __mod__(self, o):
        from pylarge.div import div_rem
        divisor = self._coerce_divisor(o)
        if divisor is None:
            return NotImplemented
        return div_rem(self, divisor)[1]

    def __divmod__(self, o):
        from pylarge.div import div_rem
        divisor = self._coerce_divisor(o)
        if divisor is None:
            return NotImplemented
        return div_rem(self, divisor)

    def gcd_euclidean(self, o):
        from pylarge.gcd import gcd_euclidean
        return gcd_euclidean(self, o)

    def gcd_binary(self, o):
        from pylarge.gcd import gcd_binary
        return gcd_binary(self, o)

    def lcm(self, o):
        from pylarge.gcd import lcm
        return lcm(self, o)

    def to_base_le(self, base):
        from pylarge.base import to_base_le
        return to_base_le(self, base)

    def to_string_radix(self, radix):
        from pylarge.base import to_string_radix
        return to_string_radix(self, radix)
