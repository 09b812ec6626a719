#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import unittest

import numpy as np

from pylarge.errors import CapacityOverflow, LargeError
from pylarge.uint import DIGIT_MAX, Uint

rng = np.random.default_rng(20221019)


def random_uint(num_digits, size=None):
    '''
    Uniformly random digits, zero-extended to `size` digits.
    '''
    digits = Uint.from_digits(rng.integers(0, 2 ** 32, size=num_digits, dtype=np.uint64))
    return digits.resized(size or num_digits)


class UintConstructionTestCase(unittest.TestCase):

    def test_digits(self):
        self.assertEqual(Uint(5, size=4).digits.tolist(), [0, 0, 0, 5])
        self.assertEqual(Uint(2 ** 40 + 3, size=2).digits.tolist(), [256, 3])
        self.assertEqual(Uint.from_digits([1, 2, 3]).size, 3)
        self.assertEqual(int(Uint.from_digits([1, 2, 3])), (1 << 64) | (2 << 32) | 3)

    def test_immutable(self):
        u = Uint(7)
        with self.assertRaises(ValueError):
            u.digits[0] = 1

    def test_out_of_range(self):
        with self.assertRaises(CapacityOverflow):
            Uint(2 ** 128, size=4)
        with self.assertRaises(ValueError):
            Uint(-1)
        with self.assertRaises(ValueError):
            Uint(0, size=0)
        with self.assertRaises(ValueError):
            Uint.from_digits([2 ** 32])
        with self.assertRaises(ValueError):
            Uint.from_digits([])

    def test_from_native(self):
        self.assertEqual(Uint.from_u8(255, size=1), Uint(255, size=1))
        self.assertEqual(Uint.from_u16(65535, size=1), Uint(65535, size=1))
        self.assertEqual(Uint.from_u32(DIGIT_MAX, size=1), Uint.max(1))
        self.assertEqual(Uint.from_u64(2 ** 64 - 1, size=2), Uint.max(2))
        self.assertEqual(Uint.from_u128(2 ** 128 - 1, size=4), Uint.max(4))
        self.assertEqual(Uint.from_u128(7, size=6).digits.tolist(), [0, 0, 0, 0, 0, 7])

        with self.assertRaises(ValueError):
            Uint.from_u8(256)
        with self.assertRaises(ValueError):
            Uint.from_u32(2 ** 32)
        with self.assertRaises(ValueError):
            Uint.from_u64(1, size=1)
        with self.assertRaises(ValueError):
            Uint.from_u128(1, size=3)

    def test_to_u128(self):
        self.assertEqual(Uint(2 ** 128 - 1, size=8).to_u128(), 2 ** 128 - 1)
        self.assertEqual(Uint(0, size=8).to_u128(), 0)
        self.assertIsNone(Uint(2 ** 128, size=8).to_u128())

    def test_int_roundtrip(self):
        for _ in range(50):
            u = random_uint(7)
            self.assertEqual(Uint(int(u), size=7), u)

    def test_repr(self):
        self.assertEqual(repr(Uint(42, size=2)), 'Uint(42, size=2)')


class UintDigitsTestCase(unittest.TestCase):

    def test_significant_digits(self):
        self.assertEqual(Uint.zero(5).significant_digits(), 1)
        self.assertEqual(Uint.zero(5).msd_idx(), 4)
        self.assertEqual(Uint.one(5).significant_digits(), 1)
        self.assertEqual(Uint(2 ** 32, size=5).significant_digits(), 2)
        self.assertEqual(Uint(2 ** 32, size=5).msd(), 1)
        self.assertEqual(Uint.max(5).significant_digits(), 5)
        self.assertEqual(Uint.from_digits([0, 3, 0, 9]).digits_be(), [3, 0, 9])
        self.assertEqual(Uint.zero(3).digits_be(), [0])

    def test_trailing_zeros(self):
        self.assertEqual(Uint.zero(1).trailing_zeros(), 32)
        self.assertEqual(Uint.zero(17).trailing_zeros(), 17 * 32)
        self.assertEqual(Uint.one(17).trailing_zeros(), 0)
        self.assertEqual(Uint.from_digits([0, 0, 1, 0, 0, 0]).trailing_zeros(), 3 * 32)
        self.assertEqual(Uint.from_digits([0, 0, 2, 0, 0, 0]).trailing_zeros(), 3 * 32 + 1)
        self.assertEqual(Uint(2 ** 31, size=2).trailing_zeros(), 31)

    def test_digit_shifts(self):
        u = Uint.from_digits([1, 2, 3, 4])
        self.assertEqual(u.shl_digits(1).digits.tolist(), [2, 3, 4, 0])
        self.assertEqual(u.shr_digits(2).digits.tolist(), [0, 0, 1, 2])
        self.assertEqual(u.shl_digits(4), Uint.zero(4))
        self.assertEqual(u.shr_digits(0), u)
        self.assertEqual(u.push_lsd(9).digits.tolist(), [2, 3, 4, 9])

    def test_resized(self):
        u = Uint(2 ** 64 + 5, size=4)
        self.assertEqual(u.resized(8), Uint(2 ** 64 + 5, size=8))
        self.assertEqual(u.resized(3), Uint(2 ** 64 + 5, size=3))
        # narrowing is a cast, magnitude is dropped silently
        self.assertEqual(u.resized(2), Uint(5, size=2))

    def test_bit_shifts(self):
        for num_bits in [0, 1, 5, 31, 32, 33, 64, 100, 159, 160, 500]:
            u = random_uint(5)
            mask = (1 << 160) - 1
            self.assertEqual(int(u << num_bits), (int(u) << num_bits) & mask, f"<< {num_bits}")
            self.assertEqual(int(u >> num_bits), int(u) >> num_bits, f">> {num_bits}")

        with self.assertRaises(ValueError):
            Uint.one(2) << -1


class UintMathTestCase(unittest.TestCase):

    def test_add_sub(self):
        a, b = Uint(12), Uint(24)
        self.assertEqual(b - a, Uint(12))
        self.assertEqual(a + b, b + a)
        self.assertEqual(a + a, b)
        self.assertEqual(a + b, Uint(36))

    def test_borrow_across_digits(self):
        a = Uint.from_digits([0, 1, 0])
        b = Uint.from_digits([0, 0, 1])
        self.assertEqual(a - b, Uint.from_digits([0, 0, DIGIT_MAX]))
        self.assertEqual(Uint.from_digits([0, 0, DIGIT_MAX]) + Uint.one(3), a)

    def test_overflow(self):
        with self.assertRaises(CapacityOverflow):
            Uint.max(4) + Uint.one(4)
        with self.assertRaises(CapacityOverflow):
            Uint.zero(4) - Uint.one(4)
        with self.assertRaises(CapacityOverflow):
            Uint.max(4) * 2
        with self.assertRaises(CapacityOverflow):
            Uint(2 ** 64, size=4) * Uint(2 ** 64, size=4)
        with self.assertRaises(CapacityOverflow):
            Uint(2 ** 127, size=4) * Uint(3, size=4)
        self.assertTrue(issubclass(CapacityOverflow, OverflowError))
        self.assertTrue(issubclass(CapacityOverflow, LargeError))

    def test_wrapping(self):
        self.assertEqual(Uint.max(4).wrapping_add(Uint.one(4)), Uint.zero(4))
        self.assertEqual(Uint.zero(4).wrapping_sub(Uint.one(4)), Uint.max(4))
        self.assertEqual(Uint(2 ** 64, size=4).wrapping_mul(Uint(2 ** 64 + 3, size=4)), Uint(3 * 2 ** 64, size=4))

    def test_mul_digit(self):
        a = Uint.from_digits([0, 21213, 0, 18321, 12412])
        self.assertEqual(a * 1, a)
        self.assertEqual(a * 0, Uint.zero(5))
        # zero and one are shortcut at any width
        self.assertIs(a.mul_digit(1), a)
        self.assertEqual(a.mul_digit(0).size, 5)
        self.assertEqual(int(a * DIGIT_MAX), int(a) * DIGIT_MAX)
        self.assertEqual(3 * a, a * 3)
        with self.assertRaises(ValueError):
            a.mul_digit(2 ** 32)

    def test_mul(self):
        for a, b in [(1234, 2), (2, 1234), (2 ** 64 - 1, 4), (4, 2 ** 64 - 1), (2 ** 64, 2 ** 63)]:
            self.assertEqual(int(Uint(a) * Uint(b)), a * b)
        self.assertEqual(int(Uint(10, size=4) * 10 ** 20), 10 ** 21)

    def test_mul_against_int(self):
        for num_digits in [1, 3, 6, 10]:
            for _ in range(20):
                # operands of half the width can never overflow
                a = random_uint(num_digits, 2 * num_digits)
                b = random_uint(num_digits, 2 * num_digits)
                self.assertEqual(int(a * b), int(a) * int(b))

    def test_compare(self):
        self.assertTrue(Uint(1) > Uint(0))
        self.assertTrue(Uint(2 ** 32) > Uint(DIGIT_MAX))
        self.assertTrue(Uint(3) >= Uint(3))
        self.assertTrue(Uint(0) < Uint(1))
        self.assertTrue(Uint(2) <= Uint(2))
        self.assertEqual(Uint(5).compare(Uint(5)), 0)
        self.assertEqual(Uint(5).compare(Uint(6)), -1)
        self.assertNotEqual(Uint(5), 5)
        self.assertEqual(hash(Uint(77)), hash(Uint(77)))

    def test_width_mismatch(self):
        with self.assertRaises(ValueError):
            Uint(1, size=2) + Uint(1, size=3)
        with self.assertRaises(ValueError):
            Uint(1, size=2) < Uint(1, size=3)
        self.assertNotEqual(Uint(1, size=2), Uint(1, size=3))
        self.assertFalse(Uint(1, size=2) == Uint(1, size=3))
        self.assertNotIn(Uint(1, size=2), [Uint(1, size=3)])
        self.assertIn(Uint(1, size=2), [Uint(1, size=3), Uint(1, size=2)])
        with pytest.raises(TypeError):
            Uint(1) + 1.5


if __name__ == '__main__':
    unittest.main()
