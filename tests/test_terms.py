import math
import unittest
from ratpoly.rationals import RatNum
from ratpoly.terms import RatTerm, X


class Arithmetic(unittest.TestCase):

    def test_basic(self):
        t = RatTerm(RatNum(3, 2), 4)
        self.assertEqual(t.coeff, RatNum(3, 2))
        self.assertEqual(t.expt, 4)
        self.assertEqual(RatTerm(5), RatTerm(RatNum(5), 0))
        self.assertEqual(RatTerm(0, 7), RatTerm.ZERO)
        self.assertEqual(RatTerm(0, 7).expt, 0)
        self.assertTrue(RatTerm(0, 3).is_zero())
        self.assertFalse(RatTerm.NaN.is_zero())
        self.assertTrue(RatTerm(RatNum.NaN, 3).is_nan())
        self.assertEqual(RatTerm(RatNum.NaN, 3), RatTerm.NaN)
        self.assertEqual(hash(RatTerm(RatNum.NaN, 3)), hash(RatTerm.NaN))
        self.assertNotEqual(RatTerm(1, 2), RatTerm(1, 3))
        self.assertNotEqual(RatTerm(1, 2), RatTerm(2, 2))
        self.assertEqual(hash(RatTerm(RatNum(2, 4), 1)), hash(RatTerm(RatNum(1, 2), 1)))

    def test_arithmetic(self):
        a = RatTerm(RatNum(1, 2), 3)
        b = RatTerm(RatNum(1, 3), 3)
        self.assertEqual(a + b, RatTerm(RatNum(5, 6), 3))
        self.assertEqual(a.add(b), RatTerm(RatNum(5, 6), 3))
        self.assertEqual(a - b, RatTerm(RatNum(1, 6), 3))
        self.assertEqual(a - a, RatTerm.ZERO)
        self.assertEqual(a + RatTerm.ZERO, a)
        self.assertEqual(RatTerm.ZERO + a, a)
        self.assertEqual(-a, RatTerm(RatNum(-1, 2), 3))
        self.assertEqual(a.negate(), -a)
        self.assertEqual(a.scale(RatNum(4)), RatTerm(2, 3))
        self.assertEqual(a.scale(0), RatTerm.ZERO)
        self.assertEqual(a.shift_exponent(2), RatTerm(RatNum(1, 2), 5))
        self.assertEqual(a.shift_exponent(-3), RatTerm(RatNum(1, 2), 0))
        self.assertEqual(RatTerm.ZERO.shift_exponent(-3), RatTerm.ZERO)
        self.assertTrue((a + RatTerm.NaN).is_nan())
        self.assertTrue(a.scale(RatNum.NaN).is_nan())

    def test_calculus(self):
        self.assertEqual(RatTerm(3, 4).differentiate(), RatTerm(12, 3))
        self.assertEqual(RatTerm(3, 1).differentiate(), RatTerm(3))
        self.assertEqual(RatTerm(3).differentiate(), RatTerm.ZERO)
        self.assertEqual(RatTerm(3, 2).anti_differentiate(), RatTerm(1, 3))
        self.assertEqual(RatTerm(1, 1).anti_differentiate(), RatTerm(RatNum(1, 2), 2))
        self.assertEqual(RatTerm.ZERO.anti_differentiate(), RatTerm.ZERO)
        self.assertTrue(RatTerm.NaN.differentiate().is_nan())
        self.assertTrue(RatTerm.NaN.anti_differentiate().is_nan())

    def test_eval(self):
        self.assertEqual(RatTerm(2, 3).eval(2.0), 16.0)
        self.assertEqual(RatTerm(RatNum(1, 2), 1).eval(3.0), 1.5)
        self.assertEqual(RatTerm(7).eval(0.0), 7.0)
        self.assertEqual(RatTerm(7).eval(math.inf), 7.0)
        self.assertEqual(RatTerm(1, 2000).eval(10.0), math.inf)
        self.assertTrue(math.isnan(RatTerm.NaN.eval(1.0)))
        self.assertIsInstance(RatTerm(2, 3).eval(2), float)

    def test_str(self):
        self.assertEqual(str(RatTerm.ZERO), '0')
        self.assertEqual(str(RatTerm.NaN), 'NaN')
        self.assertEqual(str(RatTerm(1)), '1')
        self.assertEqual(str(RatTerm(-1)), '-1')
        self.assertEqual(str(RatTerm(1, 1)), f'{X}')
        self.assertEqual(str(RatTerm(-1, 1)), f'-{X}')
        self.assertEqual(str(RatTerm(1, 4)), f'{X}^4')
        self.assertEqual(str(RatTerm(RatNum(-3, 2), 1)), f'-3/2*{X}')
        self.assertEqual(str(RatTerm(5, 17)), f'5*{X}^17')
        self.assertEqual(str(RatTerm(RatNum(5, 3))), '5/3')
        for s in ('0', '1', '-1', 'x', '-x', 'x^4', '-3/2*x', '5*x^17', '5/3', 'NaN'):
            self.assertEqual(str(RatTerm.value_of(s)), s)
        self.assertEqual(RatTerm.value_of('1*x^1'), RatTerm(1, 1))
        self.assertEqual(RatTerm.value_of('2*x^0'), RatTerm(2))
        self.assertEqual(RatTerm.value_of('0*x^5'), RatTerm.ZERO)
        self.assertEqual(RatTerm.value_of('3*y^2', x='y'), RatTerm(3, 2))

    def test_errors(self):
        self.assertRaises(TypeError, RatTerm, 0.5)
        self.assertRaises(TypeError, RatTerm, 1, 2.0)
        self.assertRaises(ValueError, RatTerm, 1, -1)
        self.assertRaises(ValueError, RatTerm(1, 2).add, RatTerm(1, 3))
        self.assertRaises(ValueError, RatTerm(1, 2).shift_exponent, -3)
        self.assertRaises(ValueError, RatTerm.value_of, '2x')
        self.assertRaises(ValueError, RatTerm.value_of, 'x2')
        self.assertRaises(ValueError, RatTerm.value_of, 'x^')
        self.assertRaises(ValueError, RatTerm.value_of, 'x^-1')
        self.assertRaises(ValueError, RatTerm.value_of, 'a*x')
        self.assertRaises(ValueError, RatTerm.value_of, '')
        self.assertFalse(RatTerm(1) == 1)


if __name__ == "__main__":
    unittest.main()
