"""This module supports exact arithmetic with rational polynomials.

Polynomials in x with rational coefficients are represented as tuples of terms.
The polynomial c_1 x^e_1 + ... + c_n x^e_n corresponds to the tuple of
terms (c_1 x^e_1, ..., c_n x^e_n) with e_1 > ... > e_n >= 0 and all c_i nonzero,
using () for the zero polynomial. This canonical form is unique per value.

A polynomial with any NaN coefficient is a NaN polynomial, which is the result
of undefined operations such as division by the zero polynomial. All NaN
polynomials are equal. NaN is infectious: every operation involving a NaN
polynomial (or a NaN rational number) returns a NaN polynomial.

The operators +,-,*,// are overloaded, where // stands for truncating division
(discarding the remainder), and p(x) evaluates polynomial p at x. Moreover,
differentiation, antidifferentiation, and definite integration are supported.

Polynomials are written without whitespace as sums of terms in order of
decreasing exponent, e.g., x^3-2*x^2+5/3*x+3, with 0 for the zero polynomial
and NaN for NaN polynomials. Function RatPoly.value_of parses such strings.
"""

import os
import re
import math
import logging
import numpy as np
from ratpoly.rationals import RatNum
from ratpoly.terms import RatTerm

_check_rep = os.getenv('RATPOLY_CHECKREP') == '1'
if _check_rep:
    logging.debug('Check representation invariant of all new polynomials')


class RatPoly:
    """Immutable polynomials in x with rational coefficients.

    Invariant: attribute 'terms' is a tuple of nonzero terms of strictly decreasing
    exponents, unless some term has a NaN coefficient.
    """

    __slots__ = 'terms'

    ZERO = None  # set below
    NaN = None

    def __init__(self, value=None, expt=None, check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        The value can be a term, a list of terms, or a string as accepted by value_of().
        If value is a coefficient (int or RatNum), the polynomial is set to value x^expt.
        Use check=False only for a list of terms already satisfying the invariant.
        """
        if check:
            value = self._intern(value, expt)
        self.terms = tuple(value)
        if _check_rep:
            self.check_rep()

    @classmethod
    def _intern(cls, a, expt=None):
        # convert a to cls internal format, if possible
        if a is None:
            return []

        if isinstance(a, str):
            return cls._from_terms(a)

        if expt is not None:
            if not isinstance(a, (int, RatNum)):
                raise TypeError('int or RatNum coefficient expected')

            a = RatTerm(a, expt)
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError('rational polynomial expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, RatPoly):
            return a.terms

        if isinstance(a, (int, RatNum)):
            a = RatTerm(a)
        if isinstance(a, RatTerm):
            return [] if a.is_zero() else [a]

        if isinstance(a, tuple):
            a = list(a)
        if isinstance(a, list):
            if not all(isinstance(t, RatTerm) for t in a):
                return NotImplemented

            c = []
            for t in a:
                cls._sorted_insert(c, t)
            return c

        return NotImplemented

    @classmethod
    def _operand(cls, a):
        # coerce a for use as second operand, strings excluded
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError('rational polynomial, term, or coefficient expected')

        return a

    @staticmethod
    def _is_nan(a):
        return any(t.is_nan() for t in a)

    @staticmethod
    def _sorted_insert(lst, term):
        """Insert term into sorted list of terms lst, in-place.

        Coefficients are added if lst contains a term of the same exponent, and
        the resulting term is removed if its coefficient becomes zero.
        """
        if term.is_zero():
            return

        e = term.expt
        for i, t in enumerate(lst):
            if e > t.expt:
                lst.insert(i, term)
                return

            if e == t.expt:
                t = t.add(term)
                if t.is_zero():
                    del lst[i]
                else:
                    lst[i] = t
                return

        lst.append(term)

    @staticmethod
    def _scale_coeff(lst, r):
        """Multiply all coefficients in list of terms lst by rational r, in-place."""
        if r.is_zero():
            lst.clear()
            return

        for i, t in enumerate(lst):
            lst[i] = t.scale(r)

    @classmethod
    def _increm_expt(cls, lst, d):
        """Add d to all exponents in sorted list of terms lst, in-place.

        Terms whose exponent would drop to 0 or below are merged into the constant term.
        """
        if d == 0:
            return

        low = []
        for i, t in enumerate(lst):
            e = t.expt + d
            if e > 0:
                lst[i] = t.shift_exponent(d)
            else:
                low.append(RatTerm(t.coeff))
        del lst[len(lst) - len(low):]
        for t in low:
            cls._sorted_insert(lst, t)

    @staticmethod
    def _deg(a):
        return a[0].expt if a else 0

    @classmethod
    def _neg(cls, a):
        if cls._is_nan(a):
            return [RatTerm.NaN]

        c = list(a)
        cls._scale_coeff(c, -RatNum.ONE)
        return c

    @classmethod
    def _add(cls, a, b):
        if cls._is_nan(a) or cls._is_nan(b):
            return [RatTerm.NaN]

        c = list(a)
        for t in b:
            cls._sorted_insert(c, t)
        return c

    @classmethod
    def _sub(cls, a, b):
        if cls._is_nan(a) or cls._is_nan(b):
            return [RatTerm.NaN]

        return cls._add(a, cls._neg(b))

    @classmethod
    def _mul(cls, a, b):
        if cls._is_nan(a) or cls._is_nan(b):
            return [RatTerm.NaN]

        c = []
        for t in a:
            d = list(b)
            cls._scale_coeff(d, t.coeff)
            cls._increm_expt(d, t.expt)
            c = cls._add(c, d)
        return c

    @classmethod
    def _div(cls, a, b):
        if cls._is_nan(a) or cls._is_nan(b) or not b:
            return [RatTerm.NaN]

        b0 = b[0]
        q, r = [], list(a)
        while r and r[0].expt >= b0.expt:
            t = RatTerm(r[0].coeff / b0.coeff, r[0].expt - b0.expt)
            cls._sorted_insert(q, t)
            d = list(b)
            cls._scale_coeff(d, -t.coeff)
            cls._increm_expt(d, t.expt)
            for s in d:
                cls._sorted_insert(r, s)
            # leading term of r cancelled, hence deg(r) decreased or r is zero
        return q

    @classmethod
    def _diff(cls, a):
        if cls._is_nan(a):
            return [RatTerm.NaN]

        c = []
        for t in a:
            t = t.differentiate()
            if not t.is_zero():
                c.append(t)
        return c

    @classmethod
    def _antidiff(cls, a, r):
        if cls._is_nan(a) or r.is_nan():
            return [RatTerm.NaN]

        c = [t.anti_differentiate() for t in a]
        if not r.is_zero():
            c.append(RatTerm(r))  # all other exponents are positive
        return c

    @classmethod
    def _from_terms(cls, s):
        c = []
        negative = False
        for token in re.split(r'([+-])', s):
            if token == '-':
                negative = True
            elif token == '+':
                negative = False
            elif token:
                t = RatTerm.value_of(token)
                if negative:
                    t = -t
                cls._sorted_insert(c, t)
                negative = False
        return c

    @classmethod
    def _to_terms(cls, a):
        if cls._is_nan(a):
            return 'NaN'

        if not a:
            return '0'

        s = ''
        for t in a:
            t = repr(t)
            if s and not t.startswith('-'):
                s += '+'
            s += t
        return s

    @classmethod
    def value_of(cls, s):
        """Convert string s with sum of terms to a polynomial.

        String s should be free of whitespace, e.g., x^3-2*x^2+5/3*x+3.
        Raises ValueError if a term is ill formatted.
        """
        return cls(cls._from_terms(s), check=False)

    def check_rep(self):
        """Check representation invariant, raising AssertionError if violated.

        NaN polynomials are exempt.
        """
        a = self.terms
        if not isinstance(a, tuple):
            raise AssertionError('terms not stored as tuple')

        if self._is_nan(a):
            return

        for i, t in enumerate(a):
            if not isinstance(t, RatTerm):
                raise AssertionError('term expected')

            if t.is_zero():
                raise AssertionError('zero coefficient')

            if t.expt < 0:
                raise AssertionError('negative exponent')

            if i and a[i-1].expt <= t.expt:
                raise AssertionError('terms out of order')

    def is_nan(self):
        """Test for NaN polynomial (some coefficient NaN)."""
        return self._is_nan(self.terms)

    def is_zero(self):
        """Test for zero polynomial."""
        return not self.terms

    def degree(self):
        """Largest exponent of a nonzero term (0 for zero polynomial)."""
        return self._deg(self.terms)

    def get_term(self, deg):
        """Term of given degree, or zero term if no such term is present."""
        for t in self.terms:
            if t.expt < deg:
                break

            if t.expt == deg:
                return t

        return RatTerm.ZERO

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        """Coefficient of x^key."""
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed')

        return self.get_term(key).coeff

    def __iter__(self):
        yield from self.terms

    def negate(self):
        """Additive inverse."""
        cls = type(self)
        return cls(cls._neg(self.terms), check=False)

    def add(self, other):
        """Add polynomial other to this polynomial."""
        cls = type(self)
        other = cls._operand(other)
        return cls(cls._add(self.terms, other), check=False)

    def sub(self, other):
        """Subtract polynomial other from this polynomial."""
        cls = type(self)
        other = cls._operand(other)
        return cls(cls._sub(self.terms, other), check=False)

    def mul(self, other):
        """Multiply this polynomial by polynomial other."""
        cls = type(self)
        other = cls._operand(other)
        return cls(cls._mul(self.terms, other), check=False)

    def div(self, other):
        """Truncating division of this polynomial by polynomial other.

        Return quotient q such that this = q other + r with deg(r) < deg(other)
        or r = 0, discarding remainder r. Division by zero polynomial gives NaN.
        """
        cls = type(self)
        other = cls._operand(other)
        return cls(cls._div(self.terms, other), check=False)

    def differentiate(self):
        """Derivative of this polynomial."""
        cls = type(self)
        return cls(cls._diff(self.terms), check=False)

    def anti_differentiate(self, r=RatNum.ZERO):
        """Antiderivative of this polynomial with integration constant r."""
        cls = type(self)
        if isinstance(r, int):
            r = RatNum(r)
        elif not isinstance(r, RatNum):
            raise TypeError('int or RatNum integration constant expected')

        return cls(cls._antidiff(self.terms, r), check=False)

    def integrate(self, lower, upper):
        """Definite integral from lower to upper bound, as a float.

        Bounds may be given in either order. Returns NaN if either bound
        is NaN or if this polynomial is NaN.
        """
        if math.isnan(lower) or math.isnan(upper) or self.is_nan():
            return math.nan

        p = self.anti_differentiate(RatNum.ZERO)
        return p.eval(upper) - p.eval(lower)

    def eval(self, x):
        """Evaluate polynomial at given x, for float x or NumPy array x.

        Returns NaN (NaNs) if this polynomial is NaN.
        """
        x = np.asarray(x, dtype=float)
        y = np.zeros_like(x)
        if self.is_nan():
            y.fill(math.nan)
        else:
            with np.errstate(over='ignore', invalid='ignore'):
                for t in self.terms:
                    y += t.eval(x)
        if y.ndim:
            return y

        return float(y)

    __call__ = eval

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.terms, other), check=False)

    __radd__ = __add__

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.terms, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.terms), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.terms, other), check=False)

    def __rmul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(other, self.terms), check=False)

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._div(self.terms, other), check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._div(other, self.terms), check=False)

    def __repr__(self):
        return self._to_terms(self.terms)

    def __eq__(self, other):
        """Equality test, all NaN polynomials being equal."""
        other = self._coerce(other)
        if other is NotImplemented:
            return False

        if self.is_nan() or self._is_nan(other):
            return self.is_nan() and self._is_nan(other)

        return self.terms == tuple(other)

    def __ne__(self, other):
        """Negated equality test."""
        return not self == other

    def __hash__(self):
        """Make polynomials hashable, consistent with equality between polynomials.

        NB: p == 1 may hold for constant polynomial p while hash(p) != hash(1).
        """
        if self.is_nan():
            return hash((type(self).__name__, None))

        return hash((type(self).__name__, self.terms))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.terms)


RatPoly.ZERO = RatPoly()
RatPoly.NaN = RatPoly(RatTerm.NaN)
