"""This module supports single terms c x^e of rational polynomials.

A term pairs a rational coefficient c (of type RatNum) with a nonnegative
integer exponent e. Terms are immutable: all operations return new terms.
The zero term has exponent 0, hence all zero terms are equal. A term with
a NaN coefficient is a NaN term, and all NaN terms are equal.

Terms are written as C*x^E, collapsing to x^E or x for coefficient 1,
and to C for exponent 0 (taking priority, so 1*x^0 is written as 1).
"""

import numpy as np
from ratpoly.rationals import RatNum

X = 'x'  # symbol for indeterminate in terms


class RatTerm:
    """Immutable terms c x^e with rational coefficient c and integer exponent e>=0."""

    __slots__ = 'coeff', 'expt'

    ZERO = None  # set below
    NaN = None

    def __init__(self, coeff, expt=0):
        """Initialize term to coeff x^expt."""
        if isinstance(coeff, int):
            coeff = RatNum(coeff)
        elif not isinstance(coeff, RatNum):
            raise TypeError('RatNum or int coefficient expected')

        if not isinstance(expt, int):
            raise TypeError('int exponent expected')

        if expt < 0:
            raise ValueError('negative exponent not allowed')

        if coeff.is_zero():
            expt = 0
        self.coeff = coeff
        self.expt = expt

    @classmethod
    def value_of(cls, s, x=X):
        """Convert string s to a term.

        Accepted forms are C*x^E, C*x, x^E, x, C, with optional leading '-'
        for x^E and x, and NaN.
        """
        if s == 'NaN':
            return cls.NaN

        i = s.find(x)
        if i == -1:
            return cls(RatNum.value_of(s))

        c, e = s[:i], s[i+len(x):]
        try:
            if c == '':
                c = RatNum.ONE
            elif c == '-':
                c = -RatNum.ONE
            elif c.endswith('*'):
                c = RatNum.value_of(c[:-1])
            else:
                raise ValueError('missing * between coefficient and indeterminate')

            if e == '':
                e = 1
            elif e.startswith('^'):
                e = int(e[1:])
            else:
                raise ValueError('missing ^ between indeterminate and exponent')

        except ValueError as exc:
            raise ValueError(f'ill formatted term {s!r}') from exc

        return cls(c, e)

    def is_nan(self):
        """Test for NaN coefficient."""
        return self.coeff.is_nan()

    def is_zero(self):
        """Test for zero coefficient."""
        return self.coeff.is_zero()

    def negate(self):
        """Additive inverse."""
        return -self

    def add(self, other):
        """Add term of equal exponent; either term may also be zero.

        Raises ValueError for nonzero terms of different exponents.
        """
        if self.is_nan() or other.is_nan():
            return type(self).NaN

        if other.is_zero():
            return self

        if self.is_zero():
            return other

        if self.expt != other.expt:
            raise ValueError('terms of different exponents')

        return type(self)(self.coeff + other.coeff, self.expt)

    def sub(self, other):
        """Subtract term of equal exponent; either term may also be zero."""
        return self.add(-other)

    def scale(self, r):
        """Multiply coefficient by rational number r."""
        return type(self)(self.coeff * r, self.expt)

    def shift_exponent(self, delta):
        """Multiply term by x^delta.

        Raises ValueError if the exponent would become negative.
        """
        if self.is_zero():
            return self

        return type(self)(self.coeff, self.expt + delta)

    def differentiate(self):
        """Derivative c e x^(e-1) of term c x^e."""
        if self.is_nan():
            return type(self).NaN

        if self.expt == 0:
            return type(self).ZERO

        return type(self)(self.coeff * self.expt, self.expt - 1)

    def anti_differentiate(self):
        """Antiderivative c/(e+1) x^(e+1) of term c x^e."""
        if self.is_nan():
            return type(self).NaN

        return type(self)(self.coeff / (self.expt + 1), self.expt + 1)

    def eval(self, x):
        """Evaluate term at given x, for float x or NumPy array x.

        For exponent 0, the coefficient is returned regardless of x.
        """
        c = float(self.coeff)
        with np.errstate(over='ignore', invalid='ignore'):
            y = c * np.power(np.asarray(x, dtype=float), self.expt)
        if y.ndim:
            return y

        return float(y)

    def __neg__(self):
        """Negation."""
        return type(self)(-self.coeff, self.expt)

    def __add__(self, other):
        """Addition."""
        if not isinstance(other, RatTerm):
            return NotImplemented

        return self.add(other)

    def __sub__(self, other):
        """Subtraction."""
        if not isinstance(other, RatTerm):
            return NotImplemented

        return self.sub(other)

    def __eq__(self, other):
        """Equality test, all NaN terms being equal."""
        if not isinstance(other, RatTerm):
            return NotImplemented

        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()

        return self.coeff == other.coeff and self.expt == other.expt

    def __hash__(self):
        """Make terms hashable, consistent with equality."""
        if self.is_nan():
            return hash((type(self).__name__, None))

        return hash((type(self).__name__, self.coeff, self.expt))

    def __repr__(self):
        c = self.coeff
        if c.is_nan():
            return 'NaN'

        if c.is_zero():
            return '0'

        s = '-' if c.is_negative() else ''
        c = abs(c)
        e = self.expt
        if e == 0:
            return f'{s}{c}'  # x^0 = 1

        x = X if e == 1 else f'{X}^{e}'  # x^1 = x
        if c == RatNum.ONE:
            return f'{s}{x}'

        return f'{s}{c}*{x}'


RatTerm.ZERO = RatTerm(RatNum.ZERO)
RatTerm.NaN = RatTerm(RatNum.NaN)
