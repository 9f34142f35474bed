"""This module supports exact rational numbers with a NaN value.

Rational numbers are represented by gmpy2's mpq type, which keeps
numerator and denominator in lowest terms with a positive denominator.
On top of this, RatNum adds a distinguished NaN (not-a-number) value,
which is the result of any division by zero. NaN is infectious: any
arithmetic operation with a NaN operand returns NaN, and no exceptions
are raised for numerically undefined results.

The operators +,-,*,/ are overloaded, also for mixed use with Python ints.
Equality tests treat all NaN values as equal to each other.
"""

import math
import logging
import gmpy2

logging.debug(f'Load gmpy2 version {gmpy2.version()}')


class RatNum:
    """Immutable rational numbers, extended with a NaN value.

    Invariant: attribute 'value' is an mpq (reduced, positive denominator), or None for NaN.
    """

    __slots__ = 'value'

    ZERO = None  # set below
    ONE = None
    NaN = None

    def __init__(self, n=0, d=1, check=True):
        """Initialize rational number to n/d (zero, by default).

        For d=0, the rational number is set to NaN.
        """
        if check:
            n = self._intern(n, d)
        self.value = n

    @staticmethod
    def _intern(n, d):
        if not (isinstance(n, int) and isinstance(d, int)):
            raise TypeError('int numerator and denominator expected')

        if d == 0:
            return None

        return gmpy2.mpq(n, d)

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, RatNum):
            return a.value

        if isinstance(a, int):
            return gmpy2.mpq(a)

        return NotImplemented

    @staticmethod
    def _add(a, b):
        if a is None or b is None:
            return None

        return a + b

    @staticmethod
    def _sub(a, b):
        if a is None or b is None:
            return None

        return a - b

    @staticmethod
    def _mul(a, b):
        if a is None or b is None:
            return None

        return a * b

    @staticmethod
    def _div(a, b):
        if a is None or b is None or b == 0:
            return None  # x/0 is NaN, also for x=0

        return a / b

    @classmethod
    def value_of(cls, s):
        """Convert string s of the form N, N/D, or NaN to a rational number.

        Raises ValueError if s is not of this form.
        """
        if s == 'NaN':
            return cls.NaN

        n, sep, d = s.partition('/')
        try:
            n = int(n)
            d = int(d) if sep else 1
        except ValueError as exc:
            raise ValueError(f'ill formatted rational number {s!r}') from exc

        return cls(n, d)

    def is_nan(self):
        """Test for NaN."""
        return self.value is None

    def is_zero(self):
        """Test for zero (NaN is not zero)."""
        return self.value is not None and self.value == 0

    def is_negative(self):
        """Test for negative value (NaN is not negative)."""
        return self.value is not None and self.value < 0

    def is_positive(self):
        """Test for positive value (NaN is not positive)."""
        return self.value is not None and self.value > 0

    @property
    def numerator(self):
        """Numerator in lowest terms, carrying the sign."""
        if self.value is None:
            raise ValueError('NaN has no numerator')

        return int(self.value.numerator)

    @property
    def denominator(self):
        """Positive denominator in lowest terms."""
        if self.value is None:
            raise ValueError('NaN has no denominator')

        return int(self.value.denominator)

    def negate(self):
        """Additive inverse (NaN for NaN)."""
        return -self

    def add(self, other):
        """Add other to this rational number."""
        return self + other

    def sub(self, other):
        """Subtract other from this rational number."""
        return self - other

    def mul(self, other):
        """Multiply this rational number by other."""
        return self * other

    def div(self, other):
        """Divide this rational number by other, NaN if other is zero."""
        return self / other

    def __add__(self, other):
        """Addition."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtraction."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    def __mul__(self, other):
        """Multiplication."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Division."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._div(self.value, other), check=False)

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._div(other, self.value), check=False)

    def __neg__(self):
        """Negation."""
        a = self.value
        return type(self)(None if a is None else -a, check=False)

    def __pos__(self):
        """Unary +."""
        return self

    def __abs__(self):
        """Absolute value."""
        a = self.value
        return type(self)(None if a is None else abs(a), check=False)

    def __float__(self):
        """Nearest float, NaN for NaN, and signed infinity beyond float range."""
        a = self.value
        if a is None:
            return math.nan

        try:
            return float(a)
        except OverflowError:
            return math.inf if a > 0 else -math.inf

    def __eq__(self, other):
        """Equality test, all NaNs being equal."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self.value is None or other is None:
            return self.value is None and other is None

        return self.value == other

    def __hash__(self):
        """Make rational numbers hashable, consistent with equality for ints."""
        if self.value is None:
            return hash((type(self).__name__, None))

        return hash(self.value)

    def __bool__(self):
        """Truth value testing.

        Return False if this rational number is zero, True otherwise (also for NaN).
        """
        return not self.is_zero()

    def __repr__(self):
        a = self.value
        if a is None:
            return 'NaN'

        if a.denominator == 1:
            return f'{a.numerator}'

        return f'{a.numerator}/{a.denominator}'


RatNum.ZERO = RatNum(0)
RatNum.ONE = RatNum(1)
RatNum.NaN = RatNum(None, check=False)
