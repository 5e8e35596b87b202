"""
===============================================================================
HAMILTON - Quaternion Value Type
===============================================================================

Generic quaternion arithmetic over any numpy integer or floating-point
scalar type.

Convention
----------
Components are stored real-first:

    q = a + b*i + c*j + d*k

where ``a`` is the real part and ``(b, c, d)`` the imaginary part on the
i, j, k basis. The basis multiplies as

    i^2 = j^2 = k^2 = ijk = -1,    ij = k,  jk = i,  ki = j

so multiplication is NOT commutative (``ji = -k``).

Complex pairs
-------------
A quaternion can also be read as two complex numbers

    q = (a + b*i) + (c + d*i) * j

``complex_a`` and ``complex_b`` return those halves and ``Quaternion(z1, z2)``
builds a quaternion from them.

Numeric degeneration
--------------------
No operation raises on bad numerics. Dividing by a zero quaternion, or
normalizing/inverting one, yields inf/NaN components following IEEE-754.
Use ``isnan``, ``isinf`` and ``isfinite`` to detect it afterwards.

References
----------
    [1] Hamilton, "On Quaternions", Philosophical Magazine, 1844.
    [2] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.

===============================================================================
"""

import logging
from typing import Optional, Union

import numpy as np

from hamilton.constants import (
    BASIS_NAMES, DISPLAY_CLOSE, DISPLAY_OPEN, DISPLAY_SEPARATOR
)
from hamilton.promotion import (
    OperandKind, check_component_dtype, classify, has_components,
    is_complex_pair, is_real_scalar, parts_to_pair, promote_operand,
    promote_pairs, quaternion_components
)

logger = logging.getLogger(__name__)

Operand = Union['Quaternion', complex, float, int, np.number]


# =============================================================================
# CLOSED FORMS
# =============================================================================
# Each helper takes component arrays and returns a new component array.
# Unpacking keeps numpy scalars, so the result dtype is the promotion of
# the operand dtypes.

def _hamilton_product(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Hamilton product p * q."""
    a1, b1, c1, d1 = p
    a2, b2, c2, d2 = q
    return np.array([
        a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
        a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
        a1 * c2 + c1 * a2 + d1 * b2 - b1 * d2,
        a1 * d2 + d1 * a2 + b1 * c2 - c1 * b2,
    ])


def _times_pair(q: np.ndarray, re, im) -> np.ndarray:
    """Quaternion times complex pair, q * (re + im*i)."""
    a, b, c, d = q
    return np.array([
        a * re - b * im,
        a * im + b * re,
        c * re + d * im,
        d * re - c * im,
    ])


def _pair_times(re, im, q: np.ndarray) -> np.ndarray:
    """Complex pair times quaternion, (re + im*i) * q."""
    a, b, c, d = q
    return np.array([
        re * a - im * b,
        re * b + im * a,
        re * c - im * d,
        re * d + im * c,
    ])


def _squared_norm(q: np.ndarray):
    a, b, c, d = q
    return a * a + b * b + c * c + d * d


def _quotient(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    """
    Quotient p / q = p * conj(q) / norm(q).

    A zero divisor gives inf/NaN components instead of raising.
    """
    a1, b1, c1, d1 = p
    a2, b2, c2, d2 = q
    numerator = np.array([
        a1 * a2 + b1 * b2 + c1 * c2 + d1 * d2,
        -a1 * b2 + b1 * a2 - c1 * d2 + d1 * c2,
        -a1 * c2 + c1 * a2 - d1 * b2 + b1 * d2,
        -a1 * d2 + d1 * a2 - b1 * c2 + c1 * b2,
    ])
    return _divide(numerator, _squared_norm(q))


def _divide(numerator: np.ndarray, denominator) -> np.ndarray:
    """True division with IEEE-754 propagation of zero divisors."""
    if denominator == 0:
        logger.debug("Division by zero-norm divisor; result is not finite.")
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.true_divide(numerator, denominator)


def _wrap(components: np.ndarray) -> 'Quaternion':
    return Quaternion(components[0], components[1], components[2],
                      components[3], dtype=components.dtype)


class Quaternion:
    """
    Immutable quaternion with components of a single numpy scalar type.

    Parameters
    ----------
    a, b, c, d : scalar, optional
        Real part and i, j, k components. Omitted components are zero.
        If ``a`` is a complex number, the arguments are read as complex
        pairs instead: ``Quaternion(z1)`` or ``Quaternion(z1, z2)``.
        If ``a`` is a quaternion, a converted copy of it is made.
    dtype : numpy dtype, optional
        Scalar type of the components. Inferred from the arguments when
        omitted (Python ints -> default integer, Python floats ->
        float64, numpy scalars keep their type).

    Raises
    ------
    TypeError
        If a component is not a real number, or the dtype is not an
        integer or floating-point type.

    Examples
    --------
    >>> Quaternion(0.1, 0.5, 0.9, 1.0)
    >>> Quaternion(1 + 2j, 3 + 4j)                 # (1, 2, 3, 4)
    >>> Quaternion(Quaternion(1, 0, 1, 0), dtype=np.float32)
    """

    # Keep numpy from broadcasting over a Quaternion operand, so that
    # ``np.float64(2) * q`` dispatches to ``Quaternion.__rmul__``.
    __array_ufunc__ = None

    def __init__(self, a=0, b=0, c=0, d=0, dtype=None) -> None:
        if classify(a) is OperandKind.QUATERNION:
            self._check_unused(type(a).__name__, b, c, d)
            components = quaternion_components(a)
        elif is_complex_pair(a):
            self._check_unused('complex pair', c, d)
            components, _ = promote_pairs(a, b)
        else:
            for name, value in zip('abcd', (a, b, c, d)):
                if not is_real_scalar(value):
                    raise TypeError(
                        f"Component '{name}' must be a real number, "
                        f"got {type(value).__name__}."
                    )
            components = np.array([a, b, c, d], dtype=np.result_type(a, b, c, d))

        if dtype is not None:
            components = components.astype(check_component_dtype(dtype))
        else:
            check_component_dtype(components.dtype)

        components.setflags(write=False)
        self._q = components

    @staticmethod
    def _check_unused(source: str, *values) -> None:
        if not all(is_real_scalar(value) and value == 0 for value in values):
            raise TypeError(
                f"Too many components when constructing from a {source}."
            )

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_complex(cls, first, second=0) -> 'Quaternion':
        """
        Build a quaternion from one or two complex pairs.

        ``first`` supplies (a, b) and ``second`` supplies (c, d).
        """
        if is_real_scalar(first):
            first = complex(first)
        elif not is_complex_pair(first):
            raise TypeError(
                f"First complex pair must be a number, got {type(first).__name__}."
            )
        return cls(first, second)

    def astype(self, dtype) -> 'Quaternion':
        """Converted copy with components cast to ``dtype``."""
        return Quaternion(self, dtype=dtype)

    # =========================================================================
    # PROPERTIES - Read access to the components
    # =========================================================================

    @property
    def a(self):
        """Real component."""
        return self._q[0]

    @property
    def b(self):
        """i component."""
        return self._q[1]

    @property
    def c(self):
        """j component."""
        return self._q[2]

    @property
    def d(self):
        """k component."""
        return self._q[3]

    @property
    def real(self):
        """Real part (alias for ``a``)."""
        return self._q[0]

    @property
    def unreal(self) -> 'Quaternion':
        """Pure-imaginary part (0, b, c, d), same dtype."""
        return Quaternion(0, self.b, self.c, self.d, dtype=self.dtype)

    @property
    def complex_a(self):
        """First complex pair a + b*i."""
        return parts_to_pair(self._q[0], self._q[1], self.dtype)

    @property
    def complex_b(self):
        """Second complex pair c + d*i."""
        return parts_to_pair(self._q[2], self._q[3], self.dtype)

    @property
    def dtype(self) -> np.dtype:
        """numpy scalar type of the components."""
        return self._q.dtype

    @property
    def components(self) -> np.ndarray:
        """
        Components as a 4-element numpy array [a, b, c, d].

        Returns
        -------
        np.ndarray
            Writable copy of the internal storage.
        """
        return self._q.copy()

    # =========================================================================
    # NORM AND DERIVED VALUES
    # =========================================================================

    def norm(self):
        """
        Squared magnitude a^2 + b^2 + c^2 + d^2.

        No square root is taken, so the result keeps the component dtype.
        """
        return _squared_norm(self._q)

    def modulus(self):
        """
        Magnitude sqrt(norm).

        The result precision matches the components (float32, float64,
        longdouble); integer components give the default float type.
        """
        return np.sqrt(self.norm())

    def conjugate(self) -> 'Quaternion':
        """Conjugate (a, -b, -c, -d)."""
        a, b, c, d = self._q
        return _wrap(np.array([a, -b, -c, -d]))

    def normalized(self) -> 'Quaternion':
        """
        Unit quaternion q / |q|.

        The zero quaternion normalizes to NaN components.
        """
        return self / self.modulus()

    def inverse(self) -> 'Quaternion':
        """
        Multiplicative inverse conj(q) / norm(q).

        Satisfies q * q.inverse() == (1, 0, 0, 0) up to rounding. The
        zero quaternion has no inverse and gives non-finite components.
        """
        return _wrap(_divide(self.conjugate()._q, self.norm()))

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def isnan(self) -> bool:
        """True if any component is NaN."""
        return bool(np.any(np.isnan(self._q)))

    def isinf(self) -> bool:
        """True if any component is infinite."""
        return bool(np.any(np.isinf(self._q)))

    def isfinite(self) -> bool:
        """True if every component is finite."""
        return bool(np.all(np.isfinite(self._q)))

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================
    # Every operator promotes the other operand to components and applies
    # one canonical operation. Complex-pair multiplication and subtraction
    # from a non-quaternion are spelled out as their own cases.

    def __add__(self, other: Operand) -> 'Quaternion':
        """Component-wise sum; scalars and complex pairs are promoted."""
        rhs = promote_operand(other, self._q)
        if rhs is None:
            return NotImplemented
        return _wrap(self._q + rhs)

    def __radd__(self, other: Operand) -> 'Quaternion':
        lhs = promote_operand(other, self._q)
        if lhs is None:
            return NotImplemented
        return _wrap(lhs + self._q)

    def __sub__(self, other: Operand) -> 'Quaternion':
        """Component-wise difference; scalars and complex pairs are promoted."""
        rhs = promote_operand(other, self._q)
        if rhs is None:
            return NotImplemented
        return _wrap(self._q - rhs)

    def __rsub__(self, other: Operand) -> 'Quaternion':
        """
        Difference with a quaternion on the right.

        scalar - q   -> (s - a, -b, -c, -d)
        complex - q  -> (re - a, im - b, -c, -d)
        """
        lhs = promote_operand(other, self._q)
        if lhs is None:
            return NotImplemented
        if classify(other) is OperandKind.QUATERNION:
            return _wrap(lhs - self._q)

        a, b, c, d = self._q
        return _wrap(np.array([lhs[0] - a, lhs[1] - b, -c, -d]))

    def __mul__(self, other: Operand) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product (order preserved)
        - Quaternion * complex    -> q * (re + im*i), closed form
        - Quaternion * scalar     -> component-wise scaling

        Parameters
        ----------
        other : Quaternion, complex or scalar
            Right-hand operand.

        Returns
        -------
        Quaternion
            Product quaternion.
        """
        kind = classify(other)
        rhs = promote_operand(other, self._q)
        if rhs is None:
            return NotImplemented

        if kind is OperandKind.QUATERNION:
            return _wrap(_hamilton_product(self._q, rhs))
        if kind is OperandKind.COMPLEX:
            return _wrap(_times_pair(self._q, rhs[0], rhs[1]))
        return _wrap(self._q * other)

    def __rmul__(self, other: Operand) -> 'Quaternion':
        """
        Multiplication with the quaternion on the right.

        ``(re + im*i) * q`` differs from ``q * (re + im*i)`` in the j and k
        components, so it has its own closed form.
        """
        kind = classify(other)
        lhs = promote_operand(other, self._q)
        if lhs is None:
            return NotImplemented

        if kind is OperandKind.QUATERNION:
            return _wrap(_hamilton_product(lhs, self._q))
        if kind is OperandKind.COMPLEX:
            return _wrap(_pair_times(lhs[0], lhs[1], self._q))
        return _wrap(other * self._q)

    def __truediv__(self, other: Operand) -> 'Quaternion':
        """
        Division operator.

        - Quaternion / Quaternion -> self * conj(other) / norm(other)
        - Quaternion / complex    -> complex promoted to (re, im, 0, 0)
        - Quaternion / scalar     -> component-wise division

        Integer operands divide like Python's ``/`` and produce floats.
        """
        kind = classify(other)
        rhs = promote_operand(other, self._q)
        if rhs is None:
            return NotImplemented

        if kind is OperandKind.SCALAR:
            return _wrap(_divide(self._q, other))
        return _wrap(_quotient(self._q, rhs))

    def __rtruediv__(self, other: Operand) -> 'Quaternion':
        """
        Division with the quaternion as divisor.

        scalar / q -> s * conj(q) / norm(q)
        """
        kind = classify(other)
        lhs = promote_operand(other, self._q)
        if lhs is None:
            return NotImplemented

        if kind is OperandKind.SCALAR:
            return _wrap(_divide(other * self.conjugate()._q, self.norm()))
        return _wrap(_quotient(lhs, self._q))

    def __neg__(self) -> 'Quaternion':
        """Negate all components."""
        return _wrap(-self._q)

    def __pos__(self) -> 'Quaternion':
        return _wrap(self._q)

    def __abs__(self):
        """Magnitude, so the builtin ``abs(q)`` works."""
        return self.modulus()

    def __eq__(self, other: object) -> bool:
        """
        Exact component-wise equality.

        Any object exposing ``a``, ``b``, ``c`` and ``d`` can be compared,
        whatever its concrete class.
        """
        if not has_components(other):
            return NotImplemented
        return bool(self.a == other.a and self.b == other.b
                    and self.c == other.c and self.d == other.d)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        """Hash of the component values; equal quaternions hash equal."""
        return hash(tuple(self._q.tolist()))

    def __repr__(self) -> str:
        """
        Unambiguous string representation for debugging.

        Format: Quaternion(a, b, c, d, dtype='...')
        """
        a, b, c, d = (str(x) for x in self._q)
        return f"Quaternion({a}, {b}, {c}, {d}, dtype='{self.dtype.name}')"

    def __str__(self) -> str:
        """Canonical text form (a,b,c,d)."""
        return (DISPLAY_OPEN
                + DISPLAY_SEPARATOR.join(str(x) for x in self._q)
                + DISPLAY_CLOSE)


def basis(name: str, dtype: Optional[np.dtype] = None) -> Quaternion:
    """
    Basis quaternion ``'1'``, ``'i'``, ``'j'`` or ``'k'``.

    Raises
    ------
    ValueError
        If ``name`` is not one of the four basis names.
    """
    if name not in BASIS_NAMES:
        raise ValueError(
            f"Unknown basis element '{name}'. Use one of {BASIS_NAMES}."
        )
    components = [0, 0, 0, 0]
    components[BASIS_NAMES.index(name)] = 1
    return Quaternion(*components, dtype=dtype)
