"""
===============================================================================
HAMILTON - Quaternion Functions
===============================================================================
Free-function spellings of the quaternion metrics and predicates, for code
that prefers ``norm(q)`` over ``q.norm()``. They live in this module rather
than shadowing ``abs``, ``math.isnan`` and friends.
===============================================================================
"""

from hamilton.quaternion import Quaternion


def norm(quat: Quaternion):
    """Squared magnitude a^2 + b^2 + c^2 + d^2."""
    return quat.norm()


def modulus(quat: Quaternion):
    """Magnitude sqrt(norm(q)), in the precision of the components."""
    return quat.modulus()


def conj(quat: Quaternion) -> Quaternion:
    """Conjugate (a, -b, -c, -d)."""
    return quat.conjugate()


def normalized(quat: Quaternion) -> Quaternion:
    """Unit quaternion q / |q|; NaN components for the zero quaternion."""
    return quat.normalized()


def inverse(quat: Quaternion) -> Quaternion:
    """Multiplicative inverse conj(q) / norm(q)."""
    return quat.inverse()


def isnan(quat: Quaternion) -> bool:
    """True if any component is NaN."""
    return quat.isnan()


def isinf(quat: Quaternion) -> bool:
    """True if any component is infinite."""
    return quat.isinf()


def isfinite(quat: Quaternion) -> bool:
    """True only if all four components are finite."""
    return quat.isfinite()
