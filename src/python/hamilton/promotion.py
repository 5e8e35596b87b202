"""
===============================================================================
HAMILTON - Operand Classification and Numeric Promotion
===============================================================================

Every binary operator on a quaternion first classifies the other operand
into one of three kinds and then promotes it to quaternion components:

    SCALAR    s       ->  (s, 0, 0, 0)
    COMPLEX   x + yj  ->  (x, y, 0, 0)
    QUATERNION        ->  unchanged

The result scalar type is numpy's arithmetic promotion of the operand
types (``np.result_type``). Python ``int``/``float``/``complex`` literals
take part as "weak" scalars, so ``Quaternion[float32] * 2.5`` stays
``float32`` while ``Quaternion[int64] * 2.5`` becomes ``float64``.
===============================================================================
"""

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from hamilton.constants import (
    COMPLEX_FOR_FLOAT, COMPONENT_NAMES, DEFAULT_FLOAT, SUPPORTED_KINDS
)


class OperandKind(Enum):
    """Kinds of operand the arithmetic operators accept."""
    QUATERNION = 'quaternion'
    COMPLEX = 'complex'
    SCALAR = 'scalar'
    UNSUPPORTED = 'unsupported'


def has_components(value) -> bool:
    """True if ``value`` exposes the four component accessors a, b, c, d."""
    return all(hasattr(value, name) for name in COMPONENT_NAMES)


def is_complex_pair(value) -> bool:
    """True for Python ``complex`` and numpy complex scalars."""
    return isinstance(value, (complex, np.complexfloating))


def is_real_scalar(value) -> bool:
    """True for real numbers usable as quaternion components (not bool)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def classify(value) -> OperandKind:
    """
    Classify an operand for the arithmetic dispatch.

    Quaternions are recognised by duck typing on the four component
    accessors plus a ``dtype``, so operands from another quaternion class
    with the same shape take part without conversion.
    """
    if has_components(value) and hasattr(value, 'dtype'):
        return OperandKind.QUATERNION
    if is_complex_pair(value):
        return OperandKind.COMPLEX
    if is_real_scalar(value):
        return OperandKind.SCALAR
    return OperandKind.UNSUPPORTED


def check_component_dtype(dtype) -> np.dtype:
    """
    Validate a component dtype.

    Raises
    ------
    TypeError
        If the dtype is not an integer or floating-point type.
    """
    dtype = np.dtype(dtype)
    if dtype.kind not in SUPPORTED_KINDS:
        raise TypeError(
            f"Quaternion components must be integer or floating point, "
            f"got dtype '{dtype}'."
        )
    return dtype


def real_dtype_of(complex_dtype) -> np.dtype:
    """Real dtype of each half of a complex dtype (complex64 -> float32)."""
    return np.finfo(complex_dtype).dtype


def complex_dtype_for(dtype) -> np.dtype:
    """
    Complex dtype holding a pair of components of ``dtype``.

    Integer components widen to the default complex type.
    """
    dtype = np.dtype(dtype)
    if dtype.kind == 'f':
        return COMPLEX_FOR_FLOAT.get(dtype, np.dtype(np.clongdouble))
    return COMPLEX_FOR_FLOAT[DEFAULT_FLOAT]


def pair_to_parts(value) -> np.ndarray:
    """
    Split a complex pair into a 2-element array [real, imag].

    The parts keep the precision of the pair (complex64 -> float32).
    """
    z = np.asarray(value)
    return np.array([z.real, z.imag], dtype=real_dtype_of(z.dtype))


def parts_to_pair(re, im, dtype):
    """
    Join two components of ``dtype`` into a complex scalar.

    The real and imaginary parts are assigned directly so no rounding
    happens through an intermediate Python ``complex``.
    """
    z = np.zeros((), dtype=complex_dtype_for(dtype))
    z.real = re
    z.imag = im
    return z[()]


def quaternion_components(value) -> np.ndarray:
    """Four components of a quaternion-shaped object as a numpy array."""
    return np.array([value.a, value.b, value.c, value.d])


def result_dtype(lhs, rhs) -> np.dtype:
    """
    Promoted scalar type of a binary operation.

    ``lhs`` and ``rhs`` may be dtypes, numpy arrays, numpy scalars or
    Python scalars.
    """
    return np.result_type(lhs, rhs)


def promote_operand(value, like: np.ndarray) -> Optional[np.ndarray]:
    """
    Promote an operand to four quaternion components.

    Parameters
    ----------
    value : Quaternion, complex or real scalar
        The operand to promote.
    like : np.ndarray
        Components of the quaternion on the other side of the operator.
        Scalars and complex pairs are promoted against its dtype so
        Python literals do not widen the result.

    Returns
    -------
    np.ndarray or None
        Promoted components, or None if ``value`` is not a supported
        operand (callers then return ``NotImplemented``).
    """
    kind = classify(value)

    if kind is OperandKind.QUATERNION:
        return quaternion_components(value)

    if kind is OperandKind.COMPLEX:
        dtype = real_dtype_of(result_dtype(like, value))
        parts = pair_to_parts(value)
        return np.array([parts[0], parts[1], 0, 0], dtype=dtype)

    if kind is OperandKind.SCALAR:
        return np.array([value, 0, 0, 0], dtype=result_dtype(like, value))

    return None


def promote_pairs(first, second) -> Tuple[np.ndarray, np.dtype]:
    """
    Components of the quaternion built from two complex pairs.

    ``second`` may also be a real scalar, taken as a pair with a zero
    imaginary part.

    Raises
    ------
    TypeError
        If ``second`` is neither a complex pair nor a real scalar.
    """
    head = pair_to_parts(first)

    if is_complex_pair(second):
        tail = pair_to_parts(second)
    elif is_real_scalar(second):
        tail = np.array([second, 0], dtype=result_dtype(head, second))
    else:
        raise TypeError(
            f"Second complex pair must be complex or real, "
            f"got {type(second).__name__}."
        )

    components = np.concatenate([head, tail])
    return components, components.dtype
