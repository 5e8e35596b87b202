"""
===============================================================================
HAMILTON - Quaternion Arithmetic
===============================================================================
Generic quaternion value type over numpy integer and floating-point scalar
types, with the full operator suite against quaternions, complex pairs and
real scalars.

Modules:
    quaternion -- The Quaternion value type and its operators
    functions  -- norm, modulus, conj, normalized, inverse, isnan/isinf/isfinite
    promotion  -- Operand classification and numeric type promotion
    constants  -- Supported scalar types and display form
===============================================================================
"""

from hamilton.quaternion import Quaternion, basis
from hamilton.functions import (
    conj, inverse, isfinite, isinf, isnan, modulus, norm, normalized
)

__version__ = '1.0.0'

__all__ = [
    'Quaternion', 'basis',
    'norm', 'modulus', 'conj', 'normalized', 'inverse',
    'isnan', 'isinf', 'isfinite',
]
