"""
===============================================================================
HAMILTON - Library Constants
===============================================================================
Central place for the constants shared by the quaternion type, the promotion
rules and the free functions. Scalar types are numpy dtypes throughout.
===============================================================================
"""

import numpy as np


# =============================================================================
# SCALAR TYPES
# =============================================================================
# Components may be any numpy integer or floating-point type. Complex,
# boolean and object dtypes are rejected at construction.
SUPPORTED_KINDS = ('i', 'u', 'f')

DEFAULT_FLOAT = np.dtype(np.float64)

# Component precision <-> complex-pair precision
COMPLEX_FOR_FLOAT = {
    np.dtype(np.float16): np.dtype(np.complex64),
    np.dtype(np.float32): np.dtype(np.complex64),
    np.dtype(np.float64): np.dtype(np.complex128),
    np.dtype(np.longdouble): np.dtype(np.clongdouble),
}

# =============================================================================
# BASIS
# =============================================================================
COMPONENT_NAMES = ('a', 'b', 'c', 'd')
BASIS_NAMES = ('1', 'i', 'j', 'k')

# =============================================================================
# DISPLAY
# =============================================================================
DISPLAY_OPEN = '('
DISPLAY_CLOSE = ')'
DISPLAY_SEPARATOR = ','
