"""quantics - conversion between integer indices and quantics digits.

This package converts multi-dimensional integer indices to and from the
quantics representation used by quantics tensor cross interpolation, in
either the fused or the interleaved layout and for any digit base.

Examples
--------
>>> from quantics import index_to_quantics, quantics_to_index

>>> # One index with 4 binary digits
>>> index_to_quantics(5, 4).tolist()
[1, 2, 1, 1]
>>> quantics_to_index([1, 2, 1, 1])
5

>>> # Two indices, fused into one base-4 digit per length scale
>>> q = index_to_quantics([2, 6], 3, unfoldingscheme="fused")
>>> q.tolist()
[3, 1, 4]
>>> quantics_to_index(q, 2, unfoldingscheme="fused").tolist()
[2, 6]
"""

# Unfolding scheme selection
from .unfolding import UnfoldingScheme, as_unfolding_scheme

# Digit packing and interleaving
from .packing import fuse_dimensions, merge_dimensions, split_dimensions
from .interleaving import interleave_dimensions, deinterleave_dimensions

# Index conversion
from .codec import (
    binary_representation,
    digit_representation,
    index_to_quantics,
    index_to_quantics_fused,
    index_to_quantics_interleaved,
    quantics_to_index,
    quantics_to_index_fused,
    quantics_to_index_interleaved,
)

# Function wrapper
from .functions import QuanticsFunction

# Exceptions
from ._errors import (
    QuanticsError,
    ShapeMismatchError,
    OutOfRangeError,
    UnsupportedSchemeError,
)

__version__ = "0.1.0"

__all__ = [
    # Unfolding scheme
    "UnfoldingScheme",
    "as_unfolding_scheme",
    # Packing and interleaving
    "fuse_dimensions",
    "merge_dimensions",
    "split_dimensions",
    "interleave_dimensions",
    "deinterleave_dimensions",
    # Index conversion
    "binary_representation",
    "digit_representation",
    "index_to_quantics",
    "index_to_quantics_fused",
    "index_to_quantics_interleaved",
    "quantics_to_index",
    "quantics_to_index_fused",
    "quantics_to_index_interleaved",
    # Function wrapper
    "QuanticsFunction",
    # Exceptions
    "QuanticsError",
    "ShapeMismatchError",
    "OutOfRangeError",
    "UnsupportedSchemeError",
]
