"""Interleaving of per-dimension digit lists.

Interleaved digits keep one site per dimension and length scale; sites cycle
through the dimensions, coarsest length scale first. Digits are moved, never
changed.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ._errors import ShapeMismatchError, as_digit_array, check_positive, check_same_shape


def interleave_dimensions(*digitlists) -> np.ndarray:
    """Interleave the digits of all digit lists into one long digit list.

    Use this for quantics representation of multidimensional objects without
    fusing indices. Inverse of :func:`deinterleave_dimensions`.

    Parameters
    ----------
    *digitlists : array_like of int
        One digit list per dimension, all of the same shape ``(..., n)``.

    Returns
    -------
    np.ndarray
        Digits of shape ``(..., n * d)``; position ``i * d + k`` holds digit
        ``i`` of dimension ``k`` (0-based).

    Examples
    --------
    >>> interleave_dimensions([1, 2], [2, 1]).tolist()
    [1, 2, 2, 1]
    """
    context = "interleave_dimensions"
    if not digitlists:
        raise ShapeMismatchError(f"{context}: at least one digit list is required")

    arrays = [as_digit_array(bits, context) for bits in digitlists]
    check_same_shape(arrays, context)

    stacked = np.stack(arrays, axis=-1)
    return stacked.reshape(stacked.shape[:-2] + (-1,))


def deinterleave_dimensions(digitlist, d: int) -> Tuple[np.ndarray, ...]:
    """Split an interleaved digit list into one digit list per dimension.

    Inverse of :func:`interleave_dimensions`.

    Parameters
    ----------
    digitlist : array_like of int
        Interleaved digits of shape ``(..., n * d)``.
    d : int
        Number of dimensions.

    Returns
    -------
    tuple of np.ndarray
        ``d`` digit lists of shape ``(..., n)``.

    Raises
    ------
    ShapeMismatchError
        If the digit count is not divisible by ``d``.

    Examples
    --------
    >>> [s.tolist() for s in deinterleave_dimensions([1, 2, 2, 1], 2)]
    [[1, 2], [2, 1]]
    """
    context = "deinterleave_dimensions"
    d = check_positive(d, "d", context)
    bits = as_digit_array(digitlist, context)

    length = bits.shape[-1]
    if length % d != 0:
        raise ShapeMismatchError(
            f"{context}: {length} digits cannot be split into {d} dimensions"
        )
    return tuple(bits[..., k::d].copy() for k in range(d))
