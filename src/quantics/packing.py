"""Fusing and splitting of per-dimension digit lists.

A fused digit carries the digits of all ``d`` dimensions at one length scale,
as a single digit of base ``B**d``. The first dimension is the least
significant one. All digits are 1-based.

Every function accepts arrays with leading batch axes; the last axis is the
digit axis.

Examples
--------
>>> from quantics.packing import fuse_dimensions, split_dimensions

>>> fuse_dimensions([1, 2, 1], [2, 1, 1]).tolist()
[3, 2, 1]
>>> [s.tolist() for s in split_dimensions([3, 2, 1], 2)]
[[1, 2, 1], [2, 1, 1]]
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from ._errors import (
    ShapeMismatchError,
    as_digit_array,
    check_base,
    check_capacity,
    check_digit_range,
    check_positive,
    check_same_shape,
)


def fuse_dimensions(
    *digitlists,
    base: int = 2,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Merge ``d`` digit lists into one digit list of base ``base**d``.

    This fuses legs for different dimensions that have equal length scale.
    Inverse of :func:`split_dimensions`.

    Parameters
    ----------
    *digitlists : array_like of int
        One digit list per dimension, all of the same shape, digits in
        ``[1, base]``.
    base : int, optional
        Base of the input digits (default 2).
    out : np.ndarray, optional
        Integer array of the result shape that receives the fused digits.

    Returns
    -------
    np.ndarray
        Fused digits in ``[1, base**d]``.

    Raises
    ------
    ShapeMismatchError
        If no digit list is given or the lists differ in shape.
    OutOfRangeError
        If a digit lies outside ``[1, base]``.
    """
    context = "fuse_dimensions"
    base = check_base(base, context)
    if not digitlists:
        raise ShapeMismatchError(f"{context}: at least one digit list is required")

    arrays = [as_digit_array(bits, context) for bits in digitlists]
    check_same_shape(arrays, context)
    for arr in arrays:
        check_digit_range(arr, base, context)
    check_capacity(base, len(arrays), context)

    if out is not None and out.shape != arrays[0].shape:
        raise ShapeMismatchError(
            f"{context}: out has shape {out.shape}, expected {arrays[0].shape}"
        )

    # accumulate into a fresh buffer, out may alias one of the inputs
    fused = np.ones(arrays[0].shape, dtype=np.int64)
    p = 1
    for arr in arrays:
        fused += (arr - 1) * p
        p *= base

    if out is None:
        return fused
    out[...] = fused
    return out


def merge_dimensions(*digitlists, base: int = 2) -> np.ndarray:
    """See :func:`fuse_dimensions`."""
    return fuse_dimensions(*digitlists, base=base)


def split_dimensions(
    digitlist,
    d: int,
    base: int = 2,
    out: Optional[Sequence[np.ndarray]] = None,
) -> Tuple[np.ndarray, ...]:
    """Split a fused digit list of base ``base**d`` into ``d`` digit lists.

    Inverse of :func:`fuse_dimensions`.

    Parameters
    ----------
    digitlist : array_like of int
        Fused digits in ``[1, base**d]``.
    d : int
        Number of dimensions.
    base : int, optional
        Base of the output digits (default 2).
    out : sequence of np.ndarray, optional
        ``d`` integer arrays of the input shape that receive the digits.

    Returns
    -------
    tuple of np.ndarray
        One digit list per dimension, digits in ``[1, base]``.

    Raises
    ------
    OutOfRangeError
        If a fused digit lies outside ``[1, base**d]``.
    """
    context = "split_dimensions"
    base = check_base(base, context)
    d = check_positive(d, "d", context)
    fused = as_digit_array(digitlist, context)
    upper = check_capacity(base, d, context)
    check_digit_range(fused, upper, context, what="fused digit")

    if out is None:
        out = tuple(np.empty(fused.shape, dtype=np.int64) for _ in range(d))
    else:
        if len(out) != d:
            raise ShapeMismatchError(f"{context}: expected {d} output arrays, got {len(out)}")
        for arr in out:
            if arr.shape != fused.shape:
                raise ShapeMismatchError(
                    f"{context}: output array has shape {arr.shape}, expected {fused.shape}"
                )

    zero_based = fused - 1
    if base == 2:
        for k in range(d):
            out[k][...] = ((zero_based >> k) & 1) + 1
    else:
        p = 1
        for k in range(d):
            out[k][...] = (zero_based // p) % base + 1
            p *= base
    return tuple(out)
