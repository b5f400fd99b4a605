"""Conversion between integer indices and quantics digits.

A 1-based index ``u`` in ``[1, B**n]`` is represented by the ``n`` base-``B``
digits of ``u - 1``, most significant (coarsest length scale) first, each
shifted by ``+1`` so that digits take the values ``1..B``.

For ``d``-dimensional indices the per-dimension digits are either fused into
one digit of base ``B**d`` per length scale, or interleaved into ``n * d``
sites (see :mod:`quantics.unfolding`).

All conversions are vectorized: indices may carry leading batch axes, and so
may digit sequences. Values outside their valid range raise
:class:`~quantics.OutOfRangeError` instead of wrapping around.

Examples
--------
>>> from quantics.codec import index_to_quantics, quantics_to_index

>>> index_to_quantics(5, 4).tolist()
[1, 2, 1, 1]
>>> quantics_to_index([1, 2, 1, 1])
5
>>> q = index_to_quantics([2, 6], 3, unfoldingscheme="interleaved")
>>> q.tolist()
[1, 2, 1, 1, 2, 2]
>>> quantics_to_index(q, 2, unfoldingscheme="interleaved").tolist()
[2, 6]
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from ._errors import (
    ShapeMismatchError,
    UnsupportedSchemeError,
    as_digit_array,
    as_int_array,
    check_base,
    check_capacity,
    check_digit_range,
    check_positive,
)
from .interleaving import deinterleave_dimensions, interleave_dimensions
from .unfolding import SchemeLike, UnfoldingScheme, as_unfolding_scheme


def _place_values(base: int, n: int) -> np.ndarray:
    """Place values ``[base**(n-1), ..., base, 1]``."""
    return base ** np.arange(n - 1, -1, -1, dtype=np.int64)


def _expand(values: np.ndarray, n: int, base: int) -> np.ndarray:
    """0-based base-``base`` digits of ``values``, shape ``values.shape + (n,)``."""
    if base == 2:
        shifts = np.arange(n - 1, -1, -1, dtype=np.int64)
        return (values[..., None] >> shifts) & 1
    return (values[..., None] // _place_values(base, n)) % base


def _zero_based_indices(indices, n: int, base: int, context: str) -> np.ndarray:
    """Validate 1-based indices against ``[1, base**n]`` and shift them to 0-based."""
    arr = as_int_array(indices, context, what="index")
    capacity = check_capacity(base, n, context)
    check_digit_range(arr, capacity, context, what="index")
    return arr - 1


def _digits_to_index(digits: np.ndarray, base: int, context: str) -> np.ndarray:
    """Place-value decode of single-dimension digits along the last axis."""
    n = digits.shape[-1]
    if n == 0:
        raise ShapeMismatchError(f"{context}: empty digit sequence")
    check_capacity(base, n, context)
    check_digit_range(digits, base, context)
    return ((digits - 1) * _place_values(base, n)).sum(axis=-1) + 1


def digit_representation(value, numdigits: int = 8, base: int = 2) -> np.ndarray:
    """Convert a non-negative integer to its base-``base`` digits.

    Parameters
    ----------
    value : int or array_like of int
        Integer(s) in ``[0, base**numdigits - 1]``.
    numdigits : int, optional
        How many digits to zero-pad to (default 8).
    base : int, optional
        Digit base (default 2).

    Returns
    -------
    np.ndarray
        0-based digits, most significant first, shape ``shape(value) + (numdigits,)``.

    Examples
    --------
    >>> digit_representation(5, numdigits=4).tolist()
    [0, 1, 0, 1]
    >>> digit_representation(7, numdigits=3, base=3).tolist()
    [0, 2, 1]
    """
    context = "digit_representation"
    base = check_base(base, context)
    numdigits = check_positive(numdigits, "numdigits", context)
    capacity = check_capacity(base, numdigits, context)
    values = as_int_array(value, context, what="value")
    check_digit_range(values, capacity - 1, context, what="value", lower=0)
    return _expand(values, numdigits, base)


def binary_representation(value, numdigits: int = 8) -> np.ndarray:
    """Convert an integer to its binary representation as booleans.

    * ``value``       an integer in ``[0, 2**numdigits - 1]``
    * ``numdigits``   how many digits to zero-pad to
    """
    return digit_representation(value, numdigits).astype(bool)


def index_to_quantics_fused(indices, n: int, base: int = 2) -> np.ndarray:
    """Convert ``d`` indices to fused quantics representation with ``n`` digits.

    Parameters
    ----------
    indices : array_like of int
        Indices of shape ``(..., d)``, each in ``[1, base**n]``.
    n : int
        Number of digits per dimension.
    base : int, optional
        Digit base per dimension (default 2).

    Returns
    -------
    np.ndarray
        Fused digits of shape ``(..., n)``, each in ``[1, base**d]``.
    """
    context = "index_to_quantics_fused"
    base = check_base(base, context)
    n = check_positive(n, "n", context)
    zero_based = _zero_based_indices(indices, n, base, context)
    if zero_based.ndim == 0 or zero_based.shape[-1] == 0:
        raise ShapeMismatchError(f"{context}: expected a sequence of at least one index")

    d = zero_based.shape[-1]
    check_capacity(base, d, context)
    digits = _expand(zero_based, n, base)
    weights = base ** np.arange(d, dtype=np.int64)
    return (digits * weights[:, None]).sum(axis=-2) + 1


def index_to_quantics_interleaved(indices, n: int, base: int = 2) -> np.ndarray:
    """Convert ``d`` indices to interleaved quantics representation with ``n`` digits.

    Parameters
    ----------
    indices : array_like of int
        Indices of shape ``(..., d)``, each in ``[1, base**n]``.
    n : int
        Number of digits per dimension.
    base : int, optional
        Digit base (default 2).

    Returns
    -------
    np.ndarray
        Interleaved digits of shape ``(..., n * d)``, each in ``[1, base]``.
    """
    context = "index_to_quantics_interleaved"
    base = check_base(base, context)
    n = check_positive(n, "n", context)
    zero_based = _zero_based_indices(indices, n, base, context)
    if zero_based.ndim == 0 or zero_based.shape[-1] == 0:
        raise ShapeMismatchError(f"{context}: expected a sequence of at least one index")

    digits = _expand(zero_based, n, base) + 1
    return interleave_dimensions(*np.moveaxis(digits, -2, 0))


def index_to_quantics(
    indices,
    n: int,
    *,
    unfoldingscheme: SchemeLike = None,
    base: int = 2,
) -> np.ndarray:
    """Convert indices to quantics representation with ``n`` digits per dimension.

    Parameters
    ----------
    indices : int or array_like of int
        A single index, or ``d`` indices along the last axis. Each index
        must lie in ``[1, base**n]``.
    n : int
        Number of digits per dimension, i.e. the number of length scales of
        the quantics tensor train.
    unfoldingscheme : UnfoldingScheme or str, optional
        ``"fused"`` or ``"interleaved"``. Defaults to
        :meth:`UnfoldingScheme.default` (fused unless ``QUANTICS_UNFOLDING``
        says otherwise). Irrelevant for a single index.
    base : int, optional
        Digit base (default 2).

    Returns
    -------
    np.ndarray
        Quantics digits: ``n`` of them when fused, ``n * d`` when interleaved.

    Raises
    ------
    OutOfRangeError
        If an index lies outside ``[1, base**n]``.
    UnsupportedSchemeError
        If the unfolding scheme is unknown.
    """
    if np.ndim(indices) == 0:
        return index_to_quantics_fused([indices], n, base=base)

    scheme = as_unfolding_scheme(unfoldingscheme)
    if scheme == UnfoldingScheme.FUSED:
        return index_to_quantics_fused(indices, n, base=base)
    elif scheme == UnfoldingScheme.INTERLEAVED:
        return index_to_quantics_interleaved(indices, n, base=base)
    else:
        raise UnsupportedSchemeError(f"index_to_quantics: unhandled unfolding scheme {scheme!r}")


def quantics_to_index_fused(digits, d: int, base: int = 2) -> np.ndarray:
    """Convert a ``d``-dimensional index from fused quantics representation to ``d`` integers.

    The digits of every dimension are extracted and weighted by their place
    value in a single pass over the fused digits; the result equals
    :func:`~quantics.split_dimensions` followed by a single-dimension decode
    of each part.

    * ``digits``   fused digits of shape ``(..., n)``, each in ``[1, base**d]``
    * ``d``        number of dimensions
    * ``base``     digit base per dimension

    Returns an array of shape ``(..., d)``.
    """
    context = "quantics_to_index_fused"
    base = check_base(base, context)
    d = check_positive(d, "d", context)
    fused = as_digit_array(digits, context)
    n = fused.shape[-1]
    if n == 0:
        raise ShapeMismatchError(f"{context}: empty digit sequence")
    check_capacity(base, n, context)
    upper = check_capacity(base, d, context)
    check_digit_range(fused, upper, context, what="fused digit")

    zero_based = fused - 1
    if base == 2:
        per_dimension = (zero_based[..., None] >> np.arange(d, dtype=np.int64)) & 1
    else:
        per_dimension = (zero_based[..., None] // base ** np.arange(d, dtype=np.int64)) % base
    # per_dimension has shape (..., n, d)
    return (per_dimension * _place_values(base, n)[:, None]).sum(axis=-2) + 1


def quantics_to_index_interleaved(digits, d: int, base: int = 2) -> np.ndarray:
    """Convert a ``d``-dimensional index from interleaved quantics representation to ``d`` integers.

    * ``digits``   interleaved digits of shape ``(..., n * d)``, each in ``[1, base]``
    * ``d``        number of dimensions
    * ``base``     digit base

    Returns an array of shape ``(..., d)``.
    """
    context = "quantics_to_index_interleaved"
    base = check_base(base, context)
    per_dimension = deinterleave_dimensions(digits, d)
    return np.stack([_digits_to_index(q, base, context) for q in per_dimension], axis=-1)


def quantics_to_index(
    digits,
    d: Optional[int] = None,
    *,
    unfoldingscheme: SchemeLike = None,
    base: int = 2,
) -> Union[int, np.ndarray]:
    """Convert quantics digits back to indices.

    Parameters
    ----------
    digits : array_like of int
        Quantics digits, digit axis last.
    d : int, optional
        Number of dimensions. If omitted, the digits encode a single index
        and a plain ``int`` is returned (an array for batched input).
    unfoldingscheme : UnfoldingScheme or str, optional
        ``"fused"`` or ``"interleaved"``. Defaults to
        :meth:`UnfoldingScheme.default`.
    base : int, optional
        Digit base per dimension (default 2).

    Returns
    -------
    int or np.ndarray
        The index, or an array of ``d`` indices along the last axis.

    Raises
    ------
    OutOfRangeError
        If a digit is outside its base.
    ShapeMismatchError
        If the digit count does not fit the layout.
    UnsupportedSchemeError
        If the unfolding scheme is unknown.
    """
    if d is None:
        index = quantics_to_index_fused(digits, 1, base=base)[..., 0]
        return int(index) if index.ndim == 0 else index

    scheme = as_unfolding_scheme(unfoldingscheme)
    if scheme == UnfoldingScheme.FUSED:
        return quantics_to_index_fused(digits, d, base=base)
    elif scheme == UnfoldingScheme.INTERLEAVED:
        return quantics_to_index_interleaved(digits, d, base=base)
    else:
        raise UnsupportedSchemeError(f"quantics_to_index: unhandled unfolding scheme {scheme!r}")
