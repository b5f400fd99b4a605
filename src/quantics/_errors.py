"""Exceptions and argument checks shared by the quantics codec."""

from __future__ import annotations

import numpy as np

# Largest value representable in the int64 arrays used for digits and indices
INT64_MAX = int(np.iinfo(np.int64).max)


class QuanticsError(Exception):
    """Base exception for quantics errors."""
    pass


class ShapeMismatchError(QuanticsError, ValueError):
    """Digit sequences whose lengths must match (or divide) do not."""
    pass


class OutOfRangeError(QuanticsError, ValueError):
    """Digit or index outside its valid range."""
    pass


class UnsupportedSchemeError(QuanticsError, ValueError):
    """Unknown unfolding scheme."""
    pass


def _prefix(context: str) -> str:
    return f"{context}: " if context else ""


def check_base(base: int, context: str = "") -> int:
    """Check that ``base`` is an integer >= 2 and return it."""
    if int(base) != base or base < 2:
        raise ValueError(f"{_prefix(context)}base must be an integer >= 2, got {base!r}")
    return int(base)


def check_positive(value: int, what: str, context: str = "") -> int:
    """Check that ``value`` is a positive integer and return it."""
    if int(value) != value or value < 1:
        raise ValueError(f"{_prefix(context)}{what} must be a positive integer, got {value!r}")
    return int(value)


def check_capacity(base: int, exponent: int, context: str = "") -> int:
    """Return ``base**exponent``, raising if it does not fit into int64."""
    capacity = base ** exponent
    if capacity > INT64_MAX:
        raise OutOfRangeError(
            f"{_prefix(context)}{base}**{exponent} exceeds the int64 range"
        )
    return capacity


def as_int_array(values, context: str = "", what: str = "digit") -> np.ndarray:
    """Convert an integer array-like (or scalar) to an int64 array."""
    try:
        arr = np.asarray(values)
    except ValueError as e:
        raise ShapeMismatchError(f"{_prefix(context)}ragged {what} sequence") from e

    if arr.dtype == object:
        # Python ints beyond int64 end up here as well as ragged nesting
        flat = arr.ravel().tolist()
        if all(isinstance(v, (int, np.integer)) for v in flat):
            raise OutOfRangeError(f"{_prefix(context)}{what} exceeds the int64 range")
        raise ShapeMismatchError(f"{_prefix(context)}ragged {what} sequence")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"{_prefix(context)}{what}s must be integers, got dtype {arr.dtype}")
    return arr.astype(np.int64, copy=False)


def as_digit_array(digits, context: str = "") -> np.ndarray:
    """Convert an integer array-like to an int64 array of at least one dimension."""
    arr = as_int_array(digits, context)
    if arr.ndim == 0:
        raise ShapeMismatchError(f"{_prefix(context)}expected a digit sequence, got a scalar")
    return arr


def check_digit_range(
    digits: np.ndarray,
    upper: int,
    context: str = "",
    what: str = "digit",
    lower: int = 1,
):
    """Raise OutOfRangeError unless every entry of ``digits`` lies in ``[lower, upper]``."""
    if digits.size == 0:
        return
    lo = int(digits.min())
    hi = int(digits.max())
    if lo < lower or hi > upper:
        bad = lo if lo < lower else hi
        raise OutOfRangeError(
            f"{_prefix(context)}{what} {bad} outside valid range [{lower}, {upper}]"
        )


def check_same_shape(arrays, context: str = ""):
    """Raise ShapeMismatchError unless all ``arrays`` share one shape."""
    shape = arrays[0].shape
    for k, arr in enumerate(arrays[1:], start=2):
        if arr.shape != shape:
            raise ShapeMismatchError(
                f"{_prefix(context)}digit list {k} has shape {arr.shape}, expected {shape}"
            )
