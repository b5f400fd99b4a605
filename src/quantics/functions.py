"""Wrapper to call a function of plain indices with quantics digits.

Examples
--------
>>> from quantics import QuanticsFunction

>>> qf = QuanticsFunction(lambda u: u ** 2)
>>> qf([1, 2, 1, 1])  # index 5
25
>>> qf([[1, 1, 1, 1], [2, 2, 2, 2]])  # batch of digit sequences
[1, 256]
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

import numpy as np

from ._errors import ShapeMismatchError, as_digit_array, check_base, check_positive
from .codec import quantics_to_index
from .unfolding import SchemeLike, UnfoldingScheme, as_unfolding_scheme

logger = logging.getLogger(__name__)


def _is_sequence_of_sequences(q) -> bool:
    if isinstance(q, (str, bytes, np.ndarray)) or not isinstance(q, Sequence):
        return False
    return len(q) > 0 and all(
        isinstance(row, (Sequence, np.ndarray)) and not isinstance(row, (str, bytes))
        for row in q
    )


class QuanticsFunction:
    """A function of ``ndims`` indices, callable with quantics digits.

    Given some function ``f(u)``, ``u`` in ``[1, ..., 2**R]``, the quantics
    representation ``qf = QuanticsFunction(f)`` can be called with the ``R``
    digits of ``u``, e.g. ``qf([1, 2, 1, 1])``. Digits take the values
    ``1..base``, which is the format expected by quantics cross interpolation.

    For ``ndims > 1`` the digits are decoded under the given unfolding scheme
    and ``f`` receives a list of ``ndims`` indices. For example, with the
    interleaved scheme the argument of ``qf([1, 2, 2, 2, 1, 1])`` is
    de-interleaved to ``[1, 2, 1]`` and ``[2, 2, 1]``, which decode to ``3``
    and ``7``; the return value is ``f([3, 7])``.

    Calling the wrapper with a batch of digit sequences (any array with more
    than one axis) evaluates it on each sequence independently and returns
    a (nested) list of results. A list of digit sequences of unequal length
    is evaluated row by row.

    Parameters
    ----------
    f : Callable
        Function of one index (``ndims == 1``) or of a list of indices.
    ndims : int, optional
        Number of dimensions (default 1).
    unfoldingscheme : UnfoldingScheme or str, optional
        ``"fused"`` or ``"interleaved"``. Defaults to
        :meth:`UnfoldingScheme.default`.
    base : int, optional
        Digit base per dimension (default 2).
    """

    __slots__ = ("_f", "_ndims", "_unfoldingscheme", "_base")

    def __init__(
        self,
        f: Callable[[Any], Any],
        ndims: int = 1,
        *,
        unfoldingscheme: SchemeLike = None,
        base: int = 2,
    ):
        if not callable(f):
            raise TypeError(f"QuanticsFunction: f must be callable, got {type(f).__name__}")
        self._f = f
        self._ndims = check_positive(ndims, "ndims", "QuanticsFunction")
        self._unfoldingscheme = as_unfolding_scheme(unfoldingscheme)
        self._base = check_base(base, "QuanticsFunction")
        logger.debug("Created %r", self)

    @classmethod
    def fused(cls, f: Callable[[Any], Any], ndims: int, base: int = 2) -> QuanticsFunction:
        """Wrap ``f`` for the fused quantics representation."""
        return cls(f, ndims, unfoldingscheme=UnfoldingScheme.FUSED, base=base)

    @classmethod
    def interleaved(cls, f: Callable[[Any], Any], ndims: int, base: int = 2) -> QuanticsFunction:
        """Wrap ``f`` for the interleaved quantics representation."""
        return cls(f, ndims, unfoldingscheme=UnfoldingScheme.INTERLEAVED, base=base)

    @property
    def f(self) -> Callable[[Any], Any]:
        """The wrapped function."""
        return self._f

    @property
    def ndims(self) -> int:
        """Number of dimensions."""
        return self._ndims

    @property
    def unfoldingscheme(self) -> UnfoldingScheme:
        """Unfolding scheme used to decode the digits."""
        return self._unfoldingscheme

    @property
    def base(self) -> int:
        """Digit base per dimension."""
        return self._base

    def __call__(self, q):
        try:
            digits = as_digit_array(q, "QuanticsFunction")
        except ShapeMismatchError:
            if not _is_sequence_of_sequences(q):
                raise
            # rows of unequal length: evaluate them one by one
            return [self(row) for row in q]
        if self._ndims == 1:
            decoded = quantics_to_index(digits, base=self._base)
        else:
            decoded = quantics_to_index(
                digits, self._ndims, unfoldingscheme=self._unfoldingscheme, base=self._base
            )
        indices = decoded if isinstance(decoded, int) else decoded.tolist()
        return self._apply(indices, digits.ndim - 1)

    def _apply(self, indices, depth: int):
        if depth == 0:
            return self._f(indices)
        return [self._apply(item, depth - 1) for item in indices]

    def __repr__(self) -> str:
        name = getattr(self._f, "__name__", type(self._f).__name__)
        return (
            f"QuanticsFunction(f={name}, ndims={self._ndims}, "
            f"unfoldingscheme={self._unfoldingscheme!s}, base={self._base})"
        )
