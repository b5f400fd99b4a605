"""Unfolding scheme selection.

The unfolding scheme decides how the digits of a multi-dimensional index are
laid out along the tensor train:

- ``FUSED``: the digits of all dimensions at one length scale are merged into
  a single digit of base ``B**d``.
- ``INTERLEAVED``: the digits of each dimension keep their own site, and the
  sites cycle through the dimensions.

Examples
--------
>>> from quantics.unfolding import UnfoldingScheme

>>> scheme = UnfoldingScheme.from_name("interleaved")
>>> str(scheme)
'interleaved'
>>> UnfoldingScheme.default()
<UnfoldingScheme.FUSED: 0>
"""

from enum import IntEnum
from typing import Union

from ._config import UNFOLDING_ENV_VAR, default_unfolding_name
from ._errors import UnsupportedSchemeError


class UnfoldingScheme(IntEnum):
    """Layout of multi-dimensional quantics digits.

    Attributes
    ----------
    FUSED : int
        One digit of base ``B**d`` per length scale (default)
    INTERLEAVED : int
        ``d`` digits of base ``B`` per length scale, dimensions cycled
    """

    FUSED = 0
    INTERLEAVED = 1

    @classmethod
    def default(cls) -> "UnfoldingScheme":
        """Return the default scheme (``QUANTICS_UNFOLDING`` or fused)."""
        name = default_unfolding_name()
        try:
            return cls.from_name(name)
        except UnsupportedSchemeError:
            raise UnsupportedSchemeError(
                f"Invalid {UNFOLDING_ENV_VAR}={name!r}. Use 'fused' or 'interleaved'."
            ) from None

    @classmethod
    def from_name(cls, name: str) -> "UnfoldingScheme":
        """Parse scheme from string name."""
        lower = name.lower()
        if lower == "fused":
            return cls.FUSED
        elif lower == "interleaved":
            return cls.INTERLEAVED
        else:
            raise UnsupportedSchemeError(
                f"Unknown unfolding scheme: {name!r}. Use 'fused' or 'interleaved'."
            )

    def __str__(self) -> str:
        return self._name_.lower()


SchemeLike = Union[UnfoldingScheme, str, None]


def as_unfolding_scheme(value: SchemeLike) -> UnfoldingScheme:
    """Coerce a scheme, scheme name or ``None`` (default) to an UnfoldingScheme."""
    if value is None:
        return UnfoldingScheme.default()
    if isinstance(value, UnfoldingScheme):
        return value
    if isinstance(value, str):
        return UnfoldingScheme.from_name(value)
    raise UnsupportedSchemeError(f"Unknown unfolding scheme: {value!r}")
