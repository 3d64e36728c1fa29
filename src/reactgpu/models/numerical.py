"""
`reactgpu.models.numerical`
---------------------------
The floating-point element formats a reaction buffer may hold.

Buffers default to ``float64``; ``float32`` is accepted when a queue is
configured for it.  Lookups are plain dict accesses so both the scalar class
(``np.float64``) and the dtype object (``np.dtype(np.float64)``) map back to a
:class:`Precision`.

Public helpers
--------------
* ``Precision.to_numpy()        -> numpy.dtype``
* ``Precision.from_numpy(...)   -> Precision``
* ``Precision.matches(dtype)    -> bool``
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias, Union

import numpy as np


__all__ = ["Precision"]

_NPDTypeF32: TypeAlias = np.dtype[np.float32]
_NPDTypeF64: TypeAlias = np.dtype[np.float64]
_NPDTypeRet: TypeAlias = Union[_NPDTypeF32, _NPDTypeF64]

_NPDTypeLike: TypeAlias = Union[
    type[np.float32],
    type[np.float64],
    _NPDTypeF32,
    _NPDTypeF64,
]

_PRECISION_NAMES: tuple[str, ...] = ("float32", "float64")

# str  -> numpy.dtype
_PRECISION_STR_TO_NP: dict[str, _NPDTypeRet] = {
    name: np.dtype(getattr(np, name)) for name in _PRECISION_NAMES
}

# numpy scalar *or* numpy.dtype  -> str
_NP_TO_PRECISION_STR: dict[_NPDTypeLike, str] = {
    obj: name
    for name in _PRECISION_NAMES
    for obj in (getattr(np, name), np.dtype(getattr(np, name)))
}


class Precision(str, Enum):
    """Floating-point element formats supported for reaction buffers."""

    float32 = "float32"
    float64 = "float64"

    def to_numpy(self) -> _NPDTypeRet:
        """Return the corresponding ``numpy.dtype``."""
        return _PRECISION_STR_TO_NP[self.value]

    @classmethod
    def from_numpy(cls, dtype: _NPDTypeLike) -> Precision:
        """Map a NumPy *dtype* or scalar class back to :class:`Precision`."""
        try:
            return cls(_NP_TO_PRECISION_STR[dtype])
        except KeyError as exc:
            raise ValueError(f"Unsupported NumPy dtype: {dtype!r}") from exc

    def matches(self, dtype: object) -> bool:
        """True when ``dtype`` describes the same element format."""
        return bool(np.dtype(dtype) == self.to_numpy())  # type: ignore[call-overload]
