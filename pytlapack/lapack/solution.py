"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pytlapack.core.result import Result


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for a Householder QR factorization.

    factored and tau are the raw geqr2 output (R on and above the
    diagonal, Householder vectors below). Q and R are None in 'raw' mode.
    """
    factored: NDArray[np.inexact[Any]]
    tau: NDArray[np.inexact[Any]]
    Q: NDArray[np.inexact[Any]] | None
    R: NDArray[np.inexact[Any]] | None
    rank: int


@dataclass
class QRSolution:
    """
    User-facing QR results.

    Wraps the Result envelope and exposes the factors directly.
    """
    _result: Result[QRParams]

    @property
    def Q(self) -> NDArray[np.inexact[Any]] | None:
        return self._result.params.Q

    @property
    def R(self) -> NDArray[np.inexact[Any]] | None:
        return self._result.params.R

    @property
    def tau(self) -> NDArray[np.inexact[Any]]:
        return self._result.params.tau

    @property
    def factored(self) -> NDArray[np.inexact[Any]]:
        return self._result.params.factored

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        m, n = self.factored.shape
        return (
            f"QRSolution({m}x{n}, rank={self.rank}, mode={self.info.get('mode')!r}, "
            f"dtype={self.factored.dtype})"
        )
