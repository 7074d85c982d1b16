"""Binomial coefficient rows for the expansion of ``(x+1)^n``."""
from __future__ import annotations

from typing import Callable, Dict, List

# flint is optional; detect lazily so a runtime install (e.g., in a notebook) is picked up
_FLINT_AVAILABLE = False

Backend = str
DEFAULT_BACKEND: Backend = "multiplicative"


class BackendUnavailableError(RuntimeError):
    """Raised when an optional coefficient backend cannot be imported."""


def _ensure_flint_available() -> bool:
    """Try importing flint on demand and cache the result."""

    global _FLINT_AVAILABLE, fmpz_poly  # type: ignore[name-defined]
    if _FLINT_AVAILABLE:
        return True
    try:
        from flint import fmpz_poly as _fmpz_poly
    except ImportError:
        return False
    fmpz_poly = _fmpz_poly  # type: ignore[assignment]
    _FLINT_AVAILABLE = True
    return True


def _check_degree(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError("n must be an integer")
    if n < 0:
        raise ValueError("n must be non-negative")


def _multiplicative_row(n: int) -> List[int]:
    row = [1]
    for k in range(1, n + 1):
        c, rem = divmod(row[-1] * (n - k + 1), k)
        if rem:
            raise ArithmeticError(f"inexact division computing C({n},{k})")
        row.append(c)
    return row


def _pascal_row(n: int) -> List[int]:
    """Build row ``n`` of Pascal's triangle by repeated addition."""

    row = [1]
    for i in range(1, n + 1):
        row = [1] + [row[j - 1] + row[j] for j in range(1, i)] + [1]
    return row


def _flint_row(n: int) -> List[int]:
    if not _ensure_flint_available():
        raise BackendUnavailableError("flint backend requested but python-flint is not installed")
    poly = fmpz_poly([1, 1]) ** n  # type: ignore[name-defined]
    return [int(c) for c in poly.coeffs()]


_BACKENDS: Dict[Backend, Callable[[int], List[int]]] = {
    "multiplicative": _multiplicative_row,
    "pascal": _pascal_row,
    "flint": _flint_row,
}

BACKENDS = tuple(_BACKENDS)


def binom_row(n: int, backend: Backend = DEFAULT_BACKEND) -> List[int]:
    """Return ``[C(n,0), ..., C(n,n)]``, the coefficients of ``(x+1)^n``.

    The default ``"multiplicative"`` backend uses the recurrence::

        C(n, k) = C(n, k - 1) * (n - k + 1) / k

    whose division is always exact. ``"pascal"`` sums rows of Pascal's
    triangle and ``"flint"`` expands the polynomial with python-flint.
    """

    _check_degree(n)
    try:
        build = _BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown backend: {backend}") from None
    return build(n)
