"""
Beta Function Primitives
========================

Complete and regularized incomplete beta functions together with their
partial derivatives in the shape parameters.

For ``u <= 1/2`` the a-partial of the regularized incomplete beta function is

    d/da I_u(a, b) = (log u - psi(a) + psi(a + b)) I_u(a, b)
                     - u^a / (a^2 B(a, b)) 3F2(a, a, 1 - b; a + 1, a + 1; u)

The 3F2 series converges geometrically with ratio ``u``. For ``u > 1/2`` the
upper tail ``1 - I_u(a, b) = I_v(b, a)`` with ``v = 1 - u`` is used instead:

    I_v(b, a) = v^b / (b B(a, b)) 2F1(b, 1 - a; b + 1; v)

and since ``(b)_n / (b + 1)_n = b / (b + n)``

    d/da I_u(a, b) = -(psi(a + b) - psi(a)) I_v(b, a)
                     - v^b / (b B(a, b)) sum_n b / (b + n) d/da (1 - a)_n v^n / n!

so both branches converge with ratio at most 1/2. The b-partial follows from
the reflection ``I_u(a, b) = 1 - I_{1-u}(b, a)``:

    d/db I_u(a, b) = -d/da I_{1-u}(b, a)

Close to ``u = 1`` the difference ``1 - u`` loses precision. Callers that
know the complement exactly, such as the logistic law with its two sigmoids,
pass it as ``complement``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

from scipy import special as _sp_special

from esscher_core.special.hypergeometric import (
    ConvergencePolicy,
    HypergeometricSeries,
    SeriesResult,
)
from esscher_core.types import VariateDomainError, check_order

BETA_SERIES_POLICY = ConvergencePolicy(eps=2.0**-52, skip=5, terms=20_000)
"""Stopping rule for the series in :func:`beta_inc_da`."""


def beta(a: float, b: float) -> float:
    """Complete beta function ``B(a, b) = Gamma(a) Gamma(b) / Gamma(a + b)``."""
    return float(_sp_special.beta(a, b))


def beta_da(a: float, b: float) -> float:
    """
    Partial derivative of the complete beta function in ``a``.

    ``d/da B(a, b) = B(a, b) (psi(a) - psi(a + b))``.
    """
    return beta(a, b) * float(_sp_special.digamma(a) - _sp_special.digamma(a + b))


def beta_inc(a: float, b: float, u: float) -> float:
    """Regularized incomplete beta function ``I_u(a, b)``."""
    return float(_sp_special.betainc(a, b, u))


def _upper_tail_series(a: float, b: float, v: float, policy: ConvergencePolicy) -> SeriesResult:
    """
    Sum ``sum_{n >= 1} b / (b + n) d/da [(1 - a)_n] v^n / n!``.

    The ``n = 0`` term vanishes. ``c`` and ``d`` carry ``(1 - a)_n v^n / n!``
    and its a-derivative, so integer ``a`` needs no special case.
    """
    c = (1.0 - a) * v
    d = -v
    total = 0.0
    max_total = 0.0
    term = 0.0
    ignore = policy.skip
    small = 0
    iterations = 0

    n = 1
    while ignore and iterations < policy.terms:
        term = b / (b + n) * d
        total += term
        max_total = max(max_total, abs(total))

        if abs(term) < max_total * policy.eps:
            small += 1
            ignore -= 1
        else:
            ignore = policy.skip

        c, d = c * (1.0 - a + n) * v / (n + 1), (d * (1.0 - a + n) - c) * v / (n + 1)
        n += 1
        iterations += 1

    return SeriesResult(total, term, small, iterations)


def _warn_cut_short(a: float, b: float, u: float, result: SeriesResult) -> None:
    warnings.warn(
        f"Incomplete beta derivative series for a={a}, b={b}, u={u} stopped after "
        f"{result.iterations} terms with last term {result.last_term:.3e}",
        UserWarning,
        stacklevel=3,
    )


def beta_inc_da(
    a: float,
    b: float,
    u: float,
    policy: ConvergencePolicy = BETA_SERIES_POLICY,
    complement: float | None = None,
) -> float:
    """
    Partial derivative of ``I_u(a, b)`` with respect to ``a``.

    Parameters
    ----------
    a, b : float
        Positive shape parameters.
    u : float
        Point in ``[0, 1]``.
    policy : ConvergencePolicy, optional
        Stopping rule for the hypergeometric correction.
    complement : float, optional
        ``1 - u`` computed without cancellation, defaults to ``1.0 - u``.

    Returns
    -------
    float
        ``d/da I_u(a, b)``. Zero at ``u = 0`` and ``u = 1``, NaN outside the
        domain.

    Warns
    -----
    UserWarning
        If the hypergeometric correction stops at ``policy.terms`` before
        its terms become small.
    """
    v = 1.0 - u if complement is None else complement

    if not (a > 0 and b > 0):
        return math.nan
    if u == 0.0 or v == 0.0:
        return 0.0
    if not (0.0 < u <= 1.0 and 0.0 < v <= 1.0):
        return math.nan

    if v < 0.5:
        result = _upper_tail_series(a, b, v, policy)
        if result.iterations >= policy.terms and abs(result.last_term) >= policy.eps * abs(
            result.value
        ):
            _warn_cut_short(a, b, u, result)

        head = (_sp_special.digamma(a + b) - _sp_special.digamma(a)) * beta_inc(b, a, v)
        tail = math.exp(b * math.log(v) - _sp_special.betaln(a, b)) / b * result.value
        return float(-head - tail)

    series = HypergeometricSeries((a, a, 1.0 - b), (a + 1.0, a + 1.0))
    result = series.value(u, policy)
    if not series.truncated and abs(result.last_term) >= policy.eps * max(1.0, abs(result.value)):
        _warn_cut_short(a, b, u, result)

    log_u = math.log(u)
    head = (log_u - _sp_special.digamma(a) + _sp_special.digamma(a + b)) * beta_inc(a, b, u)
    tail = math.exp(a * log_u - _sp_special.betaln(a, b)) / (a * a) * result.value
    return float(head - tail)


def beta_inc_db(
    a: float,
    b: float,
    u: float,
    policy: ConvergencePolicy = BETA_SERIES_POLICY,
    complement: float | None = None,
) -> float:
    """
    Partial derivative of ``I_u(a, b)`` with respect to ``b``.

    Uses ``I_u(a, b) = 1 - I_{1-u}(b, a)``; ``complement`` is ``1 - u`` as
    in :func:`beta_inc_da`.
    """
    v = 1.0 - u if complement is None else complement
    return -beta_inc_da(b, a, v, policy, complement=u)


def beta_inc_derivative(a: float, b: float, u: float, n: int = 0) -> float:
    """
    Regularized incomplete beta function or one of its shape partials.

    Parameters
    ----------
    a, b : float
        Positive shape parameters.
    u : float
        Point in ``[0, 1]``.
    n : int, default 0
        ``0`` for ``I_u(a, b)``, ``1`` for the a-partial, ``2`` for the
        b-partial.

    Returns
    -------
    float
        Requested value. At ``u = 1`` this is ``1`` for ``n = 0`` and ``0`` for
        the partials; :func:`beta` and :func:`beta_da` are exposed on their
        own and are not substituted there.

    Raises
    ------
    VariateDomainError
        If ``a <= 0``, ``b <= 0`` or ``u`` is outside ``[0, 1]``.
    ValueError
        If ``n`` is not 0, 1 or 2.
    """
    if not a > 0:
        raise VariateDomainError(f"Shape parameter a must be positive, got {a}")
    if not b > 0:
        raise VariateDomainError(f"Shape parameter b must be positive, got {b}")
    if not 0.0 <= u <= 1.0:
        raise VariateDomainError(f"Incomplete beta argument must be in [0, 1], got {u}")

    n = check_order(n)
    if n == 0:
        return beta_inc(a, b, u)
    if n == 1:
        return beta_inc_da(a, b, u)
    if n == 2:
        return beta_inc_db(a, b, u)

    raise ValueError(f"Only partials n = 0, 1, 2 are available, got {n}")


__all__ = [
    "BETA_SERIES_POLICY",
    "beta",
    "beta_da",
    "beta_inc",
    "beta_inc_da",
    "beta_inc_db",
    "beta_inc_derivative",
]
