"""
Generalized Hypergeometric Series
=================================

Adaptive summation of

    pFq(a; b; x) = sum_n (a_1)_n ... (a_p)_n / ((b_1)_n ... (b_q)_n) x^n / n!

where ``(v)_n = v (v + 1) ... (v + n - 1)`` is the rising Pochhammer symbol.

The engine has no knowledge of probability. It is used standalone and by
:mod:`esscher_core.special.beta_functions` for the exact shape derivatives of the
incomplete beta function.

Notes
-----
- :meth:`HypergeometricSeries.next` emits the term for the current index
  ``n`` (built from ``(a)_n``) and only then advances to ``n + 1``. The first
  term is therefore always ``1``.
- Once a numerator product reaches exactly zero (some ``a_i`` is a
  non-positive integer) every later term is zero and summation stops.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from scipy.special import gamma

if TYPE_CHECKING:
    from esscher_core.types import Parameters

logger = logging.getLogger(__name__)

SQRT_EPS = 2.0**-26
"""Square root of double precision machine epsilon."""


@dataclass(frozen=True, slots=True)
class ConvergencePolicy:
    """
    Stopping rule for series summation.

    Parameters
    ----------
    eps : float, default=2**-26
        Relative tolerance. A term is small when its magnitude is below
        ``eps * max(1, max |partial sum|)``.
    skip : int, default=40
        Number of consecutive small terms required to declare convergence.
    terms : int, default=40
        Hard cap on the number of terms.

    Raises
    ------
    ValueError
        If ``eps <= 0``, ``skip < 1`` or ``terms < 0``.
    """

    eps: float = SQRT_EPS
    skip: int = 40
    terms: int = 40

    def __post_init__(self) -> None:
        if not self.eps > 0:
            raise ValueError(f"Tolerance eps must be positive, got {self.eps}")
        if self.skip < 1:
            raise ValueError(f"skip must be at least 1, got {self.skip}")
        if self.terms < 0:
            raise ValueError(f"terms must be non-negative, got {self.terms}")


class SeriesResult(NamedTuple):
    """
    Outcome of a series evaluation.

    Attributes
    ----------
    value : float
        Partial sum when summation stopped.
    last_term : float
        Last term added, ``0.0`` if the series terminated as a polynomial.
    small : int
        Total number of terms classified as small.
    iterations : int
        Number of terms summed.
    """

    value: float
    last_term: float
    small: int
    iterations: int


class HypergeometricSeries:
    """
    Running state of one pFq evaluation.

    An instance is created fresh for every evaluation and is not meant to be
    shared. The Pochhammer products, the power of ``x`` and the factorial are
    folded into a single running term so that long series do not overflow.

    Parameters
    ----------
    a : Iterable[float]
        Numerator parameters.
    b : Iterable[float]
        Denominator parameters.
    """

    __slots__ = ("_a", "_b", "_n", "_term", "_truncated", "_pfq")

    def __init__(self, a: Parameters, b: Parameters) -> None:
        self._a = tuple(float(ai) for ai in a)
        self._b = tuple(float(bj) for bj in b)
        self._n = 0
        self._term = 1.0
        self._truncated = False
        self._pfq = 0.0

    @property
    def a(self) -> tuple[float, ...]:
        """Numerator parameters."""
        return self._a

    @property
    def b(self) -> tuple[float, ...]:
        """Denominator parameters."""
        return self._b

    @property
    def n(self) -> int:
        """Index of the next term."""
        return self._n

    @property
    def truncated(self) -> bool:
        """Whether a numerator Pochhammer product has reached zero."""
        return self._truncated

    @property
    def pfq(self) -> float:
        """Running partial sum."""
        return self._pfq

    def next(self, x: float) -> float:
        """
        Return the current term and advance to the next index.

        Parameters
        ----------
        x : float
            Argument of the series.

        Returns
        -------
        float
            ``(a)_n / (b)_n * x**n / n!`` for the current ``n``.

        Raises
        ------
        ValueError
            If a denominator Pochhammer product vanishes before the series
            has truncated.
        """
        term = self._term
        n = self._n

        numerator = 1.0
        for ai in self._a:
            numerator *= ai + n
        denominator = 1.0
        for bj in self._b:
            denominator *= bj + n

        if numerator == 0:
            self._truncated = True
            self._term = 0.0
        elif self._truncated:
            self._term = 0.0
        elif denominator == 0:
            raise ValueError(
                f"Denominator parameters {self._b} contain a non-positive integer "
                f"reached at n = {n}"
            )
        else:
            self._term = term * (numerator / denominator) * x / (n + 1)

        self._n = n + 1
        return term

    def value(self, x: float, policy: ConvergencePolicy | None = None) -> SeriesResult:
        """
        Sum terms until the convergence policy fires.

        Parameters
        ----------
        x : float
            Argument of the series.
        policy : ConvergencePolicy, optional
            Stopping rule, defaults to ``ConvergencePolicy()``.

        Returns
        -------
        SeriesResult
            ``(value, last_term, small, iterations)``.

        Notes
        -----
        Reaching ``policy.terms`` is not an error. The caller judges the
        result from ``last_term`` and the counters.
        """
        if policy is None:
            policy = ConvergencePolicy()

        x = float(x)
        term = 0.0
        max_pfq = 1.0
        ignore = policy.skip
        small = 0
        iterations = 0

        while not self._truncated and ignore and iterations < policy.terms:
            term = self.next(x)
            self._pfq += term
            max_pfq = max(max_pfq, abs(self._pfq))

            if abs(term) < max_pfq * policy.eps:
                small += 1
                ignore -= 1
            else:
                ignore = policy.skip

            iterations += 1

        if self._truncated:
            reason = "polynomial truncation"
            term = 0.0
        elif not ignore:
            reason = "converged"
        else:
            reason = "iteration cap"
        logger.debug(
            "pFq(%s; %s; %g) stopped after %d terms (%s)",
            self._a,
            self._b,
            x,
            iterations,
            reason,
        )

        return SeriesResult(self._pfq, term, small, iterations)

    def regularized(self) -> float:
        """
        Return the accumulated sum divided by ``prod(gamma(b_j))``.

        Repeated calls return the same value and never re-sum.
        """
        value = self._pfq
        for bj in self._b:
            value /= float(gamma(bj))
        return value


def hypergeometric_pfq_result(
    a: Parameters,
    b: Parameters,
    x: float,
    regularized: bool = False,
    policy: ConvergencePolicy | None = None,
) -> SeriesResult:
    """
    Evaluate pFq and report convergence diagnostics.

    Parameters
    ----------
    a : Iterable[float]
        Numerator parameters.
    b : Iterable[float]
        Denominator parameters.
    x : float
        Argument.
    regularized : bool, default False
        Divide the value and the last term by ``prod(gamma(b_j))``.
    policy : ConvergencePolicy, optional
        Stopping rule.

    Returns
    -------
    SeriesResult
        ``(value, last_term, small, iterations)``.
    """
    series = HypergeometricSeries(a, b)
    result = series.value(x, policy)

    if not regularized:
        return result

    scale = 1.0
    for bj in series.b:
        scale *= float(gamma(bj))
    return result._replace(value=series.regularized(), last_term=result.last_term / scale)


def hypergeometric_pfq(
    a: Parameters,
    b: Parameters,
    x: float,
    regularized: bool = False,
    policy: ConvergencePolicy | None = None,
) -> float:
    """
    Generalized hypergeometric function pFq(a; b; x).

    Parameters
    ----------
    a : Iterable[float]
        Numerator parameters.
    b : Iterable[float]
        Denominator parameters.
    x : float
        Argument.
    regularized : bool, default False
        Return ``pFq / prod(gamma(b_j))``.
    policy : ConvergencePolicy, optional
        Stopping rule.

    Returns
    -------
    float
        Raw or regularized series value.

    Examples
    --------
    >>> round(hypergeometric_pfq([], [], 1.0), 12)
    2.718281828459
    >>> hypergeometric_pfq([-2.0], [], 3.0)
    4.0
    """
    return hypergeometric_pfq_result(a, b, x, regularized, policy).value
