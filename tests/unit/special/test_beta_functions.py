"""
Tests for beta function primitives and their shape derivatives.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import pytest
from scipy import special as sp_special

from esscher_core.special.beta_functions import (
    beta,
    beta_da,
    beta_inc,
    beta_inc_da,
    beta_inc_db,
    beta_inc_derivative,
)
from esscher_core.special.hypergeometric import ConvergencePolicy
from esscher_core.types import VariateDomainError

H = 1e-5
DIFFERENCE_PRECISION = 1e-6

SHAPES = [(0.5, 0.5), (1.0, 2.0), (2.5, 1.5), (3.0, 4.0)]
POINTS = [0.05, 0.3, 0.5, 0.75, 0.95, 0.999]


def _betainc_da(a, b, u):
    return (sp_special.betainc(a + H, b, u) - sp_special.betainc(a - H, b, u)) / (2 * H)


def _betainc_db(a, b, u):
    return (sp_special.betainc(a, b + H, u) - sp_special.betainc(a, b - H, u)) / (2 * H)


class TestCompleteBeta:
    """Test suite for the complete beta function."""

    @pytest.mark.parametrize("a, b", SHAPES)
    def test_beta_matches_gamma_ratio(self, a, b):
        """B(a, b) = Gamma(a) Gamma(b) / Gamma(a + b)."""
        expected = math.gamma(a) * math.gamma(b) / math.gamma(a + b)
        assert beta(a, b) == pytest.approx(expected, rel=1e-13)

    @pytest.mark.parametrize("a, b", SHAPES)
    def test_beta_da(self, a, b):
        """The a-partial matches a central difference."""
        numeric = (beta(a + H, b) - beta(a - H, b)) / (2 * H)
        assert beta_da(a, b) == pytest.approx(numeric, rel=DIFFERENCE_PRECISION)


class TestIncompleteBetaDerivatives:
    """Test suite for the shape partials of the incomplete beta function."""

    @pytest.mark.parametrize("u", [0.1, 0.5, 0.9])
    def test_uniform_closed_form(self, u):
        """I_u(1, 1) = u, so the a-partial is u log u."""
        assert beta_inc_da(1.0, 1.0, u) == pytest.approx(u * math.log(u), rel=1e-13)
        assert beta_inc_db(1.0, 1.0, u) == pytest.approx(
            -(1.0 - u) * math.log1p(-u), rel=1e-13
        )

    @pytest.mark.parametrize("a", [0.5, 2.0, 3.7])
    @pytest.mark.parametrize("u", [0.2, 0.6])
    def test_power_closed_form(self, a, u):
        """I_u(a, 1) = u^a, so the a-partial is u^a log u."""
        assert beta_inc_da(a, 1.0, u) == pytest.approx(u**a * math.log(u), rel=1e-12)

    @pytest.mark.parametrize("a, b", SHAPES)
    @pytest.mark.parametrize("u", POINTS)
    def test_da_matches_finite_difference(self, a, b, u):
        """The exact a-partial agrees with differencing scipy's betainc."""
        assert beta_inc_da(a, b, u) == pytest.approx(
            _betainc_da(a, b, u), abs=DIFFERENCE_PRECISION
        )

    @pytest.mark.parametrize("a, b", SHAPES)
    @pytest.mark.parametrize("u", POINTS)
    def test_db_matches_finite_difference(self, a, b, u):
        """The b-partial agrees with differencing scipy's betainc."""
        assert beta_inc_db(a, b, u) == pytest.approx(
            _betainc_db(a, b, u), abs=DIFFERENCE_PRECISION
        )

    @pytest.mark.parametrize("u", [0.0, 1.0])
    def test_endpoints_are_zero(self, u):
        """I_0 and I_1 do not depend on the shapes."""
        assert beta_inc_da(2.0, 3.0, u) == 0.0
        assert beta_inc_db(2.0, 3.0, u) == 0.0

    @pytest.mark.parametrize(
        "a, b, u",
        [(0.0, 1.0, 0.5), (1.0, -2.0, 0.5), (1.0, 1.0, -0.1), (1.0, 1.0, 1.5)],
    )
    def test_outside_domain_is_nan(self, a, b, u):
        """The raw partial reports NaN outside its domain."""
        assert math.isnan(beta_inc_da(a, b, u))

    def test_warns_when_series_is_cut_short(self):
        """Stopping at the term cap with a large last term warns."""
        with pytest.warns(UserWarning, match="stopped after 3 terms"):
            beta_inc_da(1.5, 2.5, 0.9, ConvergencePolicy(terms=3))

    @pytest.mark.parametrize("a", [0.5, 2.0, 3.7])
    @pytest.mark.parametrize("v", [1e-3, 1e-9, 1e-14])
    def test_closed_form_near_one(self, a, v):
        """For b = 1, I_u(a, 1) = u^a so the a-partial is u^a log u."""
        log_u = math.log1p(-v)
        expected = math.exp(a * log_u) * log_u
        assert beta_inc_da(a, 1.0, 1.0 - v, complement=v) == pytest.approx(expected, rel=1e-10)

    @pytest.mark.parametrize("v", [1e-6, 1e-12])
    def test_right_tail_with_exact_complement(self, v):
        """Close to u = 1 the partial matches the difference of the upper tail."""
        a, b = 2.5, 1.5
        expected = -(sp_special.betainc(b, a + H, v) - sp_special.betainc(b, a - H, v)) / (2 * H)
        with warnings.catch_warnings():
            warnings.simplefilter("error", UserWarning)
            actual = beta_inc_da(a, b, 1.0 - v, complement=v)
        assert actual == pytest.approx(expected, rel=DIFFERENCE_PRECISION)

    def test_tiny_complement_of_one(self):
        """u rounded to 1 still yields a finite partial when the complement is known."""
        actual = beta_inc_da(2.0, 3.0, 1.0, complement=1e-20)
        assert actual != 0.0
        assert math.isfinite(actual)

    @pytest.mark.parametrize("a, b", SHAPES)
    def test_branches_agree_at_one_half(self, a, b):
        """The lower and upper series meet continuously at u = 1/2."""
        lower = beta_inc_da(a, b, 0.5)
        upper = beta_inc_da(a, b, 0.5 + 1e-12)
        assert upper == pytest.approx(lower, rel=1e-8, abs=1e-12)


class TestBetaIncDerivative:
    """Test suite for the dispatching entry point."""

    def test_orders(self):
        """n selects the value, the a-partial or the b-partial."""
        a, b, u = 2.0, 3.0, 0.4
        assert beta_inc_derivative(a, b, u, 0) == pytest.approx(sp_special.betainc(a, b, u))
        assert beta_inc_derivative(a, b, u, 1) == beta_inc_da(a, b, u)
        assert beta_inc_derivative(a, b, u, 2) == beta_inc_db(a, b, u)
        assert beta_inc_derivative(a, b, u) == beta_inc(a, b, u)

    def test_values_at_one(self):
        """At u = 1 the value is 1 and both partials vanish."""
        assert beta_inc_derivative(2.0, 3.0, 1.0, 0) == 1.0
        assert beta_inc_derivative(2.0, 3.0, 1.0, 1) == 0.0
        assert beta_inc_derivative(2.0, 3.0, 1.0, 2) == 0.0

    @pytest.mark.parametrize(
        "a, b, u, match",
        [
            (0.0, 1.0, 0.5, "Shape parameter a"),
            (1.0, -1.0, 0.5, "Shape parameter b"),
            (1.0, 1.0, 1.2, r"must be in \[0, 1\]"),
        ],
    )
    def test_domain_errors(self, a, b, u, match):
        """Invalid shapes and arguments raise VariateDomainError."""
        with pytest.raises(VariateDomainError, match=match):
            beta_inc_derivative(a, b, u, 1)

    def test_domain_error_is_value_error(self):
        """Domain errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            beta_inc_derivative(-1.0, 1.0, 0.5)

    @pytest.mark.parametrize("n", [3, 7])
    def test_unsupported_order(self, n):
        """Only the value and the two first partials exist."""
        with pytest.raises(ValueError, match="Only partials"):
            beta_inc_derivative(1.0, 1.0, 0.5, n)

    def test_negative_order(self):
        """Negative orders are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            beta_inc_derivative(1.0, 1.0, 0.5, -1)
