"""
Tests for Normal Variate Family

This module tests the normal family: its parametrizations, their
constraints and conversions, and the variates built from them.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from scipy.stats import norm

from esscher_core.families.configuration import configure_families_register
from esscher_core.families.registry import VariateFamilyRegister
from esscher_core.types import VariateName
from esscher_core.variates import normal_variate


class TestNormalFamily:
    """Test suite for Normal variate family."""

    def setup_method(self):
        """Setup before each test method."""
        configure_families_register()
        self.family = VariateFamilyRegister.get(VariateName.NORMAL)

    def test_family_structure(self):
        """Test basic family structure."""
        assert self.family.name == VariateName.NORMAL
        assert self.family.parametrization_names == ["meanStd", "meanVar"]
        assert self.family.base_parametrization_name == "meanStd"

    def test_mean_std_creates_variate(self):
        """Test variate creation in the base parametrization."""
        variate = self.family(mu=2.0, sigma=1.5)

        assert variate.family_name == VariateName.NORMAL
        assert variate.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert variate.variate == normal_variate(2.0, 1.5)

    def test_mean_var_converts_to_mean_std(self):
        """Test that meanVar converts variance to standard deviation."""
        parameters = self.family.get_parametrization("meanVar")(mu=1.0, var=4.0)
        base = self.family.to_base(parameters)

        assert base.name == "meanStd"
        assert base.parameters == {"mu": 1.0, "sigma": 2.0}

    @pytest.mark.parametrize("s", [-0.5, 0.0, 0.4])
    @pytest.mark.parametrize("x", [-1.0, 1.0, 3.0])
    def test_tilted_cdf(self, x, s):
        """Test the Esscher transformed cdf against scipy."""
        variate = self.family("meanVar", mu=1.0, var=4.0)
        expected = norm.cdf(x, loc=1.0 + 4.0 * s, scale=2.0)
        assert variate.cdf(x, s) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize(
        "parametrization_name, values, match",
        [
            ("meanStd", {"mu": 0.0, "sigma": 0.0}, "sigma > 0"),
            ("meanStd", {"mu": 0.0, "sigma": -1.0}, "sigma > 0"),
            ("meanVar", {"mu": 0.0, "var": 0.0}, "var > 0"),
        ],
    )
    def test_constraints(self, parametrization_name, values, match):
        """Test that invalid parameters are rejected."""
        with pytest.raises(ValueError, match=match):
            self.family(parametrization_name, **values)
