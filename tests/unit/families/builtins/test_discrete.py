"""
Tests for Discrete Variate Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re

import numpy as np
import pytest

from esscher_core.families.configuration import configure_families_register
from esscher_core.families.registry import VariateFamilyRegister
from esscher_core.types import VariateName
from esscher_core.variates import Discrete


class TestDiscreteFamily:
    """Test suite for Discrete variate family."""

    def setup_method(self):
        """Setup before each test method."""
        configure_families_register()
        self.family = VariateFamilyRegister.get(VariateName.DISCRETE)

    def test_table_parametrization(self):
        """Test variate creation from a table."""
        variate = self.family(xs=[0.0, 1.0], ps=[0.25, 0.75])

        assert isinstance(variate.variate, Discrete)
        np.testing.assert_array_equal(variate.variate.xs, [0.0, 1.0])
        assert variate.cumulant(0.0, 1) == pytest.approx(0.75)
        assert variate.cdf(0.5) == pytest.approx(0.25)

    @pytest.mark.parametrize(
        "xs, ps, description",
        [
            ([0.0, 1.0], [1.0], "len(xs) == len(ps) > 0"),
            ([], [], "len(xs) == len(ps) > 0"),
            ([0.0, 1.0], [1.5, -0.5], "ps >= 0"),
            ([0.0, 1.0], [0.5, 0.6], "sum(ps) == 1"),
        ],
    )
    def test_constraints(self, xs, ps, description):
        """Test that malformed tables are rejected."""
        with pytest.raises(ValueError, match=re.escape(f'Constraint "{description}"')):
            self.family(xs=xs, ps=ps)
