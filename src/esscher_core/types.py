"""
Core Type Definitions
=====================

Fundamental types shared by the special-function and variate layers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

Parameters: TypeAlias = Iterable[float]
"""Type alias for an unordered collection of series parameters."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class VariateDomainError(ValueError):
    """
    Raised when a variate or special function is evaluated outside its domain.

    Examples are a logistic tilt outside ``(-a, b)``, non-positive shape
    parameters or a negative affine scale. Values are never clamped.
    """


class VariateName(StrEnum):
    """
    Enumeration of the built-in variate families.

    Attributes
    ----------
    NORMAL : str
        Normal law, built from the standard normal model.
    LOGISTIC : str
        Generalized logistic law.
    CONSTANT : str
        Degenerate law concentrated at a single point.
    DISCRETE : str
        Finite discrete law.
    """

    NORMAL = "Normal"
    LOGISTIC = "Logistic"
    CONSTANT = "Constant"
    DISCRETE = "Discrete"


def check_order(n: int) -> int:
    """
    Validate a derivative order.

    Parameters
    ----------
    n : int
        Derivative order.

    Returns
    -------
    int
        The order as a plain ``int``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"Derivative order must be non-negative, got {n}")
    return n


__all__ = [
    "NumPyNumber",
    "Number",
    "NumericArray",
    "Parameters",
    "ParametrizationName",
    "VariateDomainError",
    "VariateName",
    "check_order",
]
