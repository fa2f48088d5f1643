"""
Esscher Core
============

Esscher transformed distribution functions and their derivatives: tilted
cdf derivatives, cumulant derivatives and the edf for normal, generalized
logistic, constant and discrete variates, an affine combinator, and a
generalized hypergeometric series engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .families import *
from .families import __all__ as _family_all
from .special import *
from .special import __all__ as _special_all
from .types import *
from .types import __all__ as _types_all
from .variates import *
from .variates import __all__ as _variates_all

__version__ = version("esscher-core")
__all__ = [
    "__version__",
    *_family_all,
    *_special_all,
    *_types_all,
    *_variates_all,
]

del _family_all
del _special_all
del _types_all
del _variates_all
