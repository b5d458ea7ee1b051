"""
PySATL Dual
===========

Dual-number differentiable wrappers around standard probability
distributions: closed-form densities that evaluate on plain reals and on
dual numbers, exact forward-mode gradients of those densities, and scipy
delegates for real evaluation and sampling.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .constructors import *
from .constructors import __all__ as _constructors_all
from .dual import *
from .dual import __all__ as _dual_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .points import *
from .points import __all__ as _points_all
from .protocol import density, formula_density, gradient, log_density, sample
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-dual")
__all__ = [
    "__version__",
    "density",
    "formula_density",
    "gradient",
    "log_density",
    "sample",
    *_constructors_all,
    *_dual_all,
    *_errors_all,
    *_family_all,
    *_points_all,
    *_types_all,
]

del _constructors_all
del _dual_all
del _errors_all
del _family_all
del _points_all
del _types_all
