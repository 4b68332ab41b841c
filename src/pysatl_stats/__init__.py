"""
PySATL Stats
============

Statistics library providing a fixed catalogue of probability distributions
together with the special functions they are built on: the gamma function
family, the error function and numerical integration.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .ranges import *
from .ranges import __all__ as _ranges_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-stats")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_ranges_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _ranges_all
del _types_all
