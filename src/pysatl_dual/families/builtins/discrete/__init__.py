"""
Built-in discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dual.families.builtins.discrete.bernoulli import configure_bernoulli_family
from pysatl_dual.families.builtins.discrete.categorical import configure_categorical_family

__all__ = [
    "configure_bernoulli_family",
    "configure_categorical_family",
]
