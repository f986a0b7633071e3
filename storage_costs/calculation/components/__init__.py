"""
Components Package
==================

Component-level cost calculators for each cloud provider.

Components map provider-specific pricing records to the generic formulas
in the formulas package.
"""

from .types import (
    FormulaType,
    AzureComponent,
    AWSComponent,
)
from .base import ResourceCalculator

__all__ = [
    "FormulaType",
    "AzureComponent",
    "AWSComponent",
    "ResourceCalculator",
]
