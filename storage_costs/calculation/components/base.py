"""
Base Classes for Component Calculators
======================================

This module defines the Protocol (interface) that all component
calculators implement.
"""

from typing import Protocol, runtime_checkable
from .types import FormulaType


@runtime_checkable
class ResourceCalculator(Protocol):
    """
    Protocol (interface) for individual cost component calculators.

    Each component calculator must:
    1. Define which component it calculates (component_type)
    2. Define which formula it uses (formula_type)
    3. Implement calculate_cost() to return the monthly cost

    The calculate_cost signature varies by component:
    - Capacity components take a size in GB
    - Usage components take the tier and its usage inputs
    """

    formula_type: FormulaType

    def calculate_cost(self, **kwargs) -> float:
        """
        Calculate the monthly cost for this component.

        Returns:
            Monthly cost in USD for one database
        """
        ...
