"""
Azure Components Package
========================

Azure Data Lake / Blob Storage cost calculators for each cost component.
"""

from .capacity import AzureStorageCalculator, AzureIndexCalculator, AzureEarlyDeletionCalculator
from .operations import AzureTransactionCalculator
from .retrieval import AzureRetrievalCalculator, AzureQueryAccelerationCalculator

__all__ = [
    "AzureStorageCalculator",
    "AzureIndexCalculator",
    "AzureEarlyDeletionCalculator",
    "AzureTransactionCalculator",
    "AzureRetrievalCalculator",
    "AzureQueryAccelerationCalculator",
]
