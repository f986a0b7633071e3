"""
AWS Components Package
======================

AWS S3 cost calculators for each cost component.
"""

from .capacity import AWSS3StorageCalculator, AWSS3EarlyDeletionCalculator
from .requests import AWSS3RequestCalculator
from .retrieval import AWSS3RetrievalCalculator

__all__ = [
    "AWSS3StorageCalculator",
    "AWSS3EarlyDeletionCalculator",
    "AWSS3RequestCalculator",
    "AWSS3RetrievalCalculator",
]
