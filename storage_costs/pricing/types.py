"""
Pricing Types
=============

Enums shared by the pricing catalog and the calculators.

This module defines:
- StorageTier: hot / cold / archive
- StorageType: Azure Data Lake Storage vs. Blob Storage
- ReplicationType: LRS / GRS
- Provider: Cloud provider identifiers
- RetrievalType: Glacier retrieval speed class
"""

from enum import Enum


class StorageTier(str, Enum):
    """
    Storage tiers, declared in billing order.

    Iterating the enum always yields hot, cold, archive.
    """
    HOT = "hot"
    COLD = "cold"
    ARCHIVE = "archive"

    def __str__(self) -> str:
        return self.value


class StorageType(str, Enum):
    """Azure storage account flavours."""
    DATA_LAKE = "data-lake"     # ADLS Gen2 (hierarchical namespace, indexed)
    BLOB = "blob"               # Flat namespace block blobs

    def __str__(self) -> str:
        return self.value


class ReplicationType(str, Enum):
    """Azure redundancy options."""
    LRS = "LRS"     # Locally redundant
    GRS = "GRS"     # Geo redundant

    def __str__(self) -> str:
        return self.value


class Provider(str, Enum):
    """Cloud provider identifiers."""
    AZURE = "azure"
    AWS = "aws"

    def __str__(self) -> str:
        return self.value


class RetrievalType(str, Enum):
    """S3 Glacier retrieval speed class."""
    STANDARD = "standard"
    EXPEDITED = "expedited"

    def __str__(self) -> str:
        return self.value
