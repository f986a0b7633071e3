"""
Calculation API endpoints.
"""
from typing import List, Literal, Optional

from fastapi import APIRouter, Body, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, model_validator

from storage_costs.config import settings
from storage_costs.logger import logger
from storage_costs.utils import print_stack_trace, scale_for_period
from storage_costs.pricing import (
    PricingConfigurationError,
    Provider,
    ReplicationType,
    RetrievalType,
    StorageType,
)
from storage_costs.calculation import (
    AWSTierTransactionInputs,
    AWSTransactionInputs,
    DatabaseConfig,
    TierAllocation,
    TierTransactionInputs,
    TransactionInputs,
    calculate_aggregate_costs,
    calculate_all_storage_options,
    calculate_aws_incremental_costs,
    calculate_incremental_costs,
)

router = APIRouter(tags=["Calculation"])

Period = Literal["monthly", "annual"]


# --------------------------------------------------
# Input models
# --------------------------------------------------
class TierAllocationParams(BaseModel):
    """Capacity per tier (GB, or TB inside a database definition)."""
    hot: float = Field(default=0.0, ge=0)
    cold: float = Field(default=0.0, ge=0)
    archive: float = Field(default=0.0, ge=0)

    def to_domain(self) -> TierAllocation:
        return TierAllocation(hot=self.hot, cold=self.cold, archive=self.archive)


class AzureTierTransactionParams(BaseModel):
    """Azure operation counts and data volumes for one tier over one month."""
    readOperations: Optional[float] = Field(default=None, ge=0)
    writeOperations: Optional[float] = Field(default=None, ge=0)
    iterativeReadOperations: Optional[float] = Field(default=None, ge=0)
    iterativeWriteOperations: Optional[float] = Field(default=None, ge=0)
    otherOperations: Optional[float] = Field(default=None, ge=0)
    archiveHighPriorityRead: Optional[float] = Field(default=None, ge=0)
    queryAccelerationScannedGB: Optional[float] = Field(default=None, ge=0)
    queryAccelerationReturnedGB: Optional[float] = Field(default=None, ge=0)
    dataRetrievalGB: Optional[float] = Field(default=None, ge=0)
    archiveHighPriorityRetrievalGB: Optional[float] = Field(default=None, ge=0)
    storageDurationDays: Optional[float] = Field(
        default=None, ge=0, description="Days the data has been stored (early-deletion proration)"
    )

    def to_domain(self) -> TierTransactionInputs:
        return TierTransactionInputs(
            read_operations=self.readOperations,
            write_operations=self.writeOperations,
            iterative_read_operations=self.iterativeReadOperations,
            iterative_write_operations=self.iterativeWriteOperations,
            other_operations=self.otherOperations,
            archive_high_priority_read=self.archiveHighPriorityRead,
            query_acceleration_scanned_gb=self.queryAccelerationScannedGB,
            query_acceleration_returned_gb=self.queryAccelerationReturnedGB,
            data_retrieval_gb=self.dataRetrievalGB,
            archive_high_priority_retrieval_gb=self.archiveHighPriorityRetrievalGB,
            storage_duration_days=self.storageDurationDays,
        )


class AzureTransactionParams(BaseModel):
    hot: AzureTierTransactionParams = Field(default_factory=AzureTierTransactionParams)
    cold: AzureTierTransactionParams = Field(default_factory=AzureTierTransactionParams)
    archive: AzureTierTransactionParams = Field(default_factory=AzureTierTransactionParams)

    def to_domain(self) -> TransactionInputs:
        return TransactionInputs(
            hot=self.hot.to_domain(),
            cold=self.cold.to_domain(),
            archive=self.archive.to_domain(),
        )


class AWSTierTransactionParams(BaseModel):
    """S3 request counts and retrieval volumes for one tier over one month."""
    putCopyPostListRequests: Optional[float] = Field(default=None, ge=0)
    getSelectRequests: Optional[float] = Field(default=None, ge=0)
    dataRetrievalGB: Optional[float] = Field(default=None, ge=0)
    dataRetrievalRequests: Optional[float] = Field(default=None, ge=0)
    retrievalType: RetrievalType = RetrievalType.STANDARD
    storageDurationDays: Optional[float] = Field(default=None, ge=0)

    def to_domain(self) -> AWSTierTransactionInputs:
        return AWSTierTransactionInputs(
            put_copy_post_list_requests=self.putCopyPostListRequests,
            get_select_requests=self.getSelectRequests,
            data_retrieval_gb=self.dataRetrievalGB,
            data_retrieval_requests=self.dataRetrievalRequests,
            retrieval_type=self.retrievalType,
            storage_duration_days=self.storageDurationDays,
        )


class AWSTransactionParams(BaseModel):
    hot: AWSTierTransactionParams = Field(default_factory=AWSTierTransactionParams)
    cold: AWSTierTransactionParams = Field(default_factory=AWSTierTransactionParams)
    archive: AWSTierTransactionParams = Field(default_factory=AWSTierTransactionParams)

    def to_domain(self) -> AWSTransactionInputs:
        return AWSTransactionInputs(
            hot=self.hot.to_domain(),
            cold=self.cold.to_domain(),
            archive=self.archive.to_domain(),
        )


class StorageOptionsParams(BaseModel):
    """Parameters for the storage-only comparison of every option."""
    totalSizeGB: float = Field(..., ge=0, description="Total capacity per database in GB")
    tierAllocation: TierAllocationParams
    numberOfDatabases: float = Field(default=1, ge=0, description="Number of identical databases")
    includeAWS: Optional[bool] = Field(
        default=None, description="Append the AWS S3 option (defaults to server configuration)"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "totalSizeGB": 1536,
            "tierAllocation": {"hot": 512, "cold": 512, "archive": 512},
            "numberOfDatabases": 2,
            "includeAWS": True
        }
    })


class IncrementalParams(BaseModel):
    """
    Parameters for usage-driven costs on top of capacity storage.

    Azure requests need ``storageType`` and ``replication`` and read
    ``transactions``; AWS requests read ``awsTransactions``.
    """
    provider: Provider = Provider.AZURE
    storageType: Optional[StorageType] = None
    replication: Optional[ReplicationType] = None
    tierAllocation: TierAllocationParams
    transactions: AzureTransactionParams = Field(default_factory=AzureTransactionParams)
    awsTransactions: AWSTransactionParams = Field(default_factory=AWSTransactionParams)
    numberOfDatabases: float = Field(default=1, ge=0)

    @model_validator(mode='after')
    def validate_azure_storage_option(self) -> 'IncrementalParams':
        """Azure costs depend on the storage type and replication."""
        if self.provider is Provider.AZURE and (self.storageType is None or self.replication is None):
            raise ValueError("storageType and replication are required for provider 'azure'")
        return self

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "provider": "azure",
            "storageType": "data-lake",
            "replication": "LRS",
            "tierAllocation": {"hot": 1000, "cold": 500, "archive": 2000},
            "transactions": {
                "hot": {"readOperations": 1000000, "writeOperations": 100000},
                "cold": {"dataRetrievalGB": 50, "storageDurationDays": 15},
                "archive": {"archiveHighPriorityRetrievalGB": 10}
            },
            "numberOfDatabases": 1
        }
    })


class DatabaseParams(BaseModel):
    """One independently configured database (capacity in TB)."""
    id: str
    name: str = ""
    totalSizeTB: float = Field(default=0.0, ge=0)
    tierAllocation: TierAllocationParams
    transactions: AzureTransactionParams = Field(default_factory=AzureTransactionParams)

    def to_domain(self) -> DatabaseConfig:
        return DatabaseConfig(
            id=self.id,
            name=self.name,
            total_size_tb=self.totalSizeTB,
            tier_allocation=self.tierAllocation.to_domain(),
            transactions=self.transactions.to_domain(),
        )


class AggregateParams(BaseModel):
    storageType: StorageType
    replication: ReplicationType
    databases: List[DatabaseParams]

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "storageType": "blob",
            "replication": "GRS",
            "databases": [
                {"id": "db-1", "tierAllocation": {"hot": 1, "cold": 2, "archive": 5}},
                {"id": "db-2", "tierAllocation": {"hot": 0.5, "cold": 0, "archive": 10}}
            ]
        }
    })


# --------------------------------------------------
# Error handling
# --------------------------------------------------
def _configuration_error(e: PricingConfigurationError) -> JSONResponse:
    logger.warning(f"Invalid storage configuration: {e}")
    return JSONResponse(status_code=400, content={"error": str(e)})


def _internal_error(e: Exception) -> JSONResponse:
    logger.error(f"Error during calculation: {e}")
    print_stack_trace()
    return JSONResponse(status_code=500, content={"error": str(e)})


PERIOD_QUERY = Query(default="monthly", description="Display period; annual figures are monthly x 12")


# --------------------------------------------------
# Calculation endpoints
# --------------------------------------------------
@router.put(
    "/api/calculate/storage-options",
    summary="Compare Storage-Only Costs Across All Options",
    description=(
        "Calculates capacity costs (no transactions) for every Azure storage option "
        "(Data Lake / Blob, LRS / GRS) and optionally AWS S3.\n\n"
        "Results are ordered: Data Lake LRS, Data Lake GRS, Blob LRS, Blob GRS, AWS S3."
    ),
    response_description="List of storage options with per-tier breakdown and fleet total.",
    responses={
        400: {"description": "Invalid storage configuration."},
        500: {"description": "Internal error during cost calculation."},
    },
)
def calculate_storage_options(
    params: StorageOptionsParams = Body(...),
    period: Period = PERIOD_QUERY,
):
    try:
        include_aws = settings.DEFAULT_INCLUDE_AWS if params.includeAWS is None else params.includeAWS
        results = calculate_all_storage_options(
            params.totalSizeGB,
            params.tierAllocation.to_domain(),
            params.numberOfDatabases,
            include_aws=include_aws,
        )
        payload = [result.to_dict() for result in results]
        return {"results": scale_for_period(payload, period)}
    except PricingConfigurationError as e:
        return _configuration_error(e)
    except Exception as e:
        return _internal_error(e)


@router.put(
    "/api/calculate/incremental",
    summary="Calculate Incremental Costs",
    description=(
        "Calculates transaction / request, retrieval, query acceleration and early-deletion "
        "costs on top of capacity storage. The result covers all databases."
    ),
    responses={
        400: {"description": "Invalid storage configuration."},
        500: {"description": "Internal error during cost calculation."},
    },
)
def calculate_incremental(
    params: IncrementalParams = Body(...),
    period: Period = PERIOD_QUERY,
):
    try:
        tier_allocation = params.tierAllocation.to_domain()
        if params.provider is Provider.AWS:
            result = calculate_aws_incremental_costs(
                tier_allocation,
                params.awsTransactions.to_domain(),
                params.numberOfDatabases,
            )
        else:
            result = calculate_incremental_costs(
                tier_allocation,
                params.transactions.to_domain(),
                params.storageType,
                params.replication,
                params.numberOfDatabases,
            )
        return {"result": scale_for_period(result.to_dict(), period)}
    except PricingConfigurationError as e:
        return _configuration_error(e)
    except Exception as e:
        return _internal_error(e)


@router.put(
    "/api/calculate/aggregate",
    summary="Calculate Costs Across Multiple Databases",
    description=(
        "Calculates the full Azure cost breakdown of each database (capacity given in TB) "
        "and aggregates it per tier and overall."
    ),
    responses={
        400: {"description": "Invalid storage configuration."},
        500: {"description": "Internal error during cost calculation."},
    },
)
def calculate_aggregate(
    params: AggregateParams = Body(...),
    period: Period = PERIOD_QUERY,
):
    try:
        result = calculate_aggregate_costs(
            [database.to_domain() for database in params.databases],
            params.storageType,
            params.replication,
        )
        return {"result": scale_for_period(result.to_dict(), period)}
    except PricingConfigurationError as e:
        return _configuration_error(e)
    except Exception as e:
        return _internal_error(e)
