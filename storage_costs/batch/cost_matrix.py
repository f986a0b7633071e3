"""
Cost Matrix Batch Processor
===========================

Reads a spreadsheet (CSV or XLSX) where every row describes one storage
scenario, calculates its storage and incremental costs and writes the input
columns plus a fixed set of cost columns to a new spreadsheet.

Input columns (all optional, matched by name):
    - TierAllocation_<Tier>_GB, or TierAllocation_<Tier>_Percent x DatabaseCapacityGB
    - Azure_<Tier>_<Counter>   e.g. Azure_Hot_ReadOperations, Azure_Cold_DataRetrievalGB
    - AWS_<Tier>_<Counter>     e.g. AWS_Archive_DataRetrievalRequests, AWS_Archive_RetrievalType
    - StorageType (data-lake | blob), ReplicationType (LRS | GRS),
      CloudProvider (azure | aws), NumberOfDatabases
    - CombinationID, Class (passed through; Class changes get a blank separator row)

Usage:
    storage-costs-batch input.csv output.xlsx [--debug]
"""

import argparse
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from storage_costs.config import settings
from storage_costs.logger import logger, configure_logger
from storage_costs.utils import print_stack_trace
from storage_costs.pricing.types import (
    Provider,
    ReplicationType,
    RetrievalType,
    StorageTier,
    StorageType,
)
from storage_costs.calculation.models import (
    AWSTierTransactionInputs,
    AWSTransactionInputs,
    TierAllocation,
    TierTransactionInputs,
    TransactionInputs,
)
from storage_costs.calculation.engine import (
    calculate_aws_incremental_costs,
    calculate_aws_storage_only_costs,
    calculate_aws_tier_request_costs,
    calculate_incremental_costs,
    calculate_storage_only_costs,
    calculate_tier_transaction_costs,
)
import storage_costs.constants as CONSTANTS


# Column suffix -> input field
AZURE_COUNTER_COLUMNS = {
    "ReadOperations": "read_operations",
    "WriteOperations": "write_operations",
    "IterativeReadOperations": "iterative_read_operations",
    "IterativeWriteOperations": "iterative_write_operations",
    "OtherOperations": "other_operations",
    "ArchiveHighPriorityRead": "archive_high_priority_read",
    "QueryAccelerationScannedGB": "query_acceleration_scanned_gb",
    "QueryAccelerationReturnedGB": "query_acceleration_returned_gb",
    "DataRetrievalGB": "data_retrieval_gb",
    "ArchiveHighPriorityRetrievalGB": "archive_high_priority_retrieval_gb",
}

AWS_COUNTER_COLUMNS = {
    "PutCopyPostListRequests": "put_copy_post_list_requests",
    "GetSelectRequests": "get_select_requests",
    "DataRetrievalGB": "data_retrieval_gb",
    "DataRetrievalRequests": "data_retrieval_requests",
}

SUPPORTED_SUFFIXES = (".csv", ".xlsx")


# --------------------------------------------------------------------
# Spreadsheet I/O
# --------------------------------------------------------------------
def _spreadsheet_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported file type '{path.suffix}'. Expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    return suffix


def read_cost_matrix(path) -> List[Dict[str, Any]]:
    """
    Read the first sheet of a CSV/XLSX file into row dicts.

    Rows without a single non-empty value are dropped.
    """
    path = Path(path)
    if _spreadsheet_suffix(path) == ".csv":
        df = pd.read_csv(path)
    else:
        df = pd.read_excel(path, sheet_name=0)

    total_rows = len(df)
    df = df.replace(r"^\s*$", float("nan"), regex=True).dropna(how="all")
    logger.info(f"Found {total_rows} rows ({len(df)} after filtering empty rows)")

    return df.to_dict(orient="records")


def write_cost_matrix(rows: List[Dict[str, Any]], path) -> pd.DataFrame:
    """
    Write result rows with a stable column order:
    CombinationID, the input columns, the cost columns, ErrorMessage.
    """
    path = Path(path)
    suffix = _spreadsheet_suffix(path)
    if not rows:
        raise ValueError("No data to write")

    all_keys = []
    for row in rows:
        for key in row:
            if key not in all_keys:
                all_keys.append(key)

    cost_columns = set(CONSTANTS.BATCH_COST_COLUMNS)
    trailing = {CONSTANTS.BATCH_ID_COLUMN, CONSTANTS.BATCH_ERROR_COLUMN}

    headers = []
    if CONSTANTS.BATCH_ID_COLUMN in all_keys:
        headers.append(CONSTANTS.BATCH_ID_COLUMN)
    headers.extend(key for key in all_keys if key not in cost_columns and key not in trailing)
    headers.extend(key for key in CONSTANTS.BATCH_COST_COLUMNS if key in all_keys)
    if CONSTANTS.BATCH_ERROR_COLUMN in all_keys:
        headers.append(CONSTANTS.BATCH_ERROR_COLUMN)

    df = pd.DataFrame(rows, columns=headers)
    if suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_excel(path, sheet_name=CONSTANTS.BATCH_RESULTS_SHEET, index=False)
    return df


# --------------------------------------------------------------------
# Row mapping
# --------------------------------------------------------------------
def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _number(row: Dict[str, Any], column: str, default: Optional[float] = 0.0) -> Optional[float]:
    """Numeric cell value; ``default`` for missing or blank cells."""
    value = row.get(column)
    if _is_blank(value):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Column '{column}' must be numeric, got '{value}'") from None


def _text(row: Dict[str, Any], column: str) -> Optional[str]:
    value = row.get(column)
    if _is_blank(value):
        return None
    return str(value).strip()


def _tier_allocation(row: Dict[str, Any]) -> TierAllocation:
    capacity = _number(row, "DatabaseCapacityGB")
    sizes = {}
    for tier in StorageTier:
        name = tier.value.capitalize()
        size = _number(row, f"TierAllocation_{name}_GB", default=None)
        if size is None:
            percent = _number(row, f"TierAllocation_{name}_Percent")
            size = capacity * percent / 100
        sizes[tier.value] = size
    return TierAllocation(**sizes)


def _azure_transactions(row: Dict[str, Any]) -> TransactionInputs:
    tiers = {}
    for tier in StorageTier:
        prefix = f"Azure_{tier.value.capitalize()}_"
        values = {
            field: _number(row, prefix + suffix)
            for suffix, field in AZURE_COUNTER_COLUMNS.items()
        }
        values["storage_duration_days"] = _number(row, prefix + "StorageDurationDays", default=None)
        tiers[tier.value] = TierTransactionInputs(**values)
    return TransactionInputs(**tiers)


def _aws_transactions(row: Dict[str, Any]) -> AWSTransactionInputs:
    tiers = {}
    for tier in StorageTier:
        prefix = f"AWS_{tier.value.capitalize()}_"
        values = {
            field: _number(row, prefix + suffix)
            for suffix, field in AWS_COUNTER_COLUMNS.items()
        }
        retrieval_type = _text(row, prefix + "RetrievalType")
        values["retrieval_type"] = RetrievalType(retrieval_type.lower()) if retrieval_type else RetrievalType.STANDARD
        values["storage_duration_days"] = _number(row, prefix + "StorageDurationDays", default=None)
        tiers[tier.value] = AWSTierTransactionInputs(**values)
    return AWSTransactionInputs(**tiers)


def map_row_to_inputs(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map spreadsheet columns to calculator inputs.

    Blank cells fall back to: blob, LRS, azure, one database.

    Raises:
        ValueError: For non-numeric counters or unknown enum values.
    """
    storage_type = _text(row, "StorageType")
    replication = _text(row, "ReplicationType")
    provider = _text(row, "CloudProvider")

    return {
        "tier_allocation": _tier_allocation(row),
        "transactions": _azure_transactions(row),
        "aws_transactions": _aws_transactions(row),
        "storage_type": StorageType(storage_type.lower()) if storage_type else StorageType.BLOB,
        "replication": ReplicationType(replication.upper()) if replication else ReplicationType.LRS,
        "provider": Provider(provider.lower()) if provider else Provider.AZURE,
        "number_of_databases": _number(row, "NumberOfDatabases") or 1,
    }


# --------------------------------------------------------------------
# Cost calculation
# --------------------------------------------------------------------
def _tier_columns(costs_by_tier: Dict[StorageTier, float]) -> Dict[str, float]:
    return {
        f"TransactionCost_{tier.value.capitalize()}": cost
        for tier, cost in costs_by_tier.items()
    }


def _azure_costs(inputs: Dict[str, Any]) -> Dict[str, Any]:
    allocation = inputs["tier_allocation"]
    databases = inputs["number_of_databases"]

    storage = calculate_storage_only_costs(
        allocation.total, allocation, inputs["storage_type"], inputs["replication"]
    )
    incremental = calculate_incremental_costs(
        allocation, inputs["transactions"], inputs["storage_type"], inputs["replication"], databases
    )
    transactions_by_tier = calculate_tier_transaction_costs(
        inputs["transactions"], inputs["storage_type"], inputs["replication"], databases
    )

    storage_total = storage.total * databases
    return {
        "StorageCost_Hot": storage.hot * databases,
        "StorageCost_Cold": storage.cold * databases,
        "StorageCost_Archive": storage.archive * databases,
        "StorageCost_Index": (storage.index or 0.0) * databases,
        "StorageCost_Total": storage_total,
        **_tier_columns(transactions_by_tier),
        "TransactionCost": incremental.transactions,
        "RetrievalCost": incremental.retrieval,
        "QueryAccelerationCost": incremental.query_acceleration,
        "EarlyDeletionCost": incremental.early_deletion,
        "AdditionalCost_Total": incremental.total,
        "TotalCost": storage_total + incremental.total,
    }


def _aws_costs(inputs: Dict[str, Any]) -> Dict[str, Any]:
    allocation = inputs["tier_allocation"]
    databases = inputs["number_of_databases"]

    storage = calculate_aws_storage_only_costs(allocation.total, allocation)
    incremental = calculate_aws_incremental_costs(allocation, inputs["aws_transactions"], databases)
    requests_by_tier = calculate_aws_tier_request_costs(inputs["aws_transactions"], databases)

    storage_total = storage.total * databases
    return {
        "StorageCost_Hot": storage.hot * databases,
        "StorageCost_Cold": storage.cold * databases,
        "StorageCost_Archive": storage.archive * databases,
        "StorageCost_Total": storage_total,
        **_tier_columns(requests_by_tier),
        "TransactionCost": incremental.requests,
        "RequestCost": incremental.requests,
        "RetrievalCost": incremental.retrieval,
        "EarlyDeletionCost": incremental.early_deletion,
        "AdditionalCost_Total": incremental.total,
        "TotalCost": storage_total + incremental.total,
    }


def calculate_cost_for_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Calculate the cost columns of one row.

    A failing row is returned with TotalCost = "ERROR" and an ErrorMessage;
    it never aborts the batch.
    """
    rest = {key: value for key, value in row.items() if key != CONSTANTS.BATCH_ID_COLUMN}
    combination_id = row.get(CONSTANTS.BATCH_ID_COLUMN)
    result = {CONSTANTS.BATCH_ID_COLUMN: "" if _is_blank(combination_id) else combination_id, **rest}

    try:
        inputs = map_row_to_inputs(row)
        if inputs["provider"] is Provider.AWS:
            costs = _aws_costs(inputs)
        else:
            costs = _azure_costs(inputs)
        result.update(costs)
    except Exception as e:
        logger.error(f"Error calculating cost for row {result[CONSTANTS.BATCH_ID_COLUMN]!r}: {e}")
        print_stack_trace()
        result["TotalCost"] = CONSTANTS.BATCH_ERROR_MARKER
        result[CONSTANTS.BATCH_ERROR_COLUMN] = str(e)

    return result


def _class_value(row: Dict[str, Any]) -> Optional[float]:
    try:
        value = _number(row, CONSTANTS.BATCH_CLASS_COLUMN, default=None)
    except ValueError:
        return None
    return value or None


def insert_class_separators(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Insert a blank row wherever the Class column changes between two classified rows."""
    output = []
    previous_class = None

    for index, row in enumerate(rows):
        current_class = _class_value(row)
        if previous_class is not None and current_class is not None and current_class != previous_class:
            output.append({key: "" for key in rows[index - 1]})
        output.append(row)
        previous_class = current_class

    return output


# --------------------------------------------------------------------
# Batch entry points
# --------------------------------------------------------------------
def process_cost_matrix(input_path, output_path) -> pd.DataFrame:
    """Read, calculate and write a whole cost matrix. Returns the written frame."""
    _spreadsheet_suffix(Path(output_path))
    logger.info(f"Reading {input_path}...")
    rows = read_cost_matrix(input_path)
    if rows:
        logger.debug(f"Columns: {', '.join(str(key) for key in rows[0])}")

    logger.info("Processing rows and calculating costs...")
    progress_every = max(settings.BATCH_PROGRESS_EVERY, 1)
    results = []
    for index, row in enumerate(rows, start=1):
        results.append(calculate_cost_for_row(row))
        if index % progress_every == 0:
            logger.info(f"Processed {index}/{len(rows)} rows...")

    errors = sum(1 for row in results if row.get("TotalCost") == CONSTANTS.BATCH_ERROR_MARKER)
    if errors:
        logger.warning(f"{errors} of {len(results)} rows failed; see the {CONSTANTS.BATCH_ERROR_COLUMN} column")

    df = write_cost_matrix(insert_class_separators(results), output_path)
    logger.info(f"✅ Output written to: {output_path}")
    logger.info(f"📊 Processed {len(rows)} rows")
    return df


def main(argv=None):
    parser = argparse.ArgumentParser(description="Calculate storage costs for every row of a cost matrix")
    parser.add_argument("input", help="Input CSV or XLSX file")
    parser.add_argument("output", help="Output file (.xlsx or .csv)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and stack traces")
    args = parser.parse_args(argv)

    if args.debug:
        configure_logger(True)

    try:
        process_cost_matrix(args.input, args.output)
    except Exception as e:
        logger.error(f"Batch processing failed: {e}")
        print_stack_trace()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
