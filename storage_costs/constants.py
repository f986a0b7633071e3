#--------------------------------------------------------------------
# Billing granularity (operations per billed unit)
#--------------------------------------------------------------------
# Azure
AZURE_OPERATIONS_PER_UNIT = 10_000            # write / read / iterative read / other
AZURE_ITERATIVE_WRITES_PER_UNIT = 100         # iterative write (e.g. hierarchical renames)
AZURE_HIGH_PRIORITY_READS_PER_UNIT = 10_000   # archive high-priority read

# AWS
AWS_REQUESTS_PER_UNIT = 1_000                 # PUT/COPY/POST/LIST, GET/SELECT
AWS_RETRIEVAL_REQUESTS_PER_UNIT = 1_000       # Glacier retrieval requests

#--------------------------------------------------------------------
# Units
#--------------------------------------------------------------------
GB_PER_TB = 1024

#--------------------------------------------------------------------
# Display
#--------------------------------------------------------------------
PERIOD_MULTIPLIERS = {
    "monthly": 1,
    "annual": 12,
}

STORAGE_TYPE_LABELS = {
    "data-lake": "Azure Data Lake Storage",
    "blob": "Azure Blob Storage",
}

AWS_LABEL = "AWS S3"

#--------------------------------------------------------------------
# Batch processing (spreadsheet cost matrix)
#--------------------------------------------------------------------
BATCH_COST_COLUMNS = [
    "StorageCost_Hot",
    "StorageCost_Cold",
    "StorageCost_Archive",
    "StorageCost_Index",
    "StorageCost_Total",
    "TransactionCost_Hot",
    "TransactionCost_Cold",
    "TransactionCost_Archive",
    "TransactionCost",
    "RetrievalCost",
    "QueryAccelerationCost",
    "RequestCost",
    "EarlyDeletionCost",
    "AdditionalCost_Total",
    "TotalCost",
]

BATCH_ID_COLUMN = "CombinationID"
BATCH_CLASS_COLUMN = "Class"
BATCH_ERROR_COLUMN = "ErrorMessage"
BATCH_ERROR_MARKER = "ERROR"
BATCH_RESULTS_SHEET = "Results"
