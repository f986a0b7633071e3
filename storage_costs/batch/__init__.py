"""
Batch Package
=============

Spreadsheet-driven cost calculation (one scenario per row).
"""

from .cost_matrix import (
    read_cost_matrix,
    write_cost_matrix,
    map_row_to_inputs,
    calculate_cost_for_row,
    insert_class_separators,
    process_cost_matrix,
    main,
)

__all__ = [
    "read_cost_matrix",
    "write_cost_matrix",
    "map_row_to_inputs",
    "calculate_cost_for_row",
    "insert_class_separators",
    "process_cost_matrix",
    "main",
]
