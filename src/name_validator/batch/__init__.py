"""
Batch driver: decompose a whole row collection, count what was found, and
re-filter rows that carry severe issues.
"""

from name_validator.batch.aggregate import (
    BatchResult,
    ValidationResults,
    enrich_row,
    iter_chunks,
    process_rows,
)
from name_validator.batch.filtering import filter_problem_names, is_problem_row
from name_validator.batch.process_pool import DecomposerPool, decompose_many

__all__ = [
    "BatchResult",
    "DecomposerPool",
    "ValidationResults",
    "decompose_many",
    "enrich_row",
    "filter_problem_names",
    "is_problem_row",
    "iter_chunks",
    "process_rows",
]
