"""
name_validator: split and validate free-text personal names.

    >>> from name_validator import decompose
    >>> v = decompose("Dr. Jane Doe Jr")
    >>> (v.honorific, v.first_name, v.last_name, v.suffix)
    ('Dr', 'Jane', 'Doe', 'JR')
"""

__version__ = "0.1.0"

from name_validator.batch import BatchResult, ValidationResults, filter_problem_names, process_rows
from name_validator.entities import ConfidenceLevel, NameValidation, decompose
from name_validator.normalization.capitalization import proper_capitalize
from name_validator.normalization.script_detection import ScriptTag, classify

__all__ = [
    "BatchResult",
    "ConfidenceLevel",
    "NameValidation",
    "ScriptTag",
    "ValidationResults",
    "classify",
    "decompose",
    "filter_problem_names",
    "process_rows",
    "proper_capitalize",
]
