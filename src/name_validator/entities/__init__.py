"""
Name entities: the NameValidation record and the decomposer that builds it.
"""

from name_validator.entities.decomposer import decompose, sanitize
from name_validator.entities.name_validation import ConfidenceLevel, NameValidation

__all__ = [
    "ConfidenceLevel",
    "NameValidation",
    "decompose",
    "sanitize",
]
