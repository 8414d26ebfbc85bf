"""
name_validator.normalization package

Leaf helpers used by the name decomposer:

- script_detection: Unicode script classification
- vocabularies:     honorific / suffix / particle / placeholder / security tables
- capitalization:   particle-aware capitalization
- encoding:         fixed-table mojibake repair

Import from the submodules directly.
"""

__all__ = []
