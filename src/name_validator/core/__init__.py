"""
name_validator.core package

Orchestration layer:

- context:    ValidationContext passed between layers
- exceptions: PipelineError hierarchy
- pipeline:   load -> process -> filter -> export

This __init__ intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []
