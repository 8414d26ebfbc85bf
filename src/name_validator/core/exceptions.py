class PipelineError(Exception):
    """Base exception for pipeline failures."""


class LoaderError(PipelineError):
    """Raised when an input table cannot be read."""


class ColumnNotFoundError(PipelineError):
    """Raised when no name column is given or detectable."""


class ExportError(PipelineError):
    """Raised when an output file cannot be written."""
