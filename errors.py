# errors.py


class AnalysisError(Exception):
    """Base class for failures that abort the analysis run."""


class LoadError(AnalysisError):
    """The listings file is missing or cannot be read."""


class ParseError(AnalysisError):
    """The listings file is not a well-formed CSV with the expected columns."""


class ModelFitError(AnalysisError):
    """A model cannot be fitted on the given rows (empty or degenerate input)."""
