"""
Exceptions raised by the fitting engine.
"""


class LinfitError(Exception):
    """Base class for fitting errors."""


class EmptyDatasetError(LinfitError, ValueError):
    """Raised when an operation needs data points but the dataset is empty."""


class DimensionMismatchError(LinfitError, ValueError):
    """Raised when a parameter vector does not match the model's parameter count."""

    def __init__(self, expected, got, model_name=None):
        self.expected = expected
        self.got = got
        self.model_name = model_name
        label = f"Model '{model_name}'" if model_name else "Model"
        super().__init__(f"{label} expects {expected} parameters, got {got}")


class SingularDesignError(LinfitError, ValueError):
    """Raised when least squares is undetermined (too few distinct x-values)."""


class NonConvergenceError(LinfitError, RuntimeError):
    """
    Raised when the minimizer reports a failed run.

    The message is the minimizer's own; the full result is kept on ``result``.
    """

    def __init__(self, message, result=None):
        super().__init__(message)
        self.result = result
