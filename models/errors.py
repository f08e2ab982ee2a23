"""
Error types raised by the SPD Lab calculation core.

The core reports failures as exceptions carrying a machine-readable ``kind``;
turning them into user-facing text is left to the views layer.
"""


class CalculationError(Exception):
    """Base class for every failure of a calculation request."""

    kind = "calculation"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(CalculationError):
    """Area or power scale is zero or not finite."""

    kind = "configuration"


class InsufficientDataError(CalculationError):
    """No rows were supplied, so nothing can be interpolated."""

    kind = "insufficient_data"


class ContractViolationError(CalculationError):
    """Integration defect: unknown weighting function, ragged or unsorted rows."""

    kind = "contract_violation"
