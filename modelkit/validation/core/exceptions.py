"""
Custom exceptions for the validation module.

Data-level validation failures are never raised; they are recorded on the
model's errors mapping. These exceptions signal misuse or bad configuration.
"""


class ModelkitException(Exception):
    """Base exception for modelkit."""
    pass


class ValidationConfigError(ModelkitException):
    """Exception raised for malformed validation declarations."""
    pass


class UnknownValidatorError(ValidationConfigError):
    """Exception raised when a validator name is not registered."""
    pass
