"""Exceptions raised by the mortgage calculator."""

from src.models.mortgage import ValidationResult


class MortgageCalculatorError(Exception):
    """Base class for mortgage calculator errors."""


class InvalidLoanInputError(MortgageCalculatorError, ValueError):
    """Raised when a LoanInput is requested from text that failed validation."""

    def __init__(self, result: ValidationResult):
        self.result = result
        details = "; ".join(f"{name}: {msg}" for name, msg in result.errors.items())
        super().__init__(f"Invalid loan input ({details})")
