"""Mortgage calculator data types."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

PRINCIPAL = "principal"
ANNUAL_RATE_PERCENT = "annual_rate_percent"
TERM_YEARS = "term_years"

LOAN_FIELDS = (PRINCIPAL, ANNUAL_RATE_PERCENT, TERM_YEARS)


class MortgageType(Enum):
    REPAYMENT = "repayment"
    INTEREST_ONLY = "interest-only"

    @classmethod
    def parse(cls, text: str) -> "MortgageType":
        """Accept 'Interest only', 'interest_only', 'INTEREST-ONLY', etc."""
        normalized = text.strip().lower().replace("_", "-").replace(" ", "-")
        return cls(normalized)


class ValidationErrorKind(Enum):
    MISSING = "missing"
    NOT_NUMERIC = "not_numeric"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class LoanInput:
    principal: Decimal
    annual_rate_percent: Decimal
    term_years: int
    mortgage_type: MortgageType = MortgageType.REPAYMENT

    @property
    def number_of_payments(self) -> int:
        return self.term_years * 12


@dataclass(frozen=True)
class ValidationResult:
    """Field name -> error message. Empty means every field is valid."""
    errors: dict[str, str] = field(default_factory=dict)
    kinds: dict[str, ValidationErrorKind] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class CalculationResult:
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
