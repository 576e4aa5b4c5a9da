"""Loan form validation.

Raw text in, ValidationResult out. Every field is checked on every call;
failures are reported, never raised.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from src.exceptions import InvalidLoanInputError
from src.models.mortgage import (
    ANNUAL_RATE_PERCENT,
    PRINCIPAL,
    TERM_YEARS,
    LoanInput,
    MortgageType,
    ValidationErrorKind,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# (required message, invalid message) per field
MESSAGES: dict[str, tuple[str, str]] = {
    PRINCIPAL: ("Loan amount is required", "Please enter a valid loan amount"),
    ANNUAL_RATE_PERCENT: ("Interest rate is required", "Please enter a valid interest rate"),
    TERM_YEARS: ("Loan term is required", "Please enter a valid loan term in years"),
}


def parse_number(text: str) -> Optional[Decimal]:
    """Parse text as a finite Decimal, or None if it isn't one."""
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _principal_in_range(value: Decimal) -> bool:
    return value > 0


def _rate_in_range(value: Decimal) -> bool:
    # 0% is a legitimate interest-free loan
    return value >= 0


def _term_in_range(value: Decimal) -> bool:
    return value > 0 and value == value.to_integral_value()


RANGE_CHECKS = {
    PRINCIPAL: _principal_in_range,
    ANNUAL_RATE_PERCENT: _rate_in_range,
    TERM_YEARS: _term_in_range,
}


def check_field(name: str, text: Optional[str]) -> Optional[ValidationErrorKind]:
    """Classify a single field's text. None means the field is valid."""
    if text is None or not text.strip():
        return ValidationErrorKind.MISSING
    value = parse_number(text)
    if value is None:
        return ValidationErrorKind.NOT_NUMERIC
    if not RANGE_CHECKS[name](value):
        return ValidationErrorKind.OUT_OF_RANGE
    return None


def validate(principal_text: str, rate_text: str, term_text: str) -> ValidationResult:
    """Validate the three loan form fields.

    Returns a ValidationResult whose errors map holds one message per failing
    field. Missing fields get a "... is required" message; non-numeric and
    out-of-range values share the field's "Please enter a valid ..." message.
    """
    errors: dict[str, str] = {}
    kinds: dict[str, ValidationErrorKind] = {}

    for name, text in (
        (PRINCIPAL, principal_text),
        (ANNUAL_RATE_PERCENT, rate_text),
        (TERM_YEARS, term_text),
    ):
        kind = check_field(name, text)
        if kind is None:
            continue
        required_msg, invalid_msg = MESSAGES[name]
        errors[name] = required_msg if kind is ValidationErrorKind.MISSING else invalid_msg
        kinds[name] = kind
        logger.debug("Rejected %s=%r (%s)", name, text, kind.value)

    return ValidationResult(errors=errors, kinds=kinds)


def build_loan_input(
    principal_text: str,
    rate_text: str,
    term_text: str,
    mortgage_type: MortgageType | str = MortgageType.REPAYMENT,
) -> LoanInput:
    """Validate form text and build the immutable LoanInput.

    Raises InvalidLoanInputError (carrying the ValidationResult) if any field
    fails validation. An unrecognized mortgage type raises ValueError.
    """
    if isinstance(mortgage_type, str):
        mortgage_type = MortgageType.parse(mortgage_type)

    result = validate(principal_text, rate_text, term_text)
    if not result.is_valid:
        raise InvalidLoanInputError(result)

    return LoanInput(
        principal=Decimal(principal_text.strip()),
        annual_rate_percent=Decimal(rate_text.strip()),
        term_years=int(Decimal(term_text.strip())),
        mortgage_type=mortgage_type,
    )
