"""Mortgage calculator CLI.

Usage:
    python -m src.cli.calculator 250000 6.5 30
    python -m src.cli.calculator 250000 6.5 30 --type interest-only
    python -m src.cli.calculator 250000 6.5 30 --json
"""

import argparse
import logging
import sys

from src.cli.formatting import format_currency, format_percent
from src.cli.schemas import MortgageQuoteResponse
from src.config import settings
from src.engine.amortization import calculate
from src.engine.validation import build_loan_input
from src.exceptions import InvalidLoanInputError
from src.models.mortgage import (
    ANNUAL_RATE_PERCENT,
    PRINCIPAL,
    TERM_YEARS,
    CalculationResult,
    LoanInput,
    MortgageType,
    ValidationResult,
)

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    PRINCIPAL: "Loan amount",
    ANNUAL_RATE_PERCENT: "Interest rate",
    TERM_YEARS: "Loan term",
}

TYPE_LABELS = {
    MortgageType.REPAYMENT: "Repayment",
    MortgageType.INTEREST_ONLY: "Interest only",
}


def _header(title: str) -> None:
    print(f"\n{'=' * 48}")
    print(f"  {title}")
    print(f"{'=' * 48}")


def print_result(loan: LoanInput, result: CalculationResult) -> None:
    _header("Mortgage Payments")
    print(f"  Loan amount:      {format_currency(loan.principal)}")
    print(f"  Interest rate:    {format_percent(loan.annual_rate_percent)}")
    print(f"  Term:             {loan.term_years} years ({loan.number_of_payments} payments)")
    print(f"  Type:             {TYPE_LABELS[loan.mortgage_type]}")
    print()
    print(f"  Monthly payment:  {format_currency(result.monthly_payment)}")
    print(f"  Total payment:    {format_currency(result.total_payment)}")
    print(f"  Total interest:   {format_currency(result.total_interest)}")
    print()


def print_errors(result: ValidationResult) -> None:
    for name, message in result.errors.items():
        print(f"  {FIELD_LABELS[name] + ':':<17} {message}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mortgage payment calculator")
    # Raw text on purpose: the validator decides what is acceptable
    parser.add_argument("amount", help="Loan amount, e.g. 250000")
    parser.add_argument("rate", help="Annual interest rate in percent, e.g. 6.5")
    parser.add_argument("term", help="Loan term in whole years, e.g. 30")
    parser.add_argument(
        "--type",
        dest="mortgage_type",
        choices=[t.value for t in MortgageType],
        default=settings.default_mortgage_type,
        help=f"Mortgage type (default: {settings.default_mortgage_type})",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        loan = build_loan_input(args.amount, args.rate, args.term, args.mortgage_type)
    except InvalidLoanInputError as e:
        logger.debug("Invalid loan input: %s", ", ".join(e.result.errors))
        print_errors(e.result)
        return 2

    result = calculate(loan)
    if args.json:
        print(MortgageQuoteResponse.from_result(loan, result).model_dump_json(indent=2))
    else:
        print_result(loan, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
