"""Pydantic schema for the calculator's JSON output."""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.models.mortgage import CalculationResult, LoanInput


class MortgageQuoteResponse(BaseModel):
    # Inputs, echoed back as validated
    principal: Decimal
    annual_rate_percent: Decimal
    term_years: int
    mortgage_type: str = Field(..., description="repayment or interest-only")
    number_of_payments: int

    # Results, rounded to cents
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal

    @classmethod
    def from_result(cls, loan: LoanInput, result: CalculationResult) -> "MortgageQuoteResponse":
        return cls(
            principal=loan.principal,
            annual_rate_percent=loan.annual_rate_percent,
            term_years=loan.term_years,
            mortgage_type=loan.mortgage_type.value,
            number_of_payments=loan.number_of_payments,
            monthly_payment=result.monthly_payment,
            total_payment=result.total_payment,
            total_interest=result.total_interest,
        )
