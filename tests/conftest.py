from decimal import Decimal

import pytest

from src.models.mortgage import LoanInput, MortgageType


@pytest.fixture
def standard_loan():
    """$250K at 6.5% over 30 years, fully amortizing."""
    return LoanInput(
        principal=Decimal("250000"),
        annual_rate_percent=Decimal("6.5"),
        term_years=30,
        mortgage_type=MortgageType.REPAYMENT,
    )


@pytest.fixture
def interest_only_loan(standard_loan):
    return LoanInput(
        principal=standard_loan.principal,
        annual_rate_percent=standard_loan.annual_rate_percent,
        term_years=standard_loan.term_years,
        mortgage_type=MortgageType.INTEREST_ONLY,
    )


@pytest.fixture
def zero_rate_loan():
    return LoanInput(
        principal=Decimal("120000"),
        annual_rate_percent=Decimal("0"),
        term_years=10,
        mortgage_type=MortgageType.REPAYMENT,
    )
