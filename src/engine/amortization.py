"""Mortgage payment computation.

Pure functions: LoanInput in, CalculationResult out. No I/O.
Intermediate values keep full Decimal precision; only the final outputs
are rounded to cents.
"""

import logging
from decimal import MAX_EMAX, MIN_EMIN, Decimal, ROUND_HALF_UP, localcontext

from src.models.mortgage import CalculationResult, LoanInput, MortgageType

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Below this r*n the interest is invisible at working precision
NEGLIGIBLE_INTEREST = Decimal("1E-30")


def round_currency(value: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    with localcontext() as ctx:
        # Large amounts need more than the default 28 digits to hold the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        rounded = value.quantize(TWO_PLACES, ROUND_HALF_UP)
    # No "-0.00" from precision noise around zero
    return rounded.copy_abs() if rounded.is_zero() else rounded


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert an annual percentage (e.g. 6.5) to a monthly fraction."""
    return annual_rate_percent / 100 / 12


def repayment_monthly_payment(principal: Decimal, r: Decimal, n: int) -> Decimal:
    """Level payment that fully amortizes principal over n months at rate r."""
    if r == 0 or r * n < NEGLIGIBLE_INTEREST:
        return principal / n

    with localcontext() as ctx:
        # 1 + r has to keep every digit of r, or 1 - (1+r)^-n loses them all
        ctx.prec += max(0, -r.adjusted())
        # M = P * r / [1 - (1+r)^-n]; for huge n, (1+r)^-n underflows to 0 and M -> P*r
        discount = (1 + r) ** -n
        payment = principal * r / (1 - discount)
    return +payment


def interest_only_monthly_payment(principal: Decimal, r: Decimal) -> Decimal:
    """Monthly interest on the full, never-amortized principal."""
    return principal * r


def calculate(loan: LoanInput) -> CalculationResult:
    """Compute monthly payment, total payment and total interest.

    Precondition: loan was built from validated input (see
    src.engine.validation.build_loan_input).

    Interest-only loans include the principal, repaid at term end, in
    total_payment; total_interest is the interest payments alone.
    """
    principal = loan.principal
    r = monthly_rate(loan.annual_rate_percent)
    n = loan.number_of_payments

    with localcontext() as ctx:
        # Totals for very long terms can run past the default exponent range
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        if loan.mortgage_type is MortgageType.REPAYMENT:
            payment = repayment_monthly_payment(principal, r, n)
            total_payment = payment * n
            total_interest = total_payment - principal
        else:
            payment = interest_only_monthly_payment(principal, r)
            total_interest = payment * n
            total_payment = principal + total_interest

    result = CalculationResult(
        monthly_payment=round_currency(payment),
        total_payment=round_currency(total_payment),
        total_interest=round_currency(total_interest),
    )
    logger.debug(
        "Calculated %s loan P=%s rate=%s%% term=%sy -> %s/mo",
        loan.mortgage_type.value,
        principal,
        loan.annual_rate_percent,
        loan.term_years,
        result.monthly_payment,
    )
    return result
