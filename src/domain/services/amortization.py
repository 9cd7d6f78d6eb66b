"""Loan amortization calculations for financed assets."""

from datetime import date
from decimal import Decimal

from src.domain.models.assets import Financing, PaymentMethod
from src.domain.models.finance import AmortizationResult
from src.domain.services.growth import months_elapsed
from src.utils.decimal_utils import coerce_decimal, round_money


def no_financing_result(principal=None) -> AmortizationResult:
    """Return the result used when financing data is missing.

    Args:
        principal: Loan amount when known.

    Returns:
        AmortizationResult: Zero progress with the full principal remaining.
    """
    return AmortizationResult(
        months_paid=0,
        total_paid=Decimal("0.00"),
        principal_paid=Decimal("0.00"),
        interest_paid=Decimal("0.00"),
        remaining_balance=round_money(coerce_decimal(principal)),
    )


def calculate_monthly_payment(
    principal,
    annual_rate_percent,
    term_months: int,
) -> Decimal:
    """Return the fixed annuity payment for a loan.

    Args:
        principal: Amount borrowed.
        annual_rate_percent: Annual interest rate in percent.
        term_months: Number of monthly payments.

    Returns:
        Decimal: Unrounded monthly payment; straight-line when the rate is 0.
    """
    principal = coerce_decimal(principal)
    if term_months <= 0:
        return Decimal("0")
    monthly_rate = coerce_decimal(annual_rate_percent) / 100 / 12
    if monthly_rate == 0:
        return principal / term_months
    factor = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * factor / (factor - 1)


def amortize(
    principal,
    annual_rate_percent,
    term_months: int,
    months_paid: int,
    monthly_payment=None,
) -> AmortizationResult:
    """Replay a loan month by month.

    Each month accrues ``balance * rate`` interest and applies the rest of
    the payment to principal, capped at the remaining balance. Iteration
    stops after ``months_paid`` months or once the balance reaches zero.

    Args:
        principal: Amount borrowed.
        annual_rate_percent: Annual interest rate in percent.
        term_months: Loan duration in months.
        months_paid: Payments made so far; capped to ``term_months``.
        monthly_payment: Optional fixed payment. Ignored for zero-rate loans,
            which repay ``principal / term_months`` each month.

    Returns:
        AmortizationResult: Amounts paid and the remaining balance.
    """
    principal = coerce_decimal(principal)
    if principal <= 0 or not term_months or term_months <= 0:
        return no_financing_result(principal)

    months_paid = min(max(months_paid, 0), term_months)
    monthly_rate = coerce_decimal(annual_rate_percent) / 100 / 12
    if monthly_rate == 0 or not monthly_payment:
        payment = calculate_monthly_payment(
            principal,
            annual_rate_percent,
            term_months,
        )
    else:
        payment = coerce_decimal(monthly_payment)

    balance = principal
    principal_paid = Decimal("0")
    interest_paid = Decimal("0")
    for _ in range(months_paid):
        if balance <= 0:
            break
        interest = balance * monthly_rate
        principal_part = min(payment - interest, balance)
        interest_paid += interest
        principal_paid += principal_part
        balance -= principal_part

    if months_paid >= term_months:
        principal_paid += balance
        balance = Decimal("0")

    return AmortizationResult(
        months_paid=months_paid,
        total_paid=round_money(principal_paid + interest_paid),
        principal_paid=round_money(principal_paid),
        interest_paid=round_money(interest_paid),
        remaining_balance=round_money(max(balance, Decimal("0"))),
    )


def has_financing(financing: Financing | None) -> bool:
    """Return True when the financing terms are complete enough to replay."""
    if financing is None:
        return False
    if financing.payment_method == PaymentMethod.CASH:
        return False
    return bool(
        financing.loan_amount
        and financing.term_months
        and financing.interest_rate is not None
    )


def calculate_financing_progress(
    financing: Financing | None,
    as_of: date,
    purchase_date: date | None = None,
) -> AmortizationResult:
    """Compute loan progress as of a date.

    Args:
        financing: Loan terms of the asset.
        as_of: Evaluation date, usually today.
        purchase_date: Used when the loan has no explicit start date.

    Returns:
        AmortizationResult: Progress, or the no-financing result when the
        terms are incomplete.
    """
    if financing is None:
        return no_financing_result()
    start_date = financing.start_date or purchase_date
    if not has_financing(financing) or start_date is None:
        return no_financing_result(financing.loan_amount)
    return amortize(
        financing.loan_amount,
        financing.interest_rate,
        financing.term_months,
        months_elapsed(start_date, as_of),
        monthly_payment=financing.monthly_payment,
    )


def financing_progress_percent(principal_paid, loan_amount) -> Decimal:
    """Return the share of the loan repaid, in percent.

    Args:
        principal_paid: Principal repaid so far.
        loan_amount: Original loan amount.

    Returns:
        Decimal: Percentage rounded to cents; 0 when the loan amount is 0.
    """
    loan = coerce_decimal(loan_amount)
    if loan == 0:
        return Decimal("0")
    return round_money(coerce_decimal(principal_paid) / loan * 100)


__all__ = [
    "no_financing_result",
    "calculate_monthly_payment",
    "amortize",
    "has_financing",
    "calculate_financing_progress",
    "financing_progress_percent",
]
