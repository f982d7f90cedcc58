"""Monthly payment and payoff calculations for a fixed-rate mortgage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentResult:
    """Payment breakdown for one loan scenario."""

    monthly_payment: float  # Principal, interest, extra principal, and escrow if included
    monthly_principal_interest: float  # Includes any extra principal
    monthly_taxes_insurance: float
    total_interest: float
    total_payment: float
    months_to_payoff: int


@dataclass(frozen=True)
class PaymentComparison:
    """Standard schedule vs. schedule with extra principal."""

    standard: PaymentResult
    with_extra: PaymentResult

    @property
    def interest_saved(self) -> float:
        return self.standard.total_interest - self.with_extra.total_interest

    @property
    def months_saved(self) -> int:
        return self.standard.months_to_payoff - self.with_extra.months_to_payoff


def scheduled_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Level monthly principal and interest payment (standard amortization formula)."""
    months = term_years * 12
    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return principal / months

    growth = (1 + monthly_rate) ** months
    return principal * monthly_rate * growth / (growth - 1)


def calculate_payment(
    principal: float,
    annual_rate: float,
    term_years: int,
    extra_principal: float = 0.0,
    property_tax: float = 0.0,
    home_insurance: float = 0.0,
    pmi: float = 0.0,
    include_extras: bool = True,
) -> PaymentResult:
    """
    Payment breakdown for a fixed-rate loan.

    Args:
        principal: Loan amount
        annual_rate: Interest rate in percent (e.g. 6.5)
        term_years: Loan term, typically 15 or 30
        extra_principal: Additional principal paid every month
        property_tax: Annual property tax
        home_insurance: Annual homeowners insurance
        pmi: Monthly private mortgage insurance
        include_extras: Add taxes, insurance, and PMI to the monthly payment
    """
    months = term_years * 12
    monthly_rate = annual_rate / 100 / 12
    base_payment = scheduled_payment(principal, annual_rate, term_years)
    escrow = property_tax / 12 + home_insurance / 12 + pmi

    if extra_principal == 0:
        total_interest = base_payment * months - principal
        months_to_payoff = months
    else:
        balance = principal
        total_interest = 0.0
        months_to_payoff = 0
        while balance > 0.01 and months_to_payoff < months:
            months_to_payoff += 1
            interest = balance * monthly_rate
            total_interest += interest
            # Final payment never exceeds what is owed
            balance -= min(base_payment - interest + extra_principal, balance)

    extras_total = escrow * months_to_payoff if include_extras else 0.0

    return PaymentResult(
        monthly_payment=base_payment + extra_principal + (escrow if include_extras else 0.0),
        monthly_principal_interest=base_payment + extra_principal,
        monthly_taxes_insurance=escrow,
        total_interest=total_interest,
        total_payment=total_interest + principal + extras_total,
        months_to_payoff=months_to_payoff,
    )


def compare_extra_payment(
    principal: float, annual_rate: float, term_years: int, extra_principal: float, **kwargs
) -> PaymentComparison:
    """Effect of paying extra principal each month."""
    return PaymentComparison(
        standard=calculate_payment(principal, annual_rate, term_years, **kwargs),
        with_extra=calculate_payment(
            principal, annual_rate, term_years, extra_principal=extra_principal, **kwargs
        ),
    )
