"""Domain models for owned assets and their financing."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class AssetKind(str, Enum):
    """Asset variants, resolved once when assets are loaded."""

    VEHICLE = "vehicle"
    REAL_ESTATE = "real_estate"
    GENERIC = "generic"


class PaymentMethod(str, Enum):
    """How an asset purchase was paid for."""

    CASH = "cash"
    LEASE = "lease"
    FINANCE = "finance"


@dataclass(frozen=True)
class Financing:
    """Loan terms attached to an asset purchase.

    Every field is optional because financing data is entered by hand and
    frequently incomplete; calculators treat gaps as "no financing".

    Attributes:
        loan_amount: Principal borrowed.
        interest_rate: Annual interest rate in percent.
        term_months: Loan duration in months.
        start_date: Date of the first payment period.
        monthly_payment: Fixed payment, derived from the annuity formula
            when missing.
        payment_method: Cash, lease or finance.
    """

    loan_amount: Decimal | None = None
    interest_rate: Decimal | None = None
    term_months: int | None = None
    start_date: date | None = None
    monthly_payment: Decimal | None = None
    payment_method: PaymentMethod = PaymentMethod.FINANCE


@dataclass(frozen=True)
class RentalTerms:
    """Rental income and carrying costs of a property.

    Attributes:
        monthly_rent: Rental income per month.
        property_tax_annual: Yearly property tax.
        insurance_annual: Yearly insurance premium.
        maintenance_annual: Yearly maintenance budget.
    """

    monthly_rent: Decimal | None = None
    property_tax_annual: Decimal | None = None
    insurance_annual: Decimal | None = None
    maintenance_annual: Decimal | None = None


@dataclass(frozen=True)
class Asset:
    """Owned asset whose value is derived from purchase data.

    Attributes:
        id: Asset identifier.
        user_id: Owning user.
        kind: Asset variant.
        name: Display label (e.g. "2019 Honda Civic" or an address).
        purchase_date: Date the asset was acquired.
        purchase_price: Price paid at acquisition.
        annual_growth_rate: Signed annual rate in percent; None selects the
            default rate for the asset kind.
        financing: Optional loan terms.
        rental: Optional rental income and carrying costs.
    """

    id: str
    user_id: str
    kind: AssetKind
    name: str
    purchase_date: date | None = None
    purchase_price: Decimal | None = None
    annual_growth_rate: Decimal | None = None
    financing: Financing | None = None
    rental: RentalTerms | None = None


@dataclass(frozen=True)
class ExcludedAsset:
    """Asset left out of valuation and the reason why."""

    asset_id: str
    name: str
    reason: str


__all__ = [
    "AssetKind",
    "PaymentMethod",
    "Financing",
    "RentalTerms",
    "Asset",
    "ExcludedAsset",
]
