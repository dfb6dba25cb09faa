"""
Country selection and customer ordering for the drill-down table.

Everything here is derived state: functions return new lists and never
mutate the aggregation result they are given.
"""
from dataclasses import dataclass, replace
from typing import Optional

from models import AggregationResult, CountryData, CustomerDetail


# ============================================================================
# Lookup & Sort
# ============================================================================

def find_country(countries: list[CountryData], country_id: str | None) -> CountryData | None:
    """Return the bucket for country_id, or None if absent or unselected."""
    if not country_id:
        return None
    for country in countries:
        if country.id == country_id:
            return country
    return None


def sort_customers(customers: list[CustomerDetail]) -> list[CustomerDetail]:
    """
    Order customers by spend descending, then name ascending.

    Missing spend counts as 0 and a missing name as "". Both passes are
    stable, so ties keep their incoming order.
    """
    by_name = sorted(customers, key=lambda c: c.name or "")
    return sorted(by_name, key=lambda c: c.spend or 0, reverse=True)


def customers_for_country(countries: list[CountryData], country_id: str | None) -> list[CustomerDetail]:
    """Sorted customers of the selected country; empty if nothing matches."""
    country = find_country(countries, country_id)
    if country is None:
        return []
    return sort_customers(country.customers)


# ============================================================================
# Selection State
# ============================================================================

@dataclass(frozen=True)
class SelectionState:
    """Current aggregation result plus the selected country, if any."""
    result: Optional[AggregationResult] = None
    selected: Optional[str] = None

    def select(self, country_id: str | None) -> "SelectionState":
        return replace(self, selected=country_id)

    def start_request(self) -> "SelectionState":
        """A new aggregation is starting; drop the selection."""
        return replace(self, selected=None)

    def with_result(self, result: AggregationResult) -> "SelectionState":
        return SelectionState(result=result, selected=None)

    @property
    def country(self) -> CountryData | None:
        if self.result is None:
            return None
        return find_country(self.result.countries, self.selected)

    @property
    def customers(self) -> list[CustomerDetail]:
        if self.result is None:
            return []
        return customers_for_country(self.result.countries, self.selected)


# ============================================================================
# Formatting
# ============================================================================

def format_spend(amount: int | None, currency: str | None = None) -> str:
    """
    Format a minor-unit amount for display, e.g. 123456, "usd" -> "1,234.56 USD".
    """
    if amount is None:
        return "-"
    return f"{amount / 100:,.2f} {(currency or 'usd').upper()}"
