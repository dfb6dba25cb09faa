"""
Customer aggregation for the customer map.
Pages through Stripe customers, resolves each customer's country, and
buckets them into per-country summaries.
"""
import asyncio
import random
from typing import Callable, Optional

import pandas as pd

from errors import UpstreamError, ValidationError
from models import AggregationResult, CountryData, CustomerDetail
from stripe_source import CustomerSource, StripeCustomerSource


# ============================================================================
# Constants
# ============================================================================

# Sentinel credential that switches to mock mode (no network access)
MOCK_API_KEY = "test"

# Mock mode latency floor, so the UI loading state is visible
MOCK_DELAY_SECONDS = 1.0

# Mock countries and their customer counts
MOCK_COUNTRIES = [
    ("US", 15),
    ("GB", 8),
    ("CA", 5),
    ("DE", 3),
    ("AU", 2),
]

# Upper bound (exclusive) of mock spend, in cents
MOCK_MAX_SPEND = 100_000

# Stripe list page size and hard cap on total records scanned
PAGE_SIZE = 100
SCAN_LIMIT = 1000


# ============================================================================
# Country Resolution
# ============================================================================

def _lookup(record: dict, *path: str):
    """Follow a nested key path, returning None at the first missing step."""
    value = record
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def resolve_country(record: dict) -> str | None:
    """
    Resolve a customer's country from its primary address, falling back to
    the shipping address. Returns the uppercase code, or None if neither
    address has a country.
    """
    country = _lookup(record, "address", "country") or _lookup(record, "shipping", "address", "country")
    if not country:
        return None
    country = str(country).strip().upper()
    return country or None


def resolve_city(record: dict) -> str | None:
    """Resolve a customer's city with the same address precedence as the country."""
    return _lookup(record, "address", "city") or _lookup(record, "shipping", "address", "city") or None


# ============================================================================
# Mock Data
# ============================================================================

def build_mock_data(rng: random.Random | None = None) -> list[CountryData]:
    """
    Synthesize the demo dataset: fixed countries and counts, random spend.
    """
    rng = rng or random.Random()
    countries = []
    for country_id, count in MOCK_COUNTRIES:
        customers = [
            CustomerDetail(
                id=f"cus_{country_id}_{i}",
                name=f"Mock Customer {i + 1} from {country_id}",
                email=f"customer{i}@example.com",
                spend=rng.randrange(MOCK_MAX_SPEND),
                currency="usd",
                city="Mock Customer City",
            )
            for i in range(count)
        ]
        countries.append(CountryData(id=country_id, value=count, customers=customers))
    return countries


# ============================================================================
# Grouping
# ============================================================================

def group_by_country(rows: list[tuple[str, CustomerDetail]]) -> list[CountryData]:
    """
    Bucket (country, customer) pairs by country code.

    Country order in the result is not significant.
    """
    if not rows:
        return []

    frame = pd.DataFrame({"country": [country for country, _ in rows]})

    countries = []
    for country_id, positions in frame.groupby("country", sort=False).indices.items():
        customers = [rows[i][1] for i in positions]
        countries.append(CountryData(id=str(country_id), value=len(customers), customers=customers))
    return countries


def summarize_charges(charges: list[dict]) -> dict[str, tuple[int, str]]:
    """
    Sum net succeeded charge amounts per customer.

    Each customer is totalled in the currency of their first succeeded charge;
    charges in any other currency are skipped (no conversion).

    Returns:
        Dict mapping customer_id -> (spend in minor units, currency)
    """
    rows = []
    for charge in charges:
        customer_id = charge.get("customer")
        if not customer_id or charge.get("status") != "succeeded":
            continue
        rows.append({
            "customer": str(customer_id),
            "currency": str(charge.get("currency") or "").lower(),
            "net": int(charge.get("amount") or 0) - int(charge.get("amount_refunded") or 0),
        })

    if not rows:
        return {}

    frame = pd.DataFrame(rows)
    first_currency = frame.groupby("customer", sort=False)["currency"].transform("first")
    matching = frame[frame["currency"] == first_currency]

    skipped = len(frame) - len(matching)
    if skipped > 0:
        print(f"[aggregator] Skipped {skipped} charges in a secondary currency")

    totals = matching.groupby("customer", sort=False).agg(
        spend=("net", "sum"),
        currency=("currency", "first"),
    )
    return {
        str(customer_id): (int(row["spend"]), str(row["currency"]))
        for customer_id, row in totals.iterrows()
    }


def build_country_data(
    records: list[dict],
    spend_by_customer: dict[str, tuple[int, str]] | None = None,
) -> tuple[list[CountryData], int]:
    """
    Turn raw Stripe customer records into per-country buckets.

    Args:
        records: Customer records as plain dicts
        spend_by_customer: Optional customer_id -> (spend, currency)

    Returns:
        (country buckets, number of customers dropped for lacking a country)
    """
    spend_by_customer = spend_by_customer or {}
    rows: list[tuple[str, CustomerDetail]] = []
    dropped = 0

    for record in records:
        country = resolve_country(record)
        if country is None:
            dropped += 1
            continue

        spend, currency = spend_by_customer.get(record["id"], (None, None))
        rows.append((country, CustomerDetail(
            id=record["id"],
            name=record.get("name"),
            email=record.get("email"),
            city=resolve_city(record),
            spend=spend,
            currency=currency,
        )))

    return group_by_country(rows), dropped


# ============================================================================
# Pagination
# ============================================================================

async def paginate(
    fetch_page: Callable[[Optional[str], int], tuple[list[dict], bool]],
    scan_limit: int = SCAN_LIMIT,
    page_size: int = PAGE_SIZE,
) -> tuple[list[dict], bool]:
    """
    Walk a cursor-paginated list until it is exhausted or scan_limit records
    have been read.

    Returns:
        (records, truncated) where truncated means the cap stopped the walk
        while the upstream still reported more pages.
    """
    records: list[dict] = []
    last_id: str | None = None
    has_more = True

    while has_more and len(records) < scan_limit:
        limit = min(page_size, scan_limit - len(records))
        page, has_more = await asyncio.to_thread(fetch_page, last_id, limit)
        page = page[:limit]
        records.extend(page)

        if has_more and page:
            last_id = page[-1]["id"]
        else:
            has_more = False

    return records, has_more


# ============================================================================
# Aggregation
# ============================================================================

async def aggregate_customers(
    api_key: str | None,
    *,
    source_factory: Callable[[str], CustomerSource] = StripeCustomerSource,
    scan_limit: int = SCAN_LIMIT,
    mock_delay: float = MOCK_DELAY_SECONDS,
    include_spend: bool = False,
    rng: random.Random | None = None,
) -> AggregationResult:
    """
    Aggregate a Stripe account's customers by country.

    Args:
        api_key: Stripe secret key, or MOCK_API_KEY for demo data
        source_factory: Builds the CustomerSource for a key
        scan_limit: Hard cap on customer (and charge) records read
        mock_delay: Seconds to wait before returning mock data
        include_spend: Also sum succeeded charges into customer spend
        rng: Random source for mock spend

    Raises:
        ValidationError: api_key missing or blank
        UpstreamError: anything failed while talking to Stripe
    """
    if not api_key or not api_key.strip():
        raise ValidationError()

    if api_key == MOCK_API_KEY:
        await asyncio.sleep(mock_delay)
        countries = build_mock_data(rng)
        scanned = sum(country.value for country in countries)
        print(f"[aggregator] Mock mode: {len(countries)} countries, {scanned} customers")
        return AggregationResult(countries=countries, scanned=scanned, mock=True)

    try:
        source = source_factory(api_key)
        records, truncated = await paginate(source.list_customers, scan_limit=scan_limit)
        if truncated:
            print(f"[aggregator] Scan limit of {scan_limit} customers reached; remaining pages skipped")

        spend_by_customer = None
        if include_spend:
            charges, charges_truncated = await paginate(source.list_charges, scan_limit=scan_limit)
            if charges_truncated:
                print(f"[aggregator] Scan limit of {scan_limit} charges reached; spend totals are partial")
            spend_by_customer = summarize_charges(charges)

        countries, dropped = build_country_data(records, spend_by_customer)
    except Exception as exc:
        print(f"[aggregator] Stripe API error: {exc!r}")
        raise UpstreamError() from exc

    print(
        f"[aggregator] Scanned {len(records)} customers: {len(countries)} countries, "
        f"{dropped} without a country"
    )
    return AggregationResult(countries=countries, scanned=len(records), truncated=truncated)
