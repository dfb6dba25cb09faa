import asyncio
import random
import time

import pytest

from aggregator import (
    MOCK_API_KEY,
    SCAN_LIMIT,
    aggregate_customers,
    build_country_data,
    resolve_city,
    resolve_country,
    summarize_charges,
)
from errors import UPSTREAM_ERROR_MESSAGE, UpstreamError, ValidationError


def run(coro):
    return asyncio.run(coro)


def by_id(result):
    return {country.id: country for country in result.countries}


# ============================================================================
# Country Resolution
# ============================================================================

def test_resolve_country_prefers_primary_address(make_customer):
    record = make_customer("cus_1", country="fr", shipping_country="de")
    assert resolve_country(record) == "FR"


def test_resolve_country_falls_back_to_shipping(make_customer):
    record = make_customer("cus_1", shipping_country="de")
    assert resolve_country(record) == "DE"


def test_resolve_country_none_without_any_address(make_customer):
    assert resolve_country(make_customer("cus_1")) is None
    assert resolve_country({"id": "cus_2", "address": {"country": ""}}) is None


def test_resolve_city_uses_shipping_when_address_has_none():
    record = {
        "id": "cus_1",
        "address": {"country": "US", "city": None},
        "shipping": {"address": {"country": "US", "city": "Austin"}},
    }
    assert resolve_city(record) == "Austin"


def test_build_country_data_counts_match_customers(make_customer):
    records = [
        make_customer("cus_1", country="us", name="Ann"),
        make_customer("cus_2", country="US", name="Bob"),
        make_customer("cus_3", shipping_country="gb"),
        make_customer("cus_4"),
    ]
    countries, dropped = build_country_data(records)

    assert dropped == 1
    buckets = {country.id: country for country in countries}
    assert set(buckets) == {"US", "GB"}
    assert buckets["US"].value == 2
    assert {c.id for c in buckets["US"].customers} == {"cus_1", "cus_2"}
    for country in countries:
        assert country.value == len(country.customers)


# ============================================================================
# Mock Mode
# ============================================================================

def test_mock_mode_returns_fixed_countries_and_counts():
    result = run(aggregate_customers(MOCK_API_KEY, mock_delay=0, rng=random.Random(7)))

    assert result.mock is True
    assert [(c.id, c.value) for c in result.countries] == [
        ("US", 15), ("GB", 8), ("CA", 5), ("DE", 3), ("AU", 2),
    ]
    for country in result.countries:
        assert len(country.customers) == country.value
        for i, detail in enumerate(country.customers):
            assert detail.id == f"cus_{country.id}_{i}"
            assert detail.name == f"Mock Customer {i + 1} from {country.id}"
            assert detail.email == f"customer{i}@example.com"
            assert 0 <= detail.spend < 100000
            assert detail.currency == "usd"
            assert detail.city == "Mock Customer City"


def test_mock_mode_waits_at_least_one_second():
    start = time.monotonic()
    run(aggregate_customers(MOCK_API_KEY))
    assert time.monotonic() - start >= 1.0


def test_mock_mode_never_builds_a_source():
    def factory(api_key):
        raise AssertionError("mock mode must not touch the network")

    result = run(aggregate_customers(MOCK_API_KEY, source_factory=factory, mock_delay=0))
    assert len(result.countries) == 5


# ============================================================================
# Validation
# ============================================================================

@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_missing_credential_fails_before_network(api_key):
    calls = []

    def factory(key):
        calls.append(key)
        raise AssertionError("should not be called")

    with pytest.raises(ValidationError):
        run(aggregate_customers(api_key, source_factory=factory))
    assert calls == []


# ============================================================================
# Real Data Path
# ============================================================================

def test_aggregation_sums_to_resolvable_customers(list_source, make_customer):
    records = [make_customer(f"cus_{i}", country=["us", "GB", "de"][i % 3]) for i in range(250)]
    records += [make_customer("cus_nowhere"), make_customer("cus_ship", shipping_country="ca")]
    source = list_source(records)

    result = run(aggregate_customers("sk_test_123", source_factory=lambda key: source))

    assert result.total_customers == 251
    ids = [country.id for country in result.countries]
    assert len(ids) == len(set(ids))
    assert all(country_id == country_id.upper() for country_id in ids)
    assert by_id(result)["CA"].value == 1
    assert result.scanned == 252
    assert result.truncated is False


def test_pagination_uses_last_seen_id_as_cursor(list_source, make_customer):
    records = [make_customer(f"cus_{i}", country="US") for i in range(230)]
    source = list_source(records)

    run(aggregate_customers("sk_test_123", source_factory=lambda key: source))

    assert source.customer_calls == [(None, 100), ("cus_99", 100), ("cus_199", 100)]


def test_pagination_stops_at_scan_limit(endless_source):
    source = endless_source()

    result = run(aggregate_customers("sk_test_123", source_factory=lambda key: source))

    assert source.scanned <= SCAN_LIMIT
    assert result.scanned == SCAN_LIMIT
    assert result.truncated is True
    assert by_id(result)["US"].value == SCAN_LIMIT


def test_custom_scan_limit_is_never_exceeded(endless_source):
    source = endless_source()

    result = run(aggregate_customers("sk_test_123", source_factory=lambda key: source, scan_limit=250))

    assert source.scanned == 250
    assert result.scanned == 250


def test_real_path_leaves_spend_unset(list_source, make_customer):
    source = list_source([make_customer("cus_1", country="US", name="Ann", city="Boston", email="a@x.io")])

    result = run(aggregate_customers("sk_test_123", source_factory=lambda key: source))

    detail = result.countries[0].customers[0]
    assert detail.name == "Ann"
    assert detail.city == "Boston"
    assert detail.email == "a@x.io"
    assert detail.spend is None
    assert detail.currency is None
    assert source.charge_calls == []


def test_upstream_failure_is_collapsed_to_generic_message():
    class FailingSource:
        def list_customers(self, starting_after, limit):
            raise RuntimeError("Invalid API Key provided: sk_test_****1234")

    with pytest.raises(UpstreamError) as excinfo:
        run(aggregate_customers("sk_test_bad", source_factory=lambda key: FailingSource()))

    assert str(excinfo.value) == UPSTREAM_ERROR_MESSAGE
    assert "sk_test" not in str(excinfo.value)


def test_failure_on_later_page_returns_nothing(make_customer):
    class FlakySource:
        def __init__(self):
            self.calls = 0

        def list_customers(self, starting_after, limit):
            self.calls += 1
            if self.calls > 1:
                raise ConnectionError("reset by peer")
            return [make_customer("cus_1", country="US")], True

    with pytest.raises(UpstreamError):
        run(aggregate_customers("sk_test_123", source_factory=lambda key: FlakySource()))


def test_malformed_record_is_an_upstream_error(list_source):
    source = list_source([{"address": {"country": "US"}}])

    with pytest.raises(UpstreamError):
        run(aggregate_customers("sk_test_123", source_factory=lambda key: source))


# ============================================================================
# Spend Enrichment
# ============================================================================

def test_summarize_charges_nets_refunds_and_skips_failures():
    charges = [
        {"id": "ch_1", "customer": "cus_1", "amount": 1000, "amount_refunded": 0, "currency": "usd", "status": "succeeded"},
        {"id": "ch_2", "customer": "cus_1", "amount": 500, "amount_refunded": 200, "currency": "usd", "status": "succeeded"},
        {"id": "ch_3", "customer": "cus_1", "amount": 9999, "amount_refunded": 0, "currency": "usd", "status": "failed"},
        {"id": "ch_4", "customer": None, "amount": 700, "amount_refunded": 0, "currency": "usd", "status": "succeeded"},
    ]
    assert summarize_charges(charges) == {"cus_1": (1300, "usd")}


def test_summarize_charges_keeps_first_currency_only():
    charges = [
        {"id": "ch_1", "customer": "cus_1", "amount": 1000, "amount_refunded": 0, "currency": "EUR", "status": "succeeded"},
        {"id": "ch_2", "customer": "cus_1", "amount": 400, "amount_refunded": 0, "currency": "usd", "status": "succeeded"},
        {"id": "ch_3", "customer": "cus_1", "amount": 50, "amount_refunded": 0, "currency": "eur", "status": "succeeded"},
    ]
    assert summarize_charges(charges) == {"cus_1": (1050, "eur")}


def test_summarize_charges_empty():
    assert summarize_charges([]) == {}


def test_include_spend_populates_customer_spend(list_source, make_customer):
    customers = [make_customer("cus_1", country="US"), make_customer("cus_2", country="US")]
    charges = [
        {"id": "ch_1", "customer": "cus_1", "amount": 2500, "amount_refunded": 0, "currency": "usd", "status": "succeeded"},
    ]
    source = list_source(customers, charges)

    result = run(aggregate_customers("sk_test_123", source_factory=lambda key: source, include_spend=True))

    details = {c.id: c for c in result.countries[0].customers}
    assert details["cus_1"].spend == 2500
    assert details["cus_1"].currency == "usd"
    assert details["cus_2"].spend is None
    assert source.charge_calls == [(None, 100)]
