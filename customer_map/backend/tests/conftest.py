import pytest


class ListSource:
    """In-memory CustomerSource over fixed customer and charge lists."""

    def __init__(self, customers=None, charges=None):
        self.customers = list(customers or [])
        self.charges = list(charges or [])
        self.customer_calls = []
        self.charge_calls = []

    @staticmethod
    def _page(items, starting_after, limit):
        start = 0
        if starting_after is not None:
            start = next(i for i, item in enumerate(items) if item["id"] == starting_after) + 1
        page = items[start:start + limit]
        return page, start + limit < len(items)

    def list_customers(self, starting_after, limit):
        self.customer_calls.append((starting_after, limit))
        return self._page(self.customers, starting_after, limit)

    def list_charges(self, starting_after, limit):
        self.charge_calls.append((starting_after, limit))
        return self._page(self.charges, starting_after, limit)


class EndlessSource:
    """Always returns a full page and always reports more pages."""

    def __init__(self):
        self.scanned = 0

    def list_customers(self, starting_after, limit):
        page = [
            {"id": f"cus_{self.scanned + i}", "address": {"country": "us"}}
            for i in range(limit)
        ]
        self.scanned += limit
        return page, True

    def list_charges(self, starting_after, limit):
        return [], False


def customer(customer_id, country=None, shipping_country=None, name=None, city=None, email=None):
    record = {"id": customer_id, "name": name, "email": email, "address": None, "shipping": None}
    if country is not None or city is not None:
        record["address"] = {"country": country, "city": city}
    if shipping_country is not None:
        record["shipping"] = {"address": {"country": shipping_country, "city": city}}
    return record


@pytest.fixture
def make_customer():
    return customer


@pytest.fixture
def list_source():
    return ListSource


@pytest.fixture
def endless_source():
    return EndlessSource
