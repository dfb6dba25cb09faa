"""
Stripe list endpoints exposed as plain-dict pages.

The aggregator only depends on the CustomerSource protocol, so tests can
substitute an in-memory source for the network.
"""
from typing import Any, Optional, Protocol

import stripe


class CustomerSource(Protocol):
    """Paginated, cursor-based access to customers and charges."""

    def list_customers(self, starting_after: Optional[str], limit: int) -> tuple[list[dict], bool]:
        ...

    def list_charges(self, starting_after: Optional[str], limit: int) -> tuple[list[dict], bool]:
        ...


def to_plain(value: Any) -> Any:
    """Recursively convert Stripe SDK objects into dicts and lists."""
    if isinstance(value, stripe.StripeObject):
        value = value.to_dict()
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    return value


class StripeCustomerSource:
    """CustomerSource backed by the official Stripe SDK."""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def _page(self, resource, starting_after: Optional[str], limit: int) -> tuple[list[dict], bool]:
        params: dict[str, Any] = {"limit": limit}
        if starting_after:
            params["starting_after"] = starting_after

        page = resource.list(api_key=self._api_key, **params)
        return [to_plain(item) for item in page.data], bool(page.has_more)

    def list_customers(self, starting_after: Optional[str], limit: int) -> tuple[list[dict], bool]:
        return self._page(stripe.Customer, starting_after, limit)

    def list_charges(self, starting_after: Optional[str], limit: int) -> tuple[list[dict], bool]:
        return self._page(stripe.Charge, starting_after, limit)
