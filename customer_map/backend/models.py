"""
Pydantic models for API request/response schemas.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# Customers & Countries
# ============================================================================

class CustomerDetail(BaseModel):
    """A single customer as shown in the per-country table."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    spend: Optional[int] = Field(default=None, description="Total spend in minor currency units")
    currency: Optional[str] = None
    city: Optional[str] = None


class CountryData(BaseModel):
    """Customers bucketed under one ISO 3166-1 alpha-2 country code."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="ISO 2-letter country code, uppercase")
    value: int = Field(ge=0, description="Count of customers")
    customers: list[CustomerDetail] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_count(self) -> "CountryData":
        if self.value != len(self.customers):
            raise ValueError(
                f"value ({self.value}) must equal number of customers ({len(self.customers)})"
            )
        return self


class AggregationResult(BaseModel):
    """Per-country summary of a customer base, produced fresh per submission."""
    countries: list[CountryData] = Field(default_factory=list)
    scanned: int = Field(default=0, description="Upstream customer records examined")
    truncated: bool = Field(default=False, description="Scan limit reached with more pages remaining")
    mock: bool = False

    @property
    def total_customers(self) -> int:
        return sum(country.value for country in self.countries)


# ============================================================================
# API Requests
# ============================================================================

class AggregateRequest(BaseModel):
    """Request body for POST /aggregate endpoint."""
    api_key: str = Field(default="", description="Stripe secret key, or 'test' for mock data")


class CustomersRequest(BaseModel):
    """Request body for POST /customers endpoint."""
    countries: list[CountryData] = Field(default_factory=list)
    country_id: Optional[str] = None


# ============================================================================
# API Responses
# ============================================================================

class CustomersResponse(BaseModel):
    """Sorted customer list for the selected country."""
    country_id: str
    count: int
    customers: list[CustomerDetail]


class ConfigResponse(BaseModel):
    """Response model for GET /config endpoint."""
    mock_api_key: str
    page_size: int
    scan_limit: int
    include_spend: bool
    min_radius: float
    max_radius: float


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""
    status: str = "ok"
