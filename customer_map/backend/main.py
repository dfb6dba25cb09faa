"""
FastAPI application for the Stripe Customer Map.
Aggregates a Stripe account's customers by country and renders them on a globe.
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from aggregator import MOCK_API_KEY, PAGE_SIZE, aggregate_customers
from config import Settings, load_settings
from errors import UpstreamError, ValidationError
from geo import get_country_name
from models import (
    AggregateRequest,
    AggregationResult,
    ConfigResponse,
    CustomersRequest,
    CustomersResponse,
    HealthResponse,
)
from selection import SelectionState, format_spend, sort_customers
from visualizer import MAX_RADIUS, MIN_RADIUS, CLICK_CALLBACK, RenderTarget, mounted_globe


TEMPLATES_DIR = Path(__file__).parent / "templates"
GLOBE_TARGET_ID = "customer-globe"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_spend"] = format_spend

# Read once; shared by the CORS middleware and every request
settings = load_settings()


# ============================================================================
# Application Lifecycle
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Publish settings on startup."""
    app.state.settings = settings

    print(f"[main] Scan limit: {settings.scan_limit} records")
    print(f"[main] Mock delay: {settings.mock_delay}s")
    print(f"[main] Spend enrichment: {'on' if settings.include_spend else 'off'}")

    yield


# ============================================================================
# FastAPI Application
# ============================================================================

app = FastAPI(
    title="Stripe Customer Map API",
    description="Visualize Stripe customers across the globe, grouped by country",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or settings


async def run_aggregation(request: Request, api_key: str | None) -> AggregationResult:
    settings = get_settings(request)
    return await aggregate_customers(
        api_key,
        scan_limit=settings.scan_limit,
        mock_delay=settings.mock_delay,
        include_spend=settings.include_spend,
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Simple health check endpoint."""
    return HealthResponse(status="ok")


# ============================================================================
# Configuration
# ============================================================================

@app.get("/config", response_model=ConfigResponse)
async def get_config(request: Request):
    """Limits and display constants the frontend needs."""
    settings = get_settings(request)
    return ConfigResponse(
        mock_api_key=MOCK_API_KEY,
        page_size=PAGE_SIZE,
        scan_limit=settings.scan_limit,
        include_spend=settings.include_spend,
        min_radius=MIN_RADIUS,
        max_radius=MAX_RADIUS,
    )


# ============================================================================
# Aggregation Endpoint
# ============================================================================

@app.post("/aggregate", response_model=AggregationResult)
async def aggregate(request: Request, body: AggregateRequest):
    """
    Fetch all customers for an API key (capped) and group them by country.
    Use 'test' as the key for mock data.
    """
    try:
        return await run_aggregation(request, body.api_key)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UpstreamError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


# ============================================================================
# Drill-down Endpoint
# ============================================================================

@app.post("/customers", response_model=CustomersResponse)
async def country_customers(body: CustomersRequest):
    """
    Return the customers of the selected country, sorted by spend then name.
    The caller sends back the aggregation result it holds; nothing is stored here.
    """
    state = SelectionState(result=AggregationResult(countries=body.countries)).select(body.country_id)
    if state.country is None:
        raise HTTPException(
            status_code=404,
            detail=f"Country '{body.country_id}' is not in the supplied result"
        )
    return CustomersResponse(
        country_id=state.country.id,
        count=state.country.value,
        customers=state.customers,
    )


# ============================================================================
# Page
# ============================================================================

def render_page(
    request: Request,
    result: AggregationResult | None = None,
    error: str | None = None,
) -> HTMLResponse:
    globe_html = ""
    tables = []

    if result is not None:
        with mounted_globe(RenderTarget(GLOBE_TARGET_ID), result.countries) as view:
            globe_html = view.to_html()

        tables = [
            {
                "id": country.id,
                "name": get_country_name(country.id),
                "count": country.value,
                "customers": sort_customers(country.customers),
            }
            for country in result.countries
        ]

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "result": result,
            "error": error,
            "globe_html": globe_html,
            "tables": tables,
            "mock_api_key": MOCK_API_KEY,
            "click_callback": CLICK_CALLBACK,
        },
    )


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Idle page: just the form."""
    return render_page(request)


@app.post("/", response_class=HTMLResponse)
async def submit(request: Request, apiKey: str = Form(default="")):
    """Form submission: aggregate and show the globe, or an error banner."""
    try:
        result = await run_aggregation(request, apiKey)
    except (ValidationError, UpstreamError) as exc:
        return render_page(request, error=str(exc))
    return render_page(request, result=result)


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
