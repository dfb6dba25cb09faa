"""
Globe rendering for the customer map.

Builds a plotly orthographic globe with a decorative country layer and one
clickable bubble per country bucket. A GlobeView owns its figure and its
render target for its whole lifetime: the figure is created once on mount,
data refreshes patch the bubble trace in place, and dispose releases the
target exactly once.
"""
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import numpy as np
import plotly.graph_objects as go

from errors import RenderingInitError
from geo import COUNTRY_CENTROIDS, get_centroid, get_country_name
from models import CountryData


# ============================================================================
# Constants
# ============================================================================

MIN_RADIUS = 10.0
MAX_RADIUS = 50.0
DEFAULT_RADIUS = 10.0

POLYGON_TRACE = "countries"
BUBBLE_TRACE = "customers"
BUBBLE_TRACE_INDEX = 1

POLYGON_FILL = "#5b9bd5"
POLYGON_HOVER_FILL = "#4472c4"
BUBBLE_FILL = "#ff0000"

# Name of the host page's JS function that receives bubble clicks
CLICK_CALLBACK = "onCountryClick"

# One full rotation every 30 seconds
ROTATION_PERIOD_MS = 30000
ROTATION_STEP_MS = 50

CountryClickHandler = Callable[[str], None]


# ============================================================================
# Bubble Sizing
# ============================================================================

def bubble_radii(
    values: list[int] | np.ndarray,
    min_radius: float = MIN_RADIUS,
    max_radius: float = MAX_RADIUS,
    default_radius: float = DEFAULT_RADIUS,
) -> list[float]:
    """
    Scale customer counts linearly onto [min_radius, max_radius].

    The smallest observed count maps to min_radius and the largest to
    max_radius. If every count is equal there is no range to scale over and
    all bubbles get default_radius.

    Args:
        values: Customer count per country
        min_radius: Radius for the smallest count
        max_radius: Radius for the largest count
        default_radius: Radius used when min == max

    Returns:
        One radius per input value, in input order
    """
    x = np.asarray(values, dtype=float)
    if x.size == 0:
        return []

    low = x.min()
    high = x.max()
    if high <= low:
        return [float(default_radius)] * int(x.size)

    radii = min_radius + (x - low) / (high - low) * (max_radius - min_radius)
    return [float(r) for r in radii]


# ============================================================================
# Render Target & Callback Cell
# ============================================================================

class RenderTarget:
    """
    A page element a globe can be drawn into. At most one view may be bound
    to a target at a time.
    """

    def __init__(self, target_id: str):
        self.id = target_id
        self._owner: object | None = None

    @property
    def bound(self) -> bool:
        return self._owner is not None

    def acquire(self, owner: object) -> None:
        if self._owner is not None:
            raise RenderingInitError(f"Render target '{self.id}' is already bound")
        self._owner = owner

    def release(self, owner: object) -> None:
        if self._owner is owner:
            self._owner = None


class CallbackCell:
    """
    One-slot mutable reference, read by event handlers at event time.

    Only in-process callers of GlobeView.handle_click read it; the served
    page forwards clicks to the JS callback named by CLICK_CALLBACK.
    """

    def __init__(self, current: Optional[CountryClickHandler] = None):
        self.current = current


# ============================================================================
# Figure Construction
# ============================================================================

_CLIENT_SCRIPT = """
var gd = document.getElementById('{plot_id}');
if (gd && !gd.dataset.globeBound) {
    gd.dataset.globeBound = 'true';
    var names = gd.data.map(function (trace) { return trace.name; });
    var polygons = names.indexOf('__POLYGON_TRACE__');
    var bubbles = names.indexOf('__BUBBLE_TRACE__');
    var highlight = function (index) {
        return Array.from(gd.data[polygons].locations, function (_, i) { return i === index ? 1 : 0; });
    };
    gd.on('plotly_click', function (event) {
        var point = event.points && event.points[0];
        if (point && point.curveNumber === bubbles && typeof window.__CALLBACK__ === 'function') {
            window.__CALLBACK__(point.customdata);
        }
    });
    gd.on('plotly_hover', function (event) {
        var point = event.points && event.points[0];
        if (point && point.curveNumber === polygons) {
            Plotly.restyle(gd, {z: [highlight(point.pointNumber)]}, [polygons]);
        }
    });
    gd.on('plotly_unhover', function () {
        Plotly.restyle(gd, {z: [highlight(-1)]}, [polygons]);
    });
    var paused = false;
    gd.addEventListener('mouseenter', function () { paused = true; });
    gd.addEventListener('mouseleave', function () { paused = false; });
    var lon = 0;
    setInterval(function () {
        if (paused) { return; }
        lon = (lon + __STEP_DEGREES__) % 360;
        Plotly.relayout(gd, {'geo.projection.rotation.lon': lon});
    }, __STEP_MS__);
}
"""


def client_script() -> str:
    """JS run once the figure is drawn: event bindings and rotation."""
    step_degrees = 360.0 * ROTATION_STEP_MS / ROTATION_PERIOD_MS
    return (
        _CLIENT_SCRIPT
        .replace("__POLYGON_TRACE__", POLYGON_TRACE)
        .replace("__BUBBLE_TRACE__", BUBBLE_TRACE)
        .replace("__CALLBACK__", CLICK_CALLBACK)
        .replace("__STEP_DEGREES__", f"{step_degrees:g}")
        .replace("__STEP_MS__", str(ROTATION_STEP_MS))
    )


def build_figure() -> go.Figure:
    """Create the globe with an empty bubble layer."""
    entries = list(COUNTRY_CENTROIDS.values())

    fig = go.Figure()

    # Decorative country shapes; z is toggled client-side to highlight on hover
    fig.add_trace(go.Choropleth(
        name=POLYGON_TRACE,
        locations=[alpha3 for alpha3, _, _, _ in entries],
        locationmode="ISO-3",
        z=[0] * len(entries),
        text=[name for _, name, _, _ in entries],
        zmin=0,
        zmax=1,
        colorscale=[[0, POLYGON_FILL], [1, POLYGON_HOVER_FILL]],
        showscale=False,
        marker_line_color="#ffffff",
        marker_line_width=0.5,
        hovertemplate="%{text}<extra></extra>",
    ))

    fig.add_trace(go.Scattergeo(
        name=BUBBLE_TRACE,
        lon=[],
        lat=[],
        mode="markers+text",
        text=[],
        customdata=[],
        hovertext=[],
        marker=dict(
            size=[],
            sizemode="diameter",
            color=BUBBLE_FILL,
            opacity=0.7,
            line=dict(color="#ffffff", width=1),
        ),
        textfont=dict(color="#ffffff", size=12),
        hovertemplate="%{hovertext}: %{text}<extra></extra>",
    ))

    fig.update_geos(
        projection_type="orthographic",
        showframe=False,
        showcoastlines=False,
        showland=True,
        landcolor="#e8eef5",
        showocean=True,
        oceancolor="#f4f8fc",
        bgcolor="rgba(0,0,0,0)",
    )
    fig.update_layout(
        height=500,
        margin=dict(l=20, r=20, t=20, b=20),
        showlegend=False,
        clickmode="event",
        hovermode="closest",
    )
    return fig


# ============================================================================
# Globe View
# ============================================================================

class GlobeView:
    """
    Owns one globe figure bound to one render target.

    Lifecycle: mount once -> set_data any number of times -> dispose.
    """

    def __init__(self, on_country_click: Optional[CountryClickHandler] = None):
        self._on_click = CallbackCell(on_country_click)
        self._figure: go.Figure | None = None
        self._target: RenderTarget | None = None
        self._disposed = False

    @property
    def on_country_click(self) -> Optional[CountryClickHandler]:
        return self._on_click.current

    @on_country_click.setter
    def on_country_click(self, handler: Optional[CountryClickHandler]) -> None:
        self._on_click.current = handler

    @property
    def figure(self) -> go.Figure | None:
        return self._figure

    @property
    def is_mounted(self) -> bool:
        return self._figure is not None and not self._disposed

    def mount(self, target: RenderTarget, countries: list[CountryData] | None = None) -> bool:
        """
        Create the figure and bind it to target.

        Returns False (and leaves the view empty) if the view was already
        mounted or disposed, or the target is bound to another view.
        """
        if self._disposed:
            print(f"[visualizer] Globe was disposed; not mounting on '{target.id}'")
            return False
        if self._figure is not None:
            print(f"[visualizer] Globe already mounted on '{self._target.id}'; ignoring mount on '{target.id}'")
            return False

        try:
            target.acquire(self)
        except RenderingInitError as exc:
            print(f"[visualizer] Error creating globe, maybe already exists: {exc}")
            return False

        self._target = target
        self._figure = build_figure()

        if countries:
            self.set_data(countries)
        return True

    def set_data(self, countries: list[CountryData]) -> None:
        """
        Replace the bubble dataset in place. Radii are scaled over every
        country in the result, including ones without a known location.
        """
        if not self.is_mounted:
            return

        radii = bubble_radii([country.value for country in countries])

        lon, lat, sizes, labels, ids, names = [], [], [], [], [], []
        missing = []
        for country, radius in zip(countries, radii):
            location = get_centroid(country.id)
            if location is None:
                missing.append(country.id)
                continue
            lon.append(location[0])
            lat.append(location[1])
            sizes.append(radius * 2)  # plotly sizes markers by diameter
            labels.append(str(country.value))
            ids.append(country.id)
            names.append(get_country_name(country.id))

        if missing:
            print(f"[visualizer] No map location for {len(missing)} countries: {', '.join(missing)}")

        self._figure.update_traces(
            selector=dict(name=BUBBLE_TRACE),
            lon=lon,
            lat=lat,
            text=labels,
            customdata=ids,
            hovertext=names,
            marker_size=sizes,
        )

    def handle_click(self, point: dict) -> str | None:
        """
        Dispatch a click on a plotly point to the current click handler.

        For hosts holding the view in-process (notebooks, tests). The HTML
        page never calls this; its client script forwards bubble clicks to
        window.onCountryClick.

        Returns the clicked country code, or None if the point is not a bubble.
        """
        if point.get("curveNumber", BUBBLE_TRACE_INDEX) != BUBBLE_TRACE_INDEX:
            return None

        country_id = point.get("customdata")
        if isinstance(country_id, (list, tuple)):
            country_id = country_id[0] if country_id else None
        if not country_id:
            return None

        handler = self._on_click.current
        if handler is not None:
            handler(country_id)
        return country_id

    def to_html(self) -> str:
        """HTML fragment for the globe; empty if the view is not mounted."""
        if not self.is_mounted:
            return ""
        return self._figure.to_html(
            full_html=False,
            include_plotlyjs="cdn",
            div_id=self._target.id,
            post_script=client_script(),
            config={"displayModeBar": False, "responsive": True},
        )

    def dispose(self) -> None:
        """Release the figure and target. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        if self._target is not None:
            self._target.release(self)
        self._figure = None
        self._target = None


@contextmanager
def mounted_globe(
    target: RenderTarget,
    countries: list[CountryData] | None = None,
    on_country_click: Optional[CountryClickHandler] = None,
) -> Iterator[GlobeView]:
    """Mount a GlobeView on target for the duration of the block."""
    view = GlobeView(on_country_click)
    view.mount(target, countries)
    try:
        yield view
    finally:
        view.dispose()
