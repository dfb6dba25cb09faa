import pytest

from models import CountryData, CustomerDetail
from visualizer import (
    BUBBLE_TRACE,
    CLICK_CALLBACK,
    DEFAULT_RADIUS,
    MAX_RADIUS,
    MIN_RADIUS,
    GlobeView,
    RenderTarget,
    bubble_radii,
    mounted_globe,
)
from errors import RenderingInitError


def country(country_id, count):
    customers = [CustomerDetail(id=f"cus_{country_id}_{i}") for i in range(count)]
    return CountryData(id=country_id, value=count, customers=customers)


def bubbles(view):
    return next(trace for trace in view.figure.data if trace.name == BUBBLE_TRACE)


# ============================================================================
# Bubble Sizing
# ============================================================================

def test_bubble_radii_span_min_to_max():
    assert bubble_radii([2, 15]) == [MIN_RADIUS, MAX_RADIUS]


def test_bubble_radii_are_linear():
    radii = bubble_radii([0, 5, 10])
    assert radii[1] == pytest.approx((MIN_RADIUS + MAX_RADIUS) / 2)


def test_bubble_radii_default_when_no_range():
    assert bubble_radii([7]) == [DEFAULT_RADIUS]
    assert bubble_radii([3, 3, 3]) == [DEFAULT_RADIUS] * 3


def test_bubble_radii_empty():
    assert bubble_radii([]) == []


# ============================================================================
# Render Target
# ============================================================================

def test_render_target_rejects_second_owner():
    target = RenderTarget("globe")
    first, second = object(), object()
    target.acquire(first)

    with pytest.raises(RenderingInitError):
        target.acquire(second)

    target.release(second)  # not the owner; no effect
    assert target.bound
    target.release(first)
    assert not target.bound


# ============================================================================
# Globe View Lifecycle
# ============================================================================

def test_mount_creates_figure_with_bubbles():
    view = GlobeView()
    assert view.mount(RenderTarget("globe"), [country("US", 15), country("AU", 2)])

    trace = bubbles(view)
    assert list(trace.customdata) == ["US", "AU"]
    assert list(trace.text) == ["15", "2"]
    assert list(trace.marker.size) == [MAX_RADIUS * 2, MIN_RADIUS * 2]
    assert view.figure.layout.geo.projection.type == "orthographic"


def test_set_data_replaces_dataset_in_place():
    view = GlobeView()
    view.mount(RenderTarget("globe"), [country("US", 15), country("AU", 2)])
    figure = view.figure

    view.set_data([country("DE", 3)])
    view.set_data([country("GB", 8), country("CA", 5)])

    assert view.figure is figure
    assert len(view.figure.data) == 2
    assert list(bubbles(view).customdata) == ["GB", "CA"]


def test_set_data_single_country_uses_default_radius():
    view = GlobeView()
    view.mount(RenderTarget("globe"), [country("DE", 3)])
    assert list(bubbles(view).marker.size) == [DEFAULT_RADIUS * 2]


def test_set_data_skips_unknown_locations_but_scales_over_all():
    view = GlobeView()
    view.mount(RenderTarget("globe"), [country("US", 10), country("ZZ", 20), country("GB", 0)])

    trace = bubbles(view)
    assert list(trace.customdata) == ["US", "GB"]
    assert list(trace.marker.size) == [pytest.approx(60.0), pytest.approx(20.0)]


def test_small_territories_get_bubbles():
    codes = ["US", "JE", "GG", "KY", "IM", "GI", "RE"]
    view = GlobeView()
    view.mount(RenderTarget("globe"), [country(code, i + 1) for i, code in enumerate(codes)])

    assert list(bubbles(view).customdata) == codes


def test_set_data_before_mount_is_ignored():
    view = GlobeView()
    view.set_data([country("US", 1)])
    assert view.figure is None
    assert view.to_html() == ""


def test_second_mount_is_a_noop():
    view = GlobeView()
    target = RenderTarget("globe")
    assert view.mount(target, [country("US", 1)])
    figure = view.figure

    assert view.mount(RenderTarget("other")) is False
    assert view.figure is figure


def test_mount_on_bound_target_degrades_to_empty_view():
    target = RenderTarget("globe")
    first = GlobeView()
    first.mount(target)

    second = GlobeView()
    assert second.mount(target) is False
    assert second.to_html() == ""
    assert first.is_mounted


def test_dispose_is_idempotent_and_releases_target():
    target = RenderTarget("globe")
    view = GlobeView()
    view.mount(target)

    view.dispose()
    view.dispose()

    assert not view.is_mounted
    assert not target.bound
    assert view.mount(target) is False
    assert GlobeView().mount(target)


def test_mounted_globe_disposes_on_exit():
    target = RenderTarget("globe")
    with pytest.raises(RuntimeError):
        with mounted_globe(target, [country("US", 1)]) as view:
            assert target.bound
            raise RuntimeError("render failed")
    assert not target.bound
    assert not view.is_mounted


# ============================================================================
# Click Handling
# ============================================================================

def test_click_reads_current_callback():
    seen = []
    view = GlobeView(lambda country_id: seen.append(("old", country_id)))
    view.mount(RenderTarget("globe"), [country("US", 1)])

    view.on_country_click = lambda country_id: seen.append(("new", country_id))
    view.set_data([country("US", 1), country("GB", 2)])

    assert view.handle_click({"curveNumber": 1, "customdata": "GB"}) == "GB"
    assert seen == [("new", "GB")]


def test_click_on_polygon_layer_is_ignored():
    seen = []
    view = GlobeView(seen.append)
    view.mount(RenderTarget("globe"))

    assert view.handle_click({"curveNumber": 0, "customdata": None}) is None
    assert view.handle_click({"curveNumber": 1, "customdata": ""}) is None
    assert seen == []


def test_click_without_callback_still_resolves_country():
    view = GlobeView()
    assert view.handle_click({"customdata": ["CA"]}) == "CA"


def test_to_html_binds_client_handlers_to_target():
    with mounted_globe(RenderTarget("customer-globe"), [country("US", 3)]) as view:
        html = view.to_html()

    assert 'id="customer-globe"' in html
    assert "plotly_click" in html
    assert f"window.{CLICK_CALLBACK}" in html
    assert "globeBound" in html
