"""Tests for the Chart container: construction, top-level setters, chart kinds."""

from __future__ import annotations

import pytest

from apexfluent import CHART_TYPES, Chart

pytestmark = pytest.mark.unit


def test_end_to_end_line_chart() -> None:
    """A typical line chart produces the expected options tree."""

    chart = Chart.create("line").title("Sample").height(350).series([{"name": "S1", "data": [1, 2, 3]}])
    chart.xaxis.categories(["Jan", "Feb", "Mar"])
    chart.xaxis.title("Month")
    chart.yaxis.title("Value")
    options = chart.options

    assert options["chart"] == {"type": "line", "height": 350}
    assert options["series"] == [{"name": "S1", "data": [1, 2, 3]}]
    assert options["title"] == {"text": "Sample"}
    assert options["xaxis"] == {
        "categories": ["Jan", "Feb", "Mar"],
        "title": {"text": "Month"},
        "labels": {"style": {}},
        "axisBorder": {},
        "axisTicks": {},
        "crosshairs": {},
    }
    assert options["yaxis"] == {
        "title": {"text": "Value"},
        "labels": {"style": {}},
        "axisBorder": {},
        "axisTicks": {},
        "crosshairs": {},
    }
    assert set(options) == {
        "chart",
        "series",
        "title",
        "xaxis",
        "yaxis",
        "tooltip",
        "legend",
        "grid",
        "dataLabels",
        "markers",
        "theme",
        "plotOptions",
    }


def test_new_chart_is_seeded_with_type_and_empty_series() -> None:
    """Construction seeds chart.type and an empty series list."""

    chart = Chart("area")
    assert chart.kind == "area"
    assert chart.options["chart"] == {"type": "area"}
    assert chart.options["series"] == []


@pytest.mark.parametrize("kind", CHART_TYPES)
def test_every_chart_kind_can_be_created(kind: str) -> None:
    """All sixteen chart kinds are accepted."""

    assert Chart.create(kind).options["chart"]["type"] == kind  # type: ignore[arg-type]


def test_unknown_chart_kind_is_rejected() -> None:
    """An unsupported kind raises ValueError."""

    with pytest.raises(ValueError, match="Unsupported chart type"):
        Chart("sparkline")  # type: ignore[arg-type]


def test_options_is_the_live_tree(chart: Chart) -> None:
    """The exported tree is the builder's own tree, not a copy."""

    exported = chart.options
    chart.subtitle("later")
    assert exported is chart.options
    assert exported["subtitle"] == {"text": "later"}


def test_series_and_colors_are_replaced_wholesale(chart: Chart) -> None:
    """Calling series() or colors() twice keeps only the second value."""

    chart.series([{"name": "A", "data": [1]}, {"name": "B", "data": [2]}])
    chart.series([{"name": "C", "data": [3]}])
    chart.colors(["#111", "#222"]).colors(["#333"])
    assert chart.options["series"] == [{"name": "C", "data": [3]}]
    assert chart.options["colors"] == ["#333"]


def test_title_and_subtitle_keep_other_fields(chart: Chart) -> None:
    """title()/subtitle() only set the text key."""

    chart.set_option("title.align", "center").title("Sales").subtitle("2024")
    assert chart.options["title"] == {"align": "center", "text": "Sales"}
    assert chart.options["subtitle"] == {"text": "2024"}


def test_height_and_width_recreate_missing_chart_section(chart: Chart) -> None:
    """A removed chart section is rebuilt with the line fallback type."""

    del chart.options["chart"]
    chart.height("100%").width(600)
    assert chart.options["chart"] == {"type": "line", "height": "100%", "width": 600}


def test_states_merge_filters_per_state(chart: Chart) -> None:
    """Each state's filter merges into the stored filter."""

    chart.states({"hover": {"filter": {"type": "lighten", "value": 0.15}}, "active": {"allowMultipleDataPointsSelection": True}})
    chart.states({"hover": {"filter": {"value": 0.3}}, "normal": {"filter": {"type": "none"}}})
    chart.states({"active": {"filter": {"type": "darken"}}})
    assert chart.options["states"] == {
        "normal": {"filter": {"type": "none"}},
        "hover": {"filter": {"type": "lighten", "value": 0.3}},
        "active": {"allowMultipleDataPointsSelection": True, "filter": {"type": "darken"}},
    }


def test_animations_merge_nested_steps(chart: Chart) -> None:
    """animateGradually and dynamicAnimation merge one level deeper."""

    chart.animations({"enabled": True, "easing": "easeinout", "animateGradually": {"enabled": True, "delay": 150}})
    chart.animations({"speed": 800, "animateGradually": {"delay": 50}, "dynamicAnimation": {"speed": 350}})
    assert chart.options["chart"]["animations"] == {
        "enabled": True,
        "easing": "easeinout",
        "speed": 800,
        "animateGradually": {"enabled": True, "delay": 50},
        "dynamicAnimation": {"speed": 350},
    }
    assert chart.options["chart"]["type"] == "line"


def test_responsive_is_stored_as_given(chart: Chart) -> None:
    """Breakpoints replace earlier ones and their options are not normalized."""

    chart.responsive([{"breakpoint": 1000, "options": {"legend": {"position": "bottom"}}}])
    breakpoints = [{"breakpoint": 480, "options": {"chart": {"width": 200}}}]
    chart.responsive(breakpoints)
    assert chart.options["responsive"] == breakpoints


def test_donut_chart_forwards_its_config() -> None:
    """Chart.donut seeds the donut kind and plotOptions.pie.donut."""

    chart = Chart.donut({"size": "70%", "labels": {"show": True}})
    assert chart.kind == "donut"
    assert chart.options["chart"]["type"] == "donut"
    assert chart.options["plotOptions"]["pie"]["donut"] == {"size": "70%", "labels": {"show": True}}


def test_pie_chart_with_donut_config() -> None:
    """Pie charts reach the donut options through the plot options manager."""

    chart = Chart.create("pie")
    chart.plot_options.pie().donut({"size": "70%"})
    assert chart.options["chart"]["type"] == "pie"
    assert chart.options["plotOptions"]["pie"]["donut"]["size"] == "70%"


def test_bar_chart_horizontal_shortcut() -> None:
    """horizontal() forwards to plotOptions.bar on bar charts."""

    chart = Chart.create("bar").horizontal(True).title("Test Chart")
    chart.series([{"name": "A", "data": [1, 2, 3]}, {"name": "B", "data": [4, 5, 6]}])
    assert chart.options["plotOptions"]["bar"] == {"horizontal": True}
    assert len(chart.options["series"]) == 2


def test_horizontal_shortcut_requires_a_bar_chart(chart: Chart) -> None:
    """horizontal() on a non-bar chart raises ValueError."""

    with pytest.raises(ValueError, match="only available for bar charts"):
        chart.horizontal(True)


def test_from_options_adopts_tree_and_keeps_values() -> None:
    """Adopting a populated tree scaffolds around existing values."""

    options = {
        "chart": {"type": "heatmap", "height": 300},
        "tooltip": {"style": {"fontSize": "10px"}, "enabled": False},
        "legend": {"labels": None},
        "xaxis": {"title": {"text": "Hour"}},
    }
    chart = Chart.from_options(options)
    assert chart.options is options
    assert chart.kind == "heatmap"
    assert options["series"] == []
    assert options["tooltip"] == {"style": {"fontSize": "10px"}, "enabled": False, "x": {}, "y": {}}
    assert options["legend"] == {"labels": {}, "markers": {}, "itemMargin": {}}
    assert options["xaxis"]["title"] == {"text": "Hour"}


def test_from_options_defaults_to_line_chart() -> None:
    """A tree without chart.type becomes a line chart."""

    chart = Chart.from_options({"title": {"text": "Untyped"}})
    assert chart.kind == "line"
    assert chart.options["chart"] == {"type": "line"}
    assert chart.options["title"] == {"text": "Untyped"}


def test_from_options_rejects_unknown_chart_type() -> None:
    """An adopted tree with an unsupported chart.type raises ValueError."""

    with pytest.raises(ValueError):
        Chart.from_options({"chart": {"type": "gauge"}})


def test_dark_mode_chart_configuration() -> None:
    """A dark-mode configuration touches every leaf component consistently."""

    dark_font = "#e0e0e0"
    chart = Chart.create("area").subtitle("Sample Subtitle").colors(["#00abfb", "#00e396", "#feb019"])
    chart.tooltip.theme("dark")
    chart.grid.border_color("#555555")
    chart.legend.labels({"colors": [dark_font]})
    chart.theme.mode("dark").monochrome({"enabled": False, "color": "#255aee", "shadeTo": "dark", "shadeIntensity": 0.65})
    chart.xaxis.labels({"style": {"colors": dark_font}})
    chart.yaxis.labels({"style": {"colors": dark_font}})

    options = chart.options
    assert options["tooltip"]["theme"] == "dark"
    assert options["grid"]["borderColor"] == "#555555"
    assert options["legend"]["labels"] == {"colors": [dark_font]}
    assert options["theme"]["mode"] == "dark"
    assert options["theme"]["monochrome"]["shadeIntensity"] == 0.65
    assert options["xaxis"]["labels"]["style"] == {"colors": dark_font}
    assert options["yaxis"]["labels"]["style"] == {"colors": dark_font}
