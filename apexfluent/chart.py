"""The chart options container and its fluent top-level setters.

A `Chart` owns exactly one options tree. It is created with a chart type
(`"line"`, `"bar"`, ...) and wires up one builder per component, all bound to
the same tree:

    chart = Chart.create("line").title("Sales").height(350)
    chart.xaxis.categories(["Jan", "Feb", "Mar"]).title("Month")
    chart.tooltip.theme("dark")
    payload = chart.options

Chart types are a constructor argument rather than subclasses. The few
type-specific conveniences (`Chart.donut`, `Chart.horizontal`) check the
chart type themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, cast

from .components import Axis, DataLabels, Grid, Legend, Markers, Theme, Tooltip
from .plot_options import PlotOptionsManager
from .schema import (
    CHART_TYPES,
    Animations,
    ChartOptions,
    ChartType,
    DonutOptions,
    ResponsiveBreakpoint,
    SeriesConfig,
    States,
)
from .tree import OptionPath, ensure_mapping, merge_mapping, set_path

logger = logging.getLogger(__name__)

DEFAULT_CHART_TYPE: ChartType = "line"
STATE_DEEP_MERGE: tuple[str, ...] = tuple(
    path for state in ("normal", "hover", "active") for path in (state, f"{state}.filter")
)
ANIMATION_DEEP_MERGE: tuple[str, ...] = ("animateGradually", "dynamicAnimation")


class Chart:
    """Fluent builder for one ApexCharts options tree.

    Args:
        kind: Chart type stored at `chart.type`.
        options: Optional existing tree to adopt instead of a fresh one. Use
            `Chart.from_options` rather than passing this directly.

    Raises:
        ValueError: If `kind` is not a supported chart type.
    """

    def __init__(self, kind: ChartType, options: ChartOptions | None = None) -> None:
        if kind not in CHART_TYPES:
            raise ValueError(f"Unsupported chart type: {kind!r}. Expected one of {', '.join(CHART_TYPES)}.")
        self._kind: ChartType = kind

        if options is None:
            self._options: ChartOptions = {"chart": {"type": kind}, "series": []}
        else:
            self._options = options
            chart_section = ensure_mapping(options, "chart")
            if chart_section.get("type") is None:
                chart_section["type"] = kind
            if options.get("series") is None:
                options["series"] = []

        self.xaxis = Axis(self, "xaxis")
        self.yaxis = Axis(self, "yaxis")
        self.tooltip = Tooltip(self)
        self.legend = Legend(self)
        self.grid = Grid(self)
        self.data_labels = DataLabels(self)
        self.markers = Markers(self)
        self.theme = Theme(self)
        self.plot_options = PlotOptionsManager(self)
        logger.debug("Created %s chart builder (adopted=%s)", kind, options is not None)

    @classmethod
    def create(cls, kind: ChartType) -> Chart:
        """Return a builder for a fresh tree of the given chart type."""

        return cls(kind)

    @classmethod
    def donut(cls, config: DonutOptions) -> Chart:
        """Return a donut chart builder with `config` merged into `plotOptions.pie.donut`."""

        chart = cls("donut")
        chart.plot_options.pie().donut(config)
        return chart

    @classmethod
    def from_options(cls, options: ChartOptions) -> Chart:
        """Adopt an existing options tree, e.g. one loaded from a file.

        The tree is used in place (not copied). Component scaffolding is
        applied on top of it without touching values already present. The
        chart type is read from `chart.type` and defaults to "line".

        Args:
            options: Options tree to adopt.

        Returns:
            Chart builder bound to `options`.

        Raises:
            ValueError: If `chart.type` names an unsupported chart type.
        """

        chart_section = options.get("chart")
        kind = chart_section.get("type") if isinstance(chart_section, Mapping) else None
        return cls(cast(ChartType, kind or DEFAULT_CHART_TYPE), options)

    @property
    def kind(self) -> ChartType:
        return self._kind

    @property
    def options(self) -> ChartOptions:
        """Return the live options tree.

        This is the tree itself, not a snapshot: later builder calls keep
        mutating it.
        """

        return self._options

    def set_option(self, path: OptionPath, value: Any) -> Chart:
        """Assign a value by dotted path; digit segments index lists such as "series.0.name"."""

        set_path(self._options, path, value)
        return self

    def _chart_section(self) -> MutableMapping[str, Any]:
        section = self._options.get("chart")
        if not isinstance(section, MutableMapping):
            section = {"type": DEFAULT_CHART_TYPE}
            self._options["chart"] = section
        return section

    def title(self, text: str) -> Chart:
        ensure_mapping(self._options, "title")["text"] = text
        return self

    def subtitle(self, text: str) -> Chart:
        ensure_mapping(self._options, "subtitle")["text"] = text
        return self

    def height(self, height: int | str) -> Chart:
        """Set the chart height, in pixels or as a CSS length such as "50%"."""

        self._chart_section()["height"] = height
        return self

    def width(self, width: int | str) -> Chart:
        self._chart_section()["width"] = width
        return self

    def series(self, data: Sequence[SeriesConfig]) -> Chart:
        """Replace the data series. Existing series are discarded, not merged."""

        self._options["series"] = list(data)
        return self

    def colors(self, colors: Sequence[str]) -> Chart:
        self._options["colors"] = list(colors)
        return self

    def states(self, config: States) -> Chart:
        """Merge interaction states.

        Each of `normal`, `hover` and `active` is merged into its stored
        mapping, and a supplied `filter` is merged into the stored filter.
        """

        merge_mapping(self._options, "states", config, deep=STATE_DEEP_MERGE)
        return self

    def responsive(self, breakpoints: Sequence[ResponsiveBreakpoint]) -> Chart:
        """Replace the responsive breakpoints. Breakpoint options are stored as given."""

        self._options["responsive"] = list(breakpoints)
        return self

    def animations(self, config: Animations) -> Chart:
        merge_mapping(self._chart_section(), "animations", config, deep=ANIMATION_DEEP_MERGE)
        return self

    def horizontal(self, is_horizontal: bool) -> Chart:
        """Shortcut for `plot_options.bar().horizontal(...)` on bar charts.

        Raises:
            ValueError: If this is not a bar chart.
        """

        if self._kind != "bar":
            raise ValueError(f"horizontal() is only available for bar charts, not {self._kind!r}.")
        self.plot_options.bar().horizontal(is_horizontal)
        return self
