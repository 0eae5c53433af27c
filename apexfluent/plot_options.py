"""Builders for the chart-type specific `plotOptions` block.

`plotOptions` holds one mapping per plot type (`plotOptions.bar`,
`plotOptions.pie`, ...). The manager only guarantees `plotOptions` itself; a
per-type mapping is created the first time a setter on that type runs, so
charts that never touch, say, heatmap options do not carry an empty
`plotOptions.heatmap` entry.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

from .components import ChartComponent
from .schema import (
    BarColors,
    DonutOptions,
    HeatmapColorScale,
    PieDataLabels,
    PlotType,
    RadialBarDataLabels,
    RadialBarHollow,
    RadialBarTrack,
)
from .tree import ensure_mapping, merge_mapping, scaffold_path

if TYPE_CHECKING:
    from .chart import Chart

RADIAL_LABEL_BLOCKS: tuple[str, ...] = ("name", "value", "total")
DONUT_DEEP_MERGE: tuple[str, ...] = ("labels",) + tuple(f"labels.{block}" for block in RADIAL_LABEL_BLOCKS)


def ensure_plot_options(chart: Chart) -> MutableMapping[str, Any]:
    """Return `plotOptions`, creating it when missing."""

    return ensure_mapping(chart.options, "plotOptions")


def ensure_plot_type(chart: Chart, plot_type: PlotType) -> MutableMapping[str, Any]:
    """Return `plotOptions.<plot_type>`, creating both levels when missing."""

    return ensure_mapping(ensure_plot_options(chart), plot_type)


class PlotTypeOptions(ChartComponent):
    """Base for builders that own one `plotOptions.<type>` mapping."""

    plot_type: ClassVar[PlotType]

    def section(self) -> MutableMapping[str, Any]:
        return ensure_plot_type(self.chart, self.plot_type)

    def _assign(self, name: str, value: Any) -> Self:
        self.section()[name] = value
        return self

    def _merge(self, name: str, config: Any, *, deep: tuple[str, ...] = ()) -> Self:
        merge_mapping(self.section(), name, config, deep=deep)
        return self


class BarOptions(PlotTypeOptions):
    """Options under `plotOptions.bar`."""

    plot_type = "bar"

    def horizontal(self, is_horizontal: bool) -> BarOptions:
        """Lay the bars out horizontally."""

        return self._assign("horizontal", is_horizontal)

    def column_width(self, width: str) -> BarOptions:
        """Set the column width, e.g. "55%"."""

        return self._assign("columnWidth", width)

    def bar_height(self, height: str) -> BarOptions:
        """Set the bar thickness for horizontal bars, e.g. "70%"."""

        return self._assign("barHeight", height)

    def distributed(self, distributed: bool) -> BarOptions:
        """Color each bar of a single series separately."""

        return self._assign("distributed", distributed)

    def border_radius(self, radius: int) -> BarOptions:
        """Set the bar corner radius in pixels."""

        return self._assign("borderRadius", radius)

    def colors(self, config: BarColors) -> BarOptions:
        """Merge color ranges and background bar settings."""

        return self._merge("colors", config)


class PieOptions(PlotTypeOptions):
    """Options under `plotOptions.pie`, shared by pie and donut charts."""

    plot_type = "pie"

    def start_angle(self, angle: int) -> PieOptions:
        """Set the angle, in degrees, where the first slice starts."""

        return self._assign("startAngle", angle)

    def end_angle(self, angle: int) -> PieOptions:
        """Set the angle, in degrees, where the last slice ends."""

        return self._assign("endAngle", angle)

    def expand_on_click(self, expand: bool) -> PieOptions:
        """Enlarge a slice when it is clicked."""

        return self._assign("expandOnClick", expand)

    def offset_x(self, offset: int) -> PieOptions:
        """Shift the pie horizontally, in pixels."""

        return self._assign("offsetX", offset)

    def offset_y(self, offset: int) -> PieOptions:
        """Shift the pie vertically, in pixels."""

        return self._assign("offsetY", offset)

    def custom_scale(self, scale: float) -> PieOptions:
        """Scale the pie relative to its default size."""

        return self._assign("customScale", scale)

    def data_labels(self, config: PieDataLabels) -> PieOptions:
        """Merge slice label options."""

        return self._merge("dataLabels", config)

    def donut(self, config: DonutOptions) -> PieOptions:
        """Merge donut options.

        `labels` is merged into the stored labels, and each of its `name`,
        `value` and `total` blocks is merged into the stored block, so
        configuring one block leaves the others untouched.
        """

        return self._merge("donut", config, deep=DONUT_DEEP_MERGE)


class RadialBarOptions(PlotTypeOptions):
    """Options under `plotOptions.radialBar`."""

    plot_type = "radialBar"

    def inverse_order(self, inverse: bool) -> RadialBarOptions:
        """Draw the rings from the outside in."""

        return self._assign("inverseOrder", inverse)

    def start_angle(self, angle: int) -> RadialBarOptions:
        """Set the angle, in degrees, where each ring starts."""

        return self._assign("startAngle", angle)

    def end_angle(self, angle: int) -> RadialBarOptions:
        """Set the angle, in degrees, where each ring ends."""

        return self._assign("endAngle", angle)

    def offset_x(self, offset: int) -> RadialBarOptions:
        """Shift the rings horizontally, in pixels."""

        return self._assign("offsetX", offset)

    def offset_y(self, offset: int) -> RadialBarOptions:
        """Shift the rings vertically, in pixels."""

        return self._assign("offsetY", offset)

    def hollow(self, config: RadialBarHollow) -> RadialBarOptions:
        """Merge options for the empty center."""

        return self._merge("hollow", config)

    def track(self, config: RadialBarTrack) -> RadialBarOptions:
        """Merge options for the track behind each ring."""

        return self._merge("track", config)

    def data_labels(self, config: RadialBarDataLabels) -> RadialBarOptions:
        """Merge data label options, merging `name`/`value`/`total` one level deeper."""

        return self._merge("dataLabels", config, deep=RADIAL_LABEL_BLOCKS)


class HeatmapOptions(PlotTypeOptions):
    """Options under `plotOptions.heatmap`."""

    plot_type = "heatmap"

    def radius(self, radius: int) -> HeatmapOptions:
        """Set the cell corner radius in pixels."""

        return self._assign("radius", radius)

    def enable_shades(self, enable: bool) -> HeatmapOptions:
        """Shade cells by value."""

        return self._assign("enableShades", enable)

    def shade_intensity(self, intensity: float) -> HeatmapOptions:
        """Set how strongly values shade the cells (0 to 1)."""

        return self._assign("shadeIntensity", intensity)

    def reverse_negative_shade(self, reverse: bool) -> HeatmapOptions:
        """Shade negative values in the reverse direction."""

        return self._assign("reverseNegativeShade", reverse)

    def distributed(self, distributed: bool) -> HeatmapOptions:
        """Shade each row independently."""

        return self._assign("distributed", distributed)

    def use_fill_color_as_stroke(self, use_fill: bool) -> HeatmapOptions:
        """Draw cell borders in the cell's fill color."""

        return self._assign("useFillColorAsStroke", use_fill)

    def color_scale(self, config: HeatmapColorScale) -> HeatmapOptions:
        """Merge value ranges and their colors."""

        return self._merge("colorScale", config)


class PlotOptionsManager(ChartComponent):
    """Entry point to the per-type `plotOptions` builders.

    Each accessor creates its builder on first use and returns the same
    instance afterwards.
    """

    def __init__(self, chart: Chart) -> None:
        super().__init__(chart)
        scaffold_path(chart.options, "plotOptions")
        self._bar: BarOptions | None = None
        self._pie: PieOptions | None = None
        self._radial_bar: RadialBarOptions | None = None
        self._heatmap: HeatmapOptions | None = None

    def bar(self) -> BarOptions:
        """Bar options, created on first use."""

        if self._bar is None:
            self._bar = BarOptions(self.chart)
        return self._bar

    def pie(self) -> PieOptions:
        """Pie options; donut charts are configured here too."""

        if self._pie is None:
            self._pie = PieOptions(self.chart)
        return self._pie

    def radial_bar(self) -> RadialBarOptions:
        """Radial bar options, created on first use."""

        if self._radial_bar is None:
            self._radial_bar = RadialBarOptions(self.chart)
        return self._radial_bar

    def heatmap(self) -> HeatmapOptions:
        """Heatmap options, created on first use."""

        if self._heatmap is None:
            self._heatmap = HeatmapOptions(self.chart)
        return self._heatmap
