"""Fluent component builders for the chart options tree.

Each component owns one key of the options tree held by a `Chart`. Components
never keep private copies: they read and write the chart's live tree, so a
change made through one handle is visible through every other handle and
through `Chart.options`.

Construction scaffolds the component's known sub-mappings (empty dicts) where
they are absent or None, so setters never need existence checks. Scaffolding
is idempotent and never replaces values already present in the tree.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Self

from .schema import (
    AxisBorder,
    AxisCrosshairs,
    AxisKey,
    AxisLabels,
    AxisTicks,
    AxisType,
    Category,
    ChartOptions,
    DataLabelBackground,
    DataLabelStyle,
    Formatter,
    GridAxis,
    GridPosition,
    HorizontalAlign,
    ItemMargin,
    LegendLabels,
    LegendMarkers,
    LegendPosition,
    MarkerHover,
    MarkerShape,
    Monochrome,
    Padding,
    ThemeMode,
    TooltipStyle,
)
from .tree import OptionPath, ensure_mapping, merge_mapping, scaffold_path, set_path

if TYPE_CHECKING:
    from .chart import Chart

logger = logging.getLogger(__name__)

AXIS_SCAFFOLD: tuple[str, ...] = ("title", "labels.style", "axisBorder", "axisTicks", "crosshairs")


class ChartComponent:
    """Base class for builders that mutate a `Chart`'s options tree.

    Args:
        chart: Owning chart. The reference is shared, never copied.
    """

    def __init__(self, chart: Chart) -> None:
        self.chart = chart

    @property
    def options(self) -> ChartOptions:
        """Return the owning chart's live options tree."""

        return self.chart.options

    def set_option(self, path: OptionPath, value: Any) -> Self:
        """Assign a value anywhere in the options tree by dotted path.

        Absent or None parents become mappings and digit segments index
        lists. A path blocked by any other stored value is skipped.

        Args:
            path: Dotted path such as "xaxis.labels.style.fontSize".
            value: Value stored at the path (overwrites).

        Returns:
            This component, for chaining.
        """

        set_path(self.options, path, value)
        return self


class Axis(ChartComponent):
    """Builder for the `xaxis` or the primary `yaxis` options.

    The `yaxis` slot may hold a single mapping or a list of mappings (one per
    y-axis). For a list, every read and write targets element 0; further
    elements are left exactly as they are.

    Args:
        chart: Owning chart.
        key: Which axis this builder configures ("xaxis" or "yaxis").
    """

    def __init__(self, chart: Chart, key: AxisKey) -> None:
        super().__init__(chart)
        self._key: AxisKey = key

        slot = self.options.get(key)
        if slot is None:
            self.options[key] = {}
        elif key == "yaxis" and isinstance(slot, list):
            if not slot:
                slot.append({})
            elif slot[0] is None:
                slot[0] = {}

        axis = self.config()
        if axis is not None:
            for path in AXIS_SCAFFOLD:
                scaffold_path(axis, path)

    @property
    def key(self) -> AxisKey:
        """Return the axis key ("xaxis" or "yaxis") fixed at construction."""

        return self._key

    def config(self) -> MutableMapping[str, Any] | None:
        """Return the mapping this builder writes to, or None when the slot is unusable."""

        slot = self.options.get(self._key)
        if self._key == "yaxis" and isinstance(slot, list):
            slot = slot[0] if slot else None
        if isinstance(slot, MutableMapping):
            return slot
        return None

    def _resolve(self, operation: str) -> MutableMapping[str, Any] | None:
        axis = self.config()
        if axis is None:
            logger.debug("Skipping %s.%s: no axis mapping at %r", self._key, operation, self._key)
        return axis

    def title(self, text: str) -> Axis:
        """Set the axis title text."""

        axis = self._resolve("title")
        if axis is not None:
            ensure_mapping(axis, "title")["text"] = text
        return self

    def categories(self, categories: Sequence[Category]) -> Axis:
        """Set the category labels, stored verbatim in the given order."""

        axis = self._resolve("categories")
        if axis is not None:
            axis["categories"] = list(categories)
        return self

    def type(self, kind: AxisType) -> Axis:
        """Set the axis scale type ("category", "datetime" or "numeric")."""

        axis = self._resolve("type")
        if axis is not None:
            axis["type"] = kind
        return self

    def labels(self, config: AxisLabels) -> Axis:
        """Merge label options; a supplied `style` is merged into the existing style."""

        axis = self._resolve("labels")
        if axis is not None:
            merge_mapping(axis, "labels", config, deep=("style",))
        return self

    def range(self, min: float, max: float) -> Axis:
        """Set both axis bounds. Ordering is not checked."""

        axis = self._resolve("range")
        if axis is not None:
            axis["min"] = min
            axis["max"] = max
        return self

    def tick_amount(self, amount: int) -> Axis:
        """Set the approximate number of ticks (a hint to the renderer)."""

        axis = self._resolve("tick_amount")
        if axis is not None:
            axis["tickAmount"] = amount
        return self

    def axis_border(self, config: AxisBorder) -> Axis:
        """Merge options for the line drawn along the axis."""

        axis = self._resolve("axis_border")
        if axis is not None:
            merge_mapping(axis, "axisBorder", config)
        return self

    def axis_ticks(self, config: AxisTicks) -> Axis:
        """Merge options for the axis tick marks."""

        axis = self._resolve("axis_ticks")
        if axis is not None:
            merge_mapping(axis, "axisTicks", config)
        return self

    def crosshairs(self, config: AxisCrosshairs) -> Axis:
        """Merge options for the hover crosshair line."""

        axis = self._resolve("crosshairs")
        if axis is not None:
            merge_mapping(axis, "crosshairs", config)
        return self


class SectionComponent(ChartComponent):
    """A component that owns one top-level key of the options tree.

    Subclasses declare the key and the dotted paths of the sub-mappings that
    are scaffolded at construction time.
    """

    section_key: ClassVar[str]
    scaffold: ClassVar[tuple[str, ...]] = ()

    def __init__(self, chart: Chart) -> None:
        super().__init__(chart)
        section = self.section()
        for path in self.scaffold:
            scaffold_path(section, path)

    def section(self) -> MutableMapping[str, Any]:
        """Return the owned mapping, recreating it if it was removed."""

        return ensure_mapping(self.options, self.section_key)

    def _assign(self, name: str, value: Any) -> Self:
        self.section()[name] = value
        return self

    def _merge(self, name: str, config: Any, *, deep: tuple[str, ...] = ()) -> Self:
        merge_mapping(self.section(), name, config, deep=deep)
        return self


class Tooltip(SectionComponent):
    """Options for the hover tooltip."""

    section_key = "tooltip"
    scaffold = ("style", "x", "y")

    def enabled(self, enabled: bool) -> Tooltip:
        """Turn the tooltip on or off."""

        return self._assign("enabled", enabled)

    def shared(self, shared: bool) -> Tooltip:
        """Show one tooltip for all series (True) or one per series (False)."""

        return self._assign("shared", shared)

    def follow_cursor(self, follow: bool) -> Tooltip:
        """Make the tooltip follow the mouse cursor."""

        return self._assign("followCursor", follow)

    def theme(self, theme: ThemeMode) -> Tooltip:
        """Set the tooltip theme ("light" or "dark")."""

        return self._assign("theme", theme)

    def style(self, config: TooltipStyle) -> Tooltip:
        """Merge font options for the tooltip text."""

        return self._merge("style", config)

    def custom(self, formatter: Formatter) -> Tooltip:
        """Set a formatter that renders the whole tooltip body."""

        return self._assign("custom", formatter)

    def x_formatter(self, formatter: Formatter) -> Tooltip:
        """Set `tooltip.x.formatter`; skipped when `tooltip.x` is not a mapping."""

        set_path(self.section(), ("x", "formatter"), formatter)
        return self

    def y_formatter(self, formatter: Formatter) -> Tooltip:
        """Set `tooltip.y.formatter`; a per-series `tooltip.y` list is left as is."""

        set_path(self.section(), ("y", "formatter"), formatter)
        return self


class Legend(SectionComponent):
    """Options for the series legend."""

    section_key = "legend"
    scaffold = ("labels", "markers", "itemMargin")

    def show(self, visible: bool) -> Legend:
        """Show or hide the legend."""

        return self._assign("show", visible)

    def position(self, position: LegendPosition) -> Legend:
        """Place the legend on one side of the chart."""

        return self._assign("position", position)

    def horizontal_align(self, align: HorizontalAlign) -> Legend:
        """Align legend items within the legend box."""

        return self._assign("horizontalAlign", align)

    def font_size(self, size: str) -> Legend:
        """Set the legend font size, e.g. "12px"."""

        return self._assign("fontSize", size)

    def font_family(self, family: str) -> Legend:
        """Set the legend font family."""

        return self._assign("fontFamily", family)

    def labels(self, config: LegendLabels) -> Legend:
        """Merge options for the legend text."""

        return self._merge("labels", config)

    def markers(self, config: LegendMarkers) -> Legend:
        """Merge options for the legend symbols."""

        return self._merge("markers", config)

    def item_margin(self, config: ItemMargin) -> Legend:
        """Merge the spacing between legend items."""

        return self._merge("itemMargin", config)


class Grid(SectionComponent):
    """Options for the background grid.

    `xaxis` and `yaxis` here describe grid lines, not the chart axes; their
    `lines` mapping is merged one level deeper so visibility flags survive
    unrelated updates.
    """

    section_key = "grid"
    scaffold = ("xaxis.lines", "yaxis.lines", "padding")

    def show(self, visible: bool) -> Grid:
        """Show or hide the grid."""

        return self._assign("show", visible)

    def border_color(self, color: str) -> Grid:
        """Set the grid line color."""

        return self._assign("borderColor", color)

    def stroke_dash_array(self, dash_array: int) -> Grid:
        """Set the dash length for dashed grid lines."""

        return self._assign("strokeDashArray", dash_array)

    def position(self, position: GridPosition) -> Grid:
        """Draw the grid in front of or behind the series."""

        return self._assign("position", position)

    def xaxis(self, config: GridAxis) -> Grid:
        """Merge options for the vertical grid lines."""

        return self._merge("xaxis", config, deep=("lines",))

    def yaxis(self, config: GridAxis) -> Grid:
        """Merge options for the horizontal grid lines."""

        return self._merge("yaxis", config, deep=("lines",))

    def padding(self, config: Padding) -> Grid:
        """Merge the padding around the plot area."""

        return self._merge("padding", config)


class DataLabels(SectionComponent):
    """Options for labels drawn directly on data points."""

    section_key = "dataLabels"
    scaffold = ("style", "background")

    def enabled(self, enabled: bool) -> DataLabels:
        """Turn data labels on or off."""

        return self._assign("enabled", enabled)

    def formatter(self, formatter: Formatter) -> DataLabels:
        """Set the formatter that produces each label's text."""

        return self._assign("formatter", formatter)

    def style(self, config: DataLabelStyle) -> DataLabels:
        """Merge font options for the label text."""

        return self._merge("style", config)

    def background(self, config: DataLabelBackground) -> DataLabels:
        """Merge options for the box drawn behind each label."""

        return self._merge("background", config)

    def offset_x(self, offset: int) -> DataLabels:
        """Shift labels horizontally, in pixels."""

        return self._assign("offsetX", offset)

    def offset_y(self, offset: int) -> DataLabels:
        """Shift labels vertically, in pixels."""

        return self._assign("offsetY", offset)


class Markers(SectionComponent):
    """Options for point markers on line, area and scatter charts."""

    section_key = "markers"
    scaffold = ("hover",)

    def size(self, size: int | list[int]) -> Markers:
        """Set the marker size, or one size per series."""

        return self._assign("size", size)

    def colors(self, colors: list[str]) -> Markers:
        """Set marker fill colors, overriding the series colors."""

        return self._assign("colors", colors)

    def stroke_colors(self, colors: str | list[str]) -> Markers:
        """Set marker border colors."""

        return self._assign("strokeColors", colors)

    def stroke_width(self, width: int | list[int]) -> Markers:
        """Set marker border width, or one width per series."""

        return self._assign("strokeWidth", width)

    def shape(self, shape: MarkerShape | list[MarkerShape]) -> Markers:
        """Set the marker shape, or one shape per series."""

        return self._assign("shape", shape)

    def radius(self, radius: int) -> Markers:
        """Set the corner radius of square markers."""

        return self._assign("radius", radius)

    def hover(self, config: MarkerHover) -> Markers:
        """Merge marker options applied on hover."""

        return self._merge("hover", config)


class Theme(SectionComponent):
    """Options for the global color theme."""

    section_key = "theme"
    scaffold = ("monochrome",)

    def mode(self, mode: ThemeMode) -> Theme:
        """Set the theme mode ("light" or "dark")."""

        return self._assign("mode", mode)

    def palette(self, palette: str) -> Theme:
        """Select a named palette such as "palette1"."""

        return self._assign("palette", palette)

    def monochrome(self, config: Monochrome) -> Theme:
        """Merge options for single-color shading."""

        return self._merge("monochrome", config)
