"""Typed shapes for the ApexCharts options tree.

The builder never validates option values; these types only document the
structure each component writes. Every shape is a `TypedDict(total=False)`,
so keys the rendering engine understands but that are not listed here are
still carried through untouched.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Final, Literal, TypedDict, get_args

ChartType = Literal[
    "line",
    "area",
    "bar",
    "pie",
    "donut",
    "radialBar",
    "scatter",
    "bubble",
    "heatmap",
    "candlestick",
    "boxPlot",
    "radar",
    "polarArea",
    "rangeBar",
    "rangeArea",
    "treemap",
]

CHART_TYPES: Final[tuple[str, ...]] = get_args(ChartType)

AxisKey = Literal["xaxis", "yaxis"]
AxisType = Literal["category", "datetime", "numeric"]
ThemeMode = Literal["light", "dark"]
LegendPosition = Literal["top", "right", "bottom", "left"]
HorizontalAlign = Literal["left", "center", "right"]
GridPosition = Literal["front", "back"]
MarkerShape = Literal["circle", "square", "rect"]
PlotType = Literal["bar", "pie", "radialBar", "heatmap"]

Category = str | int | float | date

# Formatters are handed to the rendering engine as-is (usually JavaScript source).
Formatter = Any


class FontStyle(TypedDict, total=False):
    """Font styling shared by titles, labels and data labels."""

    fontSize: str
    fontFamily: str
    fontWeight: str | int
    colors: str | list[str]
    cssClass: str


class StrokeStyle(TypedDict, total=False):
    color: str
    width: int
    dashArray: int


class AxisTitle(TypedDict, total=False):
    text: str
    offsetX: int
    offsetY: int
    style: FontStyle


class AxisLabels(TypedDict, total=False):
    """Axis tick label options; `style` is merged one level deeper."""

    show: bool
    rotate: int
    formatter: Formatter
    style: FontStyle


class AxisBorder(TypedDict, total=False):
    show: bool
    color: str
    offsetX: int
    offsetY: int


class AxisTicks(TypedDict, total=False):
    show: bool
    borderType: str
    color: str
    height: int
    offsetX: int
    offsetY: int


class AxisCrosshairs(TypedDict, total=False):
    show: bool
    position: str
    stroke: StrokeStyle


class AxisOptions(TypedDict, total=False):
    """A single x- or y-axis mapping."""

    type: AxisType
    categories: list[Category]
    title: AxisTitle
    labels: AxisLabels
    axisBorder: AxisBorder
    axisTicks: AxisTicks
    crosshairs: AxisCrosshairs
    min: float
    max: float
    tickAmount: int
    opposite: bool
    seriesName: str


class TooltipStyle(TypedDict, total=False):
    fontSize: str
    fontFamily: str


class LegendLabels(TypedDict, total=False):
    colors: str | list[str]
    useSeriesColors: bool


class LegendMarkers(TypedDict, total=False):
    width: int
    height: int
    strokeWidth: int
    strokeColor: str
    fillColors: list[str]
    radius: int
    offsetX: int
    offsetY: int


class ItemMargin(TypedDict, total=False):
    horizontal: int
    vertical: int


class GridLines(TypedDict, total=False):
    show: bool


class GridAxis(TypedDict, total=False):
    """Grid lines tied to one axis; `lines` is merged one level deeper."""

    lines: GridLines


class Padding(TypedDict, total=False):
    top: int
    right: int
    bottom: int
    left: int


class DataLabelStyle(TypedDict, total=False):
    fontSize: str
    fontFamily: str
    fontWeight: str | int
    colors: list[str]


class DataLabelBackground(TypedDict, total=False):
    enabled: bool
    foreColor: str
    padding: int
    borderRadius: int
    borderWidth: int
    borderColor: str
    opacity: float


class MarkerHover(TypedDict, total=False):
    size: int
    sizeOffset: int


class Monochrome(TypedDict, total=False):
    enabled: bool
    color: str
    shadeTo: ThemeMode
    shadeIntensity: float


class BarColors(TypedDict, total=False):
    # Range bands carry a "from" key, which cannot be declared as a field.
    ranges: list[dict[str, Any]]
    backgroundBarColors: list[str]
    backgroundBarOpacity: float
    backgroundBarRadius: int


class RadialLabel(TypedDict, total=False):
    """One of the name/value/total label blocks of donut and radial bar charts."""

    show: bool
    showAlways: bool
    label: str
    fontSize: str
    fontFamily: str
    fontWeight: str | int
    color: str
    offsetY: int
    formatter: Formatter


class DonutLabels(TypedDict, total=False):
    show: bool
    name: RadialLabel
    value: RadialLabel
    total: RadialLabel


class DonutOptions(TypedDict, total=False):
    size: str
    background: str
    labels: DonutLabels


class PieDataLabels(TypedDict, total=False):
    offset: int
    minAngleToShowLabel: int


class RadialBarHollow(TypedDict, total=False):
    margin: int
    size: str
    background: str
    image: str
    position: GridPosition


class RadialBarTrack(TypedDict, total=False):
    show: bool
    startAngle: int
    endAngle: int
    background: str
    strokeWidth: str
    opacity: float
    margin: int


class RadialBarDataLabels(TypedDict, total=False):
    show: bool
    name: RadialLabel
    value: RadialLabel
    total: RadialLabel


class HeatmapColorScale(TypedDict, total=False):
    ranges: list[dict[str, Any]]
    inverse: bool
    min: float
    max: float


class StateFilter(TypedDict, total=False):
    type: str
    value: float


class StateOptions(TypedDict, total=False):
    filter: StateFilter
    allowMultipleDataPointsSelection: bool


class States(TypedDict, total=False):
    """Interaction states; each state's `filter` is merged one level deeper."""

    normal: StateOptions
    hover: StateOptions
    active: StateOptions


class AnimationStep(TypedDict, total=False):
    enabled: bool
    delay: int
    speed: int


class Animations(TypedDict, total=False):
    enabled: bool
    easing: Literal["linear", "easein", "easeout", "easeinout"]
    speed: int
    animateGradually: AnimationStep
    dynamicAnimation: AnimationStep


class ResponsiveBreakpoint(TypedDict):
    """Options applied by the rendering engine below a viewport width."""

    breakpoint: int
    options: dict[str, Any]


class SeriesConfig(TypedDict, total=False):
    name: str
    data: list[Any]
    type: ChartType
    color: str


ChartOptions = dict[str, Any]
