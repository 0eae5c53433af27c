"""Fluent builders for ApexCharts options trees.

`Chart` is the entry point. Its component builders (`xaxis`, `yaxis`,
`tooltip`, `legend`, `grid`, `data_labels`, `markers`, `theme` and
`plot_options`) all write into the one options tree the chart owns, creating
nested mappings on demand and merging partial fragments without dropping
sibling fields.
"""

from .chart import Chart
from .codec import dumps_options, encode_options, load_options, load_options_file
from .schema import CHART_TYPES, ChartOptions, ChartType
from .tree import merge_mapping, set_path

__all__ = [
    "CHART_TYPES",
    "Chart",
    "ChartOptions",
    "ChartType",
    "dumps_options",
    "encode_options",
    "load_options",
    "load_options_file",
    "merge_mapping",
    "set_path",
]
