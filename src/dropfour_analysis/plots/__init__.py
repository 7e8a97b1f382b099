from .chart import (
    plot_scatter,
    plot_top_bar,
)

__all__ = [
    "plot_scatter",
    "plot_top_bar",
]
