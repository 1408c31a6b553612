"""Display helpers for the command line interface."""

from lfmq.ui.cli.display.charts import ChartDisplay

__all__ = ["ChartDisplay"]
