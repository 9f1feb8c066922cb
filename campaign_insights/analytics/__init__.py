"""Tabular export of parsed campaign reports."""

from .frame import FRAME_SCHEMA, add_derived_metrics, flatten_report, reports_to_frame

__all__ = ["FRAME_SCHEMA", "add_derived_metrics", "flatten_report", "reports_to_frame"]
