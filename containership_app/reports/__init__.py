"""
Reporting utilities (text and tabular manifest) for containership_app.
"""

from containership_app.reports.simple_text_report import build_ship_summary_text, print_ship_info
from containership_app.reports.manifest import build_manifest_frame, summarize_by_kind

__all__ = [
    "build_ship_summary_text",
    "print_ship_info",
    "build_manifest_frame",
    "summarize_by_kind",
]
