"""Report builders for JSON/HTML bundles."""

from latgroups.reporting.json import build_report_payload, write_report_json

__all__ = [
    "build_report_payload",
    "write_report_json",
]
