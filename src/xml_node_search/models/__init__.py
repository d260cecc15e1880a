"""
Pydantic models for configuration and report rows.
"""

from xml_node_search.models.requests import SearchConfiguration
from xml_node_search.models.report import ReportRow, REPORT_COLUMNS

__all__ = [
    'SearchConfiguration',
    'ReportRow',
    'REPORT_COLUMNS',
]
