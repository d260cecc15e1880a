"""
I/O services for xml-node-search.

- iter_documents: recursive discovery of XML-family documents
- ReportWriter: streaming CSV report sink
"""

from xml_node_search.services.document_source import (
    iter_documents,
    is_document_name,
    DOCUMENT_NAME_PATTERN,
    STRICT_DOCUMENT_NAME_PATTERN
)
from xml_node_search.services.report_writer import ReportWriter

__all__ = [
    'iter_documents',
    'is_document_name',
    'DOCUMENT_NAME_PATTERN',
    'STRICT_DOCUMENT_NAME_PATTERN',
    'ReportWriter'
]
