"""
User-facing API for xml-node-search.
"""

from xml_node_search.api.search import XmlNodeSearch, display_path

__all__ = [
    'XmlNodeSearch',
    'display_path',
]
