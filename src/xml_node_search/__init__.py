"""
xml-node-search: find text in the nodes of XML and DITA map documents.

Main package exports for user-facing API.
"""

__version__ = '0.1.0'

from xml_node_search.models import SearchConfiguration, ReportRow
from xml_node_search.parsers import MatchFilter, NodeWalker, is_match
from xml_node_search.api import XmlNodeSearch

__all__ = [
    'SearchConfiguration',
    'ReportRow',
    'MatchFilter',
    'NodeWalker',
    'XmlNodeSearch',
    'is_match',
    'search',
]


def search(config: SearchConfiguration) -> dict:
    """
    Run a search and write its CSV report.

    Args:
        config: Validated search configuration

    Returns:
        Statistics dictionary with 'files', 'matches' and 'failed' counts

    Example:
        >>> from xml_node_search import SearchConfiguration, search
        >>> stats = search(SearchConfiguration(
        ...     search_term='workbench',
        ...     exclusions=['translation'],
        ...     search_directory='docs'
        ... ))
        >>> stats['matches']
        3
    """
    return XmlNodeSearch(config).run()
