"""
XML parsing and node matching.

- lxml-backed parsing with a NodeWalker over every node kind (deepest-match reporting)
- Exclusion-aware MatchFilter for node text
"""

from .xml_parser import DocumentNode, NodeWalker, parse_document, serialize_node
from .match_filter import (
    MatchFilter,
    build_exclusion_patterns,
    apply_exclusions,
    strip_exclusions,
    contains_term,
    is_match
)

__all__ = [
    # XML Parsing
    'DocumentNode',
    'NodeWalker',
    'parse_document',
    'serialize_node',
    # Matching
    'MatchFilter',
    'build_exclusion_patterns',
    'apply_exclusions',
    'strip_exclusions',
    'contains_term',
    'is_match',
]
