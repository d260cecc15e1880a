"""
Node Match Filter

Decides whether a node's serialized text counts as a match for the search
term once exclusion-governed occurrences have been removed.

Algorithm:
1. For each exclusion prefix, in order, delete every
   "<prefix><whitespace+><search term>" occurrence (case-insensitive,
   both parts taken literally). Each removal sees the previous result.
2. The node matches iff what is left still contains the search term
   (case-insensitive plain substring, no word boundaries).

An occurrence of the term that is not directly preceded by an exclusion
prefix keeps the node a match even if other occurrences were removed.
"""

import re
from typing import List, Pattern, Sequence, Tuple


def build_exclusion_patterns(
    search_term: str,
    exclusions: Sequence[str]
) -> List[Pattern[str]]:
    """
    Compile one removal pattern per exclusion prefix.

    Prefix and term are escaped so characters such as '.', '(' or '*'
    are matched literally.

    Args:
        search_term: Text being searched for
        exclusions: Exclusion prefixes, in application order

    Returns:
        Compiled case-insensitive patterns, same order as exclusions

    Example:
        >>> [p.pattern for p in build_exclusion_patterns('a.b', ['x'])]
        ['x\\\\s+a\\\\.b']
    """
    escaped_term = re.escape(search_term)
    return [
        re.compile(re.escape(prefix) + r'\s+' + escaped_term, re.IGNORECASE)
        for prefix in exclusions
    ]


def apply_exclusions(node_text: str, patterns: Sequence[Pattern[str]]) -> str:
    """Apply compiled removal patterns in order; each sees the previous result."""
    working = node_text
    for pattern in patterns:
        working = pattern.sub('', working)
    return working


def strip_exclusions(
    node_text: str,
    search_term: str,
    exclusions: Sequence[str]
) -> str:
    """
    Return node_text with every excluded occurrence of search_term removed.

    Pure function: the input string is never modified.
    """
    return apply_exclusions(node_text, build_exclusion_patterns(search_term, exclusions))


def contains_term(text: str, search_term: str) -> bool:
    """Case-insensitive substring test."""
    return search_term.casefold() in text.casefold()


def is_match(
    node_text: str,
    search_term: str,
    exclusions: Sequence[str] = ()
) -> Tuple[bool, str]:
    """
    Apply the exclusion filter and test for the search term.

    Args:
        node_text: Serialized node text
        search_term: Text to find
        exclusions: Exclusion prefixes, applied in order (may be empty)

    Returns:
        (matched, filtered_text) where filtered_text is the text the
        decision was made on

    Example:
        >>> is_match('The workbench is old', 'workbench', ['translation'])
        (True, 'The workbench is old')
        >>> is_match('The workbench is old', 'workbench', ['the'])
        (False, ' is old')
    """
    filtered = strip_exclusions(node_text, search_term, exclusions)
    return contains_term(filtered, search_term), filtered


class MatchFilter:
    """
    Precompiled match filter for one search run.

    Same semantics as is_match(), but the removal patterns are compiled
    once instead of per node. Holds no state that changes between calls.

    Args:
        search_term: Text to find
        exclusions: Exclusion prefixes, applied in order

    Example:
        >>> match_filter = MatchFilter('workbench', ['translation'])
        >>> match_filter.matches('<p>The workbench</p>')
        True
    """

    def __init__(self, search_term: str, exclusions: Sequence[str] = ()):
        if not search_term:
            raise ValueError("Search term must not be empty")

        self.search_term = search_term
        self.exclusions = tuple(exclusions)
        self._patterns = build_exclusion_patterns(search_term, self.exclusions)

    def filter(self, node_text: str) -> str:
        """Remove excluded occurrences of the search term."""
        return apply_exclusions(node_text, self._patterns)

    def evaluate(self, node_text: str) -> Tuple[bool, str]:
        """Return (matched, filtered_text) for node_text."""
        filtered = self.filter(node_text)
        return contains_term(filtered, self.search_term), filtered

    def matches(self, node_text: str) -> bool:
        """True if node_text matches after exclusions are removed."""
        return self.evaluate(node_text)[0]
