"""
Reusable field validators for Pydantic models.

These validators back SearchConfiguration and can be used with the
Pydantic @field_validator decorator for automatic input validation.
"""

import os
from pathlib import Path
from typing import List


def validate_search_term(term: str) -> str:
    """
    Validate that the search term is a non-empty string.

    An empty term would match every node of every document, so it is
    rejected instead of silently producing a report of the whole tree.

    Args:
        term: Text to search for

    Returns:
        The validated term (unchanged if valid)

    Raises:
        ValueError: If term is empty

    Example:
        >>> validate_search_term('workbench')
        'workbench'
        >>> validate_search_term('')  # Raises ValueError
    """
    if not term:
        raise ValueError(
            "Search text must not be empty\n"
            "Example: xml-node-search workbench translation"
        )

    return term


def validate_exclusions(prefixes: List[str]) -> List[str]:
    """
    Validate exclusion prefixes.

    An empty list is valid (pure substring search). Individual prefixes
    must not be empty: an empty prefix would strip every whitespace-led
    occurrence of the search term.

    Args:
        prefixes: Ordered exclusion phrases

    Returns:
        The validated list (unchanged if valid)

    Raises:
        ValueError: If any prefix is an empty string
    """
    if not prefixes:
        return prefixes

    empty = [i for i, p in enumerate(prefixes) if not p]
    if empty:
        raise ValueError(
            f"Exclusion prefixes must not be empty, got empty value at positions: {empty}"
        )

    return prefixes


def validate_search_directory(directory: Path) -> Path:
    """
    Validate that the search root exists, is a directory and is readable.

    Args:
        directory: Directory to scan

    Returns:
        The validated directory (unchanged if valid)

    Raises:
        ValueError: If the directory is missing, not a directory, or unreadable

    Example:
        >>> validate_search_directory(Path('.'))
        PosixPath('.')
        >>> validate_search_directory(Path('/no/such/dir'))  # Raises ValueError
    """
    if not directory.exists():
        raise ValueError(f"Search directory does not exist: '{directory}'")

    if not directory.is_dir():
        raise ValueError(f"Search directory is not a directory: '{directory}'")

    if not os.access(directory, os.R_OK | os.X_OK):
        raise ValueError(f"Search directory is not readable: '{directory}'")

    return directory


def validate_csv_output(csv_path: Path) -> Path:
    """
    Validate that the CSV report can be created or overwritten.

    Checked before any document is scanned, so a bad -o value fails fast
    and leaves no partial report behind.

    Args:
        csv_path: Report path

    Returns:
        The validated path (unchanged if valid)

    Raises:
        ValueError: If the path is a directory, its parent directory is
                    missing, or either is not writable

    Example:
        >>> validate_csv_output(Path('report.csv'))
        PosixPath('report.csv')
        >>> validate_csv_output(Path('no/such/dir/report.csv'))  # Raises ValueError
    """
    if csv_path.is_dir():
        raise ValueError(f"CSV output is a directory: '{csv_path}'")

    parent = csv_path.parent
    if not parent.is_dir():
        raise ValueError(f"CSV output directory does not exist: '{parent}'")

    if csv_path.exists():
        if not os.access(csv_path, os.W_OK):
            raise ValueError(f"CSV output is not writable: '{csv_path}'")
    elif not os.access(parent, os.W_OK | os.X_OK):
        raise ValueError(f"CSV output directory is not writable: '{parent}'")

    return csv_path
