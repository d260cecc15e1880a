"""
Document Source

Lazily enumerates XML-family documents below a root directory.

The default name pattern is searched anywhere in the file name, so
'notes.xml', 'map.DITAMAP' and also 'notes.xml.bak' qualify. Pass
strict_extension=True to require the extension at the end of the name.
"""

import logging
import os
import re
from pathlib import Path
from typing import Iterator, Pattern, Union

logger = logging.getLogger(__name__)


DOCUMENT_NAME_PATTERN: Pattern[str] = re.compile(r'(\.xml)|(\.ditamap)', re.IGNORECASE)
STRICT_DOCUMENT_NAME_PATTERN: Pattern[str] = re.compile(r'\.(xml|ditamap)$', re.IGNORECASE)


def get_name_pattern(strict_extension: bool = False) -> Pattern[str]:
    """Return the file name pattern for the requested matching mode."""
    return STRICT_DOCUMENT_NAME_PATTERN if strict_extension else DOCUMENT_NAME_PATTERN


def is_document_name(name: str, strict_extension: bool = False) -> bool:
    """
    Check whether a file name looks like an XML-family document.

    Example:
        >>> is_document_name('topic.XML')
        True
        >>> is_document_name('topic.xml.orig')
        True
        >>> is_document_name('topic.xml.orig', strict_extension=True)
        False
    """
    return get_name_pattern(strict_extension).search(name) is not None


def iter_documents(
    root: Union[str, Path],
    strict_extension: bool = False
) -> Iterator[Path]:
    """
    Yield document paths below root, recursively.

    Directories are visited in name order and files within a directory
    are yielded in name order, so reports are reproducible. Symbolic
    links to directories are not followed; anything that is not a
    regular file (after following file symlinks) is skipped.

    Args:
        root: Directory to scan
        strict_extension: Require the extension at the end of the name

    Yields:
        Path of each qualifying document (root-joined, not resolved)
    """
    def on_error(error: OSError) -> None:
        logger.warning(f"Cannot list directory {error.filename}: {error.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if not path.is_file():
                logger.debug(f"Skipping non-regular file: {path}")
                continue
            if not is_document_name(name, strict_extension):
                continue
            yield path
