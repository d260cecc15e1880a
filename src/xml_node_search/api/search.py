"""
High-level search driver.

XmlNodeSearch coordinates the complete workflow:
- Enumerate documents (via iter_documents)
- Parse each document (lxml)
- Walk every node and apply the MatchFilter
- Stream matches to the CSV report (via ReportWriter)

Design Philosophy:
- Explicit, immutable configuration (SearchConfiguration injected by caller)
- Resilient processing (continues after individual file failures)
- Statistics-based monitoring (returns actionable counts)
"""

from pathlib import Path
from typing import Dict, Optional, TextIO
import logging
import os
import sys

from lxml import etree

from xml_node_search.models import SearchConfiguration, ReportRow
from xml_node_search.parsers.match_filter import MatchFilter
from xml_node_search.parsers.xml_parser import NodeWalker, parse_document
from xml_node_search.services.document_source import iter_documents
from xml_node_search.services.report_writer import ReportWriter

logger = logging.getLogger(__name__)


def display_path(path: Path, relative: bool, cwd: Optional[Path] = None) -> str:
    """
    Format a document path for the report.

    Args:
        path: Document path as produced by the document source
        relative: Relative to cwd if True, absolute otherwise
        cwd: Base directory for relative paths (default: os.getcwd())

    Example:
        >>> display_path(Path('/data/docs/a.xml'), True, cwd=Path('/data'))
        'docs/a.xml'
    """
    base = cwd if cwd is not None else Path.cwd()
    absolute = os.path.abspath(path)
    if relative:
        return os.path.relpath(absolute, base)
    return absolute


class XmlNodeSearch:
    """
    Search driver for one run over a directory tree.

    Usage:
        config = SearchConfiguration(
            search_term='workbench',
            exclusions=['translation'],
            search_directory='docs',
            csv_output='report.csv'
        )
        stats = XmlNodeSearch(config).run()
        print(f"Scanned {stats['files']} files, "
              f"{stats['matches']} matches, "
              f"{stats['failed']} failures")
    """

    def __init__(
        self,
        config: SearchConfiguration,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        """
        Initialize driver with an immutable configuration.

        Args:
            config: Validated search configuration
            stdout: Stream for verbose match lines (default: sys.stdout)
            stderr: Stream for progress and error lines (default: sys.stderr)
        """
        self.config = config
        self._stdout = stdout
        self._stderr = stderr
        self._filter = MatchFilter(config.search_term, config.exclusions)

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def run(self) -> Dict[str, int]:
        """
        Complete workflow: enumerate → parse → match → report.

        Returns:
            Statistics dictionary:
            {
                'files': number of documents scanned,
                'matches': number of rows written,
                'failed': number of documents that could not be processed
            }
        """
        config = self.config
        stats = {'files': 0, 'matches': 0, 'failed': 0}

        logger.info(
            f"Searching {config.search_directory} for '{config.search_term}' "
            f"(exclusions: {list(config.exclusions)})"
        )

        with ReportWriter(config.csv_output) as writer:
            for xml_path in iter_documents(config.search_directory, config.strict_extension):
                stats['files'] += 1
                if config.progress:
                    print(xml_path, file=self.stderr, flush=True)

                try:
                    stats['matches'] += self.search_document(xml_path, writer)
                except (OSError, etree.XMLSyntaxError) as e:
                    stats['failed'] += 1
                    logger.error(f"Failed to process {xml_path}: {e}")
                    print(f"Error processing {xml_path}: {e}", file=self.stderr)

        logger.info(
            f"Search complete: {stats['files']} files, "
            f"{stats['matches']} matches, {stats['failed']} failures"
        )
        return stats

    def search_document(self, xml_path: Path, writer: ReportWriter) -> int:
        """
        Search one document and write its matches.

        Only the deepest matching nodes are reported: an element whose
        descendant already matched is not reported again for the same
        content.

        Returns:
            Number of matches written for this document

        Raises:
            OSError: If the file cannot be read
            etree.XMLSyntaxError: If the document is not well-formed
        """
        tree = parse_document(xml_path)
        shown_path = display_path(xml_path, self.config.show_relative_path)

        matches = 0
        walker = NodeWalker(tree)
        for node in walker.deepest_matches(lambda n: self._filter.matches(n.text)):
            logger.debug(f"Match in {shown_path} ({node.kind} node)")
            row = ReportRow(path=shown_path, text=node.text)
            if self.config.verbose:
                print(row.to_console_line(self.config.column_separator), file=self.stdout)
            writer.write(row)
            matches += 1

        return matches
