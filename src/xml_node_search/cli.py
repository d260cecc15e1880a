"""CLI for xml-node-search."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from xml_node_search import __version__
from xml_node_search.api.search import XmlNodeSearch
from xml_node_search.config import get_app_config
from xml_node_search.models import SearchConfiguration

logger = logging.getLogger(__name__)

PROG = 'xml-node-search'


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from AppConfig."""
    app_config = get_app_config()

    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            'Recursively search .xml and .ditamap documents for nodes containing '
            'SEARCH_TEXT, ignoring occurrences directly preceded by an exclusion prefix, '
            'and write the matching nodes to a CSV report.'
        ),
    )
    parser.add_argument('search_text', help='Text to search for (case-insensitive)')
    parser.add_argument(
        'exclusions', nargs='+', metavar='prefix_exclusion_text',
        help='Phrase that disqualifies an occurrence when it directly precedes SEARCH_TEXT',
    )
    parser.add_argument(
        '--column-separator', default=app_config.column_separator,
        help='Separator between path and node text in verbose output (default: %(default)r)',
    )
    parser.add_argument(
        '-o', '--csv-output', default=app_config.csv_output,
        help='CSV report file (default: %(default)s)',
    )
    parser.add_argument(
        '-d', '--directory', default=None,
        help='Directory to search (default: current working directory)',
    )
    parser.add_argument(
        '--no-show-relative-path', dest='show_relative_path', action='store_false',
        help='Report absolute paths instead of paths relative to the working directory',
    )
    parser.add_argument(
        '-p', '--progress', action='store_true',
        help='Print each file being scanned to stderr',
    )
    parser.add_argument(
        '-q', '--verbose', action='store_true',
        help='Print each match to stdout as it is found',
    )
    parser.add_argument(
        '--strict-extension', action='store_true',
        help='Only scan files whose names end in .xml or .ditamap',
    )
    parser.add_argument(
        '--log-level', default=app_config.log_level,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], type=str.upper,
        help='Logging level (default: %(default)s)',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def build_config(args: argparse.Namespace) -> SearchConfiguration:
    """
    Turn parsed arguments into a SearchConfiguration.

    Raises:
        ValidationError: If the search text or directory is invalid
    """
    directory = Path(args.directory) if args.directory is not None else Path.cwd()
    return SearchConfiguration(
        search_term=args.search_text,
        exclusions=args.exclusions,
        search_directory=directory,
        csv_output=Path(args.csv_output),
        column_separator=args.column_separator,
        verbose=args.verbose,
        show_relative_path=args.show_relative_path,
        progress=args.progress,
        strict_extension=args.strict_extension,
    )


def format_validation_error(error: ValidationError) -> str:
    """One line per failed field, without pydantic's URL footer."""
    lines = []
    for err in error.errors():
        field = '.'.join(str(part) for part in err['loc'])
        message = err['msg']
        if message.startswith('Value error, '):
            message = message[len('Value error, '):]
        lines.append(f"{field}: {message}" if field else message)
    return '\n'.join(lines)


def run(config: SearchConfiguration) -> int:
    """Run one search and return the process exit status."""
    XmlNodeSearch(config).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = build_config(args)
        return run(config)
    except (ValidationError, ValueError, OSError) as e:
        # OSError: report file could not be created or written
        message = format_validation_error(e) if isinstance(e, ValidationError) else str(e)
        print(f"{PROG}: error: {message}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
