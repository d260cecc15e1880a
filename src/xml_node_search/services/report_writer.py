"""
Report Writer

Streams matched nodes to a CSV file as they are found.

Design:
- The file is opened (and truncated) on entry and the header written first
- Each row is written immediately via pandas' CSV writer; nothing is
  accumulated in memory
- Node text may contain commas, quotes and newlines; pandas quotes these
  fields (QUOTE_MINIMAL)
"""

from pathlib import Path
from typing import Optional, TextIO, Union
import logging

import pandas as pd

from xml_node_search.models.report import ReportRow, REPORT_COLUMNS

logger = logging.getLogger(__name__)


class ReportWriter:
    """
    CSV sink for ReportRow records.

    Usage:
        with ReportWriter('report.csv') as writer:
            writer.write(ReportRow(path='a.xml', text='<p>hit</p>'))
        print(writer.rows_written)
    """

    def __init__(self, csv_path: Union[str, Path], encoding: str = 'utf-8'):
        """
        Initialize writer. The file is not touched until open().

        Args:
            csv_path: Output CSV path
            encoding: File encoding
        """
        self.csv_path = Path(csv_path)
        self.encoding = encoding
        self.rows_written = 0
        self._handle: Optional[TextIO] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self) -> 'ReportWriter':
        """Open (truncate) the report and write the header row."""
        if self._handle is not None:
            return self

        self._handle = open(self.csv_path, 'w', encoding=self.encoding, newline='')
        pd.DataFrame(columns=REPORT_COLUMNS).to_csv(
            self._handle, index=False, lineterminator='\n'
        )
        self.rows_written = 0
        logger.info(f"Writing report to {self.csv_path}")
        return self

    def write(self, row: ReportRow) -> None:
        """Append one row to the report."""
        if self._handle is None:
            raise RuntimeError("ReportWriter is not open. Use it as a context manager or call open().")

        pd.DataFrame([row.to_record()], columns=REPORT_COLUMNS).to_csv(
            self._handle, index=False, header=False, lineterminator='\n'
        )
        self.rows_written += 1

    def close(self) -> None:
        """Flush and close the report file."""
        if self._handle is None:
            return
        try:
            self._handle.flush()
        finally:
            self._handle.close()
            self._handle = None
        logger.info(f"Wrote {self.rows_written} rows to {self.csv_path}")

    def __enter__(self) -> 'ReportWriter':
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
