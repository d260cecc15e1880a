"""
ReportRow model for the CSV report.
"""

from typing import List
from pydantic import BaseModel, ConfigDict


REPORT_COLUMNS: List[str] = ['File', 'XML Node Contents']


class ReportRow(BaseModel):
    """
    One matched node, ready to be written to the report.

    Attributes:
        path: Displayed path of the document (relative or absolute)
        text: Serialized node text, markup and newlines included
    """

    path: str
    text: str

    model_config = ConfigDict(frozen=True)

    def to_record(self) -> List[str]:
        """Values in REPORT_COLUMNS order."""
        return [self.path, self.text]

    def to_console_line(self, separator: str) -> str:
        """Line printed to stdout in verbose mode."""
        return f"{self.path}{separator}{self.text}"
