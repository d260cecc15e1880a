"""
Request models for the search driver.

SearchConfiguration is the single immutable value built from the command
line (or directly by library users) and handed to every component.
"""

from pathlib import Path
from typing import Tuple
from pydantic import BaseModel, Field, field_validator, ConfigDict

from xml_node_search.config import DEFAULT_COLUMN_SEPARATOR, DEFAULT_CSV_OUTPUT
from xml_node_search.validators import (
    validate_search_term,
    validate_exclusions,
    validate_search_directory,
    validate_csv_output
)


class SearchConfiguration(BaseModel):
    """
    Validated, immutable settings for one search run.

    Attributes:
        search_term: Text looked up in every node (case-insensitive substring)
        exclusions: Ordered exclusion prefixes; "<prefix> <search_term>"
                    occurrences are stripped before matching
        search_directory: Root directory scanned recursively
        csv_output: Path of the CSV report (truncated on each run)
        column_separator: Separator used for verbose console lines
        verbose: Echo each match to stdout
        show_relative_path: Report paths relative to the working directory
        progress: Echo each scanned file to stderr
        strict_extension: Only accept names ending in .xml / .ditamap

    Example:
        >>> config = SearchConfiguration(
        ...     search_term='workbench',
        ...     exclusions=['translation'],
        ...     search_directory='docs'
        ... )
        >>> config.exclusions
        ('translation',)

    Raises:
        ValidationError: If any field fails validation
    """

    search_term: str = Field(
        ...,
        description="Text to look for in each XML node",
        examples=["workbench"]
    )

    exclusions: Tuple[str, ...] = Field(
        default=(),
        description="Exclusion prefixes applied in order before matching",
        examples=[["translation", "the"]]
    )

    search_directory: Path = Field(
        default_factory=Path.cwd,
        description="Directory scanned recursively for XML-family documents"
    )

    csv_output: Path = Field(
        default=Path(DEFAULT_CSV_OUTPUT),
        description="CSV report path"
    )

    column_separator: str = DEFAULT_COLUMN_SEPARATOR
    verbose: bool = False
    show_relative_path: bool = True
    progress: bool = False
    strict_extension: bool = False

    @field_validator('search_term')
    @classmethod
    def check_search_term(cls, v: str) -> str:
        return validate_search_term(v)

    @field_validator('exclusions')
    @classmethod
    def check_exclusions(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(validate_exclusions(list(v)))

    @field_validator('search_directory')
    @classmethod
    def check_search_directory(cls, v: Path) -> Path:
        return validate_search_directory(v)

    @field_validator('csv_output')
    @classmethod
    def check_csv_output(cls, v: Path) -> Path:
        return validate_csv_output(v)

    model_config = ConfigDict(
        frozen=True,  # Make model immutable
        json_schema_extra={
            "examples": [{
                "search_term": "workbench",
                "exclusions": ["translation"],
                "search_directory": ".",
                "csv_output": "xml-node-search.csv"
            }]
        }
    )
