"""Core domain layer — nail-file parsing and dataset models, no Qt imports.

Quick start::

    from pinlocator.core import parse_nail_file

    dataset = parse_nail_file(text, "board.asc")
    print(dataset.metadata.total_nails, dataset.bounds)
"""

from pinlocator.core.errors import NoDataFoundError, ParseError
from pinlocator.core.models import Bounds, Dataset, Metadata, Point, Units
from pinlocator.core.parser import (
    ACCEPTED_EXTENSIONS,
    RowRecord,
    bind_row,
    load_nail_file,
    parse,
    parse_coordinate,
    parse_nail_file,
    parse_tail,
    point_from_record,
    tokenize_row,
)

__all__ = [
    # Errors
    "NoDataFoundError",
    "ParseError",
    # Models
    "Bounds",
    "Dataset",
    "Metadata",
    "Point",
    "Units",
    # Parsing
    "ACCEPTED_EXTENSIONS",
    "RowRecord",
    "bind_row",
    "load_nail_file",
    "parse",
    "parse_coordinate",
    "parse_nail_file",
    "parse_tail",
    "point_from_record",
    "tokenize_row",
]
