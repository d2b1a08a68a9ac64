from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

import gspread
import requests
from google.auth.exceptions import GoogleAuthError

from ..core.exceptions import DownstreamFailure

logger = logging.getLogger(__name__)

HEADER_ROW = 1


@contextmanager
def sheets_call(operation: str) -> Iterator[None]:
    """Translate gspread, auth and transport errors into ``DownstreamFailure``."""
    try:
        yield
    except (gspread.exceptions.GSpreadException, GoogleAuthError, requests.RequestException) as e:
        logger.error("Google Sheets %s failed: %s", operation, e)
        raise DownstreamFailure(f"Spreadsheet {operation} failed: {e}") from e


def fetch_records(worksheet: gspread.Worksheet) -> List[Tuple[int, Dict[str, Any]]]:
    """Return ``(row_number, record)`` pairs for every data row.

    Values are kept as strings (no numeric coercion) so that IDs and dates
    compare exactly.
    """
    records = worksheet.get_all_records(head=HEADER_ROW, numericise_ignore=["all"])
    return [(index + HEADER_ROW + 1, record) for index, record in enumerate(records)]


def cell(record: Dict[str, Any], column: str) -> str:
    value = record.get(column)
    if value is None:
        return ""
    return str(value).strip()
